"""FastAPI application entry point."""

import logging

from fastapi import FastAPI

from trialburden.api.router import api_router
from trialburden.core.config import settings
from trialburden.core.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Patient burden scoring for clinical trial visit schedules",
        version="0.1.0",
    )
    app.include_router(api_router)

    logger.info("%s started (%s)", settings.app_name, settings.environment)
    return app


app = create_app()
