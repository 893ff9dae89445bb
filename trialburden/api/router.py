"""
all routes of the service, mounted at the root.

- /health: liveness check for whatever runs the container
- /burden-score/*: scoring of visit lists and booked appointments, plus the
  category labels a client needs to render a score
- /demo/*: sample input to paste into the scoring endpoints from /docs
"""

from fastapi import APIRouter

from trialburden.api.routes.burden import router as burden_router
from trialburden.api.routes.demo import router as demo_router
from trialburden.api.routes.health import router as health_router

api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(burden_router, tags=["burden-score"])
api_router.include_router(demo_router, tags=["demo"])
