"""Pytest configuration and shared fixtures."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from trialburden.main import app
from trialburden.schemas.burden import VisitBurdenInput


@pytest_asyncio.fixture
async def client():
    """Async test client for the FastAPI app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def make_visit():
    """Factory for a visit that contributes nothing unless overridden."""

    def _make(**overrides) -> VisitBurdenInput:
        fields = {
            "duration_minutes": 0,
            "procedures": [],
            "preparations": [],
            "travel_minutes": 0,
            "window_days": 3,
        }
        fields.update(overrides)
        return VisitBurdenInput(**fields)

    return _make
