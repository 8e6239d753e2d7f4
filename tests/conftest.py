"""Shared fixtures: an ASGI test client over the real app, settings overridable per test."""

import pytest
from httpx import ASGITransport, AsyncClient

from travel_calc.config.settings import Settings, get_settings
from travel_calc.main import app


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
async def client(settings):
    """Client whose routes see the ``settings`` fixture instead of the environment."""
    saved = dict(app.dependency_overrides)
    app.dependency_overrides[get_settings] = lambda: settings

    # Unhandled errors must come back as 500 responses, not be re-raised in the test.
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
    app.dependency_overrides.update(saved)
