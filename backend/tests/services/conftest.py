"""Service test fixtures: FastAPI test clients.

Invariants:
    - `client` runs the real application against the test SQLite database
    - `mock_client` replaces WeatherApplication with a controllable AsyncMock

Design Decisions:
    - get_weather_repository overridden (not get_db): routes stay backend-agnostic
    - mock_application built with spec=WeatherApplication: typos in method names fail loudly
"""

import pytest
from unittest.mock import AsyncMock
from httpx import ASGITransport, AsyncClient

from weather_api.api.dependencies import (
    get_weather_application, get_weather_repository,
)
from weather_api.infrastructure.weather_repository import SqlWeatherRepository
from weather_api.main import app
from weather_api.services.weather_application import WeatherApplication


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with the repository bound to the test DB."""
    async def override_get_weather_repository():
        async with test_session_factory() as session:
            yield SqlWeatherRepository(session)

    app.dependency_overrides[get_weather_repository] = override_get_weather_repository

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def mock_application():
    application = AsyncMock(spec=WeatherApplication)
    application.get_all_weather.return_value = []
    application.get_weather.return_value = None
    return application


@pytest.fixture
async def mock_client(mock_application):
    """FastAPI test client with WeatherApplication replaced by a mock."""
    app.dependency_overrides[get_weather_application] = lambda: mock_application

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
