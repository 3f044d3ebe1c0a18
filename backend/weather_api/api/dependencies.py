"""API Dependencies: wires repositories and application services into routes.

Invariants:
    - One repository (and one DB session, for SQL) per request
    - The memory backend shares a single process-wide store

Design Decisions:
    - _memory_repository as module-level singleton: deliberate exception to the
      no-global-state rule (ADR: single-process demo mode, data lost on restart)
    - Backend chosen at request time from cached settings: tests override
      get_weather_repository / get_weather_application instead
    - SQL sessions come from database.get_db(); aclosing() closes the session
      when the request ends
"""

from contextlib import aclosing
from typing import AsyncGenerator

from fastapi import Depends

from weather_api.config import get_settings
from weather_api.core.domain_types import RepositoryBackend
from weather_api.core.repository_protocols import WeatherRepository
from weather_api.infrastructure import database
from weather_api.infrastructure.weather_repository import (
    InMemoryWeatherRepository, SqlWeatherRepository,
)
from weather_api.services.weather_application import WeatherApplication

_memory_repository = InMemoryWeatherRepository()


async def get_weather_repository() -> AsyncGenerator[WeatherRepository, None]:
    """Yield the configured WeatherRepository for one request."""
    if get_settings().repository_backend == RepositoryBackend.MEMORY:
        yield _memory_repository
        return
    async with aclosing(database.get_db()) as sessions:
        async for session in sessions:
            yield SqlWeatherRepository(session)


def get_weather_application(
    repository: WeatherRepository = Depends(get_weather_repository),
) -> WeatherApplication:
    return WeatherApplication(repository)
