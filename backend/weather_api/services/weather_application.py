"""Weather Application: uniqueness check, entity creation, persistence.

Invariants:
    - add_weather: exactly one repository.add() on success, zero on failure
    - Duplicate description → Failure(kind=DUPLICATE), never an exception
    - Repository exceptions are NOT caught here - they propagate to the route,
      which is the only place unexpected errors are intercepted
    - get_weather / get_all_weather: absence is None / [] (not an error)

Design Decisions:
    - Depends on the WeatherRepository Protocol only: SQL or in-memory injected by the shell
    - Check-then-insert is not atomic; the SQL table's UNIQUE constraint is the backstop
"""

import logging

from weather_api.core.domain_types import WeatherId
from weather_api.core.messages import MessageKey, get_message
from weather_api.core.repository_protocols import WeatherRepository
from weather_api.core.result import FailureKind, Result, fail, ok
from weather_api.core.weather import Weather
from weather_api.schemas.weather import WeatherCommand, WeatherCommandResponse

logger = logging.getLogger(__name__)


def description_exists() -> Result[WeatherCommandResponse]:
    return fail(
        get_message(MessageKey.DESCRIPTION_EXISTS), kind=FailureKind.DUPLICATE,
    )


class WeatherApplication:
    """Application service for the Weather resource."""

    def __init__(self, repository: WeatherRepository):
        self.repository = repository

    async def add_weather(
        self, command: WeatherCommand,
    ) -> Result[WeatherCommandResponse]:
        """Create a weather unless one with the same description exists."""
        if await self.repository.find_by_description(command.description) is not None:
            logger.info(f"Duplicate weather description rejected: {command.description}")
            return description_exists()

        weather = Weather.create(command.description)
        saved = await self.repository.add(weather)
        return ok(WeatherCommandResponse(id=saved.id, description=saved.description))

    async def get_weather(self, weather_id: WeatherId) -> Weather | None:
        return await self.repository.find_by_id(weather_id)

    async def get_all_weather(self) -> list[Weather]:
        return await self.repository.list_all()
