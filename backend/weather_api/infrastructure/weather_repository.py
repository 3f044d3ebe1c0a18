"""Weather Repositories: SQL and in-memory implementations of WeatherRepository.

Invariants:
    - Both satisfy core.repository_protocols.WeatherRepository structurally
    - Lookups return None (or []) on miss; only infrastructure failures raise
    - list_all() is ordered by created_at ascending
    - Neither implementation checks description uniqueness before writing
      (the SQL table's UNIQUE constraint is the storage-level backstop)

Design Decisions:
    - SqlWeatherRepository commits inside add(): one request = one write,
      no unit-of-work needed
    - InMemoryWeatherRepository stores copies so callers cannot mutate the store
"""

import copy
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from weather_api.core.domain_types import WeatherId
from weather_api.core.weather import Weather
from weather_api.models.weather import WeatherRecord

logger = logging.getLogger(__name__)


class SqlWeatherRepository:
    """Weather persistence backed by SQLAlchemy AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_description(self, description: str) -> Weather | None:
        result = await self.db.execute(
            select(WeatherRecord).where(WeatherRecord.description == description),
        )
        record = result.scalar_one_or_none()
        return record.to_entity() if record else None

    async def find_by_id(self, weather_id: WeatherId) -> Weather | None:
        record = await self.db.get(WeatherRecord, weather_id)
        return record.to_entity() if record else None

    async def add(self, weather: Weather) -> Weather:
        record = WeatherRecord.from_entity(weather)
        self.db.add(record)
        await self.db.commit()
        await self.db.refresh(record)
        logger.info(
            f"Weather stored: {record.description}",
            extra={"weather_id": str(record.id)},
        )
        return record.to_entity()

    async def list_all(self) -> list[Weather]:
        result = await self.db.execute(
            select(WeatherRecord).order_by(
                WeatherRecord.created_at, WeatherRecord.id,
            ),
        )
        return [record.to_entity() for record in result.scalars().all()]


class InMemoryWeatherRepository:
    """Weather persistence in a process-local dict (tests, demos)."""

    def __init__(self):
        self._items: dict[WeatherId, Weather] = {}

    async def find_by_description(self, description: str) -> Weather | None:
        for weather in self._items.values():
            if weather.description == description:
                return copy.copy(weather)
        return None

    async def find_by_id(self, weather_id: WeatherId) -> Weather | None:
        weather = self._items.get(weather_id)
        return copy.copy(weather) if weather else None

    async def add(self, weather: Weather) -> Weather:
        self._items[weather.id] = copy.copy(weather)
        logger.info(
            f"Weather stored in memory: {weather.description}",
            extra={"weather_id": str(weather.id)},
        )
        return copy.copy(weather)

    async def list_all(self) -> list[Weather]:
        return [
            copy.copy(w)
            for w in sorted(self._items.values(), key=lambda w: w.created_at)
        ]

    def clear(self) -> None:
        self._items.clear()
