"""Weather ORM: persists Weather entities in the `weathers` table.

Invariants:
    - id is UUID primary key, supplied by the entity factory (no server default)
    - description is non-nullable text with a UNIQUE constraint
    - to_entity()/from_entity() are the only conversions between ORM and core

Design Decisions:
    - UNIQUE on description: closes the check-then-insert race at the storage layer;
      the losing insert raises IntegrityError (surfaced as a generic 500)
    - Separate ORM class from core.weather.Weather: core never imports SQLAlchemy
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from weather_api.core.domain_types import WeatherId
from weather_api.core.weather import Weather
from weather_api.db.base import Base

DESCRIPTION_MAX_LENGTH = 500


class WeatherRecord(Base):
    """Row for one weather forecast."""
    __tablename__ = "weathers"
    __table_args__ = (
        UniqueConstraint("description", name="uq_weathers_description"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True,
    )
    description: Mapped[str] = mapped_column(
        String(DESCRIPTION_MAX_LENGTH), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    changed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    @classmethod
    def from_entity(cls, weather: Weather) -> "WeatherRecord":
        return cls(
            id=weather.id,
            description=weather.description,
            created_at=weather.created_at,
            changed_at=weather.changed_at,
        )

    def to_entity(self) -> Weather:
        return Weather(
            id=WeatherId(self.id),
            description=self.description,
            created_at=self.created_at,
            changed_at=self.changed_at,
        )
