"""Weather Entity: forecast record with identity, description and timestamps.

Invariants:
    - id is assigned once, by Weather.create(), never by the caller
    - description is never empty (create/update raise InvalidDescriptionError)
    - created_at == changed_at right after creation; update() only moves changed_at
    - Timestamps are UTC

Design Decisions:
    - Plain dataclass, not the ORM model: core stays free of SQLAlchemy
      (ADR: models/weather.py maps to and from this type)
    - Description compared by exact match (no stripping or case folding)
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from weather_api.core.domain_types import WeatherId
from weather_api.core.errors import InvalidDescriptionError


@dataclass
class Weather:
    """Weather forecast entity."""
    id: WeatherId
    description: str
    created_at: datetime
    changed_at: datetime

    @classmethod
    def create(cls, description: str) -> "Weather":
        """Factory - the only way to build a new Weather."""
        _check_description(description)
        now = datetime.now(timezone.utc)
        return cls(
            id=WeatherId(uuid.uuid4()),
            description=description,
            created_at=now,
            changed_at=now,
        )

    def update(self, description: str) -> None:
        """Replace the description and refresh changed_at."""
        _check_description(description)
        self.description = description
        self.changed_at = datetime.now(timezone.utc)


def _check_description(description: str | None) -> None:
    if not description:
        raise InvalidDescriptionError()
