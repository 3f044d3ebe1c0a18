"""Weather Schemas: Pydantic models for the /weathers API boundary.

Invariants:
    - WeatherCommand.description accepts missing/null/empty: the route answers
      those with "Description is required" rather than a field-level 400
    - Response schemas build from core.weather.Weather via from_attributes

Design Decisions:
    - Command / CommandResponse / QueryResponse split: write payload stays minimal,
      read payload exposes timestamps
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class WeatherCommand(BaseModel):
    """Create-weather request body."""
    description: str | None = Field(None, max_length=500)


class WeatherCommandResponse(BaseModel):
    """Create-weather response - id and description of the stored entity."""
    id: UUID
    description: str


class WeatherQueryResponse(BaseModel):
    """Read-weather response."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    description: str
    created_at: datetime
    changed_at: datetime
