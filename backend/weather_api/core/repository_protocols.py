"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell - dependency arrows point inward only
    - "Not found" is a None / empty return, never an exception
    - Only infrastructure failures (connection loss, driver errors) raise
    - Repositories do not enforce description uniqueness; the application does

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; cancellation of the awaiting
      task is the only cancellation signal passed through
"""

from typing import Protocol

from weather_api.core.domain_types import WeatherId
from weather_api.core.weather import Weather


class WeatherRepository(Protocol):
    """Contract for Weather persistence - implemented by shell."""
    async def find_by_description(self, description: str) -> Weather | None: ...
    async def find_by_id(self, weather_id: WeatherId) -> Weather | None: ...
    async def add(self, weather: Weather) -> Weather: ...
    async def list_all(self) -> list[Weather]: ...
