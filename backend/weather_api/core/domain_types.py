"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - WeatherId wraps UUID - never use bare UUID in domain logic
    - All valid states encoded as Enums - no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON / env vars without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


WeatherId = NewType("WeatherId", UUID)


class RepositoryBackend(str, Enum):
    """Which WeatherRepository implementation backs the API."""
    SQL = "sql"
    MEMORY = "memory"
