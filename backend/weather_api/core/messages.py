"""Message Table: the user-facing strings returned by the Weather API.

Invariants:
    - Strings are pure data, built once at import and never mutated
    - Every MessageKey has exactly one entry
    - Values are part of the public contract: clients match on them verbatim

Design Decisions:
    - MappingProxyType over a plain dict: read-only view, mutation raises TypeError
    - Duplicate-description text kept in pt-BR: existing clients compare against it
"""

from enum import Enum
from types import MappingProxyType


class MessageKey(str, Enum):
    """Keys for user-facing messages."""
    UNKNOWN_ERROR = "unknown_error"
    NOT_FOUND = "not_found"
    DESCRIPTION_REQUIRED = "description_required"
    DESCRIPTION_EXISTS = "description_exists"


MESSAGES = MappingProxyType({
    MessageKey.UNKNOWN_ERROR: "Try again later",
    MessageKey.NOT_FOUND: "Not found",
    MessageKey.DESCRIPTION_REQUIRED: "Description is required",
    MessageKey.DESCRIPTION_EXISTS: "Já existe uma previsão com essa descrição.",
})


def get_message(key: MessageKey) -> str:
    return MESSAGES[key]
