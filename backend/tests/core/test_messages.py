"""Message Table: verifies the fixed user-facing strings.

Tests cover:
    - Every MessageKey has a message
    - Contract strings match verbatim
    - Table is read-only
"""

import pytest

from weather_api.core.messages import MESSAGES, MessageKey, get_message


def test_every_key_has_a_message():
    for key in MessageKey:
        assert get_message(key)


def test_contract_strings():
    assert get_message(MessageKey.NOT_FOUND) == "Not found"
    assert get_message(MessageKey.UNKNOWN_ERROR) == "Try again later"
    assert get_message(MessageKey.DESCRIPTION_REQUIRED) == "Description is required"
    assert (
        get_message(MessageKey.DESCRIPTION_EXISTS)
        == "Já existe uma previsão com essa descrição."
    )


def test_table_is_read_only():
    with pytest.raises(TypeError):
        MESSAGES[MessageKey.NOT_FOUND] = "Missing"
