"""Weather Schemas: boundary parsing.

Tests cover:
    - WeatherCommand accepts missing / null / empty description (route decides)
    - Over-long description is rejected by Pydantic
    - WeatherQueryResponse builds from the core entity
"""

import pytest
from pydantic import ValidationError

from weather_api.core.weather import Weather
from weather_api.schemas.weather import WeatherCommand, WeatherQueryResponse


def test_command_allows_missing_description():
    assert WeatherCommand().description is None
    assert WeatherCommand(description="").description == ""


def test_command_rejects_overlong_description():
    with pytest.raises(ValidationError):
        WeatherCommand(description="x" * 501)


def test_query_response_from_entity():
    weather = Weather.create("Drizzle")

    response = WeatherQueryResponse.model_validate(weather)

    assert response.id == weather.id
    assert response.description == "Drizzle"
    assert response.created_at == weather.created_at
