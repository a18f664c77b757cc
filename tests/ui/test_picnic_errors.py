"""Tests for surfacing picnic tab failures."""

from __future__ import annotations

import pytest

from plancraft.core.open_meteo import WeatherServiceError
from plancraft.planners import PlanInputError
from plancraft.ui import picnic

_WEATHER_BASE = "Weather forecast unavailable, so general weather tips are shown."


@pytest.mark.parametrize(
    "exception, expected",
    [
        (
            WeatherServiceError("Weather API error: 400 Client Error: Bad Request"),
            f"{_WEATHER_BASE} Forecasts only cover about the next two weeks; check back closer to the date.",
        ),
        (
            WeatherServiceError("Parameter 'start_date' is out of allowed range"),
            f"{_WEATHER_BASE} Forecasts only cover about the next two weeks; check back closer to the date.",
        ),
        (
            WeatherServiceError("Weather API error: Read timed out."),
            f"{_WEATHER_BASE} The weather service took too long to respond.",
        ),
        (
            WeatherServiceError("Weather API error: 429 Too Many Requests"),
            f"{_WEATHER_BASE} The weather service rate limit was hit. Try again shortly.",
        ),
        (
            WeatherServiceError("Unexpected forecast payload: 'daily'"),
            f"{_WEATHER_BASE} Unexpected forecast payload: 'daily'",
        ),
        (WeatherServiceError(""), _WEATHER_BASE),
    ],
)
def test_format_weather_error(exception: Exception, expected: str) -> None:
    assert picnic._format_weather_error(exception) == expected


@pytest.mark.parametrize(
    "exception, expected",
    [
        (
            PlanInputError("Invalid PicnicInput: location"),
            "Unable to plan the picnic. Check the questionnaire answers and try again.",
        ),
        (ValueError("bad schedule"), "Unable to plan the picnic. bad schedule"),
        (Exception(""), "Unable to plan the picnic. Try again in a moment."),
    ],
)
def test_format_picnic_error(exception: Exception, expected: str) -> None:
    assert picnic._format_picnic_error(exception) == expected


def test_format_picnic_error_handles_non_str_messages() -> None:
    class CustomError(Exception):
        def __str__(self) -> str:
            return "Unexpected failure"

    assert picnic._format_picnic_error(CustomError()) == "Unable to plan the picnic. Unexpected failure"
