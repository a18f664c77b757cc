"""Thin wrapper around the Open-Meteo forecast API."""

from __future__ import annotations

import logging
import os
from datetime import date, timedelta
from typing import Any, Dict, List, Mapping, Optional

import requests
from pydantic import ValidationError

from plancraft.core.formatting import round_half_up
from plancraft.schemas import CurrentConditions, DailyForecast, WeatherForecast

_OPEN_METEO_BASE_URL = os.getenv("OPEN_METEO_BASE_URL", "https://api.open-meteo.com/v1/forecast")
_DEFAULT_TIMEOUT = float(os.getenv("WEATHER_TIMEOUT", "10"))

_CURRENT_FIELDS = "temperature_2m,relative_humidity_2m,wind_speed_10m,weather_code,is_day"
_DAILY_FIELDS = (
    "temperature_2m_max,temperature_2m_min,precipitation_probability_max,"
    "weather_code,wind_speed_10m_max"
)

_LOGGER = logging.getLogger(__name__)


class WeatherServiceError(RuntimeError):
    """Raised when the forecast could not be fetched or understood."""


def _one_decimal(value: float) -> float:
    return round_half_up(value * 10) / 10


def _request(params: Dict[str, object]) -> Dict[str, Any]:
    _LOGGER.debug("Requesting forecast from %s with %s", _OPEN_METEO_BASE_URL, params)
    try:
        response = requests.get(_OPEN_METEO_BASE_URL, params=params, timeout=_DEFAULT_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise WeatherServiceError(f"Weather API error: {exc}") from exc
    try:
        return response.json()
    except ValueError as exc:
        raise WeatherServiceError("Weather API returned a non-JSON payload") from exc


def _parse_current(payload: Mapping[str, Any]) -> CurrentConditions:
    return CurrentConditions(
        temperature=round_half_up(payload["temperature_2m"]),
        humidity=payload["relative_humidity_2m"],
        wind_speed=_one_decimal(payload["wind_speed_10m"]),
        weather_code=payload["weather_code"],
        is_day=payload.get("is_day") == 1,
    )


def _parse_daily(payload: Mapping[str, Any]) -> List[DailyForecast]:
    days: List[DailyForecast] = []
    for index, day in enumerate(payload["time"]):
        days.append(
            DailyForecast(
                date=day,
                temperature_max=round_half_up(payload["temperature_2m_max"][index]),
                temperature_min=round_half_up(payload["temperature_2m_min"][index]),
                precipitation_probability=payload["precipitation_probability_max"][index] or 0,
                weather_code=payload["weather_code"][index],
                wind_speed_max=_one_decimal(payload["wind_speed_10m_max"][index]),
            )
        )
    return days


def parse_forecast(data: Mapping[str, Any]) -> WeatherForecast:
    """Normalise a raw Open-Meteo response into a :class:`WeatherForecast`."""

    try:
        return WeatherForecast(
            current=_parse_current(data["current"]),
            daily=_parse_daily(data["daily"]),
        )
    except (KeyError, IndexError, TypeError, ValidationError) as exc:
        raise WeatherServiceError(f"Unexpected forecast payload: {exc}") from exc


def fetch_forecast(lat: float, lng: float, start: Optional[date] = None) -> WeatherForecast:
    """Fetch a seven-day forecast for a coordinate.

    When ``start`` is given the window is ``start`` plus the following six
    days; otherwise Open-Meteo returns the next seven days from today.
    """

    params: Dict[str, object] = {
        "latitude": lat,
        "longitude": lng,
        "current": _CURRENT_FIELDS,
        "daily": _DAILY_FIELDS,
        "timezone": "auto",
    }
    if start:
        params["start_date"] = start.isoformat()
        params["end_date"] = (start + timedelta(days=6)).isoformat()
    else:
        params["forecast_days"] = 7
    return parse_forecast(_request(params))


__all__ = ["WeatherServiceError", "fetch_forecast", "parse_forecast"]
