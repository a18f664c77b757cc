"""Weather condition codes and the advisory tips derived from a forecast."""

from __future__ import annotations

from datetime import date
from typing import Dict, List, Tuple

from plancraft.schemas import DailyForecast, WeatherForecast


# WMO weather interpretation codes as returned by Open-Meteo.
WEATHER_CODES: Dict[int, Tuple[str, str]] = {
    0: ("Clear sky", "☀️"),
    1: ("Mainly clear", "🌤️"),
    2: ("Partly cloudy", "⛅"),
    3: ("Overcast", "☁️"),
    45: ("Fog", "🌫️"),
    48: ("Depositing rime fog", "🌫️"),
    51: ("Light drizzle", "🌦️"),
    53: ("Moderate drizzle", "🌦️"),
    55: ("Dense drizzle", "🌧️"),
    56: ("Light freezing drizzle", "🌨️"),
    57: ("Dense freezing drizzle", "🌨️"),
    61: ("Slight rain", "🌧️"),
    63: ("Moderate rain", "🌧️"),
    65: ("Heavy rain", "🌧️"),
    66: ("Light freezing rain", "🌨️"),
    67: ("Heavy freezing rain", "🌨️"),
    71: ("Slight snow fall", "🌨️"),
    73: ("Moderate snow fall", "❄️"),
    75: ("Heavy snow fall", "❄️"),
    77: ("Snow grains", "🌨️"),
    80: ("Slight rain showers", "🌦️"),
    81: ("Moderate rain showers", "🌧️"),
    82: ("Violent rain showers", "⛈️"),
    85: ("Slight snow showers", "🌨️"),
    86: ("Heavy snow showers", "❄️"),
    95: ("Thunderstorm", "⛈️"),
    96: ("Thunderstorm with slight hail", "⛈️"),
    99: ("Thunderstorm with heavy hail", "⛈️"),
}

UNKNOWN_WEATHER: Tuple[str, str] = ("Unknown", "❓")

HOT_THRESHOLD = 30
COLD_THRESHOLD = 15
HEAVY_RAIN_THRESHOLD = 70
POSSIBLE_RAIN_THRESHOLD = 30
WINDY_THRESHOLD = 20

MISSING_DAY_TIP = "Check the weather forecast closer to your picnic date"

_GENERIC_TIPS: Tuple[str, ...] = (
    "Check the weather forecast the day before your picnic",
    "Bring sunscreen and apply regularly, especially during midday",
    "Pack extra layers in case temperature changes",
    "Consider bringing a pop-up tent or umbrella for shade",
    "If rain is expected, have an indoor backup plan ready",
)


def describe_weather_code(code: int) -> Tuple[str, str]:
    """Return ``(description, icon)`` for a weather code."""

    return WEATHER_CODES.get(code, UNKNOWN_WEATHER)


def generic_weather_tips() -> List[str]:
    """Tips used when no forecast is available at all."""

    return list(_GENERIC_TIPS)


def _temperature_tips(day: DailyForecast) -> List[str]:
    if day.temperature_max > HOT_THRESHOLD:
        return [
            "🌡️ Hot day expected - bring extra water, sunscreen, and seek shade",
            "🧊 Pack plenty of ice to keep food and drinks cold",
        ]
    if day.temperature_max < COLD_THRESHOLD:
        return [
            "🧥 Cool weather - bring warm layers and blankets",
            "☕ Consider bringing hot drinks in thermoses",
        ]
    return ["🌡️ Pleasant temperature expected - perfect for outdoor activities"]


def _precipitation_tips(day: DailyForecast) -> List[str]:
    if day.precipitation_probability > HEAVY_RAIN_THRESHOLD:
        return [
            "☔ High chance of rain - consider rescheduling or have indoor backup plans",
            "🏠 Bring a large tarp or pop-up tent for shelter",
        ]
    if day.precipitation_probability > POSSIBLE_RAIN_THRESHOLD:
        return ["🌦️ Possible rain - pack a pop-up tent or umbrella just in case"]
    return []


def _wind_tips(day: DailyForecast) -> List[str]:
    if day.wind_speed_max > WINDY_THRESHOLD:
        return [
            "💨 Windy conditions - secure lightweight items and consider wind-resistant activities",
            "🪁 Great weather for kite flying!",
        ]
    return []


def _condition_tips(day: DailyForecast) -> List[str]:
    description = describe_weather_code(day.weather_code)[0].lower()
    tips: List[str] = []
    if "clear" in description or "sunny" in description:
        tips.append("☀️ Sunny day - perfect for outdoor games and activities")
        tips.append("🕶️ Don't forget sunglasses and hats")
    if "cloudy" in description:
        tips.append("☁️ Overcast conditions - comfortable for extended outdoor time")
    return tips


def derive_weather_tips(forecast: WeatherForecast, target_date: date) -> List[str]:
    """Return advisory tips for ``target_date``.

    Each tier (temperature, precipitation, wind, condition) is evaluated
    independently and always in that order. Within the temperature and
    precipitation tiers the bands are mutually exclusive: a 80% chance of
    rain yields the heavy-rain tips only, never the possible-rain tip too.
    """

    day = forecast.day(target_date)
    if day is None:
        return [MISSING_DAY_TIP]

    tips: List[str] = []
    tips.extend(_temperature_tips(day))
    tips.extend(_precipitation_tips(day))
    tips.extend(_wind_tips(day))
    tips.extend(_condition_tips(day))
    return tips


__all__ = [
    "MISSING_DAY_TIP",
    "WEATHER_CODES",
    "derive_weather_tips",
    "describe_weather_code",
    "generic_weather_tips",
]
