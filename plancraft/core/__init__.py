"""Core utilities for Plancraft."""

from .formatting import (
    format_clock,
    format_currency,
    format_long_date,
    format_minutes,
    round_half_up,
)
from .weather import derive_weather_tips, describe_weather_code, generic_weather_tips

__all__ = [
    "derive_weather_tips",
    "describe_weather_code",
    "format_clock",
    "format_currency",
    "format_long_date",
    "format_minutes",
    "generic_weather_tips",
    "round_half_up",
]
