"""Small display helpers shared by planners and exporters."""

from __future__ import annotations

import math
from datetime import date, datetime, time


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves always going up.

    Python's built-in :func:`round` rounds halves to even, which would turn a
    $12.50 line into $12. Budget lines and forecast temperatures use this
    instead so that ``x.5`` consistently becomes ``x + 1``.
    """

    return int(math.floor(value + 0.5))


def format_clock(value: time | datetime) -> str:
    """Render a time of day on a 12-hour clock, e.g. ``2:30 PM``."""

    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"


def format_long_date(value: date) -> str:
    """Render ``Saturday, June 14, 2025``."""

    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def format_minutes(minutes: int) -> str:
    if minutes >= 60:
        return f"{minutes // 60}h {minutes % 60}m"
    return f"{minutes}m"


def format_currency(amount: int) -> str:
    return f"${amount}"


__all__ = [
    "format_clock",
    "format_currency",
    "format_long_date",
    "format_minutes",
    "round_half_up",
]
