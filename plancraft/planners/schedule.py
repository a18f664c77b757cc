"""Time-ordered picnic schedule."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import List, Sequence

from plancraft.core.formatting import format_clock
from plancraft.schemas import FoodStyle, ScheduleSlot

# Any fixed day works; only the clock part of the result is rendered.
_ANCHOR_DAY = date(2000, 1, 1)


def _at(start: datetime, hours: float) -> str:
    return format_clock(start + timedelta(hours=hours))


def build_schedule(
    start_time: time,
    duration: int,
    food_style: FoodStyle,
    activities: Sequence[str],
) -> List[ScheduleSlot]:
    """Lay out the picnic as at most five slots offset from ``start_time``.

    Times past midnight simply wrap around the clock. The activities slot is
    left out when nothing was requested.
    """

    start = datetime.combine(_ANCHOR_DAY, start_time)

    schedule = [
        ScheduleSlot(
            time_slot=format_clock(start),
            activity="Arrival & Setup",
            description="Arrive at location, set up blankets and unpack supplies",
        )
    ]

    if food_style == "potluck":
        schedule.append(
            ScheduleSlot(
                time_slot=_at(start, 0.5),
                activity="Food Setup",
                description="Everyone sets up their potluck contributions",
            )
        )
    else:
        schedule.append(
            ScheduleSlot(
                time_slot=_at(start, 0.5),
                activity="Snacks & Socializing",
                description="Light snacks and getting everyone comfortable",
            )
        )

    schedule.append(
        ScheduleSlot(
            time_slot=_at(start, duration * 0.4),
            activity="Main Meal",
            description="Enjoy the main food and drinks together",
        )
    )

    if activities:
        schedule.append(
            ScheduleSlot(
                time_slot=_at(start, duration * 0.6),
                activity="Activities",
                description=f"Time for {' and '.join(activities[:2])}",
            )
        )

    schedule.append(
        ScheduleSlot(
            time_slot=_at(start, duration - 0.5),
            activity="Cleanup & Wrap Up",
            description="Pack up belongings and clean the area",
        )
    )
    return schedule


__all__ = ["build_schedule"]
