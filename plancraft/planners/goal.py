"""Narrative pieces of a goal plan: title, summary, checkpoints and tips."""

from __future__ import annotations

from typing import List

from plancraft.planners.domains import GoalDomain, catalog_for
from plancraft.schemas import GoalInput, TimeFrame

MAX_GOAL_TIPS = 6

_DAYS_PER_UNIT = {"days": 1, "weeks": 7, "months": 30}

_GENERAL_TIPS = (
    "Set up a dedicated time each day for working on your goal",
    "Track your progress regularly to stay motivated",
    "Break large tasks into smaller, manageable chunks",
)

_CONSTRAINT_TIPS = (
    ("Time constraints", "Use micro-learning sessions during breaks or commutes"),
    ("Limited budget", "Look for free alternatives and community resources"),
)

_STYLE_PHRASES = {
    "structured": "a structured routine",
    "flexible": "a flexible routine",
    "intensive": "an intensive routine",
}


def total_days(deadline: int, time_frame: TimeFrame) -> int:
    """Convert a deadline into days; a month counts as 30 days."""

    return deadline * _DAYS_PER_UNIT.get(time_frame, 1)


def compose_goal_title(goal: str) -> str:
    return f"{goal} Plan"


def _quantity(amount: float, unit: str) -> str:
    if amount == 1:
        unit = unit.rstrip("s")
    return f"{amount:g} {unit}"


def compose_goal_summary(goal_input: GoalInput, phase_count: int) -> str:
    horizon = _quantity(goal_input.deadline, goal_input.time_frame)
    daily = _quantity(goal_input.available_time, goal_input.time_unit)
    return (
        f"Your {horizon} plan for \"{goal_input.goal}\" is split into {phase_count} phases. "
        f"Set aside {daily} each day and follow {_STYLE_PHRASES[goal_input.style]} "
        f"at {goal_input.intensity} intensity."
    )


def build_checkpoints(domain: GoalDomain, phase_count: int) -> List[str]:
    checkpoint = catalog_for(domain).checkpoint
    return [f"Week {number * 2}: {checkpoint}" for number in range(1, phase_count + 1)]


def build_goal_tips(domain: GoalDomain, constraints: List[str]) -> List[str]:
    tips = list(_GENERAL_TIPS)
    tips.extend(catalog_for(domain).tips)
    for constraint, tip in _CONSTRAINT_TIPS:
        if constraint in constraints:
            tips.append(tip)
    return tips[:MAX_GOAL_TIPS]


__all__ = [
    "build_checkpoints",
    "build_goal_tips",
    "compose_goal_summary",
    "compose_goal_title",
    "total_days",
]
