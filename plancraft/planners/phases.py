"""Phase and action planning for goal plans."""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import List, Optional, Sequence, Tuple

from plancraft.core.formatting import format_minutes
from plancraft.planners.domains import DomainCatalog, GoalDomain, catalog_for, classify_goal_domain
from plancraft.schemas import ActionStep, BudgetTier, Phase, Priority

MIN_PHASES = 2
MAX_PHASES = 8
DAYS_PER_PHASE_TARGET = 14
MIN_ACTIONS = 3
MAX_ACTIONS = 5
MINUTES_PER_ACTION = 15
MAX_PHASE_RESOURCES = 4
MAX_GOAL_RESOURCES = 8

# Learning-style clauses are appended in this order whenever present, so a
# learner with every style gets audio first, then visual, then hands-on.
_LEARNING_STYLE_CLAUSES: Tuple[Tuple[str, str], ...] = (
    ("Audio learning", " - Focus on audio materials and listening exercises"),
    ("Visual learning", " - Use visual aids, charts, and diagrams"),
    ("Hands-on practice", " - Emphasize practical, hands-on activities"),
)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def phase_count(total_days: int) -> int:
    return _clamp(math.ceil(total_days / DAYS_PER_PHASE_TARGET), MIN_PHASES, MAX_PHASES)


def phase_spans(total_days: int, start: date) -> List[Tuple[date, date]]:
    """Split ``total_days`` starting at ``start`` into consecutive spans.

    Every span but the last is ``ceil(total_days / count)`` days long; the
    last one ends on the final day of the goal. A one-day goal still gets the
    minimum two phases, both pinned to that single day.
    """

    count = phase_count(total_days)
    span = math.ceil(total_days / count)
    last_offset = total_days - 1
    spans: List[Tuple[date, date]] = []
    for index in range(count):
        start_offset = min(index * span, last_offset)
        end_offset = last_offset if index == count - 1 else min((index + 1) * span - 1, last_offset)
        spans.append((start + timedelta(days=start_offset), start + timedelta(days=end_offset)))
    return spans


def action_count(daily_minutes: float) -> int:
    return _clamp(math.floor(daily_minutes / MINUTES_PER_ACTION), MIN_ACTIONS, MAX_ACTIONS)


def action_priority(action_number: int, total_actions: int) -> Priority:
    """Front-loaded priorities: first is high, up to the midpoint medium, rest low."""

    if action_number == 1:
        return "high"
    if action_number <= math.ceil(total_actions / 2):
        return "medium"
    return "low"


def action_duration(daily_minutes: float, total_actions: int) -> str:
    return format_minutes(math.floor(daily_minutes / total_actions))


def action_description(phase_number: int, preferences: Sequence[str]) -> str:
    description = f"Complete this action as part of phase {phase_number}"
    for preference, clause in _LEARNING_STYLE_CLAUSES:
        if preference in preferences:
            description += clause
    return description


def _build_actions(
    catalog: DomainCatalog,
    phase_number: int,
    daily_minutes: float,
    preferences: Sequence[str],
) -> List[ActionStep]:
    count = action_count(daily_minutes)
    duration = action_duration(daily_minutes, count)
    description = action_description(phase_number, preferences)
    return [
        ActionStep(
            id=f"action_{phase_number}_{number}",
            title=catalog.action_title(phase_number, number),
            description=description,
            duration=duration,
            priority=action_priority(number, count),
        )
        for number in range(1, count + 1)
    ]


def build_phase_resources(
    catalog: DomainCatalog, phase_number: int, preferences: Sequence[str]
) -> List[str]:
    resources = list(catalog.resources_for_phase(phase_number))
    if "Audio learning" in preferences:
        resources.extend(["Podcasts", "Audiobooks", "Audio courses"])
    if "Online courses" in preferences:
        resources.extend(["Coursera", "Udemy", "Khan Academy"])
    return resources[:MAX_PHASE_RESOURCES]


def build_goal_resources(
    domain: GoalDomain, preferences: Sequence[str], budget: BudgetTier
) -> List[str]:
    """Resources for the plan as a whole."""

    resources = list(catalog_for(domain).resources)
    if "Books/Reading" in preferences:
        resources.extend(["Recommended reading list", "E-book platforms", "Library resources"])
    if "Online courses" in preferences:
        resources.extend(["Course platforms", "Certification programs", "Skill assessments"])
    if budget == "low":
        resources.extend(["Free online resources", "Public library materials", "Open-source tools"])
    elif budget == "high":
        resources.extend(["Premium courses", "Professional coaching", "Advanced tools"])
    return resources[:MAX_GOAL_RESOURCES]


def build_phases(
    goal: str,
    total_days: int,
    daily_minutes: float,
    preferences: Sequence[str],
    *,
    start: Optional[date] = None,
    domain: Optional[GoalDomain] = None,
) -> List[Phase]:
    """Return the ordered phases for a goal, tiled from ``start`` (today by default)."""

    start = start or date.today()
    catalog = catalog_for(domain or classify_goal_domain(goal))
    phases: List[Phase] = []
    for index, (phase_start, phase_end) in enumerate(phase_spans(total_days, start)):
        number = index + 1
        phases.append(
            Phase(
                id=f"phase_{number}",
                title=catalog.title(number),
                description=catalog.description(number, goal),
                start_date=phase_start,
                end_date=phase_end,
                actions=_build_actions(catalog, number, daily_minutes, preferences),
                milestone=catalog.milestone(number),
                resources=build_phase_resources(catalog, number, preferences),
            )
        )
    return phases


__all__ = [
    "action_count",
    "action_duration",
    "action_priority",
    "build_goal_resources",
    "build_phase_resources",
    "build_phases",
    "phase_count",
    "phase_spans",
]
