from __future__ import annotations

from datetime import date, timedelta

import pytest

from plancraft.planners import GoalDomain, build_goal_resources, build_phases, classify_goal_domain
from plancraft.planners.phases import (
    action_count,
    action_duration,
    action_priority,
    phase_count,
    phase_spans,
)

START = date(2025, 3, 1)


@pytest.mark.parametrize(
    "total_days, expected",
    [(1, 2), (14, 2), (29, 3), (90, 7), (112, 8), (365, 8)],
)
def test_phase_count_is_clamped(total_days: int, expected: int) -> None:
    assert phase_count(total_days) == expected


@pytest.mark.parametrize("total_days", [1, 2, 7, 20, 29, 30, 90, 365])
def test_phases_tile_the_whole_range(total_days: int) -> None:
    spans = phase_spans(total_days, START)

    assert spans[0][0] == START
    assert spans[-1][1] == START + timedelta(days=total_days - 1)
    for (_, previous_end), (next_start, _) in zip(spans, spans[1:]):
        if total_days >= len(spans):
            assert next_start == previous_end + timedelta(days=1)
    for span_start, span_end in spans:
        assert span_start <= span_end


def test_ninety_days_gives_seven_thirteen_day_phases_with_short_tail() -> None:
    spans = phase_spans(90, START)

    assert len(spans) == 7
    assert [(end - start).days + 1 for start, end in spans] == [13, 13, 13, 13, 13, 13, 12]


def test_single_day_goal_pins_both_phases_to_that_day() -> None:
    assert phase_spans(1, START) == [(START, START), (START, START)]


@pytest.mark.parametrize(
    "minutes, expected",
    [(15, 3), (45, 3), (60, 4), (75, 5), (240, 5)],
)
def test_action_count_is_clamped(minutes: float, expected: int) -> None:
    assert action_count(minutes) == expected


def test_priorities_are_front_loaded() -> None:
    assert [action_priority(n, 5) for n in range(1, 6)] == ["high", "medium", "medium", "low", "low"]
    assert [action_priority(n, 4) for n in range(1, 5)] == ["high", "medium", "low", "low"]
    assert [action_priority(n, 3) for n in range(1, 4)] == ["high", "medium", "low"]


@pytest.mark.parametrize(
    "minutes, actions, expected",
    [(30, 3, "10m"), (120, 5, "24m"), (300, 4, "1h 15m"), (180, 3, "1h 0m")],
)
def test_action_duration_label(minutes: float, actions: int, expected: str) -> None:
    assert action_duration(minutes, actions) == expected


@pytest.mark.parametrize(
    "goal, domain",
    [
        ("Learn Spanish", GoalDomain.LANGUAGE),
        ("Improve my FITNESS", GoalDomain.FITNESS),
        ("Lose weight before summer", GoalDomain.FITNESS),
        ("Launch a startup", GoalDomain.BUSINESS),
        ("Learn to run a business", GoalDomain.LANGUAGE),
        ("Write a novel", GoalDomain.GENERIC),
    ],
)
def test_classify_goal_domain(goal: str, domain: GoalDomain) -> None:
    assert classify_goal_domain(goal) == domain


def test_language_phases_use_language_tables() -> None:
    phases = build_phases("Learn Spanish", 90, 30, [], start=START)

    first = phases[0]
    assert first.id == "phase_1"
    assert first.title == "Foundation & Basics"
    assert first.description == "Master the fundamentals and basic vocabulary"
    assert first.milestone == "Can introduce yourself and handle basic interactions"
    assert [action.title for action in first.actions] == [
        "Learn basic greetings",
        "Practice pronunciation",
        "Study alphabet/writing system",
    ]
    assert [action.id for action in first.actions] == ["action_1_1", "action_1_2", "action_1_3"]

    seventh = phases[6]
    assert seventh.title == "Phase 7"
    assert seventh.description == "Continue developing your skills in phase 7"
    assert seventh.milestone == "Phase 7 milestone achieved"
    assert seventh.actions[0].title == "Action 1 - Phase 7"
    assert seventh.resources == ()


def test_generic_goal_uses_generic_templates() -> None:
    phases = build_phases("Write a novel", 28, 60, [], start=START)

    assert [phase.title for phase in phases] == ["Foundation", "Development"]
    assert phases[0].description == "Phase 1 of your journey towards achieving Write a novel"
    assert phases[1].milestone == "Successfully completed phase 2 objectives"
    assert len(phases[0].actions) == 4
    assert phases[0].actions[3].title == "Action 4 - Phase 1"


def test_learning_style_clauses_follow_fixed_order() -> None:
    phases = build_phases(
        "Write a novel",
        14,
        45,
        ["Hands-on practice", "Visual learning", "Audio learning"],
        start=START,
    )

    assert phases[0].actions[0].description == (
        "Complete this action as part of phase 1"
        " - Focus on audio materials and listening exercises"
        " - Use visual aids, charts, and diagrams"
        " - Emphasize practical, hands-on activities"
    )


def test_phase_resources_are_capped_at_four() -> None:
    phases = build_phases("Learn Spanish", 28, 30, ["Audio learning", "Online courses"], start=START)

    assert list(phases[0].resources) == [
        "Duolingo app",
        "Language learning books",
        "Pronunciation guides",
        "Podcasts",
    ]


def test_goal_resources_are_capped_at_eight() -> None:
    resources = build_goal_resources(
        GoalDomain.FITNESS, ["Books/Reading", "Online courses"], "low"
    )

    assert len(resources) == 8
    assert resources[:4] == [
        "Fitness tracking apps",
        "Workout videos",
        "Nutrition guides",
        "Exercise equipment guides",
    ]
    assert resources[4:] == [
        "Recommended reading list",
        "E-book platforms",
        "Library resources",
        "Course platforms",
    ]


def test_budget_tier_resources_for_generic_goal() -> None:
    assert build_goal_resources(GoalDomain.GENERIC, [], "high") == [
        "Premium courses",
        "Professional coaching",
        "Advanced tools",
    ]
    assert build_goal_resources(GoalDomain.GENERIC, [], "medium") == []
