from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone

import pytest

from plancraft import planners
from plancraft.planners import PlanInputError
from plancraft.schemas import GoalInput
from plancraft.workflows import goal_pipeline

START = date(2025, 1, 6)
FROZEN_NOW = datetime(2025, 1, 6, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def frozen_identity(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(planners, "new_plan_id", lambda prefix: f"{prefix}_fixed")
    monkeypatch.setattr(planners, "utc_now", lambda: FROZEN_NOW)


def _answers() -> dict:
    return {
        "goal": "Learn Spanish",
        "deadline": 3,
        "timeFrame": "months",
        "availableTime": 1,
        "timeUnit": "hours",
        "preferences": ["Audio learning", "Online courses"],
        "constraints": ["Time constraints"],
        "budget": "low",
        "intensity": "high",
        "style": "flexible",
    }


def test_generates_language_plan_from_raw_answers(frozen_identity: None) -> None:
    plan = goal_pipeline.generate_goal_plan(_answers(), start=START)

    assert plan.id == "plan_fixed"
    assert plan.created_at == FROZEN_NOW
    assert plan.title == "Learn Spanish Plan"
    assert plan.domain == "language"
    assert plan.total_duration == "3 months"
    assert plan.total_days == 90
    assert len(plan.phases) == 7
    assert plan.phases[0].start_date == START
    assert plan.phases[-1].end_date == date(2025, 4, 5)
    assert all(len(phase.actions) == 4 for phase in plan.phases)
    assert plan.phases[0].actions[0].duration == "15m"
    assert plan.phases[0].actions[0].description.endswith(
        " - Focus on audio materials and listening exercises"
    )
    assert len(plan.checkpoints) == 7
    assert plan.checkpoints[0] == "Week 2: Test vocabulary and grammar knowledge"
    assert len(plan.tips) == 6
    assert len(plan.resources) == 8


def test_generation_is_deterministic_apart_from_identity(frozen_identity: None) -> None:
    first = goal_pipeline.generate_goal_plan(_answers(), start=START)
    second = goal_pipeline.generate_goal_plan(GoalInput.model_validate(_answers()), start=START)

    assert first == second


def test_plan_ids_are_unique_without_patching() -> None:
    first = goal_pipeline.generate_goal_plan(_answers(), start=START)
    second = goal_pipeline.generate_goal_plan(_answers(), start=START)

    assert first.id != second.id
    assert first.id.startswith("plan_")
    assert first.phases == second.phases


def test_completion_overlay_leaves_original_untouched(frozen_identity: None) -> None:
    plan = goal_pipeline.generate_goal_plan(_answers(), start=START)

    updated = plan.with_completed({"action_1_1", "action_2_3", "not-an-action"})

    assert updated.completed_ids() == {"action_1_1", "action_2_3"}
    assert plan.completed_ids() == set()
    assert updated.phases[0].actions[1].completed is False


@pytest.mark.parametrize(
    "override",
    [
        {"goal": "   "},
        {"deadline": 0},
        {"availableTime": -5},
        {"timeFrame": "years"},
    ],
)
def test_invalid_answers_raise_plan_input_error(override: dict) -> None:
    answers = {**_answers(), **override}

    with pytest.raises(PlanInputError):
        goal_pipeline.generate_goal_plan(answers)


def test_logs_each_stage(frozen_identity: None, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger=goal_pipeline.__name__)

    goal_pipeline.generate_goal_plan(_answers(), start=START)

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Phases stage completed") for message in messages)
    assert any(message.startswith("Goal pipeline completed") for message in messages)


@pytest.mark.parametrize(
    "override",
    [
        {"deadline": 400000, "timeFrame": "months"},
        {"deadline": 10**12, "timeFrame": "days"},
    ],
)
def test_deadline_beyond_calendar_raises_plan_input_error(override: dict) -> None:
    answers = {**_answers(), **override}

    with pytest.raises(PlanInputError, match="last supported date"):
        goal_pipeline.generate_goal_plan(answers, start=START)


def test_goal_ending_on_last_supported_day_still_plans(frozen_identity: None) -> None:
    answers = {**_answers(), "deadline": 15, "timeFrame": "days"}

    plan = goal_pipeline.generate_goal_plan(answers, start=date.max - timedelta(days=14))

    assert plan.phases[-1].end_date == date.max
    with pytest.raises(PlanInputError):
        goal_pipeline.generate_goal_plan(answers, start=date.max - timedelta(days=13))


def test_plan_collections_are_immutable(frozen_identity: None) -> None:
    plan = goal_pipeline.generate_goal_plan(_answers(), start=START)

    with pytest.raises(AttributeError):
        plan.tips.append("Extra tip")
    with pytest.raises(AttributeError):
        plan.phases[0].actions.clear()
    assert isinstance(plan.with_completed({"action_1_1"}).phases[0].actions, tuple)
