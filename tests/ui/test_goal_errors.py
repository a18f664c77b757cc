"""Tests for the goal tab's error messages and session restore."""

from __future__ import annotations

from contextlib import nullcontext
from datetime import datetime, timezone
from typing import Any, List

import pytest

from plancraft import planners
from plancraft.planners import PlanInputError
from plancraft.ui import goal, store
from plancraft.workflows import generate_goal_plan


class _FakeStreamlit:
    """Test double for the parts of Streamlit used outside of rendering."""

    def __init__(self) -> None:
        self.session_state: dict[str, Any] = {}
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:  # noqa: ARG002
        self.errors.append(message)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:  # noqa: ARG002
        self.warnings.append(message)

    def spinner(self, *args: Any, **kwargs: Any):  # noqa: ARG002
        return nullcontext()


@pytest.fixture
def fake_st(monkeypatch: pytest.MonkeyPatch) -> _FakeStreamlit:
    fake = _FakeStreamlit()
    monkeypatch.setattr(goal, "st", fake)
    monkeypatch.setattr(store, "st", fake)
    monkeypatch.delenv("PLANCRAFT_STORE_PATH", raising=False)
    monkeypatch.setattr(planners, "new_plan_id", lambda prefix: f"{prefix}_fixed")
    monkeypatch.setattr(planners, "utc_now", lambda: datetime(2025, 6, 1, tzinfo=timezone.utc))
    return fake


@pytest.mark.parametrize(
    "exception, expected",
    [
        (
            PlanInputError("Invalid GoalInput: deadline"),
            "Unable to build your plan. Check the questionnaire answers and try again.",
        ),
        (
            RuntimeError("disk full"),
            "Unable to build your plan. disk full",
        ),
        (
            Exception("   "),
            "Unable to build your plan. Try again in a moment.",
        ),
    ],
)
def test_format_goal_error(exception: Exception, expected: str) -> None:
    assert goal._format_goal_error(exception) == expected


def test_blank_goal_is_rejected_without_running_pipeline(fake_st: _FakeStreamlit) -> None:
    goal.ensure_goal_state()

    goal._handle_submit({"goal": "  ", "deadline": 3, "available_time": 30})

    assert fake_st.warnings == ["Describe your goal first."]
    assert fake_st.session_state[goal._GOAL_PLAN_KEY] is None


def test_invalid_answers_surface_friendly_error(fake_st: _FakeStreamlit) -> None:
    goal.ensure_goal_state()

    goal._handle_submit({"goal": "Run a marathon", "deadline": 0, "available_time": 30})

    expected = "Unable to build your plan. Check the questionnaire answers and try again."
    assert fake_st.errors == [expected]
    assert fake_st.session_state[goal._GOAL_ERROR_KEY] == expected


def test_generated_plan_is_restored_in_a_fresh_session(fake_st: _FakeStreamlit) -> None:
    goal.ensure_goal_state()
    goal._handle_submit({"goal": "Learn guitar", "deadline": 4, "time_frame": "weeks", "available_time": 20})
    plan = fake_st.session_state[goal._GOAL_PLAN_KEY]
    goal._toggle_action(plan, "action_1_1")

    plan_store = fake_st.session_state[store._STORE_KEY]
    fake_st.session_state.clear()
    fake_st.session_state[store._STORE_KEY] = plan_store
    goal.ensure_goal_state()

    assert fake_st.session_state[goal._GOAL_PLAN_KEY] == plan
    assert fake_st.session_state[goal._GOAL_COMPLETED_KEY] == {"action_1_1"}
