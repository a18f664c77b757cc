"""UI helpers for the goal planner tab."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Set

import streamlit as st

from plancraft.core.exporters import goal_plan_to_text
from plancraft.planners import PlanInputError, slugify
from plancraft.schemas import GoalPlan
from plancraft.ui.store import recall_plan, remember_plan
from plancraft.workflows.goal_pipeline import generate_goal_plan

_GOAL_PLAN_KEY = "goal_plan"
_GOAL_COMPLETED_KEY = "goal_completed_ids"
_GOAL_ERROR_KEY = "goal_error"

_PREFERENCE_OPTIONS = [
    "Visual learning",
    "Audio learning",
    "Hands-on practice",
    "Books/Reading",
    "Online courses",
    "Group activities",
]
_CONSTRAINT_OPTIONS = [
    "Time constraints",
    "Limited budget",
    "Travel restrictions",
    "Health considerations",
]
_TIER_OPTIONS = ["low", "medium", "high"]
_STYLE_OPTIONS = ["structured", "flexible", "intensive"]
_PRIORITY_BADGES = {"high": "🔴", "medium": "🟡", "low": "🟢"}

_LOGGER = logging.getLogger(__name__)


def ensure_goal_state() -> None:
    """Initialise the session keys used by the goal tab."""

    st.session_state.setdefault(_GOAL_PLAN_KEY, None)
    st.session_state.setdefault(_GOAL_COMPLETED_KEY, set())
    st.session_state.setdefault(_GOAL_ERROR_KEY, None)

    if st.session_state[_GOAL_PLAN_KEY] is None:
        stored = recall_plan()
        if stored and stored.kind == "goal":
            st.session_state[_GOAL_PLAN_KEY] = stored.plan
            st.session_state[_GOAL_COMPLETED_KEY] = set(stored.completed_ids)


def _format_goal_error(exc: Exception) -> str:
    base_message = "Unable to build your plan."
    details = str(exc).strip()
    if isinstance(exc, PlanInputError):
        return f"{base_message} Check the questionnaire answers and try again."
    if details:
        return f"{base_message} {details}"
    return f"{base_message} Try again in a moment."


def _completed_ids() -> Set[str]:
    return st.session_state[_GOAL_COMPLETED_KEY]


def _progress(plan: GoalPlan, completed: Set[str]) -> float:
    action_ids = [action.id for action in plan.all_actions()]
    if not action_ids:
        return 0.0
    done = sum(1 for action_id in action_ids if action_id in completed)
    return done / len(action_ids)


def _render_form(container) -> Optional[Dict[str, Any]]:
    with container.form("goal_form"):
        goal = st.text_input("What do you want to achieve?", placeholder="Learn Spanish")
        deadline_cols = st.columns(2)
        deadline = deadline_cols[0].number_input("Deadline", min_value=1, value=3, step=1)
        time_frame = deadline_cols[1].selectbox("Unit", ("days", "weeks", "months"), index=2)
        time_cols = st.columns(2)
        available_time = time_cols[0].number_input("Time per day", min_value=1, value=30, step=5)
        time_unit = time_cols[1].selectbox("Time unit", ("minutes", "hours"))
        preferences = st.multiselect("Learning preferences", _PREFERENCE_OPTIONS)
        constraints = st.multiselect("Constraints", _CONSTRAINT_OPTIONS)
        tier_cols = st.columns(3)
        budget = tier_cols[0].selectbox("Budget", _TIER_OPTIONS, index=1)
        intensity = tier_cols[1].selectbox("Intensity", _TIER_OPTIONS, index=1)
        style = tier_cols[2].selectbox("Style", _STYLE_OPTIONS)
        submitted = st.form_submit_button("Generate plan", type="primary")

    if not submitted:
        return None
    return {
        "goal": goal,
        "deadline": int(deadline),
        "time_frame": time_frame,
        "available_time": available_time,
        "time_unit": time_unit,
        "preferences": preferences,
        "constraints": constraints,
        "budget": budget,
        "intensity": intensity,
        "style": style,
    }


def _handle_submit(answers: Dict[str, Any]) -> None:
    if not str(answers.get("goal") or "").strip():
        st.warning("Describe your goal first.")
        return

    try:
        with st.spinner("Building your plan…"):
            plan = generate_goal_plan(answers)
    except Exception as exc:  # noqa: BLE001 - surfaced to the user
        friendly_message = _format_goal_error(exc)
        _LOGGER.exception("Goal pipeline failed")
        st.session_state[_GOAL_ERROR_KEY] = friendly_message
        st.error(friendly_message)
        return

    st.session_state[_GOAL_ERROR_KEY] = None
    st.session_state[_GOAL_PLAN_KEY] = plan
    st.session_state[_GOAL_COMPLETED_KEY] = set()
    remember_plan(plan)


def _toggle_action(plan: GoalPlan, action_id: str) -> None:
    completed = _completed_ids()
    if action_id in completed:
        completed.discard(action_id)
    else:
        completed.add(action_id)
    remember_plan(plan, completed)


def _render_plan(plan: GoalPlan) -> None:
    completed = _completed_ids()

    st.markdown(f"### {plan.title}")
    st.caption(f"{plan.total_duration} · {plan.total_days} days · {plan.domain} plan")
    st.write(plan.summary)
    st.progress(_progress(plan, completed), text=f"{len(completed)} actions done")

    for phase in plan.phases:
        label = f"{phase.title} ({phase.start_date:%b %d} – {phase.end_date:%b %d})"
        with st.expander(label, expanded=phase.id == "phase_1"):
            st.write(phase.description)
            for action in phase.actions:
                st.checkbox(
                    f"{_PRIORITY_BADGES[action.priority]} {action.title} · {action.duration}",
                    value=action.id in completed,
                    key=f"goal_action_{action.id}",
                    help=action.description,
                    on_change=_toggle_action,
                    args=(plan, action.id),
                )
            st.markdown(f"**Milestone:** {phase.milestone}")
            if phase.resources:
                st.caption("Resources: " + ", ".join(phase.resources))

    resource_col, tip_col = st.columns(2)
    with resource_col:
        st.markdown("#### Resources")
        st.markdown("\n".join(f"- {resource}" for resource in plan.resources))
        st.markdown("#### Checkpoints")
        st.markdown("\n".join(f"- {checkpoint}" for checkpoint in plan.checkpoints))
    with tip_col:
        st.markdown("#### Tips")
        st.markdown("\n".join(f"- {tip}" for tip in plan.tips))

    st.download_button(
        "Download plan",
        data=goal_plan_to_text(plan.with_completed(completed)),
        file_name=f"{slugify(plan.goal) or 'goal'}-plan.txt",
        mime="text/plain",
        key="goal_download_text",
    )


def render_goal_tab(container) -> None:
    """Render the goal questionnaire and the generated plan."""

    ensure_goal_state()

    with container:
        st.subheader("Goal Planner")
        answers = _render_form(st.container())
        if answers is not None:
            _handle_submit(answers)

        error_message = st.session_state.get(_GOAL_ERROR_KEY)
        if error_message:
            st.error(error_message)

        plan: Optional[GoalPlan] = st.session_state.get(_GOAL_PLAN_KEY)
        if not plan:
            st.info("Answer the questionnaire to generate a phased plan.")
            return
        _render_plan(plan)


__all__ = ["ensure_goal_state", "render_goal_tab"]
