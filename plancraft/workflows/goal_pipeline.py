"""Orchestrates the end-to-end flow for generating a goal plan."""

from __future__ import annotations

import logging
import time
from datetime import date, timedelta
from typing import Any, Mapping, Optional, Union

from plancraft import planners
from plancraft.schemas import GoalInput, GoalPlan

_LOGGER = logging.getLogger(__name__)


def _log_stage(stage: str, duration: float) -> None:
    _LOGGER.info("%s stage completed in %.2fs", stage.capitalize(), duration)


def generate_goal_plan(
    goal_input: Union[GoalInput, Mapping[str, Any]],
    *,
    start: Optional[date] = None,
) -> GoalPlan:
    """Turn goal questionnaire answers into a complete :class:`GoalPlan`.

    ``goal_input`` may be a :class:`GoalInput` or the raw questionnaire
    mapping, which is validated first. Phases are tiled from ``start``,
    defaulting to today. Everything except the id and ``created_at`` is a
    pure function of the input.
    """

    pipeline_start = time.perf_counter()
    goal_input = planners.coerce_input(GoalInput, goal_input)
    _LOGGER.info("Starting goal pipeline for goal: %s", goal_input.goal)

    stage_start = time.perf_counter()
    domain = planners.classify_goal_domain(goal_input.goal)
    days = planners.total_days(goal_input.deadline, goal_input.time_frame)
    start = start or date.today()
    try:
        last_day = start + timedelta(days=days - 1)
    except OverflowError as exc:
        raise planners.PlanInputError(
            f"Deadline of {goal_input.deadline} {goal_input.time_frame} runs past the last supported date"
        ) from exc
    _LOGGER.info("Goal classified as %s, running %s to %s", domain.value, start, last_day)
    _log_stage("classify", time.perf_counter() - stage_start)

    stage_start = time.perf_counter()
    phases = planners.build_phases(
        goal_input.goal,
        days,
        goal_input.daily_minutes,
        goal_input.preferences,
        start=start,
        domain=domain,
    )
    _log_stage("phases", time.perf_counter() - stage_start)

    stage_start = time.perf_counter()
    plan = GoalPlan(
        id=planners.new_plan_id("plan"),
        title=planners.compose_goal_title(goal_input.goal),
        goal=goal_input.goal,
        domain=domain.value,
        total_duration=f"{goal_input.deadline} {goal_input.time_frame}",
        total_days=days,
        summary=planners.compose_goal_summary(goal_input, len(phases)),
        phases=phases,
        resources=planners.build_goal_resources(domain, goal_input.preferences, goal_input.budget),
        checkpoints=planners.build_checkpoints(domain, len(phases)),
        tips=planners.build_goal_tips(domain, goal_input.constraints),
        created_at=planners.utc_now(),
    )
    _log_stage("assemble", time.perf_counter() - stage_start)

    _LOGGER.info("Goal pipeline completed in %.2fs", time.perf_counter() - pipeline_start)
    return plan


__all__ = ["generate_goal_plan"]
