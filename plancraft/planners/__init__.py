"""Deterministic generators that turn questionnaire answers into plans."""

from __future__ import annotations

import re
import secrets
import time
from datetime import datetime, timezone
from typing import Any, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

T = TypeVar("T", bound=BaseModel)

_ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


class PlanInputError(ValueError):
    """Raised when questionnaire answers cannot be turned into a valid input record."""


def slugify(value: str) -> str:
    """Generate a deterministic, id-friendly slug."""

    value = value.strip().lower()
    value = re.sub(r"[^a-z0-9]+", "-", value)
    value = re.sub(r"-+", "-", value)
    return value.strip("-")


def new_plan_id(prefix: str) -> str:
    """Return ``<prefix>_<epoch ms>_<9 random base36 chars>``."""

    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"{prefix}_{int(time.time() * 1000)}_{suffix}"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def coerce_input(schema: Type[T], data: Union[T, Mapping[str, Any]]) -> T:
    """Validate raw questionnaire data into ``schema``."""

    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise PlanInputError(f"Invalid {schema.__name__}: {exc}") from exc


from .budget import estimate_budget
from .content import build_activity_details, build_food_suggestions, build_packing_list
from .domains import GoalDomain, classify_goal_domain
from .goal import (
    build_checkpoints,
    build_goal_tips,
    compose_goal_summary,
    compose_goal_title,
    total_days,
)
from .narrative import (
    build_backup_plans,
    build_safety_tips,
    compose_picnic_summary,
    compose_picnic_title,
)
from .phases import build_goal_resources, build_phases
from .schedule import build_schedule

__all__ = [
    "GoalDomain",
    "PlanInputError",
    "build_activity_details",
    "build_backup_plans",
    "build_checkpoints",
    "build_food_suggestions",
    "build_goal_resources",
    "build_goal_tips",
    "build_packing_list",
    "build_phases",
    "build_safety_tips",
    "build_schedule",
    "classify_goal_domain",
    "coerce_input",
    "compose_goal_summary",
    "compose_goal_title",
    "compose_picnic_summary",
    "compose_picnic_title",
    "estimate_budget",
    "new_plan_id",
    "slugify",
    "total_days",
    "utc_now",
]
