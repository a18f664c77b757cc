"""Workflow entry points for generating Plancraft plans."""

from .goal_pipeline import generate_goal_plan
from .picnic_pipeline import generate_picnic_plan, plan_picnic

__all__ = [
    "generate_goal_plan",
    "generate_picnic_plan",
    "plan_picnic",
]
