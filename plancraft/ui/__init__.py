"""Plancraft Streamlit UI helpers."""

from __future__ import annotations

from .goal import ensure_goal_state, render_goal_tab
from .map import render_map_tab
from .picnic import PICNIC_LOCATION_KEY, ensure_picnic_state, render_picnic_tab

__all__ = [
    "ensure_goal_state",
    "ensure_picnic_state",
    "render_goal_tab",
    "render_map_tab",
    "render_picnic_tab",
    "PICNIC_LOCATION_KEY",
]
