"""Streamlit entry point for the Plancraft application."""
from __future__ import annotations

import logging
from typing import Sequence

import streamlit as st
from dotenv import load_dotenv

from plancraft.ui import (
    ensure_goal_state,
    ensure_picnic_state,
    render_goal_tab,
    render_map_tab,
    render_picnic_tab,
)


_TAB_ORDER: Sequence[str] = ("Goal Planner", "Picnic Planner", "Map")


def configure() -> None:
    """Configure global Streamlit settings and load environment variables."""

    load_dotenv()
    logging.basicConfig(level=logging.INFO)
    st.set_page_config(page_title="Plancraft", layout="wide")


def _resolve_tab_order() -> Sequence[str]:
    """Return the ordered list of tab labels for the current render cycle."""

    default_tab = st.session_state.get("app_active_tab", "Goal Planner")
    if default_tab not in _TAB_ORDER:
        default_tab = "Goal Planner"

    ordered = [default_tab, *[label for label in _TAB_ORDER if label != default_tab]]
    st.session_state["app_active_tab"] = default_tab
    return ordered


def render() -> None:
    """Render the Plancraft multi-tab shell."""

    ensure_goal_state()
    ensure_picnic_state()

    st.title("🗺️ Plancraft")

    ordered_tabs = _resolve_tab_order()
    tab_containers = st.tabs(list(ordered_tabs))
    tab_lookup = {label: container for label, container in zip(ordered_tabs, tab_containers)}

    render_goal_tab(tab_lookup["Goal Planner"])
    render_picnic_tab(tab_lookup["Picnic Planner"])
    render_map_tab(tab_lookup["Map"])


if __name__ == "__main__":
    configure()
    render()
