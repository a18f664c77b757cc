"""Session-scoped access to the plan store."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Optional, Union

import streamlit as st

from plancraft.core.plan_store import (
    InMemoryPlanStore,
    JsonFilePlanStore,
    PlanStoreError,
    StoredPlan,
)
from plancraft.schemas import GoalPlan, PicnicPlan

_STORE_KEY = "_plan_store"

_LOGGER = logging.getLogger(__name__)


def plan_store() -> Union[InMemoryPlanStore, JsonFilePlanStore]:
    """Return the store for this session.

    A JSON file is used when ``PLANCRAFT_STORE_PATH`` is configured; otherwise
    plans only live as long as the Streamlit session.
    """

    store = st.session_state.get(_STORE_KEY)
    if store is None:
        if os.getenv("PLANCRAFT_STORE_PATH"):
            store = JsonFilePlanStore()
        else:
            store = InMemoryPlanStore()
        st.session_state[_STORE_KEY] = store
    return store


def remember_plan(plan: Union[GoalPlan, PicnicPlan], completed_ids: Iterable[str] = ()) -> None:
    try:
        plan_store().save(plan, completed_ids=completed_ids)
    except OSError as exc:
        _LOGGER.warning("Unable to save plan %s: %s", plan.id, exc)


def recall_plan() -> Optional[StoredPlan]:
    try:
        return plan_store().load()
    except PlanStoreError as exc:
        _LOGGER.warning("Ignoring unreadable stored plan: %s", exc)
        return None


__all__ = ["plan_store", "recall_plan", "remember_plan"]
