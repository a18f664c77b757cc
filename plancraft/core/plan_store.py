"""Persistence helpers for keeping the most recently generated plan."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, Literal, Optional, Union

from pydantic import ValidationError

from plancraft.schemas import GoalPlan, PicnicPlan

LAST_PLAN_KEY = "last_plan"

_DEFAULT_STORE_PATH = os.getenv(
    "PLANCRAFT_STORE_PATH", str(Path.home() / ".plancraft" / "last_plan.json")
)

_LOGGER = logging.getLogger(__name__)

PlanKind = Literal["goal", "picnic"]
Plan = Union[GoalPlan, PicnicPlan]


class PlanStoreError(RuntimeError):
    """Raised when a stored plan cannot be read back."""


@dataclass(slots=True)
class StoredPlan:
    """Plan persisted in a backing store."""

    kind: PlanKind
    plan: Plan
    saved_at: datetime
    completed_ids: frozenset[str] = field(default_factory=frozenset)


def _kind_of(plan: Plan) -> PlanKind:
    return "goal" if isinstance(plan, GoalPlan) else "picnic"


def _parse_datetime(value: Any) -> datetime:
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            pass
    return datetime.now(timezone.utc)


def _to_payload(record: StoredPlan) -> Dict[str, Any]:
    return {
        "kind": record.kind,
        "saved_at": record.saved_at.isoformat(),
        "completed_ids": sorted(record.completed_ids),
        "plan": record.plan.model_dump(mode="json"),
    }


def _from_payload(payload: Any) -> StoredPlan:
    if not isinstance(payload, dict):
        raise PlanStoreError("Stored plan payload is not an object")
    kind = payload.get("kind")
    schema = {"goal": GoalPlan, "picnic": PicnicPlan}.get(kind)
    if schema is None:
        raise PlanStoreError(f"Unknown stored plan kind: {kind!r}")
    try:
        plan = schema.model_validate(payload.get("plan") or {})
    except ValidationError as exc:
        raise PlanStoreError(f"Failed to parse stored {kind} plan: {exc}") from exc
    return StoredPlan(
        kind=kind,
        plan=plan,
        saved_at=_parse_datetime(payload.get("saved_at")),
        completed_ids=frozenset(payload.get("completed_ids") or ()),
    )


class InMemoryPlanStore:
    """Fallback store used when nothing should touch the filesystem."""

    def __init__(self) -> None:
        self._records: Dict[str, StoredPlan] = {}

    def save(self, plan: Plan, *, completed_ids: Iterable[str] = ()) -> StoredPlan:
        record = StoredPlan(
            kind=_kind_of(plan),
            plan=plan,
            saved_at=datetime.now(timezone.utc),
            completed_ids=frozenset(completed_ids),
        )
        self._records[LAST_PLAN_KEY] = record
        return record

    def load(self) -> Optional[StoredPlan]:
        return self._records.get(LAST_PLAN_KEY)

    def clear(self) -> None:
        self._records.pop(LAST_PLAN_KEY, None)


class JsonFilePlanStore:
    """Keeps the last plan in a small JSON document on disk."""

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self._path = Path(path or _DEFAULT_STORE_PATH).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PlanStoreError(f"Unable to read plan store at {self._path}: {exc}") from exc
        if not isinstance(data, dict):
            raise PlanStoreError(f"Plan store at {self._path} is not a JSON object")
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    def save(self, plan: Plan, *, completed_ids: Iterable[str] = ()) -> StoredPlan:
        record = StoredPlan(
            kind=_kind_of(plan),
            plan=plan,
            saved_at=datetime.now(timezone.utc),
            completed_ids=frozenset(completed_ids),
        )
        data = self._read()
        data[LAST_PLAN_KEY] = _to_payload(record)
        self._write(data)
        _LOGGER.debug("Saved %s plan %s to %s", record.kind, plan.id, self._path)
        return record

    def load(self) -> Optional[StoredPlan]:
        payload = self._read().get(LAST_PLAN_KEY)
        if payload is None:
            return None
        return _from_payload(payload)

    def clear(self) -> None:
        data = self._read()
        if data.pop(LAST_PLAN_KEY, None) is not None:
            self._write(data)


__all__ = [
    "InMemoryPlanStore",
    "JsonFilePlanStore",
    "LAST_PLAN_KEY",
    "PlanStoreError",
    "StoredPlan",
]
