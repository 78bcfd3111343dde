"""Diagnostics contracts and sink implementations."""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from pathlib import Path
from typing import Any, Iterable, Protocol


class Severity(IntEnum):
    INFO = 0
    WARN = 1
    ERROR = 2


SEVERITY_LABELS: dict[int, str] = {
    int(Severity.INFO): "info",
    int(Severity.WARN): "warn",
    int(Severity.ERROR): "error",
}
SEVERITY_MIN = int(Severity.INFO)
SEVERITY_MAX = int(Severity.ERROR)
VALID_SEVERITIES = frozenset(SEVERITY_LABELS.keys())

VALID_STAGES = frozenset({"validate", "resolve", "build", "schedule"})
VALID_SOURCES = frozenset({"module", "preset", "global", "fallback", "computed"})
VALID_COMPONENTS = frozenset(
    {
        "pipeline",
        "resolver",
        "architect",
        "room",
        "tower",
        "boundary",
        "balcony",
        "roof",
        "railing",
        "scheduler",
    }
)
DEFAULT_STAGE = "build"
DEFAULT_SOURCE = "computed"
DEFAULT_COMPONENT = "architect"


def utc_now_iso() -> str:
    """Return UTC timestamp in stable ISO-8601 format."""
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class Event:
    """Unified diagnostics event schema."""

    ts: str
    run_id: str
    stage: str
    component: str
    code: str
    severity: int
    path: str
    source: str
    input_value: Any
    resolved_value: Any
    reason: str
    meta: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _canon_vocab(value: Any, allowed: frozenset[str], default: str) -> tuple[str, bool]:
    candidate = value.strip().lower() if isinstance(value, str) else ""
    if candidate in allowed:
        return candidate, False
    return default, True


def make_event(
    *,
    run_id: str = "",
    stage: str,
    component: str,
    code: str,
    severity: int = 0,
    path: str = "",
    source: str = "",
    input_value: Any = None,
    resolved_value: Any = None,
    reason: str = "",
    meta: dict[str, Any] | None = None,
    ts: str = "",
) -> Event:
    stage_value, stage_changed = _canon_vocab(stage, VALID_STAGES, DEFAULT_STAGE)
    component_value, component_changed = _canon_vocab(component, VALID_COMPONENTS, DEFAULT_COMPONENT)
    source_value, source_changed = _canon_vocab(source, VALID_SOURCES, DEFAULT_SOURCE)
    try:
        severity_value = int(severity)
    except (TypeError, ValueError):
        severity_value = int(Severity.INFO)

    meta_value = dict(meta) if isinstance(meta, dict) else {}
    normalized_from: dict[str, Any] = {}
    if stage_changed:
        normalized_from["stage"] = stage
    if component_changed:
        normalized_from["component"] = component
    if source_changed:
        normalized_from["source"] = source
    if normalized_from:
        existing = meta_value.get("normalized_from")
        if isinstance(existing, dict):
            normalized_from.update(existing)
        meta_value["normalized_from"] = normalized_from
        if not reason:
            reason = "normalized diagnostics vocabulary"

    return Event(
        ts=ts or utc_now_iso(),
        run_id=run_id,
        stage=stage_value,
        component=component_value,
        code=code,
        severity=max(SEVERITY_MIN, min(SEVERITY_MAX, severity_value)),
        path=path,
        source=source_value,
        input_value=input_value,
        resolved_value=resolved_value,
        reason=reason,
        meta=meta_value,
    )


class DiagnosticsSink(Protocol):
    """Sink interface for structured diagnostics events."""

    def emit(self, event: Event) -> None:
        """Publish one diagnostics event."""


def emit_simple(
    sink: DiagnosticsSink,
    *,
    code: str,
    path: str = "",
    payload: Any = None,
    severity: int = Severity.INFO,
    component: str = DEFAULT_COMPONENT,
    stage: str = DEFAULT_STAGE,
    source: str = DEFAULT_SOURCE,
    reason: str = "",
    run_id: str = "",
    input_value: Any = None,
    resolved_value: Any = None,
    meta: dict[str, Any] | None = None,
    **extra_meta: Any,
) -> Event:
    merged_meta = dict(meta) if isinstance(meta, dict) else {}
    merged_meta.update(extra_meta)
    if payload is not None and "payload" not in merged_meta:
        merged_meta["payload"] = payload
    event = make_event(
        run_id=run_id,
        stage=stage,
        component=component,
        code=code,
        severity=severity,
        path=path,
        source=source,
        input_value=input_value,
        resolved_value=resolved_value,
        reason=reason,
        meta=merged_meta,
    )
    sink.emit(event)
    return event


def summarize_events(events: Iterable[Event]) -> dict[str, Any]:
    """Count events by code and by severity label."""
    by_code: Counter[str] = Counter()
    by_severity: Counter[str] = Counter()
    for event in events:
        by_code[event.code] += 1
        by_severity[SEVERITY_LABELS.get(int(event.severity), "info")] += 1
    return {
        "total": sum(by_code.values()),
        "by_code": dict(sorted(by_code.items())),
        "by_severity": dict(sorted(by_severity.items())),
    }


class NoopDiagnosticsSink:
    """Default diagnostics sink that drops all events."""

    def emit(self, event: Event) -> None:
        del event


class CollectingDiagnosticsSink:
    """Keep events in memory and optionally forward them to another sink."""

    def __init__(self, forward: DiagnosticsSink | None = None) -> None:
        self.events: list[Event] = []
        self._forward = forward

    def emit(self, event: Event) -> None:
        self.events.append(event)
        if self._forward is not None:
            self._forward.emit(event)


class JsonlDiagnosticsSink:
    """Append diagnostics events to a JSONL file."""

    def __init__(self, path: str) -> None:
        self._path = Path(path)

    def emit(self, event: Event) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        line = json.dumps(event.to_dict(), ensure_ascii=False, sort_keys=True, default=str)
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(f"{line}\n")
