"""Construction scheduler: build order and presentation delays.

Components are stably sorted by (construction priority, position.y) so
floors come first and each phase builds bottom-up. Walking the sorted list,
the first component of each new phase adds the group delay and every other
component adds the smaller stagger delay. The returned order is the draw
order; consumers must not reorder it.
"""

from __future__ import annotations

import uuid
from dataclasses import fields
from typing import Iterable

from archengine.engine.config import diag_sink_from_env, load_scheduler_config
from archengine.engine.diagnostics import DiagnosticsSink, Severity, emit_simple
from archengine.engine.plan_types import AtomicComponent, ComponentType, SequencedComponent
from archengine.engine.spec.types import SchedulerConfig

CONSTRUCTION_PRIORITY: dict[ComponentType, int] = {
    ComponentType.floor: 0,
    ComponentType.wall: 1,
    ComponentType.roof: 2,
    ComponentType.generic: 3,
    ComponentType.door: 4,
    ComponentType.window: 4,
}
UNKNOWN_PRIORITY = 99


def construction_priority(component_type) -> int:
    try:
        return CONSTRUCTION_PRIORITY.get(ComponentType(component_type), UNKNOWN_PRIORITY)
    except ValueError:
        return UNKNOWN_PRIORITY


def build_order(components: Iterable[AtomicComponent]) -> list[AtomicComponent]:
    # sorted() is stable: ties keep engine emission order.
    return sorted(
        components,
        key=lambda component: (construction_priority(component.type), component.position.y),
    )


def _sequenced(component: AtomicComponent, delay: float) -> SequencedComponent:
    values = {item.name: getattr(component, item.name) for item in fields(AtomicComponent)}
    return SequencedComponent(**values, build_delay=delay)


def sequence_construction(
    components: Iterable[AtomicComponent],
    *,
    config: SchedulerConfig | None = None,
    diag: DiagnosticsSink | None = None,
    run_id: str | None = None,
) -> list[SequencedComponent]:
    cfg = config if config is not None else load_scheduler_config()
    sink = diag if diag is not None else diag_sink_from_env()

    ordered = build_order(components)
    sequenced: list[SequencedComponent] = []
    current_delay = 0.0
    last_priority: int | None = None
    phases = 0
    for component in ordered:
        priority = construction_priority(component.type)
        if last_priority is None or priority > last_priority:
            current_delay += cfg.group_delay
            phases += 1
        else:
            current_delay += cfg.stagger_delay
        sequenced.append(_sequenced(component, round(current_delay, 9)))
        last_priority = priority

    emit_simple(
        sink,
        run_id=run_id or uuid.uuid4().hex,
        stage="schedule",
        component="scheduler",
        code="SCHEDULE_DONE",
        severity=Severity.INFO,
        reason="construction schedule assigned",
        resolved_value={
            "components_count": len(sequenced),
            "phases_count": phases,
            "total_delay": sequenced[-1].build_delay if sequenced else 0.0,
        },
    )
    return sequenced
