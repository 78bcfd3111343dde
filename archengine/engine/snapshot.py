"""Stable serialization of components for the renderer and regression checks."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from archengine.engine.plan_types import AtomicComponent, SequencedComponent, Vector3


def _round_value(value: Any):
    if isinstance(value, bool):
        return value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Vector3):
        return {"x": _round_value(value.x), "y": _round_value(value.y), "z": _round_value(value.z)}
    if isinstance(value, (int, float)):
        return round(float(value), 6)
    if isinstance(value, (list, tuple)):
        return [_round_value(item) for item in value]
    return value


def component_to_dict(component: AtomicComponent, *, include_id: bool = True) -> dict[str, Any]:
    item: dict[str, Any] = {
        "type": _round_value(component.type),
        "shape": _round_value(component.shape),
        "position": _round_value(component.position),
        "rotation": _round_value(component.rotation),
        "size": _round_value(component.size),
        "color": component.color,
    }
    if include_id:
        item = {"id": component.id, **item}
    if component.material is not None:
        item["material"] = _round_value(component.material)
    if isinstance(component, SequencedComponent):
        item["buildDelay"] = _round_value(component.build_delay)
    return item


def components_to_snapshot(
    components: Iterable[AtomicComponent],
    *,
    include_ids: bool = True,
) -> list[dict[str, Any]]:
    return [component_to_dict(component, include_id=include_ids) for component in components]
