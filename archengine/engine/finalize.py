"""Finalize-stage checks for module plans."""

from __future__ import annotations

import itertools
from typing import Iterable

from archengine.engine.diagnostics import Severity, emit_simple
from archengine.engine.geom_utils import bbox_overlap, boxes_intersect, component_bbox, components_union_bbox
from archengine.engine.plan_types import AtomicComponent, ComponentType, ModulePlan
from archengine.engine.spec.types import BuildContext

ENCLOSURE_TYPES = frozenset({ComponentType.wall, ComponentType.generic})


def enclosure_overlaps(
    components: Iterable[AtomicComponent],
    eps: float = 1e-9,
) -> list[tuple[str, str, tuple[float, float, float]]]:
    """Pairs of wall/railing pieces whose boxes overlap by more than `eps` on every axis."""
    pieces = [component for component in components if component.type in ENCLOSURE_TYPES]
    overlaps = []
    for first, second in itertools.combinations(pieces, 2):
        if boxes_intersect(first, second, eps=eps):
            overlaps.append((first.id, second.id, bbox_overlap(component_bbox(first), component_bbox(second))))
    return overlaps


def finalize_module_plan(plan: ModulePlan, ctx: BuildContext) -> ModulePlan:
    path = f"modules.{plan.module_id}"
    for first_id, second_id, overlap in enclosure_overlaps(plan.components):
        emit_simple(
            ctx.diag,
            run_id=ctx.run_id,
            stage="build",
            component="architect",
            code="WALL_OVERLAP",
            severity=Severity.WARN,
            path=path,
            source="computed",
            input_value=[first_id, second_id],
            resolved_value=[round(value, 6) for value in overlap],
            reason="enclosure pieces intersect",
        )

    bounds = components_union_bbox(plan.components)
    emit_simple(
        ctx.diag,
        run_id=ctx.run_id,
        stage="build",
        component="architect",
        code="MODULE_DONE",
        severity=Severity.INFO,
        path=path,
        source="computed",
        reason="module expansion done",
        resolved_value={
            "routine": plan.routine,
            "components_count": len(plan.components),
            "bbox": {"min": list(bounds["min"]), "max": list(bounds["max"])},
        },
    )
    return plan
