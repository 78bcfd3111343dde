"""Roof component: selects a roof strategy from the resolved roof type."""

from __future__ import annotations

from collections.abc import Callable

from archengine.engine.components.roof_strategies import (
    build_roof_flat_strategy,
    build_roof_gable_strategy,
    build_roof_pyramid_strategy,
)
from archengine.engine.diagnostics import Severity, emit_simple
from archengine.engine.spec.types import BuildContext, RoomInputs

ROOF_STRATEGIES: dict[str, tuple[str, Callable]] = {
    "flat": ("roof_flat", build_roof_flat_strategy),
    "gable": ("roof_gable", build_roof_gable_strategy),
    "pyramid": ("roof_pyramid", build_roof_pyramid_strategy),
}


def build_roof(plan, inputs: RoomInputs, ctx: BuildContext, wall_top_y: float) -> None:
    roof_type = inputs.style.roof_type
    handler_name, handler = ROOF_STRATEGIES.get(roof_type, ROOF_STRATEGIES["flat"])
    emit_simple(
        ctx.diag,
        run_id=ctx.run_id,
        stage="build",
        component="roof",
        code="STRATEGY_SELECTED",
        severity=Severity.INFO,
        path=f"modules.{inputs.module_id}.style.roofType",
        source="computed",
        payload={"key": {"roof_type": roof_type}, "handler": handler_name},
        resolved_value={"roof_type": roof_type},
        reason="dispatch roof build strategy",
    )
    handler(
        plan,
        ctx=ctx,
        center_x=inputs.position.x,
        center_z=inputs.position.z,
        wall_top_y=wall_top_y,
        width=inputs.width,
        depth=inputs.depth,
        style=inputs.style,
    )
