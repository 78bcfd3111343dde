"""Balcony component: floor platform plus a railing strategy."""

from __future__ import annotations

from collections.abc import Callable

from archengine.engine.components.railing_strategies import (
    build_railing_attached_strategy,
    build_railing_perimeter_strategy,
)
from archengine.engine.diagnostics import Severity, emit_simple
from archengine.engine.plan_types import AtomicComponent, ComponentType, Vector3
from archengine.engine.spec.types import BalconyInputs, BuildContext

RAILING_STRATEGIES: dict[str, tuple[str, Callable]] = {
    "attached": ("railing_attached", build_railing_attached_strategy),
    "perimeter": ("railing_perimeter", build_railing_perimeter_strategy),
}


def build_balcony(plan, inputs: BalconyInputs, ctx: BuildContext) -> None:
    cfg = ctx.config
    x, y, z = inputs.position.as_tuple()

    plan.components.append(
        AtomicComponent(
            id=ctx.ids.next_id("balcony_floor"),
            type=ComponentType.floor,
            position=Vector3(x, y + cfg.floor_height / 2.0, z),
            size=Vector3(inputs.width, cfg.floor_height, inputs.depth),
            color=inputs.style.floor_color,
            material=inputs.style.floor_material,
        )
    )

    railing_type = inputs.style.railing_type
    handler_name, handler = RAILING_STRATEGIES.get(railing_type, RAILING_STRATEGIES["attached"])
    emit_simple(
        ctx.diag,
        run_id=ctx.run_id,
        stage="build",
        component="railing",
        code="STRATEGY_SELECTED",
        severity=Severity.INFO,
        path=f"modules.{inputs.module_id}.style.railingType",
        source="computed",
        payload={"key": {"railing_type": railing_type}, "handler": handler_name},
        reason="dispatch railing build strategy",
    )
    handler(plan, ctx=ctx, inputs=inputs, base_y=y + cfg.floor_height)
