"""Flat roof strategy: a thin lid resting on the wall tops."""

from __future__ import annotations

from archengine.engine.plan_types import AtomicComponent, ComponentType, Shape, Vector3
from archengine.engine.spec.types import BuildContext, ResolvedStyle


def build_roof_flat_strategy(
    plan,
    *,
    ctx: BuildContext,
    center_x: float,
    center_z: float,
    wall_top_y: float,
    width: float,
    depth: float,
    style: ResolvedStyle,
) -> None:
    cfg = ctx.config
    plan.components.append(
        AtomicComponent(
            id=ctx.ids.next_id("roof"),
            type=ComponentType.roof,
            position=Vector3(center_x, wall_top_y + cfg.flat_roof_lift, center_z),
            size=Vector3(
                width + cfg.flat_roof_overhang,
                cfg.flat_roof_thickness,
                depth + cfg.flat_roof_overhang,
            ),
            color=style.roof_color,
            shape=Shape.box,
        )
    )
