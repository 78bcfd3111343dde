"""Gable roof strategy.

Emits one prism sized to the overhung footprint; the ridge direction is
left to the render contract, which aligns it with the longer axis.
"""

from __future__ import annotations

from archengine.engine.plan_types import AtomicComponent, ComponentType, Shape, Vector3
from archengine.engine.spec.types import BuildContext, ResolvedStyle


def build_roof_gable_strategy(
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
    overhang = ctx.config.roof_overhang
    plan.components.append(
        AtomicComponent(
            id=ctx.ids.next_id("roof"),
            type=ComponentType.roof,
            position=Vector3(center_x, wall_top_y + style.roof_height / 2.0, center_z),
            size=Vector3(width + overhang, style.roof_height, depth + overhang),
            color=style.roof_color,
            shape=Shape.prism,
        )
    )
