"""Tower component: cylindrical body with a cone roof stacked on top."""

from __future__ import annotations

from archengine.engine.plan_types import AtomicComponent, ComponentType, Shape, Vector3
from archengine.engine.spec.types import BuildContext, TowerInputs


def build_tower(plan, inputs: TowerInputs, ctx: BuildContext) -> None:
    x, y, z = inputs.position.as_tuple()
    radius, height = inputs.radius, inputs.height
    style = inputs.style
    roof_radius = radius + ctx.config.tower_roof_overhang

    plan.components.extend(
        [
            AtomicComponent(
                id=ctx.ids.next_id("tower_body"),
                type=ComponentType.wall,
                position=Vector3(x, y + height / 2.0, z),
                size=Vector3(radius, height, radius),
                color=style.wall_color,
                material=style.wall_material,
                shape=Shape.cylinder,
            ),
            AtomicComponent(
                id=ctx.ids.next_id("tower_roof"),
                type=ComponentType.roof,
                position=Vector3(x, y + height + style.roof_height / 2.0, z),
                size=Vector3(roof_radius, style.roof_height, roof_radius),
                color=style.roof_color,
                shape=Shape.cone,
            ),
        ]
    )
