"""Perimeter railing strategy: four rails enclosing the platform."""

from __future__ import annotations

from archengine.engine.geom_utils import fit_thickness
from archengine.engine.plan_types import AtomicComponent, ComponentType, Vector3
from archengine.engine.spec.types import BalconyInputs, BuildContext


def build_railing_perimeter_strategy(
    plan,
    *,
    ctx: BuildContext,
    inputs: BalconyInputs,
    base_y: float,
) -> None:
    cfg = ctx.config
    x, _, z = inputs.position.as_tuple()
    rail_t = fit_thickness(cfg.rail_thickness, inputs.width, inputs.depth)
    rail_h = inputs.rail_height
    rail_y = base_y + rail_h / 2.0
    side_depth = inputs.depth - 2.0 * rail_t
    half_w = inputs.width / 2.0 - rail_t / 2.0
    half_d = inputs.depth / 2.0 - rail_t / 2.0

    layout = [
        ("rail_n", Vector3(x, rail_y, z - half_d), Vector3(inputs.width, rail_h, rail_t)),
        ("rail_s", Vector3(x, rail_y, z + half_d), Vector3(inputs.width, rail_h, rail_t)),
        ("rail_e", Vector3(x + half_w, rail_y, z), Vector3(rail_t, rail_h, side_depth)),
        ("rail_w", Vector3(x - half_w, rail_y, z), Vector3(rail_t, rail_h, side_depth)),
    ]
    for prefix, position, size in layout:
        plan.components.append(
            AtomicComponent(
                id=ctx.ids.next_id(prefix),
                type=ComponentType.generic,
                position=position,
                size=size,
                color=inputs.style.wall_color,
                material=inputs.style.wall_material,
            )
        )
