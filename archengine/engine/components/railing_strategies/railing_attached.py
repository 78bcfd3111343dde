"""Attached railing strategy.

Four corner posts and three rails; the north side is left open because the
balcony is assumed to hang off a building wall there. Adjacency is a
placement convention and is not checked.
"""

from __future__ import annotations

from archengine.engine.geom_utils import fit_thickness
from archengine.engine.plan_types import AtomicComponent, ComponentType, Vector3
from archengine.engine.spec.types import BalconyInputs, BuildContext


def build_railing_attached_strategy(
    plan,
    *,
    ctx: BuildContext,
    inputs: BalconyInputs,
    base_y: float,
) -> None:
    cfg = ctx.config
    x, _, z = inputs.position.as_tuple()
    post_w = fit_thickness(cfg.post_width, inputs.width, inputs.depth)
    rail_t = min(cfg.rail_thickness, post_w)
    rail_h = inputs.rail_height
    rail_y = base_y + rail_h / 2.0
    post_x = inputs.width / 2.0 - post_w / 2.0
    post_z = inputs.depth / 2.0 - post_w / 2.0
    span_x = inputs.width - 2.0 * post_w
    span_z = inputs.depth - 2.0 * post_w

    layout = [
        ("post_nw", Vector3(x - post_x, rail_y, z - post_z), Vector3(post_w, rail_h, post_w)),
        ("post_ne", Vector3(x + post_x, rail_y, z - post_z), Vector3(post_w, rail_h, post_w)),
        ("post_sw", Vector3(x - post_x, rail_y, z + post_z), Vector3(post_w, rail_h, post_w)),
        ("post_se", Vector3(x + post_x, rail_y, z + post_z), Vector3(post_w, rail_h, post_w)),
        ("rail_s", Vector3(x, rail_y, z + post_z), Vector3(span_x, rail_h, rail_t)),
        ("rail_e", Vector3(x + post_x, rail_y, z), Vector3(rail_t, rail_h, span_z)),
        ("rail_w", Vector3(x - post_x, rail_y, z), Vector3(rail_t, rail_h, span_z)),
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
