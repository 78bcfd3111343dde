"""Room component: floor slab, four walls with an optional door cut, roof."""

from __future__ import annotations

from archengine.engine.components.roof import build_roof
from archengine.engine.diagnostics import Severity, emit_simple
from archengine.engine.geom_utils import clamp_min, fit_thickness
from archengine.engine.plan_types import AtomicComponent, ComponentType, Vector3
from archengine.engine.spec.types import BuildContext, RoomInputs


def door_fits(inputs: RoomInputs, ctx: BuildContext) -> bool:
    """Ground-level rooms wide enough for the opening and tall enough for a lintel."""
    cfg = ctx.config
    min_width = max(cfg.door_min_wall_width, cfg.door_width + 2.0 * cfg.min_dimension)
    min_height = 2.0 * cfg.min_dimension
    return (
        inputs.position.y < cfg.ground_level_max_y
        and inputs.width > min_width
        and inputs.height >= min_height
    )


def _wall(ctx: BuildContext, inputs: RoomInputs, prefix: str, position: Vector3, size: Vector3) -> AtomicComponent:
    return AtomicComponent(
        id=ctx.ids.next_id(prefix),
        type=ComponentType.wall,
        position=position,
        size=size,
        color=inputs.style.wall_color,
        material=inputs.style.wall_material,
    )


def _build_south_wall_with_door(
    plan,
    inputs: RoomInputs,
    ctx: BuildContext,
    wall_z: float,
    thickness: float,
) -> None:
    cfg = ctx.config
    x = inputs.position.x
    base_y = inputs.position.y + cfg.floor_height
    wall_h = inputs.height

    door_w = cfg.door_width
    # Low walls shrink the opening so the lintel keeps a positive height.
    door_h = clamp_min(min(cfg.door_height, wall_h - cfg.min_dimension), cfg.min_dimension)
    lintel_h = clamp_min(wall_h - door_h, cfg.min_dimension)
    segment_w = (inputs.width - door_w) / 2.0
    segment_offset = door_w / 2.0 + segment_w / 2.0

    plan.components.extend(
        [
            _wall(
                ctx,
                inputs,
                "wall_s_left",
                Vector3(x - segment_offset, base_y + wall_h / 2.0, wall_z),
                Vector3(segment_w, wall_h, thickness),
            ),
            _wall(
                ctx,
                inputs,
                "wall_s_right",
                Vector3(x + segment_offset, base_y + wall_h / 2.0, wall_z),
                Vector3(segment_w, wall_h, thickness),
            ),
            _wall(
                ctx,
                inputs,
                "wall_s_lintel",
                Vector3(x, base_y + door_h + lintel_h / 2.0, wall_z),
                Vector3(door_w, lintel_h, thickness),
            ),
            AtomicComponent(
                id=ctx.ids.next_id("door"),
                type=ComponentType.door,
                position=Vector3(x, base_y + door_h / 2.0, wall_z + cfg.door_outset),
                size=Vector3(door_w, door_h, cfg.door_thickness),
                color=inputs.style.door_color,
                material=inputs.style.door_material,
            ),
        ]
    )


def build_room(plan, inputs: RoomInputs, ctx: BuildContext) -> None:
    cfg = ctx.config
    x, y, z = inputs.position.as_tuple()
    width, wall_h, depth = inputs.width, inputs.height, inputs.depth
    thickness = fit_thickness(cfg.wall_thickness, width, depth)
    style = inputs.style

    plan.components.append(
        AtomicComponent(
            id=ctx.ids.next_id("floor"),
            type=ComponentType.floor,
            position=Vector3(x, y + cfg.floor_height / 2.0, z),
            size=Vector3(width, cfg.floor_height, depth),
            color=style.floor_color,
            material=style.floor_material,
        )
    )

    wall_y = y + cfg.floor_height + wall_h / 2.0
    north_z = z - depth / 2.0 + thickness / 2.0
    south_z = z + depth / 2.0 - thickness / 2.0
    side_depth = depth - 2.0 * thickness

    plan.components.append(
        _wall(ctx, inputs, "wall_n", Vector3(x, wall_y, north_z), Vector3(width, wall_h, thickness))
    )
    if door_fits(inputs, ctx):
        _build_south_wall_with_door(plan, inputs, ctx, south_z, thickness)
    else:
        emit_simple(
            ctx.diag,
            run_id=ctx.run_id,
            stage="build",
            component="room",
            code="DOOR_SKIPPED",
            severity=Severity.INFO,
            path=f"modules.{inputs.module_id}",
            source="computed",
            reason="room size or elevation leaves no space for a door opening",
            payload={"width": width, "height": wall_h, "base_y": y},
        )
        plan.components.append(
            _wall(ctx, inputs, "wall_s", Vector3(x, wall_y, south_z), Vector3(width, wall_h, thickness))
        )
    plan.components.extend(
        [
            _wall(
                ctx,
                inputs,
                "wall_e",
                Vector3(x + width / 2.0 - thickness / 2.0, wall_y, z),
                Vector3(thickness, wall_h, side_depth),
            ),
            _wall(
                ctx,
                inputs,
                "wall_w",
                Vector3(x - width / 2.0 + thickness / 2.0, wall_y, z),
                Vector3(thickness, wall_h, side_depth),
            ),
        ]
    )

    build_roof(plan, inputs, ctx, wall_top_y=y + cfg.floor_height + wall_h)
