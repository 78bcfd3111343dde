"""Boundary component: perimeter wall with a gated front side.

Front (+z) side: left and right wall segments, two pillars taller than the
wall and a door-typed gate panel recessed between them. North, east and
west are single solid walls; east/west are shortened by two thicknesses
so they butt against the front and back runs. Fronts too narrow for the
pillars and a minimal gate are built solid.
"""

from __future__ import annotations

from archengine.engine.diagnostics import Severity, emit_simple
from archengine.engine.geom_utils import clamp_min, fit_thickness
from archengine.engine.plan_types import AtomicComponent, ComponentType, Vector3
from archengine.engine.spec.types import BoundaryInputs, BuildContext

_EPS = 1e-9


def gate_width_for(inputs: BoundaryInputs, ctx: BuildContext) -> float | None:
    """Gate opening width, or None when pillars plus side segments leave no room."""
    cfg = ctx.config
    available = inputs.width - 2.0 * cfg.pillar_width - 2.0 * cfg.min_dimension
    if available < cfg.min_dimension - _EPS:
        return None
    return clamp_min(min(cfg.gate_width, available), cfg.min_dimension)


def build_boundary(plan, inputs: BoundaryInputs, ctx: BuildContext) -> None:
    cfg = ctx.config
    x, y, z = inputs.position.as_tuple()
    width, height, depth = inputs.width, inputs.height, inputs.depth
    thickness = fit_thickness(cfg.wall_thickness, width, depth)
    style = inputs.style

    def wall(prefix: str, position: Vector3, size: Vector3) -> AtomicComponent:
        return AtomicComponent(
            id=ctx.ids.next_id(prefix),
            type=ComponentType.wall,
            position=position,
            size=size,
            color=style.wall_color,
            material=style.wall_material,
        )

    wall_y = y + height / 2.0
    front_z = z + depth / 2.0 - thickness / 2.0
    back_z = z - depth / 2.0 + thickness / 2.0
    side_depth = depth - 2.0 * thickness

    gate_w = gate_width_for(inputs, ctx)
    if gate_w is None:
        emit_simple(
            ctx.diag,
            run_id=ctx.run_id,
            stage="build",
            component="boundary",
            code="GATE_SKIPPED",
            severity=Severity.INFO,
            path=f"modules.{inputs.module_id}",
            source="computed",
            reason="boundary front is too narrow for gate pillars",
            payload={"width": width},
        )
        plan.components.append(
            wall("boundary_s", Vector3(x, wall_y, front_z), Vector3(width, height, thickness))
        )
    else:
        pillar_w = cfg.pillar_width
        pillar_h = height + cfg.pillar_extra_height
        segment_w = clamp_min((width - gate_w - 2.0 * pillar_w) / 2.0, cfg.min_dimension)
        segment_offset = width / 2.0 - segment_w / 2.0
        pillar_offset = gate_w / 2.0 + pillar_w / 2.0
        # Inner pillar face is flush with the wall inner face; the rest protrudes outward.
        pillar_z = z + depth / 2.0 - thickness + pillar_w / 2.0
        segment_size = Vector3(segment_w, height, thickness)
        pillar_size = Vector3(pillar_w, pillar_h, pillar_w)

        plan.components.extend(
            [
                wall("boundary_front_left", Vector3(x - segment_offset, wall_y, front_z), segment_size),
                wall("boundary_front_right", Vector3(x + segment_offset, wall_y, front_z), segment_size),
                wall("gate_pillar_left", Vector3(x - pillar_offset, y + pillar_h / 2.0, pillar_z), pillar_size),
                wall("gate_pillar_right", Vector3(x + pillar_offset, y + pillar_h / 2.0, pillar_z), pillar_size),
                AtomicComponent(
                    id=ctx.ids.next_id("gate"),
                    type=ComponentType.door,
                    position=Vector3(x, wall_y, front_z - cfg.gate_recess),
                    size=Vector3(gate_w, height, cfg.gate_thickness),
                    color=style.door_color,
                    material=style.door_material,
                ),
            ]
        )

    plan.components.extend(
        [
            wall("boundary_n", Vector3(x, wall_y, back_z), Vector3(width, height, thickness)),
            wall(
                "boundary_e",
                Vector3(x + width / 2.0 - thickness / 2.0, wall_y, z),
                Vector3(thickness, height, side_depth),
            ),
            wall(
                "boundary_w",
                Vector3(x - width / 2.0 + thickness / 2.0, wall_y, z),
                Vector3(thickness, height, side_depth),
            ),
        ]
    )
