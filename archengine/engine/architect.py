"""Expand modules into atomic components.

Coordinate system: Y is up, ground is y = 0, 1 unit = 1 metre. A module's
position is the centre of its footprint at its base elevation. South is +z
(the front face, where doors and gates go), north is -z.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterable
from typing import Any

from archengine.engine.components import build_balcony, build_boundary, build_room, build_tower
from archengine.engine.config import diag_sink_from_env, load_engine_config
from archengine.engine.diagnostics import DiagnosticsSink, Severity, emit_simple
from archengine.engine.finalize import finalize_module_plan
from archengine.engine.ids import IdGenerator, RandomIdGenerator
from archengine.engine.plan_types import AtomicComponent, ModulePlan
from archengine.engine.spec.resolve import resolve_balcony, resolve_boundary, resolve_room, resolve_tower
from archengine.engine.spec.types import BuildContext, EngineConfig, ResolveDiagnostics
from archengine.schema import Module, ModuleType, parse_modules

# One entry per module variant: (routine name, resolver, builder).
MODULE_ROUTINES: dict[ModuleType, tuple[str, Callable, Callable]] = {
    ModuleType.room: ("room", resolve_room, build_room),
    ModuleType.tower: ("tower", resolve_tower, build_tower),
    ModuleType.boundary: ("boundary", resolve_boundary, build_boundary),
    ModuleType.balcony: ("balcony", resolve_balcony, build_balcony),
}
DEFAULT_ROUTINE = MODULE_ROUTINES[ModuleType.room]


def select_routine(module: Module) -> tuple[tuple[str, Callable, Callable], bool]:
    """Return the routine for `module` and whether the room fallback was used."""
    module_type = module.module_type
    if module_type is None:
        return DEFAULT_ROUTINE, True
    return MODULE_ROUTINES[module_type], False


def expand_module(module: Module, ctx: BuildContext) -> ModulePlan:
    (routine_name, resolver, builder), fell_back = select_routine(module)
    if fell_back:
        emit_simple(
            ctx.diag,
            run_id=ctx.run_id,
            stage="build",
            component="architect",
            code="MODULE_TYPE_FALLBACK",
            severity=Severity.WARN,
            path=f"modules.{module.id}.type",
            source="fallback",
            input_value=module.type,
            resolved_value=routine_name,
            reason="unrecognized module type expanded as a room",
        )
    emit_simple(
        ctx.diag,
        run_id=ctx.run_id,
        stage="build",
        component="architect",
        code="STRATEGY_SELECTED",
        severity=Severity.INFO,
        path=f"modules.{module.id}.type",
        source="computed",
        payload={"key": {"type": module.type}, "handler": routine_name},
        reason="dispatch module expansion routine",
    )

    diagnostics = ResolveDiagnostics(run_id=ctx.run_id)
    inputs = resolver(module, ctx.config, diagnostics)
    for event in diagnostics.warnings:
        ctx.diag.emit(event)

    plan = ModulePlan(module_id=module.id, routine=routine_name)
    builder(plan, inputs, ctx)
    return finalize_module_plan(plan, ctx)


def generate_architecture(
    modules: Iterable[Module | dict[str, Any]],
    *,
    ids: IdGenerator | None = None,
    config: EngineConfig | None = None,
    diag: DiagnosticsSink | None = None,
    run_id: str | None = None,
) -> list[AtomicComponent]:
    """Expand every module independently and concatenate in module order.

    Raises `BlueprintValidationError` when a module lacks required
    structure; degenerate geometry is clamped, never rejected.
    """
    module_list = parse_modules(modules)
    ctx = BuildContext(
        run_id=run_id or uuid.uuid4().hex,
        config=config if config is not None else load_engine_config(),
        ids=ids if ids is not None else RandomIdGenerator(),
        diag=diag if diag is not None else diag_sink_from_env(),
    )
    emit_simple(
        ctx.diag,
        run_id=ctx.run_id,
        stage="build",
        component="architect",
        code="BUILD_START",
        severity=Severity.INFO,
        reason="architect expansion start",
        resolved_value={"modules_count": len(module_list)},
    )

    components: list[AtomicComponent] = []
    for module in module_list:
        components.extend(expand_module(module, ctx).components)

    emit_simple(
        ctx.diag,
        run_id=ctx.run_id,
        stage="build",
        component="architect",
        code="BUILD_DONE",
        severity=Severity.INFO,
        reason="architect expansion done",
        resolved_value={
            "modules_count": len(module_list),
            "components_count": len(components),
        },
    )
    return components
