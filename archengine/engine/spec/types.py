"""Resolved style, per-module inputs and build context types."""

from __future__ import annotations

from dataclasses import dataclass, field

from archengine.engine.diagnostics import DiagnosticsSink, Event, NoopDiagnosticsSink
from archengine.engine.ids import IdGenerator, RandomIdGenerator
from archengine.engine.plan_types import Material, Vector3


@dataclass(frozen=True)
class EngineConfig:
    wall_thickness: float = 0.25
    floor_height: float = 0.2
    min_dimension: float = 0.1
    roof_overhang: float = 0.6
    flat_roof_overhang: float = 0.4
    flat_roof_thickness: float = 0.2
    flat_roof_lift: float = 0.1
    default_roof_height: float = 1.5
    door_width: float = 1.2
    door_height: float = 2.1
    door_thickness: float = 0.1
    door_outset: float = 0.05
    door_min_wall_width: float = 2.2
    ground_level_max_y: float = 0.5
    tower_roof_overhang: float = 0.5
    tower_roof_height_ratio: float = 1.5
    gate_width: float = 2.0
    gate_thickness: float = 0.1
    gate_recess: float = 0.05
    pillar_width: float = 0.5
    pillar_extra_height: float = 0.4
    rail_thickness: float = 0.05
    post_width: float = 0.1


@dataclass(frozen=True)
class SchedulerConfig:
    group_delay: float = 0.35
    stagger_delay: float = 0.08


@dataclass(frozen=True)
class ResolvedStyle:
    wall_color: str
    wall_material: Material
    roof_color: str
    roof_type: str
    roof_height: float
    floor_color: str
    floor_material: Material
    door_color: str
    door_material: Material
    railing_type: str


@dataclass(frozen=True)
class RoomInputs:
    module_id: str
    position: Vector3
    width: float
    height: float
    depth: float
    style: ResolvedStyle


@dataclass(frozen=True)
class TowerInputs:
    module_id: str
    position: Vector3
    radius: float
    height: float
    style: ResolvedStyle


@dataclass(frozen=True)
class BoundaryInputs:
    module_id: str
    position: Vector3
    width: float
    height: float
    depth: float
    style: ResolvedStyle


@dataclass(frozen=True)
class BalconyInputs:
    module_id: str
    position: Vector3
    width: float
    rail_height: float
    depth: float
    style: ResolvedStyle


@dataclass
class ResolveDiagnostics:
    run_id: str = ""
    warnings: list[Event] = field(default_factory=list)

    def emit(self, event: Event) -> None:
        self.warnings.append(event)


@dataclass(frozen=True)
class BuildContext:
    run_id: str
    config: EngineConfig = field(default_factory=EngineConfig)
    ids: IdGenerator = field(default_factory=RandomIdGenerator, repr=False, compare=False)
    diag: DiagnosticsSink = field(default_factory=NoopDiagnosticsSink, repr=False, compare=False)
