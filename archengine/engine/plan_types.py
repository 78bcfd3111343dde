"""Component dataclasses shared by the architect engine and scheduler."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ComponentType(str, Enum):
    floor = "floor"
    wall = "wall"
    roof = "roof"
    door = "door"
    window = "window"
    generic = "generic"


class Shape(str, Enum):
    box = "box"
    cylinder = "cylinder"
    cone = "cone"
    prism = "prism"
    pyramid = "pyramid"


class Material(str, Enum):
    wood = "wood"
    brick = "brick"
    glass = "glass"
    concrete = "concrete"
    metal = "metal"
    stone = "stone"


@dataclass(frozen=True)
class Vector3:
    """Point, dimension triple or radius triple depending on context."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


ZERO = Vector3(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class AtomicComponent:
    """Single renderable primitive emitted by the architect engine.

    Box sizes are width/height/depth; cylinder and cone sizes are
    radius (x), height (y), radius (z).
    """

    id: str
    type: ComponentType
    position: Vector3
    size: Vector3
    color: str
    rotation: Vector3 = ZERO
    material: Material | None = None
    shape: Shape = Shape.box


@dataclass(frozen=True)
class SequencedComponent(AtomicComponent):
    """Atomic component annotated with its presentation delay in seconds."""

    build_delay: float = 0.0


@dataclass
class ModulePlan:
    """Components produced for one module, in emission order."""

    module_id: str
    routine: str
    components: list[AtomicComponent] = field(default_factory=list)
