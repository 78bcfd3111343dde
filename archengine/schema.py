from __future__ import annotations

import re
from enum import Enum
from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from archengine.engine.plan_types import Vector3


# =========================
# Enums / core types
# =========================

class ModuleType(str, Enum):
    room = "room"
    tower = "tower"
    boundary = "boundary"
    balcony = "balcony"


class RoofType(str, Enum):
    flat = "flat"
    gable = "gable"
    pyramid = "pyramid"


class RailingType(str, Enum):
    attached = "attached"
    perimeter = "perimeter"


# =========================
# Aliases / Canonicalization
# =========================

def _canon(s: str) -> str:
    s = s.strip().lower()
    s = s.replace("-", " ")
    s = s.replace("_", " ")
    s = re.sub(r"\s+", " ", s)
    return s


MODULE_TYPE_ALIASES = {
    "room": "room",
    "house": "room",
    "building": "room",
    "hall": "room",

    "tower": "tower",
    "turret": "tower",
    "silo": "tower",

    "boundary": "boundary",
    "boundary wall": "boundary",
    "compound wall": "boundary",
    "fence": "boundary",

    "balcony": "balcony",
    "terrace": "balcony",
    "deck": "balcony",
}

ROOF_TYPE_ALIASES = {
    "flat": "flat",
    "gable": "gable",
    "gabled": "gable",
    "pitched": "gable",
    "pyramid": "pyramid",
    "hip": "pyramid",
    "hipped": "pyramid",
}


class BlueprintValidationError(ValueError):
    """Blueprint payload is missing required structure (position, size, ids)."""

    def __init__(self, message: str, errors: Optional[List[dict]] = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])

    @property
    def paths(self) -> List[str]:
        return [".".join(str(part) for part in err.get("loc", ())) for err in self.errors]

    @classmethod
    def from_pydantic(cls, exc: ValidationError, context: str) -> "BlueprintValidationError":
        errors = exc.errors(include_url=False)
        locations = ", ".join(".".join(str(part) for part in err["loc"]) or "<root>" for err in errors)
        return cls(f"invalid {context}: {locations}", errors)


# =========================
# Input models
# =========================

class Vec3(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False, extra="ignore")

    x: float
    y: float
    z: float

    def to_vector(self) -> Vector3:
        return Vector3(float(self.x), float(self.y), float(self.z))


class ModuleStyle(BaseModel):
    """
    Optional styling hints. Unknown vocabulary is kept as-is here and
    replaced with defaults by the resolver, never rejected.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    wall_color: Optional[str] = Field(default=None, alias="wallColor")
    wall_material: Optional[str] = Field(default=None, alias="wallMaterial")
    roof_color: Optional[str] = Field(default=None, alias="roofColor")
    roof_type: Optional[str] = Field(default=None, alias="roofType")
    roof_height: Optional[Any] = Field(default=None, alias="roofHeight")
    railing_type: Optional[str] = Field(default=None, alias="railingType")
    palette: Optional[str] = None

    @field_validator("roof_type", mode="before")
    @classmethod
    def _v_roof_type(cls, v):
        if v is None or not isinstance(v, str):
            return v
        return ROOF_TYPE_ALIASES.get(_canon(v), v)


class Module(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(min_length=1)
    type: str = ModuleType.room.value
    position: Vec3
    size: Vec3
    style: ModuleStyle = Field(default_factory=ModuleStyle)

    @field_validator("type", mode="before")
    @classmethod
    def _v_type(cls, v):
        if v is None:
            return ModuleType.room.value
        if isinstance(v, ModuleType):
            return v.value
        return MODULE_TYPE_ALIASES.get(_canon(str(v)), str(v))

    @field_validator("style", mode="before")
    @classmethod
    def _v_style(cls, v):
        return {} if v is None else v

    @property
    def module_type(self) -> Optional[ModuleType]:
        try:
            return ModuleType(self.type)
        except ValueError:
            return None


class Blueprint(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str = ""
    modules: List[Module] = Field(default_factory=list)

    @model_validator(mode="after")
    def unique_module_ids(self):
        seen: set[str] = set()
        duplicates: list[str] = []
        for module in self.modules:
            if module.id in seen:
                duplicates.append(module.id)
            seen.add(module.id)
        if duplicates:
            raise ValueError(f"duplicate module ids: {', '.join(sorted(set(duplicates)))}")
        return self


# =========================
# Parsing entry points
# =========================

def parse_blueprint(payload: Any) -> Blueprint:
    if isinstance(payload, Blueprint):
        return payload
    try:
        return Blueprint.model_validate(payload)
    except ValidationError as exc:
        raise BlueprintValidationError.from_pydantic(exc, "blueprint") from exc


def parse_modules(items: Iterable[Any]) -> List[Module]:
    modules: List[Module] = []
    for index, item in enumerate(items):
        if isinstance(item, Module):
            modules.append(item)
            continue
        try:
            modules.append(Module.model_validate(item))
        except ValidationError as exc:
            raise BlueprintValidationError.from_pydantic(exc, f"module[{index}]") from exc
    return modules
