"""Style default catalog for the module resolver.

Merge precedence (low -> high):
1) global defaults
2) module-type overrides
3) optional named palette overrides

Explicit module style values remain the highest-precedence layer and are
applied later by the resolver.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Mapping

StyleDict = dict[str, Any]


@dataclass(frozen=True)
class ModuleTypeDefinition:
    base: Mapping[str, Any] = field(default_factory=dict)
    palettes: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)


@dataclass(frozen=True)
class StyleLayer:
    layer_id: str
    values: Mapping[str, Any]


_GLOBAL_DEFAULTS: StyleDict = {
    "wall_color": "#ecf0f1",
    "wall_material": "brick",
    "roof_color": "#2c3e50",
    "roof_type": "flat",
    "floor_color": "#7f8c8d",
    "floor_material": "concrete",
    "door_color": "#8d6e63",
    "door_material": "wood",
    "railing_type": "attached",
}

_MODULE_TYPE_DEFINITIONS: dict[str, ModuleTypeDefinition] = {
    "room": ModuleTypeDefinition(
        palettes={
            "cottage": {"wall_color": "#f5e6c8", "roof_color": "#8e3b2e", "roof_type": "gable"},
            "modern": {"wall_color": "#fafafa", "wall_material": "concrete", "roof_type": "flat"},
        },
    ),
    "tower": ModuleTypeDefinition(
        base={
            "wall_color": "#95a5a6",
            "wall_material": "stone",
            "roof_color": "#2980b9",
        },
        palettes={
            "castle": {"wall_color": "#7f8c8d", "roof_color": "#6c3483"},
        },
    ),
    "boundary": ModuleTypeDefinition(
        base={
            "wall_color": "#bdc3c7",
            "wall_material": "stone",
            "door_color": "#5d4037",
        },
    ),
    "balcony": ModuleTypeDefinition(
        base={
            "wall_color": "#34495e",
            "wall_material": "metal",
            "floor_color": "#95a5a6",
        },
    ),
}


def _deep_merge(base: Mapping[str, Any], patch: Mapping[str, Any]) -> StyleDict:
    merged: StyleDict = deepcopy(dict(base))
    for key, value in patch.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged


def get_style_layers(module_type: str, palette_id: str | None = None) -> tuple[StyleLayer, ...]:
    normalized_type = str(module_type or "").strip().lower()
    normalized_palette = str(palette_id or "").strip().lower()

    layers: list[StyleLayer] = [StyleLayer(layer_id="global", values=_GLOBAL_DEFAULTS)]
    definition = _MODULE_TYPE_DEFINITIONS.get(normalized_type)
    if definition is None:
        return tuple(layers)

    if definition.base:
        layers.append(StyleLayer(layer_id=f"type:{normalized_type}", values=definition.base))

    if normalized_palette:
        palette = definition.palettes.get(normalized_palette)
        if palette:
            layers.append(StyleLayer(layer_id=f"palette:{normalized_type}:{normalized_palette}", values=palette))

    return tuple(layers)


def get_style_defaults(module_type: str, palette_id: str | None = None) -> StyleDict:
    """Return merged style defaults for a module type and optional palette."""
    merged: StyleDict = {}
    for layer in get_style_layers(module_type, palette_id):
        merged = _deep_merge(merged, layer.values)
    return merged
