"""Shared numeric and geometry helpers for architect components."""

from __future__ import annotations

import math
from typing import Dict, Iterable, Protocol, Tuple

from archengine.engine.plan_types import Shape, Vector3

Bounds = Dict[str, Tuple[float, float, float]]


class ComponentLike(Protocol):
    position: Vector3
    size: Vector3
    rotation: Vector3
    shape: Shape


def clamp_min(value: float, min_value: float = 0.1) -> float:
    return max(float(value), float(min_value))


def fit_thickness(nominal: float, width: float, depth: float) -> float:
    """Shell thickness that leaves a positive inner span on both footprint axes.

    Opposite shells together take at most half of each axis, so side pieces
    shortened by two thicknesses keep at least half the footprint.
    """
    return min(float(nominal), float(width) / 4.0, float(depth) / 4.0)


def _half_extents(component: ComponentLike) -> Tuple[float, float, float]:
    size = component.size
    if component.shape in (Shape.cylinder, Shape.cone):
        # Radius triple: the footprint spans the full diameter.
        return float(size.x), float(size.y) / 2.0, float(size.z)
    return float(size.x) / 2.0, float(size.y) / 2.0, float(size.z) / 2.0


def component_bbox(component: ComponentLike) -> Bounds:
    half_x, half_y, half_z = _half_extents(component)
    cx, cy, cz = component.position.as_tuple()
    rotation = component.rotation
    if rotation.x == 0.0 and rotation.y == 0.0 and rotation.z == 0.0:
        world_half = (half_x, half_y, half_z)
    else:
        cxr, sxr = math.cos(rotation.x), math.sin(rotation.x)
        cyr, syr = math.cos(rotation.y), math.sin(rotation.y)
        czr, szr = math.cos(rotation.z), math.sin(rotation.z)

        # Euler order XYZ, radians.
        r00 = cyr * czr
        r01 = -cyr * szr
        r02 = syr
        r10 = sxr * syr * czr + cxr * szr
        r11 = -sxr * syr * szr + cxr * czr
        r12 = -sxr * cyr
        r20 = -cxr * syr * czr + sxr * szr
        r21 = cxr * syr * szr + sxr * czr
        r22 = cxr * cyr

        world_half = (
            abs(r00) * half_x + abs(r01) * half_y + abs(r02) * half_z,
            abs(r10) * half_x + abs(r11) * half_y + abs(r12) * half_z,
            abs(r20) * half_x + abs(r21) * half_y + abs(r22) * half_z,
        )
    return {
        "min": (cx - world_half[0], cy - world_half[1], cz - world_half[2]),
        "max": (cx + world_half[0], cy + world_half[1], cz + world_half[2]),
    }


def components_union_bbox(components: Iterable[ComponentLike]) -> Bounds:
    mins = [float("inf")] * 3
    maxs = [float("-inf")] * 3
    has_any = False
    for component in components:
        has_any = True
        bbox = component_bbox(component)
        for axis in range(3):
            mins[axis] = min(mins[axis], bbox["min"][axis])
            maxs[axis] = max(maxs[axis], bbox["max"][axis])
    if not has_any:
        return {"min": (0.0, 0.0, 0.0), "max": (0.0, 0.0, 0.0)}
    return {"min": tuple(mins), "max": tuple(maxs)}


def bbox_overlap(a: Bounds, b: Bounds) -> Tuple[float, float, float]:
    """Per-axis overlap lengths; any value <= 0 means the boxes are disjoint or touching."""
    return tuple(
        min(a["max"][axis], b["max"][axis]) - max(a["min"][axis], b["min"][axis])
        for axis in range(3)
    )


def boxes_intersect(a: ComponentLike, b: ComponentLike, eps: float = 1e-9) -> bool:
    overlap = bbox_overlap(component_bbox(a), component_bbox(b))
    return all(length > eps for length in overlap)
