"""Shape -> render primitive contract shared with the presentation layer.

The engine only emits semantic `shape` tags. This table fixes how each tag
becomes a concrete primitive, so the renderer never has to guess:

    box      -> box(width=x, height=y, depth=z)
    cylinder -> cylinder(radius=x, height=y)
    cone     -> cone(radius=x, height=y, segments=32)
    pyramid  -> cone(radius=max(x, z)/sqrt(2), height=y, segments=4), turned pi/4
                so the four faces line up with the footprint edges
    prism    -> triangular prism(span, height=y, length) with the ridge along
                its local z; when x > z the prism is turned pi/2 about y with
                span=z and length=x, so the ridge always runs along the
                longer horizontal axis
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Dict

from archengine.engine.plan_types import AtomicComponent, Shape, Vector3


@dataclass(frozen=True)
class RenderPrimitive:
    geometry: str
    args: Dict[str, float]
    rotation: Vector3 = field(default_factory=Vector3)


def _box(component: AtomicComponent) -> RenderPrimitive:
    size = component.size
    return RenderPrimitive("box", {"width": size.x, "height": size.y, "depth": size.z}, component.rotation)


def _cylinder(component: AtomicComponent) -> RenderPrimitive:
    size = component.size
    return RenderPrimitive("cylinder", {"radius": size.x, "height": size.y}, component.rotation)


def _cone(component: AtomicComponent) -> RenderPrimitive:
    size = component.size
    return RenderPrimitive("cone", {"radius": size.x, "height": size.y, "segments": 32.0}, component.rotation)


def _pyramid(component: AtomicComponent) -> RenderPrimitive:
    size = component.size
    rotation = component.rotation
    return RenderPrimitive(
        "cone",
        {"radius": max(size.x, size.z) / math.sqrt(2.0), "height": size.y, "segments": 4.0},
        Vector3(rotation.x, rotation.y + math.pi / 4.0, rotation.z),
    )


def _prism(component: AtomicComponent) -> RenderPrimitive:
    size = component.size
    rotation = component.rotation
    if size.x > size.z:
        return RenderPrimitive(
            "prism",
            {"span": size.z, "height": size.y, "length": size.x},
            Vector3(rotation.x, rotation.y + math.pi / 2.0, rotation.z),
        )
    return RenderPrimitive("prism", {"span": size.x, "height": size.y, "length": size.z}, rotation)


RENDER_PRIMITIVES: Dict[Shape, Callable[[AtomicComponent], RenderPrimitive]] = {
    Shape.box: _box,
    Shape.cylinder: _cylinder,
    Shape.cone: _cone,
    Shape.pyramid: _pyramid,
    Shape.prism: _prism,
}


def to_render_primitive(component: AtomicComponent) -> RenderPrimitive:
    return RENDER_PRIMITIVES.get(component.shape, _box)(component)
