"""Architect module components."""

from archengine.engine.components.balcony import build_balcony
from archengine.engine.components.boundary import build_boundary
from archengine.engine.components.roof import build_roof
from archengine.engine.components.room import build_room
from archengine.engine.components.tower import build_tower

__all__ = [
    "build_balcony",
    "build_boundary",
    "build_roof",
    "build_room",
    "build_tower",
]
