"""Roof strategy handlers."""

from archengine.engine.components.roof_strategies.roof_flat import build_roof_flat_strategy
from archengine.engine.components.roof_strategies.roof_gable import build_roof_gable_strategy
from archengine.engine.components.roof_strategies.roof_pyramid import build_roof_pyramid_strategy

__all__ = [
    "build_roof_flat_strategy",
    "build_roof_gable_strategy",
    "build_roof_pyramid_strategy",
]
