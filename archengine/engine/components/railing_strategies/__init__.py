"""Railing strategy handlers."""

from archengine.engine.components.railing_strategies.railing_attached import build_railing_attached_strategy
from archengine.engine.components.railing_strategies.railing_perimeter import build_railing_perimeter_strategy

__all__ = [
    "build_railing_attached_strategy",
    "build_railing_perimeter_strategy",
]
