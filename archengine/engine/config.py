"""Environment overrides for engine and scheduler constants.

Every constant has a default on the config dataclasses; an `ARCH_<FIELD>`
environment variable (upper-cased field name) replaces it. Malformed or
non-positive values keep the default.
"""

from __future__ import annotations

import os
from dataclasses import fields, replace
from typing import Mapping, TypeVar

from archengine.engine.diagnostics import JsonlDiagnosticsSink, NoopDiagnosticsSink
from archengine.engine.spec.types import EngineConfig, SchedulerConfig

ENV_PREFIX = "ARCH_"

_ConfigT = TypeVar("_ConfigT", EngineConfig, SchedulerConfig)


def _env_float(environ: Mapping[str, str], key: str, default: float) -> float:
    raw = environ.get(key, "")
    if not str(raw).strip():
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return default
    if value != value or value <= 0.0 or value == float("inf"):
        return default
    return value


def _apply_env(config: _ConfigT, environ: Mapping[str, str]) -> _ConfigT:
    overrides = {}
    for item in fields(config):
        key = f"{ENV_PREFIX}{item.name.upper()}"
        default = getattr(config, item.name)
        value = _env_float(environ, key, default)
        if value != default:
            overrides[item.name] = value
    return replace(config, **overrides) if overrides else config


def load_engine_config(environ: Mapping[str, str] | None = None) -> EngineConfig:
    return _apply_env(EngineConfig(), os.environ if environ is None else environ)


def load_scheduler_config(environ: Mapping[str, str] | None = None) -> SchedulerConfig:
    return _apply_env(SchedulerConfig(), os.environ if environ is None else environ)


def diag_sink_from_env(environ: Mapping[str, str] | None = None):
    # Diagnostics are opt-in: JSONL sink only when ARCH_DIAG_JSONL is set.
    env = os.environ if environ is None else environ
    path = env.get("ARCH_DIAG_JSONL", "")
    if isinstance(path, str) and path.strip():
        return JsonlDiagnosticsSink(path.strip())
    return NoopDiagnosticsSink()
