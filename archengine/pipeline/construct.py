"""Blueprint payload -> validated modules -> sequenced components."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

from archengine.engine.architect import generate_architecture
from archengine.engine.config import diag_sink_from_env
from archengine.engine.diagnostics import CollectingDiagnosticsSink, DiagnosticsSink, Event, summarize_events
from archengine.engine.ids import IdGenerator
from archengine.engine.plan_types import SequencedComponent
from archengine.engine.scheduler import sequence_construction
from archengine.engine.snapshot import components_to_snapshot
from archengine.engine.spec.types import EngineConfig, SchedulerConfig
from archengine.schema import parse_blueprint


@dataclass(frozen=True)
class ConstructionResult:
    blueprint_id: str
    name: str
    run_id: str
    components: list[SequencedComponent]
    events: list[Event] = field(default_factory=list, repr=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.blueprint_id,
            "name": self.name,
            "components": components_to_snapshot(self.components),
            "diagnostics": summarize_events(self.events),
        }


def construct_blueprint(
    payload: Any,
    *,
    ids: IdGenerator | None = None,
    engine_config: EngineConfig | None = None,
    scheduler_config: SchedulerConfig | None = None,
    diag: DiagnosticsSink | None = None,
) -> ConstructionResult:
    """Run validation, architect expansion and scheduling for one blueprint.

    Raises `BlueprintValidationError` for structurally invalid payloads.
    """
    blueprint = parse_blueprint(payload)
    run_id = uuid.uuid4().hex
    sink = CollectingDiagnosticsSink(forward=diag if diag is not None else diag_sink_from_env())

    atomic = generate_architecture(
        blueprint.modules,
        ids=ids,
        config=engine_config,
        diag=sink,
        run_id=run_id,
    )
    sequenced = sequence_construction(atomic, config=scheduler_config, diag=sink, run_id=run_id)
    return ConstructionResult(
        blueprint_id=blueprint.id,
        name=blueprint.name,
        run_id=run_id,
        components=sequenced,
        events=list(sink.events),
    )
