from __future__ import annotations

import io
import json
import sys
from collections import Counter
from contextlib import redirect_stdout
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from archengine.engine.architect import generate_architecture
from archengine.engine.config import diag_sink_from_env
from archengine.engine.diagnostics import (
    Event,
    JsonlDiagnosticsSink,
    NoopDiagnosticsSink,
    Severity,
    VALID_COMPONENTS,
    VALID_SEVERITIES,
    VALID_SOURCES,
    VALID_STAGES,
    emit_simple,
    summarize_events,
)
from archengine.engine.ids import CounterIdGenerator


class ListDiagnosticsSink:
    def __init__(self) -> None:
        self.events: list[Event] = []

    def emit(self, event: Event) -> None:
        self.events.append(event)


def _load_blueprint(path: str) -> dict:
    return json.loads((ROOT / path).read_text(encoding="utf-8"))


def test_architect_is_stdout_silent():
    sink = ListDiagnosticsSink()
    blueprint = _load_blueprint("data/examples/blueprint_cottage.json")

    buf = io.StringIO()
    with redirect_stdout(buf):
        components = generate_architecture(blueprint["modules"], ids=CounterIdGenerator(), diag=sink)
    assert components
    assert buf.getvalue() == ""


def test_diagnostics_event_contract_and_stability():
    sink = ListDiagnosticsSink()
    blueprint = _load_blueprint("data/examples/blueprint_degenerate.json")

    buf = io.StringIO()
    with redirect_stdout(buf):
        generate_architecture(blueprint["modules"], ids=CounterIdGenerator(), diag=sink, run_id="run-d")
    assert buf.getvalue() == ""

    assert sink.events
    required_keys = {
        "ts",
        "run_id",
        "stage",
        "component",
        "code",
        "severity",
        "path",
        "source",
        "input_value",
        "resolved_value",
        "reason",
        "meta",
    }
    signatures: list[tuple[str, str, str, int]] = []
    for event in sink.events:
        payload = event.to_dict()
        assert set(payload.keys()) == required_keys
        assert payload["run_id"] == "run-d"
        assert payload["severity"] in VALID_SEVERITIES
        assert payload["stage"] in VALID_STAGES
        assert payload["source"] in VALID_SOURCES
        assert payload["component"] in VALID_COMPONENTS
        assert isinstance(payload["code"], str) and payload["code"]
        if payload["path"] == "":
            assert payload["code"] in {"BUILD_START", "BUILD_DONE"}
            assert payload["reason"] or payload["meta"]
        signatures.append(
            (
                payload["stage"],
                payload["component"],
                payload["code"],
                int(payload["severity"]),
            )
        )

    counts = Counter(signatures)
    assert counts[("build", "architect", "BUILD_START", int(Severity.INFO))] == 1
    assert counts[("build", "architect", "BUILD_DONE", int(Severity.INFO))] == 1
    assert counts[("build", "architect", "MODULE_TYPE_FALLBACK", int(Severity.WARN))] == 1
    assert counts[("resolve", "resolver", "DIM_CLAMP", int(Severity.WARN))] == 2
    assert counts[("resolve", "resolver", "STYLE_FALLBACK", int(Severity.WARN))] == 3

    fallback = next(event for event in sink.events if event.code == "MODULE_TYPE_FALLBACK")
    assert fallback.path == "modules.mystery.type"
    assert fallback.input_value == "gazebo"
    assert fallback.resolved_value == "room"

    done = sink.events[-1]
    assert done.code == "BUILD_DONE"
    assert done.resolved_value == {"modules_count": 2, "components_count": 15}


def test_strategy_selection_events_name_handlers():
    sink = ListDiagnosticsSink()
    blueprint = _load_blueprint("data/examples/blueprint_cottage.json")
    generate_architecture(blueprint["modules"], ids=CounterIdGenerator(), diag=sink)

    handlers = [
        (event.component, event.meta["payload"]["handler"])
        for event in sink.events
        if event.code == "STRATEGY_SELECTED"
    ]
    assert ("architect", "room") in handlers
    assert ("architect", "tower") in handlers
    assert ("architect", "boundary") in handlers
    assert ("architect", "balcony") in handlers
    assert ("roof", "roof_gable") in handlers
    assert ("roof", "roof_pyramid") in handlers
    assert ("railing", "railing_attached") in handlers


def test_emit_simple_contract_and_normalization() -> None:
    sink = ListDiagnosticsSink()
    event = emit_simple(
        sink,
        run_id="run-1",
        stage="resolve",
        component="resolver",
        code="UNIT_EVENT",
        path="modules.m1.size.x",
        payload={"min": 0.1},
        severity=Severity.WARN,
        module_index=2,
        source="computed",
        reason="unit test",
        input_value=-2,
        resolved_value=0.1,
        meta={"hint": "clamp"},
    )
    assert sink.events and sink.events[-1] is event
    event_payload = event.to_dict()
    assert event_payload["stage"] == "resolve"
    assert event_payload["component"] == "resolver"
    assert event_payload["source"] == "computed"
    assert event_payload["meta"]["module_index"] == 2
    assert event_payload["meta"]["payload"] == {"min": 0.1}
    assert event_payload["meta"]["hint"] == "clamp"
    assert "normalized_from" not in event_payload["meta"]

    normalized = emit_simple(
        sink,
        code="UNIT_EVENT_NORMALIZE",
        stage="unknown_stage",
        component="unknown_component",
        source="unknown_source",
        severity=7,
    )
    assert normalized.stage == "build"
    assert normalized.component == "architect"
    assert normalized.source == "computed"
    assert normalized.severity == int(Severity.ERROR)
    assert normalized.meta["normalized_from"] == {
        "stage": "unknown_stage",
        "component": "unknown_component",
        "source": "unknown_source",
    }


def test_summarize_events_counts_codes_and_severities():
    sink = ListDiagnosticsSink()
    emit_simple(sink, code="A", severity=Severity.WARN)
    emit_simple(sink, code="A", severity=Severity.WARN)
    emit_simple(sink, code="B")
    summary = summarize_events(sink.events)
    assert summary == {"total": 3, "by_code": {"A": 2, "B": 1}, "by_severity": {"info": 1, "warn": 2}}


def test_diag_sink_from_env_is_opt_in(tmp_path, monkeypatch):
    monkeypatch.delenv("ARCH_DIAG_JSONL", raising=False)
    assert isinstance(diag_sink_from_env(), NoopDiagnosticsSink)

    target = tmp_path / "diag" / "events.jsonl"
    monkeypatch.setenv("ARCH_DIAG_JSONL", str(target))
    sink = diag_sink_from_env()
    assert isinstance(sink, JsonlDiagnosticsSink)

    generate_architecture(
        [
            {
                "id": "shed",
                "type": "room",
                "position": {"x": 0, "y": 0, "z": 0},
                "size": {"x": 3, "y": 2.5, "z": 3},
            }
        ],
        ids=CounterIdGenerator(),
    )
    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines
    records = [json.loads(line) for line in lines]
    assert records[0]["code"] == "BUILD_START"
    assert records[-1]["code"] == "BUILD_DONE"
