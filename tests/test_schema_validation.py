from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from archengine.engine.architect import generate_architecture
from archengine.schema import Blueprint, BlueprintValidationError, ModuleType, parse_blueprint, parse_modules


def _module(**overrides):
    module = {
        "id": "m1",
        "type": "room",
        "position": {"x": 0, "y": 0, "z": 0},
        "size": {"x": 4, "y": 3, "z": 4},
    }
    module.update(overrides)
    return module


def test_example_blueprints_parse():
    for name in ("blueprint_cottage.json", "blueprint_degenerate.json"):
        raw = json.loads((ROOT / "data" / "examples" / name).read_text(encoding="utf-8"))
        blueprint = parse_blueprint(raw)
        assert isinstance(blueprint, Blueprint)
        assert blueprint.modules


def test_missing_position_is_rejected_with_path():
    module = _module()
    del module["position"]
    with pytest.raises(BlueprintValidationError) as excinfo:
        parse_modules([module])
    assert "position" in excinfo.value.paths
    assert "module[0]" in str(excinfo.value)


def test_engine_rejects_missing_size_before_building():
    module = _module()
    del module["size"]
    with pytest.raises(BlueprintValidationError):
        generate_architecture([module])


def test_blueprint_error_paths_point_into_modules():
    payload = {"id": "bp", "modules": [_module(), _module(id="m2", size={"x": 1, "y": 2})]}
    with pytest.raises(BlueprintValidationError) as excinfo:
        parse_blueprint(payload)
    assert "modules.1.size.z" in excinfo.value.paths


def test_non_finite_numbers_are_rejected():
    with pytest.raises(BlueprintValidationError):
        parse_modules([_module(size={"x": float("nan"), "y": 3, "z": 4})])
    with pytest.raises(BlueprintValidationError):
        parse_modules([_module(position={"x": float("inf"), "y": 0, "z": 0})])


def test_empty_module_id_is_rejected():
    with pytest.raises(BlueprintValidationError):
        parse_modules([_module(id="")])


def test_duplicate_module_ids_are_rejected():
    with pytest.raises(BlueprintValidationError) as excinfo:
        parse_blueprint({"id": "bp", "modules": [_module(), _module()]})
    assert "duplicate module ids" in str(excinfo.value.errors[0]["msg"])


def test_module_type_aliases_and_unknown_types():
    modules = parse_modules(
        [
            _module(id="a", type="House"),
            _module(id="b", type="compound-wall"),
            _module(id="c", type="Terrace"),
            _module(id="d", type="gazebo"),
            _module(id="e", type=None),
        ]
    )
    assert [module.module_type for module in modules] == [
        ModuleType.room,
        ModuleType.boundary,
        ModuleType.balcony,
        None,
        ModuleType.room,
    ]
    assert modules[3].type == "gazebo"


def test_style_aliases_and_null_style():
    module = parse_modules([_module(style={"wallColor": "#fff", "roofType": "Gabled", "railingType": "perimeter"})])[0]
    assert module.style.wall_color == "#fff"
    assert module.style.roof_type == "gable"
    assert module.style.railing_type == "perimeter"

    bare = parse_modules([_module(style=None)])[0]
    assert bare.style.wall_color is None
    assert bare.style.roof_type is None


def test_unknown_fields_are_ignored():
    module = parse_modules([_module(label="kitchen", style={"glow": True})])[0]
    assert module.id == "m1"
