# tools/validate_blueprint.py
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from archengine.schema import BlueprintValidationError, parse_blueprint  # noqa: E402


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0]) if args else ROOT / "data" / "examples" / "blueprint_cottage.json"
    raw = json.loads(path.read_text(encoding="utf-8"))

    print("INPUT JSON:")
    print(json.dumps(raw, ensure_ascii=False, indent=2))

    try:
        blueprint = parse_blueprint(raw)
    except BlueprintValidationError as e:
        print("\nVALIDATION ERROR")
        for error in e.errors:
            loc = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
            print(f"  {loc}: {error.get('msg', '')}")
        return 1

    print("\nBlueprint OK")
    for module in blueprint.modules:
        known = "" if module.module_type is not None else "  (unknown type, expanded as room)"
        print(f"  {module.id}: {module.type}{known}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
