# tools/schedule_blueprint.py
import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from archengine.engine.ids import CounterIdGenerator  # noqa: E402
from archengine.pipeline.construct import construct_blueprint  # noqa: E402
from archengine.schema import BlueprintValidationError  # noqa: E402


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Expand and schedule a blueprint JSON file.")
    parser.add_argument(
        "path",
        nargs="?",
        default=str(ROOT / "data" / "examples" / "blueprint_cottage.json"),
        help="blueprint JSON file",
    )
    parser.add_argument("--deterministic-ids", action="store_true", help="use counter ids instead of random ones")
    parser.add_argument("--out", default="", help="write the schedule JSON here instead of stdout")
    args = parser.parse_args(argv)

    raw = json.loads(Path(args.path).read_text(encoding="utf-8"))
    try:
        result = construct_blueprint(raw, ids=CounterIdGenerator() if args.deterministic_ids else None)
    except BlueprintValidationError as e:
        print(f"VALIDATION ERROR: {e}", file=sys.stderr)
        return 1

    text = json.dumps(result.to_dict(), ensure_ascii=False, indent=2) + "\n"
    if args.out:
        Path(args.out).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
