from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Allow running this file directly (so `import abjad...` works without installing).
PROJECT_ROOT = str(Path(__file__).resolve().parents[1])
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from abjad.calculator import compute
from abjad.loader import load_weights, parse_catalog
from abjad.normalizer import normalize


def compute_record_value(record: dict, weights: dict[str, int]) -> int | None:
    """
    Abjad value of a record's ``arabic_name``; None when the name has no
    usable letters.
    """
    cleaned, report = normalize(str(record.get("arabic_name") or ""), strip_interword_spaces=True)
    if not report.success:
        return None
    result = compute(cleaned, weights)
    return result.total_value if result.success else None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Fill in abjad_value for every record of a catalog JSON file."
    )
    parser.add_argument("source", help="JSON array of {id, arabic_name, english_name, meaning} records")
    parser.add_argument("--output", help="Where to write the completed catalog (default: stdout)")
    parser.add_argument("--weights", default=None, help="JSON letter -> value table (default: built-in Abjad table)")
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Recompute abjad_value even when a record already has one",
    )
    args = parser.parse_args(argv)

    source = Path(args.source)
    if not source.exists():
        raise SystemExit(f"Catalog file not found: {source}")

    records = json.loads(source.read_text(encoding="utf-8"))
    weights = load_weights(args.weights)

    completed: list[dict] = []
    failed = 0
    for i, record in enumerate(records, start=1):
        record = dict(record)
        if args.overwrite or not record.get("abjad_value"):
            value = compute_record_value(record, weights)
            if value is None:
                failed += 1
                print(f"[{i}/{len(records)}] ERROR no Abjad letters in {record.get('arabic_name')!r} (id={record.get('id')})", file=sys.stderr)
                continue
            record["abjad_value"] = value
        completed.append(record)

    # Fails loudly on duplicate ids or missing fields before anything is written.
    parse_catalog(completed)

    text = json.dumps(completed, ensure_ascii=False, indent=2) + "\n"
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)

    print(f"Done. Records={len(completed)}, Failed={failed}", file=sys.stderr)
    return 0 if failed == 0 else 2


if __name__ == "__main__":
    raise SystemExit(main())
