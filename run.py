from __future__ import annotations

import argparse
import json

from abjad import MatchType, create_context
from abjad.calculator import format_calculation
from abjad.config import Config
from abjad.logging import configure_logging
from abjad.schemas import dump_outcome


def format_match(result) -> str:
    if not result.found:
        return f"No direct matches or combinations found for value {result.target_value}"

    if result.type is MatchType.DIRECT:
        lines = [f"Direct match: {result.count} name(s) with value {result.target_value}"]
        for entity in result.entities:
            lines.append(f"  {entity.arabic_name}  {entity.english_name} ({entity.meaning}) = {entity.abjad_value}")
        return "\n".join(lines)

    lines = [f"Two-name combinations: {result.count} pair(s) summing to {result.target_value}"]
    for combo in result.combinations:
        a, b = combo.entity_a, combo.entity_b
        lines.append(
            f"  {a.arabic_name} ({a.abjad_value}) + {b.arabic_name} ({b.abjad_value}) = {combo.total}"
            f"  [{a.english_name} + {b.english_name}]"
        )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compute the Abjad value of a name and match it against the catalog.")
    parser.add_argument("name", nargs="+", help="Name in Arabic/Urdu script")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    args = parser.parse_args(argv)

    configure_logging(Config.LOG_LEVEL)
    context = create_context(Config)

    outcome = context.run_pipeline(" ".join(args.name))
    if args.json:
        print(json.dumps(dump_outcome(outcome), ensure_ascii=False, indent=2))
        return 0 if outcome.success else 1

    if not outcome.success:
        print(f"Invalid input: {outcome.message}")
        return 1

    print(format_calculation(outcome.calc))
    print()
    print(format_match(outcome.match))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
