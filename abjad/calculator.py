from __future__ import annotations

from typing import Mapping

from .errors import ErrorKind
from .results import CalculationResult, CharacterRecord, Failure


def compute(cleaned: str, weights: Mapping[str, int], *, input_name: str | None = None) -> CalculationResult:
    """
    Compute the Abjad value of already-normalized text.

    Letters missing from ``weights`` (including the spaces between words) are
    skipped with a warning; they add nothing to the total or the breakdown.

    Example:
      compute("اله", ABJAD_VALUES).total_value == 36
    """
    result = CalculationResult(
        input_name=cleaned if input_name is None else input_name,
        cleaned_name=cleaned if isinstance(cleaned, str) else "",
    )

    if not isinstance(cleaned, str) and cleaned is not None:
        result.errors.append(f"Input must be string, got {type(cleaned).__name__}")
        result.error_kind = ErrorKind.INVALID_VALUE
        return result

    if not cleaned:
        result.errors.append("Input name is empty")
        result.error_kind = ErrorKind.EMPTY_INPUT
        return result

    total = 0
    for index, ch in enumerate(cleaned):
        value = weights.get(ch)
        if value is None:
            result.warnings.append(f"Character '{ch}' at position {index} not found in Abjad table")
            continue
        result.character_breakdown.append(
            CharacterRecord(position=len(result.character_breakdown) + 1, character=ch, value=value)
        )
        total += value

    if not result.character_breakdown:
        result.errors.append("No valid Arabic letters found in input")
        result.error_kind = ErrorKind.NO_VALID_LETTERS
        return result

    result.success = True
    result.total_value = total
    result.char_count = len(result.character_breakdown)
    return result


def character_values(cleaned: str, weights: Mapping[str, int]) -> list[tuple[str, int]]:
    result = compute(cleaned, weights)
    if not result.success:
        return []
    return [(record.character, record.value) for record in result.character_breakdown]


def format_calculation(result: CalculationResult | Failure, *, verbose: bool = True) -> str:
    """Render a calculation as plain text, one line per letter."""
    lines: list[str] = []
    if not result.success:
        name = getattr(result, "input_name", None)
        lines.append(f"Calculation failed for '{name}':" if name is not None else "Calculation failed:")
        lines.extend(f"  - {message}" for message in result.errors)
        lines.extend(f"  - {message}" for message in result.warnings)
        return "\n".join(lines)

    if verbose:
        lines.append(f"Name: {result.cleaned_name}")
        lines.append("-" * 40)
        lines.extend(f"  {record.character} = {record.value}" for record in result.character_breakdown)
        lines.append("-" * 40)

    lines.append(f"Total Abjad Value: {result.total_value}")

    if result.warnings:
        lines.append("")
        lines.append("Warnings:")
        lines.extend(f"  - {message}" for message in result.warnings)
    return "\n".join(lines)
