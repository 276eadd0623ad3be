from __future__ import annotations

import re

from .errors import ErrorKind
from .letters import CHAR_VARIANTS, DIACRITICS, is_script_letter
from .results import NormalizationReport

_WHITESPACE_RE = re.compile(r"\s+")
_VARIANTS_TABLE = str.maketrans(dict(CHAR_VARIANTS))
_INVALID_PREVIEW = 3


def collapse_spaces(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def remove_diacritics(text: str) -> str:
    return "".join(ch for ch in text if ch not in DIACRITICS)


def normalize_variants(text: str) -> str:
    return text.translate(_VARIANTS_TABLE)


def _invalid_characters_message(invalid: list[str]) -> str:
    preview = ", ".join(f"'{ch}'" for ch in invalid[:_INVALID_PREVIEW])
    extra = len(invalid) - _INVALID_PREVIEW
    suffix = f" and {extra} more" if extra > 0 else ""
    return f"Non-Arabic characters found: {preview}{suffix}"


def normalize(raw: str, *, strip_interword_spaces: bool = False) -> tuple[str, NormalizationReport]:
    """
    Clean and validate a user-supplied name.

    - Trims and collapses whitespace
    - Removes Arabic diacritical marks (harakat, tanwin, shadda, ...)
    - Folds Urdu/regional letter variants onto one canonical letter
    - Drops characters outside the Arabic script blocks, reporting them

    Returns ``(cleaned, report)``; ``cleaned`` is empty when ``report.success``
    is false.
    """
    report = NormalizationReport(original=raw)
    if raw is not None and not isinstance(raw, str):
        report.errors.append(f"Input must be string, got {type(raw).__name__}")
        report.error_kind = ErrorKind.INVALID_VALUE
        return "", report

    report.length = len(raw or "")
    text = collapse_spaces(raw or "")
    if not text:
        report.errors.append("Empty input")
        report.error_kind = ErrorKind.EMPTY_INPUT
        return "", report

    if any(ch in DIACRITICS for ch in text):
        report.has_diacritics = True
        text = remove_diacritics(text)
        report.warnings.append("Diacritical marks removed")

    canonical = normalize_variants(text)
    if canonical != text:
        report.warnings.append("Character variants normalized")
    text = canonical

    kept: list[str] = []
    invalid: list[str] = []
    for ch in text:
        if ch == " ":
            if not strip_interword_spaces:
                kept.append(ch)
        elif is_script_letter(ch):
            kept.append(ch)
        else:
            invalid.append(ch)

    if invalid:
        # Reported, but only an empty result fails normalization.
        report.errors.append(_invalid_characters_message(invalid))
        report.error_kind = ErrorKind.INVALID_CHARACTERS

    cleaned = collapse_spaces("".join(kept))
    if not cleaned:
        report.errors.append("No valid Arabic/Urdu characters found")
        report.error_kind = ErrorKind.NO_VALID_CHARACTERS
        return "", report

    report.success = True
    report.cleaned = cleaned
    report.char_count = len(cleaned)
    return cleaned, report


def validate_and_report(raw: str, *, strip_interword_spaces: bool = False) -> tuple[str, str]:
    """Return ``(cleaned, message)`` with a one-line verdict for display."""
    cleaned, report = normalize(raw, strip_interword_spaces=strip_interword_spaces)
    if report.success:
        message = f"Valid input: '{cleaned}' ({report.char_count} characters)"
        if report.warnings:
            message += f"\n   Warnings: {'; '.join(report.warnings)}"
        return cleaned, message

    message = "Invalid input"
    if report.errors:
        message += f": {'; '.join(report.errors)}"
    return "", message
