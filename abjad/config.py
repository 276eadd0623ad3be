from __future__ import annotations

import logging
import os
from pathlib import Path

DEFAULT_CATALOG_PATH = str(Path(__file__).resolve().parent / "data" / "asmaul_husna.json")


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _get_bool_env(name: str, default: bool = False) -> bool:
    value = _get_env(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "y", "on"}


def _get_int_env(name: str, default: int) -> int:
    """
    Positive integers only; anything else (unset, garbage, zero, negative)
    falls back to ``default``.
    """
    value = _get_env(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _get_log_level_env(name: str, default: str = "INFO") -> str:
    """Upper-cased level name; names the logging module does not know fall back to ``default``."""
    value = (_get_env(name) or default).upper()
    return value if isinstance(logging.getLevelName(value), int) else default


class Config:
    # Point ABJAD_CATALOG_PATH at another JSON catalog to swap data without code changes.
    CATALOG_PATH = _get_env("ABJAD_CATALOG_PATH", DEFAULT_CATALOG_PATH)

    # Unset means the built-in Abjad table (abjad.letters.ABJAD_VALUES).
    WEIGHTS_PATH = _get_env("ABJAD_WEIGHTS_PATH")

    PAIR_LIMIT = _get_int_env("ABJAD_PAIR_LIMIT", 10)
    STRIP_INTERWORD_SPACES = _get_bool_env("ABJAD_STRIP_INTERWORD_SPACES", False)
    LOG_LEVEL = _get_log_level_env("ABJAD_LOG_LEVEL", "INFO")
