"""Abjad name calculator: normalize an Arabic/Urdu name, compute its value, match the catalog."""

from __future__ import annotations

from .catalog import CatalogIndex, Entity
from .errors import ErrorKind
from .factory import create_context
from .pipeline import AbjadContext
from .results import (
    CalculationResult,
    CharacterRecord,
    Failure,
    MatchResult,
    MatchType,
    PairCombination,
    PipelineResult,
)

__all__ = [
    "AbjadContext",
    "CalculationResult",
    "CatalogIndex",
    "CharacterRecord",
    "Entity",
    "ErrorKind",
    "Failure",
    "MatchResult",
    "MatchType",
    "PairCombination",
    "PipelineResult",
    "create_context",
]
