"""Result records produced per request by the pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .catalog import Entity
from .errors import ErrorKind


@dataclass(frozen=True)
class CharacterRecord:
    position: int
    character: str
    value: int


@dataclass
class NormalizationReport:
    original: str
    success: bool = False
    cleaned: str = ""
    length: int = 0
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    has_diacritics: bool = False
    char_count: int = 0
    error_kind: Optional[ErrorKind] = None


@dataclass
class CalculationResult:
    input_name: str
    success: bool = False
    total_value: int = 0
    cleaned_name: str = ""
    character_breakdown: list[CharacterRecord] = field(default_factory=list)
    char_count: int = 0
    has_diacritics: bool = False
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    error_kind: Optional[ErrorKind] = None


class MatchType(str, Enum):
    DIRECT = "direct"
    PAIR = "pair"


@dataclass(frozen=True)
class PairCombination:
    entity_a: Entity
    entity_b: Entity
    total: int


@dataclass
class MatchResult:
    type: MatchType
    target_value: int
    found: bool = False
    count: int = 0
    entities: list[Entity] = field(default_factory=list)
    combinations: list[PairCombination] = field(default_factory=list)
    elapsed_ms: float = 0.0

    success = True


@dataclass
class Failure:
    """A stage failed; later stages were not run."""

    stage: str
    kind: ErrorKind
    errors: list[str]
    warnings: list[str] = field(default_factory=list)

    success = False

    @property
    def message(self) -> str:
        return "; ".join(self.errors)


@dataclass
class PipelineResult:
    calc: CalculationResult
    match: MatchResult

    success = True


CalculateOutcome = Union[CalculationResult, Failure]
MatchOutcome = Union[MatchResult, Failure]
PipelineOutcome = Union[PipelineResult, Failure]
