"""The context handle every caller goes through: initialize, calculate, match."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from .calculator import compute
from .catalog import CatalogIndex, Entity
from .errors import AbjadError, ErrorKind, InvalidValue, UninitializedTable
from .matcher import DEFAULT_PAIR_LIMIT, Matcher
from .normalizer import normalize
from .results import (
    CalculateOutcome,
    Failure,
    MatchOutcome,
    PipelineOutcome,
    PipelineResult,
)
from .schemas import CatalogSchema, EntitySchema, WeightTableSchema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _State:
    weights: Mapping[str, int]
    index: CatalogIndex
    matcher: Matcher


def _coerce_value(value: Any) -> int:
    if value is None:
        raise InvalidValue("Abjad value is required")
    if isinstance(value, bool):
        raise InvalidValue("Abjad value must be a number")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise InvalidValue("Abjad value must be a number") from None


def _load_entities(catalog: Iterable[Entity | Mapping[str, Any]]) -> list[Entity]:
    records = list(catalog)
    if all(isinstance(record, Entity) for record in records):
        # Already typed; still go through the schema for the unique-id check.
        records = EntitySchema(many=True).dump(records)
    return CatalogSchema().load({"entities": records})["entities"]


class AbjadContext:
    """
    Holds the Abjad weight table and the catalog index for one session.

    Build one at start-up (see `abjad.factory.create_context`) and pass it to
    whoever needs it. Reads never lock: each call takes one snapshot of the
    current state. `initialize` builds a complete replacement state before
    swapping it in, so a reload is never observed half-done; concurrent
    reloads run one at a time.
    """

    def __init__(self, *, pair_limit: int = DEFAULT_PAIR_LIMIT, strip_interword_spaces: bool = False):
        self.pair_limit = pair_limit
        self.strip_interword_spaces = strip_interword_spaces
        self._state: _State | None = None
        self._reload_lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._state is not None

    def _snapshot(self) -> _State:
        state = self._state
        if state is None:
            raise UninitializedTable("Abjad values not loaded. Call initialize() first.")
        return state

    def initialize(self, weight_table: Mapping[str, int], catalog: Iterable[Entity | Mapping[str, Any]]) -> None:
        """
        Load (or reload) the weight table and catalog.

        Raises `marshmallow.ValidationError` on malformed data; the previous
        state, if any, stays in place.
        """
        with self._reload_lock:
            weights = WeightTableSchema().load({"weights": dict(weight_table)})["weights"]
            index = CatalogIndex.build(_load_entities(catalog))
            self._state = _State(
                weights=MappingProxyType(weights),
                index=index,
                matcher=Matcher(index, pair_limit=self.pair_limit),
            )

        logger.info("Loaded %d abjad letter values", len(weights))
        logger.info("Loaded %d catalog entities", len(index))
        logger.info("Built index with %d unique abjad values", len(index.values()))

    def letter_value(self, letter: str) -> int | None:
        return self._snapshot().weights.get(letter)

    def entities_for_value(self, value: int) -> list[Entity]:
        return self._snapshot().index.entities_for(value)

    def _calculate(self, state: _State, raw_name: str) -> CalculateOutcome:
        cleaned, report = normalize(raw_name, strip_interword_spaces=self.strip_interword_spaces)
        if not report.success:
            logger.debug("Normalization failed for %r: %s", raw_name, report.errors)
            return Failure(
                stage="normalize",
                kind=report.error_kind,
                errors=report.errors,
                warnings=report.warnings,
            )

        result = compute(cleaned, state.weights, input_name=raw_name)
        if not result.success:
            logger.debug("Calculation failed for %r: %s", cleaned, result.errors)
            return Failure(
                stage="calculate",
                kind=result.error_kind or ErrorKind.NO_VALID_LETTERS,
                errors=result.errors,
                warnings=report.warnings + result.warnings,
            )

        # A successful result carries no errors; characters the normalizer
        # dropped are passed on as warnings.
        result.warnings = report.warnings + report.errors + result.warnings
        result.has_diacritics = report.has_diacritics
        return result

    def calculate(self, raw_name: str) -> CalculateOutcome:
        try:
            state = self._snapshot()
        except AbjadError as e:
            return Failure(stage="calculate", kind=e.kind, errors=[str(e)])
        return self._calculate(state, raw_name)

    def match(self, value: Any) -> MatchOutcome:
        try:
            state = self._snapshot()
            target = _coerce_value(value)
        except AbjadError as e:
            return Failure(stage="match", kind=e.kind, errors=[str(e)])
        return state.matcher.match(target)

    def run_pipeline(self, raw_name: str) -> PipelineOutcome:
        """Normalize, calculate and match against one snapshot; the first failing stage ends the run."""
        try:
            state = self._snapshot()
        except AbjadError as e:
            return Failure(stage="calculate", kind=e.kind, errors=[str(e)])

        calc = self._calculate(state, raw_name)
        if not calc.success:
            return calc
        return PipelineResult(calc=calc, match=state.matcher.match(calc.total_value))
