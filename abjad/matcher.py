from __future__ import annotations

import logging
import time

from .catalog import CatalogIndex
from .results import MatchResult, MatchType, PairCombination

logger = logging.getLogger(__name__)

DEFAULT_PAIR_LIMIT = 10


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000.0


class Matcher:
    """Finds catalog entities whose value, alone or in pairs, equals a target."""

    def __init__(self, index: CatalogIndex, *, pair_limit: int = DEFAULT_PAIR_LIMIT):
        self.index = index
        self.pair_limit = pair_limit

    def find_direct_match(self, value: int) -> MatchResult:
        started = time.perf_counter()
        result = MatchResult(type=MatchType.DIRECT, target_value=value)

        entities = self.index.entities_for(value)
        if entities:
            result.found = True
            result.count = len(entities)
            result.entities = entities

        result.elapsed_ms = _elapsed_ms(started)
        return result

    def find_pair_combinations(self, value: int, limit: int | None = None) -> MatchResult:
        """
        Find pairs of distinct entities whose values add up to ``value``.

        The partner of each entity is looked up through the value index, so
        the search is linear in the catalog size. ``{A, B}`` and ``{B, A}`` are
        reported once; two different entities with the same value may pair.
        """
        started = time.perf_counter()
        if limit is None:
            limit = self.pair_limit
        result = MatchResult(type=MatchType.PAIR, target_value=value)

        seen: set[tuple[int, int]] = set()
        combinations: list[PairCombination] = []
        for first in self.index:
            for partner_id in self.index.ids_for(value - first.abjad_value):
                if partner_id == first.id:
                    continue
                key = (min(first.id, partner_id), max(first.id, partner_id))
                if key in seen:
                    continue
                seen.add(key)
                combinations.append(
                    PairCombination(entity_a=first, entity_b=self.index.get(partner_id), total=value)
                )

        combinations.sort(key=lambda c: (c.entity_a.id, c.entity_b.id))
        if len(combinations) > limit:
            logger.debug("Truncating %d pair combinations for %d to %d", len(combinations), value, limit)
        result.combinations = combinations[:limit]

        if result.combinations:
            result.found = True
            result.count = len(result.combinations)

        result.elapsed_ms = _elapsed_ms(started)
        return result

    def match(self, value: int) -> MatchResult:
        """Direct match first; the pair search only runs when it finds nothing."""
        direct = self.find_direct_match(value)
        if direct.found:
            return direct
        return self.find_pair_combinations(value)
