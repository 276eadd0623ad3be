from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping


@dataclass(frozen=True)
class Entity:
    """A catalog entry (one Divine Name) with its precomputed Abjad value."""

    id: int
    arabic_name: str
    english_name: str
    meaning: str
    abjad_value: int


class CatalogIndex:
    """
    Entities in catalog order plus the value -> ids index used for matching.

    Built once from a complete catalog and never mutated; a reload builds a
    new index.
    """

    def __init__(self, entities: tuple[Entity, ...], by_id: Mapping[int, Entity], by_value: Mapping[int, tuple[int, ...]]):
        self._entities = entities
        self._by_id = by_id
        self._by_value = by_value

    @classmethod
    def build(cls, entities: Iterable[Entity]) -> "CatalogIndex":
        ordered = tuple(entities)
        by_id: dict[int, Entity] = {}
        by_value: dict[int, list[int]] = {}
        for entity in ordered:
            if entity.id in by_id:
                raise ValueError(f"Duplicate entity id {entity.id}")
            by_id[entity.id] = entity
            by_value.setdefault(entity.abjad_value, []).append(entity.id)

        return cls(
            ordered,
            MappingProxyType(by_id),
            MappingProxyType({value: tuple(ids) for value, ids in by_value.items()}),
        )

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def get(self, entity_id: int) -> Entity | None:
        return self._by_id.get(entity_id)

    def ids_for(self, value: int) -> tuple[int, ...]:
        return self._by_value.get(value, ())

    def entities_for(self, value: int) -> list[Entity]:
        return [self._by_id[entity_id] for entity_id in self.ids_for(value)]

    def values(self) -> list[int]:
        return sorted(self._by_value)
