from __future__ import annotations

from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load, validate, validates_schema

from .catalog import Entity
from .results import CalculationResult, Failure, MatchResult, PipelineResult


class EntitySchema(Schema):
    class Meta:
        # Catalog files may carry extra display fields; only these are read.
        unknown = EXCLUDE

    id = fields.Integer(required=True, strict=True)
    arabic_name = fields.String(required=True)
    english_name = fields.String(required=True)
    meaning = fields.String(load_default="")
    abjad_value = fields.Integer(required=True, strict=True, validate=validate.Range(min=1))

    @post_load
    def make_entity(self, data, **kwargs):
        return Entity(**data)


class CatalogSchema(Schema):
    """A catalog is an ordered list of entities with unique ids."""

    entities = fields.List(fields.Nested(EntitySchema), required=True)

    @validates_schema
    def validate_unique_ids(self, data, **kwargs):
        seen: set[int] = set()
        duplicates: list[int] = []
        for entity in data.get("entities", []):
            if entity.id in seen:
                duplicates.append(entity.id)
            seen.add(entity.id)
        if duplicates:
            raise ValidationError(f"Duplicate entity ids: {sorted(set(duplicates))}", "entities")


class WeightTableSchema(Schema):
    weights = fields.Dict(
        keys=fields.String(validate=validate.Length(equal=1)),
        values=fields.Integer(strict=True, validate=validate.Range(min=1)),
        required=True,
        validate=validate.Length(min=1),
    )


class CharacterRecordSchema(Schema):
    position = fields.Integer(required=True)
    character = fields.String(required=True)
    value = fields.Integer(required=True)


class CalculationResultSchema(Schema):
    success = fields.Boolean(required=True)
    total_value = fields.Integer(required=True)
    input_name = fields.String(allow_none=True)
    cleaned_name = fields.String(required=True)
    character_breakdown = fields.List(fields.Nested(CharacterRecordSchema))
    char_count = fields.Integer(required=True)
    has_diacritics = fields.Boolean()
    errors = fields.List(fields.String())
    warnings = fields.List(fields.String())


class EntityDumpSchema(Schema):
    id = fields.Integer(required=True)
    arabic_name = fields.String(required=True)
    english_name = fields.String(required=True)
    meaning = fields.String(required=True)
    abjad_value = fields.Integer(required=True)


class PairCombinationSchema(Schema):
    entity_a = fields.Nested(EntityDumpSchema)
    entity_b = fields.Nested(EntityDumpSchema)
    total = fields.Integer(required=True)


class MatchResultSchema(Schema):
    success = fields.Boolean(required=True)
    found = fields.Boolean(required=True)
    type = fields.Function(lambda obj: obj.type.value)
    target_value = fields.Integer(required=True)
    count = fields.Integer(required=True)
    entities = fields.List(fields.Nested(EntityDumpSchema))
    combinations = fields.List(fields.Nested(PairCombinationSchema))
    elapsed_ms = fields.Float(required=True)


class FailureSchema(Schema):
    success = fields.Boolean(required=True)
    stage = fields.String(required=True)
    kind = fields.Function(lambda obj: obj.kind.value)
    errors = fields.List(fields.String())
    warnings = fields.List(fields.String())


class PipelineResultSchema(Schema):
    success = fields.Boolean(required=True)
    calc = fields.Nested(CalculationResultSchema)
    match = fields.Nested(MatchResultSchema)


def dump_outcome(outcome) -> dict:
    """Serialize any result or `Failure` to a plain dict."""
    if isinstance(outcome, Failure):
        return FailureSchema().dump(outcome)
    if isinstance(outcome, PipelineResult):
        return PipelineResultSchema().dump(outcome)
    if isinstance(outcome, MatchResult):
        return MatchResultSchema().dump(outcome)
    if isinstance(outcome, CalculationResult):
        return CalculationResultSchema().dump(outcome)
    raise TypeError(f"Cannot serialize {type(outcome).__name__}")
