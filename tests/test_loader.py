import json

import pytest
from marshmallow import ValidationError

from abjad.calculator import compute
from abjad.config import DEFAULT_CATALOG_PATH
from abjad.letters import ABJAD_VALUES
from abjad.loader import load_catalog, load_weights, parse_catalog
from abjad.normalizer import normalize


def test_bundled_catalog_loads():
    entities = load_catalog(DEFAULT_CATALOG_PATH)
    assert len(entities) == 99
    assert [e.id for e in entities] == list(range(1, 100))
    first = entities[0]
    assert (first.id, first.english_name, first.abjad_value) == (1, "Ar-Rahman", 329)
    assert all(e.abjad_value > 0 for e in entities)


def test_load_catalog_from_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps([{"id": 3, "arabic_name": "الحي", "english_name": "Al-Hayy", "meaning": "", "abjad_value": 49}]),
        encoding="utf-8",
    )
    [entity] = load_catalog(path)
    assert entity.arabic_name == "الحي"


def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_catalog(tmp_path / "missing.json")


def test_parse_catalog_requires_a_list():
    with pytest.raises(ValidationError):
        parse_catalog({"id": 1})


def test_parse_catalog_trusts_supplied_values():
    # The value does not have to match the name's own Abjad sum.
    [entity] = parse_catalog([{"id": 1, "arabic_name": "ا", "english_name": "A", "abjad_value": 500}])
    assert entity.abjad_value == 500
    assert entity.meaning == ""


def test_load_weights_defaults_to_builtin_table():
    assert load_weights() == dict(ABJAD_VALUES)


def test_load_weights_from_file(tmp_path):
    path = tmp_path / "weights.json"
    path.write_text(json.dumps({"ا": 1, "ب": 2}, ensure_ascii=False), encoding="utf-8")
    assert load_weights(path) == {"ا": 1, "ب": 2}


def test_load_weights_rejects_bad_values(tmp_path):
    path = tmp_path / "weights.json"
    path.write_text(json.dumps({"ا": -1}), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_weights(path)


def test_bundled_catalog_values_match_names():
    mismatched = []
    for entity in load_catalog(DEFAULT_CATALOG_PATH):
        cleaned, report = normalize(entity.arabic_name, strip_interword_spaces=True)
        assert report.success, entity.arabic_name
        result = compute(cleaned, ABJAD_VALUES)
        assert result.warnings == [], entity.arabic_name
        if result.total_value != entity.abjad_value:
            mismatched.append((entity.id, entity.abjad_value, result.total_value))
    assert mismatched == []


def test_parse_catalog_ignores_extra_keys():
    [entity] = parse_catalog(
        [
            {
                "id": 62,
                "arabic_name": "الحي",
                "english_name": "Al-Hayy",
                "transliteration": "al-hayy",
                "abjad_value": 49,
            }
        ]
    )
    assert (entity.id, entity.abjad_value) == (62, 49)
