import sys
from pathlib import Path

# Ensure the root of the repository is on PYTHONPATH
sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from abjad.pipeline import AbjadContext


@pytest.fixture
def weights() -> dict[str, int]:
    return {"ا": 1, "ل": 30, "ه": 5, "م": 40, "ح": 8, "د": 4}


@pytest.fixture
def catalog_records() -> list[dict]:
    return [
        {"id": 1, "arabic_name": "الله", "english_name": "Allah", "meaning": "God", "abjad_value": 66},
        {"id": 2, "arabic_name": "الملك", "english_name": "Al-Malik", "meaning": "The King", "abjad_value": 121},
        {"id": 3, "arabic_name": "الحي", "english_name": "Al-Hayy", "meaning": "The Ever-Living", "abjad_value": 49},
        {"id": 4, "arabic_name": "الواحد", "english_name": "Al-Wahid", "meaning": "The One", "abjad_value": 50},
        {"id": 5, "arabic_name": "الاحد", "english_name": "Al-Ahad", "meaning": "The Unique", "abjad_value": 44},
        {"id": 6, "arabic_name": "ودود", "english_name": "Wadud", "meaning": "Loving", "abjad_value": 20},
    ]


@pytest.fixture
def context(weights, catalog_records) -> AbjadContext:
    ctx = AbjadContext()
    ctx.initialize(weights, catalog_records)
    return ctx
