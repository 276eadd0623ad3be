"""Reading catalog and weight-table JSON files from disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from marshmallow import ValidationError

from .catalog import Entity
from .letters import ABJAD_VALUES
from .schemas import CatalogSchema, WeightTableSchema

logger = logging.getLogger(__name__)


def _read_json(path: str | Path) -> Any:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def parse_catalog(records: Any) -> list[Entity]:
    """
    Validate raw catalog records (a JSON array of objects).

    Each record needs ``id``, ``arabic_name``, ``english_name``, ``abjad_value``
    and optionally ``meaning``. The value is trusted as given.
    """
    if not isinstance(records, list):
        raise ValidationError("Catalog must be a JSON array of entity records")
    return CatalogSchema().load({"entities": records})["entities"]


def load_catalog(path: str | Path) -> list[Entity]:
    entities = parse_catalog(_read_json(path))
    logger.info("Loaded %d catalog entities from %s", len(entities), path)
    return entities


def load_weights(path: str | Path | None = None) -> dict[str, int]:
    """Load a letter -> value table from JSON, or the built-in table when ``path`` is None."""
    if path is None:
        return dict(ABJAD_VALUES)
    weights = WeightTableSchema().load({"weights": _read_json(path)})["weights"]
    logger.info("Loaded %d abjad letter values from %s", len(weights), path)
    return weights
