"""Context factory.

Kept separate from `abjad/pipeline.py` so the core can be used with in-memory
tables (tests, other callers) without touching the filesystem.
"""

from __future__ import annotations

from .config import Config
from .loader import load_catalog, load_weights
from .pipeline import AbjadContext


def create_context(config: object = Config) -> AbjadContext:
    context = AbjadContext(
        pair_limit=config.PAIR_LIMIT,
        strip_interword_spaces=config.STRIP_INTERWORD_SPACES,
    )
    context.initialize(load_weights(config.WEIGHTS_PATH), load_catalog(config.CATALOG_PATH))
    return context
