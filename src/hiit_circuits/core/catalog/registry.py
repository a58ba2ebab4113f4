"""
Catalog registry.

The exercise, warm-up and stretch catalogs are loaded once at import time
from the bundled YAML files (see loader.py).  A missing or malformed
bundled catalog raises RuntimeError; the engine cannot run without data.

User overrides: place matching files in ``~/.hiit-circuits/catalogs/``.
"""

from ..models import Exercise, WarmupExercise
from .loader import load_exercise_catalog, load_stretch_catalog, load_warmup_catalog

EXERCISE_CATALOG: tuple[Exercise, ...] = tuple(load_exercise_catalog())
WARMUP_CATALOG: tuple[WarmupExercise, ...] = tuple(load_warmup_catalog())
STRETCH_CATALOG: tuple[WarmupExercise, ...] = tuple(load_stretch_catalog())

_BY_ID: dict[int, Exercise] = {ex.id: ex for ex in EXERCISE_CATALOG}


def get_exercise(exercise_id: int) -> Exercise:
    """
    Return the catalog Exercise with the given id.

    Raises:
        ValueError: If exercise_id is not in the catalog
    """
    if exercise_id not in _BY_ID:
        raise ValueError(f"Unknown exercise id {exercise_id}")
    return _BY_ID[exercise_id]
