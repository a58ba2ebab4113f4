"""
Static catalogs for hiit-circuits.

Exercises, warm-up items and stretches are read-only data loaded once
from bundled YAML files.
"""

from .registry import EXERCISE_CATALOG, STRETCH_CATALOG, WARMUP_CATALOG, get_exercise

__all__ = [
    "EXERCISE_CATALOG",
    "WARMUP_CATALOG",
    "STRETCH_CATALOG",
    "get_exercise",
]
