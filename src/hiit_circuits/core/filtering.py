"""
Constraint filter: reduce the catalog to exercises usable for a request.

Pipeline (each step optional except the first two):
  1. equipment  – any required tag in the substitution-expanded selection
  2. avoidance  – id not in the user's avoid list
  3. targets    – matches ANY requested (possibly composite) group
  4. exclusions – matches NONE of the excluded groups

Pure: no storage reads, deterministic for the same inputs.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from .classifiers import DEFAULT_CLASSIFIER, ExerciseClassifier
from .config import DIFFICULTY_BANDS
from .equipment import expand_equipment, is_equipment_compatible
from .models import Exercise


def filter_exercises(
    catalog: Iterable[Exercise],
    selected_equipment: Iterable[str],
    avoided_ids: Iterable[int] = (),
    target_muscle_groups: Sequence[str] | None = None,
    excluded_muscle_groups: Sequence[str] | None = None,
    classifier: ExerciseClassifier = DEFAULT_CLASSIFIER,
) -> list[Exercise]:
    """
    Return the catalog exercises that satisfy every given constraint.

    Args:
        catalog: Exercises to filter (catalog order is preserved)
        selected_equipment: Equipment ids chosen for this workout
        avoided_ids: Exercise ids the user never wants
        target_muscle_groups: Keep exercises matching any of these
        excluded_muscle_groups: Drop exercises matching any of these
        classifier: Muscle-group resolver

    Returns:
        Filtered exercise pool
    """
    available = expand_equipment(selected_equipment)
    avoided = set(avoided_ids)

    pool = [
        ex for ex in catalog
        if is_equipment_compatible(ex, available) and ex.id not in avoided
    ]
    if target_muscle_groups:
        pool = [ex for ex in pool if classifier.matches_any(ex, target_muscle_groups)]
    if excluded_muscle_groups:
        pool = [ex for ex in pool if not classifier.matches_any(ex, excluded_muscle_groups)]
    return pool


def filter_by_band(pool: Iterable[Exercise], band: Iterable[int]) -> list[Exercise]:
    """Keep exercises whose difficulty is in band."""
    allowed = set(band)
    return [ex for ex in pool if ex.difficulty in allowed]


def filter_by_difficulty(pool: Iterable[Exercise], difficulty: str) -> list[Exercise]:
    """Keep exercises inside the standard band for difficulty."""
    return filter_by_band(pool, DIFFICULTY_BANDS[difficulty])
