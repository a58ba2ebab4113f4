"""
Warm-up generation.

Warm-up items are scored against the body parts the workout will load:

  score = |item parts ∩ target parts| + 2 if full_body + 1 if cardio

Ties go to the shorter item.  Selection then runs three greedy passes
within a 60–180 s budget:

  1. mobility  – stretch-like items (name keywords) while total < 40% of
                 the maximum; taken if they add body-part coverage or the
                 total is still under 30% of the minimum
  2. activation – active items (jack, knee, squat, ...) while total < max;
                 taken if they add coverage or the minimum is not reached
  3. top-up    – highest-scoring unused items until the minimum is reached

An empty selection falls back to one full-body item.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .body_parts import finalize_routine, target_body_parts, workout_muscle_groups
from .catalog.registry import WARMUP_CATALOG
from .classifiers import DEFAULT_CLASSIFIER, ExerciseClassifier
from .config import (
    WARMUP_ALWAYS_TARGET,
    WARMUP_BODY_PARTS,
    WARMUP_CARDIO_BONUS,
    WARMUP_FULL_BODY_BONUS,
    WARMUP_MAX_SECONDS,
    WARMUP_MIN_SECONDS,
    WARMUP_MIN_STRETCH_SHARE,
    WARMUP_STRETCH_SHARE,
)
from .models import GeneratedRoutine, GeneratedWorkout, WarmupExercise


@dataclass
class ScoredItem:
    item: WarmupExercise
    score: int
    targeted: frozenset[str]


def score_warmup(item: WarmupExercise, targets: set[str]) -> ScoredItem:
    targeted = frozenset(p for p in item.target_body_parts if p in targets)
    score = len(targeted)
    if "full_body" in item.target_body_parts:
        score += WARMUP_FULL_BODY_BONUS
    if "cardio" in item.target_body_parts:
        score += WARMUP_CARDIO_BONUS
    return ScoredItem(item=item, score=score, targeted=targeted)


class _Budget:
    """Running selection with coverage tracking."""

    def __init__(self) -> None:
        self.selected: list[WarmupExercise] = []
        self.ids: set[str] = set()
        self.covered: set[str] = set()
        self.total = 0

    def fits(self, item: WarmupExercise) -> bool:
        return item.id not in self.ids and self.total + item.duration <= WARMUP_MAX_SECONDS

    def adds_coverage(self, scored: ScoredItem) -> bool:
        return any(p not in self.covered for p in scored.targeted)

    def add(self, scored: ScoredItem) -> None:
        self.selected.append(scored.item)
        self.ids.add(scored.item.id)
        self.covered |= scored.targeted
        self.total += scored.item.duration


def generate_warmup(
    workout: GeneratedWorkout,
    configured_duration: int | None = None,
    catalog: Iterable[WarmupExercise] | None = None,
    classifier: ExerciseClassifier = DEFAULT_CLASSIFIER,
) -> GeneratedRoutine:
    """
    Build a warm-up for workout.

    Args:
        workout: Circuit-based or plain generated workout
        configured_duration: User's per-item warm-up seconds; replaces every
            item's duration and sets total = count × configured_duration.
            None keeps the catalog durations.
        catalog: Warm-up items (bundled catalog if omitted)
        classifier: Supplies the stretch-like / active name keywords

    Returns:
        GeneratedRoutine
    """
    items = list(WARMUP_CATALOG if catalog is None else catalog)
    targets = target_body_parts(
        workout_muscle_groups(workout), WARMUP_BODY_PARTS, WARMUP_ALWAYS_TARGET
    )

    scored = [score_warmup(item, targets) for item in items]
    scored.sort(key=lambda s: (-s.score, s.item.duration))

    stretches = [s for s in scored if classifier.is_stretch_like(s.item)]
    actives = [s for s in scored if classifier.is_active(s.item)]

    budget = _Budget()

    for s in stretches:
        if budget.total >= WARMUP_MAX_SECONDS * WARMUP_STRETCH_SHARE:
            break
        needs_time = budget.total < WARMUP_MIN_SECONDS * WARMUP_MIN_STRETCH_SHARE
        if (budget.adds_coverage(s) or needs_time) and budget.fits(s.item):
            budget.add(s)

    for s in actives:
        if budget.total >= WARMUP_MAX_SECONDS:
            break
        needs_time = budget.total < WARMUP_MIN_SECONDS
        if (budget.adds_coverage(s) or needs_time) and budget.fits(s.item):
            budget.add(s)

    for s in scored:
        if budget.total >= WARMUP_MIN_SECONDS:
            break
        if budget.fits(s.item):
            budget.add(s)

    selected = budget.selected
    if not selected and items:
        default = next((i for i in items if "full_body" in i.target_body_parts), items[0])
        selected = [default]

    return finalize_routine(selected, configured_duration)
