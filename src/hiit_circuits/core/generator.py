"""
Top-level workout generation.

generate_workout() is the full pipeline: constraint filter → selector →
circuit structurer → sequencer, then a warm-up and cool-down built from the
finished workout are attached.  Preference values (avoidance list,
configured per-item durations) arrive as explicit arguments.

generate_legacy_workout() is the older interval format with no circuit:

  intervals = floor(duration × 60 / (work + rest))
  distinct  = max(3, intervals // 2) balanced picks
  timeline  = the distinct exercises cycled until `intervals` slots
  total     = len(timeline) × (work + rest)
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Iterable, Sequence

from .catalog.registry import EXERCISE_CATALOG
from .circuit import generate_circuit_workout, timing_for_difficulty
from .classifiers import DEFAULT_CLASSIFIER, ExerciseClassifier
from .config import LEGACY_MIN_UNIQUE_EXERCISES
from .cooldown import generate_cooldown
from .filtering import filter_exercises
from .models import (
    CooldownExercise,
    Exercise,
    GeneratedWorkout,
    WarmupExercise,
    WorkoutExercise,
    WorkoutSettings,
)
from .rng import Rng, make_rng
from .selection import select_balanced
from .warmup import generate_warmup

logger = logging.getLogger(__name__)


def cycle_exercises(unique: Sequence[Exercise], slots: int) -> list[Exercise]:
    """Repeat unique in order until slots exercises are listed."""
    if not unique:
        return []
    return [unique[i % len(unique)] for i in range(slots)]


def generate_legacy_workout(
    settings: WorkoutSettings,
    catalog: Iterable[Exercise] | None = None,
    avoided_ids: Iterable[int] = (),
    rng: Rng | None = None,
    classifier: ExerciseClassifier = DEFAULT_CLASSIFIER,
) -> GeneratedWorkout:
    """
    Build a plain interval workout (no circuit, no warm-up or cool-down).

    settings.circuit_type and settings.exercise_count are ignored; the
    number of intervals comes from the duration alone.
    """
    rng = rng or make_rng()
    work, rest = timing_for_difficulty(settings.difficulty)
    interval = work + rest

    pool = filter_exercises(
        EXERCISE_CATALOG if catalog is None else catalog,
        settings.selected_equipment,
        avoided_ids=avoided_ids,
        target_muscle_groups=settings.target_muscle_groups,
        excluded_muscle_groups=settings.excluded_muscle_groups,
        classifier=classifier,
    )

    slots = (settings.duration * 60) // interval
    distinct = max(LEGACY_MIN_UNIQUE_EXERCISES, slots // 2)
    unique = select_balanced(pool, distinct, settings.difficulty, rng)
    logger.debug("legacy workout: %d intervals from %d distinct exercises", slots, len(unique))

    timeline = [
        WorkoutExercise(exercise=ex, duration=work, rest_duration=rest)
        for ex in cycle_exercises(unique, slots)
    ]
    return GeneratedWorkout(
        exercises=timeline,
        total_duration=len(timeline) * interval,
        difficulty=settings.difficulty,
        equipment_used=list(settings.selected_equipment),
    )


def generate_workout(
    settings: WorkoutSettings,
    catalog: Iterable[Exercise] | None = None,
    avoided_ids: Iterable[int] = (),
    rng: Rng | None = None,
    warmup_duration: int | None = None,
    cooldown_duration: int | None = None,
    include_warmup: bool = True,
    include_cooldown: bool = True,
    warmup_catalog: Iterable[WarmupExercise] | None = None,
    stretch_catalog: Iterable[CooldownExercise] | None = None,
    classifier: ExerciseClassifier = DEFAULT_CLASSIFIER,
    legacy: bool = False,
) -> GeneratedWorkout:
    """
    Generate a complete workout.

    Args:
        settings: Generation request
        catalog: Exercises to choose from (bundled catalog if omitted)
        avoided_ids: Exercise ids the user never wants
        rng: Random source
        warmup_duration: Configured per-item warm-up seconds (None = catalog)
        cooldown_duration: Configured per-item cool-down seconds (None = catalog)
        include_warmup: Attach a warm-up routine
        include_cooldown: Attach a cool-down routine
        warmup_catalog: Warm-up items (bundled catalog if omitted)
        stretch_catalog: Stretches (bundled catalog if omitted)
        classifier: Muscle-group and keyword resolver
        legacy: Build the plain interval format instead of a circuit

    Returns:
        GeneratedWorkout with timeline, circuit (unless legacy) and optional
        warm-up/cool-down
    """
    rng = rng or make_rng()
    build = generate_legacy_workout if legacy else generate_circuit_workout
    workout = build(
        settings,
        catalog=catalog,
        avoided_ids=avoided_ids,
        rng=rng,
        classifier=classifier,
    )

    warmup = None
    if include_warmup:
        warmup = generate_warmup(
            workout,
            configured_duration=warmup_duration,
            catalog=warmup_catalog,
            classifier=classifier,
        )
    cooldown = None
    if include_cooldown:
        cooldown = generate_cooldown(
            workout,
            configured_duration=cooldown_duration,
            catalog=stretch_catalog,
        )

    logger.debug(
        "generated %s workout: %d slots, %ds",
        "legacy" if legacy else settings.circuit_type,
        len(workout.exercises),
        workout.total_duration,
    )
    return dataclasses.replace(workout, warmup=warmup, cooldown=cooldown)
