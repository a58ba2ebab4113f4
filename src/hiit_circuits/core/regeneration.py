"""
Single-exercise regeneration with progressive constraint relaxation.

Equipment, avoidance and duplicate constraints always hold.  The others
are relaxed one level at a time until some candidate survives:

  level  difficulty      excluded groups  target groups   reason
  0      standard band   applied          applied         (none)
  1      expanded band   applied          applied         equipment_unavailable
  2      any             applied          applied         difficulty_mismatch
  3      any             ignored          applied         no_suitable_alternatives
  4      any             ignored          ignored         target_muscle_unavailable

Below level 3 candidates sharing the replaced exercise's primary muscle
are preferred.  No candidate at any level → None.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from .catalog.registry import EXERCISE_CATALOG
from .circuit import sequence_circuit
from .classifiers import DEFAULT_CLASSIFIER, ExerciseClassifier
from .config import DIFFICULTY_BANDS, EXPANDED_DIFFICULTY_BANDS
from .filtering import filter_by_band, filter_exercises
from .models import Exercise, FallbackReason, GeneratedWorkout, WorkoutSettings
from .rng import Rng, make_rng, pick

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FallbackLevel:
    """One rung of the relaxation ladder."""

    level: int
    bands: dict[str, tuple[int, ...]] | None  # None = no difficulty filter
    apply_excluded: bool
    apply_target: bool
    reason: FallbackReason | None


FALLBACK_LEVELS: tuple[FallbackLevel, ...] = (
    FallbackLevel(0, DIFFICULTY_BANDS, True, True, None),
    FallbackLevel(1, EXPANDED_DIFFICULTY_BANDS, True, True, "equipment_unavailable"),
    FallbackLevel(2, None, True, True, "difficulty_mismatch"),
    FallbackLevel(3, None, False, True, "no_suitable_alternatives"),
    FallbackLevel(4, None, False, False, "target_muscle_unavailable"),
)

# Below this level candidates sharing the primary muscle are preferred
_SAME_MUSCLE_PREFERENCE_BELOW = 3


def candidates_at_level(
    fallback: FallbackLevel,
    current: Exercise,
    settings: WorkoutSettings,
    existing_ids: set[int],
    catalog: Iterable[Exercise],
    avoided_ids: Iterable[int],
    classifier: ExerciseClassifier,
) -> list[Exercise]:
    """Return every replacement candidate allowed at one fallback level."""
    pool = filter_exercises(
        catalog,
        settings.selected_equipment,
        avoided_ids=avoided_ids,
        target_muscle_groups=settings.target_muscle_groups if fallback.apply_target else None,
        excluded_muscle_groups=settings.excluded_muscle_groups if fallback.apply_excluded else None,
        classifier=classifier,
    )
    pool = [ex for ex in pool if ex.id != current.id and ex.id not in existing_ids]
    if fallback.bands is not None:
        pool = filter_by_band(pool, fallback.bands[settings.difficulty])
    return pool


def regenerate_exercise(
    current: Exercise,
    settings: WorkoutSettings,
    existing_exercises: Sequence[Exercise] = (),
    catalog: Iterable[Exercise] | None = None,
    avoided_ids: Iterable[int] = (),
    rng: Rng | None = None,
    classifier: ExerciseClassifier = DEFAULT_CLASSIFIER,
) -> Exercise | None:
    """
    Pick a replacement for current, relaxing constraints as needed.

    Args:
        current: Exercise being replaced
        settings: Current generation request
        existing_exercises: Other exercises in the workout (never returned)
        catalog: Exercises to choose from (bundled catalog if omitted)
        avoided_ids: Exercise ids the user never wants
        rng: Random source
        classifier: Muscle-group resolver

    Returns:
        Replacement tagged with fallback_reason when a relaxed level was
        needed, or None if no level produced a candidate
    """
    rng = rng or make_rng()
    catalog = list(EXERCISE_CATALOG if catalog is None else catalog)
    avoided = set(avoided_ids)
    existing_ids = {ex.id for ex in existing_exercises}

    for fallback in FALLBACK_LEVELS:
        candidates = candidates_at_level(
            fallback, current, settings, existing_ids, catalog, avoided, classifier
        )
        if not candidates:
            continue

        if fallback.level < _SAME_MUSCLE_PREFERENCE_BELOW:
            same_muscle = [ex for ex in candidates if ex.primary_muscle == current.primary_muscle]
            candidates = same_muscle or candidates

        choice = pick(rng, candidates)
        if fallback.level > 0:
            logger.debug(
                "replacement for %s needed fallback level %d (%s)",
                current.name, fallback.level, fallback.reason,
            )
        return dataclasses.replace(choice, fallback_reason=fallback.reason)

    logger.debug("no replacement available for %s", current.name)
    return None


def replace_exercise(
    workout: GeneratedWorkout,
    old_id: int,
    new_exercise: Exercise,
) -> GeneratedWorkout:
    """
    Return a copy of workout with every occurrence of old_id replaced.

    With a circuit, the stations are patched and the timeline re-derived
    so both stay in sync; otherwise each timeline slot is patched.
    """
    if workout.circuit is not None:
        stations = [
            dataclasses.replace(
                st,
                exercises=[new_exercise if ex.id == old_id else ex for ex in st.exercises],
            )
            for st in workout.circuit.stations
        ]
        circuit = dataclasses.replace(workout.circuit, stations=stations)
        return dataclasses.replace(workout, circuit=circuit, exercises=sequence_circuit(circuit))

    timeline = [
        dataclasses.replace(we, exercise=new_exercise) if we.exercise.id == old_id else we
        for we in workout.exercises
    ]
    return dataclasses.replace(workout, exercises=timeline)


def refresh_exercise(
    workout: GeneratedWorkout,
    exercise_id: int,
    settings: WorkoutSettings,
    catalog: Iterable[Exercise] | None = None,
    avoided_ids: Iterable[int] = (),
    rng: Rng | None = None,
    classifier: ExerciseClassifier = DEFAULT_CLASSIFIER,
) -> tuple[GeneratedWorkout, Exercise | None]:
    """
    Regenerate one exercise of workout in place.

    Returns:
        (updated workout, replacement).  When no replacement exists the
        original workout is returned unchanged with None.

    Raises:
        ValueError: If exercise_id is not part of the workout
    """
    unique = workout.unique_exercises()
    current = next((ex for ex in unique if ex.id == exercise_id), None)
    if current is None:
        raise ValueError(f"Exercise {exercise_id} is not in this workout")

    others = [ex for ex in unique if ex.id != exercise_id]
    replacement = regenerate_exercise(
        current,
        settings,
        others,
        catalog=catalog,
        avoided_ids=avoided_ids,
        rng=rng,
        classifier=classifier,
    )
    if replacement is None:
        return workout, None
    return replace_exercise(workout, exercise_id, replacement), replacement
