"""
Circuit structuring and sequencing.

Both circuit types use rounds = max(1, floor(total_seconds / round_seconds)):

  classic_cycle  one station holding every exercise
                 round_seconds = (work + rest) × exercises selected
  super_sets     exercise_count // 2 stations of complementary pairs
                 round_seconds = (work + rest) × exercises in stations
                                 + station_rest × (stations − 1)

Timing counts the exercises actually placed, so a short pool gives a
shorter round and total_duration always equals rounds × round_seconds.

The flattened timeline is always derived from the circuit by
sequence_circuit(); it is never edited in place.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .catalog.registry import EXERCISE_CATALOG
from .classifiers import DEFAULT_CLASSIFIER, ExerciseClassifier
from .config import DEFAULT_EXERCISE_COUNT, STATION_REST_SECONDS, WORK_REST_SECONDS
from .filtering import filter_exercises
from .models import (
    CircuitStation,
    CircuitWorkout,
    Exercise,
    GeneratedWorkout,
    WorkoutExercise,
    WorkoutSettings,
)
from .rng import Rng, make_rng
from .selection import select_balanced, select_complementary

logger = logging.getLogger(__name__)


def timing_for_difficulty(difficulty: str) -> tuple[int, int]:
    """Return (work_seconds, rest_seconds) for a difficulty."""
    return WORK_REST_SECONDS[difficulty]


def _rounds_for(duration_minutes: int, round_seconds: int) -> int:
    """Whole rounds that fit in the workout; at least one."""
    if round_seconds <= 0:
        return 1
    return max(1, (duration_minutes * 60) // round_seconds)


def build_classic_circuit(
    pool: Sequence[Exercise],
    settings: WorkoutSettings,
    rng: Rng,
) -> CircuitWorkout:
    """Single rotating station of balanced exercises."""
    count = settings.exercise_count or DEFAULT_EXERCISE_COUNT
    work, rest = timing_for_difficulty(settings.difficulty)
    exercises = select_balanced(pool, count, settings.difficulty, rng)

    # A short pool may yield fewer exercises than requested
    round_seconds = (work + rest) * len(exercises)
    rounds = _rounds_for(settings.duration, round_seconds)

    station = CircuitStation(id="main-circuit", name="Classic Circuit", exercises=exercises)
    return CircuitWorkout(
        type="classic_cycle",
        stations=[station],
        rounds=rounds,
        work_time=work,
        rest_time=rest,
        total_duration=rounds * round_seconds,
        difficulty=settings.difficulty,
        equipment_used=list(settings.selected_equipment),
    )


def build_super_sets(
    pool: Sequence[Exercise],
    settings: WorkoutSettings,
    rng: Rng,
    classifier: ExerciseClassifier = DEFAULT_CLASSIFIER,
) -> CircuitWorkout:
    """Stations of complementary pairs, each repeated in place every round."""
    count = settings.exercise_count or DEFAULT_EXERCISE_COUNT
    even_count = max(2, count - count % 2)
    num_stations = even_count // 2
    work, rest = timing_for_difficulty(settings.difficulty)

    exercises = select_complementary(
        pool,
        even_count,
        settings.difficulty,
        rng,
        target_muscle_groups=settings.target_muscle_groups,
        classifier=classifier,
    )

    stations: list[CircuitStation] = []
    for i in range(num_stations):
        pair = exercises[i * 2: i * 2 + 2]
        if not pair:
            break
        stations.append(
            CircuitStation(id=f"superset-{i + 1}", name=f"Super Set {i + 1}", exercises=pair)
        )
    if len(stations) < num_stations:
        logger.debug("only %d of %d super-set stations could be filled", len(stations), num_stations)

    # Timed from the stations actually filled
    slots = sum(len(st.exercises) for st in stations)
    round_seconds = (work + rest) * slots + STATION_REST_SECONDS * max(0, len(stations) - 1)
    rounds = _rounds_for(settings.duration, round_seconds)

    return CircuitWorkout(
        type="super_sets",
        stations=stations,
        rounds=rounds,
        work_time=work,
        rest_time=rest,
        station_rest_time=STATION_REST_SECONDS,
        total_duration=rounds * round_seconds,
        difficulty=settings.difficulty,
        equipment_used=list(settings.selected_equipment),
    )


def build_circuit(
    pool: Sequence[Exercise],
    settings: WorkoutSettings,
    rng: Rng,
    classifier: ExerciseClassifier = DEFAULT_CLASSIFIER,
) -> CircuitWorkout:
    """Dispatch on settings.circuit_type."""
    if settings.circuit_type == "super_sets":
        return build_super_sets(pool, settings, rng, classifier)
    return build_classic_circuit(pool, settings, rng)


def sequence_circuit(circuit: CircuitWorkout) -> list[WorkoutExercise]:
    """
    Flatten a circuit into the ordered exercise timeline.

    classic_cycle is round-major: every station's exercises once per round.
    super_sets is station-major: a station's pair is repeated for every
    round (A, B, A, B, ...) before moving to the next station.
    """

    def _slot(exercise: Exercise, station: CircuitStation, round_idx: int) -> WorkoutExercise:
        return WorkoutExercise(
            exercise=exercise,
            duration=circuit.work_time,
            rest_duration=circuit.rest_time,
            station_id=station.id,
            round_number=round_idx + 1,
        )

    timeline: list[WorkoutExercise] = []
    if circuit.type == "super_sets":
        for station in circuit.stations:
            for r in range(circuit.rounds):
                timeline.extend(_slot(ex, station, r) for ex in station.exercises)
    else:
        for r in range(circuit.rounds):
            for station in circuit.stations:
                timeline.extend(_slot(ex, station, r) for ex in station.exercises)
    return timeline


def generate_circuit_workout(
    settings: WorkoutSettings,
    catalog: Iterable[Exercise] | None = None,
    avoided_ids: Iterable[int] = (),
    rng: Rng | None = None,
    classifier: ExerciseClassifier = DEFAULT_CLASSIFIER,
) -> GeneratedWorkout:
    """
    Build a circuit workout (no warm-up or cool-down).

    Args:
        settings: Generation request
        catalog: Exercises to choose from (bundled catalog if omitted)
        avoided_ids: Exercise ids the user never wants
        rng: Random source
        classifier: Muscle-group resolver

    Returns:
        GeneratedWorkout with circuit and its derived timeline
    """
    rng = rng or make_rng()
    pool = filter_exercises(
        EXERCISE_CATALOG if catalog is None else catalog,
        settings.selected_equipment,
        avoided_ids=avoided_ids,
        target_muscle_groups=settings.target_muscle_groups,
        excluded_muscle_groups=settings.excluded_muscle_groups,
        classifier=classifier,
    )
    logger.debug("filtered pool: %d exercises", len(pool))

    circuit = build_circuit(pool, settings, rng, classifier)
    return GeneratedWorkout(
        exercises=sequence_circuit(circuit),
        total_duration=circuit.total_duration,
        difficulty=settings.difficulty,
        equipment_used=list(settings.selected_equipment),
        circuit=circuit,
    )
