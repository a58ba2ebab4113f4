"""
Tests for warm-up and cool-down generation.

Bound checks run against the bundled catalogs; ordering and scoring checks
use tiny hand-built catalogs so the greedy passes are easy to follow.
"""

import random

from hiit_circuits.core.body_parts import target_body_parts, workout_muscle_groups
from hiit_circuits.core.circuit import generate_circuit_workout
from hiit_circuits.core.config import (
    COOLDOWN_ALWAYS_TARGET,
    COOLDOWN_BODY_PARTS,
    COOLDOWN_MAX_ITEMS,
    COOLDOWN_MAX_SECONDS,
    COOLDOWN_MIN_SECONDS,
    WARMUP_MAX_SECONDS,
    WARMUP_MIN_SECONDS,
)
from hiit_circuits.core.cooldown import generate_cooldown, score_stretch
from hiit_circuits.core.models import (
    Exercise,
    GeneratedWorkout,
    WarmupExercise,
    WorkoutExercise,
    WorkoutSettings,
)
from hiit_circuits.core.warmup import generate_warmup, score_warmup


def _item(item_id: str, name: str, parts: tuple[str, ...], duration: int = 30) -> WarmupExercise:
    return WarmupExercise(
        id=item_id,
        name=name,
        instructions="",
        target_body_parts=parts,
        duration=duration,
    )


def _empty_workout() -> GeneratedWorkout:
    return GeneratedWorkout(exercises=[], total_duration=0, difficulty="easy", equipment_used=["bodyweight"])


def _generated(seed: int, circuit_type: str = "classic_cycle") -> GeneratedWorkout:
    settings = WorkoutSettings(
        duration=20,
        difficulty="medium",
        selected_equipment=["bodyweight", "dumbbells"],
        circuit_type=circuit_type,  # type: ignore[arg-type]
    )
    return generate_circuit_workout(settings, rng=random.Random(seed))


# =============================================================================
# Body-part mapping
# =============================================================================


class TestBodyParts:
    def test_muscles_from_primary_and_groups(self):
        squat = Exercise(
            id=1,
            name="Squat",
            instructions="",
            primary_muscle="legs",
            muscle_groups=("quadriceps", "glutes"),
            difficulty=1,
            equipment=("bodyweight",),
        )
        workout = GeneratedWorkout(
            exercises=[WorkoutExercise(squat, 45, 15)],
            total_duration=60,
            difficulty="easy",
            equipment_used=["bodyweight"],
        )
        assert workout_muscle_groups(workout) == {"legs", "quadriceps", "glutes"}

    def test_cooldown_targets_always_include_baseline(self):
        parts = target_body_parts(set(), COOLDOWN_BODY_PARTS, COOLDOWN_ALWAYS_TARGET)
        assert parts == {"full_body", "spine", "back"}

    def test_mapped_parts_added(self):
        parts = target_body_parts({"legs"}, COOLDOWN_BODY_PARTS, COOLDOWN_ALWAYS_TARGET)
        assert {"hamstrings", "quadriceps", "calves", "legs"} <= parts


# =============================================================================
# Warm-up
# =============================================================================


class TestWarmup:
    def test_empty_workout_gets_minimum_warmup(self):
        routine = generate_warmup(_empty_workout())
        assert len(routine.exercises) >= 1
        assert routine.total_duration >= WARMUP_MIN_SECONDS

    def test_duration_bounds_for_generated_workouts(self):
        for seed in range(8):
            for circuit_type in ("classic_cycle", "super_sets"):
                routine = generate_warmup(_generated(seed, circuit_type))
                assert WARMUP_MIN_SECONDS <= routine.total_duration <= WARMUP_MAX_SECONDS
                assert routine.total_duration == sum(i.duration for i in routine.exercises)

    def test_no_repeated_items(self):
        routine = generate_warmup(_generated(3))
        ids = [i.id for i in routine.exercises]
        assert len(ids) == len(set(ids))

    def test_scoring_bonuses(self):
        jacks = _item("jacks", "Jumping Jacks", ("full_body", "cardio"))
        scored = score_warmup(jacks, {"full_body", "cardio"})
        assert scored.score == 2 + 2 + 1
        assert scored.targeted == frozenset({"full_body", "cardio"})

    def test_stretch_items_come_first(self):
        catalog = [
            _item("jumping-jacks", "Jumping Jacks", ("full_body", "cardio")),
            _item("arm-circles", "Arm Circles", ("shoulders",)),
        ]
        routine = generate_warmup(_empty_workout(), catalog=catalog)
        assert [i.id for i in routine.exercises] == ["arm-circles", "jumping-jacks"]
        assert routine.total_duration == 60

    def test_top_up_reaches_minimum(self):
        catalog = [
            _item("a", "Easy Flow A", ("full_body",), duration=25),
            _item("b", "Easy Flow B", ("full_body",), duration=25),
            _item("c", "Easy Flow C", ("full_body",), duration=25),
        ]
        routine = generate_warmup(_empty_workout(), catalog=catalog)
        assert routine.total_duration == 75

    def test_configured_duration_overrides(self):
        routine = generate_warmup(_generated(1), configured_duration=30)
        assert all(i.duration == 30 for i in routine.exercises)
        assert routine.total_duration == 30 * len(routine.exercises)

    def test_falls_back_to_full_body_item(self):
        catalog = [
            _item("long-neck", "Long Neck Flow", ("neck",), duration=200),
            _item("long-flow", "Long Flow", ("full_body",), duration=200),
        ]
        routine = generate_warmup(_empty_workout(), catalog=catalog)
        assert [i.id for i in routine.exercises] == ["long-flow"]


# =============================================================================
# Cool-down
# =============================================================================


class TestCooldown:
    def test_empty_workout_bounds(self):
        routine = generate_cooldown(_empty_workout())
        assert len(routine.exercises) >= 1
        assert COOLDOWN_MIN_SECONDS <= routine.total_duration <= COOLDOWN_MAX_SECONDS

    def test_duration_bounds_for_generated_workouts(self):
        for seed in range(8):
            for circuit_type in ("classic_cycle", "super_sets"):
                routine = generate_cooldown(_generated(seed, circuit_type))
                assert COOLDOWN_MIN_SECONDS <= routine.total_duration <= COOLDOWN_MAX_SECONDS

    def test_scoring(self):
        targets = {"full_body", "spine", "back", "hamstrings"}
        long_back = _item("a", "A", ("back", "spine"), duration=45)
        hamstring = _item("b", "B", ("hamstrings", "neck"), duration=30)
        assert score_stretch(long_back, targets) == 1 + 3 + 3 + 1
        assert score_stretch(hamstring, targets) == 1 + 2

    def test_best_stretch_first(self):
        catalog = [
            _item("neck", "Neck", ("neck",), duration=60),
            _item("back", "Back", ("back", "spine"), duration=60),
            _item("wrist", "Wrist", ("wrists",), duration=60),
        ]
        routine = generate_cooldown(_empty_workout(), catalog=catalog)
        assert routine.exercises[0].id == "back"
        assert routine.total_duration == 180

    def test_item_cap_in_first_pass(self):
        catalog = [_item(f"s{i}", f"S{i}", (f"part{i}",), duration=10) for i in range(12)]
        routine = generate_cooldown(_empty_workout(), catalog=catalog)
        # eight items cover new parts, the top-up then adds the rest
        assert len(routine.exercises) == 12
        assert routine.total_duration == 120

    def test_first_pass_stops_at_max_items(self):
        catalog = [_item(f"s{i}", f"S{i}", (f"part{i}",), duration=30) for i in range(12)]
        routine = generate_cooldown(_empty_workout(), catalog=catalog)
        assert len(routine.exercises) == COOLDOWN_MAX_ITEMS
        assert routine.total_duration == 240

    def test_configured_duration_overrides(self):
        routine = generate_cooldown(_generated(2), configured_duration=45)
        assert all(i.duration == 45 for i in routine.exercises)
        assert routine.total_duration == 45 * len(routine.exercises)

    def test_default_when_nothing_fits(self):
        catalog = [_item("huge", "Huge", ("full_body",), duration=500)]
        routine = generate_cooldown(_empty_workout(), catalog=catalog)
        assert [i.id for i in routine.exercises] == ["huge"]
