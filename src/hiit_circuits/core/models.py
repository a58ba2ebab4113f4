"""
Data models for hiit-circuits.

All core dataclasses representing catalog items, generation requests,
circuits and the flattened workout timeline.
"""

from dataclasses import dataclass, field
from typing import Literal

from .config import CIRCUIT_TYPES, DIFFICULTIES

Difficulty = Literal["easy", "medium", "hard"]
CircuitType = Literal["classic_cycle", "super_sets"]
FallbackReason = Literal[
    "equipment_unavailable",
    "difficulty_mismatch",
    "no_suitable_alternatives",
    "target_muscle_unavailable",
]


@dataclass(frozen=True)
class Exercise:
    """
    One catalog movement.

    equipment lists alternatives: the exercise is doable when the user has
    any one of them. fallback_reason is set only on regenerated exercises
    that needed a relaxed constraint.
    """

    id: int
    name: str
    instructions: str
    primary_muscle: str
    muscle_groups: tuple[str, ...]
    difficulty: int  # 1-5
    equipment: tuple[str, ...]
    fallback_reason: FallbackReason | None = None

    def __post_init__(self) -> None:
        """Validate exercise data."""
        if not 1 <= self.difficulty <= 5:
            raise ValueError(f"difficulty must be 1-5, got {self.difficulty}")
        if not self.equipment:
            raise ValueError(f"exercise {self.id} lists no equipment")

    @property
    def all_muscles(self) -> set[str]:
        """Primary muscle plus every tagged muscle group."""
        return {self.primary_muscle, *self.muscle_groups}


@dataclass
class WorkoutSettings:
    """A user's generation request."""

    duration: int  # minutes
    difficulty: Difficulty
    selected_equipment: list[str]
    target_muscle_groups: list[str] | None = None
    excluded_muscle_groups: list[str] | None = None
    circuit_type: CircuitType = "classic_cycle"
    exercise_count: int | None = None

    def __post_init__(self) -> None:
        """Validate settings."""
        if self.duration <= 0:
            raise ValueError("duration must be positive")
        if self.difficulty not in DIFFICULTIES:
            raise ValueError(f"Unknown difficulty: {self.difficulty!r}")
        if self.circuit_type not in CIRCUIT_TYPES:
            raise ValueError(f"Unknown circuit type: {self.circuit_type!r}")
        if self.exercise_count is not None and self.exercise_count < 1:
            raise ValueError("exercise_count must be at least 1")


@dataclass
class CircuitStation:
    """One slot in a circuit."""

    id: str
    name: str
    exercises: list[Exercise]
    current_exercise_index: int = 0


@dataclass
class CircuitWorkout:
    """
    Full circuit structure.

    classic_cycle: a single station holding every exercise.
    super_sets: one station per complementary pair, with station_rest_time
    inserted between stations.
    """

    type: CircuitType
    stations: list[CircuitStation]
    rounds: int
    work_time: int
    rest_time: int
    total_duration: int  # seconds
    difficulty: Difficulty
    equipment_used: list[str]
    station_rest_time: int | None = None


@dataclass
class WorkoutExercise:
    """One timed occurrence of an exercise in the flattened timeline."""

    exercise: Exercise
    duration: int  # work seconds
    rest_duration: int
    station_id: str | None = None
    round_number: int | None = None


@dataclass(frozen=True)
class WarmupExercise:
    """One warm-up or stretch item."""

    id: str
    name: str
    instructions: str
    target_body_parts: tuple[str, ...]
    duration: int  # seconds
    equipment: tuple[str, ...] = ("bodyweight",)


# Stretches share the warm-up item shape
CooldownExercise = WarmupExercise


@dataclass
class GeneratedRoutine:
    """A generated warm-up or cool-down."""

    exercises: list[WarmupExercise]
    total_duration: int  # seconds


@dataclass
class GeneratedWorkout:
    """
    Final generation output.

    exercises is derived from circuit by the sequencer whenever a circuit
    is present; mutate the circuit and re-sequence instead of editing it.
    """

    exercises: list[WorkoutExercise]
    total_duration: int  # seconds
    difficulty: Difficulty
    equipment_used: list[str]
    circuit: CircuitWorkout | None = None
    warmup: GeneratedRoutine | None = None
    cooldown: GeneratedRoutine | None = None

    def unique_exercises(self) -> list[Exercise]:
        """Distinct exercises in first-appearance order."""
        seen: set[int] = set()
        result: list[Exercise] = []
        source = (
            [ex for st in self.circuit.stations for ex in st.exercises]
            if self.circuit is not None
            else [we.exercise for we in self.exercises]
        )
        for ex in source:
            if ex.id not in seen:
                seen.add(ex.id)
                result.append(ex)
        return result


@dataclass
class DurationPreferences:
    """Per-item warm-up and cool-down durations configured by the user."""

    warmup_duration: int
    cooldown_duration: int
    last_updated: str = ""


@dataclass
class GenerationInputs:
    """Preference values resolved from storage for one generation call."""

    avoided_ids: set[int] = field(default_factory=set)
    owned_equipment: list[str] = field(default_factory=list)
    warmup_duration: int | None = None
    cooldown_duration: int | None = None
