"""
JSON serialization for workout data models.

Handles conversion between dataclasses and JSON-compatible dicts.  Keys
are camelCase to match the data model names used by workout files.
"""

from typing import Any, get_args

from ..core.config import (
    CIRCUIT_TYPES,
    DIFFICULTIES,
    ITEM_DURATION_MAX_SECONDS,
    ITEM_DURATION_MIN_SECONDS,
)
from ..core.models import (
    CircuitStation,
    CircuitWorkout,
    Exercise,
    FallbackReason,
    GeneratedRoutine,
    GeneratedWorkout,
    WarmupExercise,
    WorkoutExercise,
    WorkoutSettings,
)

_FALLBACK_REASONS: tuple[str, ...] = get_args(FallbackReason)


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


def validate_difficulty(difficulty: str) -> str:
    """
    Validate difficulty level.

    Raises:
        ValidationError: If difficulty is unknown
    """
    if difficulty not in DIFFICULTIES:
        raise ValidationError(
            f"Invalid difficulty: {difficulty}. Must be one of {DIFFICULTIES}"
        )
    return difficulty


def validate_circuit_type(circuit_type: str) -> str:
    """
    Validate circuit type.

    Raises:
        ValidationError: If circuit type is unknown
    """
    if circuit_type not in CIRCUIT_TYPES:
        raise ValidationError(
            f"Invalid circuitType: {circuit_type}. Must be one of {CIRCUIT_TYPES}"
        )
    return circuit_type


def validate_positive(value: int | float, name: str) -> int | float:
    """
    Validate that a value is positive.

    Raises:
        ValidationError: If value is not positive
    """
    if value <= 0:
        raise ValidationError(f"{name} must be positive, got {value}")
    return value


def validate_item_duration(value: int, name: str) -> int:
    """
    Validate a per-item warm-up / cool-down duration.

    Raises:
        ValidationError: If value is outside the allowed range
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    if not ITEM_DURATION_MIN_SECONDS <= value <= ITEM_DURATION_MAX_SECONDS:
        raise ValidationError(
            f"{name} must be between {ITEM_DURATION_MIN_SECONDS} and {ITEM_DURATION_MAX_SECONDS} seconds, got {value}"
        )
    return value


def _whole_number(value: Any, name: str) -> int:
    """Coerce value to int, rejecting fractions, bools and non-numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValidationError(f"{name} must be a whole number, got {value!r}")
    try:
        number = float(value)
    except ValueError as e:
        raise ValidationError(f"{name} must be a whole number, got {value!r}") from e
    if not number.is_integer():
        raise ValidationError(f"{name} must be a whole number, got {value!r}")
    return int(number)


def _require(data: dict[str, Any], *keys: str) -> None:
    missing = [k for k in keys if k not in data]
    if missing:
        raise ValidationError(f"Missing required field(s): {', '.join(missing)}")


# =============================================================================
# Exercises
# =============================================================================


def exercise_to_dict(exercise: Exercise) -> dict[str, Any]:
    """Convert Exercise to JSON-compatible dict."""
    result: dict[str, Any] = {
        "id": exercise.id,
        "name": exercise.name,
        "instructions": exercise.instructions,
        "primaryMuscle": exercise.primary_muscle,
        "muscleGroups": list(exercise.muscle_groups),
        "difficulty": exercise.difficulty,
        "equipment": list(exercise.equipment),
    }
    if exercise.fallback_reason is not None:
        result["fallbackReason"] = exercise.fallback_reason
    return result


def dict_to_exercise(data: dict[str, Any]) -> Exercise:
    """
    Convert dict to Exercise.

    Raises:
        ValidationError: If data is invalid
    """
    _require(data, "id", "name", "primaryMuscle", "muscleGroups", "difficulty", "equipment")

    reason = data.get("fallbackReason")
    if reason is not None and reason not in _FALLBACK_REASONS:
        raise ValidationError(f"Invalid fallbackReason: {reason}")

    try:
        return Exercise(
            id=int(data["id"]),
            name=data["name"],
            instructions=data.get("instructions", ""),
            primary_muscle=data["primaryMuscle"],
            muscle_groups=tuple(data["muscleGroups"]),
            difficulty=int(data["difficulty"]),
            equipment=tuple(data["equipment"]),
            fallback_reason=reason,
        )
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid exercise {data.get('id')!r}: {e}") from e


def routine_item_to_dict(item: WarmupExercise) -> dict[str, Any]:
    """Convert a warm-up or stretch item to dict."""
    return {
        "id": item.id,
        "name": item.name,
        "instructions": item.instructions,
        "targetBodyParts": list(item.target_body_parts),
        "duration": item.duration,
        "equipment": list(item.equipment),
    }


def dict_to_routine_item(data: dict[str, Any]) -> WarmupExercise:
    """Convert dict to a warm-up or stretch item."""
    _require(data, "id", "name", "targetBodyParts", "duration")
    validate_positive(data["duration"], "duration")
    return WarmupExercise(
        id=str(data["id"]),
        name=data["name"],
        instructions=data.get("instructions", ""),
        target_body_parts=tuple(data["targetBodyParts"]),
        duration=int(data["duration"]),
        equipment=tuple(data.get("equipment", ["bodyweight"])),
    )


def routine_to_dict(routine: GeneratedRoutine) -> dict[str, Any]:
    return {
        "exercises": [routine_item_to_dict(i) for i in routine.exercises],
        "totalDuration": routine.total_duration,
    }


def dict_to_routine(data: dict[str, Any]) -> GeneratedRoutine:
    _require(data, "exercises", "totalDuration")
    return GeneratedRoutine(
        exercises=[dict_to_routine_item(i) for i in data["exercises"]],
        total_duration=int(data["totalDuration"]),
    )


# =============================================================================
# Settings
# =============================================================================


def settings_to_dict(settings: WorkoutSettings) -> dict[str, Any]:
    """Convert WorkoutSettings to dict."""
    result: dict[str, Any] = {
        "duration": settings.duration,
        "difficulty": settings.difficulty,
        "selectedEquipment": list(settings.selected_equipment),
        "circuitType": settings.circuit_type,
    }
    if settings.target_muscle_groups is not None:
        result["targetMuscleGroups"] = list(settings.target_muscle_groups)
    if settings.excluded_muscle_groups is not None:
        result["excludedMuscleGroups"] = list(settings.excluded_muscle_groups)
    if settings.exercise_count is not None:
        result["exerciseCount"] = settings.exercise_count
    return result


def settings_from_dict(data: dict[str, Any]) -> WorkoutSettings:
    """
    Convert dict to WorkoutSettings.

    Raises:
        ValidationError: If data is invalid
    """
    _require(data, "duration", "difficulty", "selectedEquipment")
    duration = validate_positive(_whole_number(data["duration"], "duration"), "duration")
    count = data.get("exerciseCount")
    if count is not None:
        count = validate_positive(_whole_number(count, "exerciseCount"), "exerciseCount")

    return WorkoutSettings(
        duration=duration,
        difficulty=validate_difficulty(data["difficulty"]),  # type: ignore[arg-type]
        selected_equipment=list(data["selectedEquipment"]),
        target_muscle_groups=data.get("targetMuscleGroups"),
        excluded_muscle_groups=data.get("excludedMuscleGroups"),
        circuit_type=validate_circuit_type(data.get("circuitType", "classic_cycle")),  # type: ignore[arg-type]
        exercise_count=count,
    )


# =============================================================================
# Circuits and workouts
# =============================================================================


def circuit_to_dict(circuit: CircuitWorkout) -> dict[str, Any]:
    """Convert CircuitWorkout to dict."""
    result: dict[str, Any] = {
        "type": circuit.type,
        "stations": [
            {
                "id": st.id,
                "name": st.name,
                "exercises": [exercise_to_dict(ex) for ex in st.exercises],
                "currentExerciseIndex": st.current_exercise_index,
            }
            for st in circuit.stations
        ],
        "rounds": circuit.rounds,
        "workTime": circuit.work_time,
        "restTime": circuit.rest_time,
        "totalDuration": circuit.total_duration,
        "difficulty": circuit.difficulty,
        "equipmentUsed": list(circuit.equipment_used),
    }
    if circuit.station_rest_time is not None:
        result["stationRestTime"] = circuit.station_rest_time
    return result


def dict_to_circuit(data: dict[str, Any]) -> CircuitWorkout:
    """
    Convert dict to CircuitWorkout.

    Raises:
        ValidationError: If data is invalid
    """
    _require(data, "type", "stations", "rounds", "workTime", "restTime", "totalDuration", "difficulty")
    stations = []
    for st in data["stations"]:
        _require(st, "id", "name", "exercises")
        stations.append(
            CircuitStation(
                id=st["id"],
                name=st["name"],
                exercises=[dict_to_exercise(ex) for ex in st["exercises"]],
                current_exercise_index=int(st.get("currentExerciseIndex", 0)),
            )
        )
    return CircuitWorkout(
        type=validate_circuit_type(data["type"]),  # type: ignore[arg-type]
        stations=stations,
        rounds=int(validate_positive(data["rounds"], "rounds")),
        work_time=int(data["workTime"]),
        rest_time=int(data["restTime"]),
        station_rest_time=data.get("stationRestTime"),
        total_duration=int(data["totalDuration"]),
        difficulty=validate_difficulty(data["difficulty"]),  # type: ignore[arg-type]
        equipment_used=list(data.get("equipmentUsed", [])),
    )


def workout_exercise_to_dict(we: WorkoutExercise) -> dict[str, Any]:
    result: dict[str, Any] = {
        "exercise": exercise_to_dict(we.exercise),
        "duration": we.duration,
        "restDuration": we.rest_duration,
    }
    if we.station_id is not None:
        result["stationId"] = we.station_id
    if we.round_number is not None:
        result["roundNumber"] = we.round_number
    return result


def dict_to_workout_exercise(data: dict[str, Any]) -> WorkoutExercise:
    _require(data, "exercise", "duration", "restDuration")
    return WorkoutExercise(
        exercise=dict_to_exercise(data["exercise"]),
        duration=int(data["duration"]),
        rest_duration=int(data["restDuration"]),
        station_id=data.get("stationId"),
        round_number=data.get("roundNumber"),
    )


def workout_to_dict(workout: GeneratedWorkout) -> dict[str, Any]:
    """
    Convert GeneratedWorkout to JSON-compatible dict.

    Args:
        workout: GeneratedWorkout to convert

    Returns:
        Dict representation, including circuit, warm-up and cool-down
        when present
    """
    result: dict[str, Any] = {
        "exercises": [workout_exercise_to_dict(we) for we in workout.exercises],
        "totalDuration": workout.total_duration,
        "difficulty": workout.difficulty,
        "equipmentUsed": list(workout.equipment_used),
    }
    if workout.circuit is not None:
        result["circuit"] = circuit_to_dict(workout.circuit)
    if workout.warmup is not None:
        result["warmup"] = routine_to_dict(workout.warmup)
    if workout.cooldown is not None:
        result["cooldown"] = routine_to_dict(workout.cooldown)
    return result


def dict_to_workout(data: dict[str, Any]) -> GeneratedWorkout:
    """
    Convert dict to GeneratedWorkout.

    Args:
        data: Dict from JSON

    Returns:
        GeneratedWorkout instance

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Workout data must be a JSON object")
    _require(data, "exercises", "totalDuration", "difficulty")

    return GeneratedWorkout(
        exercises=[dict_to_workout_exercise(we) for we in data["exercises"]],
        total_duration=int(data["totalDuration"]),
        difficulty=validate_difficulty(data["difficulty"]),  # type: ignore[arg-type]
        equipment_used=list(data.get("equipmentUsed", [])),
        circuit=dict_to_circuit(data["circuit"]) if data.get("circuit") else None,
        warmup=dict_to_routine(data["warmup"]) if data.get("warmup") else None,
        cooldown=dict_to_routine(data["cooldown"]) if data.get("cooldown") else None,
    )
