"""
Saved workout files.

A saved workout is a JSON object holding the generated workout plus the
settings it was generated from, so single exercises can be refreshed
later under the same constraints.
"""

import json
from pathlib import Path

from ..core.models import GeneratedWorkout, WorkoutSettings
from .serializers import (
    ValidationError,
    dict_to_workout,
    settings_from_dict,
    settings_to_dict,
    workout_to_dict,
)


def save_workout(path: str | Path, workout: GeneratedWorkout, settings: WorkoutSettings) -> None:
    """Write workout and its settings to path, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {"settings": settings_to_dict(settings), "workout": workout_to_dict(workout)}
    with open(path, "w") as f:
        json.dump(data, f, indent=2)


def load_workout(path: str | Path) -> tuple[GeneratedWorkout, WorkoutSettings]:
    """
    Load a saved workout.

    Raises:
        FileNotFoundError: If path doesn't exist
        ValidationError: If the file is not a valid workout file
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Workout file not found: {path}")
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Error parsing {path}: {e}") from e

    if not isinstance(data, dict) or "workout" not in data or "settings" not in data:
        raise ValidationError(f"{path} is not a saved workout (needs 'settings' and 'workout')")
    return dict_to_workout(data["workout"]), settings_from_dict(data["settings"])
