"""Helpers shared by the warm-up and cool-down generators."""

from __future__ import annotations

import dataclasses
from typing import Mapping, Sequence

from .models import GeneratedRoutine, GeneratedWorkout, WarmupExercise


def workout_muscle_groups(workout: GeneratedWorkout) -> set[str]:
    """Union of primary muscle and tagged groups over every workout exercise."""
    groups: set[str] = set()
    if workout.circuit is not None:
        for station in workout.circuit.stations:
            for ex in station.exercises:
                groups |= ex.all_muscles
    for we in workout.exercises:
        groups |= we.exercise.all_muscles
    return groups


def target_body_parts(
    muscle_groups: set[str],
    mapping: Mapping[str, Sequence[str]],
    always: Sequence[str],
) -> set[str]:
    """Map workout muscle groups to body parts, plus the always-on targets."""
    parts = set(always)
    for group in muscle_groups:
        parts.update(mapping.get(group, ()))
    return parts


def finalize_routine(
    selected: list[WarmupExercise],
    configured_duration: int | None,
) -> GeneratedRoutine:
    """
    Apply the configured per-item duration and total the routine.

    Without a configured duration the catalog durations are kept.
    """
    if configured_duration is None:
        return GeneratedRoutine(
            exercises=list(selected),
            total_duration=sum(item.duration for item in selected),
        )
    items = [dataclasses.replace(item, duration=configured_duration) for item in selected]
    return GeneratedRoutine(exercises=items, total_duration=len(items) * configured_duration)
