"""
Cool-down generation.

Stretches are scored against the workout's body parts, with full_body,
spine and back always targeted as baseline recovery areas:

  score = 1
        + 3 per matched essential part (full_body, spine, back)
        + 2 per other matched part
        + 1 if the stretch lasts 45 s or more

One greedy pass in score order takes stretches that add new body parts
(up to 8 items / 480 s), then a top-up pass adds the best remaining ones
until 180 s is reached.
"""

from __future__ import annotations

from typing import Iterable

from .body_parts import finalize_routine, target_body_parts, workout_muscle_groups
from .catalog.registry import STRETCH_CATALOG
from .config import (
    COOLDOWN_ALWAYS_TARGET,
    COOLDOWN_BASE_SCORE,
    COOLDOWN_BODY_PARTS,
    COOLDOWN_ESSENTIAL_SCORE,
    COOLDOWN_LONG_STRETCH_SECONDS,
    COOLDOWN_MAX_ITEMS,
    COOLDOWN_MAX_SECONDS,
    COOLDOWN_MIN_SECONDS,
    COOLDOWN_TARGET_SCORE,
)
from .models import CooldownExercise, GeneratedRoutine, GeneratedWorkout


def score_stretch(stretch: CooldownExercise, targets: set[str]) -> int:
    score = COOLDOWN_BASE_SCORE
    for part in stretch.target_body_parts:
        if part in targets:
            if part in COOLDOWN_ALWAYS_TARGET:
                score += COOLDOWN_ESSENTIAL_SCORE
            else:
                score += COOLDOWN_TARGET_SCORE
    if stretch.duration >= COOLDOWN_LONG_STRETCH_SECONDS:
        score += 1
    return score


def generate_cooldown(
    workout: GeneratedWorkout,
    configured_duration: int | None = None,
    catalog: Iterable[CooldownExercise] | None = None,
) -> GeneratedRoutine:
    """
    Build a cool-down for workout.

    configured_duration works as in generate_warmup: it replaces every
    stretch's duration and drives the total; None keeps catalog durations.
    """
    stretches = list(STRETCH_CATALOG if catalog is None else catalog)
    targets = target_body_parts(
        workout_muscle_groups(workout), COOLDOWN_BODY_PARTS, COOLDOWN_ALWAYS_TARGET
    )
    ranked = sorted(stretches, key=lambda s: -score_stretch(s, targets))

    selected: list[CooldownExercise] = []
    used_parts: set[str] = set()
    total = 0

    for stretch in ranked:
        if len(selected) >= COOLDOWN_MAX_ITEMS or total >= COOLDOWN_MAX_SECONDS:
            break
        if total + stretch.duration > COOLDOWN_MAX_SECONDS:
            continue
        if any(p not in used_parts for p in stretch.target_body_parts) or not selected:
            selected.append(stretch)
            used_parts.update(stretch.target_body_parts)
            total += stretch.duration

    if total < COOLDOWN_MIN_SECONDS:
        chosen = {s.id for s in selected}
        for stretch in ranked:
            if total >= COOLDOWN_MIN_SECONDS:
                break
            if stretch.id in chosen or total + stretch.duration > COOLDOWN_MAX_SECONDS:
                continue
            selected.append(stretch)
            chosen.add(stretch.id)
            total += stretch.duration

    if not selected and stretches:
        selected = [stretches[0]]

    return finalize_routine(selected, configured_duration)
