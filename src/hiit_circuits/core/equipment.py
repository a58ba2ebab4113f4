"""
Equipment catalog and compatibility rules.

Exercises list the equipment they can be done with; an exercise is usable
when any of its tags is in the user's selection after substitutions are
applied (e.g. owning a bench/step covers weight-bench exercises).
"""

from __future__ import annotations

from typing import Iterable

from .config import BODYWEIGHT, EQUIPMENT_SUBSTITUTIONS
from .models import Exercise


# ---------------------------------------------------------------------------
# Equipment catalog
# Each item: {label, category}
# ---------------------------------------------------------------------------

EQUIPMENT_CATALOG: dict[str, dict] = {
    "bodyweight": {"label": "Bodyweight only", "category": "core"},
    "dumbbells": {"label": "Dumbbells", "category": "weights"},
    "kettlebell": {"label": "Kettlebell", "category": "weights"},
    "weight_plates": {"label": "Weight plates", "category": "weights"},
    "ankle_weights": {"label": "Ankle weights", "category": "weights"},
    "weight_bench": {"label": "Weight bench", "category": "weights"},
    "resistance_bands": {"label": "Resistance bands", "category": "resistance"},
    "resistance_loops": {"label": "Resistance loops", "category": "resistance"},
    "suspension_trainer": {"label": "Suspension trainer", "category": "resistance"},
    "jump_rope": {"label": "Jump rope", "category": "cardio"},
    "battle_ropes": {"label": "Battle ropes", "category": "cardio"},
    "medicine_ball": {"label": "Medicine ball", "category": "accessories"},
    "slam_ball": {"label": "Slam ball", "category": "accessories"},
    "stability_ball": {"label": "Stability ball", "category": "accessories"},
    "bosu_ball": {"label": "BOSU ball", "category": "accessories"},
    "pull_up_bar": {"label": "Pull-up bar", "category": "accessories"},
    "bench_step": {"label": "Bench / step", "category": "accessories"},
    "parallette_bars": {"label": "Parallette bars", "category": "accessories"},
    "yoga_mat": {"label": "Yoga mat", "category": "accessories"},
    "ab_wheel": {"label": "Ab wheel", "category": "accessories"},
}


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def expand_equipment(selected: Iterable[str]) -> set[str]:
    """
    Return the selection plus every substitution it implies.

    Args:
        selected: Equipment ids the user has for this workout

    Returns:
        Expanded set of equipment ids
    """
    expanded = set(selected)
    for item in list(expanded):
        expanded.update(EQUIPMENT_SUBSTITUTIONS.get(item, ()))
    return expanded


def is_equipment_compatible(exercise: Exercise, available: set[str]) -> bool:
    """True if any of the exercise's equipment tags is available."""
    return any(tag in available for tag in exercise.equipment)


def normalize_selection(selected: Iterable[str]) -> list[str]:
    """
    Deduplicate a selection, keeping order, with bodyweight always present.

    Raises:
        ValueError: If an id is not in EQUIPMENT_CATALOG
    """
    result: list[str] = [BODYWEIGHT]
    for item in selected:
        if item not in EQUIPMENT_CATALOG:
            valid = ", ".join(EQUIPMENT_CATALOG)
            raise ValueError(f"Unknown equipment '{item}'. Valid IDs: {valid}")
        if item not in result:
            result.append(item)
    return result
