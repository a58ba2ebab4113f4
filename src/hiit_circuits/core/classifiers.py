"""
Tagged-category resolver for exercises and warm-up items.

Every muscle-group question the generators ask goes through one
ExerciseClassifier:

  matches(exercise, group)
      plain group      → primary muscle or tagged group equals it
      "cardio"         → tagged cardio, or a hard full-body move whose name
                         contains a cardio keyword (burpee, jump, ...)
      "core"           → tagged core, or name contains a core keyword
      composite group  → any member matches (config.COMPOSITE_MUSCLE_GROUPS
                         plus any composites defined in classifiers.yaml)

  split(group)
      the two halves a same-group super set should draw from, if any

Keyword lists and composites come from config.py defaults, overridden or
extended by classifiers.yaml.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Mapping

from . import config
from .engine.config_loader import load_classifier_config
from .models import Exercise, WarmupExercise

ExercisePredicate = Callable[[Exercise], bool]


def _name_has(name: str, keywords: Iterable[str]) -> bool:
    lowered = name.lower()
    return any(k in lowered for k in keywords)


@dataclass(frozen=True)
class ExerciseClassifier:
    """Resolves plain, keyword-backed and composite muscle-group names."""

    cardio_keywords: tuple[str, ...] = config.CARDIO_KEYWORDS
    core_keywords: tuple[str, ...] = config.CORE_KEYWORDS
    stretch_keywords: tuple[str, ...] = config.WARMUP_STRETCH_KEYWORDS
    active_keywords: tuple[str, ...] = config.WARMUP_ACTIVE_KEYWORDS
    cardio_min_difficulty: int = config.CARDIO_MIN_DIFFICULTY
    composites: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: dict(config.COMPOSITE_MUSCLE_GROUPS), hash=False
    )

    @classmethod
    def from_config(cls, cfg: dict | None = None) -> "ExerciseClassifier":
        """Build a classifier from a loaded config dict (defaults for missing keys)."""
        if cfg is None:
            cfg = load_classifier_config()

        def _keywords(key: str, default: tuple[str, ...]) -> tuple[str, ...]:
            raw = cfg.get(key)
            if not raw:
                return default
            return tuple(str(k).lower() for k in raw)

        return cls(
            cardio_keywords=_keywords("cardio_keywords", config.CARDIO_KEYWORDS),
            core_keywords=_keywords("core_keywords", config.CORE_KEYWORDS),
            stretch_keywords=_keywords("warmup_stretch_keywords", config.WARMUP_STRETCH_KEYWORDS),
            active_keywords=_keywords("warmup_active_keywords", config.WARMUP_ACTIVE_KEYWORDS),
            composites={**config.COMPOSITE_MUSCLE_GROUPS, **cfg.get("composite_muscle_groups", {})},
        )

    # ------------------------------------------------------------------
    # Keyword-backed categories
    # ------------------------------------------------------------------

    def is_cardio(self, exercise: Exercise) -> bool:
        if exercise.primary_muscle == "cardio" or "cardio" in exercise.muscle_groups:
            return True
        return (
            exercise.difficulty >= self.cardio_min_difficulty
            and exercise.primary_muscle == "full_body"
            and _name_has(exercise.name, self.cardio_keywords)
        )

    def is_core(self, exercise: Exercise) -> bool:
        if exercise.primary_muscle == "core" or "core" in exercise.muscle_groups:
            return True
        return _name_has(exercise.name, self.core_keywords)

    def is_stretch_like(self, item: WarmupExercise) -> bool:
        return _name_has(item.name, self.stretch_keywords)

    def is_active(self, item: WarmupExercise) -> bool:
        return _name_has(item.name, self.active_keywords)

    # ------------------------------------------------------------------
    # Muscle-group resolution
    # ------------------------------------------------------------------

    def matches(self, exercise: Exercise, group: str) -> bool:
        """True if the exercise belongs to the (possibly composite) group."""
        return self._resolve(exercise, group, frozenset())

    def _resolve(self, exercise: Exercise, group: str, expanding: frozenset[str]) -> bool:
        # A composite may list itself ("arms") or form a cycle through user
        # config; a name already being expanded only matches as a tagged group,
        # so "arms" means primary biceps/triceps or an "arms" tag.
        if group in expanding:
            return group in exercise.muscle_groups
        if group in self.composites:
            inner = expanding | {group}
            return any(self._resolve(exercise, m, inner) for m in self.composites[group])
        if group == "cardio":
            return self.is_cardio(exercise)
        if group == "core":
            return self.is_core(exercise)
        return exercise.primary_muscle == group or group in exercise.muscle_groups

    def matches_any(self, exercise: Exercise, groups: Iterable[str]) -> bool:
        return any(self.matches(exercise, g) for g in groups)

    def predicate(self, group: str) -> ExercisePredicate:
        return lambda ex: self.matches(ex, group)

    def split(self, group: str) -> tuple[ExercisePredicate, ExercisePredicate] | None:
        """
        Return predicates for the two halves of a same-group super set.

        None when the group has no natural halves (e.g. "cardio"), in which
        case any two different exercises of the group make the pair.
        """
        halves = config.SUPERSET_SPLITS.get(group)
        if halves is None:
            return None
        first, second = halves
        return (
            lambda ex: self.matches_any(ex, first),
            lambda ex: self.matches_any(ex, second),
        )


DEFAULT_CLASSIFIER: ExerciseClassifier = ExerciseClassifier.from_config()
