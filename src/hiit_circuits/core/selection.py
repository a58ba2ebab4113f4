"""
Exercise selection from a filtered pool.

Balanced selection
------------------
  1. narrow to the difficulty band (easy 1-3, medium 2-4, hard 3-5);
     an empty band falls back to the first `count` exercises of the pool
  2. group by primary muscle (first-appearance order)
  3. round-robin over the groups, one random pick per visit, skipping
     exhausted groups, until `count` picks or 3 × groups visits
  4. any remaining slots get a random sample of what is left

Complementary selection (super sets)
------------------------------------
Walk an ordered list of muscle-group pairing rules and take one exercise
per side for each rule until `count` exercises are collected.  Same-group
rules ("cardio"+"cardio", "arms"+"arms", ...) take two different exercises,
one from each half when the group has halves, and fall back to repeating a
single exercise.  Shortfalls are filled by balanced selection.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .classifiers import DEFAULT_CLASSIFIER, ExerciseClassifier
from .config import COMPLEMENTARY_PAIRS, MUSCLE_CYCLE_FACTOR
from .filtering import filter_by_difficulty
from .models import Exercise
from .rng import Rng, make_rng, pick, shuffled

logger = logging.getLogger(__name__)

PairRule = tuple[str, str]


def select_balanced(
    pool: Sequence[Exercise],
    count: int,
    difficulty: str,
    rng: Rng | None = None,
) -> list[Exercise]:
    """
    Pick up to count distinct exercises rotating across primary muscles.

    Args:
        pool: Filtered exercises
        count: Number wanted
        difficulty: "easy" | "medium" | "hard"
        rng: Random source (fresh unseeded one if omitted)

    Returns:
        At most count exercises with no repeated ids
    """
    rng = rng or make_rng()
    if count <= 0:
        return []

    suitable = filter_by_difficulty(pool, difficulty)
    if not suitable:
        logger.debug("no %s exercises in pool of %d; using pool order", difficulty, len(pool))
        return _dedupe(pool)[:count]

    by_muscle: dict[str, list[Exercise]] = {}
    for ex in suitable:
        by_muscle.setdefault(ex.primary_muscle, []).append(ex)
    muscles = list(by_muscle)

    selected: list[Exercise] = []
    chosen: set[int] = set()
    visits = 0
    limit = len(muscles) * MUSCLE_CYCLE_FACTOR
    total_distinct = len({ex.id for ex in suitable})

    while len(selected) < count and len(selected) < total_distinct:
        group = by_muscle[muscles[visits % len(muscles)]]
        remaining = [ex for ex in group if ex.id not in chosen]
        if remaining:
            ex = pick(rng, remaining)
            selected.append(ex)
            chosen.add(ex.id)
        visits += 1

        if visits >= limit:
            leftovers = _dedupe([ex for ex in suitable if ex.id not in chosen])
            selected.extend(shuffled(rng, leftovers)[: count - len(selected)])
            break

    return selected


def build_pair_rules(target_muscle_groups: Sequence[str] | None = None) -> list[PairRule]:
    """
    Return the pairing rules to walk for the given targets.

    Exactly four targets: pairs built from the targets themselves (known
    complementary matches first, then leftovers two at a time, then a
    self-pair for an odd one out).  Other non-empty targets: the default
    rules reordered so rules mentioning a target come first.
    """
    default = list(COMPLEMENTARY_PAIRS)
    if not target_muscle_groups:
        return default

    if len(target_muscle_groups) == 4:
        remaining = list(target_muscle_groups)
        rules: list[PairRule] = []
        for a, b in default:
            if a != b and a in remaining and b in remaining:
                rules.append((a, b))
                remaining.remove(a)
                remaining.remove(b)
        while len(remaining) >= 2:
            a = remaining.pop()
            b = remaining.pop()
            rules.append((a, b))
        if remaining:
            rules.append((remaining[0], remaining[0]))
        return rules

    targets = set(target_muscle_groups)
    preferred = [r for r in default if r[0] in targets or r[1] in targets]
    return preferred + [r for r in default if r not in preferred]


def _pick_same_group(
    group: str,
    candidates: list[Exercise],
    rng: Rng,
    classifier: ExerciseClassifier,
) -> list[Exercise]:
    halves = classifier.split(group)
    if halves is not None:
        first = [ex for ex in candidates if halves[0](ex)]
        if first:
            a = pick(rng, first)
            second = [ex for ex in candidates if halves[1](ex) and ex.id != a.id]
            if second:
                return [a, pick(rng, second)]

    if len(candidates) >= 2:
        return shuffled(rng, candidates)[:2]
    if candidates:
        # One exercise left in this category: repeat it
        return [candidates[0], candidates[0]]
    return []


def select_complementary(
    pool: Sequence[Exercise],
    count: int,
    difficulty: str,
    rng: Rng | None = None,
    target_muscle_groups: Sequence[str] | None = None,
    classifier: ExerciseClassifier = DEFAULT_CLASSIFIER,
) -> list[Exercise]:
    """
    Pick count exercises ordered as consecutive super-set pairs.

    The result may contain the same exercise twice in a row when a pairing
    rule had only one candidate; it never exceeds count.
    """
    rng = rng or make_rng()
    suitable = filter_by_difficulty(pool, difficulty) or list(pool)

    selected: list[Exercise] = []
    chosen: set[int] = set()

    for first, second in build_pair_rules(target_muscle_groups):
        if len(selected) >= count:
            break

        c1 = [ex for ex in suitable if ex.id not in chosen and classifier.matches(ex, first)]

        if first == second:
            pair = _pick_same_group(first, c1, rng, classifier)
        else:
            pair = []
            if c1:
                a = pick(rng, c1)
                c2 = [
                    ex for ex in suitable
                    if ex.id not in chosen and ex.id != a.id and classifier.matches(ex, second)
                ]
                if c2:
                    pair = [a, pick(rng, c2)]

        if pair:
            selected.extend(pair)
            chosen.update(ex.id for ex in pair)

    if len(selected) < count:
        logger.debug("pairing rules gave %d of %d exercises; filling", len(selected), count)
        rest = [ex for ex in suitable if ex.id not in chosen]
        selected.extend(select_balanced(rest, count - len(selected), difficulty, rng))

    return selected[:count]


def _dedupe(exercises: Sequence[Exercise]) -> list[Exercise]:
    seen: set[int] = set()
    result = []
    for ex in exercises:
        if ex.id not in seen:
            seen.add(ex.id)
            result.append(ex)
    return result
