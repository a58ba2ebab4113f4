"""
Injectable random source.

Every randomized selection goes through an Rng so tests can seed it or
script it. random.Random satisfies the protocol; so does any object with
a random() method returning floats in [0, 1).
"""

from __future__ import annotations

import random
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class Rng(Protocol):
    def random(self) -> float: ...


def make_rng(seed: int | None = None) -> random.Random:
    """Return a fresh random.Random, seeded when seed is given."""
    return random.Random(seed)


def pick(rng: Rng, items: Sequence[T]) -> T:
    """
    Return one element of items chosen with rng.

    Raises:
        ValueError: If items is empty
    """
    if not items:
        raise ValueError("cannot pick from an empty sequence")
    idx = min(int(rng.random() * len(items)), len(items) - 1)
    return items[idx]


def shuffled(rng: Rng, items: Sequence[T]) -> list[T]:
    """Return a shuffled copy of items (Fisher-Yates driven by rng)."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = min(int(rng.random() * (i + 1)), i)
        result[i], result[j] = result[j], result[i]
    return result
