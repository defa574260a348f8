"""Seeded integer source consumed by the colour allocator."""

from __future__ import annotations

from random import Random
from typing import Callable, Protocol


class IntSource(Protocol):
    """Anything that can draw an integer from ``[lo, hi)``."""

    def next_int(self, lo: int, hi: int) -> int:
        ...


# Maps a numeric seed to a fresh integer source.
RandomFactory = Callable[[int], IntSource]


class PseudoRandom:
    """Reproducible integer draws from an integer ``seed``."""

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._rnd = Random(seed)

    def next_int(self, lo: int, hi: int) -> int:
        """Return a uniformly distributed integer in ``[lo, hi)``."""

        if hi <= lo:
            raise ValueError(f"empty range [{lo}, {hi})")
        return self._rnd.randrange(lo, hi)


__all__ = ["IntSource", "RandomFactory", "PseudoRandom"]
