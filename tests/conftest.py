# tests/conftest.py
from typing import Callable, List

import pytest

from team_palette.allocator import ColorAllocator
from team_palette.colors import Color


class StepRandom:
    """Integer source that returns ``lo + seed % (hi - lo)``."""

    def __init__(self, seed: int) -> None:
        self.seed = seed

    def next_int(self, lo: int, hi: int) -> int:
        return lo + self.seed % (hi - lo)


class OffByOneRandom:
    """Integer source that returns ``lo + seed``, ignoring ``hi``."""

    def __init__(self, seed: int) -> None:
        self.seed = seed

    def next_int(self, lo: int, hi: int) -> int:
        return lo + self.seed


def _grey(level: int) -> Color:
    return Color(level, level, level)


@pytest.fixture
def grey() -> Callable[[int], Color]:
    return _grey


@pytest.fixture
def stepped() -> Callable[..., ColorAllocator]:
    """Build allocators whose integer identities are drawn as ``seed % range``."""

    def build(colors, fallback=None, rng_factory=StepRandom) -> ColorAllocator:
        return ColorAllocator(
            colors, fallback or colors, hasher=int, rng_factory=rng_factory
        )

    return build


@pytest.fixture
def off_by_one() -> type:
    return OffByOneRandom


@pytest.fixture
def ten_greys() -> List[Color]:
    return [_grey(i) for i in range(10)]


@pytest.fixture
def primary() -> List[Color]:
    return [Color(255, 0, 0), Color(0, 255, 0), Color(0, 0, 255), Color(255, 255, 0),
            Color(0, 255, 255), Color(255, 0, 255), Color(128, 64, 0), Color(0, 128, 64)]


@pytest.fixture
def fallback() -> List[Color]:
    return [_grey(10), _grey(60), _grey(110), _grey(160)]
