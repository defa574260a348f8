"""Pick the candidate colour that stands out most from those in use."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from skimage.color import deltaE_ciede2000

from .colors import Color, lab_array
from .errors import InvalidArgumentError


def delta_e_2000(c1: Color, c2: Color) -> float:
    """Return the CIEDE2000 difference between two colours."""

    lab = lab_array([c1, c2])
    return float(deltaE_ciede2000(lab[0], lab[1]))


def _min_delta_e(candidates: np.ndarray, assigned: np.ndarray) -> np.ndarray:
    """Return, per candidate Lab row, the distance to its nearest assigned row."""

    lhs = np.repeat(candidates[:, np.newaxis, :], len(assigned), axis=1)
    rhs = np.tile(assigned[np.newaxis, :, :], (len(candidates), 1, 1))
    return deltaE_ciede2000(lhs, rhs).min(axis=1)


def min_delta_e(color: Color, assigned: Sequence[Color]) -> float:
    """Return the smallest CIEDE2000 distance from ``color`` to ``assigned``.

    Returns ``inf`` when ``assigned`` is empty.
    """

    if not assigned:
        return float("inf")
    return float(_min_delta_e(lab_array([color]), lab_array(list(assigned)))[0])


def select_distinct_color_index(
    candidates: Sequence[Color], assigned: Sequence[Color]
) -> int:
    """Return the index of the candidate farthest from every assigned colour.

    Each candidate is scored by its distance to the closest colour in
    ``assigned``; the highest score wins and ties go to the lowest index.
    When no candidate scores above zero the result is ``0``.

    Raises :class:`InvalidArgumentError` if ``assigned`` is empty.
    """

    if not assigned:
        raise InvalidArgumentError("No assigned colors")
    if not candidates:
        return 0

    scores = _min_delta_e(lab_array(list(candidates)), lab_array(list(assigned)))
    if not scores.max() > 0:
        return 0
    # argmax returns the first occurrence of the maximum.
    return int(np.argmax(scores))


def select_distinct_color(
    candidates: Sequence[Color], assigned: Sequence[Color]
) -> Color:
    """Return the candidate chosen by :func:`select_distinct_color_index`."""

    if not candidates:
        raise InvalidArgumentError("No candidate colors")
    return candidates[select_distinct_color_index(candidates, assigned)]


__all__ = [
    "delta_e_2000",
    "min_delta_e",
    "select_distinct_color_index",
    "select_distinct_color",
]
