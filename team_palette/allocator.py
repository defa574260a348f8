"""Deterministic per-identity colour allocation."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, MutableSequence, TypeVar

from .colors import Color
from .errors import EmptyPaletteError, PaletteIndexError
from .hashing import simple_hash
from .palettes import TEAM_COLOR_VARIATIONS
from .pseudo_random import PseudoRandom, RandomFactory
from .teams import ColoredTeam, Team

logger = logging.getLogger(__name__)

T = TypeVar("T")


def swap(array: MutableSequence[T], x: int, y: int) -> None:
    """Exchange the elements at positions ``x`` and ``y`` of ``array``.

    Both indices are checked before anything is touched; negative indices are
    rejected rather than wrapped.
    """

    for idx in (x, y):
        if idx >= len(array) or idx < 0:
            raise PaletteIndexError(
                f"Index: {idx} out of bounds for array of length: {len(array)}"
            )
    array[x], array[y] = array[y], array[x]


class ColorAllocator:
    """Hand out one stable colour per identity.

    Colours are sampled without replacement from the active palette using a
    partial Fisher-Yates shuffle. Suppose the palette is ``[0, 1, ..., 9]`` and
    nothing has been drawn yet. A seeded draw picks ``r`` in ``[0, 10)``, say
    7, which becomes the result. The cursor moves to 1 and position 7 swaps
    with position ``10 - 1``::

        [0, 1, 2, 3, 4, 5, 6, 9, 8 | 7]

    The next draw picks from ``[0, 9)``; everything right of the bar is used.
    Once every entry is used the active palette is replaced with a fresh copy
    of ``fallback`` and the cursor starts again at 0.

    The random draw is seeded from a hash of the identity, so two allocators
    built from the same palettes and fed the same identities in the same order
    produce the same colours.

    Not thread safe; a single owner must drive all calls.
    """

    def __init__(
        self,
        colors: Iterable[Color],
        fallback: Iterable[Color],
        *,
        hasher: Callable[[str], int] = simple_hash,
        rng_factory: RandomFactory = PseudoRandom,
    ) -> None:
        self._available: List[Color] = list(colors)
        self._fallback: List[Color] = list(fallback)
        if not self._available:
            raise EmptyPaletteError("primary palette must not be empty")
        if not self._fallback:
            raise EmptyPaletteError("fallback palette must not be empty")
        self._hasher = hasher
        self._rng_factory = rng_factory
        # Number of entries at the end of ``_available`` already handed out
        self._cursor = 0
        self._recycled = 0
        self._assigned: Dict[str, Color] = {}
        self._team_player_colors: Dict[str, Color] = {}

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def remaining(self) -> int:
        """Number of colours not yet drawn from the active palette."""
        return len(self._available) - self._cursor

    @property
    def recycled(self) -> int:
        """How many times the fallback palette has been swapped in."""
        return self._recycled

    def assignments(self) -> Dict[str, Color]:
        return dict(self._assigned)

    def __contains__(self, identity: object) -> bool:
        return identity in self._assigned

    def __len__(self) -> int:
        return len(self._assigned)

    # ------------------------------------------------------------------
    # Sampling without replacement
    # ------------------------------------------------------------------
    def assign_color(self, identity: str) -> Color:
        """Return the colour for ``identity``, drawing one on first use."""

        color = self._assigned.get(identity)
        if color is not None:
            return color

        if self._cursor == len(self._available):
            self._available = list(self._fallback)
            self._cursor = 0
            self._recycled += 1
            logger.info(
                "Palette exhausted; recycling %d fallback colours (round %d)",
                len(self._available),
                self._recycled,
            )

        rand = self._rng_factory(self._hasher(identity))
        undrawn = len(self._available) - self._cursor
        index = rand.next_int(0, undrawn)
        if index < 0 or index >= undrawn:
            raise PaletteIndexError(
                f"Draw index: {index} outside undrawn range [0, {undrawn})"
            )
        color = self._available[index]
        swap(self._available, index, len(self._available) - self._cursor - 1)
        self._cursor += 1

        self._assigned[identity] = color
        logger.debug(
            "Assigned %s to %r (%d remaining)", color, identity, self.remaining
        )
        return color

    # ------------------------------------------------------------------
    # Team colours
    # ------------------------------------------------------------------
    def team_color_variations(self, team: Team) -> List[Color]:
        """Return the colour variations available to ``team``.

        Named teams use their fixed table. Any other team gets a single colour
        drawn with :meth:`assign_color`, keyed by the team name.
        """

        team = ColoredTeam.coerce(team)
        if isinstance(team, ColoredTeam):
            return list(TEAM_COLOR_VARIATIONS[team])
        return [self.assign_color(team)]

    def assign_team_color(self, team: Team) -> Color:
        """Return the representative colour of ``team``."""

        return self.team_color_variations(team)[0].rounded()

    def assign_team_player_color(self, team: Team, player_id: str) -> Color:
        """Return a stable colour for ``player_id`` picked from ``team``'s table.

        The result is cached by ``player_id`` alone; a later call with a
        different ``team`` returns the cached colour.
        """

        color = self._team_player_colors.get(player_id)
        if color is not None:
            return color

        team_colors = self.team_color_variations(team)
        color = team_colors[self._hasher(player_id) % len(team_colors)]
        self._team_player_colors[player_id] = color
        return color


__all__ = ["ColorAllocator", "swap"]
