"""Deterministic colour allocation for players and teams."""

from .allocator import ColorAllocator, swap
from .colors import Color
from .distinct import select_distinct_color, select_distinct_color_index
from .errors import (
    ConfigError,
    EmptyPaletteError,
    InvalidArgumentError,
    PaletteError,
    PaletteIndexError,
)
from .teams import ColoredTeam
from .theme import ColorTheme, PlayerType

__all__ = [
    "Color",
    "ColorAllocator",
    "ColorTheme",
    "ColoredTeam",
    "PlayerType",
    "swap",
    "select_distinct_color",
    "select_distinct_color_index",
    "PaletteError",
    "PaletteIndexError",
    "EmptyPaletteError",
    "InvalidArgumentError",
    "ConfigError",
]
