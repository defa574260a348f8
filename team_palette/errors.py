"""Exceptions raised by the colour allocation helpers."""

from __future__ import annotations


class PaletteError(Exception):
    """Base error for palette allocation."""


class PaletteIndexError(PaletteError, IndexError):
    """Raised when an internal palette rearrangement goes out of bounds."""


class EmptyPaletteError(PaletteError, ValueError):
    """Raised when an allocator is built from an empty palette."""


class InvalidArgumentError(PaletteError, ValueError):
    """Raised when a caller passes an argument that cannot be used."""


class ConfigError(PaletteError):
    """Raised when configuration values are invalid."""


__all__ = [
    "PaletteError",
    "PaletteIndexError",
    "EmptyPaletteError",
    "InvalidArgumentError",
    "ConfigError",
]
