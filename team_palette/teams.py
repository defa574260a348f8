"""Team classifiers with fixed colour variation tables."""

from __future__ import annotations

from enum import Enum
from typing import Union


class ColoredTeam(str, Enum):
    """Named teams that own a predefined set of colour variations."""

    BLUE = "Blue"
    RED = "Red"
    TEAL = "Teal"
    PURPLE = "Purple"
    YELLOW = "Yellow"
    ORANGE = "Orange"
    GREEN = "Green"
    BOT = "Bot"
    HUMANS = "Humans"
    NATIONS = "Nations"

    @classmethod
    def coerce(cls, value: "Team") -> "Team":
        """Return the matching member for ``value`` or ``value`` unchanged."""

        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return value


# Ad-hoc teams are identified by plain strings.
Team = Union[ColoredTeam, str]


__all__ = ["ColoredTeam", "Team"]
