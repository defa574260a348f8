"""Territory colours for every kind of player in a match."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from .allocator import ColorAllocator
from .colors import Color
from .config import CONFIG, PaletteConfig
from .palettes import palette_by_name
from .teams import Team

logger = logging.getLogger(__name__)

BORDER_DARKEN = 0.2


class PlayerType(Enum):
    """Who controls a player."""

    HUMAN = "human"
    BOT = "bot"
    NATION = "nation"


class ColorTheme:
    """Route colour requests to one allocator per player type.

    Each allocator keeps its own assignment table, so a human and a bot with
    the same id may receive different colours.
    """

    def __init__(self, config: PaletteConfig | None = None) -> None:
        cfg = config if config is not None else CONFIG.palettes
        self.human_allocator = ColorAllocator(
            palette_by_name(cfg.human), palette_by_name(cfg.human_fallback)
        )
        self.bot_allocator = ColorAllocator(
            palette_by_name(cfg.bot), palette_by_name(cfg.bot_fallback)
        )
        self.nation_allocator = ColorAllocator(
            palette_by_name(cfg.nation), palette_by_name(cfg.nation_fallback)
        )
        self.team_allocator = ColorAllocator(
            palette_by_name(cfg.team), palette_by_name(cfg.team_fallback)
        )
        logger.debug("ColorTheme initialised with %s", cfg)

    def allocator_for(self, player_type: PlayerType) -> ColorAllocator:
        if player_type is PlayerType.HUMAN:
            return self.human_allocator
        if player_type is PlayerType.BOT:
            return self.bot_allocator
        return self.nation_allocator

    def territory_color(
        self, player_id: str, player_type: PlayerType, team: Optional[Team] = None
    ) -> Color:
        """Return the fill colour for ``player_id``.

        Players on a team take a variation of their team's colour; everyone
        else draws from the allocator matching ``player_type``.
        """

        if team is not None:
            return self.team_allocator.assign_team_player_color(team, player_id)
        return self.allocator_for(player_type).assign_color(player_id)

    def team_color(self, team: Team) -> Color:
        return self.team_allocator.assign_team_color(team)

    def border_color(self, territory: Color) -> Color:
        """Darker shade of ``territory`` used for outlines."""
        return territory.darken(BORDER_DARKEN)


__all__ = ["PlayerType", "ColorTheme"]
