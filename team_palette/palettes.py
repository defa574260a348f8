"""Built-in palette tables.

Player palettes are hue sweeps in the spirit of the seeded faction palettes;
team tables are lightness/saturation variations around one base colour per
:class:`~team_palette.teams.ColoredTeam`.
"""

from __future__ import annotations

import colorsys
from typing import Dict, List

from .colors import Color
from .errors import ConfigError
from .teams import ColoredTeam

TEAM_VARIATION_COUNT = 24

_LIGHTNESS_STEP = 0.025
_SATURATION_STEP = 0.08
_HUE_JITTER = 0.004


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _hsv_to_color(h: float, s: float, v: float) -> Color:
    """Convert HSV floats in ``[0, 1]`` to an integer :class:`Color`."""

    r, g, b = colorsys.hsv_to_rgb(h % 1.0, s, v)
    return Color(int(r * 255), int(g * 255), int(b * 255))


def hue_sweep(
    n: int, saturations: List[float], values: List[float], offset: float = 0.0
) -> List[Color]:
    """Return ``n`` colours spread around the hue wheel.

    Consecutive entries cycle through ``saturations`` and ``values`` so that
    neighbouring hues also differ in intensity.
    """

    if n <= 0:
        return []
    palette: List[Color] = []
    for i in range(n):
        hue = offset + i / n
        sat = saturations[i % len(saturations)]
        val = values[(i // len(saturations)) % len(values)]
        palette.append(_hsv_to_color(hue, sat, val))
    return palette


def generate_team_colors(base: Color, count: int = TEAM_VARIATION_COUNT) -> List[Color]:
    """Return ``count`` variations of ``base``; the first entry is ``base``."""

    if count <= 0:
        return []
    h, l, s = base.to_hls()
    variations = [base]
    for i in range(1, count):
        sign = 1 if i % 2 else -1
        step = (i + 1) // 2
        variations.append(
            Color.from_hls(
                h + sign * step * _HUE_JITTER,
                _clamp(l + sign * step * _LIGHTNESS_STEP, 0.15, 0.85),
                _clamp(s - (step % 3) * _SATURATION_STEP, 0.2, 1.0),
            )
        )
    return variations


TEAM_BASE_COLORS: Dict[ColoredTeam, Color] = {
    ColoredTeam.BLUE: Color.parse("#2962ff"),
    ColoredTeam.RED: Color.parse("#dc2626"),
    ColoredTeam.TEAL: Color.parse("#0d9488"),
    ColoredTeam.PURPLE: Color.parse("#9333ea"),
    ColoredTeam.YELLOW: Color.parse("#eab308"),
    ColoredTeam.ORANGE: Color.parse("#f97316"),
    ColoredTeam.GREEN: Color.parse("#16a34a"),
    ColoredTeam.BOT: Color.parse("#be7887"),
}

BLUE_TEAM_COLORS = generate_team_colors(TEAM_BASE_COLORS[ColoredTeam.BLUE])
RED_TEAM_COLORS = generate_team_colors(TEAM_BASE_COLORS[ColoredTeam.RED])
TEAL_TEAM_COLORS = generate_team_colors(TEAM_BASE_COLORS[ColoredTeam.TEAL])
PURPLE_TEAM_COLORS = generate_team_colors(TEAM_BASE_COLORS[ColoredTeam.PURPLE])
YELLOW_TEAM_COLORS = generate_team_colors(TEAM_BASE_COLORS[ColoredTeam.YELLOW])
ORANGE_TEAM_COLORS = generate_team_colors(TEAM_BASE_COLORS[ColoredTeam.ORANGE])
GREEN_TEAM_COLORS = generate_team_colors(TEAM_BASE_COLORS[ColoredTeam.GREEN])
BOT_TEAM_COLORS = generate_team_colors(TEAM_BASE_COLORS[ColoredTeam.BOT])

# Every ColoredTeam member has an entry; Humans and Nations reuse Blue and Red.
TEAM_COLOR_VARIATIONS: Dict[ColoredTeam, List[Color]] = {
    ColoredTeam.BLUE: BLUE_TEAM_COLORS,
    ColoredTeam.RED: RED_TEAM_COLORS,
    ColoredTeam.TEAL: TEAL_TEAM_COLORS,
    ColoredTeam.PURPLE: PURPLE_TEAM_COLORS,
    ColoredTeam.YELLOW: YELLOW_TEAM_COLORS,
    ColoredTeam.ORANGE: ORANGE_TEAM_COLORS,
    ColoredTeam.GREEN: GREEN_TEAM_COLORS,
    ColoredTeam.BOT: BOT_TEAM_COLORS,
    ColoredTeam.HUMANS: BLUE_TEAM_COLORS,
    ColoredTeam.NATIONS: RED_TEAM_COLORS,
}

PLAYER_COLORS = hue_sweep(48, [0.85, 0.6, 0.45], [0.95, 0.75])
NATION_COLORS = hue_sweep(32, [0.55, 0.4], [0.7, 0.55], offset=1 / 64)
BOT_COLORS = hue_sweep(16, [0.25, 0.15], [0.8, 0.65], offset=1 / 32)
FALLBACK_COLORS = hue_sweep(64, [0.7, 0.5, 0.35, 0.2], [0.9, 0.6], offset=1 / 128)

PALETTES: Dict[str, List[Color]] = {
    "player": PLAYER_COLORS,
    "nation": NATION_COLORS,
    "bot": BOT_COLORS,
    "fallback": FALLBACK_COLORS,
}


def palette_by_name(name: str) -> List[Color]:
    """Return a copy of the built-in palette called ``name``."""

    try:
        return list(PALETTES[name])
    except KeyError:
        known = ", ".join(sorted(PALETTES))
        raise ConfigError(f"unknown palette '{name}' (known: {known})") from None


__all__ = [
    "TEAM_VARIATION_COUNT",
    "TEAM_BASE_COLORS",
    "TEAM_COLOR_VARIATIONS",
    "BLUE_TEAM_COLORS",
    "RED_TEAM_COLORS",
    "TEAL_TEAM_COLORS",
    "PURPLE_TEAM_COLORS",
    "YELLOW_TEAM_COLORS",
    "ORANGE_TEAM_COLORS",
    "GREEN_TEAM_COLORS",
    "BOT_TEAM_COLORS",
    "PLAYER_COLORS",
    "NATION_COLORS",
    "BOT_COLORS",
    "FALLBACK_COLORS",
    "PALETTES",
    "hue_sweep",
    "generate_team_colors",
    "palette_by_name",
]
