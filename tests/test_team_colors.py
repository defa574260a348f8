import pytest

from team_palette import palettes
from team_palette.allocator import ColorAllocator
from team_palette.colors import Color
from team_palette.errors import ConfigError
from team_palette.hashing import simple_hash
from team_palette.palettes import (
    BLUE_TEAM_COLORS,
    RED_TEAM_COLORS,
    TEAM_BASE_COLORS,
    TEAM_COLOR_VARIATIONS,
    TEAM_VARIATION_COUNT,
    generate_team_colors,
)
from team_palette.teams import ColoredTeam


def _allocator(primary, fallback) -> ColorAllocator:
    return ColorAllocator(primary, fallback)


def test_every_coloured_team_has_variations():
    for team in ColoredTeam:
        assert len(TEAM_COLOR_VARIATIONS[team]) == TEAM_VARIATION_COUNT


def test_generate_team_colors_starts_with_base():
    base = Color(41, 98, 255)
    variations = generate_team_colors(base, 5)
    assert variations[0] == base
    assert len(variations) == 5
    assert generate_team_colors(base, 0) == []
    assert generate_team_colors(base, 5) == variations


def test_coerce():
    assert ColoredTeam.coerce("Blue") is ColoredTeam.BLUE
    assert ColoredTeam.coerce(ColoredTeam.RED) is ColoredTeam.RED
    assert ColoredTeam.coerce("Team Rocket") == "Team Rocket"


def test_team_color_is_rounded_first_variation(primary, fallback):
    alloc = _allocator(primary, fallback)
    assert alloc.assign_team_color(ColoredTeam.BLUE) == TEAM_BASE_COLORS[ColoredTeam.BLUE]
    assert alloc.assign_team_color("Red") == Color(220, 38, 38)


def test_team_color_rounds_channels(primary, fallback, monkeypatch):
    monkeypatch.setitem(
        palettes.TEAM_COLOR_VARIATIONS, ColoredTeam.TEAL, [Color(10.4, 20.6, 30.5)]
    )
    alloc = _allocator(primary, fallback)
    assert alloc.assign_team_color(ColoredTeam.TEAL) == Color(10, 21, 31)


def test_alias_teams(primary, fallback):
    alloc = _allocator(primary, fallback)
    assert alloc.team_color_variations(ColoredTeam.HUMANS) == BLUE_TEAM_COLORS
    assert alloc.team_color_variations(ColoredTeam.NATIONS) == RED_TEAM_COLORS


def test_team_variations_are_copies(primary, fallback):
    alloc = _allocator(primary, fallback)
    variations = alloc.team_color_variations(ColoredTeam.GREEN)
    variations.clear()
    assert len(TEAM_COLOR_VARIATIONS[ColoredTeam.GREEN]) == TEAM_VARIATION_COUNT


def test_ad_hoc_team_defers_to_allocator(primary, fallback):
    alloc = _allocator(primary, fallback)
    variations = alloc.team_color_variations("Team Rocket")
    assert variations == [alloc.assign_color("Team Rocket")]
    assert "Team Rocket" in alloc
    assert variations[0] in primary
    assert alloc.assign_team_color("Team Rocket") == variations[0]


def test_team_player_color_uses_hash_index(primary, fallback):
    alloc = _allocator(primary, fallback)
    expected = BLUE_TEAM_COLORS[simple_hash("p1") % len(BLUE_TEAM_COLORS)]
    assert alloc.assign_team_player_color(ColoredTeam.BLUE, "p1") == expected
    assert alloc.assign_team_player_color(ColoredTeam.BLUE, "p1") == expected


def test_team_player_color_is_keyed_by_player_only(primary, fallback):
    alloc = _allocator(primary, fallback)
    first = alloc.assign_team_player_color(ColoredTeam.BLUE, "p1")
    assert alloc.assign_team_player_color(ColoredTeam.RED, "p1") is first


def test_team_player_color_does_not_touch_draw_table(primary, fallback):
    alloc = _allocator(primary, fallback)
    alloc.assign_team_player_color(ColoredTeam.ORANGE, "p1")
    assert "p1" not in alloc
    assert alloc.cursor == 0


def test_team_player_color_for_ad_hoc_team(primary, fallback):
    alloc = _allocator(primary, fallback)
    colour = alloc.assign_team_player_color("Team Rocket", "p1")
    assert colour == alloc.assign_color("Team Rocket")


def test_palette_by_name_returns_copy():
    player = palettes.palette_by_name("player")
    assert player == palettes.PLAYER_COLORS
    player.clear()
    assert palettes.PLAYER_COLORS


def test_palette_by_name_unknown():
    with pytest.raises(ConfigError, match="unknown palette"):
        palettes.palette_by_name("rainbow")


def test_team_base_colours_come_from_hex_table():
    assert TEAM_BASE_COLORS[ColoredTeam.BLUE] == Color(41, 98, 255)
    assert TEAM_BASE_COLORS[ColoredTeam.BOT].to_hex() == "#be7887"
    assert set(TEAM_BASE_COLORS) == set(ColoredTeam) - {ColoredTeam.HUMANS, ColoredTeam.NATIONS}
