"""Simple configuration loader for team_palette."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict

import yaml

from .errors import ConfigError
from .palettes import PALETTES


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class PaletteConfig:
    """Names of the built-in palettes used by each allocator."""

    human: str = "player"
    human_fallback: str = "fallback"
    bot: str = "bot"
    bot_fallback: str = "bot"
    nation: str = "nation"
    nation_fallback: str = "nation"
    team: str = "player"
    team_fallback: str = "fallback"


@dataclass
class Config:
    """Top level configuration dataclass."""

    palettes: PaletteConfig = field(default_factory=PaletteConfig)


def _parse_palettes(data: dict[str, Any]) -> PaletteConfig:
    defaults = PaletteConfig()
    values: Dict[str, str] = {}
    for key in (f.name for f in fields(PaletteConfig)):
        name = str(data.get(key, getattr(defaults, key)))
        if name not in PALETTES:
            raise ConfigError(f"palettes.{key}: unknown palette '{name}'")
        values[key] = name
    unknown = set(data) - set(values)
    if unknown:
        raise ConfigError(f"unknown palettes keys: {', '.join(sorted(unknown))}")
    return PaletteConfig(**values)


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    palettes = data.get("palettes") or {}
    if not isinstance(palettes, dict):
        raise ConfigError("palettes must be a mapping")
    return Config(palettes=_parse_palettes(palettes))


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "PaletteConfig",
    "load_config",
]
