"""Core data contracts shared across the coastline tool."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

TerrainSymbol = Literal["~", "#", "*"]

WATER: TerrainSymbol = "~"
LAND: TerrainSymbol = "#"
LANDMARK: TerrainSymbol = "*"
PLAYER = "P"

# The CLI always works on a single fixed-size map.
MAP_WIDTH: int = 40
MAP_HEIGHT: int = 20


@dataclass(frozen=True, slots=True)
class Position:
    """Grid coordinate; ``x`` is the column and ``y`` the row."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class Configuration:
    """Parsed contents of a player configuration file."""

    image_path: str
    x: int
    y: int

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    def resolved_image_path(self) -> Path:
        """Absolute form of ``image_path`` (symlinks are left alone)."""
        return Path(self.image_path).absolute()


__all__ = [
    "TerrainSymbol",
    "WATER",
    "LAND",
    "LANDMARK",
    "PLAYER",
    "MAP_WIDTH",
    "MAP_HEIGHT",
    "Position",
    "Configuration",
]
