"""Deterministic coastline generation and the map wrapper around it."""

from __future__ import annotations

import logging
import math
from typing import List

import numpy as np

from coastline.errors import BoundsError
from coastline.types import LAND, LANDMARK, WATER, Position, TerrainSymbol
from coastline.utils.maps import ascii_grid

LOGGER = logging.getLogger(__name__)

# Shoreline sits at 30% of the width and swings by 5% of it.
COAST_OFFSET = 0.30
COAST_AMPLITUDE = 0.05
COAST_PHASE_DIVISOR = 3.0

__all__ = [
    "CoastlineMap",
    "coastline_boundary",
    "generate_terrain",
    "landmark_positions",
]


def coastline_boundary(row: int, width: int) -> int:
    """First land column for ``row``; everything left of it is water."""
    wave = math.sin(row / COAST_PHASE_DIVISOR) * width * COAST_AMPLITUDE
    return math.floor(width * COAST_OFFSET + wave)


def landmark_positions(width: int, height: int) -> List[Position]:
    """Landmarks in stamping order. Some may fall outside tiny maps."""
    return [
        Position(width - 5, height // 4),
        Position(width - 8, height // 2),
        Position(width - 3, height * 3 // 4),
    ]


def _check_dimension(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


def generate_terrain(width: int, height: int) -> np.ndarray:
    """Build the read-only ``(height, width)`` terrain grid.

    Water everywhere, land from each row's boundary to the right edge, then the
    landmarks stamped on top. Landmarks that land outside the grid are skipped.
    """
    _check_dimension("width", width)
    _check_dimension("height", height)

    terrain = np.full((height, width), WATER, dtype="<U1")
    for row in range(height):
        start = max(0, coastline_boundary(row, width))
        terrain[row, start:] = LAND
        LOGGER.debug("row=%s coastline starts at col=%s", row, start)

    for pos in landmark_positions(width, height):
        if 0 <= pos.x < width and 0 <= pos.y < height:
            terrain[pos.y, pos.x] = LANDMARK
        else:
            LOGGER.debug("Skipping landmark %s outside %sx%s map", pos, width, height)

    terrain.setflags(write=False)
    return terrain


class CoastlineMap:
    """Immutable terrain grid with bounds checks and text rendering."""

    def __init__(self, width: int, height: int):
        self.terrain = generate_terrain(width, height)
        self.width = int(width)
        self.height = int(height)

    def __repr__(self) -> str:
        return f"CoastlineMap(width={self.width}, height={self.height})"

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def validate_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise BoundsError(
                f"player position ({x}, {y}) is outside the map. Valid range: "
                f"x in [0, {self.width - 1}], y in [0, {self.height - 1}]"
            )

    def terrain_at(self, x: int, y: int) -> TerrainSymbol:
        return str(self.terrain[y, x])  # type: ignore[return-value]

    def render(self, player_x: int, player_y: int) -> str:
        """Draw the map with the player marker over whatever terrain is there.

        Callers check ``in_bounds`` first; out-of-range coordinates are not
        validated here.
        """
        return ascii_grid(self.terrain, anchor=(player_y, player_x))
