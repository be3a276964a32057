"""Coastline map prototype exports."""

from .config import load, loads
from .errors import BoundsError, CoastlineError, ParseError
from .mapgen import CoastlineMap, coastline_boundary, generate_terrain, landmark_positions
from .types import Configuration, Position

__all__ = [
    "load",
    "loads",
    "BoundsError",
    "CoastlineError",
    "ParseError",
    "CoastlineMap",
    "coastline_boundary",
    "generate_terrain",
    "landmark_positions",
    "Configuration",
    "Position",
]
