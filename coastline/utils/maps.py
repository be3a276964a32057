"""Helpers for printing symbol grids as plain ASCII."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from coastline.types import LAND, LANDMARK, PLAYER, WATER

Coord = Tuple[int, int]

LEGEND = f"{PLAYER} = you, '{LAND}' = land, '{WATER}' = water, '{LANDMARK}' = landmark"


def ascii_grid(
    grid: Sequence[Sequence[str]],
    anchor: Optional[Coord] = None,
    marker: str = PLAYER,
) -> str:
    """Return every row of ``grid`` as a newline-terminated line.

    ``anchor`` is a ``(row, col)`` pair drawn with ``marker`` in place of the
    cell underneath it.
    """
    lines: List[str] = []
    for r, row in enumerate(grid):
        cells = [str(cell) for cell in row]
        if anchor is not None and anchor[0] == r and 0 <= anchor[1] < len(cells):
            cells[anchor[1]] = marker
        lines.append("".join(cells) + "\n")
    return "".join(lines)
