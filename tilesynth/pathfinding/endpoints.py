"""Endpoint selection shared by every grid solver."""
from __future__ import annotations

from typing import Optional, Tuple

from ..grid.cells import Coord2D
from ..grid.grid import Grid
from ..grid.tiles import FLOOR


def find_start(grid: Grid) -> Optional[Coord2D]:
    """First FLOOR scanning columns left to right, each column top to bottom."""
    for x in range(grid.width):
        col = grid[x]
        for y in range(grid.height):
            if col[y] == FLOOR:
                return (x, y)
    return None


def find_end(grid: Grid) -> Optional[Coord2D]:
    """First FLOOR scanning columns right to left, each column bottom to top."""
    for x in range(grid.width - 1, -1, -1):
        col = grid[x]
        for y in range(grid.height - 1, -1, -1):
            if col[y] == FLOOR:
                return (x, y)
    return None


def find_endpoints(grid: Grid) -> Tuple[Optional[Coord2D], Optional[Coord2D]]:
    if grid.is_empty:
        return None, None
    return find_start(grid), find_end(grid)


def manhattan(a: Coord2D, b: Coord2D) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


__all__ = ["find_start", "find_end", "find_endpoints", "manhattan"]
