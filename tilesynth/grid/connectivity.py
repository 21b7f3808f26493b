"""Flood fill and region labelling over column-major tile data.

Works on both frozen :class:`Grid` objects and the mutable ``list[list[int]]``
buffers generators carve into, since both support ``cols[x][y]`` access.
"""
from __future__ import annotations

from collections import deque
from typing import List, Sequence

from .cells import Coord2D
from .grid import Grid
from .tiles import FLOOR


def flood_region(cols: Sequence[Sequence[int]], width: int, height: int, start: Coord2D,
                 value: int = FLOOR, seen: List[bool] | None = None) -> List[Coord2D]:
    """Return the 4-connected region of ``value`` cells containing ``start``, in BFS order.

    ``seen`` is an optional flat ``y*width+x`` table shared across calls so a
    caller labelling many regions marks each cell only once.
    """
    sx, sy = start
    if not (0 <= sx < width and 0 <= sy < height) or cols[sx][sy] != value:
        return []
    if seen is None:
        seen = [False] * (width * height)
    seen[sy * width + sx] = True
    q = deque([start])
    region: List[Coord2D] = []
    while q:
        cx, cy = q.popleft()
        region.append((cx, cy))
        for nx, ny in ((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)):
            if 0 <= nx < width and 0 <= ny < height:
                i = ny * width + nx
                if not seen[i] and cols[nx][ny] == value:
                    seen[i] = True
                    q.append((nx, ny))
    return region


def label_regions(cols: Sequence[Sequence[int]], width: int, height: int,
                  value: int = FLOOR) -> List[List[Coord2D]]:
    """All maximal regions of ``value``, discovered in column-major scan order."""
    seen = [False] * (width * height)
    regions: List[List[Coord2D]] = []
    for x in range(width):
        for y in range(height):
            if cols[x][y] == value and not seen[y * width + x]:
                regions.append(flood_region(cols, width, height, (x, y), value, seen))
    return regions


def largest_region(regions: List[List[Coord2D]]) -> List[Coord2D]:
    # max() keeps the first of equally sized regions, i.e. the earliest in scan order
    if not regions:
        return []
    return max(regions, key=len)


def floor_regions(grid: Grid) -> List[List[Coord2D]]:
    return label_regions(grid, grid.width, grid.height, FLOOR)


__all__ = ["flood_region", "label_regions", "largest_region", "floor_regions"]
