"""Organic cave maps via cellular automata.

Each cell starts as WALL with probability ``WALL_CHANCE``. Every simulation
step rebuilds the whole map from the previous snapshot using the 3x3 Moore
neighbourhood wall count (out-of-bounds neighbours count as walls, so caves
close up at the map edge):

    * a WALL survives while it has at least ``DEATH_LIMIT`` wall neighbours;
    * a FLOOR turns to WALL when it has more than ``BIRTH_LIMIT``.

Afterwards only the largest 4-connected floor region is kept and the map is
translated so that region's bounding box sits in the middle of the grid.
"""

from __future__ import annotations

from typing import List, Tuple

from ..grid.connectivity import label_regions, largest_region
from ..grid.grid import Grid
from ..grid.tiles import FLOOR, WALL
from .base import BaseGenerator, blank_columns

WALL_CHANCE = 0.45
BIRTH_LIMIT = 4
DEATH_LIMIT = 3

Columns = List[List[int]]


def count_wall_neighbors(cols: Columns, x: int, y: int, width: int, height: int) -> int:
    count = 0
    for i in (-1, 0, 1):
        for j in (-1, 0, 1):
            if i == 0 and j == 0:
                continue
            nx, ny = x + i, y + j
            if nx < 0 or ny < 0 or nx >= width or ny >= height:
                count += 1
            elif cols[nx][ny] == WALL:
                count += 1
    return count


def simulation_step(cols: Columns, width: int, height: int) -> Columns:
    out = blank_columns(width, height, FLOOR)
    for x in range(width):
        for y in range(height):
            nbs = count_wall_neighbors(cols, x, y, width, height)
            if cols[x][y] == WALL:
                out[x][y] = WALL if nbs >= DEATH_LIMIT else FLOOR
            else:
                out[x][y] = WALL if nbs > BIRTH_LIMIT else FLOOR
    return out


class CaveGenerator(BaseGenerator):
    name = "ca"
    scale = 5

    def _run_pipeline(self, params, phase, metrics) -> Grid:
        width, height = self.grid_size(params)
        cols = phase('initialize', self._initialize, width, height)
        cols = phase('simulate', self._simulate, cols, width, height, params.iterations)
        cols = phase('connectivity', self._keep_largest_region, cols, width, height, metrics)
        cols = phase('center', self._center, cols, width, height, metrics)
        return Grid(cols, width, height)

    def _initialize(self, width: int, height: int) -> Columns:
        return [[WALL if self.rng.random() < WALL_CHANCE else FLOOR for _ in range(height)]
                for _ in range(width)]

    def _simulate(self, cols: Columns, width: int, height: int, steps: int) -> Columns:
        for _ in range(max(0, steps)):
            cols = simulation_step(cols, width, height)
        return cols

    def _keep_largest_region(self, cols: Columns, width: int, height: int, metrics) -> Columns:
        regions = label_regions(cols, width, height, FLOOR)
        keep = largest_region(regions)
        if self.enable_metrics:
            metrics['regions_found'] = len(regions)
            metrics['largest_region'] = len(keep)
        if not regions:
            return cols
        out = blank_columns(width, height, WALL)
        for x, y in keep:
            out[x][y] = FLOOR
        return out

    def _center(self, cols: Columns, width: int, height: int, metrics) -> Columns:
        shift = centering_shift(cols, width, height)
        if self.enable_metrics:
            metrics['shift'] = shift
        if shift is None or shift == (0, 0):
            return cols
        sx, sy = shift
        out = blank_columns(width, height, WALL)
        for x in range(width):
            for y in range(height):
                if cols[x][y] == FLOOR:
                    nx, ny = x + sx, y + sy
                    if 0 <= nx < width and 0 <= ny < height:
                        out[nx][ny] = FLOOR
        return out


def floor_bounds(cols: Columns, width: int, height: int):
    """Inclusive ``(min_x, min_y, max_x, max_y)`` of floor cells, or None when there are none."""
    min_x, min_y, max_x, max_y = width, height, -1, -1
    for x in range(width):
        for y in range(height):
            if cols[x][y] == FLOOR:
                min_x = min(min_x, x); max_x = max(max_x, x)
                min_y = min(min_y, y); max_y = max(max_y, y)
    if max_x < 0:
        return None
    return min_x, min_y, max_x, max_y


def centering_shift(cols: Columns, width: int, height: int) -> Tuple[int, int] | None:
    bounds = floor_bounds(cols, width, height)
    if bounds is None:
        return None
    min_x, min_y, max_x, max_y = bounds
    content_w = max_x - min_x + 1
    content_h = max_y - min_y + 1
    return (width - content_w) // 2 - min_x, (height - content_h) // 2 - min_y


__all__ = [
    "CaveGenerator",
    "simulation_step",
    "count_wall_neighbors",
    "floor_bounds",
    "centering_shift",
    "WALL_CHANCE",
    "BIRTH_LIMIT",
    "DEATH_LIMIT",
]
