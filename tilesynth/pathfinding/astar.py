"""A* shortest paths on the grid with a Manhattan-distance heuristic.

The open set is a binary heap of ``(f, h, seq, cell)`` entries: lowest ``f``
first, ties go to the cell closer to the goal, then to insertion order.
Improved entries are pushed again rather than updated in place; entries for
cells that were already expanded are discarded when popped.
"""
from __future__ import annotations

import heapq
from typing import List, Tuple

from ..grid.cells import Coord2D, visited_node
from ..grid.grid import Grid
from ..grid.results import PathResult
from ..grid.tiles import FLOOR
from .base import NO_PARENT, BasePathfinder, walk_parents
from .endpoints import manhattan

UNREACHED = float("inf")

HeapEntry = Tuple[int, int, int, Coord2D]


class AStarPathfinder(BasePathfinder):
    name = "astar"

    def _solve_grid(self, grid: Grid, start: Coord2D, end: Coord2D) -> PathResult:
        w, h = grid.width, grid.height
        n = grid.cell_count
        g_score = [UNREACHED] * n
        parent = [NO_PARENT] * n
        closed = [False] * n

        g_score[grid.index(*start)] = 0
        h0 = manhattan(start, end)
        open_heap: List[HeapEntry] = [(h0, h0, 0, start)]
        seq = 1
        visited = []

        while open_heap:
            _f, _h, _seq, (cx, cy) = heapq.heappop(open_heap)
            ci = cy * w + cx
            if closed[ci]:
                continue
            closed[ci] = True
            visited.append(visited_node(cx, cy))
            if (cx, cy) == end:
                return PathResult(walk_parents(grid, parent, start, end), visited)

            tentative = g_score[ci] + 1
            for nx, ny in ((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)):
                if 0 <= nx < w and 0 <= ny < h and grid[nx][ny] == FLOOR:
                    ni = ny * w + nx
                    if tentative < g_score[ni]:
                        g_score[ni] = tentative
                        parent[ni] = ci
                        nh = abs(nx - end[0]) + abs(ny - end[1])
                        heapq.heappush(open_heap, (tentative + nh, nh, seq, (nx, ny)))
                        seq += 1

        return PathResult([], visited)


__all__ = ["AStarPathfinder"]
