"""Unweighted shortest paths by breadth-first search.

Grid mode explores 4-neighbours in ``+x, -x, +y, -y`` order, records every
dequeued cell in ``visited`` and stops as soon as the end cell is dequeued.
Results without a grid but with a node list fall back to the legacy graph
search, which reports no visitation trace.
"""
from __future__ import annotations

from collections import deque

from ..grid.cells import Coord2D, visited_node
from ..grid.grid import Grid
from ..grid.results import GenerationResult, PathResult
from ..grid.tiles import FLOOR
from .base import NO_PARENT, BasePathfinder, walk_parents
from .graph import solve_graph


class BFSPathfinder(BasePathfinder):
    name = "bfs"

    def _solve_without_grid(self, result: GenerationResult) -> PathResult:
        if len(result.nodes) > 1:
            return PathResult(solve_graph(result.nodes, result.edges), [])
        return PathResult([], [])

    def _solve_grid(self, grid: Grid, start: Coord2D, end: Coord2D) -> PathResult:
        w, h = grid.width, grid.height
        seen = [False] * grid.cell_count
        parent = [NO_PARENT] * grid.cell_count
        seen[grid.index(*start)] = True
        q = deque([start])
        visited = []
        found = False
        while q:
            cx, cy = q.popleft()
            visited.append(visited_node(cx, cy))
            if (cx, cy) == end:
                found = True
                break
            ci = cy * w + cx
            for nx, ny in ((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)):
                if 0 <= nx < w and 0 <= ny < h:
                    ni = ny * w + nx
                    if not seen[ni] and grid[nx][ny] == FLOOR:
                        seen[ni] = True
                        parent[ni] = ci
                        q.append((nx, ny))
        if not found:
            return PathResult([], visited)
        return PathResult(walk_parents(grid, parent, start, end), visited)


__all__ = ["BFSPathfinder"]
