"""Breadth-first search over the legacy room graph (``nodes``/``edges``).

Current generators emit grids only, so this runs solely for results that
carry a populated node list and no grid. It is independent of the grid search.
"""
from __future__ import annotations

from collections import deque
from typing import Dict, List, Sequence

from ..grid.cells import Edge, Node


def build_adjacency(edges: Sequence[Edge]) -> Dict[str, List[str]]:
    adj: Dict[str, List[str]] = {}
    for e in edges:
        adj.setdefault(e.source, []).append(e.target)
        adj.setdefault(e.target, []).append(e.source)
    return adj


def solve_graph(nodes: Sequence[Node], edges: Sequence[Edge]) -> List[Node]:
    """Shortest hop path from ``nodes[0]`` to ``nodes[-1]``; empty if disconnected."""
    if not nodes:
        return []
    start, end = nodes[0].id, nodes[-1].id
    adj = build_adjacency(edges)
    parent: Dict[str, str] = {}
    seen = {start}
    q = deque([start])
    found = False
    while q:
        cur = q.popleft()
        if cur == end:
            found = True
            break
        for nxt in adj.get(cur, ()):
            if nxt not in seen:
                seen.add(nxt)
                parent[nxt] = cur
                q.append(nxt)
    if not found:
        return []
    by_id = {n.id: n for n in nodes}
    path: List[Node] = []
    cur = end
    while True:
        node = by_id.get(cur)
        if node is not None:
            path.append(node)
        if cur not in parent:
            break
        cur = parent[cur]
    path.reverse()
    return path


__all__ = ["build_adjacency", "solve_graph"]
