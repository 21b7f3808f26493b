"""Room-and-corridor maps via binary space partitioning.

Phases:
    * Start from an all-WALL grid (``floor(width/4) x floor(height/4)``).
    * Recursively bisect the full extent for ``iterations`` levels. Elongated
      rectangles (one side >= 1.25x the other) are cut across their long side,
      squarish ones along a random axis. Children are never thinner than
      ``MIN_LEAF_SIZE``; a rectangle too small to honour that stops splitting
      early, so leaf depth can be uneven.
    * Carve one room strictly inside every tree leaf, keeping one cell of
      padding on each side. Leaves under ``MIN_ROOM_SIZE + 2`` cells on either
      axis get no room.
    * Post-order over internal nodes, join a room from the left subtree to one
      from the right subtree with a 2-wide L-shaped corridor (x first, then y).

Room-less leaves can leave isolated floor pockets on small maps with many
iterations. This is accepted output, not repaired here.

The tree is an arena: :class:`SplitTree` owns a flat list of :class:`Leaf`
records that reference their children by index.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from ..grid.cells import Coord2D
from ..grid.config import GenerationParams
from ..grid.grid import Grid
from ..grid.tiles import FLOOR, WALL
from ..logging_utils import get_logger
from .base import BaseGenerator, blank_columns

log = get_logger(__name__)

MIN_LEAF_SIZE = 4
MIN_ROOM_SIZE = 3
ROOM_PADDING = 1
SPLIT_RATIO = 1.25
CORRIDOR_THICKNESS = 2


@dataclass
class Room:
    x: int
    y: int
    width: int
    height: int

    def cells(self):
        for ix in range(self.x, self.x + self.width):
            for iy in range(self.y, self.y + self.height):
                yield ix, iy

    @property
    def center(self) -> Coord2D:
        return (self.x + self.width // 2, self.y + self.height // 2)


@dataclass
class Leaf:
    x: int
    y: int
    width: int
    height: int
    depth: int = 0
    left: Optional[int] = None
    right: Optional[int] = None
    room: Optional[Room] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def contains(self, room: Room, padding: int = 0) -> bool:
        return (
            room.x >= self.x + padding
            and room.y >= self.y + padding
            and room.x + room.width <= self.x + self.width - padding
            and room.y + room.height <= self.y + self.height - padding
        )

    def fits_room(self) -> bool:
        span = MIN_ROOM_SIZE + 2 * ROOM_PADDING
        return self.width >= span and self.height >= span


@dataclass
class SplitTree:
    leaves: List[Leaf] = field(default_factory=list)

    ROOT = 0

    def add(self, leaf: Leaf) -> int:
        self.leaves.append(leaf)
        return len(self.leaves) - 1

    def __getitem__(self, index: int) -> Leaf:
        return self.leaves[index]

    def __len__(self) -> int:
        return len(self.leaves)

    def tree_leaves(self) -> Iterator[Leaf]:
        return (leaf for leaf in self.leaves if leaf.is_leaf)

    def rooms(self) -> List[Room]:
        return [leaf.room for leaf in self.leaves if leaf.room is not None]

    def depth(self) -> int:
        return max((leaf.depth for leaf in self.leaves), default=0)

    def room_in_subtree(self, index: Optional[int]) -> Optional[Room]:
        """First room found descending from ``index``, left subtree before right."""
        if index is None:
            return None
        leaf = self.leaves[index]
        if leaf.room is not None:
            return leaf.room
        return self.room_in_subtree(leaf.left) or self.room_in_subtree(leaf.right)


@dataclass
class BSPLayout:
    tree: SplitTree
    grid: Grid
    corridors: List[Tuple[Coord2D, Coord2D]] = field(default_factory=list)


def carve_block(cols: List[List[int]], x: int, y: int, thickness: int = CORRIDOR_THICKNESS) -> None:
    w = len(cols)
    h = len(cols[0]) if w else 0
    for i in range(thickness):
        for j in range(thickness):
            tx, ty = x + i, y + j
            if 0 <= tx < w and 0 <= ty < h:
                cols[tx][ty] = FLOOR


def carve_l_path(cols: List[List[int]], a: Coord2D, b: Coord2D, thickness: int = CORRIDOR_THICKNESS) -> None:
    """Walk from ``a`` toward ``b`` along x fully, then along y, carving at every step."""
    (cx, cy), (tx, ty) = a, b
    while cx != tx:
        cx += 1 if tx > cx else -1
        carve_block(cols, cx, cy, thickness)
    while cy != ty:
        cy += 1 if ty > cy else -1
        carve_block(cols, cx, cy, thickness)


class BSPGenerator(BaseGenerator):
    name = "bsp"
    scale = 4

    def build(self, params: GenerationParams, phase: Optional[Callable] = None,
              metrics: Optional[Dict] = None) -> BSPLayout:
        """Run all phases and return the split tree alongside the grid."""
        if phase is None:
            def phase(label, fn, *a, **k):
                return fn(*a, **k)
        width, height = self.grid_size(params)
        cols = blank_columns(width, height, WALL)
        tree = SplitTree()
        tree.add(Leaf(0, 0, width, height))
        phase('split', self._split, tree, SplitTree.ROOT, params.iterations)
        phase('rooms', self._create_rooms, tree, cols)
        corridors: List[Tuple[Coord2D, Coord2D]] = []
        phase('corridors', self._create_corridors, tree, SplitTree.ROOT, cols, corridors)
        grid = Grid(cols, width, height)
        if metrics is not None:
            tree_leaves = list(tree.tree_leaves())
            roomless = sum(1 for leaf in tree_leaves if leaf.room is None)
            metrics['leaves'] = len(tree_leaves)
            metrics['rooms'] = len(tree_leaves) - roomless
            metrics['roomless_leaves'] = roomless
            metrics['corridors'] = len(corridors)
            metrics['tree_depth'] = tree.depth()
        return BSPLayout(tree=tree, grid=grid, corridors=corridors)

    def _run_pipeline(self, params, phase, metrics) -> Grid:
        return self.build(params, phase, metrics if self.enable_metrics else None).grid

    # ---------------- Partitioning -------------------------------------------
    def _split(self, tree: SplitTree, index: int, remaining: int) -> None:
        if remaining <= 0:
            return
        leaf = tree[index]
        split_h = self.rng.random() > 0.5
        if leaf.width > leaf.height and leaf.width >= leaf.height * SPLIT_RATIO:
            split_h = False
        elif leaf.height > leaf.width and leaf.height >= leaf.width * SPLIT_RATIO:
            split_h = True

        limit = (leaf.height if split_h else leaf.width) - MIN_LEAF_SIZE
        if limit <= MIN_LEAF_SIZE:
            return
        cut = self.rng.randrange(MIN_LEAF_SIZE, limit)

        d = leaf.depth + 1
        if split_h:
            first = Leaf(leaf.x, leaf.y, leaf.width, cut, depth=d)
            second = Leaf(leaf.x, leaf.y + cut, leaf.width, leaf.height - cut, depth=d)
        else:
            first = Leaf(leaf.x, leaf.y, cut, leaf.height, depth=d)
            second = Leaf(leaf.x + cut, leaf.y, leaf.width - cut, leaf.height, depth=d)
        leaf.left = tree.add(first)
        leaf.right = tree.add(second)
        self._split(tree, leaf.left, remaining - 1)
        self._split(tree, leaf.right, remaining - 1)

    # ---------------- Rooms --------------------------------------------------
    def _create_rooms(self, tree: SplitTree, cols: List[List[int]]) -> None:
        w = len(cols)
        h = len(cols[0]) if w else 0
        skipped = 0
        for leaf in tree.tree_leaves():
            if not leaf.fits_room():
                skipped += 1
                continue
            rw = self.rng.randint(MIN_ROOM_SIZE, leaf.width - 2 * ROOM_PADDING)
            rh = self.rng.randint(MIN_ROOM_SIZE, leaf.height - 2 * ROOM_PADDING)
            rx = leaf.x + self.rng.randint(ROOM_PADDING, leaf.width - rw - ROOM_PADDING)
            ry = leaf.y + self.rng.randint(ROOM_PADDING, leaf.height - rh - ROOM_PADDING)
            leaf.room = Room(rx, ry, rw, rh)
            for ix, iy in leaf.room.cells():
                if 0 <= ix < w and 0 <= iy < h:
                    cols[ix][iy] = FLOOR
        if skipped:
            log.debug(event="roomless_leaves", count=skipped)

    # ---------------- Corridors ----------------------------------------------
    def _create_corridors(self, tree: SplitTree, index: int, cols: List[List[int]],
                          corridors: List[Tuple[Coord2D, Coord2D]]) -> None:
        leaf = tree[index]
        if leaf.left is None or leaf.right is None:
            return
        self._create_corridors(tree, leaf.left, cols, corridors)
        self._create_corridors(tree, leaf.right, cols, corridors)
        a = tree.room_in_subtree(leaf.left)
        b = tree.room_in_subtree(leaf.right)
        if a is not None and b is not None:
            carve_l_path(cols, a.center, b.center)
            corridors.append((a.center, b.center))


__all__ = [
    "BSPGenerator",
    "BSPLayout",
    "Leaf",
    "Room",
    "SplitTree",
    "carve_block",
    "carve_l_path",
    "MIN_LEAF_SIZE",
    "MIN_ROOM_SIZE",
    "CORRIDOR_THICKNESS",
]
