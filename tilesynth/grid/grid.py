"""Immutable tile grid shared by generators and pathfinders.

Storage is column-major (``grid[x][y]``), matching how generators carve and
how pathfinders scan for endpoints. Generators build a mutable list-of-lists
and freeze it by passing it to the :class:`Grid` constructor before returning.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .cells import Coord2D
from .tiles import CHAR_MAP, FLOOR, TILE_FROM_CHAR, WALL


class Grid:
    __slots__ = ("_cols", "_width", "_height")

    def __init__(self, columns: Sequence[Sequence[int]], width: int, height: int):
        if len(columns) != width:
            raise ValueError(f"expected {width} columns, got {len(columns)}")
        cols = tuple(tuple(c) for c in columns)
        for c in cols:
            if len(c) != height:
                raise ValueError(f"column height {len(c)} != {height}")
        self._cols: Tuple[Tuple[int, ...], ...] = cols
        self._width = width
        self._height = height

    # -- construction ---------------------------------------------------------
    @classmethod
    def filled(cls, width: int, height: int, value: int = WALL) -> "Grid":
        width, height = max(0, width), max(0, height)
        return cls([[value] * height for _ in range(width)], width, height)

    @classmethod
    def from_columns(cls, columns: Sequence[Sequence[int]], height: Optional[int] = None) -> "Grid":
        """Freeze a column-major list of lists.

        ``height`` is only needed when there are no columns to infer it from.
        """
        width = len(columns)
        if height is None:
            height = len(columns[0]) if width else 0
        return cls(columns, width, height)

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        """Parse rows of ``#`` (wall) and ``.`` (floor); blank lines are ignored."""
        rows = [line.strip() for line in text.strip().splitlines() if line.strip()]
        if not rows:
            return cls.filled(0, 0)
        height = len(rows)
        width = len(rows[0])
        cols: List[List[int]] = [[WALL] * height for _ in range(width)]
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {y} has length {len(row)}, expected {width}")
            for x, ch in enumerate(row):
                if ch not in TILE_FROM_CHAR:
                    raise ValueError(f"unknown tile character {ch!r} at {(x, y)}")
                cols[x][y] = TILE_FROM_CHAR[ch]
        return cls(cols, width, height)

    # -- shape ----------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cell_count(self) -> int:
        return self._width * self._height

    @property
    def is_empty(self) -> bool:
        return self._width == 0 or self._height == 0

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def index(self, x: int, y: int) -> int:
        return y * self._width + x

    def coord(self, index: int) -> Coord2D:
        return (index % self._width, index // self._width)

    # -- access ---------------------------------------------------------------
    def __getitem__(self, x: int) -> Tuple[int, ...]:
        """Column ``x``. The returned tuple is not bounds-checked on ``y``."""
        if not 0 <= x < self._width:
            raise IndexError(f"column {x} outside [0, {self._width})")
        return self._cols[x]

    def get(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell {(x, y)} outside {self._width}x{self._height} grid")
        return self._cols[x][y]

    def is_floor(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self._cols[x][y] == FLOOR

    def neighbors4(self, x: int, y: int) -> Iterator[Coord2D]:
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if 0 <= nx < self._width and 0 <= ny < self._height:
                yield nx, ny

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        for x, col in enumerate(self._cols):
            for y, v in enumerate(col):
                yield x, y, v

    def floor_cells(self) -> List[Coord2D]:
        return [(x, y) for x, y, v in self.cells() if v == FLOOR]

    def count(self, value: int) -> int:
        return sum(col.count(value) for col in self._cols)

    def to_lists(self) -> List[List[int]]:
        return [list(c) for c in self._cols]

    def to_text(self, overlay: Optional[Dict[Coord2D, str]] = None) -> str:
        """Row-major text dump, one line per ``y``. ``overlay`` replaces characters per cell."""
        overlay = overlay or {}
        lines = []
        for y in range(self._height):
            lines.append(
                "".join(overlay.get((x, y), CHAR_MAP[self._cols[x][y]]) for x in range(self._width))
            )
        return "\n".join(lines)

    # -- dunder ---------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self._width, self._height, self._cols) == (other._width, other._height, other._cols)

    def __hash__(self) -> int:
        return hash((self._width, self._height, self._cols))

    def __len__(self) -> int:
        return self._width

    def __repr__(self) -> str:
        return f"Grid({self._width}x{self._height}, floor={self.count(FLOOR)})"


__all__ = ["Grid"]
