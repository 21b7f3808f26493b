"""Compact text encoding of cell coordinate lists.

Used for the CLI's JSON output, where long paths and visitation traces would
otherwise dominate the payload.

Format strategy:
  - Raw form: semicolon separated ``x,y`` pairs in sequence order.
  - Delta form: ``D:`` marker, the first pair absolute, then per-step deltas.
    Paths move one cell per step, so most tokens shrink to ``1,0`` / ``0,-1``.
  - If the delta form is not shorter than the raw form, the raw form is used.

Compressed grammar (simple):
  D:x0,y0|dx1,dy1|dx2,dy2|...

Order is preserved unless ``sort=True`` is passed (useful for unordered sets,
where sorting makes deltas smaller).
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

Coord = Tuple[int, int]


def encode_raw(cells: Iterable[Coord]) -> str:
    return ";".join(f"{x},{y}" for x, y in cells)


def compress_cells(cells: Iterable[Coord], sort: bool = False) -> str:
    """Return the shorter of the raw and delta encodings of ``cells``.

    Args:
        cells: ``(x, y)`` integer pairs.
        sort: Sort before encoding (loses the original order).

    Returns:
        ``""`` for no cells, otherwise a raw ``x,y;...`` string or a ``D:`` string.
    """
    coords = [(int(x), int(y)) for x, y in cells]
    if not coords:
        return ""
    if sort:
        coords.sort()
    raw = encode_raw(coords)
    pieces = []
    prev_x, prev_y = None, None
    for x, y in coords:
        if prev_x is None:
            pieces.append(f"{x},{y}")
        else:
            pieces.append(f"{x-prev_x},{y-prev_y}")
        prev_x, prev_y = x, y
    compressed = "D:" + "|".join(pieces)
    return compressed if len(compressed) < len(raw) else raw


def decompress_cells(data: str) -> List[Coord]:
    """Inverse of :func:`compress_cells`; accepts either encoding.

    On parsing failure an empty list is returned (callers treat empty as a
    failed decode).
    """
    if not data:
        return []
    try:
        if not data.startswith("D:"):
            out = []
            for part in data.split(";"):
                if not part:
                    continue
                x_s, y_s = part.split(",")
                out.append((int(x_s), int(y_s)))
            return out
        coords: List[Coord] = []
        prev_x, prev_y = None, None
        for token in data[2:].split("|"):
            a_s, b_s = token.split(",")
            a, b = int(a_s), int(b_s)
            if prev_x is None:
                x, y = a, b
            else:
                x, y = prev_x + a, prev_y + b
            coords.append((x, y))
            prev_x, prev_y = x, y
        return coords
    except ValueError:
        return []


__all__ = ["compress_cells", "decompress_cells", "encode_raw"]
