from __future__ import annotations

from typing import Iterable

from .coords import Coord

_OFFSETS = (-1, 0, 1)

_ORTHOGONAL_DIRS = (
    (0, -1),
    (-1, 0),
    (+1, 0),
    (0, +1),
)


def in_bounds(c: Coord, width: int, height: int) -> bool:
    return 0 <= c.x < width and 0 <= c.y < height


def neighbors_8(c: Coord, width: int, height: int) -> Iterable[Coord]:
    # row above, own row, row below; left to right within each row
    for dy in _OFFSETS:
        y = c.y + dy
        if y < 0 or y >= height:
            continue
        for dx in _OFFSETS:
            if dx == 0 and dy == 0:
                continue
            x = c.x + dx
            if 0 <= x < width:
                yield Coord(x, y)


def neighbors_4(c: Coord, width: int, height: int) -> Iterable[Coord]:
    for dx, dy in _ORTHOGONAL_DIRS:
        n = Coord(c.x + dx, c.y + dy)
        if in_bounds(n, width, height):
            yield n
