from __future__ import annotations

import math

from .coords import Coord

_DIAGONAL_EXTRA = math.sqrt(2) - 1


def manhattan_distance(a: Coord, b: Coord) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def chebyshev_distance(a: Coord, b: Coord) -> int:
    return max(abs(a.x - b.x), abs(a.y - b.y))


def euclidean_distance(a: Coord, b: Coord) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def octile_distance(a: Coord, b: Coord) -> float:
    """Exact cost of the cheapest 8-connected walk on an open grid."""

    dx = abs(a.x - b.x)
    dy = abs(a.y - b.y)
    return max(dx, dy) + _DIAGONAL_EXTRA * min(dx, dy)
