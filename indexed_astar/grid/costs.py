from __future__ import annotations

import math
from typing import Callable, Collection, Mapping

from .coords import Coord
from .heuristics import euclidean_distance

GridEdgeCost = Callable[[Mapping[Coord, Coord], Coord, Coord], float]


def euclidean_step_cost(blocked: Collection[Coord] = ()) -> GridEdgeCost:
    """Build an edge cost pricing moves by length; entering ``blocked`` is impassable."""

    blocked = frozenset(blocked)

    def cost(came_from: Mapping[Coord, Coord], a: Coord, b: Coord) -> float:
        if b in blocked:
            return math.inf
        return euclidean_distance(a, b)

    return cost
