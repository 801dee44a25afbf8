from .coords import Coord, parse_coord
from .costs import GridEdgeCost, euclidean_step_cost
from .heuristics import (
    chebyshev_distance,
    euclidean_distance,
    manhattan_distance,
    octile_distance,
)
from .neighbors import in_bounds, neighbors_4, neighbors_8

__all__ = [
    "Coord",
    "parse_coord",
    "GridEdgeCost",
    "euclidean_step_cost",
    "chebyshev_distance",
    "euclidean_distance",
    "manhattan_distance",
    "octile_distance",
    "in_bounds",
    "neighbors_4",
    "neighbors_8",
]
