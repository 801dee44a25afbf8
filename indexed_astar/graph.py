"""Run the search over explicit ``networkx`` graphs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Hashable, Mapping, Sequence, TypeAlias

import networkx as nx

from .config import SearchSettings
from .search import find_path

if TYPE_CHECKING:  # pragma: no cover - typing only
    WeightedGraph: TypeAlias = nx.Graph[Hashable]
else:  # pragma: no cover - runtime alias without subscripting
    WeightedGraph: TypeAlias = nx.Graph

DEFAULT_EDGE_WEIGHT = 1.0


def edge_weight(
    graph: WeightedGraph, origin: Hashable, destination: Hashable, weight: str = "weight"
) -> float:
    """Return the weight stored on ``origin -> destination``, defaulting to one."""

    data = graph.get_edge_data(origin, destination) or {}
    return float(data.get(weight, DEFAULT_EDGE_WEIGHT))


def shortest_path(
    graph: WeightedGraph,
    start: Hashable,
    goal: Hashable,
    *,
    heuristic: Callable[[Hashable], float] | None = None,
    weight: str = "weight",
    settings: SearchSettings | None = None,
) -> list[Hashable] | None:
    """Return the lowest-cost path between ``start`` and ``goal`` or ``None``.

    Without a ``heuristic`` the search degrades to Dijkstra's algorithm.
    Directed graphs are followed along their successors only.
    """

    for node in (start, goal):
        if node not in graph:
            raise nx.NodeNotFound(f"node {node!r} is not in the graph")

    def cost(came_from: Mapping[Hashable, Hashable], a: Hashable, b: Hashable) -> float:
        return edge_weight(graph, a, b, weight)

    return find_path(
        start,
        goal,
        heuristic or (lambda node: 0.0),
        graph.neighbors,
        cost,
        settings=settings,
    )


def path_cost(graph: WeightedGraph, path: Sequence[Hashable], weight: str = "weight") -> float:
    """Return the total weight of ``path`` within ``graph``."""

    if len(path) < 2:
        return 0.0
    return sum(
        edge_weight(graph, origin, destination, weight)
        for origin, destination in zip(path, path[1:])
    )


__all__ = ["edge_weight", "path_cost", "shortest_path"]
