"""A* search over implicit graphs defined by injected callables.

The graph is never materialised: ``neighbors`` enumerates the successors
of a node, ``edge_cost`` prices a single move and ``heuristic`` estimates
the remaining cost to the goal. ``edge_cost`` also receives the live
predecessor mapping so it can price moves based on the shape of the path
so far (it must treat the mapping as read-only).

Costs must be non-negative; ``math.inf`` marks an impassable edge. The
heuristic must never overestimate the remaining cost for the returned
path to be optimal. Neither requirement is checked.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, Iterable, List, Mapping, Tuple, TypeVar

from .config import SearchSettings
from .heap import IndexedMinHeap

logger = logging.getLogger(__name__)

Node = TypeVar("Node", bound=Hashable)

Heuristic = Callable[[Node], float]
NeighborFunction = Callable[[Node], Iterable[Node]]
EdgeCost = Callable[[Mapping[Node, Node], Node, Node], float]


class SearchBudgetExceeded(RuntimeError):
    """Raised when a search expands more nodes than its settings allow."""

    def __init__(self, expansions: int) -> None:
        super().__init__(f"search gave up after {expansions} expansions")
        self.expansions = expansions


@dataclass
class SearchStats:
    """Counters collected during a single search."""

    expansions: int = 0
    relaxations: int = 0
    found: bool = False


def reconstruct_path(came_from: Mapping[Node, Node], current: Node) -> List[Node]:
    """Follow predecessors back from ``current`` and return the start-to-goal path."""

    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def find_path_with_cost(
    start: Node,
    goal: Node,
    heuristic: Heuristic,
    neighbors: NeighborFunction,
    edge_cost: EdgeCost,
    *,
    settings: SearchSettings | None = None,
) -> Tuple[List[Node] | None, float]:
    """Return ``(path, total_cost)`` or ``(None, inf)`` when the goal is unreachable."""

    settings = settings or SearchSettings.default()
    stats = SearchStats()

    came_from: Dict[Node, Node] = {}
    g_score: Dict[Node, float] = {start: 0.0}
    f_score: Dict[Node, float] = {start: heuristic(start)}

    open_heap: IndexedMinHeap[Node] = IndexedMinHeap(
        lambda node: f_score.get(node, math.inf),
        stable=settings.stable_ties,
        check_invariants=settings.check_heap_invariants,
    )
    open_heap.upsert(start)
    logger.debug("searching from %r to %r", start, goal)

    while True:
        if not open_heap:
            logger.debug("no path from %r to %r: %s", start, goal, stats)
            return None, math.inf

        current = open_heap.remove_minimum()
        if current == goal:
            stats.found = True
            logger.debug("reached %r: %s", goal, stats)
            return reconstruct_path(came_from, current), g_score[current]

        if settings.max_expansions is not None and stats.expansions >= settings.max_expansions:
            logger.warning(
                "search from %r to %r exhausted its budget of %d expansions",
                start,
                goal,
                settings.max_expansions,
            )
            raise SearchBudgetExceeded(stats.expansions)

        stats.expansions += 1
        cost_to_current = g_score.get(current, math.inf)
        for neighbor in neighbors(current):
            tentative = cost_to_current + edge_cost(came_from, current, neighbor)
            if tentative < g_score.get(neighbor, math.inf):
                stats.relaxations += 1
                came_from[neighbor] = current
                g_score[neighbor] = tentative
                f_score[neighbor] = tentative + heuristic(neighbor)
                open_heap.upsert(neighbor)


def find_path(
    start: Node,
    goal: Node,
    heuristic: Heuristic,
    neighbors: NeighborFunction,
    edge_cost: EdgeCost,
    *,
    settings: SearchSettings | None = None,
) -> List[Node] | None:
    """Return the cheapest path from ``start`` to ``goal`` or ``None`` if there is none."""

    path, _ = find_path_with_cost(
        start, goal, heuristic, neighbors, edge_cost, settings=settings
    )
    return path


__all__ = [
    "EdgeCost",
    "Heuristic",
    "NeighborFunction",
    "SearchBudgetExceeded",
    "SearchStats",
    "find_path",
    "find_path_with_cost",
    "reconstruct_path",
]
