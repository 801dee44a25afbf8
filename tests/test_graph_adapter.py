import math

import networkx as nx
import pytest

from indexed_astar import SearchBudgetExceeded, SearchSettings
from indexed_astar.graph import edge_weight, path_cost, shortest_path


def _town_graph() -> nx.Graph:
    graph = nx.Graph()
    positions = {
        "alpha": (0.0, 0.0),
        "beta": (1.0, 0.0),
        "gamma": (2.0, 0.0),
        "delta": (1.0, 1.0),
    }
    for name, pos in positions.items():
        graph.add_node(name, pos=pos)
    graph.add_edge("alpha", "beta", weight=3.0)
    graph.add_edge("beta", "gamma", weight=3.0)
    graph.add_edge("alpha", "delta", weight=1.5)
    graph.add_edge("delta", "gamma", weight=1.5)
    return graph


def test_shortest_path_matches_networkx_dijkstra():
    graph = _town_graph()
    path = shortest_path(graph, "alpha", "gamma")
    assert path == nx.dijkstra_path(graph, "alpha", "gamma")
    assert path == ["alpha", "delta", "gamma"]
    assert path_cost(graph, path) == pytest.approx(3.0)


def test_shortest_path_accepts_coordinate_heuristic():
    graph = _town_graph()

    def heuristic(node: str) -> float:
        (x1, y1), (x2, y2) = graph.nodes[node]["pos"], graph.nodes["gamma"]["pos"]
        return math.hypot(x2 - x1, y2 - y1)

    assert shortest_path(graph, "alpha", "gamma", heuristic=heuristic) == [
        "alpha",
        "delta",
        "gamma",
    ]


def test_missing_weight_defaults_to_one():
    graph = nx.path_graph(4)
    assert shortest_path(graph, 0, 3) == [0, 1, 2, 3]
    assert path_cost(graph, [0, 1, 2, 3]) == pytest.approx(3.0)
    assert edge_weight(graph, 0, 1) == pytest.approx(1.0)


def test_custom_weight_attribute():
    graph = nx.Graph()
    graph.add_edge("a", "b", weight=1.0, toll=10.0)
    graph.add_edge("a", "c", weight=5.0, toll=0.0)
    graph.add_edge("c", "b", weight=5.0, toll=0.0)
    assert shortest_path(graph, "a", "b") == ["a", "b"]
    assert shortest_path(graph, "a", "b", weight="toll") == ["a", "c", "b"]


def test_directed_graph_follows_successors():
    graph = nx.DiGraph()
    graph.add_edge("a", "b")
    graph.add_edge("b", "c")
    assert shortest_path(graph, "a", "c") == ["a", "b", "c"]
    assert shortest_path(graph, "c", "a") is None


def test_disconnected_nodes_have_no_path():
    graph = nx.Graph()
    graph.add_edge("a", "b")
    graph.add_node("island")
    assert shortest_path(graph, "a", "island") is None


def test_unknown_nodes_raise():
    graph = _town_graph()
    with pytest.raises(nx.NodeNotFound):
        shortest_path(graph, "alpha", "omega")


def test_settings_are_forwarded():
    graph = nx.path_graph(10)
    with pytest.raises(SearchBudgetExceeded):
        shortest_path(graph, 0, 9, settings=SearchSettings(max_expansions=2))


def test_path_cost_short_paths():
    graph = _town_graph()
    assert path_cost(graph, []) == 0.0
    assert path_cost(graph, ["alpha"]) == 0.0
