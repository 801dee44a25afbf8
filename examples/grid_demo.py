from rich.console import Console

from indexed_astar import find_path_with_cost
from indexed_astar.grid import Coord, euclidean_step_cost, neighbors_8, octile_distance
from indexed_astar.render import render_grid_path

width, height = 12, 6
start = Coord(0, 0)
goal = Coord(11, 0)  # keep within demo bounds

blocked = {Coord(3, 0), Coord(3, 1), Coord(3, 2), Coord(7, 3), Coord(7, 4), Coord(7, 5)}


def neighbors(c: Coord):
    return neighbors_8(c, width, height)


def heuristic(c: Coord) -> float:
    return octile_distance(c, goal)


if __name__ == "__main__":
    path, total_cost = find_path_with_cost(
        start, goal, heuristic, neighbors, euclidean_step_cost(blocked)
    )
    console = Console()
    console.print(render_grid_path(width, height, path, blocked, start=start, goal=goal))
    console.print("cost:", total_cost)
