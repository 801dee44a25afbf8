"""Command line entry point plotting a grid search in the terminal."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from pydantic import ValidationError
from rich.console import Console

from .config import SearchSettings
from .grid import Coord, euclidean_step_cost, in_bounds, neighbors_8, octile_distance, parse_coord
from .render import render_grid_path
from .search import SearchBudgetExceeded, find_path_with_cost

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_PATH = 1
EXIT_USAGE = 2


def _coord(text: str) -> Coord:
    try:
        return parse_coord(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="indexed-astar",
        description="Find the cheapest 8-connected path across a grid with obstacles.",
    )
    parser.add_argument("--width", type=int, default=10, help="Grid width in cells.")
    parser.add_argument("--height", type=int, default=6, help="Grid height in cells.")
    parser.add_argument("--start", type=_coord, default=Coord(0, 0), help="Start cell as x,y.")
    parser.add_argument("--goal", type=_coord, default=None, help="Goal cell as x,y (default: far corner).")
    parser.add_argument(
        "--block",
        type=_coord,
        action="append",
        default=[],
        help="Impassable cell as x,y. May be repeated.",
    )
    parser.add_argument("--max-expansions", type=int, default=None, help="Give up after this many expansions.")
    parser.add_argument("--verbose", action="store_true", help="Log search progress.")
    return parser


def main(argv: Sequence[str] | None = None, *, console: Console | None = None) -> int:
    """Run a grid search from the command line and return the exit status."""

    parser = build_parser()
    args = parser.parse_args(argv)
    console = console or Console()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    width, height = args.width, args.height
    start: Coord = args.start
    goal: Coord = args.goal or Coord(width - 1, height - 1)
    blocked = frozenset(args.block)

    if width <= 0 or height <= 0:
        parser.error("grid dimensions must be positive")
    for name, cell in (("start", start), ("goal", goal)):
        if not in_bounds(cell, width, height):
            parser.error(f"{name} {cell.x},{cell.y} lies outside a {width}x{height} grid")
    logger.debug("grid %dx%d with %d blocked cells", width, height, len(blocked))

    try:
        settings = SearchSettings(max_expansions=args.max_expansions)
    except ValidationError as exc:
        console.print(f"[red]invalid settings:[/red] {exc.errors()[0]['msg']}")
        return EXIT_USAGE

    try:
        path, cost = find_path_with_cost(
            start,
            goal,
            lambda cell: octile_distance(cell, goal),
            lambda cell: neighbors_8(cell, width, height),
            euclidean_step_cost(blocked),
            settings=settings,
        )
    except SearchBudgetExceeded as exc:
        console.print(f"[yellow]{exc}[/yellow]")
        return EXIT_NO_PATH

    console.print(
        render_grid_path(width, height, path, blocked, start=start, goal=goal, title="A* search")
    )
    if path is None:
        console.print("No path found.")
        return EXIT_NO_PATH

    console.print(f"{len(path)} cells, cost {cost:.3f}")
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - module entry point
    raise SystemExit(main())
