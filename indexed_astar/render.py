"""Rich renderables for plotting grid paths in the terminal."""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence

from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

from .grid import Coord

DEFAULT_SYMBOLS: Mapping[str, tuple[str, str]] = {
    "open": (".", "dim"),
    "blocked": ("#", "red"),
    "path": ("*", "bold cyan"),
    "start": ("S", "bold green"),
    "goal": ("G", "bold magenta"),
}


def _cell_kind(
    coord: Coord,
    start: Coord | None,
    goal: Coord | None,
    on_path: Collection[Coord],
    blocked: Collection[Coord],
) -> str:
    if coord == start:
        return "start"
    if coord == goal:
        return "goal"
    if coord in blocked:
        return "blocked"
    if coord in on_path:
        return "path"
    return "open"


def render_grid_path(
    width: int,
    height: int,
    path: Sequence[Coord] | None,
    blocked: Collection[Coord] = (),
    *,
    start: Coord | None = None,
    goal: Coord | None = None,
    title: str = "Path",
    symbols: Mapping[str, tuple[str, str]] | None = None,
) -> RenderableType:
    """Return a panel drawing the grid with ``path`` and ``blocked`` cells marked.

    ``start`` and ``goal`` default to the ends of ``path``; pass them
    explicitly to mark the endpoints of a search that found nothing.
    """

    palette = dict(DEFAULT_SYMBOLS)
    if symbols:
        palette.update(symbols)

    if path:
        start = path[0] if start is None else start
        goal = path[-1] if goal is None else goal
    on_path = frozenset(path or ())
    blocked = frozenset(blocked)

    body = Text()
    for y in range(height):
        for x in range(width):
            symbol, style = palette[_cell_kind(Coord(x, y), start, goal, on_path, blocked)]
            body.append(symbol, style=style)
            if x < width - 1:
                body.append(" ")
        if y < height - 1:
            body.append("\n")

    if not width or not height:
        body.append("(empty grid)")

    return Panel(body, title=title, border_style="cyan")


__all__ = ["DEFAULT_SYMBOLS", "render_grid_path"]
