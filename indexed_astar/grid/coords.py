from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Coord:
    x: int  # column
    y: int  # row


def parse_coord(text: str) -> Coord:
    """Parse ``"x,y"`` into a :class:`Coord`."""

    left, sep, right = text.partition(",")
    if not sep:
        raise ValueError(f"expected 'x,y' but got {text!r}")
    try:
        return Coord(int(left.strip()), int(right.strip()))
    except ValueError:
        raise ValueError(f"coordinates must be integers: {text!r}") from None
