"""
Shared type definitions for figure decomposition.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Cardinal direction for edge tracing."""

    N = "N"  # Up (decreasing row)
    S = "S"  # Down (increasing row)
    E = "E"  # Right (increasing col)
    W = "W"  # Left (decreasing col)

    @property
    def delta(self) -> tuple[int, int]:
        """(row_delta, col_delta) for one step in this direction."""
        return _DELTAS[self]

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.E, Direction.W)

    @property
    def closing_side(self) -> Direction:
        """
        Side on which the next side of a rectangle appears when tracing its
        border clockwise: below a top edge, left of a right edge, above a
        bottom edge, right of a left edge.
        """
        return _CLOSING_SIDES[self]


_DELTAS = {
    Direction.N: (-1, 0),
    Direction.S: (1, 0),
    Direction.E: (0, 1),
    Direction.W: (0, -1),
}

_CLOSING_SIDES = {
    Direction.E: Direction.S,
    Direction.S: Direction.W,
    Direction.W: Direction.N,
    Direction.N: Direction.E,
}


@dataclass(frozen=True)
class FigureAlphabet:
    """Characters a figure is drawn with."""

    corner: str = "+"
    horizontal: str = "-"
    vertical: str = "|"
    blank: str = " "

    @property
    def characters(self) -> frozenset[str]:
        return frozenset((self.corner, self.horizontal, self.vertical, self.blank))

    def edge_for(self, direction: Direction) -> str:
        """Character an edge running in the given direction is drawn with."""
        return self.horizontal if direction.is_horizontal else self.vertical


DEFAULT_ALPHABET = FigureAlphabet()


# =============================================================================
# Figure Definition Types
# =============================================================================


@dataclass(frozen=True)
class Position:
    """A cell in a figure."""

    row: int
    col: int

    def step(self, direction: Direction) -> Position:
        dr, dc = direction.delta
        return Position(self.row + dr, self.col + dc)


@dataclass(frozen=True)
class Rectangle:
    """A rectangle found in a figure. Sizes count the border characters."""

    top: int
    left: int
    width: int  # >= 2
    height: int  # >= 2

    @property
    def bottom(self) -> int:
        return self.top + self.height - 1

    @property
    def right(self) -> int:
        return self.left + self.width - 1

    @property
    def top_left(self) -> Position:
        return Position(self.top, self.left)

    @property
    def corners(self) -> tuple[Position, Position, Position, Position]:
        """Corners clockwise from top-left."""
        return (
            Position(self.top, self.left),
            Position(self.top, self.right),
            Position(self.bottom, self.right),
            Position(self.bottom, self.left),
        )

    def on_border(self, row: int, col: int) -> bool:
        if not (self.top <= row <= self.bottom and self.left <= col <= self.right):
            return False
        return row in (self.top, self.bottom) or col in (self.left, self.right)


@dataclass(frozen=True)
class Figure:
    """
    A ragged 2D grid of characters.

    Rows keep their own lengths. Reads outside the grid (negative indices,
    past the last row, or past the end of a short row) return the blank
    character instead of raising.
    """

    rows: tuple[str, ...]
    blank: str = " "

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    def row_length(self, row: int) -> int:
        if 0 <= row < len(self.rows):
            return len(self.rows[row])
        return 0

    def char_at(self, row: int, col: int) -> str:
        if row < 0 or col < 0 or row >= len(self.rows):
            return self.blank
        line = self.rows[row]
        if col >= len(line):
            return self.blank
        return line[col]

    def char_at_position(self, pos: Position) -> str:
        return self.char_at(pos.row, pos.col)

    def __str__(self) -> str:
        return "\n".join(self.rows)
