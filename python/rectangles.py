"""
Rectangle decomposition of ASCII box diagrams.

Scans a figure for top-left corners, traces each candidate's border clockwise
(right, down, left, up) and yields the rectangles whose border closes back on
the starting corner.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from ascii_render import render_rectangle
from figure_parser import parse_figure
from figure_types import (
    DEFAULT_ALPHABET,
    Direction,
    Figure,
    FigureAlphabet,
    Position,
    Rectangle,
)

logger = logging.getLogger(__name__)


class RejectionReason(Enum):
    """Reason why a candidate corner produced no rectangle."""

    TOP_EDGE_BROKEN = "top_edge_broken"  # No top-right corner found
    RIGHT_EDGE_BROKEN = "right_edge_broken"  # No bottom-right corner found
    BOTTOM_EDGE_BROKEN = "bottom_edge_broken"  # No bottom-left corner found
    LEFT_EDGE_BROKEN = "left_edge_broken"  # Left edge never turned right
    LOOP_NOT_CLOSED = "loop_not_closed"  # Trace ended away from the start


@dataclass(frozen=True)
class Rejection:
    """A candidate corner that did not anchor a rectangle."""

    corner: Position
    reason: RejectionReason
    reached: Position | None = None  # Where the trace ended, for LOOP_NOT_CLOSED


# =============================================================================
# Edge Tracing
# =============================================================================


def closes_edge(
    figure: Figure,
    pos: Position,
    direction: Direction,
    alphabet: FigureAlphabet = DEFAULT_ALPHABET,
) -> bool:
    """
    Check whether an edge running in `direction` ends at `pos`.

    The cell must be a corner, and the neighbour on the closing side must
    either be a corner (a junction shared with another rectangle) or the
    edge character of the next side.
    """
    if figure.char_at_position(pos) != alphabet.corner:
        return False
    side = direction.closing_side
    neighbour = figure.char_at_position(pos.step(side))
    return neighbour == alphabet.corner or neighbour == alphabet.edge_for(side)


def trace_horizontal_edge(
    figure: Figure,
    start: Position,
    direction: Direction,
    alphabet: FigureAlphabet = DEFAULT_ALPHABET,
) -> Position | None:
    """
    Follow a horizontal edge from a corner to the corner that ends it.

    Args:
        figure: The figure to trace in
        start: Corner the edge starts at
        direction: Direction.E or Direction.W
        alphabet: Characters the figure is drawn with

    Returns:
        Position of the terminating corner, or None if the edge is broken
        by a blank or runs off the end of its row
    """
    if not direction.is_horizontal:
        raise ValueError(f"Horizontal edge cannot be traced {direction.value}")

    _, dc = direction.delta
    row = start.row
    col = start.col + dc
    while 0 <= col < figure.row_length(row):
        pos = Position(row, col)
        if closes_edge(figure, pos, direction, alphabet):
            return pos
        if figure.char_at(row, col) == alphabet.blank:
            return None
        col += dc
    return None


def trace_vertical_edge(
    figure: Figure,
    start: Position,
    direction: Direction,
    alphabet: FigureAlphabet = DEFAULT_ALPHABET,
) -> Position | None:
    """
    Follow a vertical edge from a corner to the corner that ends it.

    Args:
        figure: The figure to trace in
        start: Corner the edge starts at
        direction: Direction.N or Direction.S
        alphabet: Characters the figure is drawn with

    Returns:
        Position of the terminating corner, or None if the edge is broken
        by a blank (including a row too short to reach the column) or runs
        off the top or bottom of the figure
    """
    if direction.is_horizontal:
        raise ValueError(f"Vertical edge cannot be traced {direction.value}")

    dr, _ = direction.delta
    row = start.row + dr
    col = start.col
    while 0 <= row < figure.height:
        # A row too short to reach the edge breaks it
        if col >= figure.row_length(row):
            return None
        pos = Position(row, col)
        if closes_edge(figure, pos, direction, alphabet):
            return pos
        if figure.char_at(row, col) == alphabet.blank:
            return None
        row += dr
    return None


# =============================================================================
# Rectangle Validation
# =============================================================================


def validate_corner(
    figure: Figure,
    corner: Position,
    alphabet: FigureAlphabet = DEFAULT_ALPHABET,
) -> Rectangle | Rejection:
    """
    Trace the border of the rectangle anchored at a top-left corner.

    The four sides are traced clockwise. The rectangle is accepted only if
    the trace up the left edge stops on the starting corner.
    """
    top_right = trace_horizontal_edge(figure, corner, Direction.E, alphabet)
    if top_right is None:
        return Rejection(corner, RejectionReason.TOP_EDGE_BROKEN)

    bottom_right = trace_vertical_edge(figure, top_right, Direction.S, alphabet)
    if bottom_right is None:
        return Rejection(corner, RejectionReason.RIGHT_EDGE_BROKEN)

    bottom_left = trace_horizontal_edge(figure, bottom_right, Direction.W, alphabet)
    if bottom_left is None:
        return Rejection(corner, RejectionReason.BOTTOM_EDGE_BROKEN)

    end = trace_vertical_edge(figure, bottom_left, Direction.N, alphabet)
    if end is None:
        return Rejection(corner, RejectionReason.LEFT_EDGE_BROKEN)

    if end != corner:
        return Rejection(corner, RejectionReason.LOOP_NOT_CLOSED, reached=end)

    return Rectangle(
        top=corner.row,
        left=corner.col,
        width=top_right.col - corner.col + 1,
        height=bottom_right.row - corner.row + 1,
    )


def find_rectangle(
    figure: Figure,
    corner: Position,
    alphabet: FigureAlphabet = DEFAULT_ALPHABET,
) -> Rectangle | None:
    """Return the rectangle anchored at `corner`, or None if its border does not close."""
    result = validate_corner(figure, corner, alphabet)
    if isinstance(result, Rejection):
        return None
    return result


# =============================================================================
# Corner Scanning
# =============================================================================


def is_top_left_candidate(
    figure: Figure,
    pos: Position,
    alphabet: FigureAlphabet = DEFAULT_ALPHABET,
) -> bool:
    """A corner with an edge (or junction) to its right and below it."""
    if figure.char_at_position(pos) != alphabet.corner:
        return False
    below = figure.char_at(pos.row + 1, pos.col)
    right = figure.char_at(pos.row, pos.col + 1)
    return below in (alphabet.vertical, alphabet.corner) and right in (
        alphabet.horizontal,
        alphabet.corner,
    )


def iter_corner_candidates(
    figure: Figure, alphabet: FigureAlphabet = DEFAULT_ALPHABET
) -> Iterator[Position]:
    """Yield top-left corner candidates in row-major order."""
    for row, line in enumerate(figure.rows):
        for col in range(len(line)):
            pos = Position(row, col)
            if is_top_left_candidate(figure, pos, alphabet):
                yield pos


class Decomposition:
    """
    Iterator over the rectangles of a figure that records skipped corners.

    Single pass: once exhausted it stays exhausted. Call decompose() again to
    start over.

    Usage:
        result = decompose(figure)
        for rect in result:
            print(rect)
        print(result.rejections)  # Candidates met so far that did not close
    """

    def __init__(self, figure: Figure, alphabet: FigureAlphabet = DEFAULT_ALPHABET) -> None:
        self.figure = figure
        self.alphabet = alphabet
        self.rejections: list[Rejection] = []
        self.found = 0
        self.exhausted = False
        self._iterator = _decompose_generator(figure, alphabet, self)

    def __iter__(self) -> Iterator[Rectangle]:
        return self

    def __next__(self) -> Rectangle:
        return next(self._iterator)


def decompose(figure: Figure, alphabet: FigureAlphabet = DEFAULT_ALPHABET) -> Decomposition:
    """
    Lazily decompose a figure into its rectangles.

    Rectangles come out in the row-major order of their top-left corners.
    Corners whose border cannot be traced back to themselves are skipped and
    appended to Decomposition.rejections.
    """
    return Decomposition(figure, alphabet)


def _decompose_generator(
    figure: Figure,
    alphabet: FigureAlphabet,
    result: Decomposition,
) -> Iterator[Rectangle]:
    """Internal generator for decompose(). Do not call directly."""
    for corner in iter_corner_candidates(figure, alphabet):
        outcome = validate_corner(figure, corner, alphabet)
        if isinstance(outcome, Rejection):
            logger.debug(
                "no rectangle at (%d, %d): %s",
                corner.row,
                corner.col,
                outcome.reason.value,
            )
            result.rejections.append(outcome)
            continue
        result.found += 1
        yield outcome

    result.exhausted = True
    logger.info(
        "decompose: %d rectangle(s) found, %d candidate(s) rejected",
        result.found,
        len(result.rejections),
    )


def iter_rectangles(
    figure: Figure, alphabet: FigureAlphabet = DEFAULT_ALPHABET
) -> Iterator[Rectangle]:
    """Yield the rectangles of a figure in discovery order."""
    yield from decompose(figure, alphabet)


def get_figure_rectangles(
    text: str, alphabet: FigureAlphabet = DEFAULT_ALPHABET
) -> Iterator[str]:
    """
    Break an ASCII figure into the rectangles it is made of.

    Example:
        '+------+-----+\\n'
        '|      |     |\\n'        =>   '+------+\\n'       '+-----+\\n'
        '+------+-----+\\n'             '|      |\\n'   ,   '|     |\\n'
                                        '+------+\\n'       '+-----+\\n'

    Args:
        text: The figure, rows separated by "\\n"
        alphabet: Characters the figure is drawn with

    Returns:
        Iterator of rendered rectangles, each line ending in "\\n"
    """
    figure = parse_figure(text, alphabet)
    for rect in decompose(figure, alphabet):
        yield render_rectangle(rect.width, rect.height, alphabet)
