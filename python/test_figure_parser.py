"""Tests for figure_parser and figure_types modules."""

import pytest

from figure_parser import parse_figure
from figure_types import Direction, Figure, FigureAlphabet, Position, Rectangle


class TestParseFigure:
    """Tests for parse_figure."""

    def test_rows_kept_as_given(self) -> None:
        """Each line becomes a row."""
        fig = parse_figure("+--+\n|  |\n+--+")
        assert fig.rows == ("+--+", "|  |", "+--+")
        assert fig.height == 3
        assert fig.width == 4

    def test_ragged_rows(self) -> None:
        """Rows keep their own lengths."""
        fig = parse_figure("+--+\n|\n+--+  ")
        assert [fig.row_length(r) for r in range(3)] == [4, 1, 6]
        assert fig.width == 6

    def test_trailing_newline_adds_empty_row(self) -> None:
        """A trailing newline gives a final empty row."""
        fig = parse_figure("++\n++\n")
        assert fig.rows == ("++", "++", "")

    def test_empty_text(self) -> None:
        """Empty text gives one empty row."""
        fig = parse_figure("")
        assert fig.rows == ("",)
        assert fig.width == 0

    def test_lenient_by_default(self) -> None:
        """Unknown characters are kept without complaint."""
        fig = parse_figure("+-x+")
        assert fig.char_at(0, 2) == "x"

    def test_strict_accepts_alphabet(self) -> None:
        """Strict parsing passes a well-formed figure."""
        fig = parse_figure("+--+\n|  |\n+--+", strict=True)
        assert fig.height == 3

    def test_strict_rejects_unknown_character(self) -> None:
        """Strict parsing raises on characters outside the alphabet."""
        with pytest.raises(ValueError, match="Invalid character"):
            parse_figure("+--+\n|  #\n+--+", strict=True)

    def test_strict_error_details(self) -> None:
        """The strict parsing error says where the bad character is."""
        try:
            parse_figure("+--+\n|  #\n+--+", strict=True)
            assert False, "Should have raised ValueError"
        except ValueError as e:
            error_msg = str(e)
            assert "Invalid character '#'" in error_msg
            assert "Row 1:" in error_msg
            assert "Position: column 3" in error_msg
            assert "Valid characters:" in error_msg

    def test_strict_with_custom_alphabet(self) -> None:
        """Strict parsing checks against the given alphabet."""
        alphabet = FigureAlphabet(corner="*", horizontal="=", vertical=":")
        parse_figure("*==*\n:  :\n*==*", alphabet, strict=True)
        with pytest.raises(ValueError, match="Invalid character '-'"):
            parse_figure("*--*", alphabet, strict=True)


class TestFigureCharAt:
    """Tests for bounds-safe reads."""

    def test_inside(self) -> None:
        """Cells inside the grid read normally."""
        fig = Figure(("+-+", "| |"))
        assert fig.char_at(0, 1) == "-"
        assert fig.char_at(1, 0) == "|"
        assert fig.char_at_position(Position(1, 2)) == "|"

    def test_past_end_of_row(self) -> None:
        """Reads past a short row are blank."""
        fig = Figure(("+-+", "|"))
        assert fig.char_at(1, 2) == " "

    def test_past_last_row(self) -> None:
        """Reads below the figure are blank."""
        fig = Figure(("+-+",))
        assert fig.char_at(5, 0) == " "
        assert fig.row_length(5) == 0

    def test_negative_indices(self) -> None:
        """Negative indices are blank rather than wrapping around."""
        fig = Figure(("+-+", "| |", "+-+"))
        assert fig.char_at(-1, 0) == " "
        assert fig.char_at(0, -1) == " "
        assert fig.row_length(-1) == 0

    def test_custom_blank(self) -> None:
        """Out-of-range reads use the figure's blank character."""
        fig = Figure(("+",), blank=".")
        assert fig.char_at(3, 3) == "."

    def test_str(self) -> None:
        """A figure prints as its text."""
        assert str(Figure(("+-+", "+-+"))) == "+-+\n+-+"


class TestDirection:
    """Tests for Direction helpers."""

    def test_deltas(self) -> None:
        """Each direction is a unit step."""
        assert Direction.N.delta == (-1, 0)
        assert Direction.S.delta == (1, 0)
        assert Direction.E.delta == (0, 1)
        assert Direction.W.delta == (0, -1)

    def test_closing_sides_turn_clockwise(self) -> None:
        """The next side of a border is a clockwise turn away."""
        assert Direction.E.closing_side == Direction.S
        assert Direction.S.closing_side == Direction.W
        assert Direction.W.closing_side == Direction.N
        assert Direction.N.closing_side == Direction.E

    def test_step(self) -> None:
        """Positions step one cell at a time."""
        assert Position(2, 2).step(Direction.N) == Position(1, 2)
        assert Position(2, 2).step(Direction.W) == Position(2, 1)

    def test_edge_characters(self) -> None:
        """Horizontal edges use '-', vertical edges '|'."""
        alphabet = FigureAlphabet()
        assert alphabet.edge_for(Direction.E) == "-"
        assert alphabet.edge_for(Direction.W) == "-"
        assert alphabet.edge_for(Direction.N) == "|"
        assert alphabet.edge_for(Direction.S) == "|"


class TestRectangle:
    """Tests for Rectangle geometry."""

    def test_extent(self) -> None:
        """Bottom and right are inclusive."""
        rect = Rectangle(top=2, left=3, width=5, height=4)
        assert rect.bottom == 5
        assert rect.right == 7
        assert rect.top_left == Position(2, 3)
        assert rect.corners == (
            Position(2, 3),
            Position(2, 7),
            Position(5, 7),
            Position(5, 3),
        )

    def test_on_border(self) -> None:
        """Only border cells are on the border."""
        rect = Rectangle(0, 0, 4, 3)
        assert rect.on_border(0, 2)
        assert rect.on_border(1, 3)
        assert not rect.on_border(1, 1)
        assert not rect.on_border(0, 4)
        assert not rect.on_border(3, 0)
