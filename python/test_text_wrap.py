"""Tests for text_wrap module."""

import pytest

from text_wrap import wrap_text

TEXT = "The String global object is a constructor for strings, or a sequence of characters."


class TestWrapText:
    """Tests for wrap_text."""

    def test_wrap_26(self) -> None:
        """Lines break at word boundaries within 26 columns."""
        assert list(wrap_text(TEXT, 26)) == [
            "The String global object",
            "is a constructor for",
            "strings, or a sequence of",
            "characters.",
        ]

    def test_wrap_12(self) -> None:
        """Narrow columns put fewer words on each line."""
        assert list(wrap_text(TEXT, 12)) == [
            "The String",
            "global",
            "object is a",
            "constructor",
            "for strings,",
            "or a",
            "sequence of",
            "characters.",
        ]

    def test_lines_fit(self) -> None:
        """No line is longer than the column count when words fit."""
        for columns in range(11, 40):
            assert all(len(line) <= columns for line in wrap_text(TEXT, columns))

    def test_long_word_alone(self) -> None:
        """A word wider than the columns gets its own line."""
        assert list(wrap_text("a supercalifragilistic b", 5)) == ["a", "supercalifragilistic", "b"]

    def test_lazy(self) -> None:
        """Lines are produced one at a time."""
        lines = wrap_text(TEXT, 26)
        assert next(lines) == "The String global object"

    def test_invalid_columns(self) -> None:
        """Zero columns is refused."""
        with pytest.raises(ValueError, match="columns must be positive"):
            list(wrap_text(TEXT, 0))
