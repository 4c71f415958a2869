"""
Bank account number OCR.

Account numbers arrive as three lines of pipes and underscores, each digit
three columns wide:

        _  _     _  _  _  _  _
      | _| _||_||_ |_   ||_||_|
      ||_  _|  | _||_|  ||_| _|
"""

from __future__ import annotations

__all__ = ["GLYPHS", "parse_bank_account"]

GLYPH_WIDTH = 3
GLYPH_HEIGHT = 3

# Glyph rows concatenated top to bottom -> digit
GLYPHS: dict[str, int] = {
    " _ | ||_|": 0,
    "     |  |": 1,
    " _  _||_ ": 2,
    " _  _| _|": 3,
    "   |_|  |": 4,
    " _ |_  _|": 5,
    " _ |_ |_|": 6,
    " _   |  |": 7,
    " _ |_||_|": 8,
    " _ |_| _|": 9,
}


def _chunks(line: str) -> list[str]:
    """Split a line into whole glyph-width chunks. A trailing partial chunk is dropped."""
    count = len(line) // GLYPH_WIDTH
    return [line[i * GLYPH_WIDTH:(i + 1) * GLYPH_WIDTH] for i in range(count)]


def parse_bank_account(text: str) -> int:
    """
    Parse the account number drawn in the first three lines of `text`.

    Example:
        '    _  _     _  _  _  _  _ \\n'
        '  | _| _||_||_ |_   ||_||_|\\n'     =>  123456789
        '  ||_  _|  | _||_|  ||_| _|\\n'

    Leading zeros are lost in the conversion to int.

    Raises:
        ValueError: If there are fewer than three lines or a glyph is not a digit
    """
    lines = text.split("\n")
    if len(lines) < GLYPH_HEIGHT:
        raise ValueError(
            f"Account number needs {GLYPH_HEIGHT} lines, got {len(lines)}"
        )

    rows = [_chunks(line) for line in lines[:GLYPH_HEIGHT]]
    digit_count = len(rows[0])

    digits: list[str] = []
    for index in range(digit_count):
        glyph = "".join(row[index] if index < len(row) else "" for row in rows)
        if glyph not in GLYPHS:
            raise ValueError(
                f"Unrecognized glyph at digit {index}\n"
                f"  Columns {index * GLYPH_WIDTH}-{index * GLYPH_WIDTH + GLYPH_WIDTH - 1}\n"
                f"  Glyph rows: {[row[index] if index < len(row) else '' for row in rows]}"
            )
        digits.append(str(GLYPHS[glyph]))

    if not digits:
        raise ValueError("Account number contains no digits")

    return int("".join(digits))
