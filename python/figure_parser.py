"""
Figure parsing utilities.

Turns the text of an ASCII box diagram into a Figure. Lines are separated by
"\\n" and kept at their own lengths (rows may be ragged).
"""

from __future__ import annotations

from figure_types import DEFAULT_ALPHABET, Figure, FigureAlphabet

__all__ = ["parse_figure"]


def parse_figure(
    text: str,
    alphabet: FigureAlphabet = DEFAULT_ALPHABET,
    strict: bool = False,
) -> Figure:
    """
    Parse a figure from its text.

    Example:
        '+--+\\n'
        '|  |\\n'
        '+--+\\n'

        Creates a Figure with rows ('+--+', '|  |', '+--+', '').

    A trailing newline produces a final empty row, which reads as blank like
    any other out-of-range cell.

    Args:
        text: The diagram, one row per line
        alphabet: Characters the diagram is drawn with
        strict: If True, reject characters outside the alphabet

    Returns:
        Figure holding the rows as given

    Raises:
        ValueError: In strict mode, if a row contains a character that is not
            part of the alphabet
    """
    rows = tuple(text.split("\n"))

    if strict:
        valid = alphabet.characters
        for row_idx, row in enumerate(rows):
            for col_idx, char in enumerate(row):
                if char not in valid:
                    raise ValueError(
                        f"Invalid character {char!r} in figure\n"
                        f"  Row {row_idx}: \"{row}\"\n"
                        f"  Position: column {col_idx}\n"
                        f"  Valid characters: "
                        f"{', '.join(repr(c) for c in sorted(valid))}"
                    )

    return Figure(rows, blank=alphabet.blank)
