"""
Greedy word wrapping.
"""

from __future__ import annotations

from typing import Iterator

__all__ = ["wrap_text"]


def wrap_text(text: str, columns: int) -> Iterator[str]:
    """
    Yield lines of `text` no longer than `columns`, breaking at spaces only.

    A word longer than `columns` goes on a line of its own.

    Example:
        wrap_text('The String global object is a constructor for strings, '
                  'or a sequence of characters.', 26)
        yields 'The String global object', 'is a constructor for',
               'strings, or a sequence of', 'characters.'
    """
    if columns < 1:
        raise ValueError(f"columns must be positive, got {columns}")

    words = text.split(" ")
    index = 0
    while index < len(words):
        line = words[index]
        index += 1
        while index < len(words) and len(line) + len(words[index]) < columns:
            line += " " + words[index]
            index += 1
        yield line
