"""
ASCII rendering for figure decomposition.

Provides:
1. Canonical rendering of a single rectangle from its size
2. Figure rendering with one rectangle's border highlighted
3. Flow rendering - lays rendered rectangles side by side in coloured rows
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

import simple_chalk as chalk  # type: ignore[import-untyped]

from figure_types import DEFAULT_ALPHABET, Figure, FigureAlphabet, Rectangle

logger = logging.getLogger(__name__)


# =============================================================================
# Canonical Rendering
# =============================================================================


def render_rectangle(
    width: int, height: int, alphabet: FigureAlphabet = DEFAULT_ALPHABET
) -> str:
    """
    Render the minimal block for a rectangle of the given size.

    Example:
        render_rectangle(5, 3) == '+---+\\n|   |\\n+---+\\n'

    Args:
        width: Width in characters, borders included (>= 2)
        height: Height in characters, borders included (>= 2)
        alphabet: Characters to draw with

    Returns:
        The block, every line (the last included) ending in "\\n"
    """
    if width < 2 or height < 2:
        raise ValueError(
            f"Rectangle too small to render: {width}x{height}\n"
            f"  Width and height must both be at least 2"
        )

    inner = width - 2
    border = alphabet.corner + alphabet.horizontal * inner + alphabet.corner + "\n"
    middle = alphabet.vertical + alphabet.blank * inner + alphabet.vertical + "\n"
    return border + middle * (height - 2) + border


# =============================================================================
# Highlighted Figure Rendering
# =============================================================================


def highlight_rectangle(
    figure: Figure,
    rect: Rectangle | None,
    highlight: Callable[[str], str] = chalk.bgWhite.black,
) -> str:
    """
    Render a figure with the border cells of one rectangle highlighted.

    Rows keep their ragged lengths; border cells past the end of a short row
    are not drawn.
    """
    lines: list[str] = []
    for r_idx, row in enumerate(figure.rows):
        if rect is None or not (rect.top <= r_idx <= rect.bottom):
            lines.append(row)
            continue

        parts: list[str] = []
        for c_idx, char in enumerate(row):
            if rect.on_border(r_idx, c_idx):
                parts.append(highlight(char))
            else:
                parts.append(char)
        lines.append("".join(parts))

    return "\n".join(lines)


# =============================================================================
# Flow Rendering
# =============================================================================


def render_rectangles_flow(
    blocks: Iterable[str],
    terminal_width: int = 120,
    spacing: int = 2,
    colorize: bool = True,
) -> str:
    """
    Render rectangle blocks in flow layout (multiple blocks per row).

    Args:
        blocks: Rendered rectangles, as produced by render_rectangle
        terminal_width: Maximum width for layout (default 120)
        spacing: Spaces between blocks on the same row (default 2)
        colorize: Colour each block from a fixed palette

    Returns:
        Rendered string with all blocks in flow layout
    """
    # Build color palette for blocks
    colors: list[Callable[[str], str]] = [
        chalk.red,
        chalk.green,
        chalk.yellow,
        chalk.blue,
        chalk.magenta,
        chalk.cyan,
        chalk.redBright,
        chalk.greenBright,
        chalk.yellowBright,
        chalk.blueBright,
    ]

    rendered_blocks: list[list[str]] = []
    block_widths: list[int] = []

    for index, block in enumerate(blocks):
        plain_lines = block.rstrip("\n").split("\n")
        # Widths come from the uncoloured text; ANSI codes have no width
        block_widths.append(max(len(line) for line in plain_lines))
        if colorize:
            color = colors[index % len(colors)]
            rendered_blocks.append([color(line) for line in plain_lines])
        else:
            rendered_blocks.append(plain_lines)

    # Layout blocks in rows - fit as many as possible per row
    output_lines: list[str] = []

    current_row: list[int] = []
    current_row_width = 0

    for index, block_width in enumerate(block_widths):
        needed_width = block_width
        if current_row:
            needed_width += spacing  # Add spacing if not first in row

        if current_row and current_row_width + needed_width > terminal_width:
            # Start new row - flush current row
            _flush_block_row(current_row, rendered_blocks, block_widths, output_lines, spacing)
            current_row = []
            current_row_width = 0
            needed_width = block_width

        current_row.append(index)
        current_row_width += needed_width

    # Flush remaining blocks
    if current_row:
        _flush_block_row(current_row, rendered_blocks, block_widths, output_lines, spacing)

    logger.info(
        "render_rectangles_flow: %d block(s) in %d line(s), terminal_width=%d",
        len(rendered_blocks),
        len(output_lines),
        terminal_width,
    )
    return "\n".join(output_lines)


def _flush_block_row(
    row_indices: list[int],
    rendered_blocks: list[list[str]],
    block_widths: list[int],
    output_lines: list[str],
    spacing: int,
) -> None:
    """Helper to flush a row of blocks to output_lines."""
    row_blocks = [rendered_blocks[i] for i in row_indices]

    # Find max height in this row
    max_height = max(len(b) for b in row_blocks)

    # Combine blocks horizontally, padding short blocks with spaces
    for line_idx in range(max_height):
        line_parts = []
        for block_idx, block_lines in zip(row_indices, row_blocks):
            if line_idx < len(block_lines):
                line_parts.append(block_lines[line_idx])
            else:
                line_parts.append(" " * block_widths[block_idx])

        output_lines.append((" " * spacing).join(line_parts))

    # Add spacing between rows
    output_lines.append("")
