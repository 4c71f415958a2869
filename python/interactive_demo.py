"""
Interactive demo for figure decomposition.
Display a figure and step through its rectangles with keyboard commands.
"""

import logging
import os.path

import readchar, sys
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import highlight_rectangle, render_rectangle, render_rectangles_flow
from figure_parser import parse_figure
from figure_types import Figure, Rectangle
from rectangles import Decomposition, decompose, get_figure_rectangles


class InteractiveDemo:
    """Interactive demo stepping through a decomposition one rectangle at a time."""

    def __init__(self, figure: Figure) -> None:
        self.figure = figure
        self.console = Console()
        self.decomposition: Decomposition = decompose(figure)
        self.current: Rectangle | None = None
        self.found: list[Rectangle] = []
        self.status_message = "Ready - press N for the first rectangle"

    def generate_display(self) -> Panel:
        """Generate the current display with figure and status."""
        status = Text()

        # Convert ANSI-highlighted figure to Rich Text properly
        status.append(Text.from_ansi(highlight_rectangle(self.figure, self.current)))
        status.append("\n\n")

        if self.current is not None:
            rect = self.current
            status.append("Current Rectangle: ", style="bold")
            status.append(
                f"top-left ({rect.top}, {rect.left}), {rect.width}x{rect.height}\n\n"
            )
            status.append(render_rectangle(rect.width, rect.height))
            status.append("\n")

        status.append("Found: ", style="bold")
        status.append(f"{len(self.found)}    ")
        status.append("Rejected corners: ", style="bold")
        status.append(f"{len(self.decomposition.rejections)}\n")
        for rejection in self.decomposition.rejections:
            status.append(
                f"  ({rejection.corner.row}, {rejection.corner.col}) "
                f"{rejection.reason.value}\n",
                style="dim",
            )

        status.append("\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  N - Next rectangle\n")
        status.append("  R - Restart decomposition\n")
        status.append("  Q - Quit\n\n")

        # Status line at the bottom
        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Figure Rectangles Demo", border_style="green", width=80)

    def next_rectangle(self) -> None:
        """Pull the next rectangle from the decomposition."""
        if self.decomposition.exhausted:
            self.status_message = "✗ No more rectangles (R to restart)"
            return

        rect = next(self.decomposition, None)
        if rect is None:
            self.current = None
            self.status_message = (
                f"✓ Done: {len(self.found)} rectangle(s), "
                f"{len(self.decomposition.rejections)} corner(s) rejected"
            )
            return

        self.current = rect
        self.found.append(rect)
        self.status_message = f"✓ Rectangle {len(self.found)} at ({rect.top}, {rect.left})"

    def restart(self) -> None:
        """Start a fresh decomposition of the same figure."""
        self.decomposition = decompose(self.figure)
        self.current = None
        self.found = []
        self.status_message = "Decomposition restarted"

    def run(self) -> None:
        """Run the interactive demo."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    # Update display
                    live.update(self.generate_display())

                    # Get single key press
                    key = readchar.readkey()

                    # Handle key press
                    if key.lower() == 'q':
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key.lower() == 'r':
                        self.restart()
                    elif key.lower() == 'n' or key == ' ':
                        self.next_rectangle()
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


LAYOUTS = dict(
    stacked=(
        "+------------+\n"
        "|            |\n"
        "|            |\n"
        "|            |\n"
        "+------+-----+\n"
        "|      |     |\n"
        "|      |     |\n"
        "+------+-----+"
    ),
    roof=(
        "   +-----+     \n"
        "   |     |     \n"
        "+--+-----+----+\n"
        "|             |\n"
        "|             |\n"
        "+-------------+"
    ),
    tee=(
        "+-----+---+\n"
        "|     |   |\n"
        "|     |   |\n"
        "+-----+---+\n"
        "|         |\n"
        "+---------+"
    ),
)


def load_figure_text(name: str) -> str:
    """Return a built-in layout by name, or the contents of a file."""
    if name in LAYOUTS:
        return LAYOUTS[name]
    if os.path.isfile(name):
        with open(name, encoding="utf-8") as f:
            return f.read()
    raise ValueError(
        f"Unknown layout '{name}'\n"
        f"  Not a file, and not one of: {', '.join(sorted(LAYOUTS))}"
    )


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == 'sublime':
        # Running from IDE - just render the decomposition
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

        print('Running from IDE - rendering decomposition')
        print()

        text = load_figure_text(sys.argv[2] if len(sys.argv) > 2 else 'stacked')
        print(text)
        print()
        print(render_rectangles_flow(get_figure_rectangles(text)))
    else:
        text = load_figure_text(sys.argv[1] if len(sys.argv) > 1 else 'stacked')
        InteractiveDemo(parse_figure(text)).run()
