"""Tests for interactive_demo stepping logic."""

from figure_parser import parse_figure
from figure_types import Rectangle
from interactive_demo import LAYOUTS, InteractiveDemo


class TestInteractiveDemo:
    """Tests for stepping through a decomposition without the terminal loop."""

    def test_steps_through_rectangles(self) -> None:
        """Each step shows the next rectangle in discovery order."""
        demo = InteractiveDemo(parse_figure(LAYOUTS["tee"]))
        demo.next_rectangle()
        assert demo.current == Rectangle(0, 0, 7, 4)
        demo.next_rectangle()
        demo.next_rectangle()
        assert demo.current == Rectangle(3, 0, 11, 3)
        assert demo.found == [
            Rectangle(0, 0, 7, 4),
            Rectangle(0, 6, 5, 4),
            Rectangle(3, 0, 11, 3),
        ]

    def test_end_of_decomposition(self) -> None:
        """Stepping past the last rectangle reports the totals, then refuses."""
        demo = InteractiveDemo(parse_figure(LAYOUTS["tee"]))
        for _ in range(4):
            demo.next_rectangle()
        assert demo.current is None
        assert demo.decomposition.exhausted
        assert "Done: 3 rectangle(s)" in demo.status_message

        demo.next_rectangle()
        assert "No more rectangles" in demo.status_message
        assert len(demo.found) == 3

    def test_restart(self) -> None:
        """Restarting begins a fresh decomposition."""
        demo = InteractiveDemo(parse_figure(LAYOUTS["tee"]))
        for _ in range(4):
            demo.next_rectangle()
        demo.restart()
        assert demo.found == []
        assert demo.current is None
        assert not demo.decomposition.exhausted

        demo.next_rectangle()
        assert demo.current == Rectangle(0, 0, 7, 4)
