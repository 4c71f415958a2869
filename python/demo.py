"""
Demonstration scripts for figure decomposition and its sibling utilities.
"""

from ascii_render import render_rectangles_flow
from bank_ocr import parse_bank_account
from figure_parser import parse_figure
from poker import get_poker_hand_rank
from rectangles import decompose, get_figure_rectangles
from text_wrap import wrap_text


def demo() -> None:
    """Decompose a few figures and print their rectangles."""
    figures = {
        "single box": (
            "+------+\n"
            "|      |\n"
            "+------+"
        ),
        "two boxes side by side": (
            "+------+-----+\n"
            "|      |     |\n"
            "+------+-----+"
        ),
        "box on a wider box": (
            "   +-----+     \n"
            "   |     |     \n"
            "+--+-----+----+\n"
            "|             |\n"
            "|             |\n"
            "+-------------+"
        ),
        "stray corner": (
            "+---+   +\n"
            "|   |    \n"
            "+---+    "
        ),
    }

    for name, text in figures.items():
        print("=" * 40)
        print(f"{name}:")
        print("=" * 40)
        print(text)
        print()
        print(render_rectangles_flow(get_figure_rectangles(text)))


def rejection_demo() -> None:
    """Show which corners were skipped and why."""
    text = (
        "+----+\n"
        "|    |\n"
        "+--  +"
    )
    print("=" * 40)
    print("Broken bottom edge:")
    print("=" * 40)
    print(text)
    print()

    result = decompose(parse_figure(text))
    rects = list(result)
    print(f"Rectangles: {len(rects)}")
    for rejection in result.rejections:
        print(
            f"✗ ({rejection.corner.row}, {rejection.corner.col}): "
            f"{rejection.reason.value}"
        )
    print()


def siblings_demo() -> None:
    """Run the sibling utilities on their documented examples."""
    account = (
        "    _  _     _  _  _  _  _ \n"
        "  | _| _||_||_ |_   ||_||_|\n"
        "  ||_  _|  | _||_|  ||_| _|\n"
    )
    print(account)
    print(f"Account number: {parse_bank_account(account)}")
    print()

    text = "The String global object is a constructor for strings, or a sequence of characters."
    for line in wrap_text(text, 26):
        print(f"|{line:<26}|")
    print()

    for hand in (["4♥", "5♥", "6♥", "7♥", "8♥"], ["2♥", "4♦", "4♥", "A♦", "A♠"]):
        print(f"{' '.join(hand)}: {get_poker_hand_rank(hand).name}")


if __name__ == "__main__":
    demo()
    print()
    rejection_demo()
    print()
    siblings_demo()
