"""
Poker hand ranking.

See https://en.wikipedia.org/wiki/List_of_poker_hands for the ranking rules.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum

__all__ = ["Card", "PokerRank", "get_poker_hand_rank", "parse_card"]


class PokerRank(IntEnum):
    """Category of a five-card hand, strongest highest."""

    STRAIGHT_FLUSH = 8
    FOUR_OF_KIND = 7
    FULL_HOUSE = 6
    FLUSH = 5
    STRAIGHT = 4
    THREE_OF_KIND = 3
    TWO_PAIRS = 2
    ONE_PAIR = 1
    HIGH_CARD = 0


RANK_VALUES: dict[str, int] = {
    "2": 2,
    "3": 3,
    "4": 4,
    "5": 5,
    "6": 6,
    "7": 7,
    "8": 8,
    "9": 9,
    "10": 10,
    "J": 11,
    "Q": 12,
    "K": 13,
    "A": 14,
}

SUITS = frozenset("♠♥♦♣")

HAND_SIZE = 5


@dataclass(frozen=True)
class Card:
    """A playing card. Aces have value 14."""

    value: int
    suit: str


def parse_card(card: str) -> Card:
    """Parse a card such as '10♥' or 'A♠'."""
    rank, suit = card[:-1], card[-1:]
    if rank not in RANK_VALUES or suit not in SUITS:
        raise ValueError(
            f"Invalid card: '{card}'\n"
            f"  Expected a rank ({', '.join(RANK_VALUES)}) followed by a suit "
            f"({''.join(sorted(SUITS))})"
        )
    return Card(RANK_VALUES[rank], suit)


def _is_straight(values: list[int]) -> bool:
    ordered = sorted(set(values))
    if len(ordered) != HAND_SIZE:
        return False
    if ordered[-1] - ordered[0] == HAND_SIZE - 1:
        return True
    # Ace plays low: A-2-3-4-5
    return ordered == [2, 3, 4, 5, 14]


def get_poker_hand_rank(hand: list[str]) -> PokerRank:
    """
    Return the rank of a five-card hand.

    Example:
        ['4♥', '5♥', '6♥', '7♥', '8♥'] => PokerRank.STRAIGHT_FLUSH
        ['A♠', '4♠', '3♠', '5♠', '2♠'] => PokerRank.STRAIGHT_FLUSH
        ['4♣', '4♦', '5♦', '5♠', '5♥'] => PokerRank.FULL_HOUSE
        ['2♥', '4♦', '5♥', 'A♦', '3♠'] => PokerRank.STRAIGHT
        ['A♥', 'K♥', 'Q♥', '2♦', '3♠'] => PokerRank.HIGH_CARD
    """
    if len(hand) != HAND_SIZE:
        raise ValueError(f"A hand has {HAND_SIZE} cards, got {len(hand)}: {hand}")

    cards = [parse_card(card) for card in hand]
    values = [card.value for card in cards]
    counts = sorted(Counter(values).values(), reverse=True)
    is_flush = len({card.suit for card in cards}) == 1
    is_straight = _is_straight(values)

    if is_flush and is_straight:
        return PokerRank.STRAIGHT_FLUSH
    if counts[0] == 4:
        return PokerRank.FOUR_OF_KIND
    if counts[:2] == [3, 2]:
        return PokerRank.FULL_HOUSE
    if is_flush:
        return PokerRank.FLUSH
    if is_straight:
        return PokerRank.STRAIGHT
    if counts[0] == 3:
        return PokerRank.THREE_OF_KIND
    if counts[:2] == [2, 2]:
        return PokerRank.TWO_PAIRS
    if counts[0] == 2:
        return PokerRank.ONE_PAIR
    return PokerRank.HIGH_CARD
