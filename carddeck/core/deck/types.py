"""
Playing card type definitions.

Defines the Suit and Rank enums. Both are IntEnums because their ordinals
are packed directly into the card byte.
"""

from enum import IntEnum
from typing import Dict, List


class Suit(IntEnum):
    """
    Card suit.

    The ordinal is the value stored in bits 7-6 of a card byte and also
    the sort order.
    """

    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3

    def __str__(self) -> str:
        return self.name.capitalize()

    @property
    def symbol(self) -> str:
        """Unicode suit symbol, e.g. '♠'."""
        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS: Dict[Suit, str] = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}


class Rank(IntEnum):
    """
    Card rank.

    Ace is low (1) and King is 13. The two joker ranks are only used by
    decks built with joker support. Rank 0 is reserved and has no member.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    RED_JOKER = 14
    BLACK_JOKER = 15

    def __str__(self) -> str:
        if Rank.TWO <= self <= Rank.TEN:
            return str(self.value)
        if self >= Rank.RED_JOKER:
            return "Joker"
        return self.name.capitalize()

    @property
    def is_joker(self) -> bool:
        return self >= Rank.RED_JOKER


def get_all_suits() -> List[Suit]:
    """
    Get every suit.

    Returns:
        List[Suit]: the four suits in canonical order
    """
    return list(Suit)


def get_standard_ranks() -> List[Rank]:
    """
    Get the thirteen standard ranks.

    Returns:
        List[Rank]: Ace through King, jokers excluded
    """
    return [rank for rank in Rank if not rank.is_joker]


def get_joker_ranks() -> List[Rank]:
    """Red joker first, then black joker."""
    return [Rank.RED_JOKER, Rank.BLACK_JOKER]
