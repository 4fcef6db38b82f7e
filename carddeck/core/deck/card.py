"""
Playing card value type.

A Card is one unsigned byte:

    bit:  7 6 | 5 4 3 2 1 0
          suit | rank

so the Ace of Spades is 0x01, the Queen of Clubs 0xCC and the red joker
(Hearts, rank 14) 0x4E. The byte is also the wire representation used by
carddeck.core.codec.
"""

from dataclasses import dataclass
from typing import Tuple

from .types import Suit, Rank

SUIT_SHIFT = 6
RANK_MASK = 0x3F
JOKER_THRESHOLD = int(Rank.RED_JOKER)


@dataclass(frozen=True)
class Card:
    """
    An immutable playing card packed into a single byte.

    Build cards with Card.of(rank, suit) or the joker constructors; the
    raw constructor takes the encoded byte.

    Attributes:
        code: the encoded byte, 0-255

    Examples:
        >>> card = Card.of(Rank.ACE, Suit.SPADES)
        >>> card.code
        1
        >>> str(card)
        'Ace of Spades'
        >>> card.short_str()
        'Ace♠'
    """

    __slots__ = ("code",)

    code: int

    def __post_init__(self) -> None:
        """
        Check that code is a byte.

        Raises:
            TypeError: when code is not an int
            ValueError: when code is outside 0-255
        """
        if not isinstance(self.code, int) or isinstance(self.code, bool):
            raise TypeError(f"card code must be an int, got {type(self.code).__name__}")
        if not 0 <= self.code <= 0xFF:
            raise ValueError(f"card code must fit in one byte, got {self.code}")

    @classmethod
    def of(cls, rank: Rank, suit: Suit) -> 'Card':
        """
        Pack a rank and a suit into a card.

        Rank is not range checked: values outside 0-15 are a caller error
        and values above 63 lose their high bits.

        Args:
            rank: card rank, 1-15
            suit: card suit

        Returns:
            Card: the encoded card
        """
        return cls((int(suit) << SUIT_SHIFT) | (int(rank) & RANK_MASK))

    @classmethod
    def from_byte(cls, value: int) -> 'Card':
        """Wrap a raw encoded byte."""
        return cls(value)

    @classmethod
    def red_joker(cls) -> 'Card':
        """Red joker: Hearts, rank 14."""
        return cls.of(Rank.RED_JOKER, Suit.HEARTS)

    @classmethod
    def black_joker(cls) -> 'Card':
        """Black joker: Spades, rank 15."""
        return cls.of(Rank.BLACK_JOKER, Suit.SPADES)

    @property
    def rank_bits(self) -> int:
        """Raw low six bits, defined even when they name no Rank member."""
        return self.code & RANK_MASK

    @property
    def rank(self) -> Rank:
        """
        Card rank.

        Raises:
            ValueError: when the rank bits are 0 or above 15, which only
                happens for bytes that did not come from Card.of
        """
        return Rank(self.rank_bits)

    @property
    def suit(self) -> Suit:
        """Card suit, from the top two bits."""
        return Suit(self.code >> SUIT_SHIFT)

    @property
    def is_joker(self) -> bool:
        return self.rank_bits >= JOKER_THRESHOLD

    def sort_key(self) -> Tuple[bool, int, int]:
        """
        Key used by Deck.sort.

        Standard cards come first ordered by suit then rank; jokers follow,
        ordered by rank only so the red joker precedes the black one.

        Returns:
            Tuple[bool, int, int]: (is_joker, suit or 0, rank bits)
        """
        if self.is_joker:
            return (True, 0, self.rank_bits)
        return (False, self.code >> SUIT_SHIFT, self.rank_bits)

    def short_str(self) -> str:
        """
        Compact representation.

        Returns:
            str: rank followed by the suit symbol, e.g. "Ace♠" or "10♦";
                "JKR" / "JKB" for jokers, the raw byte such as "0x00" when the
                rank bits name no Rank
        """
        rank_bits = self.rank_bits
        if rank_bits == Rank.RED_JOKER:
            return "JKR"
        if rank_bits == Rank.BLACK_JOKER:
            return "JKB"
        if not self._has_rank():
            return f"0x{self.code:02X}"
        return str(self.rank) + self.suit.symbol

    def __str__(self) -> str:
        rank_bits = self.rank_bits
        if rank_bits == Rank.RED_JOKER:
            return "Joker (Red)"
        if rank_bits == Rank.BLACK_JOKER:
            return "Joker (Black)"
        if not self._has_rank():
            return f"Card 0x{self.code:02X}"
        return f"{str(self.rank)} of {str(self.suit)}"

    def _has_rank(self) -> bool:
        return 1 <= self.rank_bits <= Rank.BLACK_JOKER

    def __repr__(self) -> str:
        if not self._has_rank():
            return f"Card(0x{self.code:02X})"
        return f"Card({self.rank.name}, {self.suit.name})"

    def __reduce__(self):
        # Frozen slots instances cannot be rebuilt through setattr.
        return (Card, (self.code,))

    def __int__(self) -> int:
        return self.code

    def __bytes__(self) -> bytes:
        return bytes((self.code,))

    def __lt__(self, other: 'Card') -> bool:
        """
        Order cards the way Deck.sort does.

        Args:
            other: another card

        Returns:
            bool: True when this card sorts before other
        """
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key() < other.sort_key()
