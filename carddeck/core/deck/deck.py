"""
Deck of playing cards.

The top of the deck is index 0. Every method that hands cards out returns a
fresh list, so callers can never alias the deck's own storage. Methods that
can fail validate completely before they touch the deck.
"""

import logging
from typing import Callable, Iterable, Iterator, List, Optional, Sequence

from .card import Card
from .shuffler import DefaultShuffler, SecureShuffler, Shuffler
from .types import Rank, get_all_suits, get_standard_ranks
from ..codec import binary as wire
from ..exceptions import (
    DeckError,
    DeckInvariantError,
    EmptyDeckError,
    InsufficientCardsError,
    InvalidArgumentError,
)

logger = logging.getLogger(__name__)

STANDARD_DECK_SIZE = 52
# Upper bound for a single hand in deal/deal_hands; one player may take a full deck.
MAX_CARDS_PER_PLAYER = 52


def _standard_cards() -> List[Card]:
    """52 cards ordered by suit, then Ace through King."""
    return [Card.of(rank, suit) for suit in get_all_suits() for rank in get_standard_ranks()]


def _check_count(count: int) -> None:
    if count < 1:
        raise InvalidArgumentError(f"count must be at least 1, got {count}")


def _must(operation: Callable, *args):
    try:
        return operation(*args)
    except DeckError as e:
        raise DeckInvariantError(str(e)) from e


class Deck:
    """
    An ordered, mutable sequence of cards.

    ``Deck()`` is a standard 52-card deck in canonical order; the class
    methods build multi-deck, joker and empty decks. Duplicates are allowed.

    Not safe for concurrent mutation; lists returned by cards, peek_n,
    draw_n and the deal methods are independent copies.

    Examples:
        >>> deck = Deck()
        >>> deck.shuffle_with_seed(42)
        >>> hands = deck.deal(4, 5)
        >>> len(deck)
        32
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None) -> None:
        """
        Args:
            cards: initial cards, top first. If None, a standard 52-card deck
        """
        self._cards: List[Card] = _standard_cards() if cards is None else list(cards)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> 'Deck':
        """
        Create a deck with no cards.

        Returns:
            Deck: an empty deck, ready for add() or unmarshal()
        """
        return cls(())

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> 'Deck':
        """Build a deck holding a copy of cards, in order."""
        return cls(cards)

    @classmethod
    def multiple(cls, count: int) -> 'Deck':
        """
        Concatenate several standard decks.

        Args:
            count: number of 52-card decks

        Returns:
            Deck: count * 52 cards, each block in canonical order

        Raises:
            InvalidArgumentError: when count is less than 1
        """
        _check_count(count)
        logger.debug("Building %d-deck shoe", count)
        return cls(_standard_cards() * count)

    @classmethod
    def with_jokers(cls) -> 'Deck':
        """52 standard cards followed by the red joker and the black joker."""
        return cls(_standard_cards() + [Card.red_joker(), Card.black_joker()])

    @classmethod
    def multiple_with_jokers(cls, count: int) -> 'Deck':
        """
        Concatenate several 54-card joker decks.

        Args:
            count: number of 54-card blocks

        Returns:
            Deck: count * 54 cards

        Raises:
            InvalidArgumentError: when count is less than 1
        """
        _check_count(count)
        logger.debug("Building %d-deck shoe with jokers", count)
        block = _standard_cards() + [Card.red_joker(), Card.black_joker()]
        return cls(block * count)

    @classmethod
    def from_bytes(cls, data: bytes) -> 'Deck':
        """
        Build a deck from its wire encoding.

        Raises:
            DeckFormatError: when data is malformed
        """
        deck = cls.empty()
        deck.unmarshal(data)
        return deck

    # ------------------------------------------------------------------
    # Shuffling
    # ------------------------------------------------------------------

    def shuffle(self) -> None:
        """Shuffle with a time-seeded DefaultShuffler. Not for fairness-critical use."""
        self.shuffle_with(DefaultShuffler())

    def secure_shuffle(self) -> None:
        """Shuffle with the operating system CSPRNG."""
        self.shuffle_with(SecureShuffler())

    def shuffle_with_seed(self, seed: int) -> None:
        """
        Shuffle reproducibly.

        Two decks of the same length shuffled with the same seed end up in
        the same order.

        Args:
            seed: generator seed
        """
        self.shuffle_with(DefaultShuffler.seeded(seed))

    def shuffle_with(self, shuffler: Shuffler) -> None:
        """
        Shuffle with any Shuffler.

        Args:
            shuffler: object with a shuffle(n, swap) method
        """
        cards = self._cards

        def swap(i: int, j: int) -> None:
            cards[i], cards[j] = cards[j], cards[i]

        shuffler.shuffle(len(cards), swap)

    # ------------------------------------------------------------------
    # Draw / peek
    # ------------------------------------------------------------------

    def draw(self) -> Card:
        """
        Remove and return the top card.

        Raises:
            EmptyDeckError: when the deck is empty
        """
        if not self._cards:
            raise EmptyDeckError("cannot draw from empty deck")
        return self._cards.pop(0)

    def draw_n(self, n: int) -> List[Card]:
        """
        Remove and return the top n cards.

        Args:
            n: number of cards, may be 0

        Returns:
            List[Card]: the cards in deck order, original top first

        Raises:
            InvalidArgumentError: when n is negative
            InsufficientCardsError: when the deck has fewer than n cards
        """
        if n < 0:
            raise InvalidArgumentError(f"cannot draw negative number of cards: {n}")
        self._require_cards(n, f"not enough cards in deck: have {len(self._cards)}, need {n}")

        drawn = self._cards[:n]
        del self._cards[:n]
        return drawn

    def peek(self) -> Card:
        """
        Return the top card without removing it.

        Raises:
            EmptyDeckError: when the deck is empty
        """
        if not self._cards:
            raise EmptyDeckError("cannot peek at empty deck")
        return self._cards[0]

    def peek_n(self, n: int) -> List[Card]:
        """
        Return a copy of the top n cards without removing them.

        Raises:
            InvalidArgumentError: when n is negative
            InsufficientCardsError: when the deck has fewer than n cards
        """
        if n < 0:
            raise InvalidArgumentError(f"cannot peek negative number of cards: {n}")
        self._require_cards(n, f"not enough cards in deck: have {len(self._cards)}, need {n}")
        return self._cards[:n]

    # ------------------------------------------------------------------
    # Dealing
    # ------------------------------------------------------------------

    def deal(self, num_players: int, cards_per_player: int) -> List[List[Card]]:
        """
        Deal equal hands from the top of the deck.

        Hands are sequential blocks: hand 0 gets the first cards_per_player
        cards, hand 1 the next block, and so on. On any validation error the
        deck is left untouched.

        Args:
            num_players: number of hands, at least 1
            cards_per_player: cards in each hand, 1 to 52

        Returns:
            List[List[Card]]: one independent list per player

        Raises:
            InvalidArgumentError: when a parameter is out of range
            InsufficientCardsError: when the deck cannot cover every hand
        """
        if num_players < 1:
            raise InvalidArgumentError("number of players must be at least 1")
        if cards_per_player < 1:
            raise InvalidArgumentError("cards per player must be at least 1")
        if cards_per_player > MAX_CARDS_PER_PLAYER:
            raise InvalidArgumentError(
                f"cards per player exceeds maximum of {MAX_CARDS_PER_PLAYER}"
            )
        total = num_players * cards_per_player
        self._require_cards(total, f"insufficient cards: need {total}, have {len(self._cards)}")

        return self._deal_blocks([cards_per_player] * num_players)

    def deal_hands(self, hand_sizes: Sequence[int]) -> List[List[Card]]:
        """
        Deal hands of different sizes from the top of the deck.

        Hand i receives the next hand_sizes[i] cards. Same atomicity and
        independence guarantees as deal.

        Args:
            hand_sizes: size of every hand, each 1 to 52

        Returns:
            List[List[Card]]: hands in the order of hand_sizes

        Raises:
            InvalidArgumentError: when hand_sizes is empty or a size is out of range
            InsufficientCardsError: when the deck cannot cover every hand

        Examples:
            >>> deck = Deck()
            >>> hands = deck.deal_hands([2, 2, 2, 1])  # three players and a dealer
            >>> len(deck)
            45
        """
        if len(hand_sizes) < 1:
            raise InvalidArgumentError("handSizes must contain at least one hand")

        for index, size in enumerate(hand_sizes):
            if size <= 0:
                raise InvalidArgumentError(
                    f"hand size must be positive: got {size} at index {index}"
                )
            if size > MAX_CARDS_PER_PLAYER:
                raise InvalidArgumentError(
                    f"hand size ({size}) at index {index} exceeds maximum of {MAX_CARDS_PER_PLAYER}"
                )

        return self._deal_blocks(list(hand_sizes))

    def _deal_blocks(self, sizes: List[int]) -> List[List[Card]]:
        total = sum(sizes)
        self._require_cards(total, f"insufficient cards: need {total}, have {len(self._cards)}")

        hands: List[List[Card]] = []
        offset = 0
        for size in sizes:
            hands.append(self._cards[offset:offset + size])
            offset += size
        del self._cards[:offset]

        logger.debug("Dealt %d hands %s, %d cards remaining", len(hands), sizes, len(self._cards))
        return hands

    def _require_cards(self, need: int, message: str) -> None:
        if need > len(self._cards):
            raise InsufficientCardsError(message, need=need, have=len(self._cards))

    # ------------------------------------------------------------------
    # Abort-on-failure variants
    # ------------------------------------------------------------------

    def must_draw(self) -> Card:
        """
        draw() for call sites that know the deck is not empty.

        Raises:
            DeckInvariantError: "cannot draw from empty deck"
        """
        return _must(self.draw)

    def must_draw_n(self, n: int) -> List[Card]:
        """
        draw_n() for call sites that know the deck holds n cards.

        Raises:
            DeckInvariantError: carrying the draw_n error message
        """
        return _must(self.draw_n, n)

    def must_deal(self, num_players: int, cards_per_player: int) -> List[List[Card]]:
        """
        deal() for fixed setups such as bridge from a fresh deck.

        Example:
            >>> hands = Deck().must_deal(4, 13)

        Raises:
            DeckInvariantError: carrying the deal error message
        """
        return _must(self.deal, num_players, cards_per_player)

    def must_deal_hands(self, hand_sizes: Sequence[int]) -> List[List[Card]]:
        """deal_hands() that raises DeckInvariantError instead of DeckError."""
        return _must(self.deal_hands, hand_sizes)

    # ------------------------------------------------------------------
    # Mutation and views
    # ------------------------------------------------------------------

    def add(self, card: Card) -> None:
        """Put a card on the bottom of the deck."""
        self._cards.append(card)

    def add_to_top(self, card: Card) -> None:
        """Put a card on the top of the deck."""
        self._cards.insert(0, card)

    def add_joker(self, rank: Rank) -> None:
        """
        Put a joker on the bottom of the deck.

        Args:
            rank: Rank.RED_JOKER for the red joker; anything else adds the
                black joker
        """
        self.add(Card.red_joker() if rank == Rank.RED_JOKER else Card.black_joker())

    def sort(self) -> None:
        """
        Sort in place: standard cards by suit then rank, then the jokers
        with the red joker before the black one. The sort is stable.
        """
        self._cards.sort(key=Card.sort_key)

    def filter(self, predicate: Callable[[Card], bool]) -> 'Deck':
        """
        Select cards into a new deck.

        Args:
            predicate: returns True for cards to keep

        Returns:
            Deck: matching cards in their current relative order; this deck
                is not modified
        """
        return Deck(card for card in self._cards if predicate(card))

    @property
    def cards(self) -> List[Card]:
        """Copy of all cards, top first."""
        return list(self._cards)

    @property
    def is_empty(self) -> bool:
        """
        Check whether the deck has run out.

        Returns:
            bool: True when no cards remain
        """
        return not self._cards

    # ------------------------------------------------------------------
    # Binary serialization
    # ------------------------------------------------------------------

    def marshal(self) -> bytes:
        """
        Encode the deck for transfer.

        Returns:
            bytes: little-endian uint32 card count followed by one byte per card

        Raises:
            DeckFormatError: only for decks beyond 2**32 - 1 cards, which the
                header cannot count
        """
        return wire.encode_cards(self._cards)

    def unmarshal(self, data: bytes) -> None:
        """
        Replace the deck contents with decoded cards.

        Args:
            data: bytes-like object produced by marshal

        Raises:
            DeckFormatError: when data is malformed; the deck is unchanged
        """
        self._cards = wire.decode_cards(data)

    @property
    def size(self) -> int:
        """Byte length of marshal() without encoding."""
        return wire.encoded_size(len(self._cards))

    def __bytes__(self) -> bytes:
        """Same as marshal()."""
        return self.marshal()

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        """
        Number of cards remaining.

        Returns:
            int: remaining card count
        """
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        """
        Iterate over a snapshot of the deck, top first.

        Returns:
            Iterator[Card]: iterator unaffected by later draws or adds
        """
        return iter(list(self._cards))

    def __eq__(self, other: object) -> bool:
        """
        Compare card sequences.

        Args:
            other: another deck

        Returns:
            bool: True when both decks hold the same cards in the same order
        """
        if not isinstance(other, Deck):
            return NotImplemented
        return self._cards == other._cards

    __hash__ = None  # mutable

    def __str__(self) -> str:
        """
        Returns:
            str: "Empty Deck", or the card count followed by short card forms
        """
        if not self._cards:
            return "Empty Deck"
        return f"Deck ({len(self._cards)} cards): [{', '.join(c.short_str() for c in self._cards)}]"

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={len(self._cards)})"
