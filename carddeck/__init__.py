"""
carddeck - standard playing cards for building card games.

Cards are packed into one byte each, decks shuffle through pluggable
Shuffler strategies and serialize to a compact binary format.

Example:
    >>> from carddeck import Deck
    >>> deck = Deck()
    >>> deck.secure_shuffle()
    >>> hands = deck.deal(4, 13)
"""

import logging

from .core.deck import (
    Card,
    DefaultShuffler,
    Deck,
    MAX_CARDS_PER_PLAYER,
    Rank,
    SecureShuffler,
    Shuffler,
    STANDARD_DECK_SIZE,
    Suit,
)
from .core.codec import decode_cards, encode_cards, encoded_size
from .core.config import DeckConfig, ShuffleMode, build_deck
from .core.exceptions import (
    DeckConfigError,
    DeckError,
    DeckFormatError,
    DeckInvariantError,
    EmptyDeckError,
    InsufficientCardsError,
    InvalidArgumentError,
)

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Card', 'Suit', 'Rank',
    'Deck', 'MAX_CARDS_PER_PLAYER', 'STANDARD_DECK_SIZE',
    'Shuffler', 'SecureShuffler', 'DefaultShuffler',
    'encode_cards', 'decode_cards', 'encoded_size',
    'DeckConfig', 'ShuffleMode', 'build_deck',
    'DeckError', 'EmptyDeckError', 'InvalidArgumentError', 'InsufficientCardsError',
    'DeckFormatError', 'DeckConfigError', 'DeckInvariantError',
]
