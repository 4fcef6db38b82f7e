"""
Playing card and deck management.

Provides the one-byte Card value type, the Suit and Rank enums, pluggable
shufflers and the Deck itself.
"""

from .types import Suit, Rank
from .card import Card
from .shuffler import Shuffler, SecureShuffler, DefaultShuffler
from .deck import Deck, MAX_CARDS_PER_PLAYER, STANDARD_DECK_SIZE

__all__ = [
    'Suit', 'Rank', 'Card',
    'Shuffler', 'SecureShuffler', 'DefaultShuffler',
    'Deck', 'MAX_CARDS_PER_PLAYER', 'STANDARD_DECK_SIZE',
]
