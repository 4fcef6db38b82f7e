"""
Deck wire format codecs.
"""

from .binary import HEADER_SIZE, MAX_CARD_COUNT, encode_cards, decode_cards, encoded_size

__all__ = ['HEADER_SIZE', 'MAX_CARD_COUNT', 'encode_cards', 'decode_cards', 'encoded_size']
