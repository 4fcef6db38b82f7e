"""
Binary deck wire format.

Layout (little-endian):

    count(4, uint32) | card(1) * count

Each card byte is the raw Card encoding, in deck order (top first). A fresh
52-card deck is 56 bytes, a 54-card joker deck 58 bytes.
"""

import logging
import struct
from typing import List, Sequence, Union

from ..deck.card import Card
from ..exceptions import DeckFormatError

__all__ = ['HEADER_FORMAT', 'HEADER_SIZE', 'MAX_CARD_COUNT', 'encode_cards', 'decode_cards', 'encoded_size']

logger = logging.getLogger(__name__)

HEADER_FORMAT = "<I"
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)
# Largest count the uint32 header can carry.
MAX_CARD_COUNT = 0xFFFFFFFF

BytesLike = Union[bytes, bytearray, memoryview]


def _require(condition: bool, msg: str) -> None:
    if not condition:
        logger.warning("Rejected deck bytes: %s", msg)
        raise DeckFormatError(msg)


def encoded_size(count: int) -> int:
    """Number of bytes a deck of count cards encodes to."""
    return HEADER_SIZE + count


def encode_cards(cards: Sequence[Card]) -> bytes:
    """
    Encode cards into the wire format.

    Args:
        cards: cards in deck order

    Returns:
        bytes: header followed by one byte per card

    Raises:
        DeckFormatError: when there are more cards than the header can count
    """
    count = len(cards)
    if count > MAX_CARD_COUNT:
        raise DeckFormatError(f"too many cards to encode: {count}, maximum is {MAX_CARD_COUNT}")
    return struct.pack(HEADER_FORMAT, count) + bytes(card.code for card in cards)


def decode_cards(data: BytesLike) -> List[Card]:
    """
    Decode the wire format back into cards.

    Card bytes are taken as-is; only the framing is checked.

    Args:
        data: encoded deck

    Returns:
        List[Card]: cards in their encoded order

    Raises:
        DeckFormatError: when data is shorter than the header, or its length
            does not match the declared card count
    """
    raw = bytes(data)
    _require(len(raw) >= HEADER_SIZE, "invalid data: too short")

    (count,) = struct.unpack_from(HEADER_FORMAT, raw)
    expected = encoded_size(count)
    _require(len(raw) == expected, f"invalid data: expected {expected} bytes, got {len(raw)}")

    return [Card(value) for value in raw[HEADER_SIZE:]]
