"""
Unit tests for the binary deck wire format.
"""

import logging
import struct

import pytest

from carddeck.core.codec import HEADER_SIZE, MAX_CARD_COUNT, decode_cards, encode_cards, encoded_size
from carddeck.core.deck import Card, Deck, Rank, Suit
from carddeck.core.exceptions import DeckFormatError


@pytest.mark.unit
class TestMarshal:
    """Deck to bytes."""

    def test_standard_deck_layout(self, fresh_deck):
        data = fresh_deck.marshal()
        assert len(data) == 56
        assert struct.unpack("<I", data[:4]) == (52,)
        assert data[:4] == b"\x34\x00\x00\x00"
        assert data[4:17] == bytes(range(0x01, 0x0E))
        assert data[17] == 0x41
        assert data[-1] == 0xCD

    def test_joker_deck_layout(self, joker_deck):
        data = joker_deck.marshal()
        assert len(data) == 58
        assert data[-2:] == b"\x4e\x0f"

    def test_empty_deck(self):
        assert Deck.empty().marshal() == b"\x00\x00\x00\x00"

    def test_bytes_protocol(self, shuffled_deck):
        assert bytes(shuffled_deck) == shuffled_deck.marshal()

    def test_size(self, fresh_deck):
        assert fresh_deck.size == 56
        fresh_deck.draw_n(10)
        assert fresh_deck.size == 46 == len(fresh_deck.marshal())
        assert Deck.empty().size == HEADER_SIZE

    def test_marshal_does_not_mutate(self, shuffled_deck):
        before = shuffled_deck.cards
        shuffled_deck.marshal()
        pytest.assert_deck_unchanged(before, shuffled_deck)


@pytest.mark.unit
class TestUnmarshal:
    """Bytes to deck."""

    def test_round_trip(self, shuffled_deck):
        restored = Deck.empty()
        restored.unmarshal(shuffled_deck.marshal())
        assert restored == shuffled_deck

    def test_replaces_contents(self, fresh_deck):
        data = Deck.from_cards([Card.red_joker(), Card.of(Rank.TWO, Suit.CLUBS)]).marshal()
        fresh_deck.unmarshal(data)
        assert fresh_deck.cards == [Card.red_joker(), Card.of(Rank.TWO, Suit.CLUBS)]

    def test_from_bytes(self, joker_deck):
        assert Deck.from_bytes(joker_deck.marshal()) == joker_deck

    @pytest.mark.parametrize("wrap", [bytes, bytearray, memoryview])
    def test_accepts_bytes_like(self, fresh_deck, wrap):
        assert Deck.from_bytes(wrap(fresh_deck.marshal())) == fresh_deck

    def test_empty_round_trip(self):
        assert Deck.from_bytes(b"\x00\x00\x00\x00").is_empty

    @pytest.mark.parametrize("data", [b"", b"\x01", b"\x01\x00\x00"])
    def test_too_short(self, data):
        with pytest.raises(DeckFormatError, match="invalid data: too short"):
            Deck.from_bytes(data)

    def test_declared_count_exceeds_payload(self):
        with pytest.raises(DeckFormatError, match="invalid data: expected 9 bytes, got 5"):
            Deck.from_bytes(bytes([0x05, 0x00, 0x00, 0x00, 0x01]))

    def test_trailing_bytes_rejected(self):
        with pytest.raises(DeckFormatError, match="invalid data: expected 5 bytes, got 6"):
            Deck.from_bytes(bytes([0x01, 0x00, 0x00, 0x00, 0x01, 0x02]))

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            Deck.from_bytes(b"")

    def test_failure_leaves_deck_unchanged(self, shuffled_deck):
        before = shuffled_deck.cards
        with pytest.raises(DeckFormatError):
            shuffled_deck.unmarshal(bytes([0x05, 0x00, 0x00, 0x00, 0x01]))
        pytest.assert_deck_unchanged(before, shuffled_deck)

    def test_rejection_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="carddeck.core.codec.binary"):
            with pytest.raises(DeckFormatError):
                Deck.from_bytes(b"\x00")
        assert "invalid data: too short" in caplog.text


@pytest.mark.unit
class TestCodecFunctions:
    """Module-level encode/decode helpers."""

    def test_encode_decode(self):
        cards = [Card.of(Rank.QUEEN, Suit.CLUBS), Card.black_joker()]
        data = encode_cards(cards)
        assert data == b"\x02\x00\x00\x00\xcc\x0f"
        assert decode_cards(data) == cards

    def test_encoded_size(self):
        assert encoded_size(0) == 4
        assert encoded_size(52) == 56

    def test_card_bytes_not_validated(self):
        """Framing is checked, card bytes are taken as-is."""
        cards = decode_cards(b"\x01\x00\x00\x00\x3f")
        assert cards[0].rank_bits == 0x3F

    def test_count_beyond_header_rejected(self):
        """A count the uint32 header cannot hold is refused before any card is read."""

        class HugeHand:
            def __len__(self):
                return MAX_CARD_COUNT + 1

            def __iter__(self):
                raise AssertionError("cards must not be read")

        with pytest.raises(DeckFormatError, match="too many cards to encode"):
            encode_cards(HugeHand())
