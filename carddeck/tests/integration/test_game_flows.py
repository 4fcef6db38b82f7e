"""
Integration scenarios combining construction, shuffling, dealing and the
wire format the way a card game would.
"""

import pytest

from carddeck import DeckConfig, ShuffleMode, build_deck
from carddeck.core.deck import Card, Deck, Rank, Suit


@pytest.mark.integration
class TestGameFlows:
    """End-to-end deck usage."""

    def test_poker_round(self):
        """Deal four five-card hands from a seeded deck and burn one card."""
        deck = Deck()
        deck.shuffle_with_seed(12345)
        hands = deck.deal(4, 5)
        burned = deck.draw()

        dealt = [card for hand in hands for card in hand] + [burned]
        assert len(set(dealt)) == 21
        assert len(deck) == 31

    def test_blackjack_shoe(self):
        """Six-deck shoe, two players and a dealer hole card."""
        shoe = build_deck(DeckConfig(copies=6, shuffle_mode=ShuffleMode.SEEDED, random_seed=8))
        assert len(shoe) == 312

        hands = shoe.deal_hands([2, 2, 1])
        assert [len(h) for h in hands] == [2, 2, 1]
        assert len(shoe) == 307

        aces = shoe.filter(lambda c: c.rank == Rank.ACE)
        dealt_aces = sum(1 for hand in hands for c in hand if c.rank == Rank.ACE)
        assert len(aces) + dealt_aces == 24

    def test_network_transfer(self):
        """A deck sent as bytes continues identically on the other side."""
        server = Deck.with_jokers()
        server.secure_shuffle()
        server.draw_n(10)

        client = Deck.from_bytes(server.marshal())
        assert client == server
        assert client.draw_n(5) == server.draw_n(5)
        assert client.size == server.size == 4 + 39

    def test_crazy_eights_discard_pile(self):
        """Cards move between a draw pile and a discard pile."""
        draw_pile = Deck()
        draw_pile.shuffle_with_seed(3)
        discard = Deck.empty()

        hand = draw_pile.draw_n(7)
        discard.add_to_top(draw_pile.draw())
        played = hand.pop()
        discard.add_to_top(played)

        assert len(discard) == 2
        assert discard.peek() == played
        assert len(draw_pile) + len(discard) + len(hand) == 52

    def test_sorted_hand_display(self):
        deck = Deck.from_cards([
            Card.red_joker(),
            Card.of(Rank.KING, Suit.HEARTS),
            Card.of(Rank.TWO, Suit.SPADES),
        ])
        deck.sort()
        assert str(deck) == "Deck (3 cards): [2♠, King♥, JKR]"
