"""
carddeck test configuration.

Shared fixtures and marker registration for the unit and property suites.
"""

import pytest

from carddeck.core.deck import Card, Deck, Rank, Suit


@pytest.fixture
def fresh_deck():
    """Standard 52-card deck in canonical order."""
    return Deck()


@pytest.fixture
def joker_deck():
    """54-card deck with the two jokers at the bottom."""
    return Deck.with_jokers()


@pytest.fixture
def shuffled_deck():
    """Standard deck shuffled with a fixed seed."""
    deck = Deck()
    deck.shuffle_with_seed(42)
    return deck


@pytest.fixture
def ace_of_spades():
    return Card.of(Rank.ACE, Suit.SPADES)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: example-based unit tests"
    )
    config.addinivalue_line(
        "markers", "property_test: hypothesis property-based tests"
    )
    config.addinivalue_line(
        "markers", "integration: multi-component scenarios"
    )


def assert_deck_unchanged(before, deck):
    """Assert deck still holds exactly the cards captured in before."""
    assert len(deck) == len(before)
    assert deck.cards == before


pytest.assert_deck_unchanged = assert_deck_unchanged
