"""
Deck error definitions.

DeckError subclasses are recoverable conditions returned to the caller.
DeckInvariantError is raised only by the must_* helpers, for call sites that
treat the failure as a programming error.
"""


class DeckError(Exception):
    """Base class for all recoverable deck errors."""
    pass


class EmptyDeckError(DeckError, IndexError):
    """Draw or peek on a deck with no cards."""
    pass


class InvalidArgumentError(DeckError, ValueError):
    """Malformed call parameters (negative counts, zero players, oversized hands)."""
    pass


class InsufficientCardsError(DeckError):
    """
    A well-formed request needs more cards than the deck holds.

    Attributes:
        need: number of cards requested
        have: number of cards in the deck at the time of the call
    """

    def __init__(self, message: str, need: int, have: int) -> None:
        super().__init__(message)
        self.need = need
        self.have = have


class DeckFormatError(DeckError, ValueError):
    """Malformed serialized deck bytes."""
    pass


class DeckConfigError(InvalidArgumentError):
    """Invalid DeckConfig values."""
    pass


class DeckInvariantError(RuntimeError):
    """
    Raised by the must_* helpers when the wrapped operation fails.

    Not a DeckError on purpose, so ``except DeckError`` does not hide it.
    The message is the original error message.
    """
    pass
