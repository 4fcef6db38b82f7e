"""
Deck setup configuration.

DeckConfig describes how a game wants its deck built: how many copies,
whether jokers are included and how the deck is shuffled. build_deck turns
a config into a ready Deck.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .deck.deck import Deck
from .exceptions import DeckConfigError

logger = logging.getLogger(__name__)


class ShuffleMode(Enum):
    """How build_deck shuffles a new deck."""
    NONE = "none"
    DEFAULT = "default"
    SECURE = "secure"
    SEEDED = "seeded"


@dataclass
class DeckConfig:
    """
    Deck setup settings.

    Attributes:
        copies: number of 52-card (or 54 with jokers) blocks
        jokers: add a red and a black joker to every block
        shuffle_mode: shuffling applied by build_deck
        random_seed: seed for ShuffleMode.SEEDED, for reproducible games
        debug_mode: log the build at INFO instead of DEBUG
    """
    copies: int = 1
    jokers: bool = False
    shuffle_mode: ShuffleMode = ShuffleMode.DEFAULT
    random_seed: Optional[int] = None
    debug_mode: bool = False

    def __post_init__(self):
        """Validate the configuration."""
        if isinstance(self.shuffle_mode, str):
            try:
                self.shuffle_mode = ShuffleMode(self.shuffle_mode.lower())
            except ValueError:
                raise DeckConfigError(f"unknown shuffle mode: {self.shuffle_mode}") from None
        if not isinstance(self.shuffle_mode, ShuffleMode):
            raise DeckConfigError(f"unknown shuffle mode: {self.shuffle_mode}")

        if self.copies < 1:
            raise DeckConfigError(f"copies must be at least 1, got {self.copies}")

        if self.shuffle_mode is ShuffleMode.SEEDED and self.random_seed is None:
            raise DeckConfigError("seeded shuffle mode requires random_seed")
        if self.shuffle_mode is not ShuffleMode.SEEDED and self.random_seed is not None:
            raise DeckConfigError(
                f"random_seed is only used by seeded shuffle mode, got mode {self.shuffle_mode.value}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeckConfig':
        """
        Build a config from a plain mapping, e.g. parsed JSON.

        Args:
            data: keys matching the DeckConfig fields; missing keys use defaults

        Returns:
            DeckConfig: validated configuration

        Raises:
            DeckConfigError: on unknown keys or invalid values
        """
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise DeckConfigError(f"unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "copies": self.copies,
            "jokers": self.jokers,
            "shuffle_mode": self.shuffle_mode.value,
            "random_seed": self.random_seed,
            "debug_mode": self.debug_mode,
        }


def build_deck(config: Optional[DeckConfig] = None) -> Deck:
    """
    Build and shuffle a deck as described by config.

    Args:
        config: deck settings. If None, a default-shuffled single deck

    Returns:
        Deck: the new deck
    """
    config = config or DeckConfig()
    level = logging.INFO if config.debug_mode else logging.DEBUG
    logger.log(level, "Building deck: %s", config.to_dict())

    if config.jokers:
        deck = Deck.multiple_with_jokers(config.copies)
    else:
        deck = Deck.multiple(config.copies)

    if config.shuffle_mode is ShuffleMode.DEFAULT:
        deck.shuffle()
    elif config.shuffle_mode is ShuffleMode.SECURE:
        deck.secure_shuffle()
    elif config.shuffle_mode is ShuffleMode.SEEDED:
        deck.shuffle_with_seed(config.random_seed)

    return deck
