"""
Pluggable shuffling strategies.

A shuffler permutes n positions by calling a swap callback. The Deck passes
its own index swap, so a shuffler never sees the cards themselves.
"""

import logging
import random
import secrets
import time
from typing import Callable, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

SwapFunc = Callable[[int, int], None]

# random.Random seeds from abs(int); masking keeps negative int64 seeds distinct.
_SEED_MASK = 0xFFFFFFFFFFFFFFFF


@runtime_checkable
class Shuffler(Protocol):
    """Shuffler protocol."""

    def shuffle(self, n: int, swap: SwapFunc) -> None:
        """
        Randomize the order of n elements.

        Args:
            n: number of elements
            swap: callback exchanging the elements at positions i and j
        """
        ...


class SecureShuffler:
    """
    Fisher-Yates shuffle driven by the operating system CSPRNG.

    Each step reads 8 bytes, reads them as a little-endian unsigned 64-bit
    value and reduces it modulo i + 1. The resulting modulo bias is
    1 / (2**64 / (i + 1)), about 2.8e-18 for a 52-card deck.

    Errors from the entropy source propagate to the caller; the shuffle is
    never completed with weaker randomness.
    """

    def __init__(self, token_bytes: Callable[[int], bytes] = secrets.token_bytes) -> None:
        """
        Args:
            token_bytes: entropy source returning the requested number of
                random bytes
        """
        self._token_bytes = token_bytes

    def shuffle(self, n: int, swap: SwapFunc) -> None:
        logger.debug("SecureShuffler shuffling %d positions", n)
        for i in range(n - 1, 0, -1):
            value = int.from_bytes(self._token_bytes(8), "little")
            swap(i, value % (i + 1))

    def __repr__(self) -> str:
        return "SecureShuffler()"


class DefaultShuffler:
    """
    Fisher-Yates shuffle driven by a Mersenne Twister.

    With an explicit seed the sequence of swaps is fully reproducible, which
    is what tests and replays need. Without one the generator is seeded from
    the wall clock at construction; the seed is kept in ``seed`` so the
    shuffle can still be replayed later.

    Not suitable for adversarial or fairness-critical use; use
    SecureShuffler there.

    Seeds are taken as signed 64-bit values; the generator is keyed on their
    two's complement bit pattern so that s and -s shuffle differently.

    Attributes:
        seed: the seed the caller passed, or the clock reading used
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Args:
            seed: generator seed. If None, the current time in nanoseconds
        """
        self.seed = time.time_ns() if seed is None else seed
        self._rng = random.Random(self.seed & _SEED_MASK)

    @classmethod
    def seeded(cls, seed: int) -> 'DefaultShuffler':
        """
        Create a deterministic shuffler.

        Args:
            seed: generator seed

        Returns:
            DefaultShuffler: two shufflers built from the same seed produce
                identical orders for sequences of the same length
        """
        return cls(seed)

    def shuffle(self, n: int, swap: SwapFunc) -> None:
        logger.debug("DefaultShuffler shuffling %d positions (seed=%s)", n, self.seed)
        for i in range(n - 1, 0, -1):
            swap(i, self._rng.randrange(i + 1))

    def __repr__(self) -> str:
        return f"DefaultShuffler(seed={self.seed})"
