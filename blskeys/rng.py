"""Randomness sources for key generation.

Any object with a ``getrandbits(k) -> int`` method can drive key generation.
``secrets.SystemRandom`` is used unless the caller supplies something else;
``random.Random`` instances are accepted for reproducible test keys but are
not suitable for real keys.
"""

import logging
import random
import secrets
from typing import Protocol

from .errors import RandomnessError

logger = logging.getLogger(__name__)

# Upper bound on rejection sampling draws. With a 255-bit draw and a 255-bit
# bound the acceptance rate is above 0.9, so hitting this means the source is broken.
MAX_SAMPLING_ATTEMPTS = 100


class RandomSource(Protocol):
    """Anything that can produce uniformly random integers of a given bit width."""

    def getrandbits(self, k: int, /) -> int: ...


def system_rng() -> RandomSource:
    """Return the operating system CSPRNG."""
    return secrets.SystemRandom()


def seeded_rng(seed: int) -> RandomSource:
    """Return a deterministic source for reproducible keys.

    Not cryptographically secure.
    """
    logger.warning("Using a seeded, non-cryptographic randomness source")
    return random.Random(seed)


def random_scalar(rng: RandomSource, bound: int) -> int:
    """Draw a uniformly distributed integer in ``[0, bound - 1]``.

    Uses rejection sampling over ``bound.bit_length()`` bit draws so the
    result carries no modulo bias.

    Args:
        rng: The randomness source
        bound: Exclusive upper bound, must be positive

    Returns:
        The sampled integer

    Raises:
        RandomnessError: If the source returns unusable values or every draw
            is rejected

    """
    if bound <= 0:
        raise ValueError(f"bound must be positive, got {bound}")

    bits = bound.bit_length()
    for _ in range(MAX_SAMPLING_ATTEMPTS):
        candidate = rng.getrandbits(bits)
        if not isinstance(candidate, int) or candidate < 0 or candidate >> bits:
            raise RandomnessError(
                f"Randomness source returned an invalid {bits}-bit value"
            )
        if candidate < bound:
            return candidate

    raise RandomnessError(
        f"Failed to sample a value below the bound after {MAX_SAMPLING_ATTEMPTS} attempts"
    )
