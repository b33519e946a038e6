"""Test fixtures and utilities."""

import random
from collections.abc import Generator

import pytest

from blskeys.keys import PublicKey, SecretKey

# Secret key test vector, decodes to a scalar below the curve order.
SK_BYTES = bytes(
    [
        78, 252, 122, 126, 32, 0, 75, 89, 252, 31, 42, 130, 254, 88, 6, 90,
        138, 202, 135, 194, 233, 117, 181, 75, 96, 238, 79, 100, 237, 59, 140, 111,
    ]
)


@pytest.fixture
def sk_bytes() -> bytes:
    """Return the secret key test vector."""
    return SK_BYTES


@pytest.fixture
def secret_key() -> Generator[SecretKey, None, None]:
    """Create the test vector secret key and zeroize it afterwards."""
    with SecretKey.from_bytes(SK_BYTES) as sk:
        yield sk


@pytest.fixture
def public_key(secret_key: SecretKey) -> PublicKey:
    """Return the public key of the test vector secret key."""
    return PublicKey.from_secret_key(secret_key)


@pytest.fixture
def rng() -> random.Random:
    """Return a seeded randomness source for reproducible keys."""
    return random.Random(12381)
