"""Tests for Prometheus metrics."""

import pytest

from blskeys.errors import BadPoint, IncorrectSize, InvalidSecretKeyRange
from blskeys.keys import PublicKey, SecretKey
from blskeys.metrics import REGISTRY, get_metrics_text


def sample(name: str, labels: dict[str, str] | None = None) -> float:
    """Return the current value of a sample, treating missing samples as zero."""
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


def decode_errors(fmt: str, error_type: str) -> float:
    return sample("decode_errors_total", {"format": fmt, "error_type": error_type})


def test_metrics_text_contains_all_metrics() -> None:
    """Test that the registry renders every metric."""
    text = get_metrics_text()
    assert "blskeys_build_info" in text
    assert "keys_generated_total" in text
    assert "key_generation_duration_seconds" in text
    assert "decode_errors_total" in text
    assert "secret_keys_zeroized_total" in text


def test_key_generation_counted() -> None:
    """Test that generating a key increments the counter and histogram."""
    generated = sample("keys_generated_total")
    observed = sample("key_generation_duration_seconds_count")

    SecretKey.random()

    assert sample("keys_generated_total") == generated + 1
    assert sample("key_generation_duration_seconds_count") == observed + 1


def test_decoding_does_not_count_as_generation(sk_bytes: bytes) -> None:
    """Test that decoded keys are not counted as generated."""
    generated = sample("keys_generated_total")
    SecretKey.from_bytes(sk_bytes)
    assert sample("keys_generated_total") == generated


def test_zeroize_counted(sk_bytes: bytes) -> None:
    """Test that zeroization is counted once per key."""
    before = sample("secret_keys_zeroized_total")

    sk = SecretKey.from_bytes(sk_bytes)
    sk.zeroize()
    sk.zeroize()

    assert sample("secret_keys_zeroized_total") == before + 1


def test_secret_key_decode_errors_counted() -> None:
    """Test that rejected secret keys are counted by error type."""
    size_before = decode_errors("secret_key", "IncorrectSize")
    range_before = decode_errors("secret_key", "InvalidSecretKeyRange")

    with pytest.raises(IncorrectSize):
        SecretKey.from_bytes(b"")
    with pytest.raises(InvalidSecretKeyRange):
        SecretKey.from_bytes(b"\xff" * 32)

    assert decode_errors("secret_key", "IncorrectSize") == size_before + 1
    assert decode_errors("secret_key", "InvalidSecretKeyRange") == range_before + 1


def test_public_key_decode_errors_counted() -> None:
    """Test that rejected public keys are counted per format."""
    compressed_before = decode_errors("compressed", "BadPoint")
    uncompressed_before = decode_errors("uncompressed", "IncorrectSize")

    with pytest.raises(BadPoint):
        PublicKey.from_bytes(bytes(48))
    with pytest.raises(IncorrectSize):
        PublicKey.from_uncompressed_bytes(bytes(95))

    assert decode_errors("compressed", "BadPoint") == compressed_before + 1
    assert decode_errors("uncompressed", "IncorrectSize") == uncompressed_before + 1
