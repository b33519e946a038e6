"""Tests for signing with blskeys keys."""

import pytest

from blskeys.errors import BadPoint, IncorrectSize, SigningError
from blskeys.keys import PublicKey, SecretKey
from blskeys.signature import SIGNATURE_BYTES, Signature

MESSAGE = b"cats"


class TestSignature:
    """End-to-end sign and verify."""

    def test_verify_with_serialized_public_key(
        self, secret_key: SecretKey, public_key: PublicKey
    ) -> None:
        """Test that a signature verifies against the key and its decoded bytes."""
        signature = Signature.new(MESSAGE, secret_key)
        assert signature.verify(MESSAGE, public_key)

        pk = PublicKey.from_bytes(public_key.as_bytes())
        assert signature.verify(MESSAGE, pk)

    def test_verify_with_uncompressed_public_key(
        self, secret_key: SecretKey, public_key: PublicKey
    ) -> None:
        """Test verification against a key decoded from the uncompressed format."""
        signature = Signature.new(MESSAGE, secret_key)
        pk = PublicKey.from_uncompressed_bytes(public_key.as_uncompressed_bytes())
        assert signature.verify(MESSAGE, pk)

    def test_random_secret_key_can_sign(self) -> None:
        """Test that freshly generated keys produce valid signatures."""
        with SecretKey.random() as sk:
            pk = PublicKey.from_secret_key(sk)
            signature = Signature.new(MESSAGE, sk)
        assert signature.verify(MESSAGE, pk)

    def test_wrong_message(self, secret_key: SecretKey, public_key: PublicKey) -> None:
        """Test that verification fails for a different message."""
        signature = Signature.new(MESSAGE, secret_key)
        assert signature.verify(b"dogs", public_key) is False

    def test_wrong_public_key(self, secret_key: SecretKey) -> None:
        """Test that verification fails for a different key."""
        signature = Signature.new(MESSAGE, secret_key)
        other = PublicKey.from_secret_key(SecretKey.random())
        assert signature.verify(MESSAGE, other) is False

    def test_zero_secret_key_cannot_sign(self) -> None:
        """Test that the zero scalar is refused with a blskeys error."""
        with SecretKey.from_bytes(bytes(32)) as sk:
            with pytest.raises(SigningError, match="Signing failed"):
                Signature.new(MESSAGE, sk)

    def test_signing_error_is_value_error(self) -> None:
        """Test that signing errors can be caught as ValueError."""
        assert issubclass(SigningError, ValueError)

    def test_signing_is_deterministic(self, secret_key: SecretKey) -> None:
        """Test that BLS signatures are a function of key and message."""
        assert Signature.new(MESSAGE, secret_key) == Signature.new(MESSAGE, secret_key)


class TestSignatureEncoding:
    """Tests for the 96-byte signature format."""

    def test_roundtrip(self, secret_key: SecretKey) -> None:
        """Test signature serialization roundtrip."""
        signature = Signature.new(MESSAGE, secret_key)
        encoded = signature.as_bytes()

        assert len(encoded) == SIGNATURE_BYTES
        assert Signature.from_bytes(encoded) == signature

    def test_hex(self, secret_key: SecretKey) -> None:
        """Test that the hex form matches the encoded bytes."""
        signature = Signature.new(MESSAGE, secret_key)
        assert len(signature.as_hex()) == 2 * SIGNATURE_BYTES
        assert bytes.fromhex(signature.as_hex()) == signature.as_bytes()

    @pytest.mark.parametrize("length", [0, 48, 95, 97])
    def test_incorrect_size(self, length: int) -> None:
        """Test that inputs other than 96 bytes are rejected."""
        with pytest.raises(IncorrectSize):
            Signature.from_bytes(b"\x01" * length)

    def test_bad_point(self) -> None:
        """Test that an encoding without the compression flag is rejected."""
        with pytest.raises(BadPoint):
            Signature.from_bytes(bytes(96))
