"""BLS signatures over keys from ``blskeys.keys``.

Signing and verification are delegated to the IETF proof-of-possession
ciphersuite in ``py_ecc`` (the one used by Ethereum consensus).
"""

from __future__ import annotations

import logging

from eth_typing import BLSPubkey, BLSSignature
from eth_utils import ValidationError
from py_ecc.bls import G2ProofOfPossession
from py_ecc.bls.g2_primitives import signature_to_G2

from .errors import BadPoint, IncorrectSize, SigningError
from .keys import PublicKey, SecretKey
from .metrics import DECODE_ERRORS_TOTAL
from .types import SignatureHex

logger = logging.getLogger(__name__)

SIGNATURE_BYTES = 96


class Signature:
    """A compressed G2 BLS signature."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        self._data = data

    @classmethod
    def new(cls, message: bytes, sk: SecretKey) -> Signature:
        """Sign a message with a secret key.

        Raises:
            SigningError: If the key is the zero scalar or the message is not bytes

        """
        try:
            return cls(bytes(G2ProofOfPossession.Sign(sk.as_raw(), message)))
        except ValidationError as e:
            raise SigningError(f"Signing failed: {e}") from e

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> Signature:
        """Instantiate a Signature from 96 compressed bytes.

        Raises:
            IncorrectSize: If the input is not 96 bytes
            BadPoint: If the bytes are not a valid compressed G2 point

        """
        if len(data) != SIGNATURE_BYTES:
            DECODE_ERRORS_TOTAL.labels(format="signature", error_type="IncorrectSize").inc()
            raise IncorrectSize(SIGNATURE_BYTES, len(data))

        data = bytes(data)
        try:
            signature_to_G2(BLSSignature(data))
        except ValueError as e:
            DECODE_ERRORS_TOTAL.labels(format="signature", error_type="BadPoint").inc()
            raise BadPoint(str(e)) from e
        return cls(data)

    def verify(self, message: bytes, pk: PublicKey) -> bool:
        """Return True if this is a valid signature of ``message`` under ``pk``."""
        valid = G2ProofOfPossession.Verify(
            BLSPubkey(pk.as_bytes()), message, BLSSignature(self._data)
        )
        if not valid:
            logger.debug(f"Signature verification failed for key: {pk.as_hex()[:20]}...")
        return valid

    def as_bytes(self) -> bytes:
        return self._data

    def as_hex(self) -> SignatureHex:
        return SignatureHex(self._data.hex())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Signature):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Signature({self.as_hex()})"
