"""Serializable records describing keys.

Used for the CLI's JSON output. Only hex strings are stored, never key objects.
"""

import msgspec

from .keys import Keypair, PublicKey
from .types import PubkeyHex, SecretKeyHex, UncompressedPubkeyHex


class PublicKeyInfo(msgspec.Struct, frozen=True):
    """Both wire encodings of a public key.

    Attributes:
        pubkey: Compressed encoding (48 bytes)
        pubkey_uncompressed: Uncompressed encoding (96 bytes)
        is_infinity: Whether the key is the point at infinity

    """

    pubkey: PubkeyHex
    pubkey_uncompressed: UncompressedPubkeyHex
    is_infinity: bool

    @classmethod
    def from_public_key(cls, pk: PublicKey) -> "PublicKeyInfo":
        return cls(
            pubkey=PubkeyHex(pk.as_hex()),
            pubkey_uncompressed=UncompressedPubkeyHex(pk.as_uncompressed_hex()),
            is_infinity=pk.is_infinity(),
        )


class KeypairInfo(msgspec.Struct, frozen=True):
    """A generated keypair in hex form."""

    secret_key: SecretKeyHex
    public_key: PublicKeyInfo

    @classmethod
    def from_keypair(cls, keypair: Keypair) -> "KeypairInfo":
        return cls(
            secret_key=SecretKeyHex(keypair.sk.as_hex()),
            public_key=PublicKeyInfo.from_public_key(keypair.pk),
        )
