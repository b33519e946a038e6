"""Type definitions for blskeys.

Hex encodings of key material passed across the CLI and JSON boundaries.
"""

from typing import NewType

SecretKeyHex = NewType("SecretKeyHex", str)
"""Hex-encoded secret key (64 characters, without 0x prefix)."""

PubkeyHex = NewType("PubkeyHex", str)
"""Hex-encoded compressed public key (96 characters, without 0x prefix)."""

UncompressedPubkeyHex = NewType("UncompressedPubkeyHex", str)
"""Hex-encoded uncompressed public key (192 characters, without 0x prefix)."""

SignatureHex = NewType("SignatureHex", str)
"""Hex-encoded BLS signature (192 characters, without 0x prefix)."""
