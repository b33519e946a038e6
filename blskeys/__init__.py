"""blskeys - BLS12-381 secret keys, public keys and keypairs."""

__version__ = "0.1.0"

from .errors import (  # noqa: E402
    BadPoint,
    DecodeError,
    IncorrectSize,
    InvalidSecretKeyRange,
    RandomnessError,
    SecretKeyDestroyedError,
    SigningError,
)
from .keys import (  # noqa: E402
    PUBLIC_KEY_BYTES,
    PUBLIC_KEY_UNCOMPRESSED_BYTES,
    SECRET_KEY_BYTES,
    Keypair,
    PublicKey,
    SecretKey,
)
from .signature import SIGNATURE_BYTES, Signature  # noqa: E402

__all__ = [
    "PUBLIC_KEY_BYTES",
    "PUBLIC_KEY_UNCOMPRESSED_BYTES",
    "SECRET_KEY_BYTES",
    "SIGNATURE_BYTES",
    "BadPoint",
    "DecodeError",
    "IncorrectSize",
    "InvalidSecretKeyRange",
    "Keypair",
    "PublicKey",
    "RandomnessError",
    "SecretKey",
    "SecretKeyDestroyedError",
    "Signature",
    "SigningError",
    "__version__",
]
