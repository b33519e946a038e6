"""BLS secret keys, public keys and keypairs.

Wire formats:

- ``SecretKey``: 32-byte big-endian scalar, strictly less than the curve order.
- ``PublicKey`` compressed: 48-byte ZCash-style G1 encoding.
- ``PublicKey`` uncompressed: 48-byte big-endian X followed by 48-byte
  big-endian Y; the point at infinity is 96 zero bytes.
"""

from __future__ import annotations

import hmac
import logging
import time
from typing import Any

from . import curve
from .errors import (
    BadPoint,
    DecodeError,
    IncorrectSize,
    InvalidSecretKeyRange,
    SecretKeyDestroyedError,
)
from .metrics import (
    DECODE_ERRORS_TOTAL,
    KEY_GENERATION_DURATION_SECONDS,
    KEYS_GENERATED_TOTAL,
    SECRET_KEYS_ZEROIZED_TOTAL,
)
from .rng import RandomSource, random_scalar, system_rng

logger = logging.getLogger(__name__)

SECRET_KEY_BYTES = 32
PUBLIC_KEY_BYTES = curve.G1_COMPRESSED_BYTES
PUBLIC_KEY_UNCOMPRESSED_BYTES = 2 * curve.MODBYTES


def _zero(buffer: bytearray) -> None:
    for i in range(len(buffer)):
        buffer[i] = 0


def strip_hex_prefix(value: str) -> str:
    return value[2:] if value.startswith(("0x", "0X")) else value


def _decode_error(fmt: str, error: DecodeError) -> DecodeError:
    DECODE_ERRORS_TOTAL.labels(format=fmt, error_type=type(error).__name__).inc()
    logger.debug(f"Rejected {fmt} encoding: {error}")
    return error


class SecretKey:
    """A BLS secret key.

    The scalar lives in a mutable buffer that is overwritten with zeros by
    ``zeroize()``. Use the key as a context manager to release it on every
    exit path::

        with SecretKey.random() as sk:
            signature = Signature.new(message, sk)

    Integers handed out by ``as_raw()`` are ordinary Python ints and cannot be
    wiped; keep them short-lived.
    """

    __slots__ = ("_x", "_destroyed")

    def __init__(self, buffer: bytearray) -> None:
        """Take ownership of a ``curve.MODBYTES`` wide big-endian scalar buffer.

        Prefer ``random()`` or ``from_bytes()``.

        Raises:
            ValueError: If the buffer has the wrong width
            InvalidSecretKeyRange: If the scalar is not less than the curve order

        """
        if len(buffer) != curve.MODBYTES:
            raise ValueError(
                f"Scalar buffer must be {curve.MODBYTES} bytes, got {len(buffer)}"
            )
        if int.from_bytes(buffer, "big") >= curve.CURVE_ORDER:
            raise InvalidSecretKeyRange()
        self._x = buffer
        self._destroyed = False

    @classmethod
    def random(cls, rng: RandomSource | None = None) -> SecretKey:
        """Generate a uniformly random secret key in ``[0, r - 1]``.

        Args:
            rng: Randomness source, defaults to the system CSPRNG

        Raises:
            RandomnessError: If the source fails to produce a usable scalar

        """
        if rng is None:
            rng = system_rng()

        start_time = time.perf_counter()
        x = random_scalar(rng, curve.CURVE_ORDER)
        sk = cls(bytearray(x.to_bytes(curve.MODBYTES, "big")))
        KEY_GENERATION_DURATION_SECONDS.observe(time.perf_counter() - start_time)
        KEYS_GENERATED_TOTAL.inc()
        return sk

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> SecretKey:
        """Instantiate a SecretKey from 32 big-endian bytes.

        Raises:
            IncorrectSize: If the input is not 32 bytes
            InvalidSecretKeyRange: If the value is not less than the curve order

        """
        if len(data) != SECRET_KEY_BYTES:
            raise _decode_error(
                "secret_key", IncorrectSize(SECRET_KEY_BYTES, len(data))
            )

        buffer = bytearray(curve.MODBYTES - SECRET_KEY_BYTES)
        buffer.extend(data)
        try:
            return cls(buffer)
        except InvalidSecretKeyRange as e:
            _zero(buffer)
            raise _decode_error("secret_key", e) from None

    @classmethod
    def from_hex(cls, value: str) -> SecretKey:
        """Instantiate a SecretKey from 64 hex characters (``0x`` prefix optional)."""
        data = bytearray.fromhex(strip_hex_prefix(value))
        try:
            return cls.from_bytes(data)
        finally:
            _zero(data)

    def _check_alive(self) -> None:
        if self._destroyed:
            raise SecretKeyDestroyedError()

    def as_bytes(self) -> bytes:
        """Export the SecretKey as 32 big-endian bytes."""
        self._check_alive()
        return bytes(self._x[curve.MODBYTES - SECRET_KEY_BYTES :])

    def as_hex(self) -> str:
        return self.as_bytes().hex()

    def as_raw(self) -> int:
        """Return the scalar for use by the signing code."""
        self._check_alive()
        return int.from_bytes(self._x, "big")

    @property
    def is_zeroized(self) -> bool:
        return self._destroyed

    def zeroize(self) -> None:
        """Overwrite the scalar storage with zeros. Safe to call more than once."""
        if self._destroyed:
            return
        _zero(self._x)
        self._destroyed = True
        SECRET_KEYS_ZEROIZED_TOTAL.inc()

    def __enter__(self) -> SecretKey:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.zeroize()

    def __del__(self) -> None:
        # Attributes may be missing if __init__ raised.
        buffer = getattr(self, "_x", None)
        if buffer is not None:
            buffer[:] = bytes(len(buffer))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SecretKey):
            return NotImplemented
        return hmac.compare_digest(self.as_bytes(), other.as_bytes())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = "zeroized" if self._destroyed else "redacted"
        return f"SecretKey(<{state}>)"

    def __copy__(self) -> Any:
        raise TypeError("SecretKey cannot be copied")

    def __deepcopy__(self, memo: dict[int, Any]) -> Any:
        raise TypeError("SecretKey cannot be copied")

    def __reduce__(self) -> Any:
        raise TypeError("SecretKey cannot be pickled")


class PublicKey:
    """A BLS public key: a point in G1, possibly the point at infinity."""

    __slots__ = ("_point",)

    def __init__(self, point: curve.G1Point) -> None:
        self._point = point

    @classmethod
    def from_secret_key(cls, sk: SecretKey) -> PublicKey:
        """Derive the public key ``G1_GENERATOR * sk``."""
        return cls(curve.mul_generator(sk.as_raw()))

    @classmethod
    def new_from_raw(cls, point: curve.G1Point) -> PublicKey:
        """Wrap a G1 point without validating it.

        The caller is responsible for the point being a legitimate G1 element.
        """
        return cls(point)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> PublicKey:
        """Instantiate a PublicKey from 48 compressed bytes.

        Raises:
            IncorrectSize: If the input is not 48 bytes
            BadPoint: If the encoding is invalid or the point is not in G1

        """
        if len(data) != PUBLIC_KEY_BYTES:
            raise _decode_error("compressed", IncorrectSize(PUBLIC_KEY_BYTES, len(data)))

        try:
            point = curve.decompress(bytes(data))
        except ValueError as e:
            raise _decode_error("compressed", BadPoint(str(e))) from e

        if not curve.in_subgroup(point):
            raise _decode_error("compressed", BadPoint("Point is not in the G1 subgroup"))

        return cls(point)

    @classmethod
    def from_hex(cls, value: str) -> PublicKey:
        return cls.from_bytes(bytes.fromhex(strip_hex_prefix(value)))

    @classmethod
    def from_uncompressed_bytes(cls, data: bytes | bytearray) -> PublicKey:
        """Instantiate a PublicKey from 96 uncompressed ``X || Y`` bytes.

        96 zero bytes decode to the point at infinity. Any other input must
        hold canonical coordinates of a point on the curve in the G1 subgroup.

        Raises:
            IncorrectSize: If the input is not 96 bytes
            BadPoint: If the coordinates do not describe a valid G1 point

        """
        if len(data) != PUBLIC_KEY_UNCOMPRESSED_BYTES:
            raise _decode_error(
                "uncompressed",
                IncorrectSize(PUBLIC_KEY_UNCOMPRESSED_BYTES, len(data)),
            )

        if not any(data):
            return cls(curve.G1_IDENTITY)

        x = int.from_bytes(data[: curve.MODBYTES], "big")
        y = int.from_bytes(data[curve.MODBYTES :], "big")
        if x >= curve.FIELD_MODULUS or y >= curve.FIELD_MODULUS:
            raise _decode_error(
                "uncompressed", BadPoint("Coordinate is not less than the field modulus")
            )

        point = curve.from_affine(x, y)
        if curve.is_infinity(point):
            raise _decode_error("uncompressed", BadPoint("Non-zero encoding of infinity"))
        if not curve.is_valid_point(point):
            raise _decode_error("uncompressed", BadPoint("Point is not on the curve"))
        if not curve.in_subgroup(point):
            raise _decode_error("uncompressed", BadPoint("Point is not in the G1 subgroup"))

        return cls(point)

    @classmethod
    def from_uncompressed_hex(cls, value: str) -> PublicKey:
        return cls.from_uncompressed_bytes(bytes.fromhex(strip_hex_prefix(value)))

    @property
    def point(self) -> curve.G1Point:
        """The raw G1 point, for use by the signing code."""
        return self._point

    def is_infinity(self) -> bool:
        return curve.is_infinity(self._point)

    def as_bytes(self) -> bytes:
        """Export the PublicKey as 48 compressed bytes."""
        return curve.compress(self._point)

    def as_hex(self) -> str:
        return self.as_bytes().hex()

    def as_uncompressed_bytes(self) -> bytes:
        """Export the PublicKey as 96 uncompressed ``X || Y`` bytes."""
        if self.is_infinity():
            return bytes(PUBLIC_KEY_UNCOMPRESSED_BYTES)

        x, y = curve.to_affine(self._point)
        return x.to_bytes(curve.MODBYTES, "big") + y.to_bytes(curve.MODBYTES, "big")

    def as_uncompressed_hex(self) -> str:
        return self.as_uncompressed_bytes().hex()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self.as_bytes() == other.as_bytes()

    def __hash__(self) -> int:
        return hash(self.as_bytes())

    def __repr__(self) -> str:
        return f"PublicKey({self.as_hex()})"


_KEYPAIR_TOKEN = object()


class Keypair:
    """A secret key and the public key derived from it.

    Only ``Keypair.random()`` creates instances, so the two halves always match.
    """

    __slots__ = ("_sk", "_pk")

    def __init__(self, sk: SecretKey, pk: PublicKey, *, _token: object = None) -> None:
        if _token is not _KEYPAIR_TOKEN:
            raise TypeError("Keypair instances are created with Keypair.random()")
        self._sk = sk
        self._pk = pk

    @classmethod
    def random(cls, rng: RandomSource | None = None) -> Keypair:
        """Generate a random secret key and derive its public key."""
        sk = SecretKey.random(rng)
        pk = PublicKey.from_secret_key(sk)
        logger.debug(f"Generated keypair: {pk.as_hex()[:20]}...")
        return cls(sk, pk, _token=_KEYPAIR_TOKEN)

    @property
    def sk(self) -> SecretKey:
        return self._sk

    @property
    def pk(self) -> PublicKey:
        return self._pk

    def zeroize(self) -> None:
        self._sk.zeroize()

    def __enter__(self) -> Keypair:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.zeroize()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Keypair):
            return NotImplemented
        return self._sk == other._sk and self._pk == other._pk

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Keypair(pk={self._pk.as_hex()})"
