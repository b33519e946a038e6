"""BLS12-381 G1 group operations.

Thin adapter over ``py_ecc`` so the key types only deal with a handful of
named operations. Points are ``py_ecc`` optimized projective triples
``(x, y, z)`` of field elements.
"""

from py_ecc.bls.g2_primitives import G1_to_pubkey, pubkey_to_G1, subgroup_check
from py_ecc.bls.typing import G1Uncompressed
from py_ecc.fields import optimized_bls12_381_FQ as FQ
from py_ecc.optimized_bls12_381 import (
    G1,
    Z1,
    b,
    curve_order,
    field_modulus,
    is_inf,
    is_on_curve,
    multiply,
    normalize,
)

G1Point = G1Uncompressed

# Prime order r of G1 (and of the scalar field).
CURVE_ORDER: int = curve_order

# Base field modulus p.
FIELD_MODULUS: int = field_modulus

# Width of a base field element in bytes.
MODBYTES = 48

# Compressed G1 point length.
G1_COMPRESSED_BYTES = 48

G1_GENERATOR: G1Point = G1

G1_IDENTITY: G1Point = Z1


def mul_generator(scalar: int) -> G1Point:
    """Return ``G1_GENERATOR * scalar``."""
    return multiply(G1_GENERATOR, scalar)


def is_infinity(point: G1Point) -> bool:
    return is_inf(point)


def is_valid_point(point: G1Point) -> bool:
    """Return True if the point satisfies y^2 = x^3 + 4."""
    return is_on_curve(point, b)


def in_subgroup(point: G1Point) -> bool:
    """Return True if the point lies in the prime-order subgroup."""
    return subgroup_check(point)


def from_affine(x: int, y: int) -> G1Point:
    return (FQ(x), FQ(y), FQ.one())


def to_affine(point: G1Point) -> tuple[int, int]:
    """Return integer affine coordinates of a finite point."""
    x, y = normalize(point)
    return x.n, y.n


def compress(point: G1Point) -> bytes:
    return bytes(G1_to_pubkey(point))


def decompress(data: bytes) -> G1Point:
    """Decode a compressed point.

    Raises:
        ValueError: If the flags or x-coordinate are invalid

    """
    return pubkey_to_G1(data)
