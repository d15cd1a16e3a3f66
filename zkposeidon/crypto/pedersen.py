"""
Pedersen commitments over BN254 G1.

    commit(v, r) = v * B + r * B_blinding

B is the standard G1 generator. B_blinding is derived by hashing a fixed
label to the curve (try-and-increment over Keccak-256), so its discrete log
with respect to B is unknown to everyone. Scalars live in the BN254 scalar
field, which is the field the circuits are expressed over.
"""

from dataclasses import dataclass
from typing import Tuple

from py_ecc.optimized_bn128 import (
    FQ,
    G1,
    add,
    eq,
    field_modulus,
    is_inf,
    multiply,
    normalize,
)

from zkposeidon.crypto import keccak256
from zkposeidon.crypto.field import FIELD_PRIME

# Projective G1 point as used by py_ecc.optimized_bn128
G1Point = Tuple[FQ, FQ, FQ]

BLINDING_GENERATOR_LABEL = b"zkposeidon/pedersen/B_blinding"


def hash_to_g1(label: bytes) -> G1Point:
    """
    Map a label to a G1 point by try-and-increment.

    BN254 G1 has cofactor 1 and p = 3 mod 4, so any point found on
    y^2 = x^3 + 3 is in the prime-order group and sqrt is a single pow.
    """
    counter = 0
    while True:
        digest = keccak256(label + counter.to_bytes(4, byteorder="big"))
        x = int.from_bytes(digest, byteorder="big") % field_modulus
        rhs = (pow(x, 3, field_modulus) + 3) % field_modulus
        y = pow(rhs, (field_modulus + 1) // 4, field_modulus)
        if (y * y) % field_modulus == rhs:
            return (FQ(x), FQ(y), FQ(1))
        counter += 1


def point_to_bytes(point: G1Point) -> bytes:
    """
    Canonical encoding for transcripts.

    Infinity is b'\\x01'; finite points are b'\\x00' || x(32) || y(32), big-endian.
    """
    if is_inf(point):
        return b"\x01"
    x, y = normalize(point)
    return b"\x00" + x.n.to_bytes(32, byteorder="big") + y.n.to_bytes(32, byteorder="big")


@dataclass(frozen=True)
class PedersenGens:
    """Generators for Pedersen commitments."""
    B: G1Point
    B_blinding: G1Point

    @classmethod
    def default(cls) -> "PedersenGens":
        """Standard generator plus the hashed blinding generator."""
        return cls(B=G1, B_blinding=hash_to_g1(BLINDING_GENERATOR_LABEL))

    def commit(self, value: int, blinding: int) -> G1Point:
        """Commit to value with the given blinding factor."""
        return add(
            multiply(self.B, value % FIELD_PRIME),
            multiply(self.B_blinding, blinding % FIELD_PRIME),
        )

    def opens_to(self, commitment: G1Point, value: int, blinding: int) -> bool:
        """Check that (value, blinding) is an opening of commitment."""
        return eq(self.commit(value, blinding), commitment)
