"""
Tests for Pedersen commitments over BN254 G1.
"""

import pytest
from py_ecc.optimized_bn128 import G1, add, eq, field_modulus, is_inf, multiply, normalize

from zkposeidon.crypto import keccak256, sha256
from zkposeidon.crypto.field import FIELD_PRIME
from zkposeidon.crypto.pedersen import (
    BLINDING_GENERATOR_LABEL,
    PedersenGens,
    hash_to_g1,
    point_to_bytes,
)


@pytest.fixture(scope="module")
def gens():
    return PedersenGens.default()


class TestHashing:
    """Byte hashing helpers."""

    def test_sha256_known_answer(self):
        assert sha256(b"").hex() == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"

    def test_keccak256_known_answer(self):
        assert keccak256(b"").hex() == "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"


class TestHashToCurve:
    """Label to G1 point."""

    def test_point_on_curve(self):
        x, y = normalize(hash_to_g1(BLINDING_GENERATOR_LABEL))
        assert (y.n * y.n - x.n ** 3 - 3) % field_modulus == 0

    def test_deterministic(self):
        assert eq(hash_to_g1(b"label"), hash_to_g1(b"label"))

    def test_labels_separate(self):
        assert not eq(hash_to_g1(b"label-a"), hash_to_g1(b"label-b"))

    def test_blinding_generator_differs_from_base(self, gens):
        assert not eq(gens.B, gens.B_blinding)
        assert eq(gens.B, G1)

    def test_point_in_prime_order_group(self, gens):
        assert is_inf(multiply(gens.B_blinding, FIELD_PRIME))


class TestPointEncoding:
    """Canonical point bytes."""

    def test_infinity(self, gens):
        assert point_to_bytes(gens.commit(0, 0)) == b"\x01"

    def test_finite_point_length(self):
        encoded = point_to_bytes(G1)
        assert len(encoded) == 65
        assert encoded[0] == 0
        assert int.from_bytes(encoded[1:33], "big") == 1
        assert int.from_bytes(encoded[33:], "big") == 2

    def test_projective_representations_encode_equally(self):
        doubled = add(G1, G1)
        assert point_to_bytes(doubled) == point_to_bytes(multiply(G1, 2))


class TestCommit:
    """commit(v, r) = v*B + r*B_blinding"""

    def test_commit_formula(self, gens):
        expected = add(multiply(gens.B, 5), multiply(gens.B_blinding, 7))
        assert eq(gens.commit(5, 7), expected)

    def test_opens_to(self, gens):
        commitment = gens.commit(42, 1234)
        assert gens.opens_to(commitment, 42, 1234)

    def test_wrong_value_does_not_open(self, gens):
        commitment = gens.commit(42, 1234)
        assert not gens.opens_to(commitment, 43, 1234)

    def test_wrong_blinding_does_not_open(self, gens):
        commitment = gens.commit(42, 1234)
        assert not gens.opens_to(commitment, 42, 1235)

    def test_blinding_hides_value(self, gens):
        assert not eq(gens.commit(42, 1), gens.commit(42, 2))

    def test_homomorphic(self, gens):
        summed = add(gens.commit(3, 10), gens.commit(4, 20))
        assert eq(summed, gens.commit(7, 30))
