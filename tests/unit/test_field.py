"""
Tests for scalar field helpers.

Tests cover:
1. Modular arithmetic and inversion
2. Field element validation
3. Canonical hex encoding
4. CLI scalar parsing
"""

import random

import pytest

from zkposeidon.crypto.field import (
    FIELD_PRIME,
    SCALAR_HEX_LENGTH,
    add,
    invert,
    mul,
    neg,
    parse_scalar,
    random_scalar,
    scalar_from_hex,
    scalar_to_hex,
    sub,
    validate_field_element,
)


class TestArithmetic:
    """Field arithmetic wraps at FIELD_PRIME."""

    def test_field_prime_is_bn254_scalar_order(self):
        assert FIELD_PRIME == 21888242871839275222246405745257275088548364400416034343698204186575808495617

    def test_add_wraps(self):
        assert add(FIELD_PRIME - 1, 2) == 1

    def test_sub_wraps(self):
        assert sub(1, 2) == FIELD_PRIME - 1

    def test_mul_reduces(self):
        assert mul(FIELD_PRIME - 1, FIELD_PRIME - 1) == 1

    def test_neg(self):
        assert neg(0) == 0
        assert neg(5) == FIELD_PRIME - 5

    def test_invert(self):
        rng = random.Random(24)
        for _ in range(20):
            a = rng.randrange(1, FIELD_PRIME)
            assert mul(a, invert(a)) == 1

    def test_invert_small(self):
        assert invert(1) == 1
        assert mul(2, invert(2)) == 1

    def test_invert_zero_raises(self):
        with pytest.raises(ZeroDivisionError):
            invert(0)

    def test_invert_multiple_of_prime_raises(self):
        with pytest.raises(ZeroDivisionError):
            invert(FIELD_PRIME)


class TestRandomScalar:
    """Random sampling."""

    def test_in_range(self):
        for _ in range(10):
            assert 0 <= random_scalar() < FIELD_PRIME

    def test_seeded_is_reproducible(self):
        a = [random_scalar(random.Random(24)) for _ in range(3)]
        b = [random_scalar(random.Random(24)) for _ in range(3)]
        assert a == b


class TestValidation:
    """validate_field_element accepts canonical ints only."""

    def test_accepts_bounds(self):
        assert validate_field_element(0) == 0
        assert validate_field_element(FIELD_PRIME - 1) == FIELD_PRIME - 1

    def test_rejects_prime(self):
        with pytest.raises(ValueError, match="out of field range"):
            validate_field_element(FIELD_PRIME)

    def test_rejects_negative(self):
        with pytest.raises(ValueError):
            validate_field_element(-1)

    def test_rejects_non_int(self):
        with pytest.raises(ValueError, match="must be int"):
            validate_field_element("5")
        with pytest.raises(ValueError):
            validate_field_element(1.0)

    def test_rejects_bool(self):
        with pytest.raises(ValueError):
            validate_field_element(True)

    def test_error_names_value(self):
        with pytest.raises(ValueError, match="xl"):
            validate_field_element(-1, "xl")


class TestHexEncoding:
    """Fixed-length big-endian hex."""

    def test_to_hex_is_fixed_length(self):
        assert scalar_to_hex(1) == "0" * 63 + "1"
        assert len(scalar_to_hex(FIELD_PRIME - 1)) == SCALAR_HEX_LENGTH

    def test_from_hex_big_endian(self):
        assert scalar_from_hex("0" * 62 + "ff") == 255
        assert scalar_from_hex("01" + "0" * 62) == 1 << 248

    def test_from_hex_accepts_prefix(self):
        assert scalar_from_hex("0x" + "0" * 63 + "a") == 10

    def test_from_hex_inverts_to_hex(self):
        value = 0x1234567890ABCDEF
        assert scalar_from_hex(scalar_to_hex(value)) == value

    def test_from_hex_rejects_short(self):
        with pytest.raises(ValueError, match="Expected 64 hex digits"):
            scalar_from_hex("abcd")

    def test_from_hex_rejects_non_hex(self):
        with pytest.raises(ValueError, match="Malformed"):
            scalar_from_hex("zz" + "0" * 62)

    def test_from_hex_rejects_non_canonical(self):
        with pytest.raises(ValueError, match="not a canonical"):
            scalar_from_hex("f" * 64)

    def test_from_hex_rejects_modulus(self):
        encoded = FIELD_PRIME.to_bytes(32, "big").hex()
        with pytest.raises(ValueError):
            scalar_from_hex(encoded)

    def test_from_hex_rejects_non_string(self):
        with pytest.raises(ValueError):
            scalar_from_hex(b"00" * 32)


class TestParseScalar:
    """Decimal and hex CLI input."""

    def test_decimal(self):
        assert parse_scalar("42") == 42

    def test_hex(self):
        assert parse_scalar("0x2a") == 42
        assert parse_scalar(" 0X2A ") == 42

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            parse_scalar(str(FIELD_PRIME))

    def test_garbage(self):
        with pytest.raises(ValueError):
            parse_scalar("forty-two")
