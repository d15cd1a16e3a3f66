"""
Scalar field arithmetic for zkposeidon.

Field elements are plain Python integers kept in [0, FIELD_PRIME). The
field is the BN254 (alt_bn128) scalar field, i.e. the order of the G1
group used for Pedersen commitments, so committed values and circuit
wires live in the same field.
"""

import random
import secrets
import string
from typing import Any, Optional

from py_ecc.optimized_bn128 import curve_order

# BN254 scalar field prime
FIELD_PRIME = curve_order

# Fixed width of a hex-encoded field element (32 bytes, big-endian)
SCALAR_HEX_LENGTH = 64


def add(a: int, b: int) -> int:
    """Field addition."""
    return (a + b) % FIELD_PRIME


def sub(a: int, b: int) -> int:
    """Field subtraction."""
    return (a - b) % FIELD_PRIME


def mul(a: int, b: int) -> int:
    """Field multiplication."""
    return (a * b) % FIELD_PRIME


def neg(a: int) -> int:
    """Additive inverse."""
    return (-a) % FIELD_PRIME


def invert(a: int) -> int:
    """
    Multiplicative inverse via Fermat's little theorem.

    Raises:
        ZeroDivisionError: If a is the additive identity
    """
    a %= FIELD_PRIME
    if a == 0:
        raise ZeroDivisionError("zero has no multiplicative inverse")
    return pow(a, FIELD_PRIME - 2, FIELD_PRIME)


def random_scalar(rng: Optional[random.Random] = None) -> int:
    """
    Sample a uniformly random field element.

    Uses the OS CSPRNG unless a seeded generator is supplied (tests).
    """
    if rng is None:
        return secrets.randbelow(FIELD_PRIME)
    return rng.randrange(FIELD_PRIME)


def validate_field_element(value: Any, name: str = "field_element") -> int:
    """
    Check that value is a canonical field element.

    Returns:
        The value unchanged

    Raises:
        ValueError: If value is not an int in [0, FIELD_PRIME)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be int, got {type(value).__name__}")
    if not (0 <= value < FIELD_PRIME):
        raise ValueError(f"{name} out of field range: {value}")
    return value


def scalar_from_hex(hex_str: str) -> int:
    """
    Decode a fixed-length big-endian hex string into a field element.

    Accepts an optional 0x prefix. The encoding must be canonical.

    Raises:
        ValueError: If the string is malformed or encodes a value >= FIELD_PRIME
    """
    if not isinstance(hex_str, str):
        raise ValueError(f"Expected hex string, got {type(hex_str).__name__}")
    digits = hex_str[2:] if hex_str[:2] in ("0x", "0X") else hex_str
    if len(digits) != SCALAR_HEX_LENGTH:
        raise ValueError(
            f"Expected {SCALAR_HEX_LENGTH} hex digits, got {len(digits)}: {hex_str!r}"
        )
    if any(c not in string.hexdigits for c in digits):
        raise ValueError(f"Malformed hex constant {hex_str!r}")
    value = int.from_bytes(bytes.fromhex(digits), byteorder="big")
    if value >= FIELD_PRIME:
        raise ValueError(f"Hex constant {hex_str!r} is not a canonical field element")
    return value


def scalar_to_hex(value: int) -> str:
    """Encode a field element as 64 big-endian hex digits."""
    return (value % FIELD_PRIME).to_bytes(32, byteorder="big").hex()


def parse_scalar(text: str) -> int:
    """Parse a decimal or 0x-prefixed hex string (CLI input)."""
    text = text.strip()
    value = int(text, 16) if text[:2] in ("0x", "0X") else int(text)
    return validate_field_element(value, "input")
