"""
Cryptographic primitives for zkposeidon.

This module provides:
- Hashing helpers (SHA-256, Keccak-256) used for transcripts and generators
- Scalar field arithmetic over the BN254 scalar field
- Pedersen commitments on BN254 G1 (committed circuit inputs)

Design Notes:
-------------
Field elements are plain ints in [0, FIELD_PRIME), the same representation
the native Poseidon engine and the constraint system use. The field is the
order of the commitment group so a committed value is directly a circuit wire.
"""

import hashlib

from Crypto.Hash import keccak


# =============================================================================
# Hashing
# =============================================================================


def sha256(data: bytes) -> bytes:
    """Compute SHA-256 hash."""
    return hashlib.sha256(data).digest()


def keccak256(data: bytes) -> bytes:
    """
    Compute Keccak-256 hash (Ethereum-style).

    Used for: transcript state, circuit topology digests, hash-to-curve.
    """
    k = keccak.new(digest_bits=256)
    k.update(data)
    return k.digest()


# =============================================================================
# Utility Functions
# =============================================================================


def bytes_to_hex(data: bytes) -> str:
    """Convert bytes to hex string with 0x prefix."""
    return "0x" + data.hex()


def hex_to_bytes(hex_str: str) -> bytes:
    """Convert hex string (with or without 0x prefix) to bytes."""
    if hex_str.startswith("0x") or hex_str.startswith("0X"):
        hex_str = hex_str[2:]
    return bytes.fromhex(hex_str)


# =============================================================================
# Field and Commitments
# =============================================================================

from zkposeidon.crypto.field import (
    FIELD_PRIME,
    SCALAR_HEX_LENGTH,
    add,
    sub,
    mul,
    neg,
    invert,
    random_scalar,
    validate_field_element,
    scalar_from_hex,
    scalar_to_hex,
    parse_scalar,
)
from zkposeidon.crypto.pedersen import (
    G1Point,
    PedersenGens,
    hash_to_g1,
    point_to_bytes,
)
