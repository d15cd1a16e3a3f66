"""
Fiat-Shamir transcript.

A Merlin-style transcript: every append folds a length-prefixed label and
message into a running Keccak-256 state, so prover and verifier derive the
same challenge only if they absorbed the same data in the same order.
"""

from zkposeidon.crypto import keccak256
from zkposeidon.crypto.pedersen import G1Point, point_to_bytes

TRANSCRIPT_DOMAIN = b"zkposeidon/transcript/v1"


def _frame(data: bytes) -> bytes:
    return len(data).to_bytes(4, byteorder="big") + data


class Transcript:
    """Running hash of everything both parties have agreed on."""

    def __init__(self, label: bytes):
        if isinstance(label, str):
            label = label.encode()
        self._state = keccak256(_frame(TRANSCRIPT_DOMAIN) + _frame(label))

    def append_message(self, label: bytes, message: bytes) -> None:
        self._state = keccak256(self._state + b"\x00" + _frame(label) + _frame(message))

    def append_u64(self, label: bytes, value: int) -> None:
        self.append_message(label, value.to_bytes(8, byteorder="big"))

    def append_scalar(self, label: bytes, value: int) -> None:
        self.append_message(label, value.to_bytes(32, byteorder="big"))

    def append_point(self, label: bytes, point: G1Point) -> None:
        self.append_message(label, point_to_bytes(point))

    def challenge_bytes(self, label: bytes) -> bytes:
        """
        Derive a 32-byte challenge and ratchet the state forward.
        """
        challenge = keccak256(self._state + b"\x01" + _frame(label))
        self._state = keccak256(self._state + b"\x02" + challenge)
        return challenge
