"""Proof orchestration for Poseidon circuits"""
from zkposeidon.core.prover.prover import (
    HashProof,
    PermutationProof,
    PoseidonProver,
)

__all__ = [
    "HashProof",
    "PermutationProof",
    "PoseidonProver",
]
