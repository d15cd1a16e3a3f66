"""Rank-1 constraint system: variables, prover/verifier roles, gadgets"""
from zkposeidon.r1cs.errors import (
    R1CSError,
    GadgetError,
    MissingAssignmentError,
    VerificationError,
)
from zkposeidon.r1cs.linear_combination import (
    Variable,
    VariableKind,
    LinearCombination,
    weighted_sum,
)
from zkposeidon.r1cs.transcript import Transcript
from zkposeidon.r1cs.constraint_system import (
    ConstraintSystem,
    Prover,
    Verifier,
    R1CSProof,
)
from zkposeidon.r1cs.gadgets import (
    AllocatedScalar,
    constrain_lc_with_scalar,
    is_zero_gadget,
    is_nonzero_gadget,
)

__all__ = [
    "R1CSError",
    "GadgetError",
    "MissingAssignmentError",
    "VerificationError",
    "Variable",
    "VariableKind",
    "LinearCombination",
    "weighted_sum",
    "Transcript",
    "ConstraintSystem",
    "Prover",
    "Verifier",
    "R1CSProof",
    "AllocatedScalar",
    "constrain_lc_with_scalar",
    "is_zero_gadget",
    "is_nonzero_gadget",
]
