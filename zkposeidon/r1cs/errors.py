"""
Errors raised while building or checking constraint systems.

These are per-invocation failures: a prover or verifier may reject one
input without tearing the process down. Parameter misconfiguration is a
different tier, see zkposeidon.poseidon.params.PoseidonParamsError.
"""


class R1CSError(Exception):
    """Base class for constraint-system errors."""


class GadgetError(R1CSError):
    """A gadget could not be synthesized for the given inputs."""


class MissingAssignmentError(R1CSError):
    """A prover was asked to allocate a wire without a concrete value."""


class VerificationError(R1CSError):
    """A proof did not satisfy the verifier's constraint system."""
