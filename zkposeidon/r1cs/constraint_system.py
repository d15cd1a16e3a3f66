"""
Rank-1 constraint system with prover and verifier roles.

Both roles share one ConstraintSystem code path. Every wire value is an
Optional[int]: the prover knows all of them, the verifier none. Gadgets
therefore emit the same gates and constraints in either role, and only
the ability to evaluate differs.

Proof system:
    The backend here is a transparent R1CS argument. A proof carries every
    multiplier wire value and the openings of the committed inputs. The
    verifier checks the openings against its own commitments, every gate
    (l * r = o), every linear constraint, and that the Fiat-Shamir challenge
    matches, which binds the transcript label, the commitments, the number of
    multipliers and the full constraint topology. It is sound but it is not
    zero-knowledge.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from zkposeidon.crypto import keccak256
from zkposeidon.crypto.field import FIELD_PRIME, validate_field_element
from zkposeidon.crypto.pedersen import G1Point, PedersenGens
from zkposeidon.r1cs.errors import MissingAssignmentError, VerificationError
from zkposeidon.r1cs.linear_combination import (
    LinearCombination,
    Operand,
    Variable,
    VariableKind,
)
from zkposeidon.r1cs.transcript import Transcript
from zkposeidon.utils.logger import get_logger

logger = get_logger("r1cs")

CHALLENGE_LABEL = b"r1cs/challenge"


@dataclass
class R1CSProof:
    """Multiplier wire values, commitment openings and the bound challenge."""
    a_l: List[int]
    a_r: List[int]
    a_o: List[int]
    openings: List[Tuple[int, int]]     # (value, blinding) per commitment
    challenge: bytes

    @property
    def num_multipliers(self) -> int:
        return len(self.a_l)


class ConstraintSystem:
    """
    Gate allocation and constraint recording shared by both roles.

    Subclasses decide what a missing value means (_check_assignment) and
    how committed inputs enter the system.
    """

    role = "constraint_system"

    def __init__(self, transcript: Transcript):
        self.transcript = transcript
        self.a_l: List[Optional[int]] = []
        self.a_r: List[Optional[int]] = []
        self.a_o: List[Optional[int]] = []
        self.constraints: List[LinearCombination] = []
        self.pending_multiplier: Optional[int] = None
        self._committed_values: List[Optional[int]] = []

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    @property
    def num_multipliers(self) -> int:
        return len(self.a_l)

    @property
    def num_constraints(self) -> int:
        return len(self.constraints)

    @property
    def num_committed(self) -> int:
        return len(self._committed_values)

    def metrics(self) -> dict:
        """Gate and constraint counts."""
        return {
            "role": self.role,
            "committed": self.num_committed,
            "multipliers": self.num_multipliers,
            "constraints": self.num_constraints,
        }

    def topology_digest(self) -> bytes:
        """
        Keccak-256 of the circuit shape: counts plus every constraint in order.

        Identical for a prover and a verifier that ran the same gadgets.
        """
        parts = [
            self.num_committed.to_bytes(8, "big"),
            self.num_multipliers.to_bytes(8, "big"),
        ]
        for constraint in self.constraints:
            encoded = constraint.to_bytes()
            parts.append(len(encoded).to_bytes(4, "big"))
            parts.append(encoded)
        return keccak256(b"".join(parts))

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------

    def _value(self, var: Variable) -> Optional[int]:
        kind, index = var.kind, var.index
        if kind is VariableKind.ONE:
            return 1
        if kind is VariableKind.COMMITTED:
            return self._committed_values[index]
        if kind is VariableKind.MULTIPLIER_LEFT:
            return self.a_l[index]
        if kind is VariableKind.MULTIPLIER_RIGHT:
            return self.a_r[index]
        return self.a_o[index]

    def evaluate_lc(self, lc: Operand) -> Optional[int]:
        """Concrete value of lc if every constituent wire is known."""
        return LinearCombination.of(lc).evaluate(self._value)

    def _check_assignment(self, value: Optional[int]) -> Optional[int]:
        return None if value is None else value % FIELD_PRIME

    # -------------------------------------------------------------------------
    # Gates and constraints
    # -------------------------------------------------------------------------

    def _push_multiplier(
        self, left: Optional[int], right: Optional[int]
    ) -> Tuple[Variable, Variable, Variable]:
        left = self._check_assignment(left)
        right = self._check_assignment(right)
        output = None
        if left is not None and right is not None:
            output = (left * right) % FIELD_PRIME

        index = len(self.a_l)
        self.a_l.append(left)
        self.a_r.append(right)
        self.a_o.append(output)
        return (
            Variable(VariableKind.MULTIPLIER_LEFT, index),
            Variable(VariableKind.MULTIPLIER_RIGHT, index),
            Variable(VariableKind.MULTIPLIER_OUTPUT, index),
        )

    def multiply(
        self, left: Operand, right: Operand
    ) -> Tuple[Variable, Variable, Variable]:
        """
        Allocate a multiplication gate fed by two linear combinations.

        Returns:
            (left_var, right_var, output_var)
        """
        left = LinearCombination.of(left)
        right = LinearCombination.of(right)
        l_var, r_var, o_var = self._push_multiplier(
            self.evaluate_lc(left), self.evaluate_lc(right)
        )
        self.constrain(left - l_var)
        self.constrain(right - r_var)
        return l_var, r_var, o_var

    def allocate_multiplier(
        self, assignments: Optional[Tuple[int, int]]
    ) -> Tuple[Variable, Variable, Variable]:
        """Allocate an unconstrained multiplier from optional input values."""
        left, right = assignments if assignments is not None else (None, None)
        return self._push_multiplier(left, right)

    def allocate_single(
        self, assignment: Optional[int]
    ) -> Tuple[Variable, Optional[Variable]]:
        """
        Allocate one wire, pairing consecutive calls into one multiplier.

        The first call opens a multiplier and returns its left wire. The next
        call fills the right wire and also returns the output wire, whose
        value is the product of the two.
        """
        value = self._check_assignment(assignment)

        if self.pending_multiplier is None:
            index = len(self.a_l)
            self.a_l.append(value)
            self.a_r.append(None)
            self.a_o.append(None)
            self.pending_multiplier = index
            return Variable(VariableKind.MULTIPLIER_LEFT, index), None

        index = self.pending_multiplier
        self.a_r[index] = value
        left = self.a_l[index]
        if left is not None and value is not None:
            self.a_o[index] = (left * value) % FIELD_PRIME
        self.pending_multiplier = None
        return (
            Variable(VariableKind.MULTIPLIER_RIGHT, index),
            Variable(VariableKind.MULTIPLIER_OUTPUT, index),
        )

    def constrain(self, lc: Operand) -> None:
        """Require lc == 0."""
        self.constraints.append(LinearCombination.of(lc))

    def _bind_transcript(self) -> bytes:
        self.transcript.append_u64(b"m", self.num_committed)
        self.transcript.append_u64(b"n", self.num_multipliers)
        self.transcript.append_message(b"topology", self.topology_digest())
        return self.transcript.challenge_bytes(CHALLENGE_LABEL)


class Prover(ConstraintSystem):
    """Constraint system for the party that knows the witness."""

    role = "prover"

    def __init__(self, pc_gens: PedersenGens, transcript: Transcript):
        super().__init__(transcript)
        self.pc_gens = pc_gens
        self._blindings: List[int] = []

    def _check_assignment(self, value: Optional[int]) -> int:
        if value is None:
            raise MissingAssignmentError("prover allocated a wire without a value")
        return value % FIELD_PRIME

    def commit(self, value: int, blinding: int) -> Tuple[G1Point, Variable]:
        """
        Commit to a secret input and expose it as a circuit variable.

        Returns:
            (commitment, variable)
        """
        validate_field_element(value, "value")
        validate_field_element(blinding, "blinding")
        commitment = self.pc_gens.commit(value, blinding)
        self.transcript.append_point(b"V", commitment)

        index = len(self._committed_values)
        self._committed_values.append(value)
        self._blindings.append(blinding)
        return commitment, Variable(VariableKind.COMMITTED, index)

    def prove(self) -> R1CSProof:
        """
        Produce a proof for the constraints synthesized so far.

        Does not check satisfiability: an unsatisfied system yields a proof
        the verifier rejects.
        """
        if self.pending_multiplier is not None:
            # close a dangling half-multiplier with a zero right wire
            index = self.pending_multiplier
            self.a_r[index] = 0
            self.a_o[index] = 0
            self.pending_multiplier = None

        challenge = self._bind_transcript()
        proof = R1CSProof(
            a_l=list(self.a_l),
            a_r=list(self.a_r),
            a_o=list(self.a_o),
            openings=list(zip(self._committed_values, self._blindings)),
            challenge=challenge,
        )
        logger.debug(
            f"R1CS proof built: {self.num_multipliers} multipliers, "
            f"{self.num_constraints} constraints"
        )
        return proof


class Verifier(ConstraintSystem):
    """Constraint system for the party that only sees commitments."""

    role = "verifier"

    def __init__(self, transcript: Transcript):
        super().__init__(transcript)
        self.commitments: List[G1Point] = []

    def commit(self, commitment: G1Point) -> Variable:
        """Bring an externally committed input into the circuit."""
        self.transcript.append_point(b"V", commitment)
        self.commitments.append(commitment)
        self._committed_values.append(None)
        return Variable(VariableKind.COMMITTED, len(self._committed_values) - 1)

    def verify(self, proof: R1CSProof, pc_gens: PedersenGens) -> None:
        """
        Check a proof against the constraints synthesized so far.

        Consumes the transcript; a verifier instance checks one proof.

        Raises:
            VerificationError: On any mismatch
        """
        if len(proof.openings) != self.num_committed:
            raise VerificationError(
                f"expected {self.num_committed} openings, got {len(proof.openings)}"
            )
        n = self.num_multipliers
        if not (len(proof.a_l) == len(proof.a_r) == len(proof.a_o) == n):
            raise VerificationError(
                f"expected {n} multipliers, got {len(proof.a_l)}/{len(proof.a_r)}/{len(proof.a_o)}"
            )

        if self._bind_transcript() != proof.challenge:
            raise VerificationError("transcript challenge mismatch")

        for index, (commitment, (value, blinding)) in enumerate(zip(self.commitments, proof.openings)):
            if not pc_gens.opens_to(commitment, value, blinding):
                raise VerificationError(f"commitment {index} does not open")

        for index in range(n):
            if (proof.a_l[index] * proof.a_r[index] - proof.a_o[index]) % FIELD_PRIME:
                raise VerificationError(f"multiplier {index} does not hold")

        values = {
            VariableKind.COMMITTED: [value for value, _ in proof.openings],
            VariableKind.MULTIPLIER_LEFT: proof.a_l,
            VariableKind.MULTIPLIER_RIGHT: proof.a_r,
            VariableKind.MULTIPLIER_OUTPUT: proof.a_o,
        }

        def lookup(var: Variable) -> int:
            if var.kind is VariableKind.ONE:
                return 1
            return values[var.kind][var.index]

        for index, constraint in enumerate(self.constraints):
            if constraint.evaluate(lookup) != 0:
                raise VerificationError(f"constraint {index} is not satisfied")

        logger.debug(f"R1CS proof verified: {n} multipliers, {self.num_constraints} constraints")
