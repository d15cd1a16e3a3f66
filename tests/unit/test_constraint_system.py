"""
Tests for the constraint system and its prover/verifier roles.

Tests cover:
1. Gate allocation and wire values
2. allocate_single pairing
3. Missing assignments in the prover role
4. Proof generation and verification
5. Rejection of tampered proofs
"""

import random

import pytest

from zkposeidon.crypto.field import FIELD_PRIME
from zkposeidon.crypto.pedersen import PedersenGens
from zkposeidon.r1cs.constraint_system import ConstraintSystem, Prover, R1CSProof, Verifier
from zkposeidon.r1cs.errors import MissingAssignmentError, R1CSError, VerificationError
from zkposeidon.r1cs.linear_combination import Variable, VariableKind
from zkposeidon.r1cs.transcript import Transcript

LABEL = b"test-r1cs"


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(scope="module")
def pc_gens():
    return PedersenGens.default()


@pytest.fixture
def rng():
    return random.Random(24)


def build_square(cs, x_var):
    """x * x = y, y + 1 = 10 (so x = 3)"""
    _, _, y = cs.multiply(x_var, x_var)
    cs.constrain(y + 1 - 10)


def prove_square(pc_gens, x, blinding):
    prover = Prover(pc_gens, Transcript(LABEL))
    commitment, var = prover.commit(x, blinding)
    build_square(prover, var)
    return commitment, prover.prove()


def verify_square(pc_gens, commitment, proof, label=LABEL):
    verifier = Verifier(Transcript(label))
    var = verifier.commit(commitment)
    build_square(verifier, var)
    verifier.verify(proof, pc_gens)


# =============================================================================
# Allocation
# =============================================================================


class TestAllocation:
    """Gate allocation bookkeeping."""

    def test_multiply_records_product(self, pc_gens):
        prover = Prover(pc_gens, Transcript(LABEL))
        l, r, o = prover.multiply(Variable.one() * 3, Variable.one() * 5)
        assert prover.evaluate_lc(o) == 15
        assert (l.kind, r.kind, o.kind) == (
            VariableKind.MULTIPLIER_LEFT,
            VariableKind.MULTIPLIER_RIGHT,
            VariableKind.MULTIPLIER_OUTPUT,
        )
        assert prover.num_multipliers == 1

    def test_multiply_adds_two_wiring_constraints(self, pc_gens):
        prover = Prover(pc_gens, Transcript(LABEL))
        prover.multiply(Variable.one() * 3, Variable.one() * 5)
        assert prover.num_constraints == 2

    def test_allocate_multiplier(self, pc_gens):
        prover = Prover(pc_gens, Transcript(LABEL))
        _, _, o = prover.allocate_multiplier((4, 6))
        assert prover.evaluate_lc(o) == 24
        assert prover.num_constraints == 0

    def test_allocate_single_pairs_calls(self, pc_gens):
        prover = Prover(pc_gens, Transcript(LABEL))
        left, none = prover.allocate_single(6)
        assert none is None
        assert prover.pending_multiplier == 0

        right, out = prover.allocate_single(7)
        assert left.index == right.index == out.index == 0
        assert right.kind is VariableKind.MULTIPLIER_RIGHT
        assert prover.evaluate_lc(out) == 42
        assert prover.pending_multiplier is None
        assert prover.num_multipliers == 1

    def test_values_reduced(self, pc_gens):
        prover = Prover(pc_gens, Transcript(LABEL))
        _, _, o = prover.allocate_multiplier((FIELD_PRIME + 2, 3))
        assert prover.evaluate_lc(o) == 6

    def test_metrics(self, pc_gens):
        prover = Prover(pc_gens, Transcript(LABEL))
        prover.commit(1, 1)
        prover.multiply(Variable.one(), Variable.one())
        assert prover.metrics() == {
            "role": "prover",
            "committed": 1,
            "multipliers": 1,
            "constraints": 2,
        }


class TestRoles:
    """Prover needs values, verifier does not."""

    def test_prover_rejects_missing_assignment(self, pc_gens):
        prover = Prover(pc_gens, Transcript(LABEL))
        with pytest.raises(MissingAssignmentError):
            prover.allocate_single(None)

    def test_prover_rejects_missing_multiplier_inputs(self, pc_gens):
        prover = Prover(pc_gens, Transcript(LABEL))
        with pytest.raises(MissingAssignmentError):
            prover.allocate_multiplier(None)

    def test_missing_assignment_is_r1cs_error(self):
        assert issubclass(MissingAssignmentError, R1CSError)

    def test_verifier_accepts_missing_assignment(self):
        verifier = Verifier(Transcript(LABEL))
        var, _ = verifier.allocate_single(None)
        assert verifier.evaluate_lc(var) is None

    def test_verifier_multiply_unknown(self, pc_gens):
        verifier = Verifier(Transcript(LABEL))
        var = verifier.commit(pc_gens.commit(3, 1))
        _, _, o = verifier.multiply(var, var)
        assert verifier.evaluate_lc(o) is None

    def test_base_class_tolerates_missing(self):
        cs = ConstraintSystem(Transcript(LABEL))
        _, _, o = cs.allocate_multiplier(None)
        assert cs.evaluate_lc(o) is None

    def test_prover_commit_validates(self, pc_gens):
        prover = Prover(pc_gens, Transcript(LABEL))
        with pytest.raises(ValueError):
            prover.commit(FIELD_PRIME, 0)
        with pytest.raises(ValueError):
            prover.commit(1, -1)

    def test_same_gadget_same_topology(self, pc_gens):
        prover = Prover(pc_gens, Transcript(LABEL))
        _, var = prover.commit(3, 5)
        build_square(prover, var)

        verifier = Verifier(Transcript(LABEL))
        build_square(verifier, verifier.commit(pc_gens.commit(3, 5)))

        assert prover.topology_digest() == verifier.topology_digest()
        assert prover.num_multipliers == verifier.num_multipliers
        assert prover.num_constraints == verifier.num_constraints


# =============================================================================
# Proving and verification
# =============================================================================


class TestProveVerify:
    """End-to-end proofs on a toy circuit."""

    def test_valid_proof_verifies(self, pc_gens, rng):
        commitment, proof = prove_square(pc_gens, 3, rng.randrange(FIELD_PRIME))
        verify_square(pc_gens, commitment, proof)

    def test_proof_shape(self, pc_gens):
        _, proof = prove_square(pc_gens, 3, 11)
        assert isinstance(proof, R1CSProof)
        assert proof.num_multipliers == 1
        assert proof.openings == [(3, 11)]
        assert len(proof.challenge) == 32

    def test_unsatisfied_witness_is_rejected(self, pc_gens):
        # 4 * 4 + 1 != 10: the prover still emits a proof
        commitment, proof = prove_square(pc_gens, 4, 11)
        with pytest.raises(VerificationError, match="constraint"):
            verify_square(pc_gens, commitment, proof)

    def test_wrong_label_is_rejected(self, pc_gens):
        commitment, proof = prove_square(pc_gens, 3, 11)
        with pytest.raises(VerificationError, match="challenge"):
            verify_square(pc_gens, commitment, proof, label=b"other")

    def test_wrong_commitment_is_rejected(self, pc_gens):
        _, proof = prove_square(pc_gens, 3, 11)
        with pytest.raises(VerificationError):
            verify_square(pc_gens, pc_gens.commit(3, 12), proof)

    def test_tampered_gate_is_rejected(self, pc_gens):
        commitment, proof = prove_square(pc_gens, 3, 11)
        proof.a_o[0] = (proof.a_o[0] + 1) % FIELD_PRIME
        with pytest.raises(VerificationError, match="multiplier 0"):
            verify_square(pc_gens, commitment, proof)

    def test_consistent_forgery_is_rejected(self, pc_gens):
        # a_l = a_r = 4, a_o = 16 satisfies the gate but not the wiring
        commitment, proof = prove_square(pc_gens, 3, 11)
        proof.a_l[0], proof.a_r[0], proof.a_o[0] = 4, 4, 16
        with pytest.raises(VerificationError, match="constraint"):
            verify_square(pc_gens, commitment, proof)

    def test_wrong_multiplier_count_is_rejected(self, pc_gens):
        commitment, proof = prove_square(pc_gens, 3, 11)
        proof.a_l.append(0)
        with pytest.raises(VerificationError, match="multipliers"):
            verify_square(pc_gens, commitment, proof)

    def test_wrong_opening_count_is_rejected(self, pc_gens):
        commitment, proof = prove_square(pc_gens, 3, 11)
        proof.openings.append((0, 0))
        with pytest.raises(VerificationError, match="openings"):
            verify_square(pc_gens, commitment, proof)

    def test_dangling_single_is_closed(self, pc_gens):
        prover = Prover(pc_gens, Transcript(LABEL))
        prover.allocate_single(5)
        proof = prover.prove()
        assert proof.a_r == [0]
        assert proof.a_o == [0]

        verifier = Verifier(Transcript(LABEL))
        verifier.allocate_single(None)
        verifier.verify(proof, pc_gens)
