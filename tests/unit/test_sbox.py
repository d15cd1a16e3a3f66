"""
Tests for S-box evaluation and synthesis.
"""

import pytest

from zkposeidon.crypto.field import FIELD_PRIME, invert
from zkposeidon.crypto.pedersen import PedersenGens
from zkposeidon.poseidon.sbox import SboxType, synthesize_cube_sbox, synthesize_inverse_sbox
from zkposeidon.r1cs.constraint_system import Prover, Verifier
from zkposeidon.r1cs.errors import GadgetError, VerificationError
from zkposeidon.r1cs.transcript import Transcript

LABEL = b"test-sbox"


@pytest.fixture(scope="module")
def pc_gens():
    return PedersenGens.default()


@pytest.fixture
def prover(pc_gens):
    return Prover(pc_gens, Transcript(LABEL))


def commit(prover, value):
    _, var = prover.commit(value, 3)
    return var.to_lc()


def satisfied(cs):
    return all(cs.evaluate_lc(c) == 0 for c in cs.constraints)


class TestNative:
    """apply_sbox"""

    def test_cube(self):
        assert SboxType.CUBE.apply_sbox(3) == 27
        assert SboxType.CUBE.apply_sbox(0) == 0

    def test_cube_reduces(self):
        assert SboxType.CUBE.apply_sbox(FIELD_PRIME - 1) == FIELD_PRIME - 1

    def test_inverse(self):
        assert SboxType.INVERSE.apply_sbox(2) == invert(2)
        assert (SboxType.INVERSE.apply_sbox(12345) * 12345) % FIELD_PRIME == 1

    def test_inverse_of_zero_raises(self):
        with pytest.raises(ZeroDivisionError):
            SboxType.INVERSE.apply_sbox(0)

    def test_values(self):
        assert SboxType("cube") is SboxType.CUBE
        assert SboxType("inverse") is SboxType.INVERSE


class TestCubeSynthesis:
    """x^3 in two gates."""

    def test_output_value(self, prover):
        out = synthesize_cube_sbox(prover, commit(prover, 4), 1)
        assert prover.evaluate_lc(out) == 125
        assert satisfied(prover)

    def test_gate_count(self, prover):
        SboxType.CUBE.synthesize_sbox(prover, commit(prover, 4), 1)
        assert prover.num_multipliers == 2
        assert prover.num_constraints == 4

    def test_matches_native(self, prover):
        x, key = 987654321, 123456789
        out = SboxType.CUBE.synthesize_sbox(prover, commit(prover, x), key)
        assert prover.evaluate_lc(out) == SboxType.CUBE.apply_sbox(x + key)


class TestInverseSynthesis:
    """Witnessed inverse with non-zero proof."""

    def test_output_value(self, prover):
        out = synthesize_inverse_sbox(prover, commit(prover, 4), 1)
        assert prover.evaluate_lc(out) == invert(5)
        assert satisfied(prover)

    def test_gate_count(self, prover):
        SboxType.INVERSE.synthesize_sbox(prover, commit(prover, 4), 1)
        assert prover.num_multipliers == 2
        assert prover.num_constraints == 5

    def test_zero_input_rejected(self, prover):
        with pytest.raises(GadgetError):
            synthesize_inverse_sbox(prover, commit(prover, FIELD_PRIME - 1), 1)

    def test_zero_input_without_round_key(self, prover):
        with pytest.raises(GadgetError):
            SboxType.INVERSE.synthesize_sbox(prover, commit(prover, 0), 0)

    def test_verifier_builds_same_shape(self, pc_gens, prover):
        SboxType.INVERSE.synthesize_sbox(prover, commit(prover, 4), 1)

        verifier = Verifier(Transcript(LABEL))
        var = verifier.commit(pc_gens.commit(4, 3))
        SboxType.INVERSE.synthesize_sbox(verifier, var.to_lc(), 1)

        assert verifier.topology_digest() == prover.topology_digest()

    def test_output_tied_to_input(self, pc_gens, prover):
        # swap in a consistent inverse pair for a different value
        SboxType.INVERSE.synthesize_sbox(prover, commit(prover, 4), 1)
        proof = prover.prove()
        for index in range(2):
            proof.a_l[index] = 7
            proof.a_r[index] = invert(7)
            proof.a_o[index] = 1

        verifier = Verifier(Transcript(LABEL))
        var = verifier.commit(pc_gens.commit(4, 3))
        SboxType.INVERSE.synthesize_sbox(verifier, var.to_lc(), 1)
        with pytest.raises(VerificationError, match="constraint"):
            verifier.verify(proof, pc_gens)
