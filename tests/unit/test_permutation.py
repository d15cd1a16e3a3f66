"""
Tests for the native Poseidon permutation and 2:1 hash.

Small hand-built parameter sets pin down round order, key consumption,
mixing orientation and the partial S-box position; the bundled width-6
instance is exercised for the properties a hash must have.
"""

import random

import pytest

from zkposeidon.crypto.field import FIELD_PRIME, invert
from zkposeidon.poseidon.params import PoseidonParams, construct_params
from zkposeidon.poseidon.permutation import (
    HASH_OUTPUT_INDEX,
    hash2_input_state,
    partial_sbox_position,
    poseidon_hash_2,
    poseidon_permutation,
)
from zkposeidon.poseidon.sbox import SboxType

IDENTITY_2 = ((1, 0), (0, 1))


def toy_params(width=2, fb=0, fe=0, partial=0, round_keys=None, mds=IDENTITY_2):
    total = fb + fe + partial
    return PoseidonParams(
        width=width,
        full_rounds_beginning=fb,
        full_rounds_end=fe,
        partial_rounds=partial,
        round_keys=tuple(round_keys if round_keys is not None else [0] * (total * width)),
        mds_matrix=mds,
    )


@pytest.fixture(scope="module")
def params():
    return construct_params(6, 4, 4, 140)


@pytest.fixture
def rng():
    return random.Random(24)


class TestRoundStructure:
    """Hand-computed toy instances."""

    def test_no_rounds_is_identity(self):
        assert poseidon_permutation([2, 3], toy_params(), SboxType.CUBE) == [2, 3]

    def test_full_round(self):
        # [2, 3] + [1, 2] -> [3, 5] -> cube -> [27, 125] -> [[1, 1], [0, 1]]
        params = toy_params(fb=1, round_keys=[1, 2], mds=((1, 1), (0, 1)))
        assert poseidon_permutation([2, 3], params, SboxType.CUBE) == [152, 125]

    def test_mixing_orientation(self):
        # next[i] = sum_j state[j] * M[i][j]
        params = toy_params(fb=1, mds=((1, 2), (3, 4)))
        assert poseidon_permutation([1, 2], params, SboxType.CUBE) == [17, 35]

    def test_round_keys_consumed_round_major(self):
        # round 0 uses keys [1, 2], round 1 uses [3, 4]
        params = toy_params(fb=2, round_keys=[1, 2, 3, 4])
        assert poseidon_permutation([0, 0], params, SboxType.CUBE) == [64, 1728]

    def test_full_rounds_end_run_last(self):
        params = toy_params(fb=1, fe=1, round_keys=[1, 2, 3, 4])
        assert poseidon_permutation([0, 0], params, SboxType.CUBE) == [64, 1728]

    def test_partial_round_last_position(self):
        params = toy_params(partial=1)
        assert poseidon_permutation([2, 3], params, SboxType.CUBE) == [2, 27]

    def test_partial_round_adds_keys_everywhere(self):
        params = toy_params(partial=1, round_keys=[5, 1])
        assert poseidon_permutation([2, 3], params, SboxType.CUBE) == [7, 64]

    def test_partial_round_inverse(self):
        params = toy_params(partial=1)
        assert poseidon_permutation([2, 3], params, SboxType.INVERSE) == [2, invert(3)]

    def test_partial_position_is_last(self):
        assert partial_sbox_position(6) == 5
        assert partial_sbox_position(2) == 1

    def test_inverse_zero_raises(self):
        params = toy_params(fb=1)
        with pytest.raises(ZeroDivisionError):
            poseidon_permutation([0, 1], params, SboxType.INVERSE)

    def test_partial_rounds_skip_zero_for_inverse(self):
        # position 0 is zero but never meets the S-box in partial rounds
        params = toy_params(partial=2)
        assert poseidon_permutation([0, 2], params, SboxType.INVERSE) == [0, 2]


class TestInputValidation:
    """Width and range checks."""

    def test_wrong_width(self, params):
        with pytest.raises(ValueError, match="Expected 6 inputs"):
            poseidon_permutation([1, 2, 3], params, SboxType.CUBE)

    def test_out_of_range(self, params):
        with pytest.raises(ValueError, match="input 2"):
            poseidon_permutation([0, 0, FIELD_PRIME, 0, 0, 0], params, SboxType.CUBE)

    def test_negative(self, params):
        with pytest.raises(ValueError):
            poseidon_permutation([0, 0, 0, 0, 0, -1], params, SboxType.CUBE)

    def test_input_not_mutated(self, params):
        state = [1, 2, 3, 4, 5, 6]
        poseidon_permutation(state, params, SboxType.CUBE)
        assert state == [1, 2, 3, 4, 5, 6]


class TestBundledInstance:
    """Width 6, (4, 4) full rounds, 140 partial rounds."""

    def test_output_shape(self, params):
        out = poseidon_permutation([0] * 6, params, SboxType.CUBE)
        assert len(out) == 6
        assert all(0 <= x < FIELD_PRIME for x in out)

    def test_deterministic(self, params, rng):
        state = [rng.randrange(FIELD_PRIME) for _ in range(6)]
        assert poseidon_permutation(state, params, SboxType.CUBE) == poseidon_permutation(
            state, params, SboxType.CUBE
        )

    def test_sboxes_differ(self, params):
        state = [1, 2, 3, 4, 5, 6]
        assert poseidon_permutation(state, params, SboxType.CUBE) != poseidon_permutation(
            state, params, SboxType.INVERSE
        )

    def test_single_element_change_diffuses(self, params):
        a = poseidon_permutation([1, 2, 3, 4, 5, 6], params, SboxType.CUBE)
        b = poseidon_permutation([1, 2, 3, 4, 5, 7], params, SboxType.CUBE)
        assert all(x != y for x, y in zip(a, b))


class TestHash2:
    """2:1 hash layout and output position."""

    def test_input_layout(self):
        assert hash2_input_state(7, 9, 6) == [0, 7, 9, 0, 0, 0]
        assert hash2_input_state(7, 9, 4) == [0, 7, 9, 0]

    def test_rejects_narrow_width(self):
        with pytest.raises(ValueError, match="width >= 4"):
            hash2_input_state(1, 2, 3)

    def test_output_is_position_one(self, params):
        state = poseidon_permutation([0, 11, 22, 0, 0, 0], params, SboxType.CUBE)
        assert HASH_OUTPUT_INDEX == 1
        assert poseidon_hash_2(11, 22, params, SboxType.CUBE) == state[1]

    def test_not_symmetric(self, params):
        assert poseidon_hash_2(1, 2, params, SboxType.CUBE) != poseidon_hash_2(2, 1, params, SboxType.CUBE)

    def test_inverse_sbox_hash(self, params, rng):
        xl, xr = rng.randrange(1, FIELD_PRIME), rng.randrange(1, FIELD_PRIME)
        out = poseidon_hash_2(xl, xr, params, SboxType.INVERSE)
        assert 0 <= out < FIELD_PRIME

    def test_rejects_out_of_range(self, params):
        with pytest.raises(ValueError):
            poseidon_hash_2(FIELD_PRIME, 0, params, SboxType.CUBE)
