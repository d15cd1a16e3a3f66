"""
Tests for Poseidon parameter construction and the constant tables.
"""

import hashlib
import logging

import pytest

from zkposeidon.crypto.field import FIELD_PRIME, scalar_from_hex
from zkposeidon.poseidon.constants import MDS_ENTRIES, ROUND_CONSTS
from zkposeidon.poseidon.params import (
    PoseidonParams,
    PoseidonParamsError,
    construct_params,
    load_mds_matrix,
    load_round_keys,
)
from zkposeidon.r1cs.errors import R1CSError


def _derived(label: str) -> int:
    digest = hashlib.sha256(label.encode()).digest()
    return int.from_bytes(digest, "big") & ((1 << 252) - 1)


class TestConstantTables:
    """Bundled hex tables."""

    def test_table_sizes(self):
        assert len(ROUND_CONSTS) == 900
        assert len(MDS_ENTRIES) == 6
        assert all(len(row) == 6 for row in MDS_ENTRIES)

    def test_entries_are_canonical(self):
        for entry in ROUND_CONSTS:
            assert 0 <= scalar_from_hex(entry) < FIELD_PRIME
        for row in MDS_ENTRIES:
            for entry in row:
                assert 0 <= scalar_from_hex(entry) < FIELD_PRIME

    @pytest.mark.parametrize("index", [0, 1, 449, 899])
    def test_round_constant_derivation(self, index):
        assert scalar_from_hex(ROUND_CONSTS[index]) == _derived(f"zkposeidon/round_key/{index}")

    @pytest.mark.parametrize("i,j", [(0, 0), (2, 4), (5, 3)])
    def test_mds_derivation(self, i, j):
        assert scalar_from_hex(MDS_ENTRIES[i][j]) == _derived(f"zkposeidon/mds/{i}/{j}")


class TestLoaders:
    """Decoding the tables."""

    def test_load_round_keys_prefix(self):
        keys = load_round_keys(6, 2)
        assert len(keys) == 12
        assert keys[0] == scalar_from_hex(ROUND_CONSTS[0])
        assert keys[11] == scalar_from_hex(ROUND_CONSTS[11])

    def test_load_round_keys_exact_capacity(self):
        assert len(load_round_keys(6, 150)) == 900

    def test_not_enough_round_constants(self):
        with pytest.raises(PoseidonParamsError, match="Not enough round constants, need 906, found 900"):
            load_round_keys(6, 151)

    def test_malformed_round_constant(self):
        with pytest.raises(PoseidonParamsError, match="malformed"):
            load_round_keys(1, 1, table=("xyz",))

    def test_load_mds_matrix(self):
        matrix = load_mds_matrix(6)
        assert len(matrix) == 6
        assert matrix[5][3] == scalar_from_hex(MDS_ENTRIES[5][3])

    def test_mds_width_mismatch(self):
        with pytest.raises(PoseidonParamsError, match="Incorrect width"):
            load_mds_matrix(5)

    def test_mds_ragged_row(self):
        table = (("0" * 64, "0" * 64), ("0" * 64,))
        with pytest.raises(PoseidonParamsError, match="row 1"):
            load_mds_matrix(2, table=table)

    def test_mds_malformed_entry(self):
        table = (("0" * 64, "0" * 64), ("0" * 64, "g" * 64))
        with pytest.raises(PoseidonParamsError, match="malformed"):
            load_mds_matrix(2, table=table)


class TestPoseidonParams:
    """PoseidonParams.new and construct_params."""

    def test_default_instance(self):
        params = construct_params(6, 4, 4, 140)
        assert params.width == 6
        assert params.total_rounds == 148
        assert len(params.round_keys) == 888
        assert len(params.mds_matrix) == 6

    def test_frozen(self):
        params = construct_params(6, 1, 1, 1)
        with pytest.raises(AttributeError):
            params.width = 5

    def test_custom_tables(self):
        one = "0" * 63 + "1"
        params = PoseidonParams.new(
            1, 1, 0, 1,
            round_constants=(one, one),
            mds_entries=((one,),),
        )
        assert params.round_keys == (1, 1)
        assert params.mds_matrix == ((1,),)

    def test_too_many_rounds(self):
        with pytest.raises(PoseidonParamsError):
            construct_params(6, 8, 8, 140)

    def test_wrong_width(self):
        with pytest.raises(PoseidonParamsError, match="Incorrect width"):
            construct_params(4, 4, 4, 56)

    def test_non_positive_width(self):
        with pytest.raises(PoseidonParamsError, match="Width"):
            construct_params(0, 1, 1, 1)

    def test_negative_rounds(self):
        with pytest.raises(PoseidonParamsError, match="partial_rounds"):
            construct_params(6, 4, 4, -1)

    def test_zero_rounds_allowed(self):
        params = construct_params(6, 0, 0, 0)
        assert params.total_rounds == 0
        assert params.round_keys == ()

    def test_params_error_is_not_r1cs_error(self):
        assert not issubclass(PoseidonParamsError, R1CSError)

    def test_params_error_logged_critical(self, caplog):
        with caplog.at_level(logging.CRITICAL, logger="zkposeidon.poseidon"):
            with pytest.raises(PoseidonParamsError):
                construct_params(6, 100, 100, 100)
        assert any(r.levelno == logging.CRITICAL for r in caplog.records)
