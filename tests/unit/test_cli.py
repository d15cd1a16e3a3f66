"""
Tests for the click command line interface.
"""

import os

import pytest
from click.testing import CliRunner

from zkposeidon.cli.main import cli
from zkposeidon.core.config import ENV_PREFIX
from zkposeidon.poseidon.params import construct_params
from zkposeidon.poseidon.permutation import poseidon_hash_2, poseidon_permutation
from zkposeidon.poseidon.sbox import SboxType
from zkposeidon.utils.logger import ZKLogger

SHORT = ["--full-rounds-beginning", "1", "--full-rounds-end", "1", "--partial-rounds", "4"]


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    yield
    ZKLogger.reset()


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(scope="module")
def params():
    return construct_params(6, 4, 4, 140)


class TestParamsCommand:
    """zkposeidon params"""

    def test_defaults(self, runner):
        result = runner.invoke(cli, ["params"])
        assert result.exit_code == 0, result.output
        assert "Width: 6" in result.output
        assert "4 full + 140 partial + 4 full = 148" in result.output
        assert "S-box: cube" in result.output
        assert "888 of 900" in result.output

    def test_overrides(self, runner):
        result = runner.invoke(cli, ["--sbox", "inverse", "--partial-rounds", "10", "params"])
        assert result.exit_code == 0, result.output
        assert "S-box: inverse" in result.output
        assert "10 partial" in result.output

    def test_env_file(self, runner, tmp_path):
        env_file = tmp_path / "zk.env"
        env_file.write_text("ZKPOSEIDON_PARTIAL_ROUNDS=12\n")
        result = runner.invoke(cli, ["--env-file", str(env_file), "params"])
        assert result.exit_code == 0, result.output
        assert "12 partial" in result.output

    def test_too_many_rounds(self, runner):
        result = runner.invoke(cli, ["--partial-rounds", "500", "params"])
        assert result.exit_code == 1
        assert "Invalid Poseidon parameters" in result.output

    def test_invalid_config(self, runner):
        result = runner.invoke(cli, ["--partial-rounds", "-1", "params"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestHashCommands:
    """zkposeidon hash / permute"""

    def test_hash(self, runner, params):
        result = runner.invoke(cli, ["hash", "1", "2"])
        assert result.exit_code == 0, result.output
        expected = poseidon_hash_2(1, 2, params, SboxType.CUBE)
        assert result.output.strip().splitlines()[-1] == str(expected)

    def test_hash_hex_input_and_output(self, runner, params):
        result = runner.invoke(cli, ["hash", "0x1", "0x2", "--hex"])
        assert result.exit_code == 0, result.output
        expected = poseidon_hash_2(1, 2, params, SboxType.CUBE)
        assert result.output.strip().splitlines()[-1] == "0x" + format(expected, "064x")

    def test_hash_inverse(self, runner, params):
        result = runner.invoke(cli, ["--sbox", "inverse", "hash", "5", "6"])
        assert result.exit_code == 0, result.output
        expected = poseidon_hash_2(5, 6, params, SboxType.INVERSE)
        assert str(expected) in result.output

    def test_hash_rejects_bad_scalar(self, runner):
        result = runner.invoke(cli, ["hash", "abc", "2"])
        assert result.exit_code == 2
        assert "not a field element" in result.output

    def test_permute(self, runner, params):
        result = runner.invoke(cli, ["permute", "0", "1", "2", "3", "4", "5"])
        assert result.exit_code == 0, result.output
        expected = poseidon_permutation([0, 1, 2, 3, 4, 5], params, SboxType.CUBE)
        for i, value in enumerate(expected):
            assert f"[{i}] {value}" in result.output

    def test_permute_wrong_count(self, runner):
        result = runner.invoke(cli, ["permute", "1", "2"])
        assert result.exit_code == 2
        assert "Expected 6 elements" in result.output


class TestProveCommand:
    """zkposeidon prove-hash"""

    def test_prove_and_verify(self, runner):
        result = runner.invoke(cli, SHORT + ["prove-hash", "1", "2", "--seed", "24"])
        assert result.exit_code == 0, result.output
        assert "Multipliers: 32" in result.output
        assert "Constraints: 65" in result.output
        assert "Proof verified" in result.output

    def test_tamper_rejected(self, runner):
        result = runner.invoke(cli, SHORT + ["prove-hash", "1", "2", "--tamper"])
        assert result.exit_code == 0, result.output
        assert "Tampered proof rejected" in result.output

    def test_inverse(self, runner):
        result = runner.invoke(cli, SHORT + ["--sbox", "inverse", "prove-hash", "7", "8"])
        assert result.exit_code == 0, result.output
        assert "Constraints: 81" in result.output
        assert "Proof verified" in result.output


class TestBenchCommand:
    """zkposeidon bench"""

    def test_native_only(self, runner):
        result = runner.invoke(cli, ["bench", "--iterations", "1", "--skip-circuit"])
        assert result.exit_code == 0, result.output
        assert "Hash 2:1 (cube)" in result.output
        assert "Circuit" not in result.output
