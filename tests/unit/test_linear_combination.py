"""
Tests for circuit variables and linear combinations.
"""

import pytest

from zkposeidon.crypto.field import FIELD_PRIME
from zkposeidon.r1cs.linear_combination import (
    LinearCombination,
    Variable,
    VariableKind,
    weighted_sum,
)


@pytest.fixture
def x():
    return Variable(VariableKind.COMMITTED, 0)


@pytest.fixture
def y():
    return Variable(VariableKind.MULTIPLIER_OUTPUT, 3)


def values(mapping):
    def lookup(var):
        if var.kind is VariableKind.ONE:
            return 1
        return mapping.get(var)
    return lookup


class TestVariable:
    """Variables lift into linear combinations."""

    def test_one(self):
        assert Variable.one() == Variable(VariableKind.ONE, 0)

    def test_to_lc(self, x):
        assert x.to_lc().terms == {x: 1}

    def test_add_constant(self, x):
        lc = x + 5
        assert lc.terms == {x: 1, Variable.one(): 5}

    def test_radd_constant(self, x):
        assert (5 + x) == (x + 5)

    def test_rsub_constant(self, x):
        lc = 5 - x
        assert lc.terms == {Variable.one(): 5, x: FIELD_PRIME - 1}

    def test_scale(self, x):
        assert (x * 3).terms == {x: 3}
        assert (3 * x).terms == {x: 3}

    def test_neg(self, x):
        assert (-x).terms == {x: FIELD_PRIME - 1}


class TestLinearCombination:
    """Arithmetic keeps terms merged and reduced."""

    def test_like_terms_merge(self, x):
        lc = x + x + x
        assert lc.terms == {x: 3}
        assert len(lc) == 1

    def test_cancellation_drops_term(self, x, y):
        lc = (x + y) - x
        assert lc.terms == {y: 1}

    def test_zero_lc_is_empty(self, x):
        assert len(x - x) == 0
        assert (x - x) == LinearCombination()

    def test_coefficients_reduced(self, x):
        lc = x * (FIELD_PRIME + 2)
        assert lc.terms == {x: 2}

    def test_of_int(self):
        assert LinearCombination.of(7).constant() == 7
        assert len(LinearCombination.of(0)) == 0

    def test_of_lc_is_identity(self, x):
        lc = x + 1
        assert LinearCombination.of(lc) is lc

    def test_of_rejects_other_types(self):
        with pytest.raises(TypeError):
            LinearCombination.of("x")

    def test_mul_non_int_not_supported(self, x):
        with pytest.raises(TypeError):
            x.to_lc() * 1.5

    def test_equality_with_variable(self, x):
        assert x.to_lc() == x

    def test_unhashable(self, x):
        with pytest.raises(TypeError):
            hash(x.to_lc())

    def test_repr(self, x):
        assert "COMMITTED[0]" in repr(x + 0)
        assert repr(LinearCombination()) == "LinearCombination(0)"


class TestEvaluate:
    """Evaluation under partial assignments."""

    def test_evaluate(self, x, y):
        lc = x * 2 + y * 3 + 4
        assert lc.evaluate(values({x: 10, y: 100})) == 324

    def test_evaluate_reduces(self, x):
        lc = x * 2
        assert lc.evaluate(values({x: FIELD_PRIME - 1})) == FIELD_PRIME - 2

    def test_unknown_variable_yields_none(self, x, y):
        lc = x + y
        assert lc.evaluate(values({x: 1})) is None

    def test_constant_evaluates_without_assignment(self):
        assert LinearCombination.of(9).evaluate(values({})) == 9


class TestEncoding:
    """Deterministic bytes for topology digests."""

    def test_order_independent(self, x, y):
        a = x + y * 2
        b = y * 2 + x
        assert a.to_bytes() == b.to_bytes()

    def test_distinguishes_coefficients(self, x):
        assert (x * 2).to_bytes() != (x * 3).to_bytes()

    def test_distinguishes_variables(self, x, y):
        assert x.to_lc().to_bytes() != y.to_lc().to_bytes()


class TestWeightedSum:
    """weighted_sum matches folding with + and *."""

    def test_matches_fold(self, x, y):
        a = x + 1
        b = y * 5
        expected = a * 3 + b * 7
        assert weighted_sum([(a, 3), (b, 7)]) == expected

    def test_accepts_variables_and_ints(self, x):
        assert weighted_sum([(x, 2), (4, 3)]) == x * 2 + 12

    def test_empty(self):
        assert weighted_sum([]) == LinearCombination()
