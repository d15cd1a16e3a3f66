"""
Reusable R1CS helpers and gadgets.

AllocatedScalar pairs a circuit variable with its value when the caller
knows it (prover) and None when it does not (verifier).
"""

from dataclasses import dataclass
from typing import Optional

from zkposeidon.crypto.field import FIELD_PRIME
from zkposeidon.r1cs.constraint_system import ConstraintSystem
from zkposeidon.r1cs.errors import GadgetError
from zkposeidon.r1cs.linear_combination import LinearCombination, Operand, Variable


@dataclass(frozen=True)
class AllocatedScalar:
    """A committed/allocated variable and its optional assignment."""
    variable: Variable
    assignment: Optional[int] = None


def constrain_lc_with_scalar(cs: ConstraintSystem, lc: Operand, scalar: int) -> None:
    """Constrain lc to equal a public constant."""
    cs.constrain(LinearCombination.of(lc) - scalar)


def is_zero_gadget(cs: ConstraintSystem, x: AllocatedScalar) -> None:
    """Constrain x to be zero."""
    if x.assignment is not None and x.assignment % FIELD_PRIME != 0:
        raise GadgetError("is_zero_gadget: value is not zero")
    cs.constrain(x.variable.to_lc())


def is_nonzero_gadget(cs: ConstraintSystem, x: AllocatedScalar, x_inv: AllocatedScalar) -> None:
    """
    Constrain x to be non-zero by exhibiting its inverse: x * x_inv = 1.

    Costs one multiplier and one linear constraint beyond the gate wiring.

    Raises:
        GadgetError: If known assignments show x is zero or x_inv is not its inverse
    """
    if x.assignment is not None:
        if x.assignment % FIELD_PRIME == 0:
            raise GadgetError("is_nonzero_gadget: value is zero")
        if x_inv.assignment is not None and (x.assignment * x_inv.assignment) % FIELD_PRIME != 1:
            raise GadgetError("is_nonzero_gadget: claimed inverse is wrong")

    _, _, product = cs.multiply(x.variable.to_lc(), x_inv.variable.to_lc())
    constrain_lc_with_scalar(cs, product, 1)
