"""
S-box strategies for the Poseidon permutation.

Each variant has a native evaluation and a circuit synthesis:

    CUBE     x^3, two multiplication gates
    INVERSE  x^-1, witnessed inverse plus a non-zero proof

One variant is chosen per hash instance and never mixed within a run.
"""

from enum import Enum

from zkposeidon.crypto.field import FIELD_PRIME, invert
from zkposeidon.r1cs.constraint_system import ConstraintSystem
from zkposeidon.r1cs.errors import GadgetError
from zkposeidon.r1cs.gadgets import AllocatedScalar, constrain_lc_with_scalar, is_nonzero_gadget
from zkposeidon.r1cs.linear_combination import LinearCombination, Variable


class SboxType(Enum):
    CUBE = "cube"
    INVERSE = "inverse"

    def apply_sbox(self, elem: int) -> int:
        """
        Evaluate the S-box on a field element.

        Raises:
            ZeroDivisionError: For INVERSE applied to zero
        """
        if self is SboxType.CUBE:
            return (((elem * elem) % FIELD_PRIME) * elem) % FIELD_PRIME
        if self is SboxType.INVERSE:
            return invert(elem)
        raise NotImplementedError(f"S-box {self.value} not implemented")

    def synthesize_sbox(
        self,
        cs: ConstraintSystem,
        input_var: LinearCombination,
        round_key: int,
    ) -> Variable:
        """
        Emit the S-box of (input_var + round_key) and return its output wire.

        Raises:
            GadgetError: If the gadget cannot be built for this input
        """
        if self is SboxType.CUBE:
            return synthesize_cube_sbox(cs, input_var, round_key)
        if self is SboxType.INVERSE:
            return synthesize_inverse_sbox(cs, input_var, round_key)
        raise GadgetError(f"S-box {self.value} not implemented")


def synthesize_cube_sbox(cs: ConstraintSystem, input_var: LinearCombination, round_key: int) -> Variable:
    """x^3 with one gate for the square and one for the cube."""
    inp_plus_const = LinearCombination.of(input_var) + round_key
    i, _, sqr = cs.multiply(inp_plus_const, inp_plus_const)
    _, _, cube = cs.multiply(sqr, i)
    return cube


def synthesize_inverse_sbox(cs: ConstraintSystem, input_var: LinearCombination, round_key: int) -> Variable:
    """
    x^-1 as a witnessed inverse.

    The value and its claimed inverse are allocated as the two halves of one
    multiplier whose output is constrained to 1, the value is tied to the
    round input, and is_nonzero_gadget rules out the zero case.
    """
    inp_plus_const = LinearCombination.of(input_var) + round_key

    val_l = cs.evaluate_lc(inp_plus_const)
    val_r = None
    if val_l is not None:
        if val_l == 0:
            raise GadgetError("inverse S-box input is zero")
        val_r = invert(val_l)

    var_l, _ = cs.allocate_single(val_l)
    var_r, var_o = cs.allocate_single(val_r)

    # Tie the allocated value to the round input
    cs.constrain(inp_plus_const - var_l)

    # Ensure inp_plus_const is not zero
    is_nonzero_gadget(
        cs,
        AllocatedScalar(variable=var_l, assignment=val_l),
        AllocatedScalar(variable=var_r, assignment=val_r),
    )

    # Product of inp_plus_const and its inverse is 1
    constrain_lc_with_scalar(cs, var_o, 1)

    return var_r
