"""
Poseidon permutation and 2:1 hash as R1CS gadgets.

Mirrors zkposeidon.poseidon.permutation round for round, but the state is a
list of linear combinations:

- round-key addition adds a constant to a linear combination
- an S-box is emitted through SboxType.synthesize_sbox and its output wire
  replaces the state element
- in partial rounds every position but the S-box one carries
  `lc + round_key` forward with no gate at all
- mixing recombines linear combinations and costs no gates

The gates emitted depend only on width and round counts, never on whether
the caller knows the witness, so a prover and a verifier build the same
circuit from the same parameters.
"""

from typing import List, Sequence

from zkposeidon.poseidon.params import PoseidonParams
from zkposeidon.poseidon.permutation import HASH_OUTPUT_INDEX, partial_sbox_position
from zkposeidon.poseidon.sbox import SboxType
from zkposeidon.r1cs.constraint_system import ConstraintSystem
from zkposeidon.r1cs.gadgets import AllocatedScalar, constrain_lc_with_scalar
from zkposeidon.r1cs.linear_combination import LinearCombination, weighted_sum


def apply_linear_layer(
    sbox_outs: Sequence[LinearCombination],
    mds_matrix: Sequence[Sequence[int]],
) -> List[LinearCombination]:
    """next[i] = sum_j sbox_outs[j] * M[i][j]"""
    width = len(sbox_outs)
    return [
        weighted_sum((sbox_outs[j], mds_matrix[i][j]) for j in range(width))
        for i in range(width)
    ]


def _full_round_constraints(
    cs: ConstraintSystem,
    state: List[LinearCombination],
    params: PoseidonParams,
    sbox: SboxType,
    round_idx: int,
) -> List[LinearCombination]:
    offset = round_idx * params.width
    sbox_outputs = [
        sbox.synthesize_sbox(cs, state[i], params.round_keys[offset + i]).to_lc()
        for i in range(params.width)
    ]
    return apply_linear_layer(sbox_outputs, params.mds_matrix)


def _partial_round_constraints(
    cs: ConstraintSystem,
    state: List[LinearCombination],
    params: PoseidonParams,
    sbox: SboxType,
    round_idx: int,
) -> List[LinearCombination]:
    offset = round_idx * params.width
    pos = partial_sbox_position(params.width)
    sbox_outputs = []
    for i in range(params.width):
        round_key = params.round_keys[offset + i]
        if i == pos:
            sbox_outputs.append(sbox.synthesize_sbox(cs, state[i], round_key).to_lc())
        else:
            sbox_outputs.append(state[i] + round_key)
    return apply_linear_layer(sbox_outputs, params.mds_matrix)


def poseidon_permutation_constraints(
    cs: ConstraintSystem,
    inputs: Sequence[AllocatedScalar],
    params: PoseidonParams,
    sbox: SboxType,
) -> List[LinearCombination]:
    """
    Emit the permutation over allocated inputs.

    Returns:
        params.width linear combinations, the permutation output

    Raises:
        ValueError: If the number of inputs is not params.width
        GadgetError: If an S-box gadget cannot be built
    """
    if len(inputs) != params.width:
        raise ValueError(f"Expected {params.width} inputs, got {len(inputs)}")

    state = [alloc.variable.to_lc() for alloc in inputs]
    round_idx = 0

    for _ in range(params.full_rounds_beginning):
        state = _full_round_constraints(cs, state, params, sbox, round_idx)
        round_idx += 1

    for _ in range(params.partial_rounds):
        state = _partial_round_constraints(cs, state, params, sbox, round_idx)
        round_idx += 1

    for _ in range(params.full_rounds_end):
        state = _full_round_constraints(cs, state, params, sbox, round_idx)
        round_idx += 1

    return state


def poseidon_permutation_gadget(
    cs: ConstraintSystem,
    inputs: Sequence[AllocatedScalar],
    params: PoseidonParams,
    sbox: SboxType,
    output: Sequence[int],
) -> None:
    """
    Constrain the permutation of inputs to equal a public output state.

    An output that does not match only surfaces when the proof is verified.
    """
    if len(output) != params.width:
        raise ValueError(f"Expected {params.width} outputs, got {len(output)}")

    permutation_output = poseidon_permutation_constraints(cs, inputs, params, sbox)
    for lc, expected in zip(permutation_output, output):
        constrain_lc_with_scalar(cs, lc, expected)


def poseidon_hash_2_constraints(
    cs: ConstraintSystem,
    xl: AllocatedScalar,
    xr: AllocatedScalar,
    zeros: Sequence[AllocatedScalar],
    params: PoseidonParams,
    sbox: SboxType,
) -> LinearCombination:
    """
    Emit the 2:1 hash and return its output linear combination.

    zeros are committed zero variables (value and blinding both 0) that both
    parties commit to independently; zeros[0] pads position 0 and the rest
    pad positions 3 onwards.
    """
    width = params.width
    if width < 4:
        raise ValueError(f"2:1 hash needs a permutation of width >= 4, got {width}")
    if len(zeros) != width - 2:
        raise ValueError(f"Expected {width - 2} zero variables, got {len(zeros)}")

    inputs = [zeros[0], xl, xr]
    inputs.extend(zeros[1:])

    permutation_output = poseidon_permutation_constraints(cs, inputs, params, sbox)
    return permutation_output[HASH_OUTPUT_INDEX]


def poseidon_hash_2_gadget(
    cs: ConstraintSystem,
    xl: AllocatedScalar,
    xr: AllocatedScalar,
    zeros: Sequence[AllocatedScalar],
    params: PoseidonParams,
    sbox: SboxType,
    output: int,
) -> None:
    """Constrain the 2:1 hash of xl, xr to equal a public output."""
    hash_lc = poseidon_hash_2_constraints(cs, xl, xr, zeros, params, sbox)
    constrain_lc_with_scalar(cs, hash_lc, output)
