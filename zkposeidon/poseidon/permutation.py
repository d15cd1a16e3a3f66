"""
Native Poseidon permutation and 2:1 hash.

This is the ground truth the circuit form in zkposeidon.poseidon.gadget
must reproduce, and what a prover runs to learn the value it will prove.

Round schedule:
    full_rounds_beginning  S-box on every element
    partial_rounds         S-box on the last element only
    full_rounds_end        S-box on every element

Each round adds `width` round keys, applies the S-box layer, then mixes:
    next[i] = sum_j state[j] * M[i][j]

References:
- Poseidon paper: https://eprint.iacr.org/2019/458
"""

from typing import List, Sequence

from zkposeidon.crypto.field import FIELD_PRIME, validate_field_element
from zkposeidon.poseidon.params import PoseidonParams
from zkposeidon.poseidon.sbox import SboxType

# 2:1 hash output position; position 0 is fixed to zero and never output
HASH_OUTPUT_INDEX = 1


def partial_sbox_position(width: int) -> int:
    """
    State position that receives the S-box in partial rounds.

    The last one. The choice is arbitrary but part of the hash definition,
    so native and circuit forms both take it from here.
    """
    return width - 1


def _add_round_keys(state: List[int], round_keys: Sequence[int], round_idx: int) -> List[int]:
    """Add the round's keys to the state element-wise."""
    width = len(state)
    offset = round_idx * width
    return [(state[i] + round_keys[offset + i]) % FIELD_PRIME for i in range(width)]


def _apply_linear_layer(state: List[int], matrix: Sequence[Sequence[int]]) -> List[int]:
    """Multiply state by the mixing matrix."""
    width = len(state)
    result = []
    for i in range(width):
        row = matrix[i]
        acc = 0
        for j in range(width):
            acc += state[j] * row[j]
        result.append(acc % FIELD_PRIME)
    return result


def _full_round(state: List[int], params: PoseidonParams, sbox: SboxType, round_idx: int) -> List[int]:
    state = _add_round_keys(state, params.round_keys, round_idx)
    state = [sbox.apply_sbox(x) for x in state]
    return _apply_linear_layer(state, params.mds_matrix)


def _partial_round(state: List[int], params: PoseidonParams, sbox: SboxType, round_idx: int) -> List[int]:
    state = _add_round_keys(state, params.round_keys, round_idx)
    pos = partial_sbox_position(params.width)
    state[pos] = sbox.apply_sbox(state[pos])
    return _apply_linear_layer(state, params.mds_matrix)


def poseidon_permutation(inputs: Sequence[int], params: PoseidonParams, sbox: SboxType) -> List[int]:
    """
    Apply the Poseidon permutation to a full-width state.

    Args:
        inputs: Exactly params.width field elements
        params: Poseidon parameters
        sbox: S-box variant

    Returns:
        The output state (no truncation)

    Raises:
        ValueError: If the state has the wrong width or out-of-range elements
        ZeroDivisionError: If the INVERSE S-box meets a zero input
    """
    if len(inputs) != params.width:
        raise ValueError(f"Expected {params.width} inputs, got {len(inputs)}")
    for i, value in enumerate(inputs):
        validate_field_element(value, f"input {i}")

    state = list(inputs)
    round_idx = 0

    for _ in range(params.full_rounds_beginning):
        state = _full_round(state, params, sbox, round_idx)
        round_idx += 1

    for _ in range(params.partial_rounds):
        state = _partial_round(state, params, sbox, round_idx)
        round_idx += 1

    for _ in range(params.full_rounds_end):
        state = _full_round(state, params, sbox, round_idx)
        round_idx += 1

    return state


def hash2_input_state(xl: int, xr: int, width: int) -> List[int]:
    """Lay out the 2:1 hash inputs: [0, xl, xr, 0, ..., 0]."""
    if width < 4:
        raise ValueError(f"2:1 hash needs a permutation of width >= 4, got {width}")
    return [0, xl, xr] + [0] * (width - 3)


def poseidon_hash_2(xl: int, xr: int, params: PoseidonParams, sbox: SboxType) -> int:
    """
    2:1 hash: permute [0, xl, xr, 0, ...] and return output position 1.

    Raises:
        ValueError: If width < 4 or an input is out of field range
    """
    return poseidon_permutation(hash2_input_state(xl, xr, params.width), params, sbox)[HASH_OUTPUT_INDEX]
