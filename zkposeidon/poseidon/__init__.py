"""
Poseidon permutation, 2:1 hash, and their R1CS gadgets.

Native and circuit forms share parameters and S-box selection and must
agree bit for bit on the BN254 scalar field.
"""
from zkposeidon.poseidon.params import (
    PoseidonParams,
    PoseidonParamsError,
    construct_params,
    load_round_keys,
    load_mds_matrix,
)
from zkposeidon.poseidon.sbox import (
    SboxType,
    synthesize_cube_sbox,
    synthesize_inverse_sbox,
)
from zkposeidon.poseidon.permutation import (
    HASH_OUTPUT_INDEX,
    partial_sbox_position,
    poseidon_permutation,
    poseidon_hash_2,
    hash2_input_state,
)
from zkposeidon.poseidon.gadget import (
    apply_linear_layer,
    poseidon_permutation_constraints,
    poseidon_permutation_gadget,
    poseidon_hash_2_constraints,
    poseidon_hash_2_gadget,
)

__all__ = [
    "PoseidonParams",
    "PoseidonParamsError",
    "construct_params",
    "load_round_keys",
    "load_mds_matrix",
    "SboxType",
    "synthesize_cube_sbox",
    "synthesize_inverse_sbox",
    "HASH_OUTPUT_INDEX",
    "partial_sbox_position",
    "poseidon_permutation",
    "poseidon_hash_2",
    "hash2_input_state",
    "apply_linear_layer",
    "poseidon_permutation_constraints",
    "poseidon_permutation_gadget",
    "poseidon_hash_2_constraints",
    "poseidon_hash_2_gadget",
]
