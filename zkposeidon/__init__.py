"""
zkposeidon

Poseidon permutation and 2:1 hash for R1CS proof systems:
- Native evaluation over the BN254 scalar field
- Constraint synthesis for prover and verifier roles
- Cube and inverse S-boxes
"""

__version__ = "0.1.0"
