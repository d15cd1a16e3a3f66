"""
Poseidon Prover - proof orchestration for the permutation and 2:1 hash.

This module drives the gadgets end to end:
1. Compute the expected output natively
2. Commit to the secret inputs and synthesize the circuit as prover
3. Rebuild the same circuit as verifier from the commitments alone
4. Check the proof against it

Prover and verifier each start from a fresh transcript with the same label,
so a proof only verifies for the circuit, commitments and label it was
made for.
"""

import random
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from zkposeidon.crypto import bytes_to_hex
from zkposeidon.crypto.field import random_scalar, scalar_to_hex, validate_field_element
from zkposeidon.crypto.pedersen import G1Point, PedersenGens, point_to_bytes
from zkposeidon.poseidon.gadget import poseidon_hash_2_gadget, poseidon_permutation_gadget
from zkposeidon.poseidon.params import PoseidonParams
from zkposeidon.poseidon.permutation import poseidon_hash_2, poseidon_permutation
from zkposeidon.poseidon.sbox import SboxType
from zkposeidon.r1cs.constraint_system import Prover, R1CSProof, Verifier
from zkposeidon.r1cs.errors import R1CSError
from zkposeidon.r1cs.gadgets import AllocatedScalar
from zkposeidon.r1cs.transcript import Transcript
from zkposeidon.utils.logger import get_logger

logger = get_logger("prover")

DEFAULT_TRANSCRIPT_LABEL = b"zkposeidon"


# =============================================================================
# Proof Bundles
# =============================================================================


@dataclass
class HashProof:
    """
    Proof that the committed xl, xr hash to `output` under Poseidon 2:1.

    Only the commitments to xl and xr travel with the proof; the zero
    padding commitments are public and recomputed by the verifier.
    """
    commitments: List[G1Point]      # [com(xl), com(xr)]
    proof: R1CSProof
    output: int                     # Claimed hash output
    num_multipliers: int
    num_constraints: int
    proving_time_ms: int
    verified: bool = False

    def to_dict(self) -> dict:
        """Convert to JSON-friendly summary."""
        return {
            "commitments": [bytes_to_hex(point_to_bytes(c)) for c in self.commitments],
            "output": scalar_to_hex(self.output),
            "num_multipliers": self.num_multipliers,
            "num_constraints": self.num_constraints,
            "proving_time_ms": self.proving_time_ms,
            "challenge": bytes_to_hex(self.proof.challenge),
            "verified": self.verified,
        }


@dataclass
class PermutationProof:
    """Proof that the committed input state permutes to `output`."""
    commitments: List[G1Point]
    proof: R1CSProof
    output: List[int]
    num_multipliers: int
    num_constraints: int
    proving_time_ms: int
    verified: bool = False

    def to_dict(self) -> dict:
        """Convert to JSON-friendly summary."""
        return {
            "commitments": [bytes_to_hex(point_to_bytes(c)) for c in self.commitments],
            "output": [scalar_to_hex(x) for x in self.output],
            "num_multipliers": self.num_multipliers,
            "num_constraints": self.num_constraints,
            "proving_time_ms": self.proving_time_ms,
            "challenge": bytes_to_hex(self.proof.challenge),
            "verified": self.verified,
        }


# =============================================================================
# Prover Service
# =============================================================================


class PoseidonProver:
    """
    High-level proving for one Poseidon instance.

    Follows the (result, error_message) convention: circuit and input
    failures come back as an error string, never as an exception.
    Configuration errors are raised earlier, when params are built.
    """

    def __init__(
        self,
        params: PoseidonParams,
        sbox: SboxType,
        pc_gens: Optional[PedersenGens] = None,
        transcript_label: bytes = DEFAULT_TRANSCRIPT_LABEL,
    ):
        """
        Initialize prover service.

        Args:
            params: Poseidon parameters
            sbox: S-box variant
            pc_gens: Pedersen generators (default generators if None)
            transcript_label: Label both roles seed their transcript with
        """
        self.params = params
        self.sbox = sbox
        self.pc_gens = pc_gens or PedersenGens.default()
        if isinstance(transcript_label, str):
            transcript_label = transcript_label.encode()
        self.transcript_label = transcript_label
        self.proof_history: List[object] = []

    # -------------------------------------------------------------------------
    # 2:1 hash
    # -------------------------------------------------------------------------

    def _zero_allocs_prover(self, prover: Prover) -> List[AllocatedScalar]:
        zeros = []
        for _ in range(self.params.width - 2):
            _, var = prover.commit(0, 0)
            zeros.append(AllocatedScalar(variable=var, assignment=0))
        return zeros

    def _zero_allocs_verifier(self, verifier: Verifier) -> List[AllocatedScalar]:
        # Commitment to 0 with blinding 0, computed independently of the prover
        zero_comm = self.pc_gens.commit(0, 0)
        return [
            AllocatedScalar(variable=verifier.commit(zero_comm), assignment=None)
            for _ in range(self.params.width - 2)
        ]

    def prove_hash2(
        self,
        xl: int,
        xr: int,
        rng: Optional[random.Random] = None,
    ) -> Tuple[Optional[HashProof], str]:
        """
        Prove knowledge of xl, xr hashing to poseidon_hash_2(xl, xr).

        Args:
            xl: Left input
            xr: Right input
            rng: Seeded generator for blinding factors (tests only)

        Returns:
            (HashProof, error_message)
        """
        start_time = time.time()
        try:
            expected_output = poseidon_hash_2(xl, xr, self.params, self.sbox)

            prover = Prover(self.pc_gens, Transcript(self.transcript_label))
            com_l, var_l = prover.commit(xl, random_scalar(rng))
            com_r, var_r = prover.commit(xr, random_scalar(rng))
            zeros = self._zero_allocs_prover(prover)

            poseidon_hash_2_gadget(
                prover,
                AllocatedScalar(variable=var_l, assignment=xl),
                AllocatedScalar(variable=var_r, assignment=xr),
                zeros,
                self.params,
                self.sbox,
                expected_output,
            )
            proof = prover.prove()
        except (R1CSError, ValueError, ZeroDivisionError) as e:
            logger.warning(f"Hash proof failed: {e}")
            return None, f"Proof generation failed: {e}"

        proving_time_ms = int((time.time() - start_time) * 1000)
        bundle = HashProof(
            commitments=[com_l, com_r],
            proof=proof,
            output=expected_output,
            num_multipliers=prover.num_multipliers,
            num_constraints=prover.num_constraints,
            proving_time_ms=proving_time_ms,
        )
        self.proof_history.append(bundle)
        logger.info(
            f"Hash proof generated: {prover.num_multipliers} multipliers, "
            f"{prover.num_constraints} constraints in {proving_time_ms}ms"
        )
        return bundle, ""

    def verify_hash2(
        self,
        bundle: HashProof,
        claimed_output: Optional[int] = None,
    ) -> Tuple[bool, str]:
        """
        Verify a hash proof.

        Args:
            bundle: Proof bundle from prove_hash2
            claimed_output: Output to check against (defaults to bundle.output)

        Returns:
            (is_valid, error_message)
        """
        output = bundle.output if claimed_output is None else claimed_output
        if len(bundle.commitments) != 2:
            return False, f"Expected 2 commitments, got {len(bundle.commitments)}"

        try:
            validate_field_element(output, "claimed_output")
            verifier = Verifier(Transcript(self.transcript_label))
            var_l = verifier.commit(bundle.commitments[0])
            var_r = verifier.commit(bundle.commitments[1])
            zeros = self._zero_allocs_verifier(verifier)

            poseidon_hash_2_gadget(
                verifier,
                AllocatedScalar(variable=var_l),
                AllocatedScalar(variable=var_r),
                zeros,
                self.params,
                self.sbox,
                output,
            )
            verifier.verify(bundle.proof, self.pc_gens)
        except (R1CSError, ValueError) as e:
            logger.warning(f"Hash proof rejected: {e}")
            return False, f"Verification failed: {e}"

        bundle.verified = True
        logger.info("Hash proof verified")
        return True, ""

    # -------------------------------------------------------------------------
    # Permutation
    # -------------------------------------------------------------------------

    def prove_permutation(
        self,
        inputs: Sequence[int],
        rng: Optional[random.Random] = None,
    ) -> Tuple[Optional[PermutationProof], str]:
        """
        Prove knowledge of a committed state permuting to its native output.

        Returns:
            (PermutationProof, error_message)
        """
        start_time = time.time()
        try:
            expected_output = poseidon_permutation(inputs, self.params, self.sbox)

            prover = Prover(self.pc_gens, Transcript(self.transcript_label))
            commitments = []
            allocs = []
            for value in inputs:
                com, var = prover.commit(value, random_scalar(rng))
                commitments.append(com)
                allocs.append(AllocatedScalar(variable=var, assignment=value))

            poseidon_permutation_gadget(prover, allocs, self.params, self.sbox, expected_output)
            proof = prover.prove()
        except (R1CSError, ValueError, ZeroDivisionError) as e:
            logger.warning(f"Permutation proof failed: {e}")
            return None, f"Proof generation failed: {e}"

        proving_time_ms = int((time.time() - start_time) * 1000)
        bundle = PermutationProof(
            commitments=commitments,
            proof=proof,
            output=expected_output,
            num_multipliers=prover.num_multipliers,
            num_constraints=prover.num_constraints,
            proving_time_ms=proving_time_ms,
        )
        self.proof_history.append(bundle)
        logger.info(
            f"Permutation proof generated: {prover.num_multipliers} multipliers, "
            f"{prover.num_constraints} constraints in {proving_time_ms}ms"
        )
        return bundle, ""

    def verify_permutation(
        self,
        bundle: PermutationProof,
        claimed_output: Optional[Sequence[int]] = None,
    ) -> Tuple[bool, str]:
        """
        Verify a permutation proof.

        Returns:
            (is_valid, error_message)
        """
        output = list(bundle.output if claimed_output is None else claimed_output)
        try:
            for i, value in enumerate(output):
                validate_field_element(value, f"claimed_output {i}")
            verifier = Verifier(Transcript(self.transcript_label))
            allocs = [
                AllocatedScalar(variable=verifier.commit(com))
                for com in bundle.commitments
            ]
            poseidon_permutation_gadget(verifier, allocs, self.params, self.sbox, output)
            verifier.verify(bundle.proof, self.pc_gens)
        except (R1CSError, ValueError) as e:
            logger.warning(f"Permutation proof rejected: {e}")
            return False, f"Verification failed: {e}"

        bundle.verified = True
        logger.info("Permutation proof verified")
        return True, ""

    # -------------------------------------------------------------------------
    # Bookkeeping
    # -------------------------------------------------------------------------

    def get_latest_proof(self):
        """Get the most recent proof."""
        return self.proof_history[-1] if self.proof_history else None

    def stats(self) -> dict:
        """Get prover statistics."""
        return {
            "proofs_generated": len(self.proof_history),
            "width": self.params.width,
            "total_rounds": self.params.total_rounds,
            "sbox": self.sbox.value,
            "transcript_label": self.transcript_label.decode(errors="replace"),
        }
