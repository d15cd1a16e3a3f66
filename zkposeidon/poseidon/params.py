"""
Poseidon parameters: width, round schedule, round keys and mixing matrix.

Parameters are built once from the static hex tables in
zkposeidon.poseidon.constants and are immutable afterwards, so a single
instance can be shared by any number of permutation calls.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from zkposeidon.crypto.field import scalar_from_hex
from zkposeidon.poseidon.constants import MDS_ENTRIES, ROUND_CONSTS
from zkposeidon.utils.logger import get_logger

logger = get_logger("poseidon")


class PoseidonParamsError(Exception):
    """
    The constant tables cannot serve the requested width/round configuration.

    A deployment-time misconfiguration with no fallback. Distinct from
    R1CSError, which covers per-input circuit failures.
    """


def _fatal(message: str) -> PoseidonParamsError:
    logger.critical(message)
    return PoseidonParamsError(message)


def load_round_keys(width: int, total_rounds: int, table: Sequence[str] = ROUND_CONSTS) -> Tuple[int, ...]:
    """Decode the first total_rounds * width round constants."""
    cap = total_rounds * width
    if len(table) < cap:
        raise _fatal(f"Not enough round constants, need {cap}, found {len(table)}")

    keys = []
    for i in range(cap):
        try:
            keys.append(scalar_from_hex(table[i]))
        except ValueError as e:
            raise _fatal(f"Round constant {i} is malformed: {e}") from e
    return tuple(keys)


def load_mds_matrix(width: int, table: Sequence[Sequence[str]] = MDS_ENTRIES) -> Tuple[Tuple[int, ...], ...]:
    """Decode a width x width mixing matrix, row-major."""
    if len(table) != width:
        raise _fatal(
            f"Incorrect width, mixing matrix table is prepared for width {len(table)}, got {width}"
        )

    rows = []
    for i, row in enumerate(table):
        if len(row) != width:
            raise _fatal(
                f"Incorrect width, mixing matrix row {i} has {len(row)} entries, expected {width}"
            )
        try:
            rows.append(tuple(scalar_from_hex(entry) for entry in row))
        except ValueError as e:
            raise _fatal(f"Mixing matrix row {i} is malformed: {e}") from e
    return tuple(rows)


@dataclass(frozen=True)
class PoseidonParams:
    """
    Poseidon instance configuration.

    Attributes:
        width: Number of field elements in the state
        full_rounds_beginning: Full S-box rounds before the partial rounds
        full_rounds_end: Full S-box rounds after the partial rounds
        partial_rounds: Rounds applying the S-box to one state element
        round_keys: total_rounds * width keys, round-major
        mds_matrix: width x width mixing matrix, row-major
    """
    width: int
    full_rounds_beginning: int
    full_rounds_end: int
    partial_rounds: int
    round_keys: Tuple[int, ...]
    mds_matrix: Tuple[Tuple[int, ...], ...]

    @property
    def total_rounds(self) -> int:
        return self.full_rounds_beginning + self.partial_rounds + self.full_rounds_end

    @classmethod
    def new(
        cls,
        width: int,
        full_rounds_beginning: int,
        full_rounds_end: int,
        partial_rounds: int,
        round_constants: Sequence[str] = ROUND_CONSTS,
        mds_entries: Sequence[Sequence[str]] = MDS_ENTRIES,
    ) -> "PoseidonParams":
        """
        Build parameters from the hex constant tables.

        Raises:
            PoseidonParamsError: If the tables cannot serve this configuration
        """
        if width <= 0:
            raise _fatal(f"Width must be positive, got {width}")
        for name, rounds in (
            ("full_rounds_beginning", full_rounds_beginning),
            ("full_rounds_end", full_rounds_end),
            ("partial_rounds", partial_rounds),
        ):
            if rounds < 0:
                raise _fatal(f"{name} must be non-negative, got {rounds}")

        total_rounds = full_rounds_beginning + partial_rounds + full_rounds_end
        round_keys = load_round_keys(width, total_rounds, round_constants)
        mds_matrix = load_mds_matrix(width, mds_entries)

        logger.debug(
            f"Poseidon params: width={width}, rounds=({full_rounds_beginning}, "
            f"{partial_rounds}, {full_rounds_end}), {len(round_keys)} round keys"
        )
        return cls(
            width=width,
            full_rounds_beginning=full_rounds_beginning,
            full_rounds_end=full_rounds_end,
            partial_rounds=partial_rounds,
            round_keys=round_keys,
            mds_matrix=mds_matrix,
        )


def construct_params(
    width: int,
    full_rounds_beginning: int,
    full_rounds_end: int,
    partial_rounds: int,
) -> PoseidonParams:
    """Build parameters from the bundled constant tables."""
    return PoseidonParams.new(width, full_rounds_beginning, full_rounds_end, partial_rounds)
