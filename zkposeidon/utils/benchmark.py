"""
Benchmarks for zkposeidon.

Run with: python -m zkposeidon.utils.benchmark
"""

import random
import statistics
import time
from dataclasses import dataclass
from typing import Callable, List

from zkposeidon.crypto import keccak256
from zkposeidon.crypto.pedersen import PedersenGens
from zkposeidon.poseidon.gadget import poseidon_hash_2_constraints
from zkposeidon.poseidon.params import construct_params
from zkposeidon.poseidon.permutation import poseidon_hash_2, poseidon_permutation
from zkposeidon.poseidon.sbox import SboxType
from zkposeidon.r1cs.constraint_system import Verifier
from zkposeidon.r1cs.gadgets import AllocatedScalar
from zkposeidon.r1cs.transcript import Transcript
from zkposeidon.utils.logger import get_logger

logger = get_logger("benchmark")


# =============================================================================
# Benchmark Framework
# =============================================================================


@dataclass
class BenchmarkResult:
    """Result of a benchmark run."""
    name: str
    iterations: int
    total_time_ms: float
    avg_time_ms: float
    min_time_ms: float
    max_time_ms: float
    ops_per_sec: float

    def __str__(self) -> str:
        return (
            f"{self.name}: {self.ops_per_sec:.1f} ops/s "
            f"(avg={self.avg_time_ms:.3f}ms, min={self.min_time_ms:.3f}ms, max={self.max_time_ms:.3f}ms)"
        )


def benchmark(
    name: str,
    func: Callable,
    iterations: int = 100,
    warmup: int = 10,
) -> BenchmarkResult:
    """
    Run a benchmark.

    Args:
        name: Benchmark name
        func: Function to benchmark (no args)
        iterations: Number of timed iterations
        warmup: Untimed iterations run first

    Returns:
        BenchmarkResult
    """
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")

    for _ in range(warmup):
        func()

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func()
        times.append((time.perf_counter() - start) * 1000)

    avg = statistics.mean(times)
    logger.debug(f"{name}: {iterations} iterations, avg {avg:.3f}ms")
    return BenchmarkResult(
        name=name,
        iterations=iterations,
        total_time_ms=sum(times),
        avg_time_ms=avg,
        min_time_ms=min(times),
        max_time_ms=max(times),
        ops_per_sec=1000 / avg if avg > 0 else float("inf"),
    )


# =============================================================================
# Native Benchmarks
# =============================================================================


def benchmark_native(iterations: int = 50) -> List[BenchmarkResult]:
    """Benchmark native permutation and hash for both S-boxes."""
    rng = random.Random(24)
    params = construct_params(6, 4, 4, 140)
    state = [rng.randrange(1, 1 << 250) for _ in range(params.width)]
    xl, xr = state[0], state[1]

    results = []
    for sbox in (SboxType.CUBE, SboxType.INVERSE):
        results.append(benchmark(
            f"Permutation width 6 ({sbox.value})",
            lambda: poseidon_permutation(state, params, sbox),
            iterations=iterations,
        ))
        results.append(benchmark(
            f"Hash 2:1 ({sbox.value})",
            lambda: poseidon_hash_2(xl, xr, params, sbox),
            iterations=iterations,
        ))

    results.append(benchmark(
        "Keccak-256 (64 bytes)",
        lambda: keccak256(b"x" * 64),
        iterations=iterations * 100,
    ))
    return results


# =============================================================================
# Circuit Benchmarks
# =============================================================================


def benchmark_circuit(iterations: int = 3) -> List[BenchmarkResult]:
    """
    Benchmark constraint synthesis and commitments.

    Synthesis runs in the verifier role so no Pedersen work is timed with it.
    """
    params = construct_params(6, 4, 4, 140)
    gens = PedersenGens.default()
    zero_comm = gens.commit(0, 0)

    def synthesize(sbox: SboxType):
        def run():
            verifier = Verifier(Transcript(b"benchmark"))
            variables = [verifier.commit(zero_comm) for _ in range(params.width)]
            allocs = [AllocatedScalar(variable=v) for v in variables]
            poseidon_hash_2_constraints(verifier, allocs[1], allocs[2], [allocs[0]] + allocs[3:], params, sbox)
            return verifier
        return run

    results = []
    for sbox in (SboxType.CUBE, SboxType.INVERSE):
        results.append(benchmark(
            f"Hash 2:1 synthesis ({sbox.value})",
            synthesize(sbox),
            iterations=iterations,
            warmup=1,
        ))

    results.append(benchmark(
        "Pedersen commit",
        lambda: gens.commit(12345, 67890),
        iterations=iterations * 10,
        warmup=1,
    ))
    return results


# =============================================================================
# Main
# =============================================================================


def run_all_benchmarks() -> None:
    """Run all benchmarks and print results."""
    print("=" * 60)
    print("zkposeidon Benchmarks")
    print("=" * 60)

    sections = [
        ("Native", benchmark_native),
        ("Circuit", benchmark_circuit),
    ]

    for section_name, bench_func in sections:
        print(f"\n{section_name}")
        print("-" * 40)
        for r in bench_func():
            print(f"  {r}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    run_all_benchmarks()
