"""
Tests for the benchmark harness.
"""

import pytest

from zkposeidon.utils.benchmark import BenchmarkResult, benchmark, benchmark_native


class TestBenchmark:
    """benchmark() timing bookkeeping."""

    def test_counts_calls(self):
        calls = []
        result = benchmark("noop", lambda: calls.append(1), iterations=5, warmup=2)
        assert len(calls) == 7
        assert result.iterations == 5

    def test_result_fields(self):
        result = benchmark("noop", lambda: None, iterations=3, warmup=0)
        assert isinstance(result, BenchmarkResult)
        assert result.min_time_ms <= result.avg_time_ms <= result.max_time_ms
        assert result.ops_per_sec > 0
        assert "noop" in str(result)

    def test_rejects_zero_iterations(self):
        with pytest.raises(ValueError):
            benchmark("noop", lambda: None, iterations=0)

    def test_native_suite(self):
        results = benchmark_native(iterations=1)
        names = [r.name for r in results]
        assert "Hash 2:1 (cube)" in names
        assert "Hash 2:1 (inverse)" in names
