"""Developer tooling for u8scan."""

from .benchmarks import BenchmarkResult, BenchmarkSuite, ScanBenchmark, build_corpora

__all__ = ["BenchmarkResult", "BenchmarkSuite", "ScanBenchmark", "build_corpora"]
