"""Performance benchmarking for u8scan operations.

This module times the character-level operations over generated corpora
so that throughput regressions in the decoder and scan loops can be tracked
over time.
"""

import gc
import statistics
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import psutil

from u8scan.api.access import length
from u8scan.api.algorithms import copy
from u8scan.character.encoding import CharInfo, bom_str
from u8scan.scanning.scanner import ScanAction, scan_ascii, scan_utf8
from u8scan.shared.logging import get_logger

DEFAULT_CORPUS_REPEAT = 2000


def _copy_all(info: CharInfo, raw: memoryview) -> ScanAction:
    return ScanAction.COPY


OPERATIONS: Dict[str, Callable[[bytes], Any]] = {
    "length": length,
    "copy": copy,
    "scan_utf8": lambda data: scan_utf8(data, _copy_all),
    "scan_ascii": lambda data: scan_ascii(data, _copy_all),
}


@dataclass
class BenchmarkResult:
    """Timing of one operation over one corpus."""

    operation: str
    corpus: str
    input_bytes: int
    characters: int
    timings_ms: List[float] = field(default_factory=list)
    memory_used_mb: float = 0.0
    success: bool = True
    error_message: Optional[str] = None

    @property
    def mean_ms(self) -> float:
        return statistics.mean(self.timings_ms) if self.timings_ms else 0.0

    @property
    def median_ms(self) -> float:
        return statistics.median(self.timings_ms) if self.timings_ms else 0.0

    @property
    def stdev_ms(self) -> float:
        return statistics.stdev(self.timings_ms) if len(self.timings_ms) > 1 else 0.0

    @property
    def megabytes_per_second(self) -> float:
        if self.mean_ms <= 0:
            return 0.0
        return (self.input_bytes / (1024 * 1024)) / (self.mean_ms / 1000.0)

    @property
    def characters_per_second(self) -> float:
        if self.mean_ms <= 0:
            return 0.0
        return (self.characters * 1000.0) / self.mean_ms


@dataclass
class BenchmarkSuite:
    """Collection of benchmark results with a JSON-ready report."""

    results: List[BenchmarkResult] = field(default_factory=list)
    suite_name: str = "u8scan benchmark"
    timestamp: float = field(default_factory=time.time)

    def add_result(self, result: BenchmarkResult) -> None:
        self.results.append(result)

    def generate_report(self) -> Dict[str, Any]:
        """Generate benchmark report keyed by corpus and operation."""
        report: Dict[str, Any] = {
            "suite_name": self.suite_name,
            "timestamp": self.timestamp,
            "total_results": len(self.results),
            "results": {},
        }
        for result in self.results:
            report["results"].setdefault(result.corpus, {})[result.operation] = {
                "input_bytes": result.input_bytes,
                "characters": result.characters,
                "mean_ms": result.mean_ms,
                "median_ms": result.median_ms,
                "stdev_ms": result.stdev_ms,
                "mb_per_second": result.megabytes_per_second,
                "characters_per_second": result.characters_per_second,
                "memory_used_mb": result.memory_used_mb,
                "success": result.success,
                "error": result.error_message,
            }
        return report


def build_corpora(repeat: int = DEFAULT_CORPUS_REPEAT) -> Dict[str, bytes]:
    """Generate benchmark inputs of different character mixes."""
    return {
        "ascii": b"The quick brown fox jumps over the lazy dog. 0123456789\n" * repeat,
        "cjk": "世界你好日本語".encode("utf-8") * repeat,
        "emoji": "\U0001F30D\U0001F680\U0001F600❤".encode("utf-8") * repeat,
        "mixed": bom_str() + "Hello 世界! 123 \U0001F30D café\n".encode(
            "utf-8"
        ) * repeat,
        "corrupt": b"valid \xff\xfe \xe4\xb8 \xc3\x28 text\n" * repeat,
    }


class ScanBenchmark:
    """Benchmark runner for the access, copy and scan operations."""

    def __init__(
        self,
        correlation_id: Optional[str] = None,
        warmup_runs: int = 2,
        benchmark_runs: int = 5,
        repeat: int = DEFAULT_CORPUS_REPEAT
    ) -> None:
        """Initialize benchmark.

        Args:
            correlation_id: Optional correlation ID for tracking
            warmup_runs: Number of untimed runs before measuring
            benchmark_runs: Number of timed runs per operation and corpus
            repeat: Repetition count used to size the generated corpora
        """
        if warmup_runs < 0:
            raise ValueError("warmup_runs must be >= 0")
        if benchmark_runs <= 0:
            raise ValueError("benchmark_runs must be > 0")
        self.warmup_runs = warmup_runs
        self.benchmark_runs = benchmark_runs
        self.corpora = build_corpora(repeat)
        self.logger = get_logger(__name__, correlation_id, "benchmark")

    def _measure_memory_usage(self) -> float:
        """Get current resident memory in MB."""
        process = psutil.Process()
        return process.memory_info().rss / 1024 / 1024

    def run_operation(self, operation: str, corpus: str) -> BenchmarkResult:
        """Time a single operation over a single corpus."""
        func = OPERATIONS[operation]
        data = self.corpora[corpus]
        result = BenchmarkResult(
            operation=operation,
            corpus=corpus,
            input_bytes=len(data),
            characters=length(data),
        )

        gc.collect()
        memory_before = self._measure_memory_usage()
        try:
            for _ in range(self.warmup_runs):
                func(data)
            for _ in range(self.benchmark_runs):
                start_time = time.perf_counter()
                func(data)
                result.timings_ms.append((time.perf_counter() - start_time) * 1000)
        except Exception as e:
            self.logger.exception(
                "Benchmark run failed",
                extra={"operation": operation, "corpus": corpus},
            )
            result.success = False
            result.error_message = str(e)

        result.memory_used_mb = max(0.0, self._measure_memory_usage() - memory_before)
        return result

    def run(
        self,
        operations: Optional[List[str]] = None,
        corpora: Optional[List[str]] = None
    ) -> BenchmarkSuite:
        """Run the selected operations over the selected corpora."""
        suite = BenchmarkSuite()
        for corpus in corpora or list(self.corpora):
            for operation in operations or list(OPERATIONS):
                self.logger.debug(
                    "Running benchmark",
                    extra={"operation": operation, "corpus": corpus},
                )
                suite.add_result(self.run_operation(operation, corpus))
        return suite
