"""Timing suite for the symmetrix decomposition engines.

Each operation is timed on random symmetric positive-definite matrices of
increasing dimension and compared with the LAPACK-backed numpy routine that
computes the same quantity. The growth of the timings with dimension shows the
cubic cost of the factorizations.
"""

import json
import time
from collections.abc import Callable
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import numpy as np

from symmetrix import SymmetricMatrix


@dataclass
class PerformanceResult:
    """Single timing measurement."""

    operation: str
    dimension: int
    symmetrix_time_ms: float
    numpy_time_ms: float
    ratio: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


@dataclass
class BenchmarkSummary:
    """Summary statistics for a set of timing results."""

    total_benchmarks: int
    avg_ratio: float
    max_ratio: float
    min_ratio: float
    operations_tested: list[str]
    dimensions_tested: list[int]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


def random_spd_matrix(dimension: int, seed: int = 42) -> SymmetricMatrix:
    """Random symmetric positive-definite matrix B Bᵗ + n I."""
    rng = np.random.default_rng(seed)
    b = rng.uniform(-1.0, 1.0, size=(dimension, dimension))
    a = b @ b.T + dimension * np.eye(dimension)
    return SymmetricMatrix.from_array(0.5 * (a + a.T))


class PerformanceBenchmark:
    """Times symmetrix operations against their numpy counterparts."""

    def __init__(self, output_dir: str | None = None):
        """Initialize benchmark system.

        Args:
            output_dir: Directory to save benchmark results
        """
        self.results: list[PerformanceResult] = []

        if output_dir:
            self.output_dir: Path | None = Path(output_dir)
            self.output_dir.mkdir(parents=True, exist_ok=True)
        else:
            self.output_dir = None

        # (symmetrix callable, numpy callable) per operation
        self.operations: dict[str, tuple[Callable[[SymmetricMatrix], Any], Callable[[np.ndarray], Any]]] = {
            "cholesky": (lambda s: s.cholesky_decomposition(), np.linalg.cholesky),
            "cholesky_solve": (
                lambda s: s.cholesky_decomposition().solve(np.ones(s.dimension)),
                lambda a: np.linalg.solve(a, np.ones(a.shape[0])),
            ),
            "cholesky_inverse": (lambda s: s.cholesky_decomposition().inverse(), np.linalg.inv),
            "eigendecomposition": (lambda s: s.eigendecomposition(), np.linalg.eigh),
            "inverse": (lambda s: s.inverse(), np.linalg.inv),
        }

        self.dimensions = [5, 10, 25, 50, 100]

    def measure_execution_time(self, func: Callable[[], Any], warmup_runs: int = 1, measurement_runs: int = 5) -> float:
        """Return the median wall-clock time of ``func`` in milliseconds."""
        for _ in range(warmup_runs):
            func()

        times = []
        for _ in range(measurement_runs):
            start = time.perf_counter()
            func()
            times.append((time.perf_counter() - start) * 1000)
        return float(np.median(times))

    def benchmark_single_operation(self, operation: str, dimension: int) -> PerformanceResult:
        """Time one operation at one dimension."""
        if operation not in self.operations:
            raise ValueError(f"Unsupported operation: {operation}")
        symmetrix_func, numpy_func = self.operations[operation]
        matrix = random_spd_matrix(dimension)
        array = matrix.to_array()

        symmetrix_time = self.measure_execution_time(lambda: symmetrix_func(matrix))
        numpy_time = self.measure_execution_time(lambda: numpy_func(array))
        ratio = symmetrix_time / numpy_time if numpy_time > 0 else float("inf")

        return PerformanceResult(
            operation=operation,
            dimension=dimension,
            symmetrix_time_ms=symmetrix_time,
            numpy_time_ms=numpy_time,
            ratio=ratio,
        )

    def run_comprehensive_benchmark(
        self, operations: list[str] | None = None, dimensions: list[int] | None = None
    ) -> list[PerformanceResult]:
        """Run every requested operation at every requested dimension."""
        operations = operations or list(self.operations.keys())
        dimensions = dimensions or self.dimensions

        results = []
        total_benchmarks = len(operations) * len(dimensions)
        current_benchmark = 0
        for operation in operations:
            for dimension in dimensions:
                current_benchmark += 1
                print(f"Running benchmark {current_benchmark}/{total_benchmarks}: {operation} (dimension={dimension})")
                results.append(self.benchmark_single_operation(operation, dimension))

        self.results.extend(results)
        return results

    def generate_benchmark_summary(self, results: list[PerformanceResult] | None = None) -> BenchmarkSummary:
        """Generate summary statistics from benchmark results."""
        if results is None:
            results = self.results

        finite = [r.ratio for r in results if np.isfinite(r.ratio)]
        if not finite:
            return BenchmarkSummary(
                total_benchmarks=len(results),
                avg_ratio=0.0,
                max_ratio=0.0,
                min_ratio=0.0,
                operations_tested=sorted({r.operation for r in results}),
                dimensions_tested=sorted({r.dimension for r in results}),
            )

        return BenchmarkSummary(
            total_benchmarks=len(results),
            avg_ratio=float(np.mean(finite)),
            max_ratio=float(np.max(finite)),
            min_ratio=float(np.min(finite)),
            operations_tested=sorted({r.operation for r in results}),
            dimensions_tested=sorted({r.dimension for r in results}),
        )

    def generate_detailed_report(self, results: list[PerformanceResult] | None = None) -> str:
        """Generate a plain-text timing report."""
        if results is None:
            results = self.results

        if not results:
            return "No benchmark results available."

        summary = self.generate_benchmark_summary(results)

        report = []
        report.append("=" * 72)
        report.append("SYMMETRIX DECOMPOSITION BENCHMARK REPORT")
        report.append("=" * 72)
        report.append("")
        report.append("SUMMARY STATISTICS")
        report.append("-" * 40)
        report.append(f"Total benchmarks: {summary.total_benchmarks}")
        report.append(f"Average ratio to numpy: {summary.avg_ratio:.2f}x")
        report.append(f"Max ratio: {summary.max_ratio:.2f}x")
        report.append(f"Min ratio: {summary.min_ratio:.2f}x")
        report.append("")

        report.append("DETAILED RESULTS BY OPERATION")
        report.append("-" * 40)
        for operation in summary.operations_tested:
            report.append(f"\n{operation.upper()}")
            report.append(f"{'dimension':>10} {'symmetrix ms':>14} {'numpy ms':>10} {'ratio':>8}")
            for r in sorted((r for r in results if r.operation == operation), key=lambda r: r.dimension):
                report.append(f"{r.dimension:>10} {r.symmetrix_time_ms:>14.3f} {r.numpy_time_ms:>10.3f} {r.ratio:>8.1f}")

        return "\n".join(report)

    def save_results(self, filename: str = "benchmark_results.json"):
        """Save benchmark results to JSON file."""
        if not self.output_dir:
            print("No output directory configured. Results not saved.")
            return

        filepath = self.output_dir / filename
        results_dict = {
            "summary": self.generate_benchmark_summary().to_dict(),
            "results": [result.to_dict() for result in self.results],
        }

        with open(filepath, "w") as f:
            json.dump(results_dict, f, indent=2)

        print(f"Results saved to: {filepath}")

    def load_results(self, filename: str = "benchmark_results.json"):
        """Load benchmark results from JSON file."""
        if not self.output_dir:
            print("No output directory configured. Cannot load results.")
            return

        filepath = self.output_dir / filename
        if not filepath.exists():
            print(f"Results file not found: {filepath}")
            return

        with open(filepath) as f:
            data = json.load(f)

        self.results = [PerformanceResult(**result_dict) for result_dict in data.get("results", [])]
        print(f"Results loaded from: {filepath}")


def run_quick_benchmark(operations: list[str] | None = None, dimensions: list[int] | None = None) -> str:
    """Quick benchmark over small dimensions."""
    benchmark = PerformanceBenchmark()
    if dimensions is None:
        dimensions = [5, 20, 50]
    results = benchmark.run_comprehensive_benchmark(operations=operations, dimensions=dimensions)
    return benchmark.generate_detailed_report(results)
