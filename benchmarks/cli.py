"""Command-line interface for symmetrix benchmarking."""

import argparse
import sys
from pathlib import Path

from .performance_benchmark import PerformanceBenchmark, run_quick_benchmark


def parse_list_argument(arg_string: str) -> list[str]:
    """Parse comma-separated string into list."""
    if not arg_string:
        return []
    return [item.strip() for item in arg_string.split(",")]


def parse_int_list_argument(arg_string: str) -> list[int]:
    """Parse comma-separated string of integers into list."""
    if not arg_string:
        return []
    return [int(item.strip()) for item in arg_string.split(",")]


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="symmetrix decomposition benchmarks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Quick benchmark with default settings
  python -m benchmarks.cli --quick

  # Time the factorizations at chosen dimensions
  python -m benchmarks.cli --operations cholesky,eigendecomposition --dimensions 10,50,100

  # Load and display previous results
  python -m benchmarks.cli --load-results ./benchmark_results/benchmark_results.json
        """,
    )

    parser.add_argument("--quick", "-q", action="store_true", help="Run quick benchmark over small dimensions")
    parser.add_argument(
        "--operations", "-o", type=str, help="Comma-separated list of operations (e.g., cholesky,inverse)"
    )
    parser.add_argument("--dimensions", "-n", type=str, help="Comma-separated list of dimensions (e.g., 10,50,100)")
    parser.add_argument(
        "--output-dir",
        "-d",
        type=str,
        default="benchmark_results",
        help="Directory to save benchmark results (default: benchmark_results)",
    )
    parser.add_argument("--no-save", action="store_true", help="Do not save benchmark results")
    parser.add_argument("--load-results", type=str, help="Load and display results from existing JSON file")
    parser.add_argument("--list-operations", action="store_true", help="List available operations and exit")

    args = parser.parse_args()

    if args.list_operations:
        benchmark = PerformanceBenchmark()
        print("Available operations:")
        for operation in sorted(benchmark.operations):
            print(f"  - {operation}")
        sys.exit(0)

    if args.load_results:
        path = Path(args.load_results)
        benchmark = PerformanceBenchmark(output_dir=str(path.parent))
        benchmark.load_results(path.name)
        print(benchmark.generate_detailed_report())
        sys.exit(0)

    operations = parse_list_argument(args.operations) if args.operations else None
    dimensions = parse_int_list_argument(args.dimensions) if args.dimensions else None

    if args.quick:
        print(run_quick_benchmark(operations=operations, dimensions=dimensions))
        sys.exit(0)

    try:
        benchmark = PerformanceBenchmark(output_dir=None if args.no_save else args.output_dir)
        results = benchmark.run_comprehensive_benchmark(operations=operations, dimensions=dimensions)
        print("\n" + benchmark.generate_detailed_report(results))
        if not args.no_save:
            benchmark.save_results()
    except KeyboardInterrupt:
        print("\nBenchmark interrupted by user.")
        sys.exit(1)
    except ValueError as e:
        print(f"Error running benchmark: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
