"""
Benchmark Demo

Run with:
    python -m algoviz.benchmark.demo --size 1000 --iterations 10
"""

import argparse
import logging

from algoviz.benchmark import compare_algorithms, format_results
from algoviz.comparison import COMPRESSION_ALGORITHMS, comparison_table


def main():
    parser = argparse.ArgumentParser(description="Benchmark the compression engines")
    parser.add_argument("--size", type=int, default=1000,
                        help="letters drawn for the test alphabet")
    parser.add_argument("--iterations", type=int, default=5)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging")
    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    print("\n" + "=" * 70)
    print("COMPLEXITY OVERVIEW")
    print("=" * 70)
    print(comparison_table(list(COMPRESSION_ALGORITHMS)))

    print("\n" + "=" * 70)
    print(f"BENCHMARK (size={args.size}, iterations={args.iterations})")
    print("=" * 70)
    results = compare_algorithms(COMPRESSION_ALGORITHMS, args.size,
                                 args.iterations, args.seed)
    print(format_results(results))

    print("\n✓ Benchmark complete!")


if __name__ == "__main__":
    main()
