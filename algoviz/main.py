"""
Algorithm Visualizer Core - Main Entry Point

This script provides a unified menu over all demos:
    1. Coding engines - Huffman, Fano, Shannon-Fano-Elias, LZ, Hamming
    2. Hamilton cycles - search trace and path validation
    3. Benchmarks - timing the compression engines
    4. Comparison - complexity and use-case overview

Run with:
    python -m algoviz.main
"""

import argparse
import logging


def print_banner():
    """Print the toolkit banner."""
    print()
    print("╔" + "═" * 68 + "╗")
    print("║" + " " * 68 + "║")
    print("║" + " " * 20 + "ALGORITHM VISUALIZER CORE" + " " * 23 + "║")
    print("║" + " " * 68 + "║")
    print("║" + " " * 10 + "Information theory and graph algorithms, step by step" + " " * 5 + "║")
    print("║" + " " * 68 + "║")
    print("╚" + "═" * 68 + "╝")
    print()


def print_menu():
    """Print the main menu."""
    print("Available demos:")
    print()
    print("  [1] Coding Engines")
    print("      Huffman, Fano, Shannon-Fano-Elias, Lempel-Ziv, Hamming(7,4)")
    print()
    print("  [2] Hamilton Cycles")
    print("      Backtracking search trace and path validation")
    print()
    print("  [3] Benchmarks")
    print("      Time the compression engines on synthetic alphabets")
    print()
    print("  [4] Comparison")
    print("      Complexity, use-cases, pros and cons")
    print()
    print("  [q] Quit")
    print()


def run_coding():
    """Run every coding demo."""
    from algoviz.coding import demo

    demo.demo_huffman()
    demo.demo_fano()
    demo.demo_shannon_fano_elias()
    demo.demo_lempel_ziv()
    demo.demo_hamming()
    print("\n✓ Coding demos complete!")


def run_graph():
    """Run the Hamilton cycle demos."""
    from algoviz.graph import demo

    demo.demo_search()
    demo.demo_validation()
    demo.demo_node_removal()
    print("\n✓ Graph demos complete!")


def run_benchmark(size: int = 1000, iterations: int = 5):
    """Benchmark all compression engines."""
    print("\n" + "=" * 70)
    print(f"RUNNING BENCHMARK (size={size}, iterations={iterations})")
    print("=" * 70)

    from algoviz.benchmark import compare_algorithms, format_results
    from algoviz.comparison import COMPRESSION_ALGORITHMS

    results = compare_algorithms(COMPRESSION_ALGORITHMS, size, iterations, seed=42)
    print(format_results(results))
    print("\n✓ Benchmark complete!")


def run_comparison():
    """Print the metadata for every algorithm."""
    print("\n" + "=" * 70)
    print("ALGORITHM COMPARISON")
    print("=" * 70)

    from algoviz.comparison import comparison_table, list_algorithms

    print(comparison_table())
    for info in list_algorithms():
        print(f"\n{info.name} ({info.type})")
        print(f"  {info.description}")
        print(f"  Use cases: {', '.join(info.use_cases)}")
        print(f"  Pros: {', '.join(info.pros)}")
        print(f"  Cons: {', '.join(info.cons)}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Algorithm Visualizer Core demos")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging")
    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    print_banner()

    while True:
        print_menu()

        choice = input("Enter your choice: ").strip().lower()

        if choice == '1':
            run_coding()
        elif choice == '2':
            run_graph()
        elif choice == '3':
            run_benchmark()
        elif choice == '4':
            run_comparison()
        elif choice == 'q':
            print("\nGoodbye!")
            break
        else:
            print("\nInvalid choice. Please try again.")

        print()
        input("Press Enter to continue...")
        print("\n" * 2)


if __name__ == "__main__":
    main()
