"""
Coding Engines Demo

Walks through every coding engine step by step, printing each recorded
step the way a visualizer would play it back.

Run with:
    python -m algoviz.coding.demo
"""

import argparse
import logging

from algoviz.common import (
    Symbol, average_code_length, encode_text, entropy, flip_bit,
)
from algoviz.coding import (
    build_huffman_coding, fano_encode, shannon_fano_elias_encode,
    lz_compress, lz_decompress, hamming_encode, hamming_decode,
)


def _print_steps(steps):
    for i, step in enumerate(steps, 1):
        print(f"  {i:>2}. {step}")


def demo_huffman():
    """
    Huffman on the classic {A:3, B:2, C:1} frequency table.

    "AAABBC" compresses to 9 bits instead of 6 × 8 = 48.
    """
    print("\n" + "=" * 70)
    print("DEMO 1: HUFFMAN CODING")
    print("=" * 70)

    result = build_huffman_coding({"A": 3, "B": 2, "C": 1})
    _print_steps(result.steps)
    print()
    print(result.summary())

    encoded = encode_text(result.codes, "AAABBC")
    print(f"\n'AAABBC' -> {encoded} ({len(encoded)} bits)")
    return result


def demo_fano():
    """Fano splitting on a skewed four-symbol source."""
    print("\n" + "=" * 70)
    print("DEMO 2: FANO CODING")
    print("=" * 70)

    alphabet = [Symbol("A", 0.35), Symbol("B", 0.25), Symbol("C", 0.2),
                Symbol("D", 0.15), Symbol("E", 0.05)]
    result = fano_encode(alphabet)
    for step in result.steps:
        print("  " + "  " * step.depth + str(step))
    print()
    print(result.summary())

    avg = average_code_length(result.codes, alphabet)
    print(f"\nEntropy: {entropy(alphabet):.3f} bits, average length: {avg:.3f} bits")
    return result


def demo_shannon_fano_elias():
    """Shannon-Fano-Elias codes from interval midpoints."""
    print("\n" + "=" * 70)
    print("DEMO 3: SHANNON-FANO-ELIAS CODING")
    print("=" * 70)

    result = shannon_fano_elias_encode({"A": 0.25, "B": 0.5, "C": 0.125, "D": 0.125})
    _print_steps(result.steps)
    print()
    print(result.summary())
    return result


def demo_lempel_ziv():
    """LZ tokens for a repetitive string, then replay."""
    print("\n" + "=" * 70)
    print("DEMO 4: LEMPEL-ZIV COMPRESSION")
    print("=" * 70)

    text = "ABABCABABC"
    result = lz_compress(text)
    print(f"\nInput: {text}")
    print(result.summary())
    print(f"\nDictionary: {result.dictionary}")
    print(f"Replay: {lz_decompress(result.steps)}")
    return result


def demo_hamming():
    """Encode 1011, flip one bit, then detect and correct it."""
    print("\n" + "=" * 70)
    print("DEMO 5: HAMMING(7,4)")
    print("=" * 70)

    encoded = hamming_encode("1011")
    print(encoded.summary())

    received = flip_bit(encoded.encoded, 5)
    print(f"\nFlipping bit 5: {encoded.encoded} -> {received}")
    decoded = hamming_decode(received)
    print(decoded.summary())
    return decoded


def main():
    """Run all coding demos."""
    parser = argparse.ArgumentParser(description="Coding engine demos")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging")
    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    demo_huffman()
    demo_fano()
    demo_shannon_fano_elias()
    demo_lempel_ziv()
    demo_hamming()

    print("\n✓ Coding demos complete!")


if __name__ == "__main__":
    main()
