"""
Common utilities shared by every engine.

This module provides:
    - ValidationError: the single error type for malformed input
    - Symbol / alphabet helpers: validation, normalization, sorting
    - AlgorithmStep: base record for replayable steps
    - Code-table helpers: prefix-free check, encode/decode, metrics
    - Bit-string helpers
"""

from .errors import ValidationError
from .symbols import (
    Symbol,
    as_alphabet,
    validate_alphabet,
    sort_by_probability,
    normalize,
    total_probability,
)
from .steps import AlgorithmStep
from .codes import (
    CodeResult,
    CompressionMetrics,
    is_prefix_free,
    encode_text,
    decode_bits,
    entropy,
    average_code_length,
    code_table,
    compression_metrics,
)
from .bits import parse_bits, bits_to_str, flip_bit

__all__ = [
    "ValidationError",
    "Symbol",
    "as_alphabet",
    "validate_alphabet",
    "sort_by_probability",
    "normalize",
    "total_probability",
    "AlgorithmStep",
    "CodeResult",
    "CompressionMetrics",
    "is_prefix_free",
    "encode_text",
    "decode_bits",
    "entropy",
    "average_code_length",
    "code_table",
    "compression_metrics",
    "parse_bits",
    "bits_to_str",
    "flip_bit",
]
