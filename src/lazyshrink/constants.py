"""Shared constants for lazyshrink.

This module provides centralized numeric limits used across the core
and shrink packages. Placing constants here avoids circular imports
and provides a single source of truth.

Constants are grouped by domain:
- Integer widths: Range checks for unsigned shrinkers
- Ordering thresholds: Where the unsigned rule switches to bisection
- Tuple arity: Supported fixed-arity tuple shapes

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Integer widths
    "U8_MAX",
    "NATIVE_UINT_BITS",
    "SUPPORTED_UINT_BITS",
    # Ordering thresholds
    "SMALL_UINT_LIMIT",
    # Tuple arity
    "MIN_TUPLE_ARITY",
    "MAX_TUPLE_ARITY",
]

# ============================================================================
# INTEGER WIDTHS
# ============================================================================

# Largest value accepted by the 8-bit unsigned shrinker.
U8_MAX: int = 0xFF

# Width used for "native" unsigned integers. Python ints are unbounded;
# 64 bits matches the machine word on every platform we target.
NATIVE_UINT_BITS: int = 64

# Widths accepted by unsigned(bits=...) and InferenceConfig.uint_bits.
SUPPORTED_UINT_BITS: frozenset[int] = frozenset({8, 16, 32, 64})

# ============================================================================
# ORDERING THRESHOLDS
# ============================================================================

# Values below this limit are shrunk by enumerating their three nearest
# predecessors. Values at or above it use mpowers_of_two bisection.
SMALL_UINT_LIMIT: int = 8

# ============================================================================
# TUPLE ARITY
# ============================================================================

# Arity 2 is served by the pair shrinker; 3 through 6 by the tuple shrinker.
MIN_TUPLE_ARITY: int = 2
MAX_TUPLE_ARITY: int = 6
