"""Hypothesis strategies for lazyshrink property-based testing.

This package provides reusable strategies for generating values to be
shrunk, together with the shrinker that describes their shape.

Usage:
    from tests.strategies import shrinkable_values, uint_values
    from tests.strategies.shrinkable import leaf_shrinkables, weight

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - shrinkable_values, leaf_shrinkables, uint_values
"""

from .shrinkable import (
    hashable_shrinkables,
    leaf_shrinkables,
    shrinkable_values,
    uint_values,
    weight,
)

__all__ = [
    "hashable_shrinkables",
    "leaf_shrinkables",
    "shrinkable_values",
    "uint_values",
    "weight",
]
