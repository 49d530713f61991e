"""Enumerations for lazyshrink type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class IntPolicy(StrEnum):
    """How shrinker inference treats plain Python ints.

    StrEnum provides automatic string conversion:
    str(IntPolicy.SIGNED) == "signed"
    """

    UNSIGNED_WHEN_NONNEGATIVE = "unsigned_when_nonnegative"
    """Non-negative ints use the unsigned rule; negative ints are signed."""

    SIGNED = "signed"
    """Every int is signed and therefore offers no candidates."""


__all__ = [
    "IntPolicy",
]
