"""Value wrappers for shapes Python has no built-in type for.

Python represents most shrinkable shapes natively (None, bool, int,
float, str, tuple, list, dict). Three shapes need an explicit wrapper
so that shrinkers and inference can tell them apart:

- Ok / Err: the two variants of a result value
- Box: a single-owner wrapper around one value
- Shared: a shared-owner wrapper; compared by identity

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Box", "Err", "Ok", "Shared"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success variant of a result.

    Example:
        >>> Ok(3).value
        3
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failure variant of a result."""

    value: E


@dataclass(frozen=True, slots=True)
class Box[T]:
    """Single-owner wrapper around a value.

    Two boxes are equal when their contents are equal.
    """

    value: T


@dataclass(frozen=True, slots=True, eq=False)
class Shared[T]:
    """Shared-owner wrapper around a value.

    Holders of the same Shared see the same object; equality is identity.
    Shrinking never mutates an existing Shared: every candidate is a fresh
    Shared around a fresh value.
    """

    value: T
