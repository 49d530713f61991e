"""The shrink protocol.

A shrinker turns one value into a LazySequence of strictly simpler
values, simplest first. Shrinking is a one-shot query: a shrinker holds
no per-value state and never mutates the value it is given. Composite
shrinkers are built from the shrinkers of their components and derive
every candidate from clones, never from the original.

Two ways to take part:
    Shrinker: an object that knows how to shrink values of one shape.
        Built-in shapes are covered by the primitives, composites and
        sequences modules.
    Shrinkable: a value type that knows how to shrink itself, by
        defining a shrink() method. SelfShrinker adapts such values so
        they can sit inside lists, tuples and maps.

Python 3.13+.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from lazyshrink.core import LazySequence

__all__ = ["SelfShrinker", "Shrinkable", "Shrinker"]


class Shrinker[T](ABC):
    """Capability to shrink values of type T.

    shrink() has no default: every shape states its
    candidates explicitly, even when there are none.

    clone() is the duplication capability composites rely on: several
    candidates are derived from the same original component, so each
    candidate receives its own copy. The default deep-copies; shrinkers
    of immutable values override it to return the value itself.
    """

    __slots__ = ()

    @abstractmethod
    def shrink(self, value: T) -> LazySequence[T]:
        """Return the lazily generated candidates for value, simplest first."""

    def clone(self, value: T) -> T:
        """Return an independent duplicate of value."""
        return copy.deepcopy(value)


@runtime_checkable
class Shrinkable(Protocol):
    """Protocol for value types that shrink themselves.

    Implementations return a LazySequence of simpler instances of their
    own type and must never offer the instance itself as a candidate.
    """

    def shrink(self) -> LazySequence[Self]:
        """Return the lazily generated candidates for self."""
        ...  # pragma: no cover  # Protocol stub - not executable


class SelfShrinker[T: Shrinkable](Shrinker[T]):
    """Shrinker delegating to the value's own shrink() method."""

    __slots__ = ()

    def shrink(self, value: T) -> LazySequence[T]:
        return value.shrink()

    def __repr__(self) -> str:
        return "self_shrinking()"
