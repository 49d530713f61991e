"""Shrinkers for fixed-shape composite values.

Composites shrink one component at a time and re-wrap the result; the
original value is never mutated. Components that are carried over into a
candidate unchanged are cloned for that candidate.

Ordering:
    pairs(a, b)        shrinks of the first element with the second
                       unchanged, then shrinks of the second element
                       with the first unchanged
    tuples(...)        same, position by position, for arity 3..6
    optionals(inner)   None first, then every shrink of the value
    results(ok, err)   shrinks of the payload, in the same variant
    boxes / shared     shrinks of the contents, each in a fresh wrapper

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from lazyshrink.constants import MAX_TUPLE_ARITY, MIN_TUPLE_ARITY
from lazyshrink.core import LazySequence
from lazyshrink.errors import ArityError, ValueRangeError
from lazyshrink.values import Box, Err, Ok, Shared

from .protocol import Shrinker

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    "BoxShrinker",
    "OptionalShrinker",
    "PairShrinker",
    "ResultShrinker",
    "SharedShrinker",
    "TupleShrinker",
    "boxes",
    "optionals",
    "pairs",
    "results",
    "shared",
    "tuples",
]


def _check_arity(value: object, arity: int) -> tuple[Any, ...]:
    if not isinstance(value, tuple) or len(value) != arity:
        msg = f"Expected a tuple of {arity} elements, got {value!r}"
        raise ArityError(msg)
    return value


class PairShrinker[A, B](Shrinker[tuple[A, B]]):
    """Shrinker for 2-tuples.

    Written out separately from TupleShrinker: each half only needs its
    partner cloned, not the whole tuple.
    """

    __slots__ = ("first", "second")

    def __init__(self, first: Shrinker[A], second: Shrinker[B]) -> None:
        self.first = first
        self.second = second

    def shrink(self, value: tuple[A, B]) -> LazySequence[tuple[A, B]]:
        a, b = _check_arity(value, 2)
        seq: LazySequence[tuple[A, B]] = LazySequence()
        seq.push_map_env(self.first.shrink(a), self.second.clone(b), self._with_second)
        seq.push_map_env(self.second.shrink(b), self.first.clone(a), self._with_first)
        return seq

    def _with_second(self, candidate: A, b: B) -> tuple[A, B]:
        return (candidate, self.second.clone(b))

    def _with_first(self, candidate: B, a: A) -> tuple[A, B]:
        return (self.first.clone(a), candidate)

    def clone(self, value: tuple[A, B]) -> tuple[A, B]:
        a, b = _check_arity(value, 2)
        return (self.first.clone(a), self.second.clone(b))

    def __repr__(self) -> str:
        return f"pairs({self.first!r}, {self.second!r})"


class TupleShrinker(Shrinker[tuple[Any, ...]]):
    """Shrinker for tuples of fixed arity, one shrinker per position.

    Every shrink of position 0 comes first (other positions cloned from
    the original), then every shrink of position 1, and so on.
    """

    __slots__ = ("elements",)

    def __init__(self, *elements: Shrinker[Any]) -> None:
        if not MIN_TUPLE_ARITY <= len(elements) <= MAX_TUPLE_ARITY:
            msg = (
                f"Tuple arity must be between {MIN_TUPLE_ARITY} and "
                f"{MAX_TUPLE_ARITY}, got {len(elements)}"
            )
            raise ArityError(msg)
        self.elements = elements

    @property
    def arity(self) -> int:
        return len(self.elements)

    def shrink(self, value: tuple[Any, ...]) -> LazySequence[tuple[Any, ...]]:
        original = self.clone(_check_arity(value, self.arity))
        seq: LazySequence[tuple[Any, ...]] = LazySequence()
        for index, (element, item) in enumerate(zip(self.elements, original, strict=True)):
            seq.push_map_env(element.shrink(item), (index, original), self._substitute)
        return seq

    def _substitute(self, candidate: Any, env: tuple[int, tuple[Any, ...]]) -> tuple[Any, ...]:
        index, original = env
        return tuple(
            candidate if position == index else element.clone(item)
            for position, (element, item) in enumerate(zip(self.elements, original, strict=True))
        )

    def clone(self, value: tuple[Any, ...]) -> tuple[Any, ...]:
        return tuple(
            element.clone(item) for element, item in zip(self.elements, value, strict=True)
        )

    def __repr__(self) -> str:
        return f"tuples({', '.join(repr(e) for e in self.elements)})"


class OptionalShrinker[T](Shrinker[T | None]):
    """Shrinker for optional values, with None as the empty case.

    A present value first offers None, then each of its own shrinks.
    When T itself admits None (an optional of an optional, or of the
    unit), the two empty cases are indistinguishable.
    """

    __slots__ = ("inner",)

    def __init__(self, inner: Shrinker[T]) -> None:
        self.inner = inner

    def shrink(self, value: T | None) -> LazySequence[T | None]:
        seq: LazySequence[T | None] = LazySequence()
        if value is None:
            return seq
        seq.push(None)
        seq.push_map(self.inner.shrink(value), _present)
        return seq

    def clone(self, value: T | None) -> T | None:
        if value is None:
            return None
        return self.inner.clone(value)

    def __repr__(self) -> str:
        return f"optionals({self.inner!r})"


def _present[T](value: T) -> T | None:
    return value


class ResultShrinker[T, E](Shrinker[Ok[T] | Err[E]]):
    """Shrinker for Ok / Err results.

    Only the payload of the variant present is shrunk; the other variant
    is never produced.
    """

    __slots__ = ("err", "ok")

    def __init__(self, ok: Shrinker[T], err: Shrinker[E]) -> None:
        self.ok = ok
        self.err = err

    def shrink(self, value: Ok[T] | Err[E]) -> LazySequence[Ok[T] | Err[E]]:
        seq: LazySequence[Ok[T] | Err[E]] = LazySequence()
        match value:
            case Ok(payload):
                seq.push_map(self.ok.shrink(payload), Ok)
            case Err(payload):
                seq.push_map(self.err.shrink(payload), Err)
            case _:
                msg = f"Expected Ok or Err, got {type(value).__name__}"
                raise ValueRangeError(msg)
        return seq

    def clone(self, value: Ok[T] | Err[E]) -> Ok[T] | Err[E]:
        match value:
            case Ok(payload):
                return Ok(self.ok.clone(payload))
            case Err(payload):
                return Err(self.err.clone(payload))
            case _:
                msg = f"Expected Ok or Err, got {type(value).__name__}"
                raise ValueRangeError(msg)

    def __repr__(self) -> str:
        return f"results({self.ok!r}, {self.err!r})"


class _WrapperShrinker[T, W](Shrinker[W]):
    """Shrinks the wrapped value and re-wraps each candidate freshly."""

    __slots__ = ("inner",)

    wrapper: Callable[[Any], Any]
    name: str

    def __init__(self, inner: Shrinker[T]) -> None:
        self.inner = inner

    def shrink(self, value: W) -> LazySequence[W]:
        if not isinstance(value, self.wrapper):  # type: ignore[arg-type]
            msg = f"Expected {self.wrapper.__name__}, got {type(value).__name__}"
            raise ValueRangeError(msg)
        seq: LazySequence[W] = LazySequence()
        seq.push_map(self.inner.shrink(value.value), self.wrapper)  # type: ignore[attr-defined]
        return seq

    def __repr__(self) -> str:
        return f"{self.name}({self.inner!r})"


class BoxShrinker[T](_WrapperShrinker[T, Box[T]]):
    """Shrinker for single-owner Box values."""

    __slots__ = ()

    wrapper = Box
    name = "boxes"

    def clone(self, value: Box[T]) -> Box[T]:
        return Box(self.inner.clone(value.value))


class SharedShrinker[T](_WrapperShrinker[T, Shared[T]]):
    """Shrinker for shared-owner Shared values.

    Cloning a Shared shares it: every holder keeps pointing at the same
    object. Candidates are always fresh Shared instances.
    """

    __slots__ = ()

    wrapper = Shared
    name = "shared"

    def clone(self, value: Shared[T]) -> Shared[T]:
        return value


def pairs[A, B](first: Shrinker[A], second: Shrinker[B]) -> PairShrinker[A, B]:
    """Shrinker for 2-tuples."""
    return PairShrinker(first, second)


def tuples(*elements: Shrinker[Any]) -> Shrinker[Any]:
    """Shrinker for tuples of arity 2..6.

    Arity 2 is served by PairShrinker.

    Raises:
        ArityError: If the number of element shrinkers is outside 2..6
    """
    if len(elements) == MIN_TUPLE_ARITY:
        return PairShrinker(*elements)
    return TupleShrinker(*elements)


def optionals[T](inner: Shrinker[T]) -> OptionalShrinker[T]:
    """Shrinker for values that may be None."""
    return OptionalShrinker(inner)


def results[T, E](ok: Shrinker[T], err: Shrinker[E]) -> ResultShrinker[T, E]:
    """Shrinker for Ok / Err results."""
    return ResultShrinker(ok, err)


def boxes[T](inner: Shrinker[T]) -> BoxShrinker[T]:
    """Shrinker for Box values."""
    return BoxShrinker(inner)


def shared[T](inner: Shrinker[T]) -> SharedShrinker[T]:
    """Shrinker for Shared values."""
    return SharedShrinker(inner)
