"""Shrinkers for variable-length collections: lists, text and maps.

The list rule drives all three. For a non-empty list v the candidates are:

    1. []
    2. if len(v) > 2: v[:mid] and v[mid:], with mid = len(v) // 2
    3. for each index i, in order:
           v with element i removed,
           then every shrink of v[i] substituted at i

Each phase is generated by a thunk nested under the previous one, so
asking for the first candidate costs nothing beyond building [].

Text is shrunk as the list of its characters and joined back; a map is
shrunk as the list of its (key, value) pairs and rebuilt with dict(),
so a key duplicated by shrinking resolves to the last pair.

Python 3.13+.
"""

from __future__ import annotations

from typing import Final

from lazyshrink.core import LazySequence
from lazyshrink.errors import ValueRangeError

from .composites import PairShrinker
from .primitives import chars
from .protocol import Shrinker

__all__ = [
    "DictShrinker",
    "ListShrinker",
    "TextShrinker",
    "dicts",
    "lists",
    "texts",
]

type _IndexState[T] = tuple[int, list[T]]


class ListShrinker[T](Shrinker[list[T]]):
    """Shrinker for homogeneous lists.

    Attributes:
        element: Shrinker used for in-place shrinks and clones of elements
    """

    __slots__ = ("element",)

    def __init__(self, element: Shrinker[T]) -> None:
        self.element = element

    def shrink(self, value: list[T]) -> LazySequence[list[T]]:
        if not isinstance(value, list):
            msg = f"Expected a list, got {type(value).__name__}"
            raise ValueRangeError(msg)
        seq: LazySequence[list[T]] = LazySequence()
        if not value:
            return seq
        seq.push([])
        seq.push_thunk(value, self._halves)
        return seq

    def _halves(self, seq: LazySequence[list[T]], value: list[T]) -> None:
        items = self.clone(value)
        if len(items) > 2:
            mid = len(items) // 2
            seq.push(self.clone(items[:mid]))
            seq.push(self.clone(items[mid:]))
        seq.push_thunk(items, self._each_index)

    def _each_index(self, seq: LazySequence[list[T]], items: list[T]) -> None:
        for index in range(len(items)):
            seq.push_thunk((index, items), self._remove_at)

    def _remove_at(self, seq: LazySequence[list[T]], state: _IndexState[T]) -> None:
        index, items = state
        remaining = self.clone(items)
        del remaining[index]
        seq.push(remaining)
        seq.push_thunk(state, self._shrink_at)

    def _shrink_at(self, seq: LazySequence[list[T]], state: _IndexState[T]) -> None:
        index, items = state
        seq.push_map_env(self.element.shrink(items[index]), state, self._substitute)

    def _substitute(self, candidate: T, state: _IndexState[T]) -> list[T]:
        index, items = state
        replaced = self.clone(items)
        replaced[index] = candidate
        return replaced

    def clone(self, value: list[T]) -> list[T]:
        clone = self.element.clone
        return [clone(item) for item in value]

    def __repr__(self) -> str:
        return f"lists({self.element!r})"


class TextShrinker(Shrinker[str]):
    """Shrinker for strings, via the list of their characters."""

    __slots__ = ("_chars",)

    def __init__(self) -> None:
        self._chars: ListShrinker[str] = ListShrinker(chars())

    def shrink(self, value: str) -> LazySequence[str]:
        if not isinstance(value, str):
            msg = f"Expected a str, got {type(value).__name__}"
            raise ValueRangeError(msg)
        seq: LazySequence[str] = LazySequence()
        if value:
            seq.push_map(self._chars.shrink(list(value)), "".join)
        return seq

    def clone(self, value: str) -> str:
        return value

    def __repr__(self) -> str:
        return "texts()"


class DictShrinker[K, V](Shrinker[dict[K, V]]):
    """Shrinker for dicts, via the list of their items.

    Item order follows the dict's insertion order; nothing depends on it.
    """

    __slots__ = ("_items", "key", "value")

    def __init__(self, key: Shrinker[K], value: Shrinker[V]) -> None:
        self.key = key
        self.value = value
        self._items: ListShrinker[tuple[K, V]] = ListShrinker(PairShrinker(key, value))

    def shrink(self, value: dict[K, V]) -> LazySequence[dict[K, V]]:
        if not isinstance(value, dict):
            msg = f"Expected a dict, got {type(value).__name__}"
            raise ValueRangeError(msg)
        seq: LazySequence[dict[K, V]] = LazySequence()
        if value:
            seq.push_map(self._items.shrink(list(value.items())), dict)
        return seq

    def clone(self, value: dict[K, V]) -> dict[K, V]:
        return {self.key.clone(k): self.value.clone(v) for k, v in value.items()}

    def __repr__(self) -> str:
        return f"dicts({self.key!r}, {self.value!r})"


_TEXTS: Final = TextShrinker()


def lists[T](element: Shrinker[T]) -> ListShrinker[T]:
    """Shrinker for lists whose elements are shrunk by element."""
    return ListShrinker(element)


def texts() -> TextShrinker:
    """Shrinker for str."""
    return _TEXTS


def dicts[K, V](key: Shrinker[K], value: Shrinker[V]) -> DictShrinker[K, V]:
    """Shrinker for dicts with keys shrunk by key and values by value."""
    return DictShrinker(key, value)
