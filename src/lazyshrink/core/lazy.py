"""Lazily generated sequences, traversable once.

A LazySequence holds a buffer of realized values and a queue of pending
thunks. Generators append values directly, or append thunks that are
not run until traversal reaches them. A thunk may append further values
and further thunks, which is how arbitrarily large (or unbounded)
families of candidates are described without materializing them.

Ordering:
    Realized values come out first, in insertion order. When the buffer
    runs dry the oldest pending thunk runs. Thunks it pushes are queued
    ahead of its older siblings, so everything a thunk produces
    (recursively) comes out before the output of the next sibling.
    Nesting thunks gives list structure; pushing sibling thunks gives a
    tree, flattened left to right and depth first, on demand.

Consumption:
    Retrieval removes the element. There is no random access and no
    re-traversal. Once exhausted, next() keeps returning EXHAUSTED
    without touching any state.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any, Final, final

from lazyshrink.core.thunk import Thunk

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

__all__ = ["EXHAUSTED", "LazySequence"]


@final
class _Exhausted:
    """Type of the EXHAUSTED sentinel."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "EXHAUSTED"

    def __bool__(self) -> bool:
        return False


EXHAUSTED: Final = _Exhausted()
"""Returned by LazySequence.next() when no value remains.

None cannot play this role: it is a legitimate element (the empty
optional is shrunk to None first).
"""

_NO_ITEM: Final = object()


class LazySequence[T]:
    """Lazily generated sequence of T, only traversable once.

    Example:
        >>> def later(seq, rest):
        ...     seq.push(rest[0])
        ...     seq.push_thunk(rest[1:], lambda s, r: s.push(r[0]))
        >>> seq = LazySequence.create(lambda s: (s.push(3), s.push_thunk([4, 5], later)))
        >>> seq.drain()
        [3, 4, 5]
        >>> seq.next()
        EXHAUSTED
    """

    __slots__ = ("_batch", "_head", "_thunks")

    def __init__(self) -> None:
        """Create an empty sequence: no realized values, no pending thunks."""
        self._head: deque[T] = deque()
        self._thunks: deque[Thunk[LazySequence[T], Any]] = deque()
        # Thunks pushed by the thunk currently running; None outside a run.
        self._batch: list[Thunk[LazySequence[T], Any]] | None = None

    @classmethod
    def from_values(cls, values: Iterable[T]) -> LazySequence[T]:
        """Create a sequence whose values are all realized immediately."""
        seq: LazySequence[T] = cls()
        seq._head.extend(values)
        return seq

    @classmethod
    def create(cls, builder: Callable[[LazySequence[T]], object]) -> LazySequence[T]:
        """Create an empty sequence and let builder populate it."""
        seq: LazySequence[T] = cls()
        builder(seq)
        return seq

    def push(self, value: T) -> None:
        """Append a realized value, ordered before every pending thunk."""
        self._head.append(value)

    def push_thunk[S](self, state: S, fn: Callable[[LazySequence[T], S], None]) -> None:
        """Append a thunk that will run fn(self, state) once, when needed.

        Thunks pushed while another thunk runs are nested under it: they
        are resolved before that thunk's older siblings.
        """
        thunk: Thunk[LazySequence[T], S] = Thunk(state, fn)
        if self._batch is not None:
            self._batch.append(thunk)
        else:
            self._thunks.append(thunk)

    def push_map[A](self, source: Iterable[A], fn: Callable[[A], T]) -> None:
        """Lazily append fn(x) for each x of source.

        Each thunk pulls exactly one element from source, realizes one
        value and schedules a thunk for the remainder, so source is never
        consumed further than traversal demands.
        """
        self.push_thunk((iter(source), fn), _map_step)

    def push_map_env[A, E](
        self, source: Iterable[A], env: E, fn: Callable[[A, E], T]
    ) -> None:
        """Lazily append fn(x, env) for each x of source.

        env is threaded through every call; fn may mutate it.
        """
        self.push_thunk((iter(source), env, fn), _map_env_step)

    def next(self) -> T | _Exhausted:
        """Remove and return the next value, or EXHAUSTED.

        Runs as many pending thunks as needed to realize one value. Each
        call completes synchronously.

        A thunk may call next() on its own sequence; thunks it pushed
        before the call are resolved ahead of its older siblings.
        """
        head = self._head
        thunks = self._thunks
        batch = self._batch
        if batch:
            # Called from inside a running thunk: its children go first.
            thunks.extendleft(reversed(batch))
            batch.clear()
        while not head and thunks:
            self._run(thunks.popleft())
        if head:
            return head.popleft()
        return EXHAUSTED

    def next_or[D](self, default: D) -> T | D:
        """Remove and return the next value, or default when exhausted."""
        value = self.next()
        if value is EXHAUSTED:
            return default
        return value  # type: ignore[return-value]

    def drain(self, limit: int | None = None) -> list[T]:
        """Consume up to limit values (all remaining if None) into a list."""
        out: list[T] = []
        while limit is None or len(out) < limit:
            value = self.next()
            if value is EXHAUSTED:
                break
            out.append(value)  # type: ignore[arg-type]
        return out

    def _run(self, thunk: Thunk[LazySequence[T], Any]) -> None:
        outer = self._batch
        self._batch = []
        try:
            thunk.run(self)
        finally:
            batch, self._batch = self._batch, outer
            self._thunks.extendleft(reversed(batch))

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        value = self.next()
        if value is EXHAUSTED:
            raise StopIteration
        return value  # type: ignore[return-value]

    @property
    def buffered(self) -> int:
        """Number of realized values waiting in the buffer."""
        return len(self._head)

    @property
    def pending(self) -> int:
        """Number of thunks waiting to run."""
        return len(self._thunks)

    def is_exhausted(self) -> bool:
        """True when nothing is buffered and no thunk is pending.

        A sequence that is not exhausted may still yield nothing: its
        pending thunks can all turn out empty.
        """
        return not self._head and not self._thunks

    def __repr__(self) -> str:
        return f"LazySequence(buffered={len(self._head)}, pending={len(self._thunks)})"


def _map_step[A, T](
    seq: LazySequence[T], state: tuple[Iterator[A], Callable[[A], T]]
) -> None:
    it, fn = state
    item = next(it, _NO_ITEM)
    if item is _NO_ITEM:
        return
    seq.push(fn(item))  # type: ignore[arg-type]
    seq.push_thunk(state, _map_step)


def _map_env_step[A, E, T](
    seq: LazySequence[T], state: tuple[Iterator[A], E, Callable[[A, E], T]]
) -> None:
    it, env, fn = state
    item = next(it, _NO_ITEM)
    if item is _NO_ITEM:
        return
    seq.push(fn(item, env))  # type: ignore[arg-type]
    seq.push_thunk(state, _map_env_step)
