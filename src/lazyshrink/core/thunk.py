"""Deferred steps for lazily generated sequences.

A Thunk freezes a unit of work together with the state it needs. The
work runs later, at most once, in the context of a target object (the
LazySequence that owns the thunk), and may push further values or
further thunks onto that target.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from lazyshrink.errors import DeferredStepReusedError

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["Thunk"]

# Placeholder left behind once a thunk's state has been handed to its function.
_SPENT: Final = object()


@dataclass(slots=True)
class Thunk[L, S]:
    """A frozen computation resolved in the context of an L value.

    Type Parameters:
        L: The target the computation mutates (normally a LazySequence)
        S: The captured state consumed by the computation

    Single Use:
        run() hands the captured state to the function and drops the
        thunk's own reference to it. A second run() raises
        DeferredStepReusedError instead of replaying stale state.

    Mutability Note:
        Intentionally mutable (not frozen=True): running the thunk
        releases its state and flips has_run.

    Example:
        >>> out = []
        >>> t = Thunk([4, 5], lambda target, state: target.extend(state))
        >>> t.run(out)
        >>> out
        [4, 5]
        >>> t.has_run
        True
    """

    state: S
    fn: Callable[[L, S], None]
    _has_run: bool = field(default=False, init=False, repr=False)

    @property
    def has_run(self) -> bool:
        """True once run() has been called."""
        return self._has_run

    def run(self, target: L) -> None:
        """Invoke the frozen computation against target.

        Raises:
            DeferredStepReusedError: If the thunk has already run
        """
        if self._has_run:
            msg = f"Deferred step {self.fn!r} has already run"
            raise DeferredStepReusedError(msg)
        self._has_run = True
        state = self.state
        self.state = _SPENT  # type: ignore[assignment]
        self.fn(target, state)

    def __repr__(self) -> str:
        status = "spent" if self._has_run else "pending"
        name = getattr(self.fn, "__qualname__", repr(self.fn))
        return f"Thunk({name}, {status})"
