"""Core lazy-sequence machinery.

This package provides the primitive every shrinker builds on. It has no
knowledge of shrinking; the shrinkers package depends on it, never the
reverse:

    core <- shrinkers

Exports:
    LazySequence: Once-traversable sequence with deferred generation
    EXHAUSTED: Sentinel returned by LazySequence.next() at the end
    Thunk: Run-once deferred step bound to captured state

Python 3.13+.
"""

from .lazy import EXHAUSTED, LazySequence
from .thunk import Thunk

__all__ = ["EXHAUSTED", "LazySequence", "Thunk"]
