"""Exception hierarchy for lazyshrink.

Shrinking itself never fails: an exhausted sequence is the designed
termination signal, not an error. The exceptions below report misuse
detected at the boundary (reused deferred steps, values outside a
shrinker's domain, unsupported shapes).

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "ArityError",
    "DeferredStepReusedError",
    "ShrinkError",
    "UnsupportedValueError",
    "ValueRangeError",
]


class ShrinkError(Exception):
    """Base exception for all lazyshrink errors."""


class DeferredStepReusedError(ShrinkError, RuntimeError):
    """A deferred step was run a second time.

    Deferred steps consume their captured state on the first run.
    Running one again would observe state that may already have been
    moved into emitted candidates.
    """


class UnsupportedValueError(ShrinkError, TypeError):
    """No shrinker could be inferred for a value.

    Raised by infer_shrinker() in strict mode. Pass an explicit shrinker
    or implement the Shrinkable protocol on the value's type.
    """


class ValueRangeError(ShrinkError, ValueError):
    """A value lies outside the domain of the shrinker asked to shrink it.

    Examples:
    - 256 given to the 8-bit unsigned shrinker
    - A negative int given to an unsigned shrinker
    - A two-character string given to the character shrinker
    """


class ArityError(ShrinkError, ValueError):
    """A tuple shrinker was built for, or given, an unsupported arity."""
