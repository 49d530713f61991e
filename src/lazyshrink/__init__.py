"""lazyshrink - Lazy shrinking for property-based testing.

Given a value that made a property fail, lazyshrink produces a
prioritized, lazily generated sequence of strictly simpler candidates to
retry. Nothing beyond what the caller asks for is ever built, so the
space of simplifications may be arbitrarily large.

Public API:
    LazySequence - Once-traversable sequence with deferred generation
    EXHAUSTED - Sentinel returned by LazySequence.next() at the end
    Shrinker - Capability to shrink values of one shape
    Shrinkable - Protocol for value types that shrink themselves
    shrink - Candidates for a value (shrinker given or inferred)
    infer_shrinker - Build a shrinker from a value's runtime shape
    Ok, Err, Box, Shared - Wrappers for result and owner shapes

Shrinker constructors:
    units, booleans, chars, floats, signed, u8, unsigned,
    pairs, tuples, optionals, results, boxes, shared,
    lists, texts, dicts

Exceptions:
    ShrinkError - Base exception class
    DeferredStepReusedError - A deferred step ran twice
    UnsupportedValueError - No shrinker could be inferred
    ValueRangeError - Value outside a shrinker's domain
    ArityError - Unsupported tuple arity

Submodules:
    lazyshrink.core - LazySequence and Thunk
    lazyshrink.shrinkers - Shrinker classes
    lazyshrink.config - InferenceConfig
"""

from .config import InferenceConfig
from .core import EXHAUSTED, LazySequence
from .errors import (
    ArityError,
    DeferredStepReusedError,
    ShrinkError,
    UnsupportedValueError,
    ValueRangeError,
)
from .shrinkers import (
    Shrinkable,
    Shrinker,
    booleans,
    boxes,
    chars,
    dicts,
    floats,
    infer_shrinker,
    lists,
    optionals,
    pairs,
    results,
    shared,
    shrink,
    signed,
    texts,
    tuples,
    u8,
    units,
    unsigned,
)
from .values import Box, Err, Ok, Shared

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("lazyshrink")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "EXHAUSTED",
    "ArityError",
    "Box",
    "DeferredStepReusedError",
    "Err",
    "InferenceConfig",
    "LazySequence",
    "Ok",
    "Shared",
    "ShrinkError",
    "Shrinkable",
    "Shrinker",
    "UnsupportedValueError",
    "ValueRangeError",
    "__version__",
    "booleans",
    "boxes",
    "chars",
    "dicts",
    "floats",
    "infer_shrinker",
    "lists",
    "optionals",
    "pairs",
    "results",
    "shared",
    "shrink",
    "signed",
    "texts",
    "tuples",
    "u8",
    "units",
    "unsigned",
]
