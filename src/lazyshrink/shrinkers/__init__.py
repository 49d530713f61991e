"""Shrink protocol and built-in shrinkers.

Depends on the core package for LazySequence. Shrinkers are grouped by
shape:

- primitives: units, booleans, chars, floats, signed, u8, unsigned
- composites: pairs, tuples, optionals, results, boxes, shared
- sequences: lists, texts, dicts
- inference: infer_shrinker() and the shrink() entry point

Python 3.13+.
"""

from .composites import (
    BoxShrinker,
    OptionalShrinker,
    PairShrinker,
    ResultShrinker,
    SharedShrinker,
    TupleShrinker,
    boxes,
    optionals,
    pairs,
    results,
    shared,
    tuples,
)
from .inference import InferredShrinker, infer_shrinker, shrink
from .primitives import (
    BooleanShrinker,
    CharShrinker,
    FloatShrinker,
    OpaqueShrinker,
    SignedShrinker,
    UnitShrinker,
    UnsignedShrinker,
    booleans,
    chars,
    floats,
    mpowers_of_two,
    shrink_uint,
    signed,
    u8,
    units,
    unsigned,
)
from .protocol import SelfShrinker, Shrinkable, Shrinker
from .sequences import DictShrinker, ListShrinker, TextShrinker, dicts, lists, texts

__all__ = [
    "BooleanShrinker",
    "BoxShrinker",
    "CharShrinker",
    "DictShrinker",
    "FloatShrinker",
    "InferredShrinker",
    "ListShrinker",
    "OpaqueShrinker",
    "OptionalShrinker",
    "PairShrinker",
    "ResultShrinker",
    "SelfShrinker",
    "SharedShrinker",
    "Shrinkable",
    "Shrinker",
    "SignedShrinker",
    "TextShrinker",
    "TupleShrinker",
    "UnitShrinker",
    "UnsignedShrinker",
    "booleans",
    "boxes",
    "chars",
    "dicts",
    "floats",
    "infer_shrinker",
    "lists",
    "mpowers_of_two",
    "optionals",
    "pairs",
    "results",
    "shared",
    "shrink",
    "shrink_uint",
    "signed",
    "texts",
    "tuples",
    "u8",
    "units",
    "unsigned",
]
