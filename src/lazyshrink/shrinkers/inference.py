"""Shrinker inference from runtime values.

Most callers already hold a value and want its candidates without
spelling out a shrinker. infer_shrinker() reads the value's runtime
shape and builds the matching shrinker; containers get an
InferredShrinker for their elements, which infers again per element, so
heterogeneous lists, tuples and dicts work without annotations.

Shape table:
    None                 units()
    bool                 booleans()
    int                  per InferenceConfig.int_policy
    float                floats()
    str                  texts()
    2-tuple              pairs(...)
    3..6-tuple           tuples(...)
    list                 lists(...)
    dict                 dicts(...)
    Ok / Err             results(...)
    Box / Shared         boxes(...) / shared(...)
    Shrinkable           SelfShrinker (checked before the builtin shapes)

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Final

from lazyshrink.config import DEFAULT_CONFIG, InferenceConfig
from lazyshrink.constants import MAX_TUPLE_ARITY, MIN_TUPLE_ARITY
from lazyshrink.enums import IntPolicy
from lazyshrink.errors import UnsupportedValueError
from lazyshrink.values import Box, Err, Ok, Shared

from .composites import BoxShrinker, PairShrinker, ResultShrinker, SharedShrinker, TupleShrinker
from .primitives import (
    OpaqueShrinker,
    booleans,
    floats,
    signed,
    units,
    unsigned,
)
from .protocol import SelfShrinker, Shrinkable, Shrinker
from .sequences import DictShrinker, ListShrinker, texts

if TYPE_CHECKING:
    from lazyshrink.core import LazySequence

__all__ = ["InferredShrinker", "infer_shrinker", "shrink"]

logger = logging.getLogger(__name__)

_OPAQUE: Final = OpaqueShrinker()
_SELF: Final = SelfShrinker()


class InferredShrinker(Shrinker[Any]):
    """Element shrinker that infers a concrete shrinker for each value."""

    __slots__ = ("config",)

    def __init__(self, config: InferenceConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def shrink(self, value: Any) -> LazySequence[Any]:
        return infer_shrinker(value, self.config).shrink(value)

    def clone(self, value: Any) -> Any:
        return infer_shrinker(value, self.config).clone(value)

    def __repr__(self) -> str:
        return "inferred()"


def infer_shrinker(  # noqa: PLR0911 - one return per shape
    value: object, config: InferenceConfig | None = None
) -> Shrinker[Any]:
    """Build a shrinker for value from its runtime shape.

    Args:
        value: Value to be shrunk
        config: Inference settings (default: InferenceConfig())

    Returns:
        Shrinker able to shrink value

    Raises:
        UnsupportedValueError: If no shrinker fits and config.strict is True
    """
    config = config or DEFAULT_CONFIG

    # bool before int: bool is an int subclass.
    if value is None:
        return units()
    if isinstance(value, bool):
        return booleans()
    # A type that shrinks itself wins, even when it subclasses a builtin.
    if isinstance(value, Shrinkable):
        return _SELF
    if isinstance(value, int):
        if config.int_policy is IntPolicy.UNSIGNED_WHEN_NONNEGATIVE and value >= 0:
            return unsigned(config.uint_bits)
        return signed()
    if isinstance(value, float):
        return floats()
    if isinstance(value, str):
        return texts()

    element = InferredShrinker(config)
    if isinstance(value, tuple) and MIN_TUPLE_ARITY <= len(value) <= MAX_TUPLE_ARITY:
        if len(value) == MIN_TUPLE_ARITY:
            return PairShrinker(element, element)
        return TupleShrinker(*([element] * len(value)))
    if isinstance(value, list):
        return ListShrinker(element)
    if isinstance(value, dict):
        return DictShrinker(element, element)
    if isinstance(value, (Ok, Err)):
        return ResultShrinker(element, element)
    if isinstance(value, Box):
        return BoxShrinker(element)
    if isinstance(value, Shared):
        return SharedShrinker(element)

    if config.strict:
        msg = (
            f"No shrinker for {type(value).__name__} value {value!r}; "
            "pass a shrinker explicitly or implement Shrinkable"
        )
        raise UnsupportedValueError(msg)
    logger.warning(
        "No shrinker for %s value; treating it as unshrinkable", type(value).__name__
    )
    return _OPAQUE


def shrink[T](
    value: T, shrinker: Shrinker[T] | None = None, *, config: InferenceConfig | None = None
) -> LazySequence[T]:
    """Return the lazily generated shrink candidates for value.

    Args:
        value: Value to shrink
        shrinker: Shrinker to use; inferred from value when omitted
        config: Inference settings, used only when shrinker is omitted

    Returns:
        LazySequence of candidates, simplest first

    Example:
        >>> shrink(8).drain()
        [0, 4, 6]
        >>> shrink([1, 2, 3]).drain(3)
        [[], [1], [2, 3]]
    """
    if shrinker is None:
        shrinker = infer_shrinker(value, config)
        logger.debug("Inferred %r for %s", shrinker, type(value).__name__)
    return shrinker.shrink(value)
