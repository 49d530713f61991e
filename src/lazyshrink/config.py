"""Configuration for shrinker inference.

Provides a single frozen dataclass that encapsulates the choices
infer_shrinker() has to make when a value carries no explicit shrinker:
how to read Python ints, how wide "native" unsigned integers are, and
what to do with values no built-in shrinker understands.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from lazyshrink.constants import NATIVE_UINT_BITS, SUPPORTED_UINT_BITS
from lazyshrink.enums import IntPolicy

__all__ = ["DEFAULT_CONFIG", "InferenceConfig"]


@dataclass(frozen=True, slots=True)
class InferenceConfig:
    """Immutable configuration for shrinker inference.

    All fields have sensible defaults; constructing ``InferenceConfig()``
    with no arguments produces a usable configuration.

    Attributes:
        int_policy: How plain ints are interpreted
            (default: IntPolicy.UNSIGNED_WHEN_NONNEGATIVE).
        uint_bits: Width of inferred unsigned ints (default: 64).
            Values wider than this raise ValueRangeError when shrunk.
        strict: If True, raise UnsupportedValueError for values with no
            built-in shrinker (default: True). If False, log a warning
            and treat such values as unshrinkable.

    Example:
        >>> from lazyshrink import shrink
        >>> from lazyshrink.config import InferenceConfig
        >>> from lazyshrink.enums import IntPolicy
        >>> config = InferenceConfig(int_policy=IntPolicy.SIGNED)
        >>> shrink(5, config=config).drain()
        []
        >>> shrink(5).drain()
        [2, 3, 4]
    """

    int_policy: IntPolicy = IntPolicy.UNSIGNED_WHEN_NONNEGATIVE
    uint_bits: int = NATIVE_UINT_BITS
    strict: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If uint_bits is not a supported width.
        """
        if self.uint_bits not in SUPPORTED_UINT_BITS:
            msg = f"uint_bits must be one of {sorted(SUPPORTED_UINT_BITS)}, got {self.uint_bits}"
            raise ValueError(msg)


DEFAULT_CONFIG = InferenceConfig()
