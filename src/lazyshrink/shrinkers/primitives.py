"""Shrinkers for primitive values.

Units, booleans, characters, floats and signed integers are treated as
already minimal: their sequences are exhausted immediately. Unsigned
integers shrink towards zero:

    n == 0          -> []
    n == 1          -> [0]
    n == 2          -> [0, 1]
    3 <= n < 8      -> [n - 3, n - 2, n - 1]
    n >= 8          -> mpowers_of_two(n)

Python 3.13+.
"""

from __future__ import annotations

from typing import Any, Final

from lazyshrink.constants import NATIVE_UINT_BITS, SMALL_UINT_LIMIT, SUPPORTED_UINT_BITS
from lazyshrink.core import LazySequence
from lazyshrink.errors import ValueRangeError

from .protocol import Shrinker

__all__ = [
    "BooleanShrinker",
    "CharShrinker",
    "FloatShrinker",
    "OpaqueShrinker",
    "SignedShrinker",
    "UnitShrinker",
    "UnsignedShrinker",
    "booleans",
    "chars",
    "floats",
    "mpowers_of_two",
    "shrink_uint",
    "signed",
    "u8",
    "units",
    "unsigned",
]


def mpowers_of_two(n: int) -> list[int]:
    """Bisection candidates for n: [0, n - n/2, n - n/4, n - n/8, ...].

    Candidates climb towards n without reaching it. The loop stops once
    the divisor reaches n, so the list has logarithmic length.

    Example:
        >>> mpowers_of_two(8)
        [0, 4, 6]
        >>> mpowers_of_two(100)
        [0, 50, 75, 88, 94, 97, 99]
    """
    candidates = [0]
    divisor = 2
    while 2 <= divisor < n:
        candidates.append(n - n // divisor)
        divisor *= 2
    return candidates


def shrink_uint(n: int) -> list[int]:
    """Candidates for a non-negative integer, simplest first."""
    if n == 0:
        return []
    if n == 1:
        return [0]
    if n == 2:
        return [0, 1]
    if n < SMALL_UINT_LIMIT:
        return [n - 3, n - 2, n - 1]
    return mpowers_of_two(n)


class _Atomic[T](Shrinker[T]):
    """Base for immutable primitives: clone() returns the value itself."""

    __slots__ = ()

    def clone(self, value: T) -> T:
        return value


class UnitShrinker(_Atomic[None]):
    """The unit value None has nothing simpler."""

    __slots__ = ()

    def shrink(self, value: None) -> LazySequence[None]:
        return LazySequence()

    def __repr__(self) -> str:
        return "units()"


class BooleanShrinker(_Atomic[bool]):
    """Booleans are not shrunk."""

    __slots__ = ()

    def shrink(self, value: bool) -> LazySequence[bool]:  # noqa: FBT001 - protocol signature
        return LazySequence()

    def __repr__(self) -> str:
        return "booleans()"


class CharShrinker(_Atomic[str]):
    """Single characters are not shrunk.

    Python has no character type; a character is a str of length 1.
    """

    __slots__ = ()

    def shrink(self, value: str) -> LazySequence[str]:
        if not isinstance(value, str) or len(value) != 1:
            msg = f"Expected a single character, got {value!r}"
            raise ValueRangeError(msg)
        return LazySequence()

    def __repr__(self) -> str:
        return "chars()"


class FloatShrinker(_Atomic[float]):
    """Floats are not shrunk."""

    __slots__ = ()

    def shrink(self, value: float) -> LazySequence[float]:
        return LazySequence()

    def __repr__(self) -> str:
        return "floats()"


class SignedShrinker(_Atomic[int]):
    """Signed integers are not shrunk."""

    __slots__ = ()

    def shrink(self, value: int) -> LazySequence[int]:
        return LazySequence()

    def __repr__(self) -> str:
        return "signed()"


class UnsignedShrinker(_Atomic[int]):
    """Unsigned integers of a fixed width, shrunk towards zero.

    Attributes:
        bits: Width in bits; values must lie in 0 .. 2**bits - 1
    """

    __slots__ = ("bits", "max_value")

    def __init__(self, bits: int = NATIVE_UINT_BITS) -> None:
        if bits not in SUPPORTED_UINT_BITS:
            msg = f"bits must be one of {sorted(SUPPORTED_UINT_BITS)}, got {bits}"
            raise ValueError(msg)
        self.bits = bits
        self.max_value = (1 << bits) - 1

    def shrink(self, value: int) -> LazySequence[int]:
        """Return the unsigned candidates for value.

        Raises:
            ValueRangeError: If value is not an int (bool excluded) or lies
                outside 0 .. max_value
        """
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"Expected an unsigned integer, got {type(value).__name__}"
            raise ValueRangeError(msg)
        if not 0 <= value <= self.max_value:
            msg = f"{value} is outside the u{self.bits} range 0..{self.max_value}"
            raise ValueRangeError(msg)
        return LazySequence.from_values(shrink_uint(value))

    def __repr__(self) -> str:
        return f"unsigned(bits={self.bits})"


class OpaqueShrinker(Shrinker[Any]):
    """Values of unknown shape: no candidates, deep-copied on clone.

    Used by non-strict inference for values no built-in shrinker covers.
    """

    __slots__ = ()

    def shrink(self, value: Any) -> LazySequence[Any]:
        return LazySequence()

    def __repr__(self) -> str:
        return "opaque()"


_UNITS: Final = UnitShrinker()
_BOOLEANS: Final = BooleanShrinker()
_CHARS: Final = CharShrinker()
_FLOATS: Final = FloatShrinker()
_SIGNED: Final = SignedShrinker()
_U8: Final = UnsignedShrinker(8)
_NATIVE: Final = UnsignedShrinker(NATIVE_UINT_BITS)


def units() -> UnitShrinker:
    """Shrinker for the unit value None."""
    return _UNITS


def booleans() -> BooleanShrinker:
    """Shrinker for bool."""
    return _BOOLEANS


def chars() -> CharShrinker:
    """Shrinker for single characters."""
    return _CHARS


def floats() -> FloatShrinker:
    """Shrinker for float."""
    return _FLOATS


def signed() -> SignedShrinker:
    """Shrinker for signed integers."""
    return _SIGNED


def u8() -> UnsignedShrinker:
    """Shrinker for 8-bit unsigned integers (0..255)."""
    return _U8


def unsigned(bits: int = NATIVE_UINT_BITS) -> UnsignedShrinker:
    """Shrinker for unsigned integers of the given width (native: 64)."""
    if bits == NATIVE_UINT_BITS:
        return _NATIVE
    if bits == 8:
        return _U8
    return UnsignedShrinker(bits)
