"""Tests for the public API surface of lazyshrink.

Python 3.13+.
"""

from __future__ import annotations

import lazyshrink
from lazyshrink import (
    ArityError,
    DeferredStepReusedError,
    ShrinkError,
    UnsupportedValueError,
    ValueRangeError,
)


class TestPublicExports:
    """Everything in __all__ is importable and documented."""

    def test_all_names_resolve(self) -> None:
        """Every name in __all__ exists on the package."""
        for name in lazyshrink.__all__:
            assert hasattr(lazyshrink, name), name

    def test_version_string(self) -> None:
        """__version__ is a non-empty string."""
        assert isinstance(lazyshrink.__version__, str)
        assert lazyshrink.__version__

    def test_shrinkers_subpackage_reachable(self) -> None:
        """The shrinkers subpackage is not shadowed by the shrink() function."""
        assert callable(lazyshrink.shrink)
        assert lazyshrink.shrinkers.lists is lazyshrink.lists


class TestErrorHierarchy:
    """All library errors share ShrinkError and a matching builtin base."""

    def test_common_base(self) -> None:
        """Every error derives from ShrinkError."""
        for error in (ArityError, DeferredStepReusedError, UnsupportedValueError, ValueRangeError):
            assert issubclass(error, ShrinkError)

    def test_builtin_bases(self) -> None:
        """Errors can be caught by the builtin exception they refine."""
        assert issubclass(ArityError, ValueError)
        assert issubclass(ValueRangeError, ValueError)
        assert issubclass(UnsupportedValueError, TypeError)
        assert issubclass(DeferredStepReusedError, RuntimeError)
