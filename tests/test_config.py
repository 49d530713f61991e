"""Tests for config.py, enums.py and constants.py.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses

import pytest

from lazyshrink.config import DEFAULT_CONFIG, InferenceConfig
from lazyshrink.constants import (
    MAX_TUPLE_ARITY,
    MIN_TUPLE_ARITY,
    NATIVE_UINT_BITS,
    SMALL_UINT_LIMIT,
    U8_MAX,
)
from lazyshrink.enums import IntPolicy


class TestInferenceConfig:
    """Test InferenceConfig defaults and validation."""

    def test_defaults(self) -> None:
        """InferenceConfig() is usable as is."""
        config = InferenceConfig()

        assert config.int_policy is IntPolicy.UNSIGNED_WHEN_NONNEGATIVE
        assert config.uint_bits == NATIVE_UINT_BITS
        assert config.strict is True
        assert config == DEFAULT_CONFIG

    def test_frozen(self) -> None:
        """Configuration objects are immutable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.strict = False  # type: ignore[misc]

    @pytest.mark.parametrize("bits", [8, 16, 32, 64])
    def test_supported_widths(self, bits: int) -> None:
        """Machine widths are accepted."""
        assert InferenceConfig(uint_bits=bits).uint_bits == bits

    @pytest.mark.parametrize("bits", [0, 7, 128])
    def test_unsupported_widths(self, bits: int) -> None:
        """Other widths are rejected at construction time."""
        with pytest.raises(ValueError, match="uint_bits"):
            InferenceConfig(uint_bits=bits)


class TestIntPolicy:
    """Test the IntPolicy StrEnum."""

    def test_string_values(self) -> None:
        """StrEnum members are their own string values."""
        assert str(IntPolicy.SIGNED) == "signed"
        assert IntPolicy("unsigned_when_nonnegative") is IntPolicy.UNSIGNED_WHEN_NONNEGATIVE


class TestConstants:
    """Sanity checks on shared constants."""

    def test_values(self) -> None:
        """Constants match the documented rule."""
        assert U8_MAX == 255
        assert SMALL_UINT_LIMIT == 8
        assert (MIN_TUPLE_ARITY, MAX_TUPLE_ARITY) == (2, 6)
