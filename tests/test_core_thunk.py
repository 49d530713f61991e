"""Tests for core/thunk.py.

Tests the run-once contract of deferred steps.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from lazyshrink.core.thunk import Thunk
from lazyshrink.errors import DeferredStepReusedError, ShrinkError


class TestThunkRun:
    """Test Thunk.run() semantics."""

    def test_run_passes_target_and_state(self) -> None:
        """run() calls fn(target, state)."""
        calls: list[tuple[object, object]] = []
        thunk = Thunk("state", lambda target, state: calls.append((target, state)))

        thunk.run("target")

        assert calls == [("target", "state")]

    def test_run_is_deferred_until_called(self) -> None:
        """Constructing a thunk does not invoke its function."""
        calls: list[int] = []
        Thunk(1, lambda _target, state: calls.append(state))

        assert calls == []

    def test_has_run_flips_after_run(self) -> None:
        """has_run is False before run() and True after."""
        thunk: Thunk[list[int], int] = Thunk(1, lambda target, state: target.append(state))

        assert thunk.has_run is False
        thunk.run([])
        assert thunk.has_run is True

    def test_state_released_after_run(self) -> None:
        """The thunk drops its reference to the captured state."""
        payload = [1, 2, 3]
        thunk: Thunk[list[int], list[int]] = Thunk(payload, lambda target, s: target.extend(s))

        thunk.run([])

        assert thunk.state is not payload

    def test_state_may_be_mutated_by_fn(self) -> None:
        """The function owns the state and may consume it."""
        out: list[int] = []

        def consume(target: list[int], state: list[int]) -> None:
            while state:
                target.append(state.pop(0))

        Thunk([4, 5], consume).run(out)

        assert out == [4, 5]


class TestThunkSingleUse:
    """Test that a second run fails loudly."""

    def test_second_run_raises(self) -> None:
        """Running a thunk twice raises DeferredStepReusedError."""
        thunk: Thunk[list[int], int] = Thunk(1, lambda target, state: target.append(state))
        out: list[int] = []
        thunk.run(out)

        with pytest.raises(DeferredStepReusedError, match="already run"):
            thunk.run(out)

        assert out == [1]

    def test_reused_error_hierarchy(self) -> None:
        """DeferredStepReusedError is both a ShrinkError and a RuntimeError."""
        assert issubclass(DeferredStepReusedError, ShrinkError)
        assert issubclass(DeferredStepReusedError, RuntimeError)

    def test_exception_in_fn_still_marks_run(self) -> None:
        """A thunk whose function raised cannot be retried."""

        def explode(_target: object, _state: object) -> None:
            msg = "boom"
            raise ValueError(msg)

        thunk = Thunk(None, explode)
        with pytest.raises(ValueError, match="boom"):
            thunk.run(None)

        with pytest.raises(DeferredStepReusedError):
            thunk.run(None)


class TestThunkRepr:
    """Test Thunk.__repr__."""

    def test_repr_reports_status(self) -> None:
        """repr shows the function name and pending/spent status."""

        def step(_target: object, _state: object) -> None:
            return None

        thunk = Thunk(None, step)
        assert "step" in repr(thunk)
        assert "pending" in repr(thunk)

        thunk.run(None)
        assert "spent" in repr(thunk)
