"""Counting assertions used inside test bodies.

An :class:`Assert` never raises. Every comparison bumps exactly one of
``num_passed``/``num_failed`` and optionally reports a message through its
logger. The runner resets the counters before each test (or each parameter
index) and derives the test's status from ``num_failed``.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from typing import Any

from fortest.reports.base import Logger
from fortest.reports.console import AssertLogger


class Verbosity(IntEnum):
    """How much an assertion reports to its logger."""

    QUIET = 0
    FAIL_ONLY = 1
    ALL = 2


def is_close(a: float, b: float, abs_tol: float = 0.0, rel_tol: float = 0.0) -> bool:
    """Return True if ``a`` and ``b`` are equal within either tolerance.

    Both tolerances default to zero, which reduces to exact equality.
    """
    diff = abs(a - b)
    return diff <= abs_tol or diff <= rel_tol * max(abs(a), abs(b))


def _is_floating(value: Any) -> bool:
    return isinstance(value, float)


def _truth(value: Any) -> bool | None:
    """``bool(value)``, or None when the value refuses a truth test."""
    try:
        return bool(value)
    except Exception:  # noqa: BLE001
        return None


def _repr(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_repr(v) for v in value) + "]"
    if isinstance(value, Mapping):
        return "{" + ", ".join(f"{_repr(k)}: {_repr(v)}" for k, v in value.items()) + "}"
    try:
        return str(value)
    except Exception:  # noqa: BLE001
        return "<unprintable>"


class Assert:
    """Assertion engine with pass/fail counters.

    Parameters
    ----------
    logger
        Receives PASS/FAIL messages; defaults to an :class:`AssertLogger`.
    verbosity
        Default verbosity for calls that do not pass their own.
    """

    def __init__(self, logger: Logger | None = None, *, verbosity: Verbosity | int = Verbosity.QUIET) -> None:
        self.logger = logger if logger is not None else AssertLogger()
        self.verbosity = Verbosity(verbosity)
        self.num_passed = 0
        self.num_failed = 0

    def reset(self) -> None:
        """Zero both counters."""
        self.num_passed = 0
        self.num_failed = 0

    def _level(self, verbosity: Verbosity | int | None) -> Verbosity:
        if verbosity is None:
            return self.verbosity
        try:
            return Verbosity(verbosity)
        except (TypeError, ValueError):
            return self.verbosity

    def _record(
        self,
        passed: bool,
        pass_message: str,
        fail_message: str,
        verbosity: Verbosity | int | None,
    ) -> bool:
        level = self._level(verbosity)
        if passed:
            self.num_passed += 1
            if level == Verbosity.ALL:
                self.logger.log(pass_message, "PASS")
        else:
            self.num_failed += 1
            if level != Verbosity.QUIET:
                self.logger.log(fail_message, "FAIL")
        return passed

    def _values_equal(self, expected: Any, actual: Any, abs_tol: float, rel_tol: float) -> bool:
        if _is_floating(expected) or _is_floating(actual):
            try:
                return is_close(float(expected), float(actual), abs_tol, rel_tol)
            except (TypeError, ValueError, OverflowError):
                return False
        try:
            return bool(expected == actual)
        except Exception:  # noqa: BLE001
            return False

    def equal(
        self,
        expected: Any,
        actual: Any,
        abs_tol: float = 0.0,
        rel_tol: float = 0.0,
        verbosity: Verbosity | int | None = None,
    ) -> bool:
        """Check that ``expected`` equals ``actual``.

        Floats are compared with :func:`is_close`; everything else with ``==``.
        """
        passed = self._values_equal(expected, actual, abs_tol, rel_tol)
        return self._record(
            passed,
            f"values are equal ({_repr(expected)} == {_repr(actual)})",
            f"values are not equal ({_repr(expected)} != {_repr(actual)})",
            verbosity,
        )

    def not_equal(
        self,
        expected: Any,
        actual: Any,
        abs_tol: float = 0.0,
        rel_tol: float = 0.0,
        verbosity: Verbosity | int | None = None,
    ) -> bool:
        """Check that ``expected`` and ``actual`` differ.

        Passes exactly when :meth:`equal` with the same tolerances would fail.
        """
        passed = not self._values_equal(expected, actual, abs_tol, rel_tol)
        return self._record(
            passed,
            f"values are not equal ({_repr(expected)} != {_repr(actual)})",
            f"values are equal ({_repr(expected)} == {_repr(actual)})",
            verbosity,
        )

    def is_true(self, condition: Any, verbosity: Verbosity | int | None = None) -> bool:
        value = _truth(condition)
        fail_message = "condition is false" if value is not None else "condition has no truth value"
        return self._record(value is True, "condition is true", fail_message, verbosity)

    def is_false(self, condition: Any, verbosity: Verbosity | int | None = None) -> bool:
        value = _truth(condition)
        fail_message = "condition is true" if value is not None else "condition has no truth value"
        return self._record(value is False, "condition is false", fail_message, verbosity)
