"""Tolerant comparison assertions with pass/fail counters."""

from fortest.assertions.base import Assert, Verbosity, is_close


__all__ = ["Assert", "Verbosity", "is_close"]
