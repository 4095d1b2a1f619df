"""Storage module for persisting fortest results."""

from fortest.storage.base import ResultSink
from fortest.storage.sqlite import SQLiteStore


__all__ = ["ResultSink", "SQLiteStore"]
