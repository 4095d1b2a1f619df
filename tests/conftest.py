"""Shared pytest fixtures for fortest tests."""

from io import StringIO

import pytest
from rich.console import Console

from fortest.api import reset_registrar
from fortest.assertions import Assert
from fortest.config import reset_settings
from fortest.reports import AssertLogger


class RecordingLogger:
    """Logger that keeps ``(tag, message)`` pairs instead of printing."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def log(self, message: str, tag: str) -> None:
        self.records.append((tag, message))

    def messages(self, tag: str | None = None) -> list[str]:
        return [msg for t, msg in self.records if tag is None or t == tag]


@pytest.fixture
def log() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def assert_obj() -> Assert:
    return Assert(AssertLogger(Console(file=StringIO()), color=False))


@pytest.fixture(autouse=True)
def clean_globals(monkeypatch):
    """Start every test with fresh settings and no default registrar."""
    for var in (
        "FORTEST_VERBOSITY",
        "FORTEST_ISOLATE_FAILURES",
        "FORTEST_COLOR",
        "FORTEST_DB_PATH",
        "FORTEST_TRACE_OUTPUT",
    ):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    reset_registrar()
    yield
    reset_settings()
    reset_registrar()
