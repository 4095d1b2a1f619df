"""fortest - scoped fixtures, suites and sessions for test orchestration."""

from .api import Registrar
from .assertions import Assert, Verbosity
from .context import current_assert
from .exceptions import DuplicateNameError, FortestError, InvalidScopeError, UnknownSuiteError
from .fixture import Fixture, Scope
from .reports import AssertLogger, ConsoleLogger, Logger
from .testing import ParameterizedTest, Test, TestSession, TestStatus, TestSuite
from .tracing import init_tracing, trace_step
from .version import __version__


__all__ = [
    # Core
    "Fixture",
    "Scope",
    "Test",
    "ParameterizedTest",
    "TestSuite",
    "TestSession",
    "TestStatus",
    "Registrar",
    # Assertions
    "Assert",
    "Verbosity",
    "current_assert",
    # Errors
    "FortestError",
    "DuplicateNameError",
    "UnknownSuiteError",
    "InvalidScopeError",
    # Output
    "Logger",
    "ConsoleLogger",
    "AssertLogger",
    # Tracing
    "init_tracing",
    "trace_step",
    "__version__",
]
