"""Registration API for language bindings.

A :class:`Registrar` wraps one explicit :class:`TestSession` together with
the logger, assertion engine and optional result store that a run needs.
Bindings that want a single process-wide session use the module-level
functions, which delegate to a lazily created default registrar.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, NoReturn

from fortest.assertions import Assert
from fortest.config import FortestSettings, get_settings
from fortest.exceptions import InvalidScopeError
from fortest.fixture import Fixture, FixtureFunction, Scope
from fortest.reports import AssertLogger, ConsoleLogger, Logger
from fortest.storage import ResultSink, SQLiteStore
from fortest.testing import TestSession
from fortest.testing.parameterized import ParameterizedTestFunction
from fortest.testing.test import TestFunction
from fortest.tracing import init_tracing


logger = logging.getLogger(__name__)


def parse_scope(scope: str | Scope) -> Scope:
    """Map ``"test"``/``"suite"``/``"session"`` onto :class:`Scope`."""
    if isinstance(scope, Scope):
        return scope
    try:
        return Scope(scope.strip().lower())
    except ValueError:
        msg = f"Unknown fixture scope '{scope}'; expected test, suite or session."
        raise InvalidScopeError(msg) from None


class Registrar:
    """Registration front end over a single :class:`TestSession`."""

    def __init__(
        self,
        session: TestSession | None = None,
        *,
        logger: Logger | None = None,
        sink: ResultSink | None = None,
        settings: FortestSettings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        if session is None:
            assert_ = Assert(AssertLogger(color=self.settings.color), verbosity=self.settings.verbosity)
            session = TestSession(assert_)
        self.session = session
        self.logger = logger or ConsoleLogger(color=self.settings.color)
        if sink is None and self.settings.db_path is not None:
            sink = SQLiteStore(self.settings.db_path)
        self.sink = sink
        if self.settings.trace_output is not None:
            init_tracing(output_path=self.settings.trace_output)

    @property
    def assert_(self) -> Assert:
        return self.session.assert_

    def register_test_suite(self, name: str) -> None:
        self.session.add_test_suite(name)

    def register_test(self, suite_name: str, test_name: str, body: TestFunction) -> None:
        self.session.add_test(suite_name, test_name, body)

    def register_parameterized_test(
        self,
        suite_name: str,
        test_name: str,
        body: ParameterizedTestFunction,
        indices: Iterable[int],
    ) -> None:
        self.session.add_parameterized_test(suite_name, test_name, body, indices)

    def register_parameterized_test_count(
        self,
        suite_name: str,
        test_name: str,
        body: ParameterizedTestFunction,
        num_params: int,
    ) -> None:
        """Register a parameterized test over indices ``1..num_params``."""
        self.register_parameterized_test(suite_name, test_name, body, range(1, num_params + 1))

    def register_fixture(
        self,
        suite_name: str | None,
        setup: FixtureFunction | None,
        teardown: FixtureFunction | None,
        args: Any,
        scope: str | Scope,
    ) -> None:
        """Register a fixture on the session (no suite name) or on one suite.

        Raises:
            InvalidScopeError: Unknown scope string, or a scope that does not
                fit the target (session scope needs no suite name and vice
                versa).
            UnknownSuiteError: The named suite does not exist.
        """
        fixture = Fixture(setup, teardown, args, parse_scope(scope))
        if not suite_name and fixture.scope is Scope.SESSION:
            self.session.add_fixture(fixture)
        else:
            self.session.add_suite_fixture(suite_name or "", fixture)

    def run_session(self, *, isolate_failures: bool | None = None) -> int:
        """Run every registered suite and return the session status."""
        if isolate_failures is None:
            isolate_failures = self.settings.isolate_failures
        return self.session.run(self.logger, self.sink, isolate_failures=isolate_failures)

    def get_suite_status(self, name: str) -> int:
        """0 if every test in the suite passed, 1 otherwise."""
        return self.session.get_suite_status(name)

    def get_session_status(self) -> int:
        return self.session.get_status()

    def finalize(self) -> NoReturn:
        """Exit the process with the session status as exit code."""
        status = self.get_session_status()
        logger.debug("finalizing session with status %d", status)
        raise SystemExit(status)


_default: Registrar | None = None


def get_registrar() -> Registrar:
    """Return the process-wide registrar, creating it on first use."""
    global _default
    if _default is None:
        _default = Registrar()
    return _default


def reset_registrar() -> None:
    """Drop the process-wide registrar; the next call starts a fresh session."""
    global _default
    _default = None


def register_test_suite(name: str) -> None:
    get_registrar().register_test_suite(name)


def register_test(suite_name: str, test_name: str, body: TestFunction) -> None:
    get_registrar().register_test(suite_name, test_name, body)


def register_parameterized_test(
    suite_name: str,
    test_name: str,
    body: ParameterizedTestFunction,
    indices: Iterable[int],
) -> None:
    get_registrar().register_parameterized_test(suite_name, test_name, body, indices)


def register_parameterized_test_count(
    suite_name: str,
    test_name: str,
    body: ParameterizedTestFunction,
    num_params: int,
) -> None:
    get_registrar().register_parameterized_test_count(suite_name, test_name, body, num_params)


def register_fixture(
    suite_name: str | None,
    setup: FixtureFunction | None,
    teardown: FixtureFunction | None,
    args: Any,
    scope: str | Scope,
) -> None:
    get_registrar().register_fixture(suite_name, setup, teardown, args, scope)


def run_session() -> int:
    return get_registrar().run_session()


def get_suite_status(name: str) -> int:
    return get_registrar().get_suite_status(name)


def get_session_status() -> int:
    return get_registrar().get_session_status()


def finalize() -> NoReturn:
    get_registrar().finalize()
