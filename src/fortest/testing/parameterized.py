"""A test body run once per integer parameter index."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from fortest.context import assert_context
from fortest.testing.models import TestRecord, TestStatus, combine_statuses
from fortest.testing.test import FixtureSlots
from fortest.tracing import trace_step


if TYPE_CHECKING:
    from fortest.assertions import Assert
    from fortest.reports.base import Logger
    from fortest.storage.base import ResultSink


ParameterizedTestFunction = Callable[[Any, Any, Any, int], None]


class ParameterizedTest(FixtureSlots):
    """A test generalised over an ordered list of parameter indices.

    Each index gets its own test-scope setup/teardown and its own status.
    Indices keep their registration order; duplicates are run again and
    overwrite the earlier status for that index.
    """

    __test__ = False  # Prevent pytest from collecting this as a test class

    def __init__(
        self,
        name: str,
        body: ParameterizedTestFunction,
        parameters: Iterable[int],
        *,
        suite_name: str | None = None,
    ) -> None:
        super().__init__()
        self.name = name
        self.body = body
        self.parameters = [int(p) for p in parameters]
        self.suite_name = suite_name
        self.status_by_index: dict[int, TestStatus] = {}

    def variation_name(self, index: int) -> str:
        return f"{self.name} [param={index}]"

    def get_status(self, index: int) -> TestStatus:
        """Status of one index; ``NONE`` if it has not completed a run."""
        return self.status_by_index.get(index, TestStatus.NONE)

    @property
    def status(self) -> TestStatus:
        """Combined status over every recorded index."""
        return combine_statuses(self.status_by_index.values())

    def run(self, logger: Logger, assert_: Assert, sink: ResultSink | None = None) -> TestStatus:
        """Run the body for every parameter index in order.

        An exception from the body (or a fixture) stops the loop: the
        failing index is torn down, logged, and left without a status, and
        later indices never run.
        """
        suite_args, session_args = self._outer_args()

        for index in self.parameters:
            test_args = None
            if self.test_fixture is not None:
                test_args = self.test_fixture.args
                self.test_fixture.setup()

            assert_.reset()
            variation = self.variation_name(index)
            logger.log(f"Running parameterized test: {variation}", "INFO")

            start = time.perf_counter()
            try:
                with (
                    trace_step(f"test.{self.name}", {"test.name": self.name, "test.param": index}) as span,
                    assert_context(assert_),
                ):
                    self.body(test_args, suite_args, session_args, index)
                    status = TestStatus.PASS if assert_.num_failed == 0 else TestStatus.FAIL
                    span.set_attribute("test.status", status.value)

                if sink is not None:
                    sink.record(
                        TestRecord(
                            test_name=self.name,
                            status=status,
                            duration_ms=(time.perf_counter() - start) * 1000,
                            suite_name=self.suite_name,
                            param_index=index,
                        )
                    )
                self.status_by_index[index] = status

                if status is TestStatus.PASS:
                    logger.log(f"Test passed: {variation}", "PASS")
                else:
                    logger.log(f"Test failed: {variation}", "FAIL")
            except BaseException as e:
                logger.log(f"Test threw exception: {variation} ({type(e).__name__}: {e})", "FAIL")
                raise
            finally:
                if self.test_fixture is not None:
                    self.test_fixture.teardown()

        return self.status
