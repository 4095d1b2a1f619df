"""Tests, parameterized tests, suites, and the session that runs them."""

from fortest.testing.models import TestRecord, TestStatus, combine_statuses
from fortest.testing.parameterized import ParameterizedTest
from fortest.testing.session import TestSession
from fortest.testing.suite import TestSuite
from fortest.testing.test import Test


__all__ = [
    "ParameterizedTest",
    "Test",
    "TestRecord",
    "TestSession",
    "TestStatus",
    "TestSuite",
    "combine_statuses",
]
