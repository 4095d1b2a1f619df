"""Tests for fortest.tracing module."""

import json

import pytest

from fortest.context import current_assert
from fortest.testing import TestSession
from fortest.tracing import clear_traces, get_tracer, init_tracing, set_trace_output_path, trace_step


@pytest.fixture(scope="module", autouse=True)
def setup_tracing_once(tmp_path_factory):
    """Initialize tracing once for all tests in this module."""
    init_tracing(output_path=tmp_path_factory.mktemp("traces") / "init.jsonl")


@pytest.fixture
def trace_file(tmp_path):
    path = tmp_path / "traces.jsonl"
    set_trace_output_path(path)
    yield path
    clear_traces()


def read_spans(path):
    return [json.loads(line) for line in path.read_text().splitlines() if line]


class TestInitTracing:
    def test_tracer_available(self):
        assert get_tracer() is not None

    def test_init_tracing_idempotent(self, trace_file):
        init_tracing(output_path=trace_file.parent / "other.jsonl")

        with trace_step("still_here"):
            pass

        assert [s["name"] for s in read_spans(trace_file)] == ["still_here"]


class TestTraceStep:
    def test_creates_span_with_attributes(self, trace_file):
        with trace_step("step", {"key": "value"}):
            pass

        [span] = read_spans(trace_file)
        assert span["name"] == "step"
        assert span["attributes"] == {"key": "value"}
        assert span["parentSpanId"] is None

    def test_nested_spans_share_trace(self, trace_file):
        with trace_step("outer"), trace_step("inner"):
            pass

        inner, outer = read_spans(trace_file)
        assert inner["parentSpanId"] == outer["spanId"]
        assert inner["traceId"] == outer["traceId"]

    def test_clear_traces(self, trace_file):
        with trace_step("gone"):
            pass

        clear_traces()

        assert trace_file.read_text() == ""


class TestSessionSpans:
    def test_session_suite_and_test_spans(self, trace_file, assert_obj, log):
        session = TestSession(assert_obj)
        session.add_test_suite("math")
        session.add_test("math", "adds", lambda t, s, ss: current_assert().equal(2 + 3, 5))
        session.add_parameterized_test("math", "odd", lambda t, s, ss, i: current_assert().equal(i % 2, 1), [1, 2])

        session.run(log)

        spans = {(s["name"], s["attributes"].get("test.param")): s for s in read_spans(trace_file)}
        assert ("session", None) in spans
        assert spans[("suite.math", None)]["attributes"]["suite.name"] == "math"
        assert spans[("test.adds", None)]["attributes"]["test.status"] == "pass"
        assert spans[("test.odd", 1)]["attributes"]["test.status"] == "pass"
        assert spans[("test.odd", 2)]["attributes"]["test.status"] == "fail"
