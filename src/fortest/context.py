from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from fortest.assertions import Assert


ASSERT_CONTEXT: ContextVar[Assert | None] = ContextVar("assert_context", default=None)


def current_assert() -> Assert:
    """Return the Assert of the test that is currently running.

    Raises:
        RuntimeError: If called outside a running test.
    """
    assert_ = ASSERT_CONTEXT.get()
    if assert_ is None:
        msg = "current_assert() called outside a running test"
        raise RuntimeError(msg)
    return assert_


@contextmanager
def assert_context(assert_: Assert) -> Iterator[Assert]:
    token = ASSERT_CONTEXT.set(assert_)
    try:
        yield assert_
    finally:
        ASSERT_CONTEXT.reset(token)
