import pytest

from fortest.context import assert_context, current_assert


def test_current_assert_outside_context():
    with pytest.raises(RuntimeError, match="outside a running test"):
        current_assert()


def test_assert_context_scope(assert_obj):
    with assert_context(assert_obj) as active:
        assert active is assert_obj
        assert current_assert() is assert_obj
    with pytest.raises(RuntimeError):
        current_assert()


def test_nested_contexts_restore_outer(assert_obj):
    from fortest.assertions import Assert

    inner = Assert()
    with assert_context(assert_obj):
        with assert_context(inner):
            assert current_assert() is inner
        assert current_assert() is assert_obj


def test_context_reset_after_exception(assert_obj):
    with pytest.raises(ValueError), assert_context(assert_obj):
        raise ValueError
    with pytest.raises(RuntimeError):
        current_assert()
