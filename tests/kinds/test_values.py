"""Tests for kinds.values."""

import pytest

from nodeflow.kinds.values import (
    as_bool,
    as_number,
    is_number,
    operand,
    to_display_string,
    values_equal,
)


def test_is_number_excludes_bool() -> None:
    assert is_number(1) and is_number(1.5)
    assert not is_number(True)
    assert not is_number("1")
    assert not is_number(None)


def test_as_number_and_as_bool() -> None:
    assert as_number(3) == 3
    assert as_number("3") == 0
    assert as_number(True) == 0
    assert as_bool(True) is True
    assert as_bool(1) is False
    assert as_bool(None, default=True) is True


@pytest.mark.parametrize(
    "value,expected",
    [("abc", "abc"), (5, "5"), (1.5, "1.5"), (True, "true"), (None, "null"), ([1, 2], "[1,2]")],
)
def test_to_display_string(value, expected) -> None:
    assert to_display_string(value) == expected


def test_values_equal_respects_tags() -> None:
    assert values_equal(1, 1.0)
    assert not values_equal(True, 1)
    assert not values_equal(0, False)
    assert values_equal(False, False)
    assert not values_equal("1", 1)
    assert values_equal(None, None)
    assert not values_equal(None, 0)
    assert values_equal([1, {"a": True}], [1.0, {"a": True}])
    assert not values_equal([1], [True])
    assert not values_equal({"a": 1}, {"b": 1})


def test_operand_prefers_first_input_then_data() -> None:
    assert operand([[7, 8], []], [1, 2], 0) == 7
    assert operand([[7], []], [1, 2], 1) == 2
    assert operand([[], []], [], 1) == 0
    assert operand([], [], 0, default=None) is None
