"""Tests for foundation.block (AbstractNodeKind, FunctionNodeKind)."""

import pytest

from nodeflow.foundation.block import FunctionNodeKind
from tests.foundation.helpers import CountingKind, FailingKind


def test_counting_kind_sockets() -> None:
    k = CountingKind()
    assert k.name == "Counting"
    assert k.input_count == 1
    assert k.output_count == 1
    assert [s.name for s in k.get_input_sockets()] == ["x"]
    assert [s.name for s in k.get_output_sockets()] == ["y"]


def test_counting_kind_compute() -> None:
    k = CountingKind()
    assert k.compute([[1, 2]], [10]) == 13
    assert k.compute([[]], []) == 0
    assert k.calls == 2


def test_default_data() -> None:
    assert CountingKind().default_data() == [0]
    assert FailingKind().default_data() == [True]


def test_schema_to_dict() -> None:
    d = CountingKind().schema().to_dict()
    assert d["name"] == "Counting"
    assert [s["name"] for s in d["io"]["inputs"]] == ["x"]
    assert [s["name"] for s in d["io"]["outputs"]] == ["y"]
    assert d["data"][0]["defaultValue"] == 0
    assert d["autoEvaluateOnConnect"] is False


def test_function_kind() -> None:
    def double(inputs, data):
        return 2 * (inputs[0][0] if inputs[0] else data[0])

    k = FunctionNodeKind(double, inputs=1, outputs=1)
    assert k.name == "double"
    assert k.input_count == 1 and k.output_count == 1
    assert [s.name for s in k.declare_sockets()] == ["in0", "out0"]
    assert k.compute([[4]], []) == 8
    assert k.compute([[]], [3]) == 6


def test_function_kind_negative_counts_raise() -> None:
    with pytest.raises(ValueError):
        FunctionNodeKind(lambda i, d: None, inputs=-1)


def test_function_kind_auto_evaluate_flag() -> None:
    k = FunctionNodeKind(lambda i, d: None, inputs=1, outputs=0, auto_evaluate_on_connect=True)
    assert k.schema().auto_evaluate_on_connect is True
    assert k.output_count == 0
