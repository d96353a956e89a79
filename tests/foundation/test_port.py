"""Tests for foundation.port (SocketDef, DataSlotDef)."""

import pytest

from nodeflow.foundation.port import (
    DataSlotDef,
    DataUI,
    InputSocket,
    OutputSocket,
    SocketDef,
    SocketDirection,
    SocketType,
)


def test_socket_basic() -> None:
    s = SocketDef("a", SocketDirection.IN, dtype=SocketType.NUMBER)
    assert s.name == "a"
    assert s.is_input is True
    assert s.is_output is False
    assert s.max_connections is None


def test_socket_empty_name_raises() -> None:
    with pytest.raises(ValueError, match="non-empty"):
        SocketDef("", SocketDirection.IN)
    with pytest.raises(ValueError, match="non-empty"):
        SocketDef("  ", SocketDirection.OUT)


def test_socket_negative_max_connections_raises() -> None:
    with pytest.raises(ValueError, match="max_connections"):
        SocketDef("a", SocketDirection.IN, max_connections=-1)


def test_input_output_helpers_defaults() -> None:
    i = InputSocket("a")
    o = OutputSocket("sum")
    assert i.is_input and i.max_connections == 1
    assert o.is_output and o.max_connections is None


def test_accepts_more() -> None:
    assert InputSocket("a").accepts_more(0) is True
    assert InputSocket("a").accepts_more(1) is False
    assert InputSocket("v", max_connections=0).accepts_more(0) is False
    assert OutputSocket("o").accepts_more(10_000) is True


def test_socket_to_dict() -> None:
    d = InputSocket("value", SocketType.NUMBER, ui="none", max_connections=0).to_dict()
    assert d == {
        "name": "value",
        "type": "number",
        "ui": {"type": "none", "showName": False},
        "maxConnections": 0,
    }


def test_data_slot_to_dict() -> None:
    d = DataSlotDef(input_index=1, default_value=0).to_dict()
    assert d == {
        "type": "plugin",
        "inputIndex": 1,
        "ui": {"type": "input", "showName": False},
        "defaultValue": 0,
    }
    with_options = DataSlotDef(0, "x", ui=DataUI(options=("x", "y"))).to_dict()
    assert with_options["ui"]["options"] == ["x", "y"]
