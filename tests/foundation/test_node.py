"""Tests for foundation.node."""

import pytest

from nodeflow.foundation.node import Connection, InputConnection, Node, OutputConnection


def test_node_create_sizes_sockets() -> None:
    n = Node.create("n1", "additionNode", [0, 0], 2, 1)
    assert n.node_id == "n1" and n.kind == "additionNode"
    assert n.inputs == [[], []]
    assert n.outputs == [[]]
    assert n.data == [0, 0]


def test_node_create_copies_data() -> None:
    data = [1]
    n = Node.create("n1", "numberNode", data, 1, 1)
    data.append(2)
    assert n.data == [1]


def test_node_neighbour_ids() -> None:
    n = Node.create("n", "k", [], 2, 1)
    n.inputs[0].append(InputConnection("a", 0))
    n.inputs[1].append(InputConnection("b", 0))
    n.outputs[0].append(OutputConnection("c", 1))
    assert n.dependency_ids() == ["a", "b"]
    assert n.consumer_ids() == ["c"]
    assert n.references("a") and n.references("c")
    assert not n.references("z")


def test_connection_empty_id_raises() -> None:
    with pytest.raises(ValueError):
        Connection("", 0, "b", 0)
    with pytest.raises(ValueError):
        Connection("a", 0, " ", 0)
