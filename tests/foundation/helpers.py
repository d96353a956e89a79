"""Concrete node kinds and helpers for foundation tests."""

from typing import Any, List

from nodeflow.foundation.block import AbstractNodeKind
from nodeflow.foundation.errors import ComputeError
from nodeflow.foundation.port import (
    DataSlotDef,
    InputSocket,
    OutputSocket,
    SocketDef,
)
from nodeflow.foundation.registry import NodeRegistry


class CountingKind(AbstractNodeKind):
    """
    in: x (any number of connections); out: y = sum of x values + data[0].
    Counts compute() calls per instance so tests can observe memoization.
    """

    def __init__(self) -> None:
        self.calls = 0

    @property
    def name(self) -> str:
        return "Counting"

    def declare_sockets(self) -> List[SocketDef]:
        return [
            InputSocket("x", max_connections=None),
            OutputSocket("y"),
        ]

    def declare_data(self) -> List[DataSlotDef]:
        return [DataSlotDef(input_index=0, default_value=0)]

    def compute(self, inputs: List[List[Any]], data: List[Any]) -> Any:
        self.calls += 1
        base = data[0] if data else 0
        return base + sum(inputs[0])


class FailingKind(AbstractNodeKind):
    """Raises ComputeError while data[0] is truthy; otherwise passes x through."""

    @property
    def name(self) -> str:
        return "Failing"

    def declare_sockets(self) -> List[SocketDef]:
        return [InputSocket("x"), OutputSocket("y")]

    def declare_data(self) -> List[DataSlotDef]:
        return [DataSlotDef(input_index=0, default_value=True)]

    def compute(self, inputs: List[List[Any]], data: List[Any]) -> Any:
        if data and data[0]:
            raise ComputeError("malformed operand")
        return inputs[0][0] if inputs[0] else None


class BrokenKind(AbstractNodeKind):
    """Raises a plain exception (not ComputeError) on every call."""

    def declare_sockets(self) -> List[SocketDef]:
        return [OutputSocket("y")]

    def compute(self, inputs: List[List[Any]], data: List[Any]) -> Any:
        return 1 / 0


def register_helper_kinds(registry: NodeRegistry) -> NodeRegistry:
    registry.register("counting", CountingKind())
    registry.register("failing", FailingKind)
    registry.register("broken", BrokenKind)
    return registry


def build_chain(engine, ids=("A", "B", "C"), start: int = 1) -> None:
    """counting nodes ids[0] -> ids[1] -> ... ; ids[0] carries data [start], others [0]."""
    for i, nid in enumerate(ids):
        engine.add_node(nid, "counting", [start if i == 0 else 0])
    for src, tgt in zip(ids, ids[1:]):
        engine.add_edge(src, 0, tgt, 0)


def build_sum_chain(engine, length: int) -> list:
    """numberNode n0 = 1 feeding additionNodes n1..n{length-1}, each adding 1; n{i} == i + 1."""
    ids = [f"n{i}" for i in range(length)]
    engine.add_node(ids[0], "numberNode", [1])
    for prev, nid in zip(ids, ids[1:]):
        engine.add_node(nid, "additionNode", [0, 1])
        engine.add_edge(prev, 0, nid, 0)
    return ids
