"""
Node and connection records.

A connection is stored twice: OutputConnection on the source's output socket and
InputConnection on the target's input socket. Neighbours are referenced by id only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List


@dataclass(frozen=True)
class InputConnection:
    """Backward record held by a target input socket: (source node, source output index)."""

    node_id: str
    output_index: int


@dataclass(frozen=True)
class OutputConnection:
    """Forward record held by a source output socket: (target node, target input index)."""

    node_id: str
    input_index: int


@dataclass(frozen=True)
class Connection:
    """Edge as seen from outside: (source, output index) -> (target, input index)."""

    source_id: str
    source_output_index: int
    target_id: str
    target_input_index: int

    def __post_init__(self) -> None:
        for name in ("source_id", "target_id"):
            v = getattr(self, name)
            if not isinstance(v, str) or not v.strip():
                raise ValueError(f"{name} must be non-empty")


@dataclass
class Node:
    node_id: str
    kind: str
    data: List[Any] = field(default_factory=list)
    inputs: List[List[InputConnection]] = field(default_factory=list)
    outputs: List[List[OutputConnection]] = field(default_factory=list)

    @classmethod
    def create(cls, node_id: str, kind: str, data: List[Any], input_count: int, output_count: int) -> Node:
        """New node with input_count/output_count empty sockets."""
        return cls(
            node_id=node_id,
            kind=kind,
            data=list(data),
            inputs=[[] for _ in range(input_count)],
            outputs=[[] for _ in range(output_count)],
        )

    def consumer_ids(self) -> List[str]:
        """Targets of every outgoing connection, in socket then arrival order (may repeat)."""
        return [c.node_id for socket in self.outputs for c in socket]

    def dependency_ids(self) -> List[str]:
        """Sources of every incoming connection, in socket then arrival order (may repeat)."""
        return [c.node_id for socket in self.inputs for c in socket]

    def references(self, node_id: str) -> bool:
        return node_id in self.consumer_ids() or node_id in self.dependency_ids()

    def __repr__(self) -> str:
        return f"Node(node_id={self.node_id!r}, kind={self.kind!r})"
