"""
Graph store: nodes (node_id -> Node) and their redundant connection records.

- add_node / remove_node / add_edge / remove_edge / update_node_data
- Every edit is validated in full before the first write, so a rejected edit leaves the
  graph untouched.
- Optional guards (off unless asked for): cycle rejection, duplicate-edge rejection,
  per-socket max_connections.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Dict, List, Optional, Set

from nodeflow.foundation.errors import (
    InvalidIndexError,
    InvalidOperationError,
    NodeNotFoundError,
)
from nodeflow.foundation.node import Connection, InputConnection, Node, OutputConnection
from nodeflow.foundation.registry import NodeRegistry

logger = logging.getLogger(__name__)


class Graph:
    """
    Mutable node table plus adjacency. Holds no values; see ValueCache for those.
    """

    def __init__(
        self,
        registry: NodeRegistry,
        *,
        detect_cycles: bool = False,
        reject_duplicate_edges: bool = False,
        enforce_max_connections: bool = False,
    ) -> None:
        self._registry = registry
        self._nodes: Dict[str, Node] = {}
        self.detect_cycles = detect_cycles
        self.reject_duplicate_edges = reject_duplicate_edges
        self.enforce_max_connections = enforce_max_connections

    @property
    def registry(self) -> NodeRegistry:
        return self._registry

    @property
    def node_ids(self) -> Set[str]:
        return set(self._nodes)

    def get_node(self, node_id: str) -> Optional[Node]:
        return self._nodes.get(node_id)

    def require_node(self, node_id: str) -> Node:
        node = self._nodes.get(node_id)
        if node is None:
            raise NodeNotFoundError(node_id)
        return node

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    # --- Nodes ---

    def add_node(self, node_id: str, kind: str, data: Optional[List[Any]] = None) -> Node:
        """Create a node with empty sockets sized from the kind's schema. data=None -> defaults."""
        if not isinstance(node_id, str) or not node_id.strip():
            raise InvalidOperationError("node_id must be a non-empty string")
        if node_id in self._nodes:
            raise InvalidOperationError(f"Node already exists: {node_id}")
        definition = self._registry.require(kind)
        node = Node.create(
            node_id,
            kind,
            definition.default_data() if data is None else data,
            definition.input_count,
            definition.output_count,
        )
        self._nodes[node_id] = node
        logger.debug(f"Added node {node_id!r} of kind {kind!r}")
        return node

    def remove_node(self, node_id: str) -> Set[str]:
        """
        Delete a node and every connection record naming it on other nodes.
        Returns the ids of its direct consumers.
        """
        node = self.require_node(node_id)
        consumers = set(node.consumer_ids())
        for other in self._nodes.values():
            if other.node_id == node_id or not other.references(node_id):
                continue
            other.inputs = [[c for c in socket if c.node_id != node_id] for socket in other.inputs]
            other.outputs = [[c for c in socket if c.node_id != node_id] for socket in other.outputs]
        del self._nodes[node_id]
        logger.debug(f"Removed node {node_id!r}; direct consumers: {sorted(consumers)}")
        return consumers

    def update_node_data(self, node_id: str, data: List[Any]) -> bool:
        """Replace a node's data. Returns False (and does nothing) if the node is absent."""
        node = self._nodes.get(node_id)
        if node is None:
            logger.debug(f"update_node_data: {node_id!r} not in graph, ignored")
            return False
        node.data = list(data)
        return True

    # --- Edges ---

    def add_edge(
        self,
        source_id: str,
        source_output_index: int,
        target_id: str,
        target_input_index: int,
    ) -> Connection:
        self._validate_edge(source_id, source_output_index, target_id, target_input_index)
        source = self._nodes[source_id]
        target = self._nodes[target_id]
        source.outputs[source_output_index].append(OutputConnection(target_id, target_input_index))
        target.inputs[target_input_index].append(InputConnection(source_id, source_output_index))
        logger.debug(
            f"Connected {source_id}[{source_output_index}] -> {target_id}[{target_input_index}]"
        )
        return Connection(source_id, source_output_index, target_id, target_input_index)

    def remove_edge(
        self,
        source_id: str,
        source_output_index: int,
        target_id: str,
        target_input_index: int,
    ) -> bool:
        """
        Remove every matching record from both endpoints. Missing match is not an error.
        Returns True if anything was removed.
        """
        if source_id == target_id:
            return False
        source = self.require_node(source_id)
        target = self.require_node(target_id)
        removed = 0
        if 0 <= source_output_index < len(source.outputs):
            socket = source.outputs[source_output_index]
            kept = [c for c in socket if not (c.node_id == target_id and c.input_index == target_input_index)]
            removed += len(socket) - len(kept)
            source.outputs[source_output_index] = kept
        if 0 <= target_input_index < len(target.inputs):
            socket = target.inputs[target_input_index]
            kept = [c for c in socket if not (c.node_id == source_id and c.output_index == source_output_index)]
            removed += len(socket) - len(kept)
            target.inputs[target_input_index] = kept
        if removed:
            logger.debug(
                f"Disconnected {source_id}[{source_output_index}] -> {target_id}[{target_input_index}]"
            )
        return removed > 0

    def has_edge(
        self,
        source_id: str,
        source_output_index: int,
        target_id: str,
        target_input_index: int,
    ) -> bool:
        source = self._nodes.get(source_id)
        if source is None or not 0 <= source_output_index < len(source.outputs):
            return False
        return OutputConnection(target_id, target_input_index) in source.outputs[source_output_index]

    def _validate_edge(
        self,
        source_id: str,
        source_output_index: int,
        target_id: str,
        target_input_index: int,
    ) -> None:
        if source_id not in self._nodes:
            raise NodeNotFoundError(source_id, f"Source node not found: {source_id}")
        if target_id not in self._nodes:
            raise NodeNotFoundError(target_id, f"Target node not found: {target_id}")
        if source_id == target_id:
            raise InvalidOperationError(f"Self-loops are not allowed: {source_id!r} cannot connect to itself")
        source = self._nodes[source_id]
        target = self._nodes[target_id]
        if not 0 <= source_output_index < len(source.outputs):
            raise InvalidIndexError(
                f"Invalid output index {source_output_index} on {source_id!r} "
                f"({len(source.outputs)} outputs)"
            )
        if not 0 <= target_input_index < len(target.inputs):
            raise InvalidIndexError(
                f"Invalid input index {target_input_index} on {target_id!r} "
                f"({len(target.inputs)} inputs)"
            )
        if self.reject_duplicate_edges and self.has_edge(
            source_id, source_output_index, target_id, target_input_index
        ):
            raise InvalidOperationError(
                f"Edge {source_id}[{source_output_index}] -> {target_id}[{target_input_index}] already exists"
            )
        if self.enforce_max_connections:
            self._check_capacity(source, source_output_index, target, target_input_index)
        if self.detect_cycles and self.reaches(target_id, source_id):
            raise InvalidOperationError(
                f"Edge {source_id} -> {target_id} would create a cycle"
            )

    def _check_capacity(self, source: Node, out_idx: int, target: Node, in_idx: int) -> None:
        out_def = self._registry.require(source.kind).get_output_sockets()[out_idx]
        in_def = self._registry.require(target.kind).get_input_sockets()[in_idx]
        if not out_def.accepts_more(len(source.outputs[out_idx])):
            raise InvalidOperationError(
                f"Output {out_idx} of {source.node_id!r} has reached its maximum connections"
            )
        if not in_def.accepts_more(len(target.inputs[in_idx])):
            raise InvalidOperationError(
                f"Input {in_idx} of {target.node_id!r} has reached its maximum connections"
            )

    # --- Queries ---

    def reaches(self, start_id: str, goal_id: str) -> bool:
        """True if goal_id is start_id or downstream of it via output connections."""
        seen: Set[str] = set()
        stack = [start_id]
        while stack:
            nid = stack.pop()
            if nid == goal_id:
                return True
            if nid in seen:
                continue
            seen.add(nid)
            node = self._nodes.get(nid)
            if node is not None:
                stack.extend(node.consumer_ids())
        return False

    def consumers(self, node_id: str) -> Set[str]:
        return set(self.require_node(node_id).consumer_ids())

    def dependencies(self, node_id: str) -> Set[str]:
        return set(self.require_node(node_id).dependency_ids())

    def get_connections(self) -> List[Connection]:
        """All edges, read from the forward (output-side) records."""
        out: List[Connection] = []
        for nid, node in self._nodes.items():
            for out_idx, socket in enumerate(node.outputs):
                for c in socket:
                    out.append(Connection(nid, out_idx, c.node_id, c.input_index))
        return out

    def check_symmetry(self) -> List[str]:
        """
        Compare forward and backward records. Returns one message per mismatch;
        an empty list means every edge is recorded on both endpoints exactly as often.
        """
        forward = Counter(self.get_connections())
        backward: Counter = Counter()
        for nid, node in self._nodes.items():
            for in_idx, socket in enumerate(node.inputs):
                for c in socket:
                    backward[Connection(c.node_id, c.output_index, nid, in_idx)] += 1
        problems: List[str] = []
        for conn in set(forward) | set(backward):
            if forward[conn] != backward[conn]:
                problems.append(
                    f"{conn.source_id}[{conn.source_output_index}] -> "
                    f"{conn.target_id}[{conn.target_input_index}]: "
                    f"{forward[conn]} forward vs {backward[conn]} backward"
                )
        return sorted(problems)
