"""
Evaluator: memoized, demand-driven evaluation of one node and its upstream closure.

1. Cache hit -> return the cached value.
2. Otherwise evaluate every input connection (socket order, then arrival order),
   call the kind's compute(inputs, data), cache and return the result.
3. trace() projects the cache into per-node display records for the host.

Failures propagate without caching the failing node; values already cached for
upstream nodes stay cached.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

from nodeflow.foundation.block import AbstractNodeKind
from nodeflow.foundation.cache import ValueCache
from nodeflow.foundation.errors import (
    ComputeError,
    InvalidOperationError,
    NodeNotFoundError,
)
from nodeflow.foundation.graph import Graph
from nodeflow.foundation.node import Node

logger = logging.getLogger(__name__)

#: cb(node_id, inputs, value, elapsed_seconds), called after each successful compute.
EvaluationCallback = Callable[[str, List[List[Any]], Any, float], None]


@dataclass
class NodeTrace:
    """
    Display snapshot of one node after evaluation.

    inputs: first value arriving on each input socket, None if unconnected.
    outputs: [cached value], or [] when the node has no cached value.
    """

    inputs: List[Optional[Any]] = field(default_factory=list)
    outputs: List[Any] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"inputs": list(self.inputs), "outputs": list(self.outputs)}


class Evaluator:
    """Fills a ValueCache from a Graph on demand."""

    def __init__(
        self,
        graph: Graph,
        cache: ValueCache,
        callbacks: Optional[List[EvaluationCallback]] = None,
    ) -> None:
        self.graph = graph
        self.cache = cache
        self.callbacks = callbacks or []

    def evaluate(self, target_id: str) -> Any:
        """Value of target_id, computing and caching whatever upstream is missing."""
        return self._evaluate(target_id)

    def evaluate_with_trace(self, target_id: str) -> Dict[str, NodeTrace]:
        """Evaluate target_id, then return traces for it and its upstream closure."""
        self.evaluate(target_id)
        return self.trace(target_id)

    def _evaluate(self, target_id: str) -> Any:
        # Explicit post-order walk: (node_id, expanded). `path` mirrors the chain of nodes
        # whose dependencies are still being resolved.
        path: List[str] = []
        active: Set[str] = set()
        stack: List[Tuple[str, bool]] = [(target_id, False)]
        while stack:
            node_id, expanded = stack.pop()
            if expanded:
                node = self.graph.get_node(node_id)
                inputs = [
                    [self.cache.get(conn.node_id) for conn in socket]
                    for socket in node.inputs
                ]
                value = self._compute(node, self.graph.registry.require(node.kind), inputs)
                self.cache.set(node_id, value)
                active.discard(path.pop())
                continue
            if node_id in self.cache:
                logger.debug(f"Cache hit for {node_id!r}")
                continue
            if node_id in active:
                cycle = " -> ".join(path[path.index(node_id):] + [node_id])
                raise InvalidOperationError(f"Cycle detected while evaluating: {cycle}")

            node = self.graph.get_node(node_id)
            if node is None:
                if path:
                    raise NodeNotFoundError(node_id, f"Node dependency {node_id!r} not found")
                raise NodeNotFoundError(node_id)
            self.graph.registry.require(node.kind)

            path.append(node_id)
            active.add(node_id)
            stack.append((node_id, True))
            # Reversed so dependencies resolve in socket order, then arrival order
            for socket in reversed(node.inputs):
                for conn in reversed(socket):
                    stack.append((conn.node_id, False))
        return self.cache.get(target_id)

    def _compute(self, node: Node, kind: AbstractNodeKind, inputs: List[List[Any]]) -> Any:
        t0 = time.time()
        try:
            value = kind.compute(inputs, list(node.data))
        except ComputeError as e:
            if e.node_id is None:
                e.node_id = node.node_id
            if e.kind is None:
                e.kind = node.kind
            logger.warning(f"Compute failed for {node.node_id!r} (kind={node.kind}): {e}")
            raise
        except Exception as e:
            logger.warning(f"Compute failed for {node.node_id!r} (kind={node.kind}): {e}")
            raise ComputeError(
                f"Error computing node {node.node_id!r} (kind={node.kind}): {e}",
                node_id=node.node_id,
                kind=node.kind,
            ) from e
        elapsed = time.time() - t0
        logger.debug(f"Computed {node.node_id!r} (kind={node.kind}) in {elapsed:.6f}s")
        for cb in self.callbacks:
            cb(node.node_id, inputs, value, elapsed)
        return value

    # --- Trace ---

    def trace(self, target_id: str) -> Dict[str, NodeTrace]:
        """Read-only projection over the cache for target_id and everything upstream of it."""
        out: Dict[str, NodeTrace] = {}
        seen: Set[str] = set()
        stack = [target_id]
        while stack:
            node_id = stack.pop()
            if node_id in seen:
                continue
            seen.add(node_id)
            node = self.graph.get_node(node_id)
            if node is None:
                raise NodeNotFoundError(node_id, f"Node trace {node_id!r} not found")

            display_inputs: List[Optional[Any]] = []
            for socket in node.inputs:
                values = [self.cache.get(c.node_id) for c in socket if c.node_id in self.cache]
                display_inputs.append(values[0] if values else None)
                stack.extend(c.node_id for c in socket)

            outputs = [self.cache.get(node_id)] if node_id in self.cache else []
            out[node_id] = NodeTrace(inputs=display_inputs, outputs=outputs)
        return out
