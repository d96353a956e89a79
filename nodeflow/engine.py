"""
GraphEngine: the host-facing surface.

Owns one Graph, one ValueCache and a frozen registry snapshot. Every mutation that can
change a displayed value returns the dirty set (node ids the host should re-render or
re-evaluate). Calls are expected one at a time from a single caller.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Set

from nodeflow.config import EngineConfig
from nodeflow.executor import EvaluationCallback, Evaluator, NodeTrace
from nodeflow.foundation.cache import ValueCache, invalidate
from nodeflow.foundation.graph import Graph
from nodeflow.foundation.registry import NodeRegistry, builtin_registry

logger = logging.getLogger(__name__)


class GraphEngine:
    """
    Graph store + cache + evaluator behind one object.

        engine = GraphEngine()
        engine.add_node("n1", "numberNode", [5])
        engine.add_node("n2", "numberNode", [3])
        engine.add_node("n3", "additionNode", [0, 0])
        engine.add_edge("n1", 0, "n3", 0)
        engine.add_edge("n2", 0, "n3", 1)
        engine.evaluate_node("n3")["n3"]["outputs"]  # [8]
    """

    def __init__(
        self,
        registry: Optional[NodeRegistry] = None,
        config: Optional[EngineConfig] = None,
        *,
        callbacks: Optional[List[EvaluationCallback]] = None,
    ) -> None:
        self._config = config or EngineConfig()
        self._registry = (registry or builtin_registry()).frozen()
        self._graph = Graph(
            self._registry,
            detect_cycles=self._config.detect_cycles,
            reject_duplicate_edges=self._config.reject_duplicate_edges,
            enforce_max_connections=self._config.enforce_max_connections,
        )
        self._cache = ValueCache()
        self._evaluator = Evaluator(self._graph, self._cache, callbacks=callbacks)
        logger.info(f"GraphEngine ready with {len(self._registry)} node kinds")

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def registry(self) -> NodeRegistry:
        return self._registry

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def cache(self) -> ValueCache:
        return self._cache

    # --- Catalogue ---

    def get_node_defs(self) -> Dict[str, Dict[str, Any]]:
        """Kind id -> schema dict (sockets, data slots, autoEvaluateOnConnect)."""
        return self._registry.schemas()

    def should_auto_evaluate(self, node_id: str) -> bool:
        """Whether the host should evaluate node_id right after connecting into it."""
        node = self._graph.get_node(node_id)
        if node is None:
            return False
        kind = self._registry.get(node.kind)
        return bool(kind is not None and kind.auto_evaluate_on_connect)

    # --- Mutations ---

    def add_node(self, node_id: str, kind: str, data: Optional[List[Any]] = None) -> None:
        self._graph.add_node(node_id, kind, data)

    def remove_node(self, node_id: str) -> Set[str]:
        """
        Delete node_id and its connections. Its consumers lose an input, so their entries
        (and everything downstream) are invalidated.
        """
        consumers = self._graph.remove_node(node_id)
        self._cache.pop(node_id)
        dirty: Set[str] = set()
        visited: Set[str] = set()
        for consumer_id in consumers:
            dirty |= invalidate(self._graph, self._cache, consumer_id, visited)
        if not self._config.transitive_remove_dirty:
            return consumers
        return dirty

    def add_edge(
        self,
        source_id: str,
        source_output_index: int,
        target_id: str,
        target_input_index: int,
    ) -> Set[str]:
        self._graph.add_edge(source_id, source_output_index, target_id, target_input_index)
        return invalidate(self._graph, self._cache, target_id)

    def remove_edge(
        self,
        source_id: str,
        source_output_index: int,
        target_id: str,
        target_input_index: int,
    ) -> Set[str]:
        """Idempotent: a second identical call removes nothing and returns an empty set."""
        removed = self._graph.remove_edge(source_id, source_output_index, target_id, target_input_index)
        if not removed:
            return set()
        return invalidate(self._graph, self._cache, target_id)

    def update_node_data(self, node_id: str, data: List[Any]) -> Set[str]:
        """Replace node data; an unknown node_id is ignored and yields an empty set."""
        if not self._graph.update_node_data(node_id, data):
            return set()
        return invalidate(self._graph, self._cache, node_id)

    # --- Evaluation ---

    def evaluate(self, node_id: str) -> Any:
        """Output value of node_id."""
        return self._evaluator.evaluate(node_id)

    def evaluate_with_trace(self, node_id: str) -> Dict[str, NodeTrace]:
        return self._evaluator.evaluate_with_trace(node_id)

    def evaluate_node(self, node_id: str) -> Dict[str, Dict[str, Any]]:
        """
        Evaluate node_id and return {node id: {"inputs": [...], "outputs": [...]}} for it
        and its whole upstream closure.
        """
        traces = self._evaluator.evaluate_with_trace(node_id)
        return {nid: t.to_dict() for nid, t in traces.items()}
