"""
Value cache and invalidation walk.

Entries are only ever created by the evaluator and only ever dropped by invalidate();
nothing refreshes an entry in place.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Optional, Set

from nodeflow.foundation.graph import Graph

logger = logging.getLogger(__name__)

_MISSING = object()


class ValueCache:
    """node_id -> last computed output value."""

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}

    def get(self, node_id: str, default: Any = None) -> Any:
        return self._values.get(node_id, default)

    def set(self, node_id: str, value: Any) -> None:
        self._values[node_id] = value

    def pop(self, node_id: str) -> bool:
        """Drop an entry. Returns True if one existed."""
        return self._values.pop(node_id, _MISSING) is not _MISSING

    def clear(self) -> None:
        self._values.clear()

    def snapshot(self) -> Dict[str, Any]:
        return dict(self._values)

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)


def invalidate(
    graph: Graph,
    cache: ValueCache,
    root_id: str,
    visited: Optional[Set[str]] = None,
) -> Set[str]:
    """
    Drop root_id's entry and, depth-first, the entries of everything downstream of it.

    root_id counts as dirty even without an entry: its consumers may still hold values.
    A node already visited in this walk is skipped, so a cycle ends the walk.
    Returns every node id whose cached or displayed value may have changed.
    """
    if visited is None:
        visited = set()
    dirty: Set[str] = set()
    stack = [root_id]
    while stack:
        node_id = stack.pop()
        if node_id in visited:
            continue
        visited.add(node_id)
        dirty.add(node_id)
        if cache.pop(node_id):
            logger.debug(f"Invalidated cached value of {node_id!r}")
        node = graph.get_node(node_id)
        if node is not None:
            stack.extend(node.consumer_ids())
    return dirty
