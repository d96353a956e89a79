"""
Error taxonomy for graph edits and evaluation.

Every failure is raised as a subclass of GraphError; each class also derives from the
closest builtin (LookupError, IndexError, ValueError, RuntimeError) so callers can catch
either form. error_kind is the stable name reported to the host.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class GraphError(Exception):
    """Base class for all engine errors."""

    error_kind = "GraphError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Structured form for the host: {"kind", "message"}."""
        return {"kind": self.error_kind, "message": self.message}


class NodeNotFoundError(GraphError, LookupError):
    """A node id was referenced (directly or through an edge) but is absent."""

    error_kind = "NotFound"

    def __init__(self, node_id: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Node not found: {node_id}")
        self.node_id = node_id


class UnknownKindError(GraphError, LookupError):
    """Node kind is not in the registry."""

    error_kind = "UnknownKind"

    def __init__(self, kind: str, available: Optional[list] = None) -> None:
        msg = f"Unknown node kind: {kind!r}"
        if available is not None:
            msg += f". Registered: {', '.join(sorted(available))}"
        super().__init__(msg)
        self.kind = kind


class InvalidIndexError(GraphError, IndexError):
    """Socket index outside the declared range of a node."""

    error_kind = "InvalidIndex"


class InvalidOperationError(GraphError, ValueError):
    """Structurally forbidden edit: self-loop, cycle, duplicate node or edge."""

    error_kind = "InvalidOperation"


class ComputeError(GraphError, RuntimeError):
    """A compute function reported a domain failure while evaluating a node."""

    error_kind = "ComputeError"

    def __init__(
        self,
        message: str,
        *,
        node_id: Optional[str] = None,
        kind: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.node_id = node_id
        self.kind = kind
