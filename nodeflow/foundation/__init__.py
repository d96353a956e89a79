"""
Foundation: node kinds, registry, graph store and value cache.

Levels: port -> block (node kind) -> registry -> node -> graph -> cache.
"""

from nodeflow.foundation.block import AbstractNodeKind, FunctionNodeKind, NodeSchema
from nodeflow.foundation.cache import ValueCache, invalidate
from nodeflow.foundation.errors import (
    ComputeError,
    GraphError,
    InvalidIndexError,
    InvalidOperationError,
    NodeNotFoundError,
    UnknownKindError,
)
from nodeflow.foundation.graph import Graph
from nodeflow.foundation.node import Connection, InputConnection, Node, OutputConnection
from nodeflow.foundation.port import (
    DataSlotDef,
    DataUI,
    InputSocket,
    OutputSocket,
    SocketDef,
    SocketDirection,
    SocketType,
    SocketUI,
)
from nodeflow.foundation.registry import NodeRegistry, builtin_registry, register_kind

__all__ = [
    "AbstractNodeKind",
    "FunctionNodeKind",
    "NodeSchema",
    "ValueCache",
    "invalidate",
    "GraphError",
    "NodeNotFoundError",
    "UnknownKindError",
    "InvalidIndexError",
    "InvalidOperationError",
    "ComputeError",
    "Graph",
    "Node",
    "Connection",
    "InputConnection",
    "OutputConnection",
    "SocketDef",
    "SocketDirection",
    "SocketType",
    "SocketUI",
    "DataSlotDef",
    "DataUI",
    "InputSocket",
    "OutputSocket",
    "NodeRegistry",
    "builtin_registry",
    "register_kind",
]
