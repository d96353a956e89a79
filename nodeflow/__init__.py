"""
nodeflow: dataflow graph engine with memoized, incrementally invalidated evaluation.

Levels: foundation (kinds, registry, graph, cache) -> executor -> engine -> runner/cli.
"""

__version__ = "0.1.0"

from nodeflow.foundation import (
    AbstractNodeKind,
    ComputeError,
    FunctionNodeKind,
    Graph,
    GraphError,
    InvalidIndexError,
    InvalidOperationError,
    NodeNotFoundError,
    NodeRegistry,
    UnknownKindError,
    ValueCache,
    register_kind,
)
from nodeflow.config import EngineConfig, load_config
from nodeflow.executor import Evaluator, NodeTrace
from nodeflow.engine import GraphEngine

__all__ = [
    "__version__",
    "AbstractNodeKind",
    "FunctionNodeKind",
    "NodeRegistry",
    "register_kind",
    "Graph",
    "ValueCache",
    "Evaluator",
    "NodeTrace",
    "GraphEngine",
    "EngineConfig",
    "load_config",
    "GraphError",
    "NodeNotFoundError",
    "UnknownKindError",
    "InvalidIndexError",
    "InvalidOperationError",
    "ComputeError",
]
