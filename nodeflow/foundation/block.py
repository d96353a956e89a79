"""
Node kind: declared sockets + data slots + a pure compute function.

- declare_sockets(), declare_data(), compute(inputs, data) -> value
- schema() for the host palette; default_data() for new nodes
- FunctionNodeKind wraps a plain function for kinds that need no subclass.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from nodeflow.foundation.port import (
    DataSlotDef,
    InputSocket,
    OutputSocket,
    SocketDef,
)

ComputeFn = Callable[[List[List[Any]], List[Any]], Any]


@dataclass(frozen=True)
class NodeSchema:
    """Palette description of a node kind (what get_node_defs returns per kind)."""

    name: str
    inputs: Sequence[SocketDef]
    outputs: Sequence[SocketDef]
    data: Sequence[DataSlotDef]
    auto_evaluate_on_connect: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "io": {
                "inputs": [s.to_dict() for s in self.inputs],
                "outputs": [s.to_dict() for s in self.outputs],
            },
            "data": [d.to_dict() for d in self.data],
            "autoEvaluateOnConnect": self.auto_evaluate_on_connect,
        }


class AbstractNodeKind(ABC):
    """
    One entry of the node registry.

    inputs passed to compute() are indexed by input socket; each element is the list of
    values arriving on that socket in connection order (empty when unconnected). data is
    the node's local data list. compute() must be pure: same arguments, same result.
    """

    #: Host hint: evaluate downstream when a connection is made into a node of this kind.
    auto_evaluate_on_connect: bool = False

    @property
    def name(self) -> str:
        """Display name. Override in subclass."""
        return type(self).__name__

    # --- Sockets / data ---

    @abstractmethod
    def declare_sockets(self) -> List[SocketDef]:
        """Declare input and output sockets, in positional order per direction."""
        ...

    def declare_data(self) -> List[DataSlotDef]:
        return []

    def get_input_sockets(self) -> List[SocketDef]:
        return [s for s in self.declare_sockets() if s.is_input]

    def get_output_sockets(self) -> List[SocketDef]:
        return [s for s in self.declare_sockets() if s.is_output]

    @property
    def input_count(self) -> int:
        return len(self.get_input_sockets())

    @property
    def output_count(self) -> int:
        return len(self.get_output_sockets())

    def default_data(self) -> List[Any]:
        return [slot.default_value for slot in self.declare_data()]

    def schema(self) -> NodeSchema:
        return NodeSchema(
            name=self.name,
            inputs=tuple(self.get_input_sockets()),
            outputs=tuple(self.get_output_sockets()),
            data=tuple(self.declare_data()),
            auto_evaluate_on_connect=self.auto_evaluate_on_connect,
        )

    # --- Execution ---

    @abstractmethod
    def compute(self, inputs: List[List[Any]], data: List[Any]) -> Any:
        """Return the node's output value. Raise ComputeError on a domain failure."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class FunctionNodeKind(AbstractNodeKind):
    """Kind built from a function and socket counts; sockets are named in0.., out0.."""

    def __init__(
        self,
        fn: ComputeFn,
        *,
        inputs: int = 0,
        outputs: int = 1,
        name: Optional[str] = None,
        data: Optional[List[DataSlotDef]] = None,
        auto_evaluate_on_connect: bool = False,
    ) -> None:
        if inputs < 0 or outputs < 0:
            raise ValueError("Socket counts must be >= 0")
        self._fn = fn
        self._name = name or getattr(fn, "__name__", "function")
        self._sockets = [InputSocket(f"in{i}") for i in range(inputs)] + [
            OutputSocket(f"out{i}") for i in range(outputs)
        ]
        self._data = list(data or [])
        self.auto_evaluate_on_connect = auto_evaluate_on_connect

    @property
    def name(self) -> str:
        return self._name

    def declare_sockets(self) -> List[SocketDef]:
        return list(self._sockets)

    def declare_data(self) -> List[DataSlotDef]:
        return list(self._data)

    def compute(self, inputs: List[List[Any]], data: List[Any]) -> Any:
        return self._fn(inputs, data)
