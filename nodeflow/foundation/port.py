"""
Socket and data-slot schema: the declared shape of a node kind.

Sockets are positional (a connection names a socket by index); the name, value-type label
and UI hints are palette metadata carried verbatim to the host.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class SocketDirection(str, Enum):
    IN = "input"
    OUT = "output"


class SocketType(str, Enum):
    """Value-type label shown by the host. Not enforced on values."""

    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ANY = "any"


@dataclass(frozen=True)
class SocketUI:
    type: str = "show"   # "show" | "none"
    show_name: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "showName": self.show_name}


@dataclass(frozen=True)
class SocketDef:
    """
    One input or output socket of a node kind.

    max_connections: how many connections the socket accepts; None means unbounded.
    """

    name: str
    direction: SocketDirection
    dtype: SocketType = SocketType.ANY
    ui: SocketUI = field(default_factory=SocketUI)
    max_connections: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Socket name must be non-empty")
        if self.max_connections is not None and self.max_connections < 0:
            raise ValueError(f"max_connections must be >= 0, got {self.max_connections}")

    @property
    def is_input(self) -> bool:
        return self.direction == SocketDirection.IN

    @property
    def is_output(self) -> bool:
        return self.direction == SocketDirection.OUT

    def accepts_more(self, current: int) -> bool:
        return self.max_connections is None or current < self.max_connections

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.dtype.value,
            "ui": self.ui.to_dict(),
            "maxConnections": self.max_connections,
        }


@dataclass(frozen=True)
class DataUI:
    type: str = "input"   # "input" | "display"
    show_name: bool = False
    options: Optional[Tuple[str, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type, "showName": self.show_name}
        if self.options is not None:
            out["options"] = list(self.options)
        return out


@dataclass(frozen=True)
class DataSlotDef:
    """Local data slot; input_index is the input socket it stands in for when unconnected."""

    input_index: int
    default_value: Any = None
    ui: DataUI = field(default_factory=DataUI)
    type: str = "plugin"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "inputIndex": self.input_index,
            "ui": self.ui.to_dict(),
            "defaultValue": self.default_value,
        }


def InputSocket(
    name: str,
    dtype: SocketType = SocketType.ANY,
    *,
    ui: str = "show",
    show_name: bool = False,
    max_connections: Optional[int] = 1,
) -> SocketDef:
    """Input socket; accepts a single connection unless told otherwise."""
    return SocketDef(
        name=name,
        direction=SocketDirection.IN,
        dtype=dtype,
        ui=SocketUI(type=ui, show_name=show_name),
        max_connections=max_connections,
    )


def OutputSocket(
    name: str,
    dtype: SocketType = SocketType.ANY,
    *,
    ui: str = "show",
    show_name: bool = False,
    max_connections: Optional[int] = None,
) -> SocketDef:
    """Output socket; fans out to any number of connections unless told otherwise."""
    return SocketDef(
        name=name,
        direction=SocketDirection.OUT,
        dtype=dtype,
        ui=SocketUI(type=ui, show_name=show_name),
        max_connections=max_connections,
    )
