"""Constant kinds: emit their single data slot."""

from __future__ import annotations

from typing import Any, List

from nodeflow.foundation.block import AbstractNodeKind
from nodeflow.foundation.port import (
    DataSlotDef,
    InputSocket,
    OutputSocket,
    SocketDef,
    SocketType,
)
from nodeflow.foundation.registry import register_kind


class ConstantKind(AbstractNodeKind):
    """One unconnectable input (palette only), one output carrying data[0]."""

    display_name = "Constant"
    dtype = SocketType.ANY
    default_value: Any = None

    @property
    def name(self) -> str:
        return self.display_name

    def declare_sockets(self) -> List[SocketDef]:
        return [
            InputSocket("value", self.dtype, ui="none", max_connections=0),
            OutputSocket("value", self.dtype),
        ]

    def declare_data(self) -> List[DataSlotDef]:
        return [DataSlotDef(input_index=0, default_value=self.default_value)]

    def compute(self, inputs: List[List[Any]], data: List[Any]) -> Any:
        return data[0] if data else self.default_value


@register_kind("booleanNode")
class BooleanKind(ConstantKind):
    display_name = "Boolean"
    dtype = SocketType.BOOLEAN
    default_value = False


@register_kind("numberNode")
class NumberKind(ConstantKind):
    display_name = "Number"
    dtype = SocketType.NUMBER
    default_value = 0


@register_kind("stringNode")
class StringKind(ConstantKind):
    display_name = "String"
    dtype = SocketType.STRING
    default_value = ""
