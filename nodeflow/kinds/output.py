"""Sink kind: shows whatever arrives on its input. Has no output sockets."""

from __future__ import annotations

from typing import Any, List

from nodeflow.foundation.block import AbstractNodeKind
from nodeflow.foundation.port import DataSlotDef, DataUI, InputSocket, SocketDef, SocketType
from nodeflow.foundation.registry import register_kind


@register_kind("outputNode")
class OutputKind(AbstractNodeKind):
    auto_evaluate_on_connect = True

    @property
    def name(self) -> str:
        return "Output"

    def declare_sockets(self) -> List[SocketDef]:
        return [InputSocket("input", SocketType.ANY, ui="none")]

    def declare_data(self) -> List[DataSlotDef]:
        return [DataSlotDef(input_index=0, default_value=" ", ui=DataUI(type="display"))]

    def compute(self, inputs: List[List[Any]], data: List[Any]) -> Any:
        if inputs and inputs[0]:
            return inputs[0][0]
        return None
