"""Comparison and branching kinds."""

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
from nodeflow.kinds.arithmetic import BinaryKind
from nodeflow.kinds.values import as_bool, operand, values_equal


@register_kind("comparisonNode")
class ComparisonKind(BinaryKind):
    display_name = "Compare"
    input_type = SocketType.ANY
    output_name = "isEqual"
    output_type = SocketType.BOOLEAN

    def apply(self, a: Any, b: Any) -> Any:
        return values_equal(a, b)


@register_kind("ifNode")
class IfKind(AbstractNodeKind):
    """condition ? trueValue : falseValue. A non-bool condition counts as false."""

    @property
    def name(self) -> str:
        return "If"

    def declare_sockets(self) -> List[SocketDef]:
        return [
            InputSocket("condition", SocketType.BOOLEAN),
            InputSocket("trueValue", SocketType.ANY),
            InputSocket("falseValue", SocketType.ANY),
            OutputSocket("output", SocketType.ANY),
        ]

    def declare_data(self) -> List[DataSlotDef]:
        return [
            DataSlotDef(input_index=0, default_value=False),
            DataSlotDef(input_index=1, default_value=0),
            DataSlotDef(input_index=2, default_value=0),
        ]

    def compute(self, inputs: List[List[Any]], data: List[Any]) -> Any:
        condition = as_bool(operand(inputs, data, 0, default=False))
        if condition:
            return operand(inputs, data, 1, default=None)
        return operand(inputs, data, 2, default=None)
