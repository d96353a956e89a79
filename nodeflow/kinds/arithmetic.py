"""
Arithmetic kinds. Each operand is the first value on its socket, else the matching data slot.

additionNode concatenates when either operand is a string; the others are numeric only,
with non-numbers counting as 0. divisionNode yields 0 for a zero divisor.
"""

from __future__ import annotations

from abc import abstractmethod
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
from nodeflow.kinds.values import as_number, operand, to_display_string


class BinaryKind(AbstractNodeKind):
    """Two single-connection inputs a, b with data fallbacks; one output."""

    display_name = "Binary"
    input_type = SocketType.NUMBER
    output_name = "sum"
    output_type = SocketType.ANY

    @property
    def name(self) -> str:
        return self.display_name

    def declare_sockets(self) -> List[SocketDef]:
        return [
            InputSocket("a", self.input_type),
            InputSocket("b", self.input_type),
            OutputSocket(self.output_name, self.output_type),
        ]

    def declare_data(self) -> List[DataSlotDef]:
        return [DataSlotDef(input_index=0, default_value=0), DataSlotDef(input_index=1, default_value=0)]

    def compute(self, inputs: List[List[Any]], data: List[Any]) -> Any:
        return self.apply(operand(inputs, data, 0), operand(inputs, data, 1))

    @abstractmethod
    def apply(self, a: Any, b: Any) -> Any:
        ...


@register_kind("additionNode")
class AdditionKind(BinaryKind):
    display_name = "Add"
    input_type = SocketType.ANY

    def apply(self, a: Any, b: Any) -> Any:
        if isinstance(a, str) or isinstance(b, str):
            return to_display_string(a) + to_display_string(b)
        return as_number(a) + as_number(b)


# Kind id spelling is part of the public catalogue.
@register_kind("subractionNode")
class SubtractionKind(BinaryKind):
    display_name = "Subtract"

    def apply(self, a: Any, b: Any) -> Any:
        return as_number(a) - as_number(b)


@register_kind("multiplicationNode")
class MultiplicationKind(BinaryKind):
    display_name = "Multiply"

    def apply(self, a: Any, b: Any) -> Any:
        return as_number(a) * as_number(b)


@register_kind("divisionNode")
class DivisionKind(BinaryKind):
    display_name = "Divide"

    def apply(self, a: Any, b: Any) -> Any:
        divisor = as_number(b)
        if divisor == 0:
            return 0.0
        return as_number(a) / divisor
