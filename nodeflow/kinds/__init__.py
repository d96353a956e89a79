"""
Built-in node kinds.

Importing this package registers every built-in kind in the global registry.
"""

from typing import Optional

from nodeflow.foundation.registry import NodeRegistry
from nodeflow.kinds.arithmetic import (
    AdditionKind,
    BinaryKind,
    DivisionKind,
    MultiplicationKind,
    SubtractionKind,
)
from nodeflow.kinds.constants import BooleanKind, ConstantKind, NumberKind, StringKind
from nodeflow.kinds.logic import ComparisonKind, IfKind
from nodeflow.kinds.output import OutputKind

BUILTIN_KINDS = {
    "booleanNode": BooleanKind,
    "numberNode": NumberKind,
    "stringNode": StringKind,
    "additionNode": AdditionKind,
    "subractionNode": SubtractionKind,
    "multiplicationNode": MultiplicationKind,
    "divisionNode": DivisionKind,
    "comparisonNode": ComparisonKind,
    "ifNode": IfKind,
    "outputNode": OutputKind,
}


def register_builtin_kinds(registry: Optional[NodeRegistry] = None) -> NodeRegistry:
    """Register all built-in kinds in the given registry (default: global). Returns it."""
    reg = registry or NodeRegistry.global_registry()
    for kind_id, cls in BUILTIN_KINDS.items():
        reg.register(kind_id, cls)
    return reg


__all__ = [
    "BUILTIN_KINDS",
    "register_builtin_kinds",
    "ConstantKind",
    "BooleanKind",
    "NumberKind",
    "StringKind",
    "BinaryKind",
    "AdditionKind",
    "SubtractionKind",
    "MultiplicationKind",
    "DivisionKind",
    "ComparisonKind",
    "IfKind",
    "OutputKind",
]
