"""
Helpers for JSON-like values flowing between sockets.

Values are None, bool, int/float, str, list or dict. Helpers dispatch on the value's type;
bool is its own tag and is never read as a number.
"""

from __future__ import annotations

import json
from typing import Any, List, Sequence


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def as_number(value: Any, default: float = 0) -> Any:
    """value if it is a number, else default."""
    return value if is_number(value) else default


def as_bool(value: Any, default: bool = False) -> bool:
    return value if isinstance(value, bool) else default


def to_display_string(value: Any) -> str:
    """Strings as-is; everything else in compact JSON form (true, null, 1.5, [1,2])."""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


def values_equal(a: Any, b: Any) -> bool:
    """Equality that respects the value tag: True != 1, but 1 == 1.0."""
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict) and isinstance(b, dict):
        return set(a) == set(b) and all(values_equal(a[k], b[k]) for k in a)
    if type(a) is not type(b):
        return False
    return a == b


def operand(inputs: Sequence[List[Any]], data: Sequence[Any], index: int, default: Any = 0) -> Any:
    """First value on input socket index; falls back to data[index], then default."""
    if index < len(inputs) and inputs[index]:
        return inputs[index][0]
    if index < len(data):
        return data[index]
    return default
