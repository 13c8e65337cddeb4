"""
Typed-array coercion.

Functions that need a homogeneous list (sum, max, join, ...) use these
helpers to unwrap an Array into plain Python payloads.

A mismatch is an expected outcome, not an error: coercion returns None
and the caller decides what to report. Partial results never escape.
"""

from enum import Enum
from typing import List, Optional, Union

from qvs.values import Value, ValueKind, require_value


class ElementKind(Enum):
    """Element kinds a typed array can be coerced to."""

    NUMBER = ValueKind.NUMBER
    STRING = ValueKind.STRING


def coerce_array(value: Value, kind: ElementKind) -> Optional[List[Union[int, float, str]]]:
    """
    Unwrap an Array whose elements are all of one scalar kind.

    Args:
        value: Any Value
        kind: Required element kind

    Returns:
        List of payloads in array order, or None if `value` is not an
        array or any element is of another kind. An empty array gives [].
    """
    if require_value(value).kind is not ValueKind.ARRAY:
        return None

    result = []
    for item in value.items:
        if item.kind is not kind.value:
            return None
        result.append(item.value)
    return result


def to_number_array(value: Value) -> Optional[List[Union[int, float]]]:
    return coerce_array(value, ElementKind.NUMBER)


def to_string_array(value: Value) -> Optional[List[str]]:
    return coerce_array(value, ElementKind.STRING)


__all__ = [
    "ElementKind",
    "coerce_array",
    "to_number_array",
    "to_string_array",
]
