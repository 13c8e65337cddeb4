"""
Truthiness and structural equality over the Value model.

Both predicates are pure, read-only and total over well-formed
(acyclic) value trees.
"""

from __future__ import annotations

from qvs.values import Value, ValueKind, require_value


def is_falsy(value: Value) -> bool:
    """
    Decide whether a value counts as false.

    False values are:
        - null
        - the boolean false
        - an empty string, array or object

    Every other value is true, including the number 0.
    """
    kind = require_value(value).kind
    if kind is ValueKind.NULL:
        return True
    if kind is ValueKind.BOOLEAN:
        return value.value is False
    if kind is ValueKind.STRING:
        return len(value.value) == 0
    if kind in (ValueKind.ARRAY, ValueKind.OBJECT):
        return len(value) == 0
    return False


def is_truthy(value: Value) -> bool:
    return not is_falsy(value)


def deep_equal(left: Value, right: Value) -> bool:
    """
    Recursive structural equality.

    Rules:
        - null equals only null
        - scalars are equal iff same kind and same payload
        - arrays compare element-wise, in order
        - objects compare by key set, then value per key (order ignored)

    Numbers compare exactly; 1 and 1.0 are equal, 1 and true are not.
    """
    left_kind = require_value(left).kind
    right_kind = require_value(right).kind
    if left_kind is ValueKind.NULL or right_kind is ValueKind.NULL:
        return left_kind is right_kind
    if left_kind is not right_kind:
        return False

    if left_kind is ValueKind.ARRAY:
        if len(left.items) != len(right.items):
            return False
        return all(deep_equal(a, b) for a, b in zip(left.items, right.items))

    if left_kind is ValueKind.OBJECT:
        if left.members.keys() != right.members.keys():
            return False
        return all(deep_equal(item, right.members[key]) for key, item in left.members.items())

    return left.value == right.value


__all__ = [
    "is_falsy",
    "is_truthy",
    "deep_equal",
]
