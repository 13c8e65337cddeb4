"""
Value Model for QVS

Every datum a query can see is represented as a node of a closed
tagged union, never as loose Python objects.

Variants:
    - Null
    - Boolean
    - Number
    - String
    - Array   (ordered sequence of Value)
    - Object  (string-keyed mapping of Value, insertion ordered)

ARCHITECTURAL RULE:
    Helpers switch on `Value.kind`.
    They never guess a variant from the Python type of a payload.
"""

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, Tuple, Union


class ValueKind(Enum):
    """
    Tag of each Value variant.

    The string values are the type names the query language reports.
    """

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class Value(ABC):
    """
    Base class for all values.

    Structure only. Truthiness, equality and slicing live in
    their own modules and dispatch on `kind`.
    """

    kind: ClassVar[ValueKind]


@dataclass(frozen=True)
class Null(Value):
    """The null value. Use the module constant `NULL`."""

    kind: ClassVar[ValueKind] = ValueKind.NULL


@dataclass(frozen=True)
class Boolean(Value):
    kind: ClassVar[ValueKind] = ValueKind.BOOLEAN

    value: bool

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise TypeError(f"Boolean payload must be bool, got {type(self.value).__name__}")


@dataclass(frozen=True)
class Number(Value):
    """
    A numeric value.

    Properties:
        value: int or float payload

    IMPORTANT:
        bool is deliberately not a Number even though Python
        treats it as an int. Build booleans with Boolean.
    """

    kind: ClassVar[ValueKind] = ValueKind.NUMBER

    value: Union[int, float]

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"Number payload must be int or float, got {type(self.value).__name__}")


@dataclass(frozen=True)
class String(Value):
    kind: ClassVar[ValueKind] = ValueKind.STRING

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError(f"String payload must be str, got {type(self.value).__name__}")


@dataclass(frozen=True)
class Array(Value):
    """
    Ordered sequence of values.

    Example:
        [1, "a", null]

    Becomes:
        Array((Number(1), String("a"), NULL))

    Properties:
        items: Tuple of Value, in document order
    """

    kind: ClassVar[ValueKind] = ValueKind.ARRAY

    items: Tuple[Value, ...] = ()

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class Object(Value):
    """
    Mapping from string keys to values.

    Properties:
        members: Dict of key -> Value (insertion order kept for output,
                 ignored for equality)

    IMPORTANT:
        The dataclass is frozen but the dict is not copied.
        Nothing in this package mutates it; callers must not either.
    """

    kind: ClassVar[ValueKind] = ValueKind.OBJECT

    members: Dict[str, Value] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.members)

    def __hash__(self) -> int:
        # Matches dict equality: key order does not affect the hash
        return hash(frozenset(self.members.items()))


NULL = Null()
TRUE = Boolean(True)
FALSE = Boolean(False)


def require_value(obj: object) -> Value:
    """Return `obj` unchanged, or raise TypeError if it is not a Value."""
    if not isinstance(obj, Value):
        raise TypeError(f"Expected a Value, got {type(obj).__name__}")
    return obj
