"""
Serialization helpers for QVS values.

Converts between Value trees and plain Python data, and through that
intermediate form to and from JSON and YAML text.
This module intentionally keeps the mapping explicit: one branch per kind.
"""
from __future__ import annotations

import json
import logging
from typing import Any

import yaml

from qvs.values import (
    NULL,
    Array,
    Boolean,
    Number,
    Object,
    String,
    Value,
    ValueKind,
    require_value,
)


logger = logging.getLogger(__name__)


def value_from_native(obj: Any) -> Value:
    if obj is None:
        return NULL
    # bool before numbers: bool is a subclass of int
    if isinstance(obj, bool):
        return Boolean(obj)
    if isinstance(obj, (int, float)):
        return Number(obj)
    if isinstance(obj, str):
        return String(obj)
    if isinstance(obj, (list, tuple)):
        return Array(tuple(value_from_native(item) for item in obj))
    if isinstance(obj, dict):
        members = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be strings, got {type(key).__name__}: {key!r}")
            members[key] = value_from_native(item)
        return Object(members)
    raise TypeError(f"Unsupported native type: {type(obj).__name__}")


def value_to_native(value: Value) -> Any:
    kind = require_value(value).kind
    if kind is ValueKind.NULL:
        return None
    if kind is ValueKind.ARRAY:
        return [value_to_native(item) for item in value.items]
    if kind is ValueKind.OBJECT:
        return {key: value_to_native(item) for key, item in value.members.items()}
    return value.value


def value_from_json(s: str) -> Value:
    d = json.loads(s)
    return value_from_native(d)


def value_to_json(value: Value) -> str:
    return json.dumps(value_to_native(value))


def value_from_yaml(s: str) -> Value:
    d = yaml.safe_load(s)
    return value_from_native(d)


def value_to_yaml(value: Value) -> str:
    return yaml.safe_dump(value_to_native(value), sort_keys=False)


def load_document(path: str) -> Value:
    """
    Read a JSON or YAML document from disk.

    Files ending in .yaml/.yml are read as YAML, anything else as JSON.

    Raises:
        FileNotFoundError: If the file doesn't exist
        TypeError: If the document holds data with no Value counterpart
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    if path.endswith((".yaml", ".yml")):
        logger.debug("Loading %s as YAML", path)
        return value_from_yaml(content)
    logger.debug("Loading %s as JSON", path)
    return value_from_json(content)


__all__ = [
    "value_from_native",
    "value_to_native",
    "value_from_json",
    "value_to_json",
    "value_from_yaml",
    "value_to_yaml",
    "load_document",
]
