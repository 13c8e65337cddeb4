"""
Query Value Semantics (QVS) Package

Value-level helpers shared by a JSON query language evaluator:
    - truthiness (is_falsy)
    - structural equality (deep_equal)
    - [start:stop:step] slicing with Python semantics
    - typed-array coercion

This package contains ZERO knowledge of:
    - Query syntax or parsing
    - AST nodes or evaluation order
    - Function libraries built on top of these helpers

Every operation is pure and reads its inputs without mutating them.
"""

from qvs.coercion import ElementKind, coerce_array, to_number_array, to_string_array
from qvs.predicates import deep_equal, is_falsy, is_truthy
from qvs.slicing import (
    InvalidSliceError,
    SliceParam,
    SliceSyntaxError,
    cap_index,
    normalize_slice_params,
    parse_slice_expression,
    slice_array,
    slice_params_from_builtin,
    slice_values,
)
from qvs.values import (
    FALSE,
    NULL,
    TRUE,
    Array,
    Boolean,
    Null,
    Number,
    Object,
    String,
    Value,
    ValueKind,
)

__version__ = "0.1.0"
