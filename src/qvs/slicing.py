"""
Slice Engine for QVS

Implements `[start:stop:step]` selection over arrays with Python
slice semantics:
    - negative indices count from the end
    - omitted bounds default by step direction
    - out-of-range bounds clamp, they never raise

The only error is an explicit step of 0.

ARCHITECTURAL RULE:
    An unspecified SliceParam is a default, not a zero.
    Its `n` is never read, and defaults are never clamped.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from qvs.values import Array, Value, ValueKind, require_value


logger = logging.getLogger(__name__)


class InvalidSliceError(ValueError):
    """Raised when a slice is applied with a step of 0."""
    pass


class SliceSyntaxError(ValueError):
    """Raised when slice text such as '1:4:2' cannot be parsed."""
    pass


@dataclass(frozen=True)
class SliceParam:
    """
    One axis (start, stop or step) of a slice expression.

    Properties:
        n: Integer bound, meaningful only when `specified` is True
        specified: False means "use the default for this axis"

    Example:
        [1::-1]

    Becomes:
        (SliceParam.of(1), SliceParam.unspecified(), SliceParam.of(-1))
    """

    n: int = 0
    specified: bool = False

    @classmethod
    def of(cls, n: int) -> SliceParam:
        return cls(n=n, specified=True)

    @classmethod
    def unspecified(cls) -> SliceParam:
        return cls()


SliceParams = Tuple[SliceParam, SliceParam, SliceParam]


def cap_index(length: int, actual: int, step: int) -> int:
    """
    Bring one specified index into range for a sequence of `length`.

    Negative indices are offset by `length` first. Anything still out
    of range is clamped depending on direction:

        step > 0: below range -> 0,  above range -> length
        step < 0: below range -> -1, above range -> length - 1

    -1 and length are sentinels: "before the first" and "past the last".
    """
    if actual < 0:
        actual += length
        if actual < 0:
            actual = -1 if step < 0 else 0
    elif actual >= length:
        actual = length - 1 if step < 0 else length
    return actual


def normalize_slice_params(length: int, params: Sequence[SliceParam]) -> Tuple[int, int, int]:
    """
    Resolve a (start, stop, step) triple to concrete iteration bounds.

    Args:
        length: Length of the sequence being sliced
        params: Exactly three SliceParam, positionally start, stop, step

    Returns:
        (start, stop, step) ready for iter_slice_indices

    Raises:
        InvalidSliceError: If step is specified as 0
        ValueError: If params does not hold three entries
    """
    if len(params) != 3:
        raise ValueError(f"Expected 3 slice params (start, stop, step), got {len(params)}")
    start_param, stop_param, step_param = params

    if not step_param.specified:
        step = 1
    elif step_param.n == 0:
        raise InvalidSliceError("Invalid slice, step cannot be 0")
    else:
        step = step_param.n
    negative_step = step < 0

    if not start_param.specified:
        start = length - 1 if negative_step else 0
    else:
        start = cap_index(length, start_param.n, step)

    if not stop_param.specified:
        stop = -1 if negative_step else length
    else:
        stop = cap_index(length, stop_param.n, step)

    logger.debug("Normalized slice %s over length %d to (%d, %d, %d)", params, length, start, stop, step)
    return start, stop, step


def iter_slice_indices(start: int, stop: int, step: int) -> Iterator[int]:
    """Yield the indices selected by normalized bounds, in iteration order."""
    i = start
    if step > 0:
        while i < stop:
            yield i
            i += step
    else:
        while i > stop:
            yield i
            i += step


def slice_values(sequence: Sequence[Value], params: Sequence[SliceParam]) -> List[Value]:
    """
    Apply a slice to a sequence of values.

    The result is a new list; the input is never aliased or modified.

    Raises:
        InvalidSliceError: If step is specified as 0
    """
    start, stop, step = normalize_slice_params(len(sequence), params)
    return [sequence[i] for i in iter_slice_indices(start, stop, step)]


def slice_array(array: Value, params: Sequence[SliceParam]) -> Array:
    """Slice an Array value and wrap the selection in a new Array."""
    if require_value(array).kind is not ValueKind.ARRAY:
        raise TypeError(f"Only arrays can be sliced, got {array.kind.value}")
    return Array(tuple(slice_values(array.items, params)))


_SLICE_PART_RE = re.compile(r"^[+-]?\d+$")


def _parse_slice_part(part: str, text: str) -> SliceParam:
    part = part.strip()
    if not part:
        return SliceParam.unspecified()
    if not _SLICE_PART_RE.match(part):
        raise SliceSyntaxError(f"Invalid slice bound '{part}' in '{text}'")
    return SliceParam.of(int(part))


def parse_slice_expression(text: str) -> SliceParams:
    """
    Parse slice text into a SliceParam triple.

    Accepts 'start:stop' or 'start:stop:step', each part optional,
    with or without surrounding brackets:

        '1:4'     -> (1, 4, unspecified)
        '[::-1]'  -> (unspecified, unspecified, -1)

    A step of 0 parses; it is rejected only when the slice is applied.

    Raises:
        SliceSyntaxError: If the text is not a slice
    """
    body = text.strip()
    if body.startswith("[") and body.endswith("]"):
        body = body[1:-1]

    parts = body.split(":")
    if len(parts) < 2 or len(parts) > 3:
        raise SliceSyntaxError(f"Expected 'start:stop[:step]', got '{text}'")
    while len(parts) < 3:
        parts.append("")

    start, stop, step = (_parse_slice_part(part, text) for part in parts)
    return start, stop, step


def _param_from_optional(n: Optional[int]) -> SliceParam:
    if n is None:
        return SliceParam.unspecified()
    return SliceParam.of(n)


def slice_params_from_builtin(s: slice) -> SliceParams:
    """Convert a Python slice object, treating None as unspecified."""
    return (
        _param_from_optional(s.start),
        _param_from_optional(s.stop),
        _param_from_optional(s.step),
    )


__all__ = [
    "InvalidSliceError",
    "SliceSyntaxError",
    "SliceParam",
    "SliceParams",
    "cap_index",
    "normalize_slice_params",
    "iter_slice_indices",
    "slice_values",
    "slice_array",
    "parse_slice_expression",
    "slice_params_from_builtin",
]
