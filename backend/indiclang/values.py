"""Runtime values and the coercion rules the evaluators rely on.

A value is one of `int`, `float`, `str` or `bool`. Python treats `bool` as
an `int` subclass, so every helper here checks for `bool` first and never
lets a boolean slip into arithmetic by accident.

Numbers follow double-precision behaviour at the edges: integers that grow
past 2**53 are carried as floats, and integral floats print without a
fractional part (`5.0` prints as `5`).
"""

import math
import re
from typing import Union

Value = Union[int, float, str, bool]

MAX_SAFE_INTEGER = 2 ** 53 - 1

_NUMERIC_TEXT = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


def is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def clamp_number(n: Union[int, float]) -> Union[int, float]:
    """Move integers beyond the safe range over to float."""
    if isinstance(n, int) and abs(n) > MAX_SAFE_INTEGER:
        try:
            return float(n)
        except OverflowError:
            return math.inf if n > 0 else -math.inf
    return n


def arith_operand(value: Value) -> Union[int, float]:
    """Operand for `+ - * /`: numbers pass through, anything else is 0."""
    if is_number(value):
        return value  # type: ignore[return-value]
    return 0


def to_number(value: Value) -> Union[int, float]:
    """Numeric reading used by relational comparisons.

    Booleans are 1/0, numeric strings parse, the empty string is 0 and any
    other string is NaN (which compares false against everything).
    """
    if isinstance(value, bool):
        return 1 if value else 0
    if is_number(value):
        return value  # type: ignore[return-value]
    text = str(value).strip()
    if not text:
        return 0
    if _NUMERIC_TEXT.match(text):
        return float(text)
    return math.nan


def loose_equals(left: Value, right: Value) -> bool:
    """Equality that lets values of different kinds match after coercion."""
    if isinstance(left, bool) or isinstance(right, bool):
        if isinstance(left, bool) and isinstance(right, bool):
            return left == right
        return loose_equals(to_number(left), to_number(right))
    if is_number(left) and is_number(right):
        return left == right
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    # number against string
    return to_number(left) == to_number(right)


def truthy(value: Value) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, float) and math.isnan(value):
        return False
    if is_number(value):
        return value != 0
    return value != ""


def to_text(value: Value) -> str:
    """Textual form appended to the output buffer by `print`."""
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)
