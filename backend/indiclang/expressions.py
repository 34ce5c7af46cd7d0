"""Expression evaluation for IndicLang.

Expressions are classified by shape, in a fixed order, and never raise:

1. quoted string literal (`'...'` or `"..."`), returned verbatim
2. numeric literal, `int` unless it contains a `.`
3. bare identifier, looked up in the environment (unbound names are 0)
4. binary arithmetic, split on the *first* occurrence of the first operator
   class present, checked as `+`, `-`, `*`, `/`
5. anything else is returned unchanged as a string

Because step 4 always splits on the first occurrence, chains of the same
operator group to the right: `10 - 3 - 2` is `10 - (3 - 2)`, i.e. 9. Mixed
expressions such as `2 * 3 + 4` still come out as 10 since `+`/`-` are split
before `*`/`/`.
"""

import re
from typing import Callable, Dict, Optional, Tuple, Union

from .values import Value, arith_operand, clamp_number

_NUMBER = re.compile(r"^-?[0-9]+(\.[0-9]+)?$")
_IDENTIFIER = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

Number = Union[int, float]


def _divide(left: Number, right: Number) -> Number:
    if right == 0:
        return 0
    return left / right


# Checked in this order; the first operator present wins.
_OPERATORS: Tuple[Tuple[str, Callable[[Number, Number], Number]], ...] = (
    ("+", lambda a, b: a + b),
    ("-", lambda a, b: a - b),
    ("*", lambda a, b: a * b),
    ("/", _divide),
)


def _parse_number(text: str) -> Number:
    # anything over 20 characters is past the safe integer range anyway
    if "." in text or len(text) > 20:
        return float(text)
    return clamp_number(int(text))


def _split_operator(expr: str) -> Optional[Tuple[str, Callable[[Number, Number], Number], str]]:
    """Return (left, apply, right) for the operator that applies, if any."""
    for op, apply in _OPERATORS:
        if op not in expr:
            continue
        if op == "-" and expr.startswith("-"):
            # a leading minus is not a subtraction
            continue
        left, _, right = expr.partition(op)
        return left, apply, right
    return None


def eval_expr(expr: str, env: Dict[str, Value]) -> Value:
    """Evaluate a single expression string against `env`.

    Args:
        expr: expression source text (e.g. "ganana + 1").
        env: the run's variable bindings; only read here.

    Returns:
        The resulting value. Unsupported shapes fall back to the text itself.
    """
    expr = expr.strip()

    if (expr.startswith("'") and expr.endswith("'")) or (expr.startswith('"') and expr.endswith('"')):
        return expr[1:-1]

    if _NUMBER.match(expr):
        return _parse_number(expr)

    if _IDENTIFIER.match(expr):
        return env.get(expr, 0)

    split = _split_operator(expr)
    if split is not None:
        left_text, apply, right_text = split
        left = arith_operand(eval_expr(left_text, env))
        right = arith_operand(eval_expr(right_text, env))
        return clamp_number(apply(left, right))

    # literal-string fallback
    return expr
