"""Condition evaluation for `if` and `while` headers."""

import operator
from typing import Callable, Dict, Tuple

from .expressions import eval_expr
from .values import Value, loose_equals, to_number, truthy

# Checked in this order, splitting on the first occurrence of the first match.
# Two-character operators come before the one-character ones they contain.
_COMPARISONS: Tuple[Tuple[str, Callable[[Value, Value], bool]], ...] = (
    (">=", lambda a, b: operator.ge(to_number(a), to_number(b))),
    ("<=", lambda a, b: operator.le(to_number(a), to_number(b))),
    (">", lambda a, b: operator.gt(to_number(a), to_number(b))),
    ("<", lambda a, b: operator.lt(to_number(a), to_number(b))),
    ("==", loose_equals),
    ("!=", lambda a, b: not loose_equals(a, b)),
)


def eval_condition(condition: str, env: Dict[str, Value]) -> bool:
    """Evaluate a condition such as `ganana < 3` to a bool.

    Relational operators compare numerically; `==` and `!=` use loose
    equality. Without a comparison operator the whole text is evaluated as an
    expression and its truthiness is returned.
    """
    condition = condition.strip()
    for op, compare in _COMPARISONS:
        if op in condition:
            left, _, right = condition.partition(op)
            return compare(eval_expr(left, env), eval_expr(right, env))
    return truthy(eval_expr(condition, env))
