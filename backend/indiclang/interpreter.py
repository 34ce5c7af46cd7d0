"""IndicLang interpreter module.

This module runs the small, indentation-delimited Python-like subset that the
translation step produces: assignment (including `a, b = b, a`), `print(...)`,
`if <condition>:` and `while <condition>:` with indented bodies.

The interpreter is deliberately lenient. Lines it does not recognise are
ignored, over-indented lines are skipped, unbound names read as 0, division
by zero gives 0 and a `while` loop silently stops after `max_loop` body runs.
Only an unexpected Python failure is reported, and even then the output
printed so far is kept.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .conditions import eval_condition
from .expressions import eval_expr
from .scanner import block_end, first_indent, indent_of, is_skippable
from .values import Value, to_text

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

_PRINT_ARGS = re.compile(r"print\((.*)\)")


@dataclass
class RunContext:
    """Mutable state owned by a single `execute` call.

    Attributes:
        lines: the program split into raw lines; blocks are index ranges into it
        env: variable bindings, created empty and mutated only by assignment
        output_lines: one entry per evaluated `print`
    """

    lines: List[str]
    env: Dict[str, Value] = field(default_factory=dict)
    output_lines: List[str] = field(default_factory=list)

    def output(self) -> str:
        return "\n".join(self.output_lines)


class Interpreter:
    """Top-level IndicLang interpreter class.

    An instance only carries configuration; every call to `execute` builds its
    own `RunContext`, so runs never share state and one instance can serve
    several threads.

    Tunable attributes (defaults are set in __init__):
    - max_loop: number of body executions after which a `while` stops
    """

    def __init__(self, max_loop: int = 1000):
        self.max_loop = max_loop

    def execute(self, code: str) -> Dict[str, Any]:
        """Run `code` and return `{"output": str, "error": Optional[str]}`.

        Any exception raised while dispatching is caught here and reported in
        `error` together with the output accumulated before it happened.
        """
        ctx = RunContext(lines=code.split("\n"))
        logger.debug("executing %d lines", len(ctx.lines))
        try:
            self._execute_range(ctx, 0, len(ctx.lines), 0)
        except Exception as e:
            logger.debug("run failed after %d output lines", len(ctx.output_lines), exc_info=True)
            return {"output": ctx.output(), "error": str(e) or "Execution error"}
        return {"output": ctx.output(), "error": None}

    def _execute_range(self, ctx: RunContext, start: int, end: int, level: int) -> int:
        """Execute `ctx.lines[start:end]` at indent `level`.

        Returns the index where processing stopped: `end`, or the first line
        dedented below `level`.
        """
        i = start
        while i < end:
            raw = ctx.lines[i]
            if is_skippable(raw):
                i += 1
                continue
            current = indent_of(raw)
            if current < level:
                break
            if current > level:
                # over-indented lines are dropped, not rejected
                i += 1
                continue
            i = self._dispatch_statement(ctx, i, end, raw.strip(), current)
        return i

    def _dispatch_statement(self, ctx: RunContext, i: int, end: int, line: str, indent: int) -> int:
        """Dispatch the statement at index `i` and return the next index.

        The order of these checks is significant: anything holding a bare `=`
        is an assignment, even `if x >= 3:`.
        """
        if "=" in line and "==" not in line and "!=" not in line:
            self._handle_assignment(ctx, line)
        elif line.startswith("print("):
            self._handle_print(ctx, line)
        elif line.startswith("if "):
            return self._handle_if(ctx, i, end, line, indent)
        elif line.startswith("while "):
            return self._handle_while(ctx, i, end, line, indent)
        return i + 1

    def _handle_assignment(self, ctx: RunContext, line: str) -> None:
        target, _, expr = line.partition("=")
        if "," in target:
            names = [n.strip() for n in target.split(",")]
            # evaluate every source before binding so `a, b = b, a` swaps
            values = [eval_expr(e, ctx.env) for e in expr.split(",")]
            for pos, name in enumerate(names):
                ctx.env[name] = values[pos] if pos < len(values) else 0
            return
        ctx.env[target.strip()] = eval_expr(expr, ctx.env)

    def _handle_print(self, ctx: RunContext, line: str) -> None:
        match = _PRINT_ARGS.search(line)
        if not match:
            return
        content = match.group(1).strip()
        if content:
            ctx.output_lines.append(to_text(eval_expr(content, ctx.env)))
        else:
            ctx.output_lines.append("")

    def _handle_if(self, ctx: RunContext, i: int, end: int, line: str, indent: int) -> int:
        """Run the body of an `if` when its condition holds.

        The cursor moves past the whole block whichever way the condition
        goes; there is no `else`.
        """
        stop = block_end(ctx.lines, i, indent, end)
        if eval_condition(_header_condition(line, "if "), ctx.env):
            self._execute_body(ctx, i + 1, stop)
        return stop

    def _handle_while(self, ctx: RunContext, i: int, end: int, line: str, indent: int) -> int:
        """Run the body of a `while` until its condition fails or `max_loop` runs."""
        stop = block_end(ctx.lines, i, indent, end)
        condition = _header_condition(line, "while ")
        iterations = 0
        while iterations < self.max_loop and eval_condition(condition, ctx.env):
            self._execute_body(ctx, i + 1, stop)
            iterations += 1
        return stop

    def _execute_body(self, ctx: RunContext, start: int, stop: int) -> None:
        # the body runs at the indent of its first significant line
        level = first_indent(ctx.lines, start, stop)
        if level is None:
            return
        self._execute_range(ctx, start, stop, level)


def _header_condition(line: str, keyword: str) -> str:
    text = line[len(keyword):].strip()
    if text.endswith(":"):
        text = text[:-1]
    return text.strip()
