"""Indentation helpers used to recover block structure from raw lines.

Programs have no `end` markers: a block is every line after an `if`/`while`
header that is indented deeper than the header. Blank lines and `#` comments
never open or close a block.
"""

from typing import List, Optional

TAB_WIDTH = 4


def indent_of(line: str) -> int:
    """Return the indent level of `line`: spaces count 1, tabs count 4."""
    indent = 0
    for ch in line:
        if ch == " ":
            indent += 1
        elif ch == "\t":
            indent += TAB_WIDTH
        else:
            break
    return indent


def is_skippable(line: str) -> bool:
    """True for blank lines and comment lines."""
    text = line.strip()
    return not text or text.startswith("#")


def block_end(lines: List[str], header_index: int, header_indent: int, end: Optional[int] = None) -> int:
    """Return the index just past the block opened at `header_index`.

    Scans forward from the line after the header and stops at the first
    significant line whose indent is not deeper than `header_indent`. When no
    such line exists the block runs to `end` (default: end of program).
    """
    stop = len(lines) if end is None else end
    for j in range(header_index + 1, stop):
        if is_skippable(lines[j]):
            continue
        if indent_of(lines[j]) <= header_indent:
            return j
    return stop


def first_indent(lines: List[str], start: int, end: int) -> Optional[int]:
    """Indent of the first significant line in `lines[start:end]`, or None."""
    for j in range(start, end):
        if not is_skippable(lines[j]):
            return indent_of(lines[j])
    return None
