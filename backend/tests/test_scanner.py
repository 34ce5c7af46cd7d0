"""Tests for indent measurement and block boundary detection."""

from backend.indiclang.scanner import block_end, first_indent, indent_of, is_skippable


def test_indent_of_counts_spaces_and_tabs():
    assert indent_of('x = 1') == 0
    assert indent_of('    x = 1') == 4
    assert indent_of('\tx = 1') == 4
    assert indent_of(' \t x') == 6
    assert indent_of('') == 0


def test_blank_and_comment_lines_are_skippable():
    assert is_skippable('')
    assert is_skippable('   ')
    assert is_skippable('    # comment')
    assert not is_skippable("print('#')")


def test_block_end_stops_at_dedent():
    lines = ['if x:', '    a = 1', '    b = 2', 'c = 3']
    assert block_end(lines, 0, 0) == 3


def test_block_end_runs_to_end_of_program():
    lines = ['while x:', '    a = 1', '        b = 2']
    assert block_end(lines, 0, 0) == 3


def test_block_end_ignores_comments_and_blanks():
    lines = ['if x:', '    a = 1', '# c', '', '    b = 2', 'c = 3']
    assert block_end(lines, 0, 0) == 5


def test_block_end_respects_range_end():
    lines = ['if x:', '    a = 1', '    b = 2', '    c = 3']
    assert block_end(lines, 0, 0, end=2) == 2


def test_block_end_of_nested_header():
    lines = ['while x:', '    if y:', '        a = 1', '    b = 2']
    assert block_end(lines, 1, 4) == 3


def test_first_indent_skips_blank_lines():
    lines = ['if x:', '', '      a = 1']
    assert first_indent(lines, 1, 3) == 6
    assert first_indent(lines, 1, 2) is None
