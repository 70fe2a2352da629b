"""Tests for Pygments-backed syntax highlighting"""
from foldiff import syntax


def test_resolve_language():
    highlighter = syntax.Highlighter()
    assert highlighter.resolve_language('foldiff/render.py') == 'python'
    assert highlighter.resolve_language('src/a.go') == 'go'


def test_resolve_language_unknown():
    highlighter = syntax.Highlighter()
    assert highlighter.resolve_language('notes.unknown-extension') is None


def test_highlight_python():
    highlighter = syntax.Highlighter()
    spans = highlighter.highlight(['def foo():', '    return 1'], 'python')
    assert syntax.SyntaxSpan(1, 0, 3, 'Token.Keyword') in spans
    assert syntax.SyntaxSpan(1, 4, 7, 'Token.Name.Function') in spans
    assert syntax.SyntaxSpan(2, 4, 10, 'Token.Keyword') in spans
    # whitespace is never highlighted
    assert all(span.name != 'Token.Text' for span in spans)


def test_spans_are_within_their_lines():
    lines = ['x = """multi', 'line""" + y']
    spans = syntax.Highlighter().highlight(lines, 'python')
    assert spans
    for span in spans:
        assert 1 <= span.line <= len(lines)
        assert 0 <= span.start < span.end <= len(lines[span.line - 1])


def test_unknown_language_has_no_spans():
    highlighter = syntax.Highlighter()
    assert highlighter.highlight(['x = 1'], 'no-such-language') == []
    assert highlighter.highlight(['x = 1'], None) == []
    assert highlighter.highlight([], 'python') == []


def test_carriage_returns_do_not_shift_lines():
    lines = ['x = 1\r', 'a\rb = 2', 'def foo():']
    spans = syntax.Highlighter().highlight(lines, 'python')
    assert syntax.SyntaxSpan(3, 0, 3, 'Token.Keyword') in spans
    for span in spans:
        assert 1 <= span.line <= len(lines)
        assert span.end <= len(lines[span.line - 1])


def test_leading_byte_order_mark_keeps_columns():
    lines = ['\ufeffimport os', 'def foo():']
    spans = syntax.Highlighter().highlight(lines, 'python')
    assert [(s.start, s.end) for s in spans if s.line == 1][0] == (1, 7)
    assert syntax.SyntaxSpan(2, 0, 3, 'Token.Keyword') in spans
