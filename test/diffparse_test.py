"""Tests for the diffparse module"""
from foldiff import diffparse

from . import helper


def test_parse_hunk_header():
    assert diffparse.parse_hunk_header('@@ -12,5 +12,7 @@') == (12, 5, 12, 7, '')


def test_parse_hunk_header_with_heading():
    header = diffparse.parse_hunk_header('@@ -6,10 +6,21 @@ from foldiff import git')
    assert header == (6, 10, 6, 21, ' from foldiff import git')


def test_parse_hunk_header_omitted_counts_default_to_one():
    assert diffparse.parse_hunk_header('@@ -5 +5,2 @@') == (5, 1, 5, 2, '')
    assert diffparse.parse_hunk_header('@@ -0,0 +1 @@') == (0, 0, 1, 1, '')


def test_parse_hunk_header_not_a_header():
    assert diffparse.parse_hunk_header(' context') is None
    assert diffparse.parse_hunk_header('') is None


def test_parse_hunk_header_garbage_degrades():
    assert diffparse.parse_hunk_header('@@ -x,y +z @@') == (0, 1, 0, 1, '')
    assert diffparse.parse_hunk_header('@@ nonsense') == (0, 1, 0, 1, '')


def test_parse_range_str():
    assert diffparse.parse_range_str('12,5') == (12, 5)
    assert diffparse.parse_range_str('12') == (12, 1)
    assert diffparse.parse_range_str('abc,def') == (0, 1)


def test_line_numbering():
    text = '@@ -10,2 +10,2 @@\n context\n+added\n-deleted\n'
    hunks = diffparse.parse_hunks(text)
    assert len(hunks) == 1
    context, added, deleted = hunks[0].lines

    assert context.kind == diffparse.CONTEXT
    assert context.text == 'context'
    assert context.old_line_number == 10
    assert context.new_line_number == 10

    assert added.kind == diffparse.ADDED
    assert added.text == 'added'
    assert added.old_line_number is None
    assert added.new_line_number == 11

    assert deleted.kind == diffparse.DELETED
    assert deleted.text == 'deleted'
    assert deleted.old_line_number == 11
    assert deleted.new_line_number is None


def test_preamble_is_ignored():
    hunks = diffparse.parse_hunks(helper.A_GO_DIFF)
    assert len(hunks) == 1
    hunk = hunks[0]
    assert (hunk.old_start, hunk.old_count, hunk.new_start, hunk.new_count) == (
        1,
        1,
        1,
        3,
    )
    assert [line.text for line in hunk.lines] == ['x', 'y', 'z']
    assert [line.line_number() for line in hunk.lines] == [1, 2, 3]


def test_side_counts_match_header():
    text = """\
@@ -1,4 +1,5 @@ def foo():
 a
-b
+B
+C
 c
 d
@@ -20,3 +21,2 @@
 x
-y
 z
"""
    hunks = diffparse.parse_hunks(text)
    assert len(hunks) == 2
    for hunk in hunks:
        assert len(hunk.old_lines()) == hunk.old_count
        assert len(hunk.new_lines()) == hunk.new_count
    assert hunks[0].heading == ' def foo():'
    assert hunks[1].lines[2].old_line_number == 22
    assert hunks[1].lines[2].new_line_number == 22


def test_only_the_first_marker_is_stripped():
    hunks = diffparse.parse_hunks('@@ -1,2 +1,2 @@\n--x\n++y\n')
    assert hunks[0].lines[0].text == '-x'
    assert hunks[0].lines[1].text == '+y'


def test_empty_line_is_context():
    hunks = diffparse.parse_hunks('@@ -1,3 +1,3 @@\n a\n\n b\n')
    lines = hunks[0].lines
    assert len(lines) == 3
    assert lines[1].kind == diffparse.CONTEXT
    assert lines[1].text == ''
    assert lines[2].old_line_number == 3


def test_no_newline_marker_is_skipped():
    text = (
        '@@ -1 +1 @@\n'
        '-old\n'
        '\\ No newline at end of file\n'
        '+new\n'
        '\\ No newline at end of file\n'
    )
    hunks = diffparse.parse_hunks(text)
    lines = hunks[0].lines
    assert len(lines) == 2
    assert lines[0].old_line_number == 1
    assert lines[1].new_line_number == 1


def test_empty_input():
    assert diffparse.parse_hunks('') == []
    assert diffparse.parse_hunks(None) == []
    assert diffparse.parse_hunks('diff --git a/x b/x\nBinary files differ\n') == []


def test_malformed_header_still_parses_lines():
    hunks = diffparse.parse_hunks('@@ -a,b +c,d @@\n+x\n')
    assert len(hunks) == 1
    assert hunks[0].new_start == 0
    assert hunks[0].new_count == 1
    assert hunks[0].lines[0].new_line_number == 0


def test_format_hunk_header():
    hunk = diffparse.Hunk(3, 1, 3, 4)
    assert hunk.header() == '@@ -3,1 +3,4 @@'


def test_line_number_prefers_new_side():
    line = diffparse.DiffLine(diffparse.CONTEXT, 'x', 4, 7)
    assert line.line_number() == 7
    line = diffparse.DiffLine(diffparse.DELETED, 'x', old_line_number=4)
    assert line.line_number() == 4
