"""Parse unified diffs into hunks with per-line numbering"""
import re


DIFF_CONTEXT = ' '
DIFF_ADDITION = '+'
DIFF_DELETION = '-'

# DiffLine kinds
CONTEXT = 'context'
ADDED = 'add'
DELETED = 'del'

_HUNK_HEADER_RE = re.compile(r'^@@ -(\S+) \+(\S+) @@(.*)')


def _to_int(value, default):
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def parse_range_str(range_str):
    """Parse a "start[,count]" range; an omitted count means one line

    Unparseable numbers degrade to a start of 0 and a count of 1.

    """
    if ',' in range_str:
        begin, count = range_str.split(',', 1)
        return _to_int(begin, 0), _to_int(count, 1)
    return _to_int(range_str, 0), 1


def parse_hunk_header(line):
    """Return (old_start, old_count, new_start, new_count, heading)

    None is returned when the line is not a hunk header.

    """
    if not line.startswith('@@'):
        return None
    match = _HUNK_HEADER_RE.match(line)
    if match is None:
        # "@@" with a mangled range still opens a hunk
        return (0, 1, 0, 1, '')
    old_start, old_count = parse_range_str(match.group(1))
    new_start, new_count = parse_range_str(match.group(2))
    return (old_start, old_count, new_start, new_count, match.group(3))


def format_hunk_header(hunk):
    return '@@ -%d,%d +%d,%d @@' % (
        hunk.old_start,
        hunk.old_count,
        hunk.new_start,
        hunk.new_count,
    )


class LineCounter:
    """Keep track of a diff range's current line number"""

    def __init__(self, value=0):
        self.value = value

    def tick(self, amount=1):
        """Return the current value and increment to the next"""
        value = self.value
        self.value += amount
        return value


class DiffLine:
    """One line of hunk content with its old and new line numbers"""

    __slots__ = ('kind', 'text', 'old_line_number', 'new_line_number')

    def __init__(self, kind, text, old_line_number=None, new_line_number=None):
        self.kind = kind
        self.text = text
        self.old_line_number = old_line_number
        self.new_line_number = new_line_number

    def line_number(self):
        """The new-side line number, else the old-side line number"""
        if self.new_line_number is not None:
            return self.new_line_number
        return self.old_line_number

    def __eq__(self, other):
        return isinstance(other, DiffLine) and (
            self.kind,
            self.text,
            self.old_line_number,
            self.new_line_number,
        ) == (other.kind, other.text, other.old_line_number, other.new_line_number)

    def __repr__(self):
        return 'DiffLine(%r, %r, old=%r, new=%r)' % (
            self.kind,
            self.text,
            self.old_line_number,
            self.new_line_number,
        )


class Hunk:
    """A contiguous region of change from a unified diff"""

    def __init__(self, old_start, old_count, new_start, new_count, heading=''):
        self.old_start = old_start
        self.old_count = old_count
        self.new_start = new_start
        self.new_count = new_count
        self.heading = heading
        self.lines = []

    def header(self):
        return format_hunk_header(self)

    def old_lines(self):
        return [line for line in self.lines if line.kind != ADDED]

    def new_lines(self):
        return [line for line in self.lines if line.kind != DELETED]

    def __repr__(self):
        return 'Hunk(%s, %d lines)' % (self.header(), len(self.lines))


def parse_hunks(diff_text):
    """Parse the unified diff for a single file into a list of Hunks

    The preamble before the first "@@" header is skipped.  This never raises;
    malformed input produces a best-effort result.

    """
    hunks = []
    if not diff_text:
        return hunks

    if diff_text.endswith('\n'):
        diff_text = diff_text[:-1]

    hunk = None
    old = LineCounter()
    new = LineCounter()

    for text in diff_text.split('\n'):
        header = parse_hunk_header(text)
        if header is not None:
            old_start, old_count, new_start, new_count, heading = header
            hunk = Hunk(old_start, old_count, new_start, new_count, heading)
            hunks.append(hunk)
            old.value = old_start
            new.value = new_start
            continue

        if hunk is None:
            continue

        marker = text[:1]
        if marker == DIFF_ADDITION:
            line = DiffLine(ADDED, text[1:], new_line_number=new.tick())
        elif marker == DIFF_DELETION:
            line = DiffLine(DELETED, text[1:], old_line_number=old.tick())
        elif marker == DIFF_CONTEXT or not text:
            line = DiffLine(
                CONTEXT,
                text[1:],
                old_line_number=old.tick(),
                new_line_number=new.tick(),
            )
        else:
            # "\ No newline at end of file" and other annotations
            continue
        hunk.lines.append(line)

    return hunks
