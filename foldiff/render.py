"""Serialize a change set into display lines, highlights and a line map"""
from . import diffparse
from .i18n import N_
from .models import changes
from .models.linemap import LineMap


SEPARATOR = '-' * 60
PREFIX_WIDTH = 2

# Structural highlight names
TITLE = 'title'
COMMENT = 'comment'
PATH = 'path'
DIFF_ADD = 'diff_add'
DIFF_DELETE = 'diff_delete'
DIFF_CONTEXT = 'diff_context'
HUNK_HEADER = 'hunk_header'

LINE_PREFIXES = {
    diffparse.ADDED: ' +',
    diffparse.DELETED: ' -',
    diffparse.CONTEXT: '  ',
}

LINE_HIGHLIGHTS = {
    diffparse.ADDED: DIFF_ADD,
    diffparse.DELETED: DIFF_DELETE,
    diffparse.CONTEXT: DIFF_CONTEXT,
}


class Highlight:
    """A named span on one display line

    line is 1-based, start and end are 0-based columns.
    An end of -1 extends the span to the end of the line.

    """

    __slots__ = ('line', 'start', 'end', 'name')

    def __init__(self, line, start, end, name):
        self.line = line
        self.start = start
        self.end = end
        self.name = name

    def __eq__(self, other):
        return isinstance(other, Highlight) and (
            self.line,
            self.start,
            self.end,
            self.name,
        ) == (other.line, other.start, other.end, other.name)

    def __repr__(self):
        return 'Highlight(%d, %d, %d, %r)' % (
            self.line,
            self.start,
            self.end,
            self.name,
        )


class Rendering:
    """The output of a render pass"""

    def __init__(self, lines, highlights, line_map, ref=None):
        self.lines = lines
        self.highlights = highlights
        self.line_map = line_map
        self.ref = ref
        self.syntax_highlights = []

    def line_count(self):
        return len(self.lines)

    def text(self):
        return '\n'.join(self.lines)


def title(ref):
    if ref:
        description = N_('Changes vs %s') % ref
    else:
        description = N_('Uncommitted changes')
    return ' foldiff: ' + description


def status_icon(icons, status):
    if status == changes.ADDED:
        return icons.added
    if status == changes.DELETED:
        return icons.deleted
    return icons.modified


class _Builder:
    """Accumulate display lines, highlights and line map entries"""

    def __init__(self):
        self.lines = []
        self.highlights = []
        self.line_map = LineMap()

    def add(self, text, name=None):
        """Append a line and return its 1-based display line number"""
        self.lines.append(text)
        line = len(self.lines)
        if name:
            self.highlight(line, 0, -1, name)
        return line

    def highlight(self, line, start, end, name):
        self.highlights.append(Highlight(line, start, end, name))


def _render_file_header(builder, file_index, changed_file, icons):
    collapse = icons.expanded if changed_file.expanded else icons.collapsed
    prefix = '%s %s ' % (collapse, status_icon(icons, changed_file.status))
    added = '+%d' % changed_file.insertions
    deleted = '-%d' % changed_file.deletions
    text = '%s%s  %s %s' % (prefix, changed_file.path, added, deleted)
    line = builder.add(text)

    path_start = len(prefix)
    path_end = path_start + len(changed_file.path)
    added_start = path_end + 2
    deleted_start = added_start + len(added) + 1
    builder.highlight(line, path_start, path_end, PATH)
    builder.highlight(line, added_start, added_start + len(added), DIFF_ADD)
    builder.highlight(line, deleted_start, deleted_start + len(deleted), DIFF_DELETE)
    builder.line_map.add_file_header(line, file_index)


def _render_hunks(builder, file_index, changed_file):
    for hunk_index, hunk in enumerate(changed_file.hunks):
        line = builder.add('  ' + hunk.header(), HUNK_HEADER)
        builder.line_map.add_hunk_header(line, file_index, hunk_index, hunk)

        for line_index, diff_line in enumerate(hunk.lines):
            prefix = LINE_PREFIXES[diff_line.kind]
            line = builder.add(prefix + diff_line.text, LINE_HIGHLIGHTS[diff_line.kind])
            builder.line_map.add_diff_line(
                line, file_index, hunk_index, line_index, diff_line
            )


def render(files, ref, config):
    """Render the change set

    The result depends only on the arguments, so rendering the same
    state twice produces identical lines, highlights and line maps.

    """
    builder = _Builder()
    builder.add(title(ref), TITLE)
    builder.add(SEPARATOR, COMMENT)

    if not files:
        builder.add('')
        builder.add('  ' + N_('No changes found'), COMMENT)
    else:
        for file_index, changed_file in enumerate(files):
            _render_file_header(builder, file_index, changed_file, config.icons)
            if changed_file.expanded:
                _render_hunks(builder, file_index, changed_file)

    return Rendering(builder.lines, builder.highlights, builder.line_map, ref=ref)


class SyntaxCache:
    """Previously computed syntax spans, keyed by path, language and text

    apply_syntax() prunes the entries its rendering did not use, so only
    the spans for the text currently on display are kept.

    """

    def __init__(self):
        self._spans = {}
        self._used = set()

    def get(self, highlighter, path, language, lines):
        key = (path, language, tuple(lines))
        self._used.add(key)
        try:
            return self._spans[key]
        except KeyError:
            pass
        spans = self._spans[key] = highlighter.highlight(list(lines), language)
        return spans

    def prune(self):
        """Forget the spans that were not requested since the last prune"""
        for key in set(self._spans) - self._used:
            del self._spans[key]
        self._used = set()

    def clear(self):
        self._spans.clear()
        self._used = set()

    def __len__(self):
        return len(self._spans)


def _code_lines(rendering):
    """Return {file_index: [(display_line, code_text), ...]} for diff lines"""
    result = {}
    for display_line, ref in rendering.line_map.items():
        if ref.line_index is None:
            continue
        code = rendering.lines[display_line - 1][PREFIX_WIDTH:]
        result.setdefault(ref.file_index, []).append((display_line, code))
    return result


def apply_syntax(rendering, files, highlighter, cache=None):
    """Add syntax highlights for the expanded files of a rendering

    Spans are computed over the code text only and shifted right past the
    two-column diff prefix.  Files without a known language are skipped.

    """
    if cache is None:
        cache = SyntaxCache()
    syntax_highlights = []
    if highlighter is not None:
        for file_index, entries in sorted(_code_lines(rendering).items()):
            path = files[file_index].path
            language = highlighter.resolve_language(path)
            if not language:
                continue
            display_lines = [display_line for display_line, _ in entries]
            code = [text for _, text in entries]
            for span in cache.get(highlighter, path, language, code):
                if span.line < 1 or span.line > len(display_lines):
                    continue
                syntax_highlights.append(
                    Highlight(
                        display_lines[span.line - 1],
                        span.start + PREFIX_WIDTH,
                        span.end + PREFIX_WIDTH,
                        span.name,
                    )
                )
    cache.prune()
    rendering.syntax_highlights = syntax_highlights
    return rendering
