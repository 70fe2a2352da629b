"""Syntax highlighting for diff content using Pygments"""
from pygments import lex
from pygments.lexers import get_lexer_by_name
from pygments.lexers import get_lexer_for_filename
from pygments.token import Text
from pygments.util import ClassNotFound


class SyntaxSpan:
    """A highlighted region of one input line

    line is 1-based within the highlighted lines; start and end are
    0-based columns with end exclusive.  name is the Pygments token type,
    e.g. "Token.Keyword".

    """

    __slots__ = ('line', 'start', 'end', 'name')

    def __init__(self, line, start, end, name):
        self.line = line
        self.start = start
        self.end = end
        self.name = name

    def __eq__(self, other):
        return isinstance(other, SyntaxSpan) and (
            self.line,
            self.start,
            self.end,
            self.name,
        ) == (other.line, other.start, other.end, other.name)

    def __repr__(self):
        return 'SyntaxSpan(%d, %d, %d, %r)' % (
            self.line,
            self.start,
            self.end,
            self.name,
        )


def _sanitize(line):
    return line.replace('\r', ' ').replace('\ufeff', ' ')


def _is_plain(token):
    # Whitespace is a subtype of Text
    return token in Text


class Highlighter:
    """Resolve languages from paths and produce per-line token spans"""

    def __init__(self):
        self._lexers = {}

    def resolve_language(self, path):
        """Return the Pygments lexer alias for a path, or None"""
        try:
            lexer = get_lexer_for_filename(path)
        except ClassNotFound:
            return None
        if not lexer.aliases:
            return None
        return lexer.aliases[0]

    def _lexer(self, language):
        try:
            return self._lexers[language]
        except KeyError:
            pass
        try:
            lexer = get_lexer_by_name(language, stripnl=False, ensurenl=False)
        except ClassNotFound:
            lexer = None
        self._lexers[language] = lexer
        return lexer

    def highlight(self, lines, language):
        """Return SyntaxSpans for lines of code in the given language"""
        if not lines or not language:
            return []
        lexer = self._lexer(language)
        if lexer is None:
            return []

        # Pygments turns a lone "\r" into a newline and drops a leading BOM.
        text = '\n'.join(_sanitize(line) for line in lines)
        spans = []
        line = 1
        column = 0
        for token, value in lex(text, lexer):
            # Tokens can span lines, e.g. multi-line strings and comments.
            for idx, part in enumerate(value.split('\n')):
                if idx:
                    line += 1
                    column = 0
                if not part:
                    continue
                end = column + len(part)
                if not _is_plain(token):
                    spans.append(SyntaxSpan(line, column, end, str(token)))
                column = end
        return spans
