"""The Qt surface that displays foldiff renderings"""
from functools import partial

from pygments.styles import get_style_by_name
from pygments.token import Token
from pygments.token import string_to_tokentype
from qtpy import QtGui
from qtpy import QtWidgets
from qtpy.QtCore import Qt

from .. import editor
from .. import hotkeys
from .. import qtutils
from .. import render
from .. import session
from .. import syntax
from ..i18n import N_


def token_type(name):
    """Return the Pygments token type for a "Token.Keyword"-style name"""
    if name == 'Token':
        return Token
    if name.startswith('Token.'):
        name = name[len('Token.') :]
    return string_to_tokentype(name)


class DiffSyntaxHighlighter(QtGui.QSyntaxHighlighter):
    """Applies a Rendering's structural and syntax highlights"""

    def __init__(self, doc):
        QtGui.QSyntaxHighlighter.__init__(self, doc)
        QPalette = QtGui.QPalette
        palette = QPalette()
        dark = palette.color(QPalette.Base).lightnessF() < 0.5
        disabled = palette.color(QPalette.Disabled, QPalette.Text)

        color_text = palette.color(QPalette.Text)
        color_add = qtutils.css_color('#335533' if dark else '#d2ffe4')
        color_remove = qtutils.css_color('#553333' if dark else '#fee0e4')
        color_header = qtutils.css_color('#7aa2f7' if dark else '#4040c0')

        self.formats = {
            render.TITLE: qtutils.make_format(bold=True),
            render.COMMENT: qtutils.make_format(foreground=disabled),
            render.PATH: qtutils.make_format(foreground=color_text, bold=True),
            render.DIFF_ADD: qtutils.make_format(background=color_add),
            render.DIFF_DELETE: qtutils.make_format(background=color_remove),
            render.DIFF_CONTEXT: qtutils.make_format(foreground=color_text),
            render.HUNK_HEADER: qtutils.make_format(
                foreground=color_header, bold=True
            ),
        }
        self.style = get_style_by_name('monokai' if dark else 'default')
        self.token_formats = {}
        self.spans = {}

    def token_format(self, name):
        """Return the QTextCharFormat for a Pygments token name"""
        try:
            return self.token_formats[name]
        except KeyError:
            pass
        fmt = None
        token = token_type(name)
        if self.style.styles_token(token):
            tstyle = self.style.style_for_token(token)
            foreground = None
            if tstyle['color']:
                foreground = qtutils.css_color(tstyle['color'])
            fmt = qtutils.make_format(
                foreground=foreground,
                bold=tstyle['bold'],
                italic=tstyle['italic'],
            )
            if tstyle['underline']:
                fmt.setFontUnderline(True)
        self.token_formats[name] = fmt
        return fmt

    def set_rendering(self, rendering):
        """Index highlights by display line; structural spans come first"""
        spans = {}
        for highlight in rendering.highlights:
            fmt = self.formats.get(highlight.name)
            spans.setdefault(highlight.line, []).append((highlight, fmt))
        for highlight in rendering.syntax_highlights:
            fmt = self.token_format(highlight.name)
            spans.setdefault(highlight.line, []).append((highlight, fmt))
        self.spans = spans

    def highlightBlock(self, text):
        """Highlight the current text block"""
        line = self.currentBlock().blockNumber() + 1
        length = len(text)
        for highlight, fmt in self.spans.get(line, ()):
            if fmt is None:
                continue
            start = min(highlight.start, length)
            if highlight.end < 0:
                end = length
            else:
                end = min(highlight.end, length)
            if end <= start:
                continue
            merged = QtGui.QTextCharFormat(self.format(start))
            merged.merge(fmt)
            self.setFormat(start, end - start, merged)


class HelpDialog(QtWidgets.QDialog):
    """Lists the key bindings; any key closes it"""

    def __init__(self, lines, font=None, parent=None):
        QtWidgets.QDialog.__init__(self, parent)
        self.setWindowTitle(N_('foldiff keys'))
        self.setWindowModality(Qt.WindowModal)

        self.label = QtWidgets.QLabel()
        self.label.setTextFormat(Qt.PlainText)
        self.label.setText('\n'.join(lines))
        if font is not None:
            self.label.setFont(font)

        layout = QtWidgets.QVBoxLayout()
        layout.addWidget(self.label)
        self.setLayout(layout)

    def keyPressEvent(self, event):
        event.accept()
        self.accept()


class DiffView(QtWidgets.QPlainTextEdit):
    """Read-only view that implements the session Surface"""

    def __init__(self, context, config, parent=None):
        QtWidgets.QPlainTextEdit.__init__(self, parent)
        self.context = context
        self.config = config
        self.setReadOnly(True)
        self.setLineWrapMode(QtWidgets.QPlainTextEdit.NoWrap)
        self.setTextInteractionFlags(
            Qt.TextSelectableByKeyboard | Qt.TextSelectableByMouse
        )
        self.setFont(qtutils.diff_font(config))
        self.highlighter = DiffSyntaxHighlighter(self.document())
        self.controller = session.Controller(
            context.diff_source,
            self,
            config=config,
            highlighter=syntax.Highlighter(),
        )
        self._init_actions()
        self.cursorPositionChanged.connect(self._highlight_current_line)

    def _init_actions(self):
        keymaps = self.config.keymaps
        controller = self.controller
        key = hotkeys.from_string

        self.goto_action = qtutils.add_action(
            self,
            N_('Go to file/line'),
            partial(session.do, controller.goto),
            key(keymaps.goto_file),
        )
        self.toggle_action = qtutils.add_action(
            self,
            N_('Toggle expand/collapse'),
            partial(session.do, controller.toggle_expand),
            key(keymaps.toggle),
        )
        self.toggle_mode_action = qtutils.add_action(
            self,
            N_('Toggle mode (uncommitted/branch)'),
            partial(session.do, controller.toggle_mode),
            key(keymaps.toggle_mode),
        )
        self.refresh_action = qtutils.add_action(
            self,
            N_('Refresh'),
            partial(session.do, controller.refresh),
            key(keymaps.refresh),
            hotkeys.REFRESH,
        )
        self.close_action = qtutils.add_action(
            self,
            N_('Close foldiff'),
            partial(session.do, controller.close),
            key(keymaps.close),
        )
        self.help_action = qtutils.add_action(
            self,
            N_('Show this help'),
            partial(session.do, controller.show_help),
            key(keymaps.help),
            hotkeys.HELP,
        )
        self.open_ref_action = qtutils.add_action(
            self, N_('Compare against ref...'), self.prompt_ref, hotkeys.OPEN_REF
        )
        self.move_down_action = qtutils.add_action(
            self, N_('Next line'), partial(self.move_cursor, 1), hotkeys.MOVE_DOWN
        )
        self.move_up_action = qtutils.add_action(
            self, N_('Previous line'), partial(self.move_cursor, -1), hotkeys.MOVE_UP
        )
        self.goto_start_action = qtutils.add_action(
            self, N_('First line'), partial(self.set_cursor_line, 1), hotkeys.GOTO_START
        )
        self.goto_end_action = qtutils.add_action(
            self, N_('Last line'), self.goto_end, hotkeys.GOTO_END
        )

    # Surface
    def display(self, rendering):
        line = self.cursor_line()
        self.highlighter.set_rendering(rendering)
        self.setPlainText(rendering.text())
        self.window().setWindowTitle(rendering.lines[0].strip())
        self.set_cursor_line(min(line, rendering.line_count()))

    def cursor_line(self):
        return self.textCursor().blockNumber() + 1

    def set_cursor_line(self, line):
        block = self.document().findBlockByNumber(max(0, line - 1))
        cursor = QtGui.QTextCursor(block)
        self.setTextCursor(cursor)
        self.ensureCursorVisible()

    def open_file(self, path, line):
        editor.edit(self.config.editor, path, line_number=line)

    def show_help(self, lines):
        dialog = HelpDialog(lines, font=self.font(), parent=self)
        dialog.exec_()

    def close(self):
        return self.window().close()

    # Navigation
    def move_cursor(self, offset):
        line_count = self.document().blockCount()
        line = self.cursor_line() + offset
        self.set_cursor_line(max(1, min(line, line_count)))

    def goto_end(self):
        self.set_cursor_line(self.document().blockCount())

    def prompt_ref(self):
        """Prompt for a comparison target and open it"""
        refs = self.controller.candidate_refs()
        ref, ok = qtutils.prompt_with_completion(
            N_('Compare against ref'),
            refs,
            title=N_('Compare against ref...'),
            text=self.controller.ref or '',
            parent=self,
        )
        if ok:
            session.do(self.controller.open, ref.strip())

    def _highlight_current_line(self):
        selection = QtWidgets.QTextEdit.ExtraSelection()
        color = self.palette().color(QtGui.QPalette.AlternateBase)
        selection.format.setBackground(color)
        selection.format.setProperty(QtGui.QTextFormat.FullWidthSelection, True)
        selection.cursor = self.textCursor()
        selection.cursor.clearSelection()
        self.setExtraSelections([selection])

    def mouseDoubleClickEvent(self, event):
        session.do(self.controller.goto)
        event.accept()


class DiffWindow(QtWidgets.QMainWindow):
    """Top-level window holding a DiffView"""

    def __init__(self, context, config, parent=None):
        QtWidgets.QMainWindow.__init__(self, parent)
        self.view = DiffView(context, config, parent=self)
        self.setCentralWidget(self.view)
        self.resize(960, 720)
        qtutils.add_close_action(self)

    @property
    def controller(self):
        return self.view.controller
