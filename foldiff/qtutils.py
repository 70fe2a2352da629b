"""Miscellaneous Qt utility functions."""
import sys

from qtpy import QtGui
from qtpy import QtWidgets
from qtpy.QtCore import Qt

from . import hotkeys
from .i18n import N_


def active_window():
    """Return the active window for the current application"""
    return QtWidgets.QApplication.activeWindow()


def connect_action(action, func):
    """Connect an action to a function"""
    action.triggered[bool].connect(lambda x: func(), type=Qt.QueuedConnection)


def add_action(widget, text, func, *shortcuts):
    """Create a QAction and bind it to the `func` callback and hotkeys"""
    tip = text
    return _add_action(widget, text, tip, func, connect_action, *shortcuts)


def _add_action(widget, text, tip, func, connect, *shortcuts):
    action = QtWidgets.QAction(text, widget)
    if tip:
        action.setStatusTip(tip)
    connect(action, func)
    shortcuts = [shortcut for shortcut in shortcuts if not shortcut.isEmpty()]
    if shortcuts:
        action.setShortcuts(shortcuts)
        if hasattr(Qt, 'WidgetWithChildrenShortcut'):
            action.setShortcutContext(Qt.WidgetWithChildrenShortcut)
        widget.addAction(action)
    return action


def add_close_action(widget):
    """Adds close action and shortcuts to a widget."""
    return add_action(widget, N_('Close...'), widget.close, hotkeys.CLOSE, hotkeys.QUIT)


def add_completer(widget, items):
    """Add simple completion to a widget"""
    completer = QtWidgets.QCompleter(items, widget)
    completer.setCaseSensitivity(Qt.CaseInsensitive)
    completer.setCompletionMode(QtWidgets.QCompleter.InlineCompletion)
    widget.setCompleter(completer)


def prompt_with_completion(msg, items, title=None, text='', parent=None):
    """Prompt for a single line of text, completing from items

    Returns (text, ok).

    """
    if title is None:
        title = msg
    if parent is None:
        parent = active_window()
    dialog = QtWidgets.QInputDialog(parent)
    dialog.setWindowTitle(title)
    dialog.setLabelText(msg)
    dialog.setTextValue(text)
    line_edit = dialog.findChild(QtWidgets.QLineEdit)
    if line_edit is not None:
        add_completer(line_edit, items)
    ok = dialog.exec_() == QtWidgets.QDialog.Accepted
    return (dialog.textValue(), ok)


def default_monospace_font():
    if sys.platform == 'darwin':
        family = 'Monaco'
    elif sys.platform == 'win32':
        family = 'Courier'
    else:
        family = 'Monospace'
    mfont = QtGui.QFont()
    mfont.setFamily(family)
    mfont.setStyleHint(QtGui.QFont.TypeWriter)
    return mfont


def font_from_string(string):
    qfont = QtGui.QFont()
    qfont.fromString(string)
    return qfont


def diff_font(config):
    """Return the configured diff font, or the default monospace font"""
    if config.font:
        return font_from_string(config.font)
    return default_monospace_font()


def rgb(red, green, blue):
    """Create a QColor from r, g, b arguments"""
    color = QtGui.QColor()
    color.setRgb(red, green, blue)
    return color


def clamp_color(value):
    """Clamp an integer value between 0 and 255"""
    return min(255, max(value, 0))


def css_color(value):
    """Convert a #abcdef hex string into a QColor"""
    if value.startswith('#'):
        value = value[1:]
    try:
        red = clamp_color(int(value[:2], base=16))  # ab
    except ValueError:
        red = 255
    try:
        green = clamp_color(int(value[2:4], base=16))  # cd
    except ValueError:
        green = 255
    try:
        blue = clamp_color(int(value[4:6], base=16))  # ef
    except ValueError:
        blue = 255
    return rgb(red, green, blue)


def make_format(foreground=None, background=None, bold=False, italic=False):
    """Create a QTextCharFormat from colors and font styles"""
    fmt = QtGui.QTextCharFormat()
    if foreground is not None:
        fmt.setForeground(foreground)
    if background is not None:
        fmt.setBackground(background)
    if bold:
        fmt.setFontWeight(QtGui.QFont.Bold)
    if italic:
        fmt.setFontItalic(True)
    return fmt
