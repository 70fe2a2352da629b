from qtpy.QtGui import QKeySequence
from qtpy.QtCore import Qt


def hotkey(*seq):
    return QKeySequence(*seq)


def from_string(value):
    """Return a QKeySequence for a configured key, e.g. "Return" or "Ctrl+R"
    """
    return QKeySequence(value)


# Secondary bindings that are always available
CLOSE = hotkey(Qt.CTRL | Qt.Key_W)
QUIT = hotkey(Qt.CTRL | Qt.Key_Q)
REFRESH = hotkey(Qt.Key_F5)
HELP = hotkey(Qt.Key_F1)
OPEN_REF = hotkey(Qt.CTRL | Qt.Key_O)
MOVE_DOWN = hotkey(Qt.Key_J)
MOVE_UP = hotkey(Qt.Key_K)
GOTO_START = hotkey(Qt.Key_G, Qt.Key_G)  # gg
GOTO_END = hotkey(Qt.SHIFT | Qt.Key_G)
