"""Message boxes that replace the console Interaction methods"""
from qtpy import QtWidgets

from .. import qtutils
from ..interaction import Interaction


def install():
    Interaction.critical = staticmethod(critical)
    Interaction.information = staticmethod(information)


def _message_box(icon, title, message, details=None, informative_text=None):
    mbox = QtWidgets.QMessageBox(qtutils.active_window())
    mbox.setIcon(icon)
    mbox.setWindowTitle(title)
    mbox.setText(message)
    if informative_text:
        mbox.setInformativeText(informative_text)
    if details:
        mbox.setDetailedText(details)
    mbox.exec_()


def critical(title, message=None, details=None):
    """Show a warning with the provided title and message."""
    if message is None:
        message = title
    _message_box(QtWidgets.QMessageBox.Critical, title, message, details=details)


def information(title, message=None, details=None, informative_text=None):
    """Show information with the provided title and message."""
    if message is None:
        message = title
    _message_box(
        QtWidgets.QMessageBox.Information,
        title,
        message,
        details=details,
        informative_text=informative_text,
    )
