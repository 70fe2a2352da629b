"""Launch the configured editor at a file and line"""
import fnmatch
import os

from . import core
from . import utils
from .i18n import N_
from .interaction import Interaction


def _line_args(filename, line_number):
    """Editor patterns and the arguments that open a file at a line"""
    return {
        '*vim*': ['+%s' % line_number, filename],
        '*emacs*': ['+%s' % line_number, filename],
        '*nano*': ['+%s' % line_number, filename],
        '*textpad*': [f'{filename}({line_number},0)'],
        '*notepad++*': ['-n%s' % line_number, filename],
        '*subl*': [f'{filename}:{line_number}'],
        'code': ['--goto', f'{filename}:{line_number}'],
        'cursor': ['--goto', f'{filename}:{line_number}'],
    }


def command(editor, filename, line_number=None):
    """Return the argument list that opens filename in editor"""
    argv = utils.shell_split(editor)
    if not argv:
        return []
    if line_number is None:
        return argv + [filename]
    basename = os.path.basename(argv[0])
    for pattern, args in _line_args(filename, line_number).items():
        if fnmatch.fnmatch(argv[0], pattern) or fnmatch.fnmatch(basename, pattern):
            return argv + args
    return argv + [filename]


def edit(editor, filename, line_number=None, cwd=None):
    """Open filename in the editor; failures are reported to the user"""
    argv = command(editor, filename, line_number=line_number)
    try:
        if not argv:
            raise ValueError('no editor configured')
        return core.fork(argv, cwd=cwd)
    except (OSError, ValueError) as err:
        message = N_('Cannot exec "%s": please configure your editor') % editor
        _, details = utils.format_exception(err)
        Interaction.critical(N_('Error Editing File'), message, details)
    return None
