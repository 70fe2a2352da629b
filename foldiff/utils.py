"""Miscellaneous utility functions"""
import os
import shlex
import sys
import traceback

from . import core


def format_exception(exc):
    """Format an exception object for display"""
    exc_type, exc_value, exc_tb = sys.exc_info()
    details = traceback.format_exception(exc_type, exc_value, exc_tb)
    details = '\n'.join(map(core.decode, details))
    if hasattr(exc, 'msg'):
        msg = exc.msg
    else:
        msg = core.decode(repr(exc))
    return (msg, details)


def shell_split(value):
    """Split a command string into arguments"""
    try:
        result = shlex.split(value)
    except ValueError:
        result = core.decode(value).strip().split()
    return result


def worktree_path(root, path):
    """Return the filesystem path for a repo-relative path"""
    if not root:
        return path
    return os.path.join(root, *path.split('/'))


def clamp(value, low, high):
    return max(low, min(value, high))
