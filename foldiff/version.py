"""Provide foldiff's version number"""
from importlib import metadata

from . import core
from ._version import VERSION


def version():
    """Returns the current version"""
    try:
        metadata_version = metadata.version('foldiff')
    except metadata.PackageNotFoundError:
        return VERSION
    # Source checkouts can report "0.0.0" or "0.1.dev*".
    if not metadata_version.startswith('0.'):
        return metadata_version
    return VERSION


def builtin_version():
    """Returns the version recorded in foldiff/_version.py"""
    return VERSION


def print_version(builtin=False, brief=False):
    if builtin:
        msg = builtin_version()
    else:
        msg = version()
    if not brief:
        msg = 'foldiff version %s' % msg
    core.print_stdout(msg)
