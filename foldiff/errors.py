"""Provides exception classes used by foldiff"""


class FoldiffError(Exception):
    """The base class of all foldiff exceptions"""


class UsageError(FoldiffError):
    """Exception class for usage errors."""

    def __init__(self, title, message):
        FoldiffError.__init__(self, message)
        self.title = title
        self.message = message


class InvalidRefError(UsageError):
    """The requested comparison target does not resolve to a commit"""


class NotARepositoryError(UsageError):
    """The current directory is not inside a git worktree"""
