"""Decorators used by the subprocess helpers"""
import errno
import functools


def interruptable(func):
    """Retry system calls that were interrupted by a signal"""

    @functools.wraps(func)
    def retry(*args, **kwargs):
        while True:
            try:
                return func(*args, **kwargs)
            except OSError as e:
                if e.errno not in (errno.EINTR, errno.EINVAL):
                    raise

    return retry
