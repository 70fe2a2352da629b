"""Core functions for decoding subprocess output and running commands

The @interruptable functions retry when system calls are interrupted,
e.g. when python raises an OSError with errno == EINTR.

"""
import itertools
import os
import subprocess
import sys

from .decorators import interruptable

# /usr/include/stdlib.h
EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# /usr/include/sysexits.h
EXIT_USAGE = 64

# Default encoding
ENCODING = 'utf-8'

# Git does not care about encodings so diffs can contain anything.
_encoding_tests = [
    ENCODING,
    'iso-8859-15',
    'windows1252',
    'ascii',
]


def decode(value, encoding=None, errors='strict'):
    """decode(encoded_string) returns an unencoded unicode string"""
    if value is None:
        result = None
    elif isinstance(value, str):
        result = value
    else:
        result = None
        if encoding is None:
            encoding_tests = _encoding_tests
        else:
            encoding_tests = itertools.chain([encoding], _encoding_tests)

        for enc in encoding_tests:
            try:
                result = value.decode(enc, errors)
                break
            except ValueError:
                pass

        if result is None:
            result = value.decode(ENCODING, errors='ignore')

    return result


def list2cmdline(cmd):
    return subprocess.list2cmdline([decode(c) for c in cmd])


@interruptable
def start_command(
    cmd,
    cwd=None,
    add_env=None,
    stdin=subprocess.PIPE,
    stdout=subprocess.PIPE,
    stderr=subprocess.PIPE,
    **extra
):
    """Start the given command, and return a subprocess object.

    This provides a simpler interface to the subprocess module.

    """
    env = extra.pop('env', None)
    if add_env is not None:
        env = os.environ.copy()
        env.update(add_env)

    cmd = [decode(c) for c in cmd]
    return subprocess.Popen(
        cmd,
        stdin=stdin,
        stdout=stdout,
        stderr=stderr,
        cwd=cwd,
        env=env,
        **extra
    )


@interruptable
def communicate(proc):
    return proc.communicate()


def run_command(cmd, *args, **kwargs):
    """Run the given command to completion, and return its results.

    The results are formatted as a 3-tuple: (exit_code, output, errors)
    The other arguments are passed on to start_command().

    """
    encoding = kwargs.pop('encoding', None)
    process = start_command(cmd, *args, **kwargs)
    (output, errors) = communicate(process)
    output = decode(output, encoding=encoding)
    errors = decode(errors, encoding=encoding)
    exit_code = process.returncode
    return (exit_code, output or '', errors or '')


def fork(args, cwd=None):
    """Launch a process in the background and return its pid"""
    argv = [decode(arg) for arg in args]
    return subprocess.Popen(argv, cwd=cwd).pid


def getenv(name, default=None):
    return decode(os.getenv(name, default))


def print_stdout(msg, linesep='\n'):
    sys.stdout.write(msg + linesep)


def print_stderr(msg, linesep='\n'):
    sys.stderr.write(msg + linesep)


abspath = os.path.abspath
getcwd = os.getcwd
isdir = os.path.isdir
realpath = os.path.realpath
