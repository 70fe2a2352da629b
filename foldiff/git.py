from functools import partial
import time

from . import core
from .interaction import Interaction


FOLDIFF_TRACE = core.getenv('FOLDIFF_TRACE', '')
GIT = core.getenv('FOLDIFF_GIT', 'git')


def dashify(value):
    return value.replace('_', '-')


class Git:
    """
    The Git class manages communication with the Git binary
    """

    def __init__(self, worktree=None):
        self._worktree = None
        self.set_worktree(worktree or core.getcwd())

    def getcwd(self):
        """Return the working directory used by git()"""
        return self._worktree

    def set_worktree(self, path):
        self._worktree = core.abspath(core.decode(path))
        return self._worktree

    def __getattr__(self, name):
        git_cmd = partial(self.git, name)
        setattr(self, name, git_cmd)
        return git_cmd

    @staticmethod
    def execute(
        command,
        _add_env=None,
        _cwd=None,
        _encoding=None,
        _raw=False,
        _stdin=None,
    ):
        """
        Execute a command and returns its output

        :param command: argument list to execute.
        :param _cwd: working directory, defaults to the current directory.
        :param _encoding: default encoding, defaults to None (utf-8).
        :param _raw: do not strip trailing whitespace.
        :param _stdin: optional stdin filehandle.
        :returns (status, out, err): exit status, stdout, stderr

        """
        if not _cwd:
            _cwd = core.getcwd()

        start_time = time.time()
        status, out, err = core.run_command(
            command,
            add_env=_add_env,
            cwd=_cwd,
            encoding=_encoding,
            stdin=_stdin,
        )
        elapsed_time = abs(time.time() - start_time)

        if not _raw and out is not None:
            out = out.rstrip('\n')

        trace = FOLDIFF_TRACE
        if trace == 'trace':
            msg = f'trace: {elapsed_time:.3f}s: {core.list2cmdline(command)}'
            Interaction.log_status(status, msg, '')
        elif trace == 'full':
            if out or err:
                core.print_stderr(
                    "# %.3fs: %s -> %d: '%s' '%s'"
                    % (elapsed_time, ' '.join(command), status, out, err)
                )
            else:
                core.print_stderr(
                    '# %.3fs: %s -> %d' % (elapsed_time, ' '.join(command), status)
                )
        elif trace:
            core.print_stderr('# {:.3f}s: {}'.format(elapsed_time, ' '.join(command)))

        return (status, out, err)

    def git(self, cmd, *args, **kwargs):
        # Handle optional arguments prior to calling transform_kwargs
        # otherwise they'll end up in args, which is bad.
        _kwargs = {'_cwd': self.getcwd()}
        execute_kwargs = (
            '_add_env',
            '_cwd',
            '_encoding',
            '_stdin',
            '_raw',
        )
        for kwarg in execute_kwargs:
            if kwarg in kwargs:
                _kwargs[kwarg] = kwargs.pop(kwarg)

        git_args = [
            GIT,
            '-c',
            'diff.suppressBlankEmpty=false',
            '-c',
            'diff.autoRefreshIndex=false',
            dashify(cmd),
        ]
        opt_args = transform_kwargs(**kwargs)
        call = git_args + opt_args
        call.extend(args)
        try:
            result = self.execute(call, **_kwargs)
        except OSError as exc:
            result = (1, '', "error: unable to execute '%s': %s" % (GIT, exc))
        return result


def transform_kwargs(**kwargs):
    """Transform kwargs into git command line options

    Passing foo=None or foo=False ignores foo, so that callers can
    use default values that are ignored unless set explicitly.

    Passing foo={string-or-number} results in ['--foo=<value>']
    in the resulting arguments.

    """
    args = []
    types_to_stringify = (str, float, int)

    for k, value in kwargs.items():
        if len(k) == 1:
            dashes = '-'
            equals = ''
        else:
            dashes = '--'
            equals = '='
        # isinstance(False, int) is True, so we have to check bool first
        if isinstance(value, bool):
            if value:
                args.append(f'{dashes}{dashify(k)}')
        elif isinstance(value, types_to_stringify):
            args.append(f'{dashes}{dashify(k)}{equals}{value}')

    return args


def create(worktree=None):
    """Create Git instances

    >>> git = create()
    >>> status, out, err = git.version()
    >>> 'git' == out[:3].lower()
    True

    """
    return Git(worktree=worktree)
