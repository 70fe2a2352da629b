"""Tests the foldiff.utils module."""
import os

from foldiff import utils


def test_worktree_path():
    assert utils.worktree_path('/repo', 'src/a.go') == os.path.join(
        '/repo', 'src', 'a.go'
    )
    assert utils.worktree_path(None, 'src/a.go') == 'src/a.go'


def test_shell_split():
    assert utils.shell_split('gvim -f') == ['gvim', '-f']
    assert utils.shell_split('"my editor" --wait') == ['my editor', '--wait']
    # unbalanced quotes fall back to whitespace splitting
    assert utils.shell_split('vim "oops') == ['vim', '"oops']


def test_clamp():
    assert utils.clamp(0, 1, 5) == 1
    assert utils.clamp(9, 1, 5) == 5
    assert utils.clamp(3, 1, 5) == 3


def test_format_exception():
    try:
        raise ValueError('boom')
    except ValueError as exc:
        msg, details = utils.format_exception(exc)
    assert msg == "ValueError('boom')"
    assert 'Traceback' in details
