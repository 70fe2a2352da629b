import os
import shutil
import stat
import tempfile
from unittest.mock import Mock, patch  # noqa pylint: disable=unused-import

import pytest

from foldiff import core
from foldiff import git
from foldiff import gitcfg
from foldiff import gitcmds
from foldiff import session


# shutil.rmtree() can't remove read-only files on Windows.  This onerror
# handler, adapted from <http://stackoverflow.com/a/1889686/357338>, works
# around this by changing such files to be writable and then re-trying.
def remove_readonly(func, path, _exc_info):
    if func is os.remove and not os.access(path, os.W_OK):
        os.chmod(path, stat.S_IWRITE)
        func(path)
    else:
        raise AssertionError('Should not happen')


def touch(*paths):
    """Open and close a file to either create it or update its mtime"""
    for path in paths:
        open(path, 'a').close()


def write_file(path, content):
    """Write content to the specified file path"""
    dirname = os.path.dirname(path)
    if dirname and not os.path.isdir(dirname):
        os.makedirs(dirname)
    with open(path, 'w') as f:
        f.write(content)


def run_git(*args):
    """Run git with the specified arguments"""
    status, out, _ = core.run_command(['git'] + list(args))
    assert status == 0
    return out


def commit_files():
    """Commit the current state as the initial commit"""
    run_git('commit', '-m', 'initial commit')


def initialize_repo():
    """Initialize a git repository in the current directory"""
    run_git('init')
    run_git('symbolic-ref', 'HEAD', 'refs/heads/main')
    run_git('config', '--local', 'user.name', 'Your Name')
    run_git('config', '--local', 'user.email', 'you@example.com')
    run_git('config', '--local', 'commit.gpgsign', 'false')
    run_git('config', '--local', 'tag.gpgsign', 'false')
    touch('A', 'B')
    run_git('add', 'A', 'B')


@pytest.fixture
def app_context():
    """Create a repository in a temporary directory and return a context"""
    tmp_directory = tempfile.mkdtemp('-foldiff-test')
    current_directory = os.getcwd()
    os.chdir(tmp_directory)

    initialize_repo()
    context = Mock()
    context.git = git.create()
    context.git.set_worktree(core.getcwd())
    context.cfg = gitcfg.create(context)
    context.diff_source = gitcmds.DiffSource(context)
    context.cfg.reset()

    yield context

    os.chdir(current_directory)
    shutil.rmtree(tmp_directory, onerror=remove_readonly)


class FakeDiffSource:
    """Answers diff queries from canned data

    stats: [(insertions, deletions, path)]
    statuses: [(status, path)]
    diffs: {path: unified diff text}

    """

    def __init__(self, stats=None, statuses=None, diffs=None, refs=None, root='/repo'):
        self.stats = list(stats or [])
        self.statuses = list(statuses or [])
        self.diffs = dict(diffs or {})
        self.refs = list(refs or ['main'])
        self.root = root
        self.calls = []

    def change_stats(self, ref):
        self.calls.append(('change_stats', ref))
        return list(self.stats)

    def change_status(self, ref):
        self.calls.append(('change_status', ref))
        return list(self.statuses)

    def file_diff(self, ref, path):
        self.calls.append(('file_diff', ref, path))
        return self.diffs.get(path, '')

    def resolve_ref(self, ref):
        return ref in self.refs

    def repository_root(self):
        return self.root

    def candidate_refs(self, prefix=''):
        return [ref for ref in self.refs if ref.startswith(prefix)]

    def file_diff_calls(self):
        return [call for call in self.calls if call[0] == 'file_diff']


class FakeSurface(session.Surface):
    """Records what the controller asks the host to do"""

    def __init__(self):
        self.rendering = None
        self.line = 1
        self.displayed = 0
        self.opened = []
        self.help = None
        self.closed = False

    def display(self, rendering):
        self.rendering = rendering
        self.displayed += 1

    def cursor_line(self):
        return self.line

    def set_cursor_line(self, line):
        self.line = line

    def open_file(self, path, line):
        self.opened.append((path, line))

    def show_help(self, lines):
        self.help = lines

    def close(self):
        self.closed = True

    def find_line(self, text):
        """Return the 1-based display line that starts with text"""
        for idx, line in enumerate(self.rendering.lines):
            if line.startswith(text):
                return idx + 1
        raise AssertionError('%r not found in %r' % (text, self.rendering.lines))


A_GO_DIFF = """\
diff --git a/src/a.go b/src/a.go
index 1111111..2222222 100644
--- a/src/a.go
+++ b/src/a.go
@@ -1,1 +1,3 @@
 x
+y
+z
"""
