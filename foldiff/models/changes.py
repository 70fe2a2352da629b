"""The change set: the files that differ for a comparison target"""
from .. import diffparse


# File status
ADDED = 'A'
DELETED = 'D'
MODIFIED = 'M'

STATUSES = (ADDED, DELETED, MODIFIED)


def normalize_status(letter):
    """Map a git status letter onto ADDED, DELETED or MODIFIED

    Renames, copies, type changes and unmerged entries are all
    treated as modifications.

    """
    if letter in STATUSES:
        return letter
    return MODIFIED


class ChangedFile:
    """One file in the change set"""

    def __init__(
        self,
        path,
        status=MODIFIED,
        insertions=0,
        deletions=0,
        expanded=False,
        hunks=None,
    ):
        self.path = path
        self.status = status
        self.insertions = insertions
        self.deletions = deletions
        self.expanded = expanded
        self.hunks = hunks if hunks is not None else []

    def __repr__(self):
        return 'ChangedFile(%r, %r, +%d -%d, expanded=%r)' % (
            self.path,
            self.status,
            self.insertions,
            self.deletions,
            self.expanded,
        )


def load(diff_source, ref, default_expanded=False):
    """Return the ChangedFiles for a comparison target, sorted by path

    Statistics and status letters are merged by path.  A path that only
    has statistics is considered modified, and a path that only has a
    status has zero counts.  Hunks are not loaded.

    """
    files = {}
    for insertions, deletions, path in diff_source.change_stats(ref):
        files[path] = ChangedFile(
            path,
            insertions=insertions,
            deletions=deletions,
            expanded=default_expanded,
        )

    for letter, path in diff_source.change_status(ref):
        status = normalize_status(letter)
        try:
            files[path].status = status
        except KeyError:
            files[path] = ChangedFile(path, status=status, expanded=default_expanded)

    return [files[path] for path in sorted(files)]


def load_hunks(diff_source, ref, changed_file):
    """Parse the diff for a single file and store its hunks"""
    text = diff_source.file_diff(ref, changed_file.path)
    changed_file.hunks = diffparse.parse_hunks(text)
    return changed_file.hunks


def reconcile(previous, current, default_expanded=False):
    """Carry expansion state over to a reloaded change set

    Files that are no longer present are dropped.  New files take the
    default expansion state.  Hunks are not carried over; expanded files
    are parsed again from the current diff.

    """
    expanded = {changed_file.path: changed_file.expanded for changed_file in previous}
    for changed_file in current:
        changed_file.expanded = expanded.get(changed_file.path, default_expanded)
    return current


def clear_hunks(files):
    """Forget all cached hunks"""
    for changed_file in files:
        changed_file.hunks = []
