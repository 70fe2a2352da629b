"""Git commands and queries used to build change sets"""
from .interaction import Interaction


def _diff_args(ref):
    """Return the revision arguments for a comparison target

    No ref means uncommitted changes against HEAD.  Otherwise the changes
    committed since the merge base of <ref> and HEAD are shown.

    """
    if ref:
        return ['%s...HEAD' % ref]
    return ['HEAD']


def common_diff_opts():
    return {
        'no_color': True,
        'no_ext_diff': True,
        'no_renames': True,
    }


def _check(status, out, err):
    """Log failed queries; failures are treated as empty results"""
    if status != 0:
        Interaction.log_status(status, out, err)
        return False
    return True


def _parse_count(value):
    # Binary files report "-" for both counts
    try:
        return max(0, int(value))
    except ValueError:
        return 0


def parse_numstat(out):
    """Parse "git diff --numstat -z" into (insertions, deletions, path) tuples"""
    rows = []
    for record in out.split('\0'):
        parts = record.strip('\n').split('\t', 2)
        if len(parts) != 3 or not parts[2]:
            continue
        insertions, deletions, path = parts
        rows.append((_parse_count(insertions), _parse_count(deletions), path))
    return rows


def parse_name_status(out):
    """Parse "git diff --name-status -z" into (status, path) tuples"""
    rows = []
    fields = [field for field in out.strip('\n').split('\0') if field]
    idx = 0
    while idx + 1 < len(fields):
        status = fields[idx]
        # Renames and copies list the old path and then the new path
        if status[:1] in ('R', 'C') and idx + 2 < len(fields):
            path = fields[idx + 2]
            idx += 3
        else:
            path = fields[idx + 1]
            idx += 2
        rows.append((status[:1], path))
    return rows


def diff_numstat(context, ref=None):
    """Return (insertions, deletions, path) for each changed file"""
    args = _diff_args(ref)
    status, out, err = context.git.diff(
        numstat=True, z=True, *args, **common_diff_opts()
    )
    if not _check(status, out, err):
        return []
    return parse_numstat(out)


def diff_name_status(context, ref=None):
    """Return (status letter, path) for each changed file"""
    args = _diff_args(ref)
    status, out, err = context.git.diff(
        name_status=True, z=True, *args, **common_diff_opts()
    )
    if not _check(status, out, err):
        return []
    return parse_name_status(out)


def file_diff(context, ref, path):
    """Return the unified diff text for a single path"""
    args = _diff_args(ref)
    args.extend(['--', path])
    status, out, err = context.git.diff(_raw=True, *args, **common_diff_opts())
    if not _check(status, out, err):
        return ''
    return out


def is_valid_ref(context, ref):
    """Is the provided Git ref a valid refname?"""
    status, _, _ = context.git.rev_parse(ref, quiet=True, verify=True)
    return status == 0


def toplevel(context):
    """Return the top-level directory of the worktree, or None"""
    status, out, _ = context.git.rev_parse(show_toplevel=True)
    if status != 0 or not out:
        return None
    return out.strip()


def all_refs(context):
    """Return local branches, remote branches and tags, in that order"""
    local_branches = []
    remote_branches = []
    tags = []
    query = (
        ('refs/heads/', local_branches),
        ('refs/remotes/', remote_branches),
        ('refs/tags/', tags),
    )
    status, out, err = context.git.for_each_ref(format='%(refname)')
    if not _check(status, out, err):
        return []
    for ref in out.splitlines():
        for prefix, dst in query:
            if ref.startswith(prefix) and not ref.endswith('/HEAD'):
                dst.append(ref[len(prefix) :])
                break
    return local_branches + remote_branches + tags


def candidate_refs(context, prefix=''):
    """Return refs that start with prefix, for interactive ref entry"""
    return [ref for ref in all_refs(context) if ref.startswith(prefix or '')]


class DiffSource:
    """Answers diff queries for the change-set loader"""

    def __init__(self, context):
        self.context = context

    def change_stats(self, ref):
        return diff_numstat(self.context, ref)

    def change_status(self, ref):
        return diff_name_status(self.context, ref)

    def file_diff(self, ref, path):
        return file_diff(self.context, ref, path)

    def resolve_ref(self, ref):
        return is_valid_ref(self.context, ref)

    def repository_root(self):
        return toplevel(self.context)

    def candidate_refs(self, prefix=''):
        return candidate_refs(self.context, prefix)
