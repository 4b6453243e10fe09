# What it does: Finds the .git directory and reads branch pointers (HEAD and refs/heads/*)
# How it does: `find_git_dir` walks up the directory tree until it finds a git directory. Refs are small text files holding a hash,
# HEAD holds "ref: refs/heads/<branch>" or a bare hash when detached
# What data structure it uses: Uses recursion (linear, one call per parent directory) to find the git dir. Refs are pointers into the commit DAG

import os

from . import config
from .errors import MalformedField
from .objects import validate_hash


def is_git_dir(path): # A git directory holds at least objects/ and HEAD
    return os.path.isdir(os.path.join(path, 'objects')) and os.path.isfile(os.path.join(path, 'HEAD'))


def find_git_dir(path='.'): # Recursively searches upward for a git directory (or a work tree containing .git)
    path = os.path.abspath(path)
    if is_git_dir(path):
        return path
    dot_git = os.path.join(path, '.git')
    if os.path.isdir(dot_git) and is_git_dir(dot_git):
        return dot_git
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_git_dir(parent_path)


def locate_git_dir(explicit=None): # --git-dir, then core.git_dir from the config, then discovery from the cwd
    candidate = explicit or config.get_default_git_dir()
    if candidate:
        candidate = os.path.abspath(os.path.expanduser(candidate))
        if is_git_dir(candidate):
            return candidate
        dot_git = os.path.join(candidate, '.git')
        return dot_git if is_git_dir(dot_git) else None
    return find_git_dir()


def _read_ref_file(path):
    with open(path, 'r') as f:
        return f.read().strip()


def get_current_branch(git_dir): # Name of the branch HEAD points to, or None when detached
    head_path = os.path.join(git_dir, 'HEAD')
    if not os.path.exists(head_path):
        return None
    head_content = _read_ref_file(head_path)
    if head_content.startswith('ref: refs/heads/'):
        return head_content[len('ref: refs/heads/'):]
    if head_content.startswith('ref:'):
        return head_content.split('/')[-1].strip()
    return None


def get_head_commit(git_dir): # Commit hash HEAD resolves to, or None if the branch has no commits yet
    head_path = os.path.join(git_dir, 'HEAD')
    if not os.path.exists(head_path):
        return None
    head_content = _read_ref_file(head_path)
    if head_content.startswith('ref:'):
        ref_path = head_content.split(':', 1)[1].strip()
        branch_path = os.path.join(git_dir, *ref_path.split('/'))
        if not os.path.exists(branch_path) or os.path.getsize(branch_path) == 0:
            return None
        return _read_ref_file(branch_path)
    return head_content or None


def get_all_branches(git_dir): # Sorted branch names under refs/heads, nested ones as "feature/x"
    branches_dir = os.path.join(git_dir, 'refs', 'heads')
    if not os.path.isdir(branches_dir):
        return []
    branches = []
    for root, _, filenames in os.walk(branches_dir):
        for filename in filenames:
            rel_path = os.path.relpath(os.path.join(root, filename), branches_dir)
            branches.append(rel_path.replace(os.sep, '/'))
    return sorted(branches)


def get_branch_commit(git_dir, branch_name): # Commit hash of a branch, or None if the branch doesn't exist
    branch_path = os.path.join(git_dir, 'refs', 'heads', *branch_name.split('/'))
    if not os.path.isfile(branch_path):
        return None
    return _read_ref_file(branch_path)


def resolve_revision(git_dir, name):
    """
    Resolves a branch name, "HEAD" or a full hash to a commit hash.
    Returns None if nothing matches.
    """
    if name == 'HEAD':
        return get_head_commit(git_dir)

    branch_commit = get_branch_commit(git_dir, name)
    if branch_commit:
        return branch_commit

    try:
        return validate_hash(name)
    except MalformedField:
        return None
