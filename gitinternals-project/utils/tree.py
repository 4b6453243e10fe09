# What it does: Flattens a tree object into the file paths it contains, as `commit-tree` prints them
# How it does: Depth-first walk with an explicit stack. Each tree body is read completely (and its file closed) before any entry is
# resolved, so every subtree and blob is opened through its own independent stream
# What data structure it uses: Stack of (entry iterator, path prefix) pairs walking the Merkle Tree of the snapshot

import logging

from .objects import COMMIT, TREE, read_object_kind
from .records import GITLINK_MODE, read_commit, read_tree

logger = logging.getLogger(__name__)


def resolve_kind(git_dir, entry): # The kind of object a tree entry points at
    if entry.mode == GITLINK_MODE:
        # Submodule commit, lives in another repository
        return COMMIT
    return read_object_kind(git_dir, entry.hash)


def walk_tree(git_dir, tree_sha, prefix=''): # Yields "dir/sub/file" paths in on-disk order
    stack = [(iter(read_tree(git_dir, tree_sha)), prefix)]

    while stack:
        entries, current_prefix = stack[-1]
        entry = next(entries, None)
        if entry is None:
            stack.pop()
            continue

        path = current_prefix + entry.name
        if resolve_kind(git_dir, entry) == TREE:
            logger.debug("Descending into %s/ (%s)", path, entry.hash)
            stack.append((iter(read_tree(git_dir, entry.hash)), path + '/'))
        else:
            yield path


def commit_tree_paths(git_dir, commit_sha):
    commit = read_commit(git_dir, commit_sha)
    return walk_tree(git_dir, commit.tree_hash)
