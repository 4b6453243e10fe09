# What it does: Walks commit ancestry from a starting commit, following the first-parent mainline
# How it does: A loop over the current commit. For a two-parent merge the second parent is emitted first and flagged as merged, then the
# first parent is emitted and becomes the new current commit. The walk ends at a root commit
# What data structure it uses: Graph Traversal over the commit DAG (a first-parent linked list with one-step side branches at merges)

import logging
from collections import namedtuple

from .errors import UnsupportedMerge
from .records import read_commit

logger = logging.getLogger(__name__)

LogEntry = namedtuple('LogEntry', ['id', 'committer', 'message', 'merged'])


def _entry(commit, merged=False):
    return LogEntry(commit.id, commit.committer, commit.message, merged)


def walk_commits(git_dir, start_sha):
    """
    Yields a LogEntry for the start commit and then for its ancestors.

    Given a merge M with parents [P1, P2] the order is M, P2 (merged), P1, ...
    P2's own history is not followed. Every commit is read through its own
    stream, and nothing is de-duplicated.
    """
    current = read_commit(git_dir, start_sha)
    yield _entry(current)

    while current.parent_ids:
        parents = current.parent_ids
        if len(parents) > 2:
            raise UnsupportedMerge(current.id, len(parents))

        if len(parents) == 2:
            mainline = read_commit(git_dir, parents[0])
            merged = read_commit(git_dir, parents[1])
            logger.debug("Merge %s: mainline %s, merged %s", current.id, mainline.id, merged.id)
            yield _entry(merged, merged=True)
        else:
            mainline = read_commit(git_dir, parents[0])

        yield _entry(mainline)
        current = mainline
