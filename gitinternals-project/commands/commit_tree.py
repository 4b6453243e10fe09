# The command: gitinternals commit-tree <commit-hash>
# What it does: Prints every file path in the snapshot recorded by a commit
# How it does: Reads the commit to find its root tree, then lets utils/tree.py expand subtrees depth-first into "dir/file" paths
# What data structure it uses: Merkle Tree (the snapshot), walked with an explicit stack

import sys
from utils import repository, tree
from utils.errors import GitInternalsError

def run(args):
    git_dir = repository.locate_git_dir(getattr(args, 'git_dir', None))
    if not git_dir:
        print("fatal: not a git repository", file=sys.stderr)
        sys.exit(1)

    commit_hash = repository.resolve_revision(git_dir, args.commit_hash)
    if not commit_hash:
        print(f"fatal: Not a valid object name {args.commit_hash}", file=sys.stderr)
        sys.exit(1)

    try:
        print_commit_tree(git_dir, commit_hash)
    except GitInternalsError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

def print_commit_tree(git_dir, commit_hash, out=None):
    out = out or sys.stdout
    for path in tree.commit_tree_paths(git_dir, commit_hash):
        print(path, file=out)
