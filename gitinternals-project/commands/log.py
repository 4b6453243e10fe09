# The command: gitinternals log <branch> [-n N]
# What it does: Displays the commit history starting at the head of a branch and walking backward through the parent links
# How it does: Resolves the branch to a commit hash and prints every LogEntry produced by utils/history.py. At a merge the second parent
# is printed right after the merge commit with a "(merged)" marker, then the mainline continues through the first parent
# What data structure it uses: Graph Traversal (first-parent walk) on the Directed Acyclic Graph (DAG) formed by the commits

import itertools
import sys
from utils import repository, history, display, config
from utils.errors import GitInternalsError

def run(args):
    git_dir = repository.locate_git_dir(getattr(args, 'git_dir', None))
    if not git_dir:
        print("fatal: not a git repository", file=sys.stderr)
        sys.exit(1)

    commit_hash = repository.resolve_revision(git_dir, args.branch)
    if not commit_hash: # Unknown branch, or a branch without commits
        print(f"fatal: ambiguous argument '{args.branch}': unknown revision", file=sys.stderr)
        sys.exit(1)

    max_count = getattr(args, 'max_count', None)
    if max_count is not None and max_count < 0:
        print(f"fatal: max count must not be negative: {max_count}", file=sys.stderr)
        sys.exit(1)

    date_format, merged_marker = config.get_display_settings()
    try:
        print_log(git_dir, commit_hash, max_count, date_format, merged_marker)
    except GitInternalsError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

def print_log(git_dir, commit_hash, max_count=None,
              date_format=config.DEFAULT_DATE_FORMAT, merged_marker=config.DEFAULT_MERGED_MARKER, out=None):
    out = out or sys.stdout
    entries = history.walk_commits(git_dir, commit_hash)
    if max_count is not None:
        entries = itertools.islice(entries, max_count)

    for entry in entries:
        for line in display.log_entry_lines(entry, date_format, merged_marker):
            print(line, file=out)
