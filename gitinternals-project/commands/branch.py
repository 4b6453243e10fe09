# The command: gitinternals list-branches
# What it does: Lists all existing branches, marking the current one with an asterisk
# How it does: Reads all the file names under refs/heads and compares them with the branch named by HEAD
# What data structure it uses: List (to hold branch names for sorting and display)

import sys
from utils import repository

def run(args):
    git_dir = repository.locate_git_dir(getattr(args, 'git_dir', None))
    if not git_dir:
        print("fatal: not a git repository", file=sys.stderr)
        sys.exit(1)

    list_branches(git_dir)

def list_branches(git_dir, out=None):
    out = out or sys.stdout
    current_branch = repository.get_current_branch(git_dir)
    for branch in repository.get_all_branches(git_dir):
        if branch == current_branch:
            print(f"* {branch}", file=out)
        else:
            print(f"  {branch}", file=out)
