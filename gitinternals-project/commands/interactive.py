# The command: gitinternals interactive
# What it does: Asks for the .git location, a command and its argument on stdin, then runs that command
# How it does: Reads answers with input() and hands them to the same printing functions the other subcommands use
# What data structure it uses: Dictionary (command name -> prompt for its argument)

import sys
from utils import repository, config
from utils.errors import GitInternalsError
from commands import cat_file, branch, log, commit_tree

PROMPTS = {
    'cat-file': "Enter git object hash:",
    'log': "Enter branch name:",
    'commit-tree': "Enter commit-hash:",
    'list-branches': None,
}

def run(args):
    print("Enter .git directory location:")
    git_dir = repository.locate_git_dir(input().strip() or None)
    if not git_dir:
        print("fatal: not a git repository", file=sys.stderr)
        sys.exit(1)

    print("Enter command:")
    command = input().strip()
    if command not in PROMPTS:
        print(f"fatal: unknown command '{command}'", file=sys.stderr)
        sys.exit(1)

    argument = None
    if PROMPTS[command]:
        print(PROMPTS[command])
        argument = input().strip()

    try:
        _dispatch(git_dir, command, argument)
    except GitInternalsError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

def _dispatch(git_dir, command, argument):
    if command == 'list-branches':
        branch.list_branches(git_dir)
        return

    commit_hash = repository.resolve_revision(git_dir, argument)
    if not commit_hash:
        print(f"fatal: Not a valid object name {argument}", file=sys.stderr)
        sys.exit(1)

    date_format, merged_marker = config.get_display_settings()
    if command == 'cat-file':
        cat_file.cat_file(git_dir, commit_hash, date_format)
    elif command == 'log':
        log.print_log(git_dir, commit_hash, date_format=date_format, merged_marker=merged_marker)
    else:
        commit_tree.print_commit_tree(git_dir, commit_hash)
