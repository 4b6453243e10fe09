import argparse
import logging
from commands import (
    cat_file, branch, log, commit_tree, config, interactive
)

def non_negative_int(value): # argparse type for counts such as -n
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: '{value}'")
    if count < 0:
        raise argparse.ArgumentTypeError(f"count must not be negative: {count}")
    return count

# The main entry point for the gitinternals object store reader
def main(argv=None):
    # The main parser
    parser = argparse.ArgumentParser(description="gitinternals: read commits, trees and blobs straight from a .git directory.")
    parser.add_argument("--git-dir", dest="git_dir", help="Path to the .git directory (default: core.git_dir from the config, then discovery).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print debug traces of every object read.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: cat-file
    cat_file_parser = subparsers.add_parser("cat-file", help="Decode and print one object.")
    cat_file_parser.add_argument("object", help="Object hash (or branch name).")
    cat_file_parser.set_defaults(func=cat_file.run)

    # Command: list-branches
    list_branches_parser = subparsers.add_parser("list-branches", help="List branches, marking the current one.")
    list_branches_parser.set_defaults(func=branch.run)

    # Command: log
    log_parser = subparsers.add_parser("log", help="Show the commit history of a branch.")
    log_parser.add_argument("branch", help="Branch name, HEAD or commit hash to start from.")
    log_parser.add_argument("-n", "--max-count", dest="max_count", type=non_negative_int, help="Stop after this many entries.")
    log_parser.set_defaults(func=log.run)

    # Command: commit-tree
    commit_tree_parser = subparsers.add_parser("commit-tree", help="List every file path in a commit's tree.")
    commit_tree_parser.add_argument("commit_hash", help="The commit hash (or branch name).")
    commit_tree_parser.set_defaults(func=commit_tree.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Show or set a gitinternals setting.")
    config_parser.add_argument("key", help="The configuration key (e.g., core.git_dir).")
    config_parser.add_argument("value", nargs="?", help="The value to store (omit to show the current one).")
    config_parser.set_defaults(func=config.run)

    # Command: interactive
    interactive_parser = subparsers.add_parser("interactive", help="Prompt for the .git location, a command and its argument.")
    interactive_parser.set_defaults(func=interactive.run)

    # Parse the arguments
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # If a command was specified, run its function
    if hasattr(args, 'func'):
        args.func(args)
    else:
        parser.print_help()

if __name__ == "__main__":
    main()
