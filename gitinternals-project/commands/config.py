# The command: gitinternals config <key> [<value>]
# What it does: Shows a setting when only the key is given, stores it when a value follows (e.g., core.git_dir or format.date_format)
# How it does: Looks the key up through utils/config.py. core.git_dir is checked against the repository layout and saved as an absolute path
# What data structure it uses: Map / Dictionary (INI sections of key-value pairs)

import os
import sys
from utils import config as config_utils, repository

def run(args):
    value = getattr(args, 'value', None)
    try:
        if value is None:
            show_setting(args.key)
        else:
            store_setting(args.key, value)
    except (ValueError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

def show_setting(key):
    value = config_utils.get_key(key)
    if value is None:
        print(f"fatal: '{key}' is not set", file=sys.stderr)
        sys.exit(1)
    print(value)

def store_setting(key, value):
    if key == 'core.git_dir':
        value = os.path.abspath(os.path.expanduser(value))
        if not repository.locate_git_dir(value):
            raise ValueError(f"'{value}' is not a git repository")
    config_utils.write_config(key, value)
    print(f"Set {key} to '{value}'")
