# What it does: Turns the body of a commit, tree or blob object into Python records
# How it does: Each parser pulls tokens from an ObjectStream with the delimiter the format uses at that position
# (space between fields, newline at end of line, NUL after a header or file name, 20 raw bytes for a tree entry's hash)
# What data structure it uses: namedtuples for Person, Commit and TreeEntry, a list to keep tree entries in on-disk order

import logging
import re
from collections import namedtuple
from datetime import datetime, timedelta, timezone

from .errors import MalformedField
from .objects import (
    COMMIT, NEWLINE, NUL, RAW_HASH_LENGTH, SPACE, TREE, open_object, validate_hash,
)

logger = logging.getLogger(__name__)

AUTHOR = 'author'
COMMITTER = 'committer'
GITLINK_MODE = '160000'

Person = namedtuple('Person', ['name', 'email', 'timestamp', 'role'])
Commit = namedtuple('Commit', ['id', 'tree_hash', 'author', 'committer', 'message', 'parent_ids'])
TreeEntry = namedtuple('TreeEntry', ['mode', 'name', 'hash'])

_OFFSET_PATTERN = re.compile(r'([+-])(\d{2})(?::?(\d{2}))?')


def parse_offset(token): # "+0300", "-05:30" or "+02" -> timezone
    match = _OFFSET_PATTERN.fullmatch(token)
    if not match:
        raise MalformedField(f"Invalid timezone offset: '{token}'")
    sign, hours, minutes = match.groups()
    hours, minutes = int(hours), int(minutes or 0)
    if hours > 18 or minutes >= 60:
        raise MalformedField(f"Timezone offset out of range: '{token}'")

    delta = timedelta(hours=hours, minutes=minutes)
    return timezone(-delta if sign == '-' else delta)


def parse_person(line, role):
    """
    Parses the rest of an author/committer line: `name <email> epochSeconds offset`.

    The line is taken apart from the right, so names containing spaces survive.
    The email keeps neither of its angle brackets.
    """
    head, _, offset = line.rpartition(' ')
    head, _, epoch = head.rpartition(' ')

    open_bracket = head.find('<')
    if open_bracket == -1 or not head.endswith('>'):
        raise MalformedField(f"Invalid {role} identity: '{line}'")
    name = head[:open_bracket]
    if name.endswith(' '):
        name = name[:-1]
    email = head[open_bracket + 1:-1]

    try:
        seconds = int(epoch)
    except ValueError:
        raise MalformedField(f"Invalid {role} timestamp: '{epoch}'") from None

    tz = parse_offset(offset)
    try:
        timestamp = datetime.fromtimestamp(seconds, tz)
    except (OverflowError, OSError, ValueError):
        raise MalformedField(f"{role.capitalize()} timestamp out of range: '{epoch}'") from None

    return Person(name, email, timestamp, role)


def _expect_keyword(token, keyword):
    if token != keyword:
        raise MalformedField(f"Expected '{keyword}' in commit, found '{token}'")


def parse_commit(stream, sha):
    """
    Reads a commit body from `stream` (positioned right after the header).

    Layout: tree line, zero or more parent lines, author, committer,
    optional extra headers (gpgsig, encoding, ...), a blank line, then the message.
    Blank message lines are dropped.
    """
    _expect_keyword(stream.read_token(SPACE), 'tree')
    tree_hash = validate_hash(stream.read_token(NEWLINE), 'tree hash')

    parent_ids = []
    keyword = stream.read_token(SPACE)
    while keyword == 'parent':
        parent_ids.append(validate_hash(stream.read_token(NEWLINE), 'parent hash'))
        keyword = stream.read_token(SPACE)

    _expect_keyword(keyword, AUTHOR)
    author = parse_person(stream.read_token(NEWLINE), AUTHOR)

    _expect_keyword(stream.read_token(SPACE), COMMITTER)
    committer = parse_person(stream.read_token(NEWLINE), COMMITTER)

    # Anything before the blank separator line is an extra header
    while stream.has_more():
        line = stream.read_token(NEWLINE, eof_ok=True)
        if not line:
            break
        logger.debug("Skipping commit header line in %s: %.40s", sha, line)

    message_lines = []
    while stream.has_more():
        line = stream.read_token(NEWLINE, eof_ok=True)
        if line.strip():
            message_lines.append(line)

    return Commit(sha, tree_hash, author, committer, '\n'.join(message_lines), tuple(parent_ids))


def read_commit(git_dir, sha):
    sha = validate_hash(sha)
    with open_object(git_dir, sha, expected=COMMIT) as (_, stream):
        return parse_commit(stream, sha)


def parse_tree(stream): # Entries until the stream runs dry; there is no entry count
    entries = []
    while stream.has_more():
        mode = stream.read_token(SPACE)
        if not mode.isdigit():
            raise MalformedField(f"Invalid tree entry mode: '{mode}'")
        name = stream.read_token(NUL)
        sha = stream.read_fixed(RAW_HASH_LENGTH).hex()
        entries.append(TreeEntry(mode, name, sha))
    return entries


def read_tree(git_dir, sha):
    with open_object(git_dir, sha, expected=TREE) as (_, stream):
        return parse_tree(stream)


def iter_blob(stream): # Raw payload, untouched
    yield from stream.iter_chunks()
