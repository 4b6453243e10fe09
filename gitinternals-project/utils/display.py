# What it does: Renders parsed records as the text the commands print
# How it does: Plain string formatting; timestamps use a strftime pattern plus a "+HH:MM" offset built from the datetime's utcoffset
# What data structure it uses: Lists of output lines

from .config import DEFAULT_DATE_FORMAT, DEFAULT_MERGED_MARKER
from .records import AUTHOR


def format_offset(timestamp): # "+03:00", "-05:30", "+00:00"
    offset = timestamp.utcoffset()
    total_minutes = int(offset.total_seconds()) // 60
    sign = '-' if total_minutes < 0 else '+'
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def format_timestamp(timestamp, date_format=DEFAULT_DATE_FORMAT):
    return f"{timestamp.strftime(date_format)} {format_offset(timestamp)}"


def format_person(person, date_format=DEFAULT_DATE_FORMAT):
    timestamp_type = 'original' if person.role == AUTHOR else 'commit'
    return f"{person.name} {person.email} {timestamp_type} timestamp: {format_timestamp(person.timestamp, date_format)}"


def commit_lines(commit, date_format=DEFAULT_DATE_FORMAT): # Body of `cat-file` for a commit
    lines = [f"tree: {commit.tree_hash}"]
    if commit.parent_ids:
        lines.append(f"parents: {' | '.join(commit.parent_ids)}")
    lines.append(f"author: {format_person(commit.author, date_format)}")
    lines.append(f"committer: {format_person(commit.committer, date_format)}")
    lines.append("commit message:")
    if commit.message:
        lines.extend(commit.message.split('\n'))
    return lines


def tree_lines(entries):
    return [f"{entry.mode} {entry.hash} {entry.name}" for entry in entries]


def log_entry_lines(entry, date_format=DEFAULT_DATE_FORMAT, merged_marker=DEFAULT_MERGED_MARKER):
    marker = merged_marker if entry.merged else ''
    lines = [f"Commit: {entry.id}{marker}", format_person(entry.committer, date_format)]
    # An empty message still takes its own (blank) line before the separator
    lines.extend(entry.message.split('\n'))
    lines.append('')
    return lines
