# The command: gitinternals cat-file <hash>
# What it does: Decodes a single object and prints it according to its kind (*COMMIT*, *TREE* or *BLOB*)
# How it does: Opens the object once, reads its header and dispatches the same stream to the commit parser, the tree parser or the blob reader
# What data structure it uses: namedtuples from utils/records.py (Commit, TreeEntry), raw byte chunks for blobs

import codecs
import sys
from utils import repository, objects, records, display, config
from utils.errors import GitInternalsError

def run(args):
    git_dir = repository.locate_git_dir(getattr(args, 'git_dir', None))
    if not git_dir:
        print("fatal: not a git repository", file=sys.stderr)
        sys.exit(1)

    sha = repository.resolve_revision(git_dir, args.object)
    if not sha:
        print(f"fatal: Not a valid object name {args.object}", file=sys.stderr)
        sys.exit(1)

    date_format, _ = config.get_display_settings()
    try:
        cat_file(git_dir, sha, date_format)
    except GitInternalsError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

def cat_file(git_dir, sha, date_format=config.DEFAULT_DATE_FORMAT, out=None): # Prints one object, whatever its kind
    out = out or sys.stdout
    with objects.open_object(git_dir, sha) as (header, stream):
        print(f"*{header.kind.upper()}*", file=out)

        if header.kind == objects.COMMIT:
            commit = records.parse_commit(stream, objects.validate_hash(sha))
            for line in display.commit_lines(commit, date_format):
                print(line, file=out)
        elif header.kind == objects.TREE:
            for line in display.tree_lines(records.parse_tree(stream)):
                print(line, file=out)
        else:
            # Blob bytes are printed verbatim; the decoder copes with characters split across chunks
            decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')
            for chunk in records.iter_blob(stream):
                out.write(decoder.decode(chunk))
            out.write(decoder.decode(b'', final=True))
