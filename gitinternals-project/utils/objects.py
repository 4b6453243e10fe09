# What it does: Locates loose objects on disk and reads them back through a streaming, token-oriented decompressor
# How it does: `object_path` maps a hash to objects/<2 chars>/<38 chars>. `ObjectStream` inflates the file chunk by chunk and hands out
# delimiter-terminated tokens or fixed-size raw fields. `open_object` scopes one file handle and one stream to a single object and parses its header
# What data structure it uses: Byte buffer (bytearray) refilled from a zlib decompressor, namedtuple for the header

import logging
import os
import re
import zlib
from collections import namedtuple
from contextlib import contextmanager

from .errors import MalformedField, ObjectKindMismatch, ObjectNotFound, TruncatedStream, UnknownObjectKind

logger = logging.getLogger(__name__)

BLOB = 'blob'
TREE = 'tree'
COMMIT = 'commit'
OBJECT_KINDS = (BLOB, TREE, COMMIT)

SPACE = b' '
NEWLINE = b'\n'
NUL = b'\0'

RAW_HASH_LENGTH = 20
_HASH_PATTERN = re.compile(r'[0-9a-f]{40}')

ObjectHeader = namedtuple('ObjectHeader', ['kind', 'length'])


def validate_hash(sha, what='object hash'): # Returns the lower-cased hash or raises MalformedField
    if not isinstance(sha, str) or not _HASH_PATTERN.fullmatch(sha.lower()):
        raise MalformedField(f"Invalid {what}: '{sha}'")
    return sha.lower()


def object_path(git_dir, sha): # Maps a 40-char hash to <git_dir>/objects/xx/yyyy...
    sha = validate_hash(sha)
    path = os.path.join(git_dir, 'objects', sha[:2], sha[2:])
    if not os.path.isfile(path):
        raise ObjectNotFound(sha, path)
    return path


class ObjectStream:
    """
    Reads the decompressed content of one loose object.

    The compressed file is inflated incrementally, so the decompressed size
    never has to be known up front; the only end marker is the end of the
    zlib stream. Instances are single-use: one stream per object.
    """

    def __init__(self, raw, chunk_size=8192):
        self._raw = raw
        self._chunk_size = chunk_size
        self._inflater = zlib.decompressobj()
        self._buffer = bytearray()
        self._pos = 0
        self._exhausted = False

    def _available(self):
        return len(self._buffer) - self._pos

    def _fill(self): # Inflates more data into the buffer, False once the zlib stream has ended
        while not self._exhausted:
            if self._inflater.eof:
                self._exhausted = True
                break

            compressed = self._raw.read(self._chunk_size)
            if not compressed:
                raise TruncatedStream("Compressed data ended before the end of the zlib stream")
            try:
                data = self._inflater.decompress(compressed)
            except zlib.error as e:
                raise MalformedField(f"Corrupt compressed data: {e}") from e

            if data:
                # Drop what has already been consumed before growing the buffer
                del self._buffer[:self._pos]
                self._pos = 0
                self._buffer += data
                return True
        return False

    def read_token(self, delimiter, eof_ok=False):
        """
        Returns the text up to (not including) `delimiter` and consumes the delimiter.
        Raises TruncatedStream if the stream ends first, unless `eof_ok` is set,
        in which case whatever is left is returned.
        """
        token = bytearray()
        while True:
            index = self._buffer.find(delimiter, self._pos)
            if index != -1:
                token += self._buffer[self._pos:index]
                self._pos = index + len(delimiter)
                return _decode(token)

            token += self._buffer[self._pos:]
            self._pos = len(self._buffer)
            if not self._fill():
                if eof_ok:
                    return _decode(token)
                raise TruncatedStream(f"Stream ended before delimiter {bytes(delimiter)!r} (read {bytes(token[:40])!r})")

    def read_fixed(self, n): # Exactly n raw bytes, no delimiter
        while self._available() < n:
            if not self._fill():
                raise TruncatedStream(f"Expected {n} raw bytes, only {self._available()} left")
        data = bytes(self._buffer[self._pos:self._pos + n])
        self._pos += n
        return data

    def has_more(self):
        return self._available() > 0 or self._fill()

    def iter_chunks(self): # Yields everything left in the stream as raw byte chunks
        if self._available():
            chunk = bytes(self._buffer[self._pos:])
            self._pos = len(self._buffer)
            yield chunk
        while self._fill():
            chunk = bytes(self._buffer[self._pos:])
            self._pos = len(self._buffer)
            yield chunk


def _decode(token):
    return bytes(token).decode('utf-8', errors='replace')


def read_header(stream): # Parses the "<kind> <length>\0" prologue
    kind = stream.read_token(SPACE)
    if kind not in OBJECT_KINDS:
        raise UnknownObjectKind(kind)

    length = stream.read_token(NUL)
    if not (length.isascii() and length.isdigit()):
        raise MalformedField(f"Invalid object length: '{length}'")
    return ObjectHeader(kind, int(length))


@contextmanager
def open_object(git_dir, sha, expected=None):
    """
    Opens one loose object and yields (header, stream).

    The file handle lives exactly as long as the `with` block. If `expected`
    is given, the header kind must match it.
    """
    path = object_path(git_dir, sha)
    logger.debug("Opening object %s at %s", sha, path)
    try:
        raw = open(path, 'rb')
    except FileNotFoundError:
        raise ObjectNotFound(sha, path) from None

    with raw:
        stream = ObjectStream(raw)
        header = read_header(stream)
        if expected is not None and header.kind != expected:
            raise ObjectKindMismatch(sha, expected, header.kind)
        yield header, stream


def read_object_kind(git_dir, sha): # Only the header is inflated
    with open_object(git_dir, sha) as (header, _):
        return header.kind
