# What it does: Defines the failures that can happen while reading the object store
# How it does: Every failure derives from GitInternalsError so commands can catch them in one place, print "fatal: ..." and exit
# What data structure it uses: A small class hierarchy (ObjectNotFound is also a FileNotFoundError, ObjectKindMismatch is also a TypeError)


class GitInternalsError(Exception):
    pass


class ObjectNotFound(GitInternalsError, FileNotFoundError): # The hash does not resolve to a file under objects/
    def __init__(self, sha, path=None):
        self.sha = sha
        self.path = path
        super().__init__(f"Object not found: {sha}")


class TruncatedStream(GitInternalsError): # End of stream reached before a delimiter or a fixed-size field
    pass


class UnknownObjectKind(GitInternalsError):
    def __init__(self, token):
        self.token = token
        super().__init__(f"Unknown object kind: '{token}'")


class MalformedField(GitInternalsError): # A hash, integer, offset or literal keyword did not parse
    pass


class ObjectKindMismatch(MalformedField, TypeError):
    def __init__(self, sha, expected, actual):
        self.sha = sha
        self.expected = expected
        self.actual = actual
        super().__init__(f"Object {sha} is a {actual}, not a {expected}")


class UnsupportedMerge(GitInternalsError): # Merges with more than two parents are not walked
    def __init__(self, sha, parent_count):
        self.sha = sha
        self.parent_count = parent_count
        super().__init__(f"Commit {sha} has {parent_count} parents; only two-parent merges are supported")
