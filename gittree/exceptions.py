__all__ = [
    "GitTreeError",
    "InvalidArgument",
    "EmptyPath",
    "NotATree",
    "NotABlobOrTree",
    "MalformedTree",
    "MalformedObject",
    "ObjectNotFound",
    "DetachedObject",
]


class GitTreeError(Exception):
    pass


class InvalidArgument(GitTreeError, TypeError):
    """Entry is neither a Reference nor a tree/blob object."""


class EmptyPath(GitTreeError, ValueError):
    pass


class NotATree(GitTreeError, TypeError):
    pass


class NotABlobOrTree(GitTreeError, TypeError):
    pass


class MalformedTree(GitTreeError, ValueError):
    pass


class MalformedObject(GitTreeError, ValueError):
    pass


class ObjectNotFound(GitTreeError, LookupError):
    pass


class DetachedObject(GitTreeError):
    """Raised when an object must be persisted but has no store."""
