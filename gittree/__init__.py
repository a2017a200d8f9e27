from gittree.config import StoreConfig
from gittree.exceptions import (
    DetachedObject,
    EmptyPath,
    GitTreeError,
    InvalidArgument,
    MalformedObject,
    MalformedTree,
    NotABlobOrTree,
    NotATree,
    ObjectNotFound,
)
from gittree.models import Blob, GitObject, ObjectType, Reference, Tree, TreeEntry
from gittree.store import LooseObjectStore, ObjectStore

__all__ = [
    "StoreConfig",
    "DetachedObject",
    "EmptyPath",
    "GitTreeError",
    "InvalidArgument",
    "MalformedObject",
    "MalformedTree",
    "NotABlobOrTree",
    "NotATree",
    "ObjectNotFound",
    "Blob",
    "GitObject",
    "ObjectType",
    "Reference",
    "Tree",
    "TreeEntry",
    "LooseObjectStore",
    "ObjectStore",
]
