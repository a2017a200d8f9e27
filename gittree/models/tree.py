import logging
import re
from typing import Iterator, Union

from gittree.config import StoreConfig
from gittree.exceptions import (
    EmptyPath,
    InvalidArgument,
    MalformedTree,
    NotABlobOrTree,
    NotATree,
)
from gittree.models.base import GitObject, ObjectType
from gittree.models.blob import Blob
from gittree.models.reference import Reference
from gittree.utils import normalize_path, to_hex_id, to_raw_id

__all__ = ["Tree", "TreeEntry"]

logger = logging.getLogger(__name__)

NULL_BYTE = b"\x00"

TreeEntry = Union["Tree", Blob, Reference]

ENTRY_PATTERN = re.compile(
    rb"""
        (?P<mode>[0-7]+)
        \x20
        (?P<name>[^\x00]+)
        \x00
        (?P<raw_id>.{20})
        """,
    re.VERBOSE | re.DOTALL,
)

# used for name encoding when a tree is not attached to a store
_DEFAULT_CODEC = StoreConfig()


class Tree(GitObject):
    """A directory of named entries.

    Entries are live objects (``Tree``/``Blob``) or ``Reference`` handles to
    objects still sitting in the store. A tree built from ``data`` starts out
    clean and holds only unresolved references.
    """

    type = ObjectType.TREE

    def __init__(self, data: bytes | None = None, **kwargs):
        self._children: dict[str, TreeEntry] = {}
        super().__init__(**kwargs)
        if data is not None:
            self._parse(data)
        self._dirty = self._id is None and data is None

    @GitObject.store.setter
    def store(self, value):
        self._store = value
        for child in self._children.values():
            if not isinstance(child, Reference) or child.resolved:
                child.store = value

    @property
    def _codec(self):
        return self.store if self.store is not None else _DEFAULT_CODEC

    @property
    def modified(self) -> bool:
        return self._dirty or any(
            (not isinstance(child, Reference) or child.resolved) and child.modified
            for child in self._children.values()
        )

    def dump(self) -> bytes:
        codec = self._codec
        entries = []
        for name, child in self._sorted_children():
            if not isinstance(child, Reference) or child.resolved:
                child.save()
            entries.append(
                f"{child.mode:o} ".encode()
                + codec.encode_name(name)
                + NULL_BYTE
                + to_raw_id(child.id)
            )
        return b"".join(entries)

    def empty(self) -> bool:
        return not self._children

    def size(self) -> int:
        return len(self._children)

    def exists(self, path) -> bool:
        return self.lookup(path) is not None

    def lookup(self, path) -> Union["Tree", TreeEntry, None]:
        path = normalize_path(path)
        if not path:
            return self
        name, *rest = path
        entry = self._children.get(name)
        if not rest or entry is None:
            return entry
        return self._subtree(name, entry).lookup(rest)

    def set(self, path, entry: TreeEntry) -> None:
        if not isinstance(entry, (Reference, GitObject)):
            raise InvalidArgument(f"Cannot store {entry!r} in a tree")
        path = normalize_path(path)
        if not path:
            raise EmptyPath("Cannot set an entry at an empty path")
        for segment in path:
            if not segment or "/" in segment or "\0" in segment:
                raise InvalidArgument(f"Invalid entry name {segment!r} in {path!r}")
        name, *rest = path
        if not rest:
            if entry.type not in (ObjectType.TREE, ObjectType.BLOB):
                raise NotABlobOrTree(f"{entry!r} is neither a blob nor a tree")
            entry.store = self.store
            self._dirty = True
            self._children[name] = entry
            return
        subtree = self._children.get(name)
        if subtree is None:
            subtree = self._children[name] = Tree(store=self.store)
            self._dirty = True
        self._subtree(name, subtree).set(rest, entry)

    def delete(self, path) -> TreeEntry | None:
        path = normalize_path(path)
        if not path:
            raise EmptyPath("Cannot delete an empty path")
        name, *rest = path
        if not rest:
            entry = self._children.pop(name, None)
            if entry is not None:
                self._dirty = True
            return entry
        subtree = self._children.get(name)
        if subtree is None:
            return None
        return self._subtree(name, subtree).delete(rest)

    def move(self, path, dest) -> None:
        self.set(dest, self.delete(path))

    def items(self) -> Iterator[tuple[str, TreeEntry]]:
        yield from self._sorted_children()

    def names(self) -> list[str]:
        return [name for name, _ in self._sorted_children()]

    def values(self) -> list[TreeEntry]:
        return [child for _, child in self._sorted_children()]

    children = values

    def __iter__(self):
        return self.items()

    def __len__(self):
        return self.size()

    def __contains__(self, path):
        return self.exists(path)

    def __getitem__(self, path):
        entry = self.lookup(path)
        if entry is None:
            raise KeyError(path)
        return entry

    def __setitem__(self, path, entry):
        self.set(path, entry)

    def __delitem__(self, path):
        if self.delete(path) is None:
            raise KeyError(path)

    @staticmethod
    def _subtree(name: str, entry: TreeEntry) -> "Tree":
        if entry.type != ObjectType.TREE:
            raise NotATree(f"{name!r} is a {entry.type}, not a tree")
        if isinstance(entry, Reference):
            return entry.resolve()
        return entry

    def _sorted_children(self) -> list[tuple[str, TreeEntry]]:
        codec = self._codec

        def sort_key(item):
            name, child = item
            suffix = b"/" if child.type == ObjectType.TREE else NULL_BYTE
            return codec.encode_name(name) + suffix

        return sorted(self._children.items(), key=sort_key)

    def _parse(self, data: bytes) -> None:
        codec = self._codec
        self._children.clear()
        offset = 0
        while offset < len(data):
            match = ENTRY_PATTERN.match(data, offset)
            if match is None:
                raise MalformedTree(
                    f"Invalid tree entry at offset {offset} of {len(data)} bytes"
                )
            name = codec.decode_name(match["name"])
            self._children[name] = Reference(
                store=self.store,
                id=to_hex_id(match["raw_id"]),
                mode=int(match["mode"], 8),
            )
            offset = match.end()
        logger.debug("Parsed %d tree entries for %s", len(self._children), self._id)
