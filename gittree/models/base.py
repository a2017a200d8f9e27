from enum import StrEnum, auto

from gittree.exceptions import DetachedObject

__all__ = ["ObjectType", "GitObject"]


class ObjectType(StrEnum):
    BLOB = auto()
    TREE = auto()

    @property
    def mode(self) -> int:
        match self:
            case ObjectType.BLOB:
                return 0o100644
            case ObjectType.TREE:
                return 0o40000
            case _:
                raise ValueError(f"Invalid ObjectType: {self}")

    @classmethod
    def from_mode(cls, mode: int) -> "ObjectType":
        return cls.TREE if mode == cls.TREE.mode else cls.BLOB


class GitObject:
    """Base of the objects a store can hold.

    An object is dirty from construction until an ``id`` is assigned to it,
    which the store does right after persisting its bytes.
    """

    type: ObjectType

    def __init__(self, *, store=None, id: str | None = None, mode: int | None = None):
        self.store = store
        self._id = id
        self._mode = self.type.mode if mode is None else mode
        self._dirty = id is None

    def __repr__(self):
        return f"<{type(self).__name__} {self._id or 'unsaved'} mode={self._mode:o}>"

    @property
    def store(self):
        return self._store

    @store.setter
    def store(self, value):
        self._store = value

    @property
    def id(self) -> str | None:
        return self._id

    @id.setter
    def id(self, value: str):
        self._dirty = False
        self._id = value

    @property
    def mode(self) -> int:
        return self._mode

    @mode.setter
    def mode(self, value: int):
        if value != self._mode:
            self._mode = value
            self._dirty = True

    @property
    def modified(self) -> bool:
        return self._dirty

    def dump(self) -> bytes:
        raise NotImplementedError

    def save(self) -> str | None:
        if self.modified:
            if self.store is None:
                raise DetachedObject(f"{self!r} has no store to be saved into")
            self.store.put(self)
        return self.id
