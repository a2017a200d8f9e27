from gittree.exceptions import DetachedObject
from gittree.models.base import ObjectType

__all__ = ["Reference"]


class Reference:
    """Lazy handle to an object already in a store.

    Only ``resolve()`` reads from the store; everything else answers from the
    id and mode the reference was created with until then.
    """

    def __init__(self, *, store=None, id: str, mode: int):
        self._store = store
        self._id = id
        self._mode = mode
        self._object = None

    def __repr__(self):
        state = "resolved" if self.resolved else "unresolved"
        return f"<Reference {self.id} mode={self.mode:o} {state}>"

    @property
    def store(self):
        return self._store

    @store.setter
    def store(self, value):
        self._store = value
        if self._object is not None:
            self._object.store = value

    @property
    def type(self) -> ObjectType:
        if self._object is not None:
            return self._object.type
        return ObjectType.from_mode(self._mode)

    @property
    def resolved(self) -> bool:
        return self._object is not None

    @property
    def object(self):
        return self.resolve()

    def resolve(self):
        if self._object is None:
            if self._store is None:
                raise DetachedObject(f"{self!r} has no store to resolve from")
            self._object = self._store.get(self._id, mode=self._mode)
        return self._object

    @property
    def id(self) -> str:
        return self._id if self._object is None else self._object.id

    @property
    def mode(self) -> int:
        return self._mode if self._object is None else self._object.mode

    @property
    def modified(self) -> bool:
        return self._object is not None and self._object.modified

    def save(self) -> str:
        if self._object is None:
            return self._id
        return self._object.save()
