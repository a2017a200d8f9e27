from gittree.models.base import GitObject, ObjectType

__all__ = ["Blob"]


class Blob(GitObject):
    type = ObjectType.BLOB

    def __init__(self, data: bytes = b"", **kwargs):
        super().__init__(**kwargs)
        self._data = data

    @property
    def data(self) -> bytes:
        return self._data

    @data.setter
    def data(self, value: bytes):
        if value != self._data:
            self._data = value
            self._dirty = True

    def dump(self) -> bytes:
        return self._data
