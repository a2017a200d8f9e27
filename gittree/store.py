import logging
import os
import pathlib
import tempfile
import zlib

from gittree.config import StoreConfig
from gittree.exceptions import MalformedObject, ObjectNotFound
from gittree.models import Blob, ObjectType, Tree
from gittree.utils import compress, create_hash, decompress

__all__ = ["ObjectStore", "LooseObjectStore"]

logger = logging.getLogger(__name__)

NULL_BYTE = b"\x00"

OBJECT_CLASSES = {
    ObjectType.BLOB: Blob,
    ObjectType.TREE: Tree,
}


class ObjectStore:
    """Content addressable store keeping framed objects in memory.

    Objects are framed the way git frames them (``b"<type> <size>\\0"``
    followed by the body) and addressed by the SHA-1 of the framed bytes.
    """

    def __init__(self, config: StoreConfig | None = None):
        self.config = config or StoreConfig()
        self._objects: dict[str, bytes] = {}

    def __contains__(self, hash_value: str) -> bool:
        return self.contains(hash_value)

    def encode_name(self, name: str) -> bytes:
        return self.config.encode_name(name)

    def decode_name(self, raw_name: bytes) -> str:
        return self.config.decode_name(raw_name)

    @staticmethod
    def frame(object_type: ObjectType, body: bytes) -> bytes:
        return f"{object_type} {len(body)}".encode() + NULL_BYTE + body

    def put(self, obj) -> str:
        framed = self.frame(obj.type, obj.dump())
        hash_value = create_hash(framed)
        if not self.contains(hash_value):
            self.write(hash_value, framed)
            logger.debug("Stored %s %s (%d bytes)", obj.type, hash_value, len(framed))
        obj.id = hash_value
        return hash_value

    def get(self, hash_value: str, *, mode: int | None = None):
        framed = self.read(hash_value)
        header, _, body = framed.partition(NULL_BYTE)
        try:
            type_name, size = header.decode("ascii").split(" ")
            object_type = ObjectType(type_name)
            size = int(size)
        except ValueError as exc:
            raise MalformedObject(f"Invalid header {header!r} in {hash_value}") from exc
        if size != len(body):
            raise MalformedObject(
                f"Object {hash_value} declares {size} bytes but holds {len(body)}"
            )
        logger.debug("Loaded %s %s", object_type, hash_value)
        object_class = OBJECT_CLASSES[object_type]
        return object_class(body, store=self, id=hash_value, mode=mode)

    def contains(self, hash_value: str) -> bool:
        return hash_value in self._objects

    def read(self, hash_value: str) -> bytes:
        try:
            return self._objects[hash_value]
        except KeyError:
            raise ObjectNotFound(f"No object {hash_value}") from None

    def write(self, hash_value: str, framed: bytes) -> None:
        self._objects[hash_value] = framed


class LooseObjectStore(ObjectStore):
    """Keeps objects on disk in git's loose object layout."""

    def __init__(self, git_folder: os.PathLike = ".git", config: StoreConfig | None = None):
        super().__init__(config)
        self.git_folder = pathlib.Path(git_folder)
        self.objects_folder = self.git_folder / "objects"

    def init(self) -> None:
        self.objects_folder.mkdir(exist_ok=True, parents=True)
        logger.debug("Initialized object store in %s", self.git_folder)

    def _object_path(self, hash_value: str) -> pathlib.Path:
        return self.objects_folder / hash_value[:2] / hash_value[2:]

    def contains(self, hash_value: str) -> bool:
        return self._object_path(hash_value).exists()

    def read(self, hash_value: str) -> bytes:
        path = self._object_path(hash_value)
        try:
            with path.open("rb") as f:
                return decompress(f.read())
        except FileNotFoundError:
            raise ObjectNotFound(f"No object {hash_value} in {self.objects_folder}") from None
        except zlib.error as exc:
            raise MalformedObject(f"Corrupt loose object {hash_value}: {exc}") from exc

    def write(self, hash_value: str, framed: bytes) -> None:
        path = self._object_path(hash_value)
        path.parent.mkdir(parents=True, exist_ok=True)
        # readers only ever see a complete file at the final path
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix="tmp_obj_")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(compress(framed, level=self.config.compress_level))
            os.replace(tmp_name, path)
        except BaseException:
            pathlib.Path(tmp_name).unlink(missing_ok=True)
            raise
