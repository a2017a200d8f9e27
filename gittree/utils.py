import binascii
import hashlib
import zlib

__all__ = [
    "normalize_path",
    "create_hash",
    "compress",
    "decompress",
    "to_raw_id",
    "to_hex_id",
]

RAW_ID_SIZE = 20


def normalize_path(path) -> list[str]:
    """Split a path into segments.

    Lists and tuples are taken as already split; anything else is turned into
    a string, stripped of one leading ``/`` and split on ``/``.
    """
    if isinstance(path, (list, tuple)):
        return list(path)
    path = str(path)
    if path.startswith("/"):
        path = path[1:]
    segments = path.split("/")
    while segments and not segments[-1]:
        segments.pop()
    return segments


def create_hash(data: str | bytes, *, hasher=hashlib.sha1) -> str:
    if isinstance(data, str):
        data = data.encode()
    return hasher(data).hexdigest()


def compress(data: bytes, *, level: int = -1) -> bytes:
    return zlib.compress(data, level)


def decompress(data: bytes) -> bytes:
    return zlib.decompress(data)


def to_raw_id(hex_id: str) -> bytes:
    return binascii.unhexlify(hex_id)


def to_hex_id(raw_id: bytes) -> str:
    return binascii.hexlify(raw_id).decode()
