import os
from dataclasses import dataclass

__all__ = ["StoreConfig"]

ENV_PREFIX = "GITTREE_"


@dataclass(frozen=True, kw_only=True)
class StoreConfig:
    encoding: str = "utf-8"
    # surrogateescape lets undecodable name bytes survive a parse/dump cycle
    errors: str = "surrogateescape"
    compress_level: int = -1

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        kwargs = {}
        if (encoding := environ.get(f"{ENV_PREFIX}ENCODING")) is not None:
            kwargs["encoding"] = encoding
        if (errors := environ.get(f"{ENV_PREFIX}ERRORS")) is not None:
            kwargs["errors"] = errors
        if (level := environ.get(f"{ENV_PREFIX}COMPRESS_LEVEL")) is not None:
            kwargs["compress_level"] = int(level)
        return cls(**kwargs)

    def encode_name(self, name: str) -> bytes:
        return name.encode(self.encoding, self.errors)

    def decode_name(self, raw_name: bytes) -> str:
        return raw_name.decode(self.encoding, self.errors)
