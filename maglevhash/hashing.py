from typing import Union
from zlib import crc32 as _crc32
from xxhash import xxh32_intdigest
from maglevhash import const
from maglevhash.types import Key


def to_bytes(key: Union[Key, str]) -> Key:
    """str keys are utf-8 encoded, other non byte-like keys are rejected"""

    if isinstance(key, str):
        return key.encode()

    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)

    raise TypeError(f"key must be bytes or str, got {type(key).__name__}")


def crc32(key: Key) -> int:
    """ieee crc32, the default key hash"""

    return _crc32(key) & const.MAX_UINT_32


def xxh32(key: Key) -> int:
    """xxhash32, unseeded"""

    return xxh32_intdigest(key)
