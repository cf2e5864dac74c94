"""Bit index derivation for bloom filter elements.

Each round ``i`` hashes the string ``"<i>-<element>"`` with the configured
engine, reads the whole digest as an unsigned integer and reduces it modulo
the bit count. The engine must stay the same for the lifetime of a key:
indices produced by different engines are unrelated.
"""

import hashlib
import zlib
from enum import Enum
from typing import Any, Callable, Dict, Iterator, Optional, Union

from redis_bloomfilter.errors import InvalidArgument


class HashEngine(Enum):
    MD5 = "md5"
    SHA1 = "sha1"
    CRC32 = "crc32"

    @classmethod
    def parse(cls, value: Union["HashEngine", str]) -> "HashEngine":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            names = ", ".join(e.value for e in cls)
            raise InvalidArgument(
                f"unknown hash engine {value!r} (expected one of: {names})"
            ) from None


def _md5(data: bytes) -> int:
    return int.from_bytes(hashlib.md5(data).digest(), "big")


def _sha1(data: bytes) -> int:
    return int.from_bytes(hashlib.sha1(data).digest(), "big")


def _crc32(data: bytes) -> int:
    return zlib.crc32(data) & 0xFFFFFFFF


ENGINES: Dict[HashEngine, Callable[[bytes], int]] = {
    HashEngine.MD5: _md5,
    HashEngine.SHA1: _sha1,
    HashEngine.CRC32: _crc32,
}


def serialize(element: Any) -> str:
    if isinstance(element, (bytes, bytearray)):
        return bytes(element).decode("utf-8", errors="surrogateescape")
    return str(element)


def index_for(
    element: Any, round_no: int, bit_count: int, engine: HashEngine
) -> int:
    data = f"{round_no}-{serialize(element)}".encode(
        "utf-8", errors="surrogateescape"
    )
    return ENGINES[engine](data) % bit_count


class IndexSequence:
    """The ``hash_count`` bit indices of one element, in round order.

    Indices are computed on iteration, so the sequence can be walked more
    than once and stopping early skips the remaining digests.
    """

    __slots__ = ("element", "hash_count", "bit_count", "engine")

    def __init__(
        self,
        element: Any,
        hash_count: int,
        bit_count: int,
        engine: HashEngine,
    ) -> None:
        self.element = serialize(element)
        self.hash_count = hash_count
        self.bit_count = bit_count
        self.engine = engine

    def __iter__(self) -> Iterator[int]:
        for i in range(self.hash_count):
            yield index_for(self.element, i, self.bit_count, self.engine)

    def __len__(self) -> int:
        return self.hash_count

    def __repr__(self) -> str:
        return (
            f"IndexSequence({self.element!r}, k={self.hash_count}, "
            f"m={self.bit_count}, engine={self.engine.value})"
        )


def indexes_for(
    element: Any,
    hash_count: int,
    bit_count: int,
    engine: Optional[Union[HashEngine, str]] = None,
) -> IndexSequence:
    engine = HashEngine.parse(
        engine if engine is not None else HashEngine.MD5
    )
    return IndexSequence(element, hash_count, bit_count, engine)
