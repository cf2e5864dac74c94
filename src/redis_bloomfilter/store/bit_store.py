"""Single-bit access to a Redis bitmap with pipelined batches."""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List

logger = logging.getLogger(__name__)

GET = "get"
SET = "set"


@dataclass(frozen=True)
class BitOp:
    kind: str
    key: str
    index: int
    value: int = 0

    @classmethod
    def get(cls, key: str, index: int) -> "BitOp":
        return cls(GET, key, index)

    @classmethod
    def set(cls, key: str, index: int, value: int = 1) -> "BitOp":
        return cls(SET, key, index, 1 if value else 0)


class BitVectorStore:
    """Adapter over a ``redis.Redis`` compatible client.

    Reading a bit of a missing key returns 0; the bitmap is created by the
    first SETBIT. A batch is sent as one non-transactional pipeline: its
    operations do not see each other's writes and nothing is rolled back if
    the round trip fails part way. Client errors are not caught here.
    """

    def __init__(self, client: Any) -> None:
        self.client = client

    def get_bit(self, key: str, index: int) -> int:
        return int(self.client.getbit(key, index))

    def set_bit(self, key: str, index: int, value: int = 1) -> int:
        return int(self.client.setbit(key, index, 1 if value else 0))

    def batch(self, ops: Iterable[BitOp]) -> List[int]:
        ops = list(ops)
        if not ops:
            return []
        pipe = self.client.pipeline(transaction=False)
        for op in ops:
            if op.kind == GET:
                pipe.getbit(op.key, op.index)
            elif op.kind == SET:
                pipe.setbit(op.key, op.index, op.value)
            else:
                raise ValueError(f"unsupported bit operation: {op.kind!r}")
        logger.debug("Sending batch of %d bit operations", len(ops))
        return [int(r) for r in pipe.execute()]

    def get_bits(self, key: str, indices: Iterable[int]) -> List[int]:
        return self.batch(BitOp.get(key, i) for i in indices)

    def set_bits(
        self, key: str, indices: Iterable[int], value: int = 1
    ) -> List[int]:
        return self.batch(BitOp.set(key, i, value) for i in indices)

    def delete_key(self, key: str) -> int:
        return int(self.client.delete(key))
