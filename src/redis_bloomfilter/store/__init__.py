from redis_bloomfilter.store.bit_store import BitOp, BitVectorStore

__all__ = ["BitOp", "BitVectorStore"]
