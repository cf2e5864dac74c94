from redis_bloomfilter.hashing.engines import (
    ENGINES,
    HashEngine,
    IndexSequence,
    index_for,
    indexes_for,
)

__all__ = ["ENGINES", "HashEngine", "IndexSequence", "index_for", "indexes_for"]
