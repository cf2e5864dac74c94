from redis_bloomfilter.params.calculator import (
    optimal_bit_count,
    optimal_hash_count,
)

__all__ = ["optimal_bit_count", "optimal_hash_count"]
