from redis_bloomfilter.filter.bloom_filter import RedisBloomFilter

__all__ = ["RedisBloomFilter"]
