try:
    from rich.console import Console
    RICH_AVAIL = True
    console = Console()
except ImportError:
    RICH_AVAIL = False
    console = None

__version__ = "0.0.1"


def version() -> str:
    return f"redis-bloomfilter version {__version__}"


from redis_bloomfilter.errors import BloomFilterError, InvalidArgument
from redis_bloomfilter.params import optimal_bit_count, optimal_hash_count
from redis_bloomfilter.hashing import HashEngine, IndexSequence, indexes_for
from redis_bloomfilter.store import BitOp, BitVectorStore
from redis_bloomfilter.config import FilterConfig, StoreSettings, connect
from redis_bloomfilter.filter import RedisBloomFilter

__all__ = [
    'RICH_AVAIL',
    'console',
    '__version__',
    'version',
    'BloomFilterError',
    'InvalidArgument',
    'optimal_bit_count',
    'optimal_hash_count',
    'HashEngine',
    'IndexSequence',
    'indexes_for',
    'BitOp',
    'BitVectorStore',
    'FilterConfig',
    'StoreSettings',
    'connect',
    'RedisBloomFilter',
]
