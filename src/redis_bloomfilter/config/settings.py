import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from redis_bloomfilter.errors import InvalidArgument
from redis_bloomfilter.hashing.engines import HashEngine
from redis_bloomfilter.params.calculator import (
    optimal_bit_count,
    optimal_hash_count,
)

DEFAULT_ERROR_RATE = 0.01
DEFAULT_KEY_NAME = "bloomfilter"
DEFAULT_HASH_ENGINE = HashEngine.MD5
DEFAULT_REDIS_URL = "redis://localhost:6379/0"


def _env_timeout() -> Optional[float]:
    raw = os.environ.get("REDIS_SOCKET_TIMEOUT")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise InvalidArgument(
            f"REDIS_SOCKET_TIMEOUT must be a number, got {raw!r}"
        ) from None


@dataclass(frozen=True)
class FilterConfig:
    capacity: int
    error_rate: float
    bit_count: int
    hash_count: int
    key_name: str = DEFAULT_KEY_NAME
    hash_engine: HashEngine = DEFAULT_HASH_ENGINE

    @classmethod
    def create(
        cls,
        capacity: Optional[int],
        error_rate: Optional[float] = DEFAULT_ERROR_RATE,
        key_name: str = DEFAULT_KEY_NAME,
        hash_engine: Union[HashEngine, str] = DEFAULT_HASH_ENGINE,
    ) -> "FilterConfig":
        if capacity is None or error_rate is None:
            raise InvalidArgument("capacity and error_rate cannot be None")
        if not key_name:
            raise InvalidArgument("key_name cannot be empty")
        bit_count = optimal_bit_count(capacity, error_rate)
        return cls(
            capacity=capacity,
            error_rate=error_rate,
            bit_count=bit_count,
            hash_count=optimal_hash_count(capacity, bit_count),
            key_name=key_name,
            hash_engine=HashEngine.parse(hash_engine),
        )

    def as_options(self) -> Dict[str, Any]:
        return {
            "size": self.capacity,
            "error_rate": self.error_rate,
            "key_name": self.key_name,
            "hash_engine": self.hash_engine.value,
            "bits": self.bit_count,
            "hashes": self.hash_count,
        }


@dataclass
class StoreSettings:
    url: str = field(
        default_factory=lambda: os.environ.get("REDIS_URL", DEFAULT_REDIS_URL)
    )
    socket_timeout: Optional[float] = field(default_factory=_env_timeout)


def connect(settings: Optional[StoreSettings] = None):
    import redis

    settings = settings or StoreSettings()
    return redis.Redis.from_url(
        settings.url, socket_timeout=settings.socket_timeout
    )
