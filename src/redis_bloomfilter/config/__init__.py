from redis_bloomfilter.config.settings import (
    DEFAULT_ERROR_RATE,
    DEFAULT_HASH_ENGINE,
    DEFAULT_KEY_NAME,
    DEFAULT_REDIS_URL,
    FilterConfig,
    StoreSettings,
    connect,
)

__all__ = [
    "DEFAULT_ERROR_RATE",
    "DEFAULT_HASH_ENGINE",
    "DEFAULT_KEY_NAME",
    "DEFAULT_REDIS_URL",
    "FilterConfig",
    "StoreSettings",
    "connect",
]
