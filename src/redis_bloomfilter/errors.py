"""Exception types raised by the bloom filter."""


class BloomFilterError(Exception):
    pass


class InvalidArgument(BloomFilterError, ValueError):
    """Raised when a filter is configured with a missing or invalid value."""
