import os
import sys

import pytest

# Add src to path so tests can run without installing package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

import fakeredis

from redis_bloomfilter import BitVectorStore, RedisBloomFilter


@pytest.fixture
def redis_client():
    """In-process Redis with its own server per test."""
    client = fakeredis.FakeRedis(server=fakeredis.FakeServer())
    yield client
    client.flushall()


@pytest.fixture
def store(redis_client):
    return BitVectorStore(redis_client)


@pytest.fixture
def make_filter(redis_client):
    """Factory for filters that share the test's Redis server."""
    def _make(capacity=1000, **kwargs):
        kwargs.setdefault("store", redis_client)
        return RedisBloomFilter(capacity, **kwargs)
    return _make
