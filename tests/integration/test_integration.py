import pytest

from redis_bloomfilter import RedisBloomFilter

# ============================================================================
# FALSE POSITIVE RATE
# ============================================================================


@pytest.mark.parametrize("engine", ["md5", "sha1", "crc32"])
def test_false_positive_rate_near_target(redis_client, engine) -> None:
    """1000 members at p=0.01, 10,000 non-member probes: rate within 3x."""
    bf = RedisBloomFilter(
        1000, error_rate=0.01, key_name=f"fp:{engine}",
        hash_engine=engine, store=redis_client,
    )
    for i in range(1000):
        bf.insert(f"member-{i}")

    for i in range(1000):
        assert bf.include(f"member-{i}")

    probes = 10000
    positives = sum(bf.include(f"stranger-{i}") for i in range(probes))
    rate = positives / probes
    assert 0.01 / 3 <= rate <= 0.01 * 3


def test_independent_clients_share_one_bitmap(redis_client) -> None:
    """Two filters on the same key behave as one set."""
    producer = RedisBloomFilter(5000, key_name="events", store=redis_client)
    consumer = RedisBloomFilter(5000, key_name="events", store=redis_client)

    seen = [f"event:{i}" for i in range(200)]
    for e in seen:
        producer.insert(e)

    assert consumer.include(*seen)
    assert not consumer.include(*seen, "event:never")

    consumer.clear()
    assert not any(producer.include(e) for e in seen)
