from unittest.mock import MagicMock

import pytest
import redis

from redis_bloomfilter.store.bit_store import BitOp, BitVectorStore


class TestBitVectorStore:
    def test_missing_key_reads_zero(self, store) -> None:
        assert store.get_bit("nothing", 0) == 0
        assert store.get_bit("nothing", 123456) == 0

    def test_set_bit_creates_key(self, store, redis_client) -> None:
        assert redis_client.exists("bits") == 0
        assert store.set_bit("bits", 10) == 0
        assert redis_client.exists("bits") == 1
        assert store.get_bit("bits", 10) == 1

    def test_set_bit_returns_previous(self, store) -> None:
        store.set_bit("bits", 3)
        assert store.set_bit("bits", 3) == 1
        assert store.set_bit("bits", 3, 0) == 1
        assert store.get_bit("bits", 3) == 0

    def test_batch_results_in_submission_order(self, store) -> None:
        store.set_bit("bits", 1)
        store.set_bit("bits", 4)
        results = store.batch(
            [BitOp.get("bits", 0), BitOp.get("bits", 1), BitOp.get("bits", 4)]
        )
        assert results == [0, 1, 1]

    def test_set_bits_and_get_bits(self, store) -> None:
        store.set_bits("bits", [7, 8, 100])
        assert store.get_bits("bits", [7, 8, 9, 100]) == [1, 1, 0, 1]

    def test_backing_string_covers_highest_bit(self, store, redis_client) -> None:
        store.set_bit("bits", 9585)
        assert redis_client.strlen("bits") >= (9586 + 7) // 8

    def test_empty_batch_skips_round_trip(self) -> None:
        client = MagicMock()
        assert BitVectorStore(client).batch([]) == []
        client.pipeline.assert_not_called()

    def test_batch_is_not_transactional(self) -> None:
        client = MagicMock()
        client.pipeline.return_value.execute.return_value = [0, 0]
        BitVectorStore(client).set_bits("bits", [1, 2])
        client.pipeline.assert_called_once_with(transaction=False)

    def test_unsupported_op(self, store) -> None:
        with pytest.raises(ValueError):
            store.batch([BitOp("flip", "bits", 1)])

    def test_delete_key(self, store) -> None:
        store.set_bit("bits", 1)
        assert store.delete_key("bits") == 1
        assert store.delete_key("bits") == 0
        assert store.get_bit("bits", 1) == 0

    def test_set_op_normalizes_value(self) -> None:
        assert BitOp.set("k", 1, True).value == 1
        assert BitOp.set("k", 1, 0).value == 0

    def test_transport_errors_propagate(self) -> None:
        client = MagicMock()
        client.getbit.side_effect = redis.exceptions.ConnectionError("down")
        client.pipeline.return_value.execute.side_effect = (
            redis.exceptions.TimeoutError("slow")
        )
        store = BitVectorStore(client)
        with pytest.raises(redis.exceptions.ConnectionError):
            store.get_bit("bits", 0)
        with pytest.raises(redis.exceptions.TimeoutError):
            store.get_bits("bits", [0, 1])
