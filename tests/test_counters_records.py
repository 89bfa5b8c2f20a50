import pytest

from tally.counters import AggregateCounters
from tally.errors import AlreadyVoted, CounterUnderflow
from tally.records import RecordStore


class TestAggregateCounters:

    def test_starts_at_zero(self):
        counters = AggregateCounters(3)
        assert counters.as_list() == [0, 0, 0]
        assert counters.total() == 0
        assert len(counters) == 3

    def test_increment_and_decrement(self):
        counters = AggregateCounters(2)
        assert counters.increment(1) == 1
        assert counters.increment(1) == 2
        assert counters.decrement(1) == 1
        assert counters[1] == 1
        assert counters.total() == 1

    def test_decrement_below_zero_raises(self):
        counters = AggregateCounters(2)
        with pytest.raises(CounterUnderflow):
            counters.decrement(0)
        assert counters.as_list() == [0, 0]

    def test_out_of_range_index(self):
        counters = AggregateCounters(2)
        with pytest.raises(IndexError):
            counters.increment(2)
        with pytest.raises(IndexError):
            counters.increment(-1)

    def test_as_list_is_a_copy(self):
        counters = AggregateCounters(1)
        snapshot = counters.as_list()
        snapshot[0] = 99
        assert counters[0] == 0


class TestRecordStore:

    def test_insert_once_rejects_second_insert(self):
        store = RecordStore()
        store.insert_once("alice", 1)
        with pytest.raises(AlreadyVoted):
            store.insert_once("alice", 2)
        assert store.get("alice") == 1
        assert len(store) == 1

    def test_upsert_returns_previous(self):
        store = RecordStore()
        assert store.upsert("alice", "a1") is None
        assert store.upsert("alice", "a2") == "a1"
        assert store.get("alice") == "a2"
        assert len(store) == 1

    def test_upsert_keeps_original_slot(self):
        store = RecordStore()
        store.upsert("alice", "a1")
        store.upsert("bob", "b1")
        store.upsert("alice", "a2")
        assert list(store.values()) == ["a2", "b1"]

    def test_last(self):
        store = RecordStore()
        for name in ["a", "b", "c"]:
            store.upsert(name, name.upper())
        assert store.last(2) == ["B", "C"]
        assert store.last(10) == ["A", "B", "C"]
        assert store.last(0) == []

    def test_missing_identity(self):
        store = RecordStore()
        assert store.get("nobody") is None
        assert "nobody" not in store
