# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0
"""
Test RoundRobinPool growth, cyclic overwrite and reads.
"""

import logging

import pytest
from pydantic import ValidationError

from rrpool import (
    BackwardIndexer,
    DEFAULT_CAPACITY,
    EmptyPoolError,
    ForwardIndexer,
    PoolError,
    PoolStats,
    RoundRobinPool,
    make_pool_like,
)


@pytest.fixture
def pool() -> RoundRobinPool[int]:
    """Provide an empty pool with capacity 3."""
    return RoundRobinPool[int](capacity=3)


@pytest.fixture
def full_pool(pool: RoundRobinPool[int]) -> RoundRobinPool[int]:
    """Provide a capacity-3 pool holding [0, 1, 2]."""
    for value in range(3):
        pool.write(value)
    return pool


def test_default_capacity() -> None:
    pool = RoundRobinPool()
    assert pool.capacity == DEFAULT_CAPACITY
    assert len(pool) == 0


@pytest.mark.parametrize("capacity", [0, -3, "three"])
def test_invalid_capacity_rejected(capacity) -> None:
    with pytest.raises(ValidationError):
        RoundRobinPool(capacity)


def test_read_from_empty_pool_raises() -> None:
    with pytest.raises(EmptyPoolError, match="empty"):
        RoundRobinPool().read(ForwardIndexer())


def test_empty_pool_error_is_pool_error() -> None:
    assert issubclass(EmptyPoolError, PoolError)
    assert issubclass(PoolError, RuntimeError)


def test_empty_read_does_not_advance_indexer(pool: RoundRobinPool[int]) -> None:
    indexer = ForwardIndexer(5)
    with pytest.raises(EmptyPoolError):
        pool.read(indexer)
    assert indexer.peek() == 5


def test_growth_phase_appends(pool: RoundRobinPool[int]) -> None:
    indexer = ForwardIndexer(1)
    for count, value in enumerate([10, 20, 30], start=1):
        assert pool.is_growing
        pool.write(value, indexer)
        assert len(pool) == count
    assert pool.to_list() == [10, 20, 30]
    # Appends never consult the indexer
    assert indexer.peek() == 1
    assert pool.is_steady


def test_read_during_growth_uses_current_length() -> None:
    pool = RoundRobinPool[str](capacity=5)
    pool.write("a")
    pool.write("b")
    reader = ForwardIndexer()
    assert [pool.read(reader) for _ in range(5)] == ["a", "b", "a", "b", "a"]
    assert len(pool) == 2
    assert pool.is_growing


def test_reference_scenario(pool: RoundRobinPool[int]) -> None:
    for value in [0, 1, 2, 3]:
        pool.write(value)
    assert pool.to_list() == [3, 1, 2]

    reader = ForwardIndexer(0)
    assert [pool.read(reader) for _ in range(7)] == [3, 1, 2, 3, 1, 2, 3]


def test_steady_writes_follow_indexer(full_pool: RoundRobinPool[int]) -> None:
    writer = ForwardIndexer(0)
    full_pool.write(10, writer)
    assert full_pool.to_list() == [10, 1, 2]
    full_pool.write(11, writer)
    full_pool.write(12, writer)
    assert full_pool.to_list() == [10, 11, 12]
    full_pool.write(13, writer)
    assert full_pool.to_list() == [13, 11, 12]
    assert len(full_pool) == 3


def test_default_write_indexer_cycles_from_slot_zero() -> None:
    pool = RoundRobinPool[int](capacity=4)
    for value in range(8):
        pool.write(value)
    assert pool.to_list() == [4, 5, 6, 7]
    pool.write(8)
    assert pool.to_list() == [8, 5, 6, 7]


def test_default_write_indexer_is_per_pool() -> None:
    first = RoundRobinPool[int](capacity=2)
    second = RoundRobinPool[int](capacity=2)
    for pool in (first, second):
        pool.write(0)
        pool.write(1)
    first.write(2)
    first.write(3)
    second.write(9)
    assert first.to_list() == [2, 3]
    assert second.to_list() == [9, 1]


def test_backward_reads(full_pool: RoundRobinPool[int]) -> None:
    reader = BackwardIndexer(2)
    assert [full_pool.read(reader) for _ in range(3)] == [2, 1, 0]


def test_backward_default_read_wraps_modulo(full_pool: RoundRobinPool[int]) -> None:
    reader = BackwardIndexer()
    expected = [full_pool.to_list()[(2**64 - 1 - k) % 3] for k in range(6)]
    assert [full_pool.read(reader) for _ in range(6)] == expected


@pytest.mark.parametrize("slot", [0, 1, 2])
def test_write_then_read_round_trip(full_pool: RoundRobinPool[int], slot: int) -> None:
    full_pool.write(99, ForwardIndexer(slot))
    assert full_pool.read(ForwardIndexer(slot + 3 * 1000)) == 99


def test_capacity_one_always_overwrites_slot_zero() -> None:
    pool = RoundRobinPool[str](capacity=1)
    for value in "abc":
        pool.write(value, BackwardIndexer())
    assert pool.to_list() == ["c"]
    assert pool.read(ForwardIndexer(12345)) == "c"


def test_shared_reader_interleaves(full_pool: RoundRobinPool[int]) -> None:
    reader = ForwardIndexer()
    other = RoundRobinPool[int](capacity=3)
    for value in [10, 11, 12]:
        other.write(value)
    assert full_pool.read(reader) == 0
    assert other.read(reader) == 11
    assert full_pool.read(reader) == 2


def test_stats(full_pool: RoundRobinPool[int]) -> None:
    stats = full_pool.stats()
    assert isinstance(stats, PoolStats)
    assert stats == PoolStats(capacity=3, length=3, growing=False, list=[0, 1, 2])
    # Snapshots are copies
    stats.list.append(42)
    assert len(full_pool) == 3


def test_to_list_is_a_copy(full_pool: RoundRobinPool[int]) -> None:
    snapshot = full_pool.to_list()
    snapshot[0] = -1
    assert full_pool.to_list() == [0, 1, 2]


def test_repr(pool: RoundRobinPool[int]) -> None:
    assert repr(pool) == (
        "RoundRobinPool(capacity=3, length=0, "
        "write_indexer=ForwardIndexer(next=3))"
    )


def test_make_pool_like() -> None:
    pool = make_pool_like("conn-0", capacity=2)
    assert isinstance(pool, RoundRobinPool)
    assert pool.capacity == 2
    pool.write("conn-1")
    assert pool.read(ForwardIndexer()) == "conn-1"


def test_logs_transition_to_cyclic_writes(
    pool: RoundRobinPool[int], caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.DEBUG, logger="rrpool.pool"):
        pool.write(0)
        pool.write(1)
        assert not caplog.records
        pool.write(2)
    assert "capacity=3" in caplog.text
