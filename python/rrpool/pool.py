# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0
"""
RoundRobinPool: a fixed-capacity pool of resources accessed cyclically.

A pool is filled once up to its capacity and is overwritten cyclically from
then on. Every steady-state write and every read goes through an Indexer
whose raw value is reduced modulo the pool's current length.
"""

import logging
from typing import Generic, List, Optional

from pydantic import validate_call

from .constants import DEFAULT_CAPACITY
from .errors import EmptyPoolError
from .indexer import ForwardIndexer, Indexer
from .typedefs import PoolStats, ResourceType, Size, Slot

logger = logging.getLogger(__name__)


class RoundRobinPool(Generic[ResourceType]):
    """
    Bounded sequence of resources with round-robin overwrite and read.

    The pool goes through two phases. While it holds fewer resources than its
    capacity (growth phase), write() appends and ignores the indexer. Once it
    is full (steady state), write() and read() address the slot
    ``indexer() % len(pool)``. The transition happens once and is never
    undone, since the pool never shrinks.

    Example:
        pool = RoundRobinPool[int](capacity=3)
        for value in range(4):
            pool.write(value)  # the 4th write overwrites slot 0

        reader = ForwardIndexer()
        pool.read(reader)  # 3
        pool.read(reader)  # 1
    """

    __slots__ = ("_buf", "_capacity", "_write_indexer")

    @validate_call
    def __init__(self, capacity: Size = DEFAULT_CAPACITY):
        """
        Initialize an empty pool.

        Args:
            capacity: Maximum number of resources the pool holds

        Raises:
            pydantic.ValidationError: If capacity is not a positive integer
        """
        self._buf: List[ResourceType] = []
        self._capacity: Size = capacity
        # Starts at capacity so the first cyclic write lands on slot 0
        self._write_indexer = ForwardIndexer(capacity)

    def write(self, resource: ResourceType, indexer: Optional[Indexer] = None) -> None:
        """
        Store a resource.

        During the growth phase the resource is appended and the indexer is
        not consulted. In steady state the slot picked by the indexer is
        overwritten; when no indexer is given the pool's own ascending
        indexer is used.
        """
        if self.is_growing:
            self._buf.append(resource)
            if not self.is_growing:
                logger.debug(
                    f"Pool reached capacity={self._capacity}; writes are now cyclic"
                )
            return

        if indexer is None:
            indexer = self._write_indexer
        self._buf[self._restrict(indexer)] = resource

    def read(self, indexer: Indexer) -> ResourceType:
        """
        Return the resource in the slot picked by the indexer.

        The indexer is mandatory so that the sequence of slots read is fully
        determined by the caller.

        Raises:
            EmptyPoolError: If nothing has been written to the pool yet
        """
        if not self._buf:
            logger.debug(f"Read from empty pool with {indexer!r}")
            raise EmptyPoolError("Pool is empty; write a resource before reading")
        return self._buf[self._restrict(indexer)]

    def _restrict(self, indexer: Indexer) -> Slot:
        return indexer() % len(self._buf)

    @property
    def capacity(self) -> Size:
        """Get the maximum number of resources the pool holds."""
        return self._capacity

    @property
    def is_growing(self) -> bool:
        """True while writes still append new slots."""
        return len(self._buf) < self._capacity

    @property
    def is_steady(self) -> bool:
        """True once the pool is full and writes overwrite cyclically."""
        return not self.is_growing

    def __len__(self) -> int:
        return len(self._buf)

    def to_list(self) -> List[ResourceType]:
        return list(self._buf)

    def stats(self) -> PoolStats:
        """Get current pool statistics."""
        return PoolStats(
            capacity=self._capacity,
            length=len(self._buf),
            growing=self.is_growing,
            list=list(self._buf),
        )

    def __repr__(self) -> str:
        return (
            f"RoundRobinPool(capacity={self._capacity}, length={len(self._buf)}, "
            f"write_indexer={self._write_indexer!r})"
        )


def make_pool_like(
    element: ResourceType,
    capacity: Size = DEFAULT_CAPACITY,
) -> RoundRobinPool[ResourceType]:
    """
    Create a RoundRobinPool with the same resource type as the element.

    Args:
        element: An instance used to determine the pool's resource type
        capacity: Maximum number of resources the pool holds

    Returns:
        An empty RoundRobinPool with resource type matching the element

    Example:
        pool = make_pool_like("conn-0", capacity=4)
    """
    return RoundRobinPool[type(element)](capacity=capacity)
