# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0

"""
Index generators that drive round-robin access to a pool.

An indexer is a stateful, zero-argument callable returning an unsigned
counter value and advancing the counter on every call. Counters are
INDEX_BITS wide and wrap around instead of overflowing, so indexers never
fail. Pools reduce the raw value into their bounds with a modulo.
"""

from abc import ABC, abstractmethod
from typing import Iterator
from pydantic import validate_call

from .constants import INDEX_RANGE, MAX_INDEX, MIN_INDEX
from .typedefs import Index


class Indexer(ABC):
    """Common interface for cyclic index generators.

    Calling an indexer (or iterating over it) returns the current counter
    value and then advances the counter. The state is shared by everyone
    holding the instance, so two consumers of one indexer observe one
    interleaved sequence.
    """

    __slots__ = ("_index",)

    def __init__(self, since: Index):
        self._index = since

    def __call__(self) -> Index:
        return self.index()

    @abstractmethod
    def index(self) -> Index:
        """Return the current value and advance the counter."""

    def peek(self) -> Index:
        """Return the value the next call will produce, without advancing."""
        return self._index

    def __iter__(self) -> Iterator[Index]:
        return self

    def __next__(self) -> Index:
        return self.index()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(next={self._index})"


class ForwardIndexer(Indexer):
    """Ascending indexer: since, since + 1, ..., MAX_INDEX, 0, 1, ..."""

    __slots__ = ()

    @validate_call
    def __init__(self, since: Index = MIN_INDEX):
        super().__init__(since)

    def index(self) -> Index:
        value = self._index
        self._index = (value + 1) % INDEX_RANGE
        return value


class BackwardIndexer(Indexer):
    """Descending indexer: since, since - 1, ..., 0, MAX_INDEX, ..."""

    __slots__ = ()

    @validate_call
    def __init__(self, since: Index = MAX_INDEX):
        super().__init__(since)

    def index(self) -> Index:
        value = self._index
        self._index = (value - 1) % INDEX_RANGE
        return value
