# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0

"""
rrpool package: fixed-capacity resource pools with round-robin indexing.
"""

from .constants import DEFAULT_CAPACITY, INDEX_BITS, MAX_INDEX, MIN_INDEX
from .errors import EmptyPoolError, PoolError
from .indexer import BackwardIndexer, ForwardIndexer, Indexer
from .pool import RoundRobinPool, make_pool_like
from .typedefs import PoolStats

__all__ = [
    "DEFAULT_CAPACITY",
    "INDEX_BITS",
    "MAX_INDEX",
    "MIN_INDEX",
    "EmptyPoolError",
    "PoolError",
    "Indexer",
    "ForwardIndexer",
    "BackwardIndexer",
    "RoundRobinPool",
    "make_pool_like",
    "PoolStats",
]
