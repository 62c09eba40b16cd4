# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0
"""
Self-test helpers: reference scenarios for indexers and pools.

Each check returns a bool instead of raising so that run_selftest can report
every scenario on the console.
"""

import logging
from typing import Callable, List, Sequence

from .constants import INDEX_RANGE, MAX_INDEX, MIN_INDEX
from .errors import EmptyPoolError
from .indexer import BackwardIndexer, ForwardIndexer, Indexer
from .pool import RoundRobinPool
from .typedefs import Count, Index, Size

logger = logging.getLogger(__name__)

# Capacity the write/read scenario expectations are computed for
REFERENCE_CAPACITY = 3


def make_range(since: Index, step: int, steps: Count) -> List[Index]:
    """Return `steps` indices starting at `since`, wrapping like an indexer."""
    return [(since + k * step) % INDEX_RANGE for k in range(steps)]


def check_indexer(indexer: Indexer, expected: Sequence[Index]) -> bool:
    # Every expected value is consumed even after a mismatch.
    return all([indexer() == value for value in expected])


def check_empty(pool: RoundRobinPool, indexer: Indexer) -> bool:
    try:
        pool.read(indexer)
    except EmptyPoolError:
        return True
    return False


def check_write_read(
    pool: RoundRobinPool,
    capacity: Size,
    indexer: Indexer,
    to_write: Sequence[object],
    expected: Sequence[object],
) -> bool:
    if pool.capacity != capacity:
        return False

    for resource in to_write:
        pool.write(resource)

    try:
        return all([pool.read(indexer) == resource for resource in expected])
    except EmptyPoolError:
        return False


def run_selftest(emit: Callable[[str], None] = print) -> bool:
    """
    Run the reference scenarios, emitting one line per scenario.

    Returns:
        True if every scenario passed
    """
    scenarios = [
        (
            "forward  indexer",
            lambda: check_indexer(ForwardIndexer(), make_range(MIN_INDEX, +1, 25)),
        ),
        (
            "backward indexer",
            lambda: check_indexer(BackwardIndexer(), make_range(MAX_INDEX, -1, 25)),
        ),
        (
            "getting from empty",
            lambda: check_empty(RoundRobinPool(), ForwardIndexer()),
        ),
        (
            "setting to empty then getting from",
            lambda: check_write_read(
                RoundRobinPool(REFERENCE_CAPACITY),
                REFERENCE_CAPACITY,
                ForwardIndexer(),
                [0, 1, 2, 3],
                [3, 1, 2, 3, 1, 2, 3],
            ),
        ),
    ]

    passed = True
    for message, scenario in scenarios:
        ok = scenario()
        logger.debug(f"Scenario {message!r} finished: ok={ok}")
        emit(f"test for '{message}'" + (" is OK" if ok else " is FAILED"))
        passed = passed and ok
    return passed
