# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0

"""
Constants for the rrpool package.
"""
import os

from .typedefs import INDEX_BITS, INDEX_RANGE

_DEFAULT_CAPACITY = 3


def _default_capacity_from_env() -> int:
    raw = os.environ.get("RRPOOL_DEFAULT_CAPACITY")
    if raw is None:
        return _DEFAULT_CAPACITY
    capacity = int(raw)
    if capacity <= 0:
        raise ValueError(
            f"RRPOOL_DEFAULT_CAPACITY must be a positive integer, got {raw!r}"
        )
    return capacity


# Indexer counters wrap modulo INDEX_RANGE
MIN_INDEX = 0
MAX_INDEX = INDEX_RANGE - 1

# Pool capacity used when none is given; RRPOOL_DEFAULT_CAPACITY overrides it
DEFAULT_CAPACITY = _default_capacity_from_env()

__all__ = ["INDEX_BITS", "INDEX_RANGE", "MIN_INDEX", "MAX_INDEX", "DEFAULT_CAPACITY"]
