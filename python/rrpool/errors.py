# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0

"""
Custom exception classes for rrpool.
"""


class PoolError(RuntimeError):
    pass


class EmptyPoolError(PoolError):
    """Raised when reading from a pool that holds no resources."""
