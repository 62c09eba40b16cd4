# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0

"""
Type aliases with Pydantic constraints for runtime validation.
"""

from typing import Annotated, List, NamedTuple, TypeVar
from pydantic import Field

# Pools are generic over the stored value; any object can be a resource.
ResourceType = TypeVar("ResourceType")

INDEX_BITS = 64  # Width of the unsigned index counter
INDEX_RANGE = 1 << INDEX_BITS

PositiveInt = Annotated[int, Field(gt=0)]
NaturalInt = Annotated[int, Field(ge=0)]
Size = PositiveInt
Count = NaturalInt
# Raw indexer value, before it is reduced into the pool bounds
Index = Annotated[NaturalInt, Field(lt=INDEX_RANGE)]
Slot = NaturalInt


class PoolStats(NamedTuple):
    """Snapshot of a pool's state.

    Attributes:
        capacity: Target maximum element count fixed at construction
        length: Number of resources currently held
        growing: True while writes still append instead of overwriting
        list: Copy of the held resources in slot order
    """

    capacity: int
    length: int
    growing: bool
    list: List[object]
