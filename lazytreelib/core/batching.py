"""Batch grouping for generation rules.

Batching only changes *when* children are generated, never *what* is
generated: concatenating the groups reproduces the input unchanged.
"""

from itertools import islice
from typing import Iterable, Iterator, List, TypeVar

T = TypeVar('T')


def batch(iterable: Iterable[T], size: int) -> Iterator[List[T]]:
    """Group a lazy sequence into lists of ``size`` items.

    A group is yielded as soon as it is full. When the input runs out
    the remainder is yielded as a final short group, unless it is empty.
    No more than ``size`` items are pulled ahead of the group being built.

    Args:
        iterable: Source of values (consumed lazily, single pass)
        size: Number of items per group, at least 1

    Yields:
        Lists of at most ``size`` consecutive items

    Raises:
        ValueError: If size is less than 1
    """
    if size < 1:
        raise ValueError(f"batch size must be at least 1, got {size}")
    return _batch(iter(iterable), size)


def _batch(iterator: Iterator[T], size: int) -> Iterator[List[T]]:
    while True:
        group = list(islice(iterator, size))
        if not group:
            return
        yield group
        if len(group) < size:
            # Source is exhausted; don't poll it again
            return
