"""Tests for the batch grouping utility."""

import itertools

import pytest

from lazytreelib import batch
from lazytreelib.testing import CountingIterator


@pytest.mark.parametrize("length", [0, 1, 3, 4, 5, 8, 9, 12, 13])
def test_concatenation_reproduces_input(length):
    """Joining every batch gives back the input unchanged."""
    data = list(range(length))
    groups = list(batch(data, 4))

    assert list(itertools.chain.from_iterable(groups)) == data


@pytest.mark.parametrize("length,expected_sizes", [
    (0, []),
    (1, [1]),
    (3, [3]),
    (4, [4]),
    (8, [4, 4]),
    (10, [4, 4, 2]),
])
def test_group_sizes(length, expected_sizes):
    """Only the final group may be short, and empty remainders emit nothing."""
    assert [len(g) for g in batch(range(length), 4)] == expected_sizes


def test_size_one_yields_singletons():
    assert list(batch([7, 8, 9], 1)) == [[7], [8], [9]]


def test_groups_are_emitted_as_soon_as_full():
    """A full group is yielded without reading the next item."""
    source = CountingIterator(range(100))
    groups = batch(source, 4)

    assert next(groups) == [0, 1, 2, 3]
    assert source.pulled == 4

    assert next(groups) == [4, 5, 6, 7]
    assert source.pulled == 8


def test_works_on_infinite_input():
    groups = batch(itertools.count(), 3)
    assert list(itertools.islice(groups, 3)) == [[0, 1, 2], [3, 4, 5], [6, 7, 8]]


def test_stops_after_short_group():
    """The source is not polled again once it ran dry."""
    source = CountingIterator([1, 2, 3])
    groups = batch(source, 2)

    assert list(groups) == [[1, 2], [3]]
    assert source.exhausted
    assert list(groups) == []


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_size_rejected_eagerly(size):
    """Bad sizes fail at call time, before anything is pulled."""
    source = CountingIterator(range(5))
    with pytest.raises(ValueError):
        batch(source, size)
    assert source.pulled == 0
