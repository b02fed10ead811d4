"""Test fixtures for LazyTreeLib consumers.

These fixtures observe how a traversal drives its generation rule
without changing what the rule produces.
"""

from typing import Iterable, Iterator, List, Tuple

from ..core.rule import GenerationRule, Pair


class CountingIterator:
    """Iterator wrapper that counts how many items were pulled.

    Example:
        source = CountingIterator(range(100))
        first = list(itertools.islice(batch(source, 4), 2))
        assert source.pulled == 8
    """

    def __init__(self, iterable: Iterable):
        self._iterator = iter(iterable)
        self.pulled = 0
        self.exhausted = False

    def __iter__(self) -> Iterator:
        return self

    def __next__(self):
        try:
            item = next(self._iterator)
        except StopIteration:
            self.exhausted = True
            raise
        self.pulled += 1
        return item


class RecordingRule(GenerationRule):
    """Rule wrapper that records every parent read and child generated.

    Attributes:
        inner: The wrapped rule
        parents_read: Parents in the order neighbors() pulled them
        children_generated: (parent, child) pairs in generation order
        neighbors_calls: Number of neighbors() calls (one per level)
    """

    def __init__(self, inner: GenerationRule):
        self.inner = inner
        self.parents_read: List[int] = []
        self.children_generated: List[Tuple[int, int]] = []
        self.neighbors_calls = 0

    def root(self) -> Iterator[int]:
        return self.inner.root()

    def neighbors(self, parents: Iterable[int]) -> Iterator[Pair]:
        self.neighbors_calls += 1
        return self._record_pairs(self.inner.neighbors(self._record_parents(parents)))

    def _record_parents(self, parents: Iterable[int]) -> Iterator[int]:
        for parent in parents:
            self.parents_read.append(parent)
            yield parent

    def _record_pairs(self, pairs: Iterator[Pair]) -> Iterator[Pair]:
        for parent, children in pairs:
            yield parent, self._record_children(parent, children)

    def _record_children(self, parent: int, children: Iterable[int]) -> Iterator[int]:
        for child in children:
            self.children_generated.append((parent, child))
            yield child

    @property
    def generated_values(self) -> List[int]:
        return [child for _, child in self.children_generated]
