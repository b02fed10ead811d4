"""GenerationRule abstraction for LazyTreeLib.

A GenerationRule is the pluggable strategy that describes an implicit
tree: where it starts and how children are produced. The traversal
engine never looks at node values itself, it only asks the rule for
more children and decides in which order to hand them out.

Rules receive their parents as a lazy sequence rather than one at a
time, so an expensive or round-tripping generator can process several
parents per call. BatchedRule implements that pattern for rules that
can describe the children of a single value.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Tuple

from .batching import batch

logger = logging.getLogger(__name__)

# (parent, children) pair; the parent is kept for traceability only
Pair = Tuple[int, Iterator[int]]


class GenerationRule(ABC):
    """Abstract rule producing the nodes of an implicit tree.

    Contract for implementations:
    - neighbors() must read ``parents`` lazily, pulling no more than the
      current batch needs.
    - For every parent it reads it must emit exactly one (parent, children)
      pair, in the order the parents were read.
    - Children iterators may be infinite, and the caller may never
      exhaust them.
    """

    @abstractmethod
    def root(self) -> Iterator[int]:
        """Return the starting sequence of the tree.

        Returns:
            Iterator over the root values (usually a single one)
        """
        pass

    @abstractmethod
    def neighbors(self, parents: Iterable[int]) -> Iterator[Pair]:
        """Produce the children of every value in ``parents``.

        Args:
            parents: Lazy, single-pass sequence of already emitted values

        Returns:
            Iterator of (parent, children) pairs, one per parent read
        """
        pass

    def children(self, value: int) -> Iterator[int]:
        """Get the children of a single value.

        Default implementation runs neighbors() on a one-element sequence.
        Used by the unbatched reference traversal.
        """
        for _, kids in self.neighbors(iter((value,))):
            yield from kids


class BatchedRule(GenerationRule):
    """Rule that expands parents one by one, but admits them in batches.

    Subclasses implement expand(). neighbors() pulls ``batch_size``
    parents before producing the first pair of the batch, which is what
    forces the traversal engine to buffer values ahead of time.
    """

    roots: Tuple[int, ...] = (0,)

    def __init__(self, batch_size: int = 1):
        """Initialize rule with a batch size.

        Args:
            batch_size: Parents admitted per generation call

        Raises:
            ValueError: If batch_size is less than 1
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {batch_size}")
        self.batch_size = batch_size
        self.generated = 0
        self._log = logging.getLogger(f"lazytreelib.rules.{type(self).__name__}")

    def root(self) -> Iterator[int]:
        return iter(self.roots)

    def neighbors(self, parents: Iterable[int]) -> Iterator[Pair]:
        for group in batch(parents, self.batch_size):
            logger.debug("%s admitted batch %s", type(self).__name__, group)
            for parent in group:
                yield parent, self._trace(self.expand(parent))

    @abstractmethod
    def expand(self, value: int) -> Iterable[int]:
        """Return the children of ``value``, lazily where possible."""
        pass

    def _trace(self, children: Iterable[int]) -> Iterator[int]:
        for child in children:
            self.generated += 1
            self._log.debug("gen %d", child)
            yield child

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(batch_size={self.batch_size})"
