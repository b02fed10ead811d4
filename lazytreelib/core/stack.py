"""Batched depth-first traversal for LazyTreeLib.

TraversalStack walks the implicit tree described by a GenerationRule and
yields node values in depth-first pre-order, even though the rule admits
parents in batches. It keeps one SharedBundleReader per depth: level 0
reads the children of the roots, level k+1 reads the children of every
value level k hands out.

Batching makes a shallow level hand values to the next level before
those values were emitted. The stack notices this through the ordinal
of each value (the index of its parent in the shallower level) and
emits the missing ancestors first, so callers always see the order of
an unbatched traversal.
"""

import logging
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple

from ..errors import InvariantViolation
from .reader import SharedBundleReader
from .rule import GenerationRule

logger = logging.getLogger(__name__)


class TraversalStack:
    """Depth-first iterator over a batched generation rule.

    Attributes:
        rule: Rule producing the tree
        max_depth: Deepest node depth to emit (roots are depth 0), or None
        levels: One shared reader per depth, created on demand
        frontier: Deepest level that can be prepared without pulling
            from a shallower level
        last_depth: Depth of the value returned by the last next() call
    """

    def __init__(self, rule: GenerationRule, max_depth: Optional[int] = None):
        """Initialize the stack.

        Args:
            rule: GenerationRule describing the tree
            max_depth: Maximum node depth to emit (None = unlimited)

        Raises:
            ValueError: If max_depth is negative
        """
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth cannot be negative, got {max_depth}")
        self.rule = rule
        self.max_depth = max_depth
        self.levels: List[SharedBundleReader] = []
        self.frontier = 0
        self.last_depth: Optional[int] = None
        self._emitted: List[int] = []
        self._displaced: Deque[Tuple[int, int]] = deque()
        self._finished = False

    def extend(self) -> SharedBundleReader:
        """Create the next level below the deepest existing one."""
        if self.levels:
            parents = self.levels[-1].drain()
        else:
            parents = self.rule.root()
        level = SharedBundleReader(self.rule.neighbors(parents))
        self.levels.append(level)
        self._emitted.append(0)
        logger.debug("created level %d", len(self.levels) - 1)
        return level

    def _can_extend(self) -> bool:
        return self.max_depth is None or len(self.levels) < self.max_depth

    @staticmethod
    def _budget(depth: int, pull_limit: int) -> Optional[int]:
        # Roots are never emitted, so level 0 may always pull
        return None if depth == 0 else pull_limit

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if self._displaced:
            self.last_depth, value = self._displaced.popleft()
            return value
        if self._finished:
            raise StopIteration

        if self.frontier == len(self.levels) and self._can_extend():
            self.extend()

        # The level above frontier has exactly one value staged for it,
        # so one pull is enough to reach that value's children.
        if self.frontier < len(self.levels):
            depth = self.frontier
            value = self.levels[depth].prepare(self._budget(depth, 1))
            if value is not None:
                return self._emit(depth, value)

        # Nothing below; move up without pulling from shallower levels
        while self.frontier > 0:
            depth = self.frontier - 1
            value = self.levels[depth].prepare(self._budget(depth, 0))
            if value is not None:
                return self._emit(depth, value)
            self.frontier -= 1

        self._finished = True
        logger.debug("traversal finished with %d levels", len(self.levels))
        raise StopIteration

    def _emit(self, depth: int, value: int) -> int:
        run = self._reconstruct(depth, value, self.levels[depth].last_ordinal)
        self.frontier = depth + 1
        self._displaced.extend(run[1:])
        self.last_depth, first = run[0]
        return first

    def _reconstruct(self, depth: int, value: int, ordinal: Optional[int]) -> List[Tuple[int, int]]:
        """Emit ``value`` together with any ancestors still owed.

        A value whose parent has not been emitted yet was read ahead
        because of batching. Its parent is then waiting in the shallower
        level's passed-unprepared queue, possibly behind childless
        siblings; those are reclaimed and emitted first, each checked the
        same way against its own level.

        Returns:
            (level, value) entries in emission order, ending with ``value``
        """
        work = [(depth, value, ordinal)]
        run: List[Tuple[int, int]] = []
        while work:
            level, item, item_ordinal = work[-1]
            if level > 0 and self._emitted[level - 1] <= item_ordinal:
                upper = self.levels[level - 1]
                parent = upper.reclaim_unprepared()
                if parent is None:
                    raise InvariantViolation(
                        f"value {item} at level {level} has parent #{item_ordinal} "
                        f"but level {level - 1} has nothing to reclaim"
                    )
                work.append((level - 1, parent, upper.last_ordinal))
                continue
            work.pop()
            self._emitted[level] += 1
            run.append((level + 1, item))

        if len(run) > 1:
            logger.debug("reordered %d values ahead of %d", len(run) - 1, value)
        return run

    def emitted_counts(self) -> List[int]:
        """Number of values emitted so far from each level."""
        return list(self._emitted)

    def close(self) -> None:
        """Close every level's bundle, deepest first."""
        for level in reversed(self.levels):
            level.close()
        self._displaced.clear()
        self._finished = True

    def __enter__(self) -> 'TraversalStack':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return None

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(rule={self.rule!r}, levels={len(self.levels)}, "
                f"frontier={self.frontier})")
