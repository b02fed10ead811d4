"""Tree traversal strategies for LazyTreeLib.

Traversers drive a GenerationRule and yield (value, depth) tuples. The
batched depth-first traverser is the one to use in production; the
recursive depth-first and level-order traversers generate one parent at
a time and serve as simple, obviously correct references.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple

from .reader import flatten
from .rule import GenerationRule
from .stack import TraversalStack


class TreeTraverser(ABC):
    """Abstract base class for traversal strategies."""

    def __init__(self, rule: GenerationRule):
        """Initialize traverser with a rule.

        Args:
            rule: GenerationRule describing the tree
        """
        self.rule = rule

    @abstractmethod
    def traverse(self,
                 max_depth: Optional[int] = None,
                 min_depth: int = 1) -> Iterator[Tuple[int, int]]:
        """Traverse the tree from the rule's roots.

        Args:
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding values

        Yields:
            Tuples of (value, depth); roots are depth 0 and not yielded
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class BatchedDepthFirstTraverser(TreeTraverser):
    """Depth-first pre-order traversal that lets the rule batch parents.

    Thin wrapper around TraversalStack.
    """

    def traverse(self,
                 max_depth: Optional[int] = None,
                 min_depth: int = 1) -> Iterator[Tuple[int, int]]:
        with TraversalStack(self.rule, max_depth=max_depth) as stack:
            for value in stack:
                if self._should_yield(stack.last_depth, min_depth, max_depth):
                    yield (value, stack.last_depth)


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Eager depth-first pre-order traversal, one parent per call.

    Uses recursion (via generator), so very deep trees hit the
    interpreter's recursion limit.
    """

    def traverse(self,
                 max_depth: Optional[int] = None,
                 min_depth: int = 1) -> Iterator[Tuple[int, int]]:

        def _traverse_recursive(value: int, depth: int) -> Iterator[Tuple[int, int]]:
            if not self._should_explore(depth, max_depth):
                return
            for child in self.rule.children(value):
                if self._should_yield(depth + 1, min_depth, max_depth):
                    yield (child, depth + 1)
                yield from _traverse_recursive(child, depth + 1)

        for root in self.rule.root():
            yield from _traverse_recursive(root, 0)


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal.

    Each level is generated in full from the previous one, so the rule
    sees whole levels and its batching is irrelevant for ordering.
    """

    def traverse(self,
                 max_depth: Optional[int] = None,
                 min_depth: int = 1) -> Iterator[Tuple[int, int]]:
        current_level: List[int] = list(self.rule.root())
        current_depth = 0

        while current_level and self._should_explore(current_depth, max_depth):
            next_level = list(flatten(self.rule.neighbors(iter(current_level))))
            current_depth += 1

            if self._should_yield(current_depth, min_depth, max_depth):
                for value in next_level:
                    yield (value, current_depth)

            current_level = next_level


def create_traverser(strategy: str, rule: GenerationRule) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (batched, dfs, level)
        rule: GenerationRule describing the tree

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'batched': BatchedDepthFirstTraverser,
        'batched_dfs': BatchedDepthFirstTraverser,
        'dfs': DepthFirstPreOrderTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
        'level': LevelOrderTraverser,
        'level_order': LevelOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](rule)
