"""High-level API for LazyTreeLib.

This module provides simple, functional interfaces for common traversal
operations. These functions wrap the object-oriented API (rules,
traversers, TraversalStack) for ease of use in simple cases.
"""

from itertools import islice
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from .config import TraversalConfig, TraversalStrategy, DepthConfig
from .core.rule import GenerationRule
from .core.traverser import (
    TreeTraverser,
    BatchedDepthFirstTraverser,
    DepthFirstPreOrderTraverser,
    LevelOrderTraverser,
)
from .errors import ConfigurationError
from .rules import create_rule

RuleLike = Union[GenerationRule, str]


def traverse_tree(
    rule: RuleLike,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BATCHED_DEPTH_FIRST,
    max_depth: Optional[int] = None,
    min_depth: int = 1,
    max_nodes: Optional[int] = None,
    batch_size: int = 1,
    config: Optional[TraversalConfig] = None,
) -> Iterator[Tuple[int, int]]:
    """Traverse an implicit tree and yield (value, depth) tuples.

    This is the primary high-level function. It handles the common case
    of wanting to iterate over a tree without dealing with stacks and
    traversers directly.

    Args:
        rule: GenerationRule instance, or the name of a built-in rule
        strategy: Traversal strategy (batched, dfs, level)
        max_depth: Maximum depth to traverse (roots are depth 0)
        min_depth: Minimum depth before yielding values
        max_nodes: Stop after this many values
        batch_size: Batch size for rules created by name
        config: Complete configuration; overrides the other options

    Yields:
        Tuples of (value, depth)

    Raises:
        ConfigurationError: If the configuration is invalid

    Example:
        >>> for value, depth in traverse_tree('binary', max_depth=2, batch_size=2):
        ...     print("  " * depth, value)
    """
    if config is None:
        config = TraversalConfig(
            strategy=_parse_strategy(strategy),
            depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
            batch_size=batch_size,
            max_nodes=max_nodes,
        )

    errors = config.validate()
    if errors:
        raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")

    if isinstance(rule, str):
        rule = create_rule(rule, batch_size=config.batch_size)

    traverser = _select_traverser(config.strategy, rule)
    results = traverser.traverse(
        max_depth=config.depth.max_depth,
        min_depth=config.depth.min_depth,
    )
    if config.max_nodes is not None:
        results = islice(results, config.max_nodes)
    yield from results


def traverse_batched(
    rule: RuleLike,
    max_depth: Optional[int] = None,
    max_nodes: Optional[int] = None,
    **kwargs
) -> Iterator[int]:
    """Yield values in depth-first order, letting the rule batch parents.

    Example:
        >>> list(traverse_batched(CompleteBinaryTree(batch_size=2), max_nodes=4))
        [1, 11, 111, 1111]
    """
    for value, _ in traverse_tree(rule, TraversalStrategy.BATCHED_DEPTH_FIRST,
                                  max_depth=max_depth, max_nodes=max_nodes, **kwargs):
        yield value


def traverse_reference(
    rule: RuleLike,
    max_depth: Optional[int] = None,
    max_nodes: Optional[int] = None,
    **kwargs
) -> Iterator[int]:
    """Yield values of the eager, unbatched depth-first traversal.

    Produces the order traverse_batched() must reproduce.
    """
    for value, _ in traverse_tree(rule, TraversalStrategy.DEPTH_FIRST,
                                  max_depth=max_depth, max_nodes=max_nodes, **kwargs):
        yield value


def traverse_levels(
    rule: RuleLike,
    max_depth: Optional[int] = None,
    max_nodes: Optional[int] = None,
    **kwargs
) -> Iterator[int]:
    """Yield values level by level (breadth-first)."""
    for value, _ in traverse_tree(rule, TraversalStrategy.LEVEL_ORDER,
                                  max_depth=max_depth, max_nodes=max_nodes, **kwargs):
        yield value


def collect_nodes(rule: RuleLike, **kwargs) -> List[int]:
    """Traverse and return all values as a list.

    Args:
        rule: GenerationRule or built-in rule name
        **kwargs: Traversal options (see traverse_tree)
    """
    return [value for value, _ in traverse_tree(rule, **kwargs)]


def count_nodes(rule: RuleLike, **kwargs) -> int:
    """Count values produced by a traversal.

    Example:
        >>> count_nodes('binary', max_depth=3)
        39
    """
    count = 0
    for _ in traverse_tree(rule, **kwargs):
        count += 1
    return count


def get_tree_stats(rule: RuleLike, **kwargs) -> Dict[str, Any]:
    """Get statistics about a (bounded) traversal.

    Args:
        rule: GenerationRule or built-in rule name
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Dictionary with total_nodes, max_depth and per-depth counts
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    for _, depth in traverse_tree(rule, **kwargs):
        stats['total_nodes'] += 1
        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    return stats


# Helper functions

def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum."""
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'batched': TraversalStrategy.BATCHED_DEPTH_FIRST,
        'batched_dfs': TraversalStrategy.BATCHED_DEPTH_FIRST,
        'dfs': TraversalStrategy.DEPTH_FIRST,
        'dfs_pre': TraversalStrategy.DEPTH_FIRST,
        'depth_first_pre': TraversalStrategy.DEPTH_FIRST,
        'level': TraversalStrategy.LEVEL_ORDER,
        'level_order': TraversalStrategy.LEVEL_ORDER,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")


def _select_traverser(strategy: TraversalStrategy, rule: GenerationRule) -> TreeTraverser:
    traversers = {
        TraversalStrategy.BATCHED_DEPTH_FIRST: BatchedDepthFirstTraverser,
        TraversalStrategy.DEPTH_FIRST: DepthFirstPreOrderTraverser,
        TraversalStrategy.LEVEL_ORDER: LevelOrderTraverser,
    }
    return traversers[strategy](rule)
