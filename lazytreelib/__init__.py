"""LazyTreeLib - Batched depth-first traversal of implicit trees.

LazyTreeLib enumerates the nodes of a tree whose children are produced
lazily by a user-supplied generation rule. Rules may generate children
for several parents per call; the traversal still yields the exact order
of a plain, unbatched depth-first walk.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from lazytreelib import CompleteBinaryTree, traverse_batched

    for value in traverse_batched(CompleteBinaryTree(batch_size=4), max_depth=3):
        print(value)
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .errors import (
    TreeLibError,
    ConfigurationError,
    InvariantViolation,
    ReentrantAccessError,
)
from .config import TraversalConfig, TraversalStrategy, DepthConfig
from .core import (
    batch,
    GenerationRule,
    BatchedRule,
    BundleReader,
    SharedBundleReader,
    flatten,
    TraversalStack,
    TreeTraverser,
    BatchedDepthFirstTraverser,
    DepthFirstPreOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .rules import CompleteBinaryTree, Comb, FunctionRule, create_rule
from .api import (
    traverse_tree,
    traverse_batched,
    traverse_reference,
    traverse_levels,
    collect_nodes,
    count_nodes,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Errors
    "TreeLibError",
    "ConfigurationError",
    "InvariantViolation",
    "ReentrantAccessError",
    # Config
    "TraversalConfig",
    "TraversalStrategy",
    "DepthConfig",
    # Core
    "batch",
    "GenerationRule",
    "BatchedRule",
    "BundleReader",
    "SharedBundleReader",
    "flatten",
    "TraversalStack",
    "TreeTraverser",
    "BatchedDepthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    # Rules
    "CompleteBinaryTree",
    "Comb",
    "FunctionRule",
    "create_rule",
    # API
    "traverse_tree",
    "traverse_batched",
    "traverse_reference",
    "traverse_levels",
    "collect_nodes",
    "count_nodes",
    "get_tree_stats",
]
