"""Core abstractions for LazyTreeLib.

This module contains the generation-rule abstraction, the batching
utility, the bundle readers and the traversal stack.
"""

from .batching import batch
from .rule import GenerationRule, BatchedRule, Pair
from .reader import BundleReader, SharedBundleReader, flatten
from .stack import TraversalStack
from .traverser import (
    TreeTraverser,
    BatchedDepthFirstTraverser,
    DepthFirstPreOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)

__all__ = [
    "batch",
    "GenerationRule",
    "BatchedRule",
    "Pair",
    "BundleReader",
    "SharedBundleReader",
    "flatten",
    "TraversalStack",
    "TreeTraverser",
    "BatchedDepthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
]
