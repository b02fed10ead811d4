"""Configuration system for LazyTreeLib.

This module defines how users specify a traversal: which strategy to
use, how deep to go, how many parents a rule admits per call and how
many values to produce at most.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Mapping, Optional


class TraversalStrategy(Enum):
    """How to walk the tree.

    All depth-first strategies produce the same order; they differ in
    how the generation rule is driven.
    """
    BATCHED_DEPTH_FIRST = "batched"     # TraversalStack, honours batching
    DEPTH_FIRST = "dfs"                 # Eager recursive reference traversal
    LEVEL_ORDER = "level"               # One whole level at a time


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering.

    Depths count from the roots (depth 0), which are never yielded.
    """

    min_depth: int = 1                  # Minimum depth to yield
    max_depth: Optional[int] = None     # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children of a node at this depth should be generated."""
        if self.max_depth is not None:
            return depth < self.max_depth
        return True


@dataclass
class TraversalConfig:
    """Complete configuration for a traversal."""

    strategy: TraversalStrategy = TraversalStrategy.BATCHED_DEPTH_FIRST

    # Depth control
    depth: DepthConfig = field(default_factory=DepthConfig)

    # Parents admitted per generation call (for rules created by name)
    batch_size: int = 1

    # Stop after this many values (None = no limit)
    max_nodes: Optional[int] = None

    @classmethod
    def unbatched(cls, max_depth: Optional[int] = None) -> 'TraversalConfig':
        """Config that admits one parent per generation call."""
        return cls(batch_size=1, depth=DepthConfig(max_depth=max_depth))

    @classmethod
    def shallow(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Config for scanning only the top of the tree.

        Args:
            max_depth: How deep to scan (default 1 = children of the roots)
        """
        return cls(depth=DepthConfig(max_depth=max_depth))

    @classmethod
    def from_env(cls,
                 prefix: str = "LAZYTREELIB_",
                 environ: Optional[Mapping[str, str]] = None) -> 'TraversalConfig':
        """Build a config from environment variables.

        Reads ``<prefix>BATCH_SIZE``, ``<prefix>MAX_DEPTH``,
        ``<prefix>MAX_NODES`` and ``<prefix>STRATEGY``. Missing variables
        keep their defaults.

        Raises:
            ValueError: If a variable is not a valid integer or strategy
        """
        env = os.environ if environ is None else environ
        config = cls()

        def read_int(name: str) -> Optional[int]:
            raw = env.get(prefix + name)
            if raw is None or raw.strip() == "":
                return None
            try:
                return int(raw)
            except ValueError:
                raise ValueError(f"{prefix}{name} must be an integer, got {raw!r}")

        batch_size = read_int("BATCH_SIZE")
        if batch_size is not None:
            config.batch_size = batch_size
        config.depth.max_depth = read_int("MAX_DEPTH")
        config.max_nodes = read_int("MAX_NODES")

        strategy = env.get(prefix + "STRATEGY")
        if strategy:
            config.strategy = TraversalStrategy(strategy.strip().lower())

        return config

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.batch_size < 1:
            errors.append("batch_size must be positive")

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.max_nodes is not None and self.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        return errors
