"""Shared pytest configuration for LazyTreeLib tests."""

import random
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lazytreelib import FunctionRule


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running order equivalence sweeps")


def make_random_rule(seed: int, batch_size: int = 1, max_children: int = 3, roots=(0,),
                     max_digits: int = 6) -> FunctionRule:
    """Deterministic pseudo-random tree.

    A value's children are value*10+1 .. value*10+k where k is drawn from
    a generator seeded with the value, so the same value always expands
    the same way and childless nodes are common. Values with
    ``max_digits`` digits are leaves, which keeps the tree finite.
    """
    def expand(value):
        if value >= 10 ** (max_digits - 1):
            return []
        rng = random.Random(seed * 1_000_003 + value)
        return [value * 10 + i for i in range(1, rng.randint(0, max_children) + 1)]

    return FunctionRule(expand, roots=roots, batch_size=batch_size)


@pytest.fixture
def random_rule_factory():
    return make_random_rule
