"""Decimal numbering rules.

Both rules name a child by appending one decimal digit to its parent,
so a value spells out its own path from the root: 132 is the second
child of 13, which is the third child of 1.
"""

from typing import Iterable

from ..core.rule import BatchedRule


class CompleteBinaryTree(BatchedRule):
    """Every value x has the children 10x+1, 10x+2 and 10x+3.

    Despite the name each node has three children; the tree is complete
    and infinite, so traversals need a depth limit or truncation.
    """

    def expand(self, value: int) -> Iterable[int]:
        return range(10 * value + 1, 10 * value + 4)


class Comb(BatchedRule):
    """Even values branch five ways, odd values have a single child.

    Even x -> 10x+1 .. 10x+5, odd x -> 10x+1. The uneven branching
    makes batches straddle parents with very different subtree sizes.
    """

    def expand(self, value: int) -> Iterable[int]:
        if value % 2 == 0:
            return range(10 * value + 1, 10 * value + 6)
        return range(10 * value + 1, 10 * value + 2)
