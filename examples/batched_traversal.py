#!/usr/bin/env python3
"""
Batched traversal example showing that batching does not change the order.

This example demonstrates:
- Traversing the built-in numbering rules with different batch sizes
- Watching generation happen ahead of emission (DEBUG logging)
- Comparing against the unbatched reference traversal

Usage:
    python examples/batched_traversal.py [rule] [batch_size] [max_depth]
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from lazytreelib import TraversalStack, create_rule, traverse_reference


def main():
    """Print a batched traversal next to the values it generated."""
    rule_name = sys.argv[1] if len(sys.argv) > 1 else "binary"
    batch_size = int(sys.argv[2]) if len(sys.argv) > 2 else 2
    max_depth = int(sys.argv[3]) if len(sys.argv) > 3 else 2

    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    rule = create_rule(rule_name, batch_size=batch_size)
    print(f"Traversing {rule!r} to depth {max_depth}")
    print("-" * 50)

    output = []
    with TraversalStack(rule, max_depth=max_depth) as stack:
        for value in stack:
            print(f"out {'  ' * (stack.last_depth - 1)}{value}")
            output.append(value)

    reference = list(traverse_reference(create_rule(rule_name), max_depth=max_depth))
    print("-" * 50)
    print(f"{len(output)} values, {rule.generated} generated")
    print("Order matches unbatched traversal:", output == reference)
    return 0 if output == reference else 1


if __name__ == "__main__":
    sys.exit(main())
