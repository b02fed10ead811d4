"""Ready-made generation rules."""

from ..core.rule import BatchedRule
from .numbering import CompleteBinaryTree, Comb
from .function import FunctionRule


def create_rule(name: str, batch_size: int = 1) -> BatchedRule:
    """Create a built-in rule by name.

    Args:
        name: Rule name (binary, complete_binary, comb)
        batch_size: Parents admitted per generation call

    Returns:
        BatchedRule instance

    Raises:
        ValueError: If the name is not recognized
    """
    rules = {
        'binary': CompleteBinaryTree,
        'complete_binary': CompleteBinaryTree,
        'comb': Comb,
    }

    name_lower = name.lower()
    if name_lower not in rules:
        raise ValueError(
            f"Unknown rule: {name}. "
            f"Choose from: {', '.join(rules.keys())}"
        )

    return rules[name_lower](batch_size=batch_size)


__all__ = [
    'CompleteBinaryTree',
    'Comb',
    'FunctionRule',
    'create_rule',
]
