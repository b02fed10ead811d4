"""Rule built from a plain callable."""

from typing import Callable, Iterable, Sequence

from ..core.rule import BatchedRule


class FunctionRule(BatchedRule):
    """BatchedRule whose children come from ``expand(value)``.

    Example:
        >>> tree = {0: [1, 2], 2: [3]}
        >>> rule = FunctionRule(lambda v: tree.get(v, ()), batch_size=2)
        >>> list(TraversalStack(rule))
        [1, 2, 3]
    """

    def __init__(self,
                 expand: Callable[[int], Iterable[int]],
                 roots: Sequence[int] = (0,),
                 batch_size: int = 1):
        super().__init__(batch_size)
        self._expand = expand
        self.roots = tuple(roots)

    def expand(self, value: int) -> Iterable[int]:
        return self._expand(value)

    def __repr__(self) -> str:
        name = getattr(self._expand, '__name__', repr(self._expand))
        return f"{self.__class__.__name__}({name}, roots={self.roots}, batch_size={self.batch_size})"
