"""Exception types for LazyTreeLib.

Running out of values is never an error: readers return None and
traversals stop iterating. The exceptions here cover misuse of the
library and broken internal invariants only.
"""


class TreeLibError(Exception):
    """Base class for all LazyTreeLib errors."""
    pass


class ConfigurationError(TreeLibError, ValueError):
    """Raised when a TraversalConfig fails validation."""
    pass


class InvariantViolation(TreeLibError, RuntimeError):
    """Raised when the traversal engine detects an impossible state.

    This usually means a generation rule broke its contract, e.g. it
    emitted more or fewer (parent, children) pairs than parents it read.
    """
    pass


class ReentrantAccessError(InvariantViolation):
    """Raised when a shared reader is entered while already in use."""
    pass
