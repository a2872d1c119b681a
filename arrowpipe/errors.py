"""Arrow error types."""

from __future__ import annotations


class ArrowError(Exception):
    """Base class for every error raised by arrowpipe itself."""


class ArrowIndexError(ArrowError, IndexError):
    """Raised when a position does not address an attached arrow.

    The attached list is left untouched when this is raised.
    """

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(
            f"Attached index {index} out of range for {length} attached arrow(s)"
        )


class ArrowOwnershipError(ArrowError, ValueError):
    """Raised when attaching would share an arrow or create a cycle."""


class ArrowDepthError(ArrowError, ValueError):
    """Raised when attaching would grow a tree past ``ArrowConfig.max_depth``."""

    def __init__(self, depth: int, max_depth: int) -> None:
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Arrow tree depth {depth} would exceed max_depth={max_depth}"
        )


class ArrowConfigError(ArrowError, TypeError, ValueError):
    """Raised for a non-callable essence or an invalid configuration.

    A non-callable essence is a wrong type; an invalid setting is a wrong
    value.  The error is catchable as either.
    """
