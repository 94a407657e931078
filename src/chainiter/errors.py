"""Exceptions raised by chainiter."""


class IterToolsError(Exception):
    """Base class for every chainiter failure."""


class SizeMismatchError(IterToolsError, ValueError):
    """Two containers of different sizes were paired."""

    def __init__(self, left_size: int, right_size: int):
        super().__init__(
            f"zipped containers differ in size: {left_size} != {right_size}"
        )
        self.left_size = left_size
        self.right_size = right_size


class NotFoundError(IterToolsError, LookupError):
    """No element satisfied a search predicate."""


class InvalidRangeError(IterToolsError, ValueError):
    """A range is inverted or cannot be counted in unit steps."""


class UnsupportedOperationError(IterToolsError, TypeError):
    """A container shape lacks the capability an operation needs."""


class UnknownShapeError(IterToolsError, TypeError):
    """No container shape is registered for a type."""


class HandleConsumedError(IterToolsError, RuntimeError):
    """A handle was used after get() transferred its container out."""
