"""
Paired container: two same-sized containers traversed in lockstep.

A Zipper borrows (or owns, when built from temporaries) a left and a
right container of any registered shape and exposes the container
surface over both at once. Elements come out as (left, right) tuples,
and writes or erasures through a ZipCursor reach both sides.
"""

from __future__ import annotations
import logging
from typing import Any, Generic, Iterator, TypeVar

from .cursors import ZipCursor
from .errors import SizeMismatchError, UnsupportedOperationError
from .ranges import from_builtin
from .shapes import ContainerShape, register_shape, shape_for, shape_of

L = TypeVar("L")
R = TypeVar("R")

logger = logging.getLogger(__name__)


def _adapt(container):
    if isinstance(container, range):
        return from_builtin(container)
    return container


class Zipper(Generic[L, R]):
    """
    Two containers viewed as one container of pairs.

    The sizes are checked once, here. Later operations trust them.

    Example:
        prices = [3, 5, 8]
        zipper = Zipper(prices, irange(3))
        list(zipper) == [(3, 0), (5, 1), (8, 2)]
    """

    def __init__(self, left: L, right: R):
        self.left = _adapt(left)
        self.right = _adapt(right)
        self._left_shape = shape_of(self.left)
        self._right_shape = shape_of(self.right)

        left_size = self._left_shape.size(self.left)
        right_size = self._right_shape.size(self.right)
        if left_size != right_size:
            raise SizeMismatchError(left_size, right_size)
        logger.debug(
            "Zipped %s with %s over %d elements",
            self._left_shape, self._right_shape, left_size,
        )

    @property
    def shapes(self) -> tuple[ContainerShape, ContainerShape]:
        return self._left_shape, self._right_shape

    def begin(self) -> ZipCursor:
        return ZipCursor(
            self._left_shape.begin(self.left), self._right_shape.begin(self.right)
        )

    def end(self) -> ZipCursor:
        return ZipCursor(
            self._left_shape.end(self.left), self._right_shape.end(self.right)
        )

    def erase(self, cursor: ZipCursor) -> ZipCursor:
        """Erase the position from both sides, returning the cursor past it."""
        return ZipCursor(
            self._left_shape.erase(self.left, cursor.left),
            self._right_shape.erase(self.right, cursor.right),
        )

    def size(self) -> int:
        return self._left_shape.size(self.left)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        cursor = self.begin()
        while cursor != self.end():
            yield cursor.get()
            cursor.advance()

    def __repr__(self) -> str:
        return f"Zipper({self.left!r}, {self.right!r})"


def zipped(left: L, right: R) -> Zipper[L, R]:
    """Pair two containers of equal size. Raises SizeMismatchError otherwise."""
    return Zipper(left, right)


@register_shape(Zipper)
class ZipperShape(ContainerShape):
    """
    Shape of a Zipper.

    A pair cannot be split back into two new containers, so a Zipper is
    never built by map() or filter(): it has no new() and no append(), and
    mapping one produces a list.
    """

    def new(self) -> Zipper:
        raise UnsupportedOperationError(
            "a Zipper cannot be built element by element; map it to a list instead"
        )

    def size(self, container: Zipper) -> int:
        return container.size()

    def begin(self, container: Zipper) -> ZipCursor:
        return container.begin()

    def end(self, container: Zipper) -> ZipCursor:
        return container.end()

    def erase(self, container: Zipper, cursor: ZipCursor) -> ZipCursor:
        return container.erase(cursor)

    def reserve(self, container: Zipper, size: int) -> None:
        left_shape, right_shape = container.shapes
        left_shape.reserve(container.left, size)
        right_shape.reserve(container.right, size)

    def mapped(self) -> ContainerShape:
        return shape_for(list)
