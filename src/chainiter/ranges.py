"""
Synthetic integer range: a container with no storage.

A Range covers [start, stop) and behaves like any other container to the
adapters. It has a size, begin/end cursors and an erase() that only steps
past the given position, so it can be zipped with a real list to supply
indices.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

from .cursors import RangeCursor
from .errors import InvalidRangeError, UnsupportedOperationError
from .shapes import ContainerShape, register_shape

T = TypeVar("T")


@dataclass(frozen=True)
class Range(Generic[T]):
    """Counter interval [start, stop)."""

    start: T
    stop: T

    def __post_init__(self):
        if self.start > self.stop:
            raise InvalidRangeError(
                f"range start {self.start!r} is past its stop {self.stop!r}"
            )
        span = self.stop - self.start
        if span != int(span):
            raise InvalidRangeError(
                f"range [{self.start!r}, {self.stop!r}) does not span a whole number of steps"
            )

    def begin(self) -> RangeCursor[T]:
        return RangeCursor(self.start)

    def end(self) -> RangeCursor[T]:
        return RangeCursor(self.stop)

    def erase(self, cursor: RangeCursor[T]) -> RangeCursor[T]:
        return RangeCursor(cursor.value).advance()

    def size(self) -> int:
        return int(self.stop - self.start)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[T]:
        cursor, end = self.begin(), self.end()
        while cursor != end:
            yield cursor.get()
            cursor.advance()


def irange(start: T, stop: T | None = None) -> Range[T]:
    """
    Build a Range. irange(n) counts from zero, like the builtin.

    Example:
        list(irange(3)) == [0, 1, 2]
        list(irange(2, 5)) == [2, 3, 4]
    """
    if stop is None:
        return Range(type(start)(0), start)
    return Range(start, stop)


def from_builtin(r: range) -> Range[int]:
    """Convert a builtin range with unit step. Empty builtins stay empty."""
    if r.step != 1:
        raise InvalidRangeError(f"only unit-step ranges can be adapted, got step {r.step}")
    return Range(r.start, max(r.start, r.stop))


@register_shape(Range)
class RangeShape(ContainerShape):
    """
    Nothing to grow or store: reserve() and append() do nothing.

    A Range cannot be created empty, so map() and filter() over one raise
    instead of collecting into a range that would drop every element.
    """

    def new(self) -> Range:
        raise UnsupportedOperationError(
            "a Range stores nothing to map or filter into; use as_(list) or zip it with a list"
        )

    def size(self, container: Range) -> int:
        return container.size()

    def begin(self, container: Range) -> RangeCursor:
        return container.begin()

    def end(self, container: Range) -> RangeCursor:
        return container.end()

    def erase(self, container: Range, cursor: RangeCursor) -> RangeCursor:
        return container.erase(cursor)

    def append(self, container: Range, value) -> None:
        pass

    def mapped(self) -> ContainerShape:
        return self
