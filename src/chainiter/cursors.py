"""
Forward-only cursors over containers.

A cursor marks a position in a container and supports three things:
advance(), get() and equality. Cursors over real storage also write back
through set(); counter cursors accept set() and drop the value, since
there is no slot behind them.
"""

from __future__ import annotations
from typing import Any, Generic, Hashable, TypeVar

T = TypeVar("T")

_END = object()


class ListCursor(Generic[T]):
    """Index into a list."""

    __slots__ = ("container", "index")

    def __init__(self, container: list[T], index: int):
        self.container = container
        self.index = index

    def advance(self) -> ListCursor[T]:
        self.index += 1
        return self

    def get(self) -> T:
        return self.container[self.index]

    def set(self, value: T) -> None:
        self.container[self.index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListCursor):
            return NotImplemented
        return self.container is other.container and self.index == other.index

    def __repr__(self) -> str:
        return f"ListCursor(index={self.index})"


class DictCursor:
    """
    Position in a dict, walking a snapshot of its keys.

    The snapshot is taken when the cursor is created by begin(), so keys
    erased during a traversal do not disturb it. Two cursors compare equal
    when they point at the same key, or are both past the last key.
    """

    __slots__ = ("container", "keys", "index")

    def __init__(self, container: dict, keys: tuple[Hashable, ...], index: int = 0):
        self.container = container
        self.keys = keys
        self.index = index

    @property
    def key(self) -> Any:
        if self.index < len(self.keys):
            return self.keys[self.index]
        return _END

    def advance(self) -> DictCursor:
        self.index += 1
        return self

    def get(self) -> tuple[Any, Any]:
        key = self.key
        return key, self.container[key]

    def set(self, value: tuple[Any, Any]) -> None:
        key, item = value
        if key != self.key:
            raise ValueError(
                f"cannot rename key {self.key!r} to {key!r} while mapping in place"
            )
        self.container[key] = item

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DictCursor):
            return NotImplemented
        if self.container is not other.container:
            return False
        mine, theirs = self.key, other.key
        if mine is _END or theirs is _END:
            return mine is theirs
        return mine == theirs

    def __repr__(self) -> str:
        return f"DictCursor(key={'<end>' if self.key is _END else repr(self.key)})"


class RangeCursor(Generic[T]):
    """Plain counter. Dereferences to the counter value itself."""

    __slots__ = ("value",)

    def __init__(self, value: T):
        self.value = value

    def advance(self) -> RangeCursor[T]:
        self.value += 1
        return self

    def get(self) -> T:
        return self.value

    def set(self, value: T) -> None:
        # Nothing is stored behind a counter.
        pass

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeCursor):
            return NotImplemented
        return self.value == other.value

    def __repr__(self) -> str:
        return f"RangeCursor({self.value!r})"


class ZipCursor:
    """
    Two cursors advanced in lockstep.

    get() pairs the values of both sides, set() splits a pair and writes
    each half to its own side. Equality holds as soon as either side
    matches, which stops a traversal at the shorter of the two sides.
    """

    __slots__ = ("left", "right")

    def __init__(self, left, right):
        self.left = left
        self.right = right

    def advance(self) -> ZipCursor:
        self.left.advance()
        self.right.advance()
        return self

    def get(self) -> tuple[Any, Any]:
        return self.left.get(), self.right.get()

    def set(self, value: tuple[Any, Any]) -> None:
        first, second = value
        self.left.set(first)
        self.right.set(second)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZipCursor):
            return NotImplemented
        return self.left == other.left or self.right == other.right

    def __repr__(self) -> str:
        return f"ZipCursor({self.left!r}, {self.right!r})"
