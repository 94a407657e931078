"""
Chainable handles over containers.

A handle wraps one container and runs eager operations over it. What a
handle may do depends on its flavor:

    OWNED        the handle holds a container nobody else refers to
                 (every map/filter result, or iter_on(..., owned=True))
    MUTABLE_REF  the handle borrows the caller's container (iter_on default)
    CONST_REF    the handle borrows read-only (iter_on(..., const=True))

Read-only operations live on ConstHandle. Handle adds map_inplace,
filter_inplace and get, so a const handle has no such attributes at all.

Example:
    data = [1, 2, 3, 4, 5, 6]
    out = iter_on(data).map(lambda v: v + 1).filter_inplace(lambda v: v <= 4).get()
    # out == [2, 3, 4], data unchanged

    a, b = [1, 3, 4], [2, 5, 6]
    iter_on(zipped(a, b)).map_inplace(lambda p: (p[0] + 1, p[1] + 1))
    # a == [2, 4, 5], b == [3, 6, 7]
"""

from __future__ import annotations
import copy
import enum
import logging
from typing import Any, Callable, Generic, Iterator, TypeVar

from .errors import HandleConsumedError, NotFoundError
from .ranges import from_builtin
from .shapes import ContainerShape, shape_of, walk

C = TypeVar("C")
A = TypeVar("A")
Out = TypeVar("Out")

logger = logging.getLogger(__name__)

_CONSUMED = object()


class Flavor(enum.Enum):
    OWNED = "owned"
    MUTABLE_REF = "mutable_ref"
    CONST_REF = "const_ref"


class ConstHandle(Generic[C]):
    """Read-only view of a container: map, filter, reduce, find_if, as_."""

    def __init__(self, container: C, flavor: Flavor = Flavor.CONST_REF):
        if isinstance(container, range):
            container = from_builtin(container)
        self._container: Any = container
        self._shape: ContainerShape = shape_of(container)
        self._flavor = flavor

    @property
    def flavor(self) -> Flavor:
        return self._flavor

    @property
    def container(self) -> C:
        if self._container is _CONSUMED:
            raise HandleConsumedError("handle was consumed by get()")
        return self._container

    def map(self, f: Callable[[Any], Any]) -> Handle:
        """
        Apply f to every element, collecting results in a new container.

        The output shape comes from the input shape: lists and zippers
        map to lists, dicts to dicts, ranges to ranges.
        """
        container = self.container
        out_shape = self._shape.mapped()
        out = out_shape.new()
        out_shape.reserve(out, self._shape.size(container))
        for cursor in walk(self._shape, container):
            out_shape.append(out, f(cursor.get()))
        return Handle(out, Flavor.OWNED)

    def filter(self, f: Callable[[Any], bool]) -> Handle:
        """Keep the elements f accepts, in order, in a new container."""
        container = self.container
        out = self._shape.new()
        for cursor in walk(self._shape, container):
            value = cursor.get()
            if f(value):
                self._shape.append(out, value)
        return Handle(out, Flavor.OWNED)

    def reduce(self, initial: A, f: Callable[[A, Any], A]) -> A:
        """Left fold starting from initial."""
        acc = initial
        for cursor in walk(self._shape, self.container):
            acc = f(acc, cursor.get())
        return acc

    def find_if(self, f: Callable[[Any], bool]) -> Any:
        """
        Shallow copy of the first element f accepts.

        Raises NotFoundError if there is none.
        """
        for cursor in walk(self._shape, self.container):
            value = cursor.get()
            if f(value):
                return copy.copy(value)
        raise NotFoundError("find_if: no element satisfies the predicate")

    def as_(self, target: Callable[[Iterator[Any]], Out]) -> Out:
        """
        Build target from the elements, e.g. as_(dict) over (key, value) pairs.

        target is any callable taking an iterable, usually a container type.
        """
        return target(iter(self))

    def size(self) -> int:
        return self._shape.size(self.container)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Any]:
        for cursor in walk(self._shape, self.container):
            yield cursor.get()

    def __repr__(self) -> str:
        if self._container is _CONSUMED:
            return f"{type(self).__name__}(<consumed>)"
        return f"{type(self).__name__}({self._container!r}, {self._flavor.value})"


class Handle(ConstHandle[C]):
    """Owning or mutably borrowing handle. Adds in-place operations and get()."""

    def __init__(self, container: C, flavor: Flavor = Flavor.MUTABLE_REF):
        if flavor is Flavor.CONST_REF:
            raise ValueError("a Handle cannot hold a const reference, use ConstHandle")
        super().__init__(container, flavor)

    def map_inplace(self, f: Callable[[Any], Any]) -> Handle[C]:
        """
        Replace every element v with f(v).

        Over a Zipper, f takes and returns a pair and each half is written
        to its own side. Range sides ignore the write.
        """
        for cursor in walk(self._shape, self.container):
            cursor.set(f(cursor.get()))
        return self

    def filter_inplace(self, f: Callable[[Any], bool]) -> Handle[C]:
        """Erase, in one forward pass, every element f rejects."""
        container = self.container
        shape = self._shape
        removed = 0
        cursor = shape.begin(container)
        while cursor != shape.end(container):
            if f(cursor.get()):
                cursor.advance()
            else:
                cursor = shape.erase(container, cursor)
                removed += 1
        logger.debug("filter_inplace removed %d element(s)", removed)
        return self

    def get(self) -> C:
        """
        Hand the container back and end the chain.

        For a borrowing handle this is the caller's own object. The handle
        keeps no reference afterwards.
        """
        container = self.container
        self._container = _CONSUMED
        logger.debug("Handle consumed (%s)", self._flavor.value)
        return container


def iter_on(container: C, *, const: bool = False, owned: bool = False) -> ConstHandle[C]:
    """
    Start a chain over container.

    Args:
        container: Any container with a registered shape (list, dict, Range,
                   Zipper) or a unit-step builtin range.
        const: Borrow read-only. The result has no in-place operations.
        owned: The handle takes the container over.

    Returns:
        ConstHandle when const is set, Handle otherwise. An existing handle
        is returned as is, or as a read-only view of its container when const
        is set.
    """
    if const and owned:
        raise ValueError("a handle cannot both own and const-borrow its container")
    if isinstance(container, ConstHandle):
        if const and isinstance(container, Handle):
            return ConstHandle(container.container, Flavor.CONST_REF)
        if owned and not isinstance(container, Handle):
            raise ValueError("a const handle cannot be turned into an owning one")
        return container
    if const:
        return ConstHandle(container, Flavor.CONST_REF)
    return Handle(container, Flavor.OWNED if owned else Flavor.MUTABLE_REF)
