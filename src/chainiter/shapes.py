"""
Container shapes: what the adapters need to know about a container type.

A shape describes how to create, size, grow, traverse and erase from one
kind of container, and which shape results when its elements are mapped
to something else. Shapes are registered per container type and looked up
by the container's class, so map() and filter() run the same loop over a
list, a dict, a Range or a Zipper.

Example:
    @register_shape(MyDeque)
    class MyDequeShape(ContainerShape):
        ...

    shape = shape_of(container)
    for cursor in walk(shape, container):
        print(cursor.get())
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, TypeVar

from .cursors import DictCursor, ListCursor
from .errors import UnknownShapeError, UnsupportedOperationError

S = TypeVar("S", bound="ContainerShape")

_REGISTRY: dict[type, ContainerShape] = {}


class ContainerShape(ABC):
    """
    Capability set of one container type.

    Subclasses must provide size/begin/end/mapped. The remaining
    capabilities default to raising UnsupportedOperationError, except
    reserve(), which is a no-op for containers without a capacity.
    """

    container_type: type = object

    def new(self) -> Any:
        """Return an empty container of this shape."""
        raise UnsupportedOperationError(
            f"{self.container_type.__name__} cannot be created empty"
        )

    @abstractmethod
    def size(self, container) -> int: ...

    @abstractmethod
    def begin(self, container): ...

    @abstractmethod
    def end(self, container): ...

    def erase(self, container, cursor):
        """Remove the element at cursor, returning the cursor past it."""
        raise UnsupportedOperationError(
            f"{self.container_type.__name__} does not support erase"
        )

    def reserve(self, container, size: int) -> None:
        pass

    def append(self, container, value) -> None:
        raise UnsupportedOperationError(
            f"{self.container_type.__name__} does not support append"
        )

    @abstractmethod
    def mapped(self) -> ContainerShape:
        """Shape of the container map() builds from this one."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.container_type.__name__})"


def register_shape(container_type: type) -> Callable[[type[S]], type[S]]:
    """Class decorator registering a shape for container_type and its subclasses."""

    def decorator(cls: type[S]) -> type[S]:
        cls.container_type = container_type
        _REGISTRY[container_type] = cls()
        return cls

    return decorator


def shape_for(container_type: type) -> ContainerShape:
    try:
        return _REGISTRY[container_type]
    except KeyError:
        raise UnknownShapeError(
            f"no container shape registered for {container_type.__name__}"
        ) from None


def shape_of(container) -> ContainerShape:
    """Look up the shape of a container by its class, most derived first."""
    for klass in type(container).__mro__:
        shape = _REGISTRY.get(klass)
        if shape is not None:
            return shape
    raise UnknownShapeError(
        f"no container shape registered for {type(container).__name__}"
    )


def walk(shape: ContainerShape, container) -> Iterator:
    """Yield a cursor at every position of container, front to back."""
    cursor = shape.begin(container)
    while cursor != shape.end(container):
        yield cursor
        cursor.advance()


@register_shape(list)
class ListShape(ContainerShape):
    def new(self) -> list:
        return []

    def size(self, container: list) -> int:
        return len(container)

    def begin(self, container: list) -> ListCursor:
        return ListCursor(container, 0)

    def end(self, container: list) -> ListCursor:
        return ListCursor(container, len(container))

    def erase(self, container: list, cursor: ListCursor) -> ListCursor:
        del container[cursor.index]
        return ListCursor(container, cursor.index)

    def append(self, container: list, value) -> None:
        container.append(value)

    def mapped(self) -> ContainerShape:
        return self


@register_shape(dict)
class DictShape(ContainerShape):
    """
    Associative map, traversed as (key, value) pairs.

    append() takes a (key, value) pair, so mapping a dict requires the
    function to return pairs.
    """

    def new(self) -> dict:
        return {}

    def size(self, container: dict) -> int:
        return len(container)

    def begin(self, container: dict) -> DictCursor:
        return DictCursor(container, tuple(container))

    def end(self, container: dict) -> DictCursor:
        return DictCursor(container, ())

    def erase(self, container: dict, cursor: DictCursor) -> DictCursor:
        del container[cursor.key]
        return DictCursor(container, cursor.keys, cursor.index + 1)

    def append(self, container: dict, value) -> None:
        key, item = value
        container[key] = item

    def mapped(self) -> ContainerShape:
        return self
