"""
Chainiter: eager, chainable adapters over ordinary containers.

Provides map, filter, reduce, find and in-place mutation over lists,
dicts, storage-free integer ranges and zipped pairs of containers.

Usage:
    from chainiter import iter_on, zipped, irange

    # New container, input untouched
    doubled = iter_on(values).map(lambda v: v * 2).get()

    # Write back into both zipped lists
    iter_on(zipped(xs, ys)).map_inplace(lambda p: (p[0] + 1, p[1] + 1))

    # Pair values with their positions
    index = iter_on(zipped(values, irange(len(values)))).as_(dict)
"""

import logging

from .errors import (
    IterToolsError,
    SizeMismatchError,
    NotFoundError,
    InvalidRangeError,
    UnsupportedOperationError,
    UnknownShapeError,
    HandleConsumedError,
)
from .cursors import ListCursor, DictCursor, RangeCursor, ZipCursor
from .shapes import ContainerShape, ListShape, DictShape, register_shape, shape_of, walk
from .ranges import Range, RangeShape, irange
from .zipper import Zipper, ZipperShape, zipped
from .handle import Flavor, ConstHandle, Handle, iter_on

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    # Entry points
    "iter_on",
    "zipped",
    "irange",
    # Handles
    "Flavor",
    "ConstHandle",
    "Handle",
    # Containers
    "Range",
    "Zipper",
    # Cursors
    "ListCursor",
    "DictCursor",
    "RangeCursor",
    "ZipCursor",
    # Shapes
    "ContainerShape",
    "ListShape",
    "DictShape",
    "RangeShape",
    "ZipperShape",
    "register_shape",
    "shape_of",
    "walk",
    # Errors
    "IterToolsError",
    "SizeMismatchError",
    "NotFoundError",
    "InvalidRangeError",
    "UnsupportedOperationError",
    "UnknownShapeError",
    "HandleConsumedError",
]
