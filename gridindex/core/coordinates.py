"""Conversion between linear indices and (x, y) coordinates.

Indices are row-major: ``x = index % width``, ``y = index // width`` and
``index = y * width + x``. Scalar conversions validate their input and
raise; the bulk helpers build numpy tables for whole-grid work.
"""

from numbers import Integral
from typing import Tuple, Union
import logging

import numpy as np

from .errors import CoordinateOutOfBounds, IndexOutOfBounds
from .grid import GridDescriptor
from .types import Coordinate

logger = logging.getLogger(__name__)

CoordinateLike = Union[Coordinate, Tuple[int, int]]


def _is_int(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def is_within(descriptor: GridDescriptor, x: int, y: int) -> bool:
    """Check if coordinates are within the grid bounds.

    Never raises; this is the guard every other query builds on.
    """
    return 0 <= x < descriptor.width and 0 <= y < descriptor.height


def check_index(descriptor: GridDescriptor, index) -> int:
    """Validate a linear index and return it as a plain int.

    Raises:
        IndexOutOfBounds: If index is not an integer in [0, cell_count)
    """
    if not _is_int(index) or not (0 <= index < descriptor.cell_count):
        raise IndexOutOfBounds(
            f"Index {index!r} out of bounds for {descriptor} grid "
            f"(0..{descriptor.cell_count - 1})")
    return int(index)


def check_coordinate(descriptor: GridDescriptor, coordinate: CoordinateLike) -> Coordinate:
    """Validate a coordinate pair and return it as a Coordinate.

    Raises:
        CoordinateOutOfBounds: If coordinate is malformed or outside the grid
    """
    try:
        x, y = coordinate
    except (TypeError, ValueError):
        raise CoordinateOutOfBounds(f"Not an (x, y) coordinate: {coordinate!r}") from None

    if not (_is_int(x) and _is_int(y)) or not is_within(descriptor, x, y):
        raise CoordinateOutOfBounds(
            f"Coordinates ({x!r}, {y!r}) out of bounds for {descriptor} grid")
    return Coordinate(int(x), int(y))


def to_coordinate(descriptor: GridDescriptor, index: int) -> Coordinate:
    """Decompose a linear index into its (x, y) coordinate.

    Args:
        descriptor: Grid the index belongs to
        index: Row-major linear index

    Returns:
        Coordinate(x=index % width, y=index // width)

    Raises:
        IndexOutOfBounds: If index is negative or >= cell_count
    """
    index = check_index(descriptor, index)
    y, x = divmod(index, descriptor.width)
    return Coordinate(x, y)


def to_index(descriptor: GridDescriptor, coordinate: CoordinateLike) -> int:
    """Compose an (x, y) coordinate into its row-major linear index.

    Args:
        descriptor: Grid the coordinate belongs to
        coordinate: Coordinate or plain (x, y) tuple

    Returns:
        y * width + x

    Raises:
        CoordinateOutOfBounds: If either component is outside the grid
    """
    x, y = check_coordinate(descriptor, coordinate)
    return y * descriptor.width + x


def index_grid(descriptor: GridDescriptor) -> np.ndarray:
    """Build the (height, width) table of linear indices.

    ``index_grid(d)[y, x] == to_index(d, (x, y))`` for every cell.
    """
    logger.debug(f"Building index table for {descriptor} grid")
    return np.arange(descriptor.cell_count, dtype=np.int64).reshape(descriptor.shape)


def to_coordinates(descriptor: GridDescriptor, indices) -> Tuple[np.ndarray, np.ndarray]:
    """Vectorized ``to_coordinate`` over an array of indices.

    Args:
        descriptor: Grid the indices belong to
        indices: Array-like of integer indices (any shape)

    Returns:
        Tuple (xs, ys) of int64 arrays with the shape of ``indices``

    Raises:
        IndexOutOfBounds: If the array is not integral or any entry is out of range
    """
    arr = np.asarray(indices)
    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        raise IndexOutOfBounds(f"Indices must be integers, got dtype {arr.dtype}")
    arr = arr.astype(np.int64, copy=False)

    bad = (arr < 0) | (arr >= descriptor.cell_count)
    if np.any(bad):
        first = int(arr[bad].flat[0])
        raise IndexOutOfBounds(
            f"Index {first} out of bounds for {descriptor} grid "
            f"(0..{descriptor.cell_count - 1})")

    ys, xs = np.divmod(arr, descriptor.width)
    return xs, ys
