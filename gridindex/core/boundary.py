"""Boundary classification for unwrapped grids.

A cell touching two grid boundaries is a corner, one boundary an edge, and
none the interior. On a 2-wide (or 2-tall) grid every cell sits on both
extremes of that axis, so such grids have no interior cells at all.

Extremal runs are ordered left to right for the top and bottom rows and
top to bottom for the left and right columns.
"""

from typing import List, Tuple
import logging

import numpy as np

from .coordinates import CoordinateLike, check_coordinate, to_coordinate
from .grid import GridDescriptor
from .types import BoundaryClass, Coordinate, Side

logger = logging.getLogger(__name__)


def _classify_xy(descriptor: GridDescriptor, x: int, y: int) -> BoundaryClass:
    at_x_extreme = x == 0 or x == descriptor.width - 1
    at_y_extreme = y == 0 or y == descriptor.height - 1

    if at_x_extreme and at_y_extreme:
        return BoundaryClass.CORNER
    if at_x_extreme or at_y_extreme:
        return BoundaryClass.EDGE
    return BoundaryClass.INTERIOR


def classify(descriptor: GridDescriptor, coordinate: CoordinateLike) -> BoundaryClass:
    """Classify a cell as corner, edge or interior.

    Args:
        descriptor: Grid the cell belongs to
        coordinate: Cell position

    Returns:
        CORNER if both x and y are at an extreme, EDGE if exactly one is,
        INTERIOR otherwise

    Raises:
        CoordinateOutOfBounds: If coordinate is outside the grid
    """
    x, y = check_coordinate(descriptor, coordinate)
    return _classify_xy(descriptor, x, y)


def classify_index(descriptor: GridDescriptor, index: int) -> BoundaryClass:
    """Index-based variant of ``classify``.

    Raises:
        IndexOutOfBounds: If index is outside the grid
    """
    x, y = to_coordinate(descriptor, index)
    return _classify_xy(descriptor, x, y)


def corners(descriptor: GridDescriptor) -> Tuple[Coordinate, Coordinate, Coordinate, Coordinate]:
    """Return the four corners: top-left, top-right, bottom-left, bottom-right.

    Always four pairwise distinct coordinates, since both dimensions are >= 2.
    """
    right = descriptor.width - 1
    bottom = descriptor.height - 1
    return (Coordinate(0, 0), Coordinate(right, 0),
            Coordinate(0, bottom), Coordinate(right, bottom))


def corner_indices(descriptor: GridDescriptor) -> Tuple[int, int, int, int]:
    """Linear indices of the corners, in the same order as ``corners``."""
    return (descriptor.top_left_corner, descriptor.top_right_corner,
            descriptor.bottom_left_corner, descriptor.bottom_right_corner)


def row_indices(descriptor: GridDescriptor, row: int) -> List[int]:
    """Indices of one row, left to right.

    Raises:
        CoordinateOutOfBounds: If row is not in [0, height)
    """
    check_coordinate(descriptor, (0, row))
    start = descriptor.width * row
    return list(range(start, start + descriptor.width))


def column_indices(descriptor: GridDescriptor, column: int) -> List[int]:
    """Indices of one column, top to bottom.

    Raises:
        CoordinateOutOfBounds: If column is not in [0, width)
    """
    check_coordinate(descriptor, (column, 0))
    return list(range(column, descriptor.cell_count, descriptor.width))


def extremal_indices(descriptor: GridDescriptor, side: Side) -> List[int]:
    """Indices forming one boundary row or column.

    Args:
        descriptor: Grid to inspect
        side: Which boundary run to return

    Returns:
        Ordered list of indices (left to right for TOP/BOTTOM,
        top to bottom for LEFT/RIGHT)
    """
    if side is Side.TOP:
        return row_indices(descriptor, 0)
    if side is Side.BOTTOM:
        return row_indices(descriptor, descriptor.height - 1)
    if side is Side.LEFT:
        return column_indices(descriptor, 0)
    if side is Side.RIGHT:
        return column_indices(descriptor, descriptor.width - 1)
    raise ValueError(f"Unknown side: {side!r}")


def extremal_coordinates(descriptor: GridDescriptor, side: Side) -> List[Coordinate]:
    """Coordinate form of ``extremal_indices``, in the same order."""
    return [to_coordinate(descriptor, i) for i in extremal_indices(descriptor, side)]


def interior_indices(descriptor: GridDescriptor) -> List[int]:
    """Indices of every cell on none of the four boundary runs, ascending.

    Empty when width or height is 2.
    """
    return [int(i) for i in np.flatnonzero(classification_map(descriptor) == BoundaryClass.INTERIOR.value)]


def classification_map(descriptor: GridDescriptor) -> np.ndarray:
    """Build the (height, width) table of ``BoundaryClass`` values.

    ``classification_map(d)[y, x] == classify(d, (x, y)).value`` for every cell.
    """
    logger.debug(f"Building classification map for {descriptor} grid")

    x_extreme = np.zeros(descriptor.width, dtype=np.int8)
    x_extreme[[0, -1]] = 1
    y_extreme = np.zeros(descriptor.height, dtype=np.int8)
    y_extreme[[0, -1]] = 1

    # Count of boundaries touched per cell: 0 interior, 1 edge, 2 corner
    return (y_extreme[:, np.newaxis] + x_extreme[np.newaxis, :]).astype(np.int8)

