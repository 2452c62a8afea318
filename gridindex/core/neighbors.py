"""Neighbor enumeration on unwrapped grids.

Candidates are generated from a fixed offset table, clockwise from the
right-hand neighbor:

    UP_LEFT    UP    UP_RIGHT
    LEFT      cell   RIGHT
    DOWN_LEFT DOWN   DOWN_RIGHT

Enumeration order is RIGHT, DOWN_RIGHT, DOWN, DOWN_LEFT, LEFT, UP_LEFT,
UP, UP_RIGHT; four-connected mode walks the same table skipping the
diagonals. Candidates falling outside the grid are dropped, never wrapped
and never reported as errors, so boundary cells have fewer neighbors.
"""

from typing import Dict, Iterator, List, Optional, Tuple
import logging

from .coordinates import CoordinateLike, check_coordinate, to_coordinate, is_within
from .grid import GridDescriptor
from .types import Coordinate, Direction, NeighborMode

logger = logging.getLogger(__name__)


# Offset tables per neighbor mode, in enumeration order
NEIGHBOR_OFFSETS: Dict[NeighborMode, Tuple[Tuple[int, int], ...]] = {
    NeighborMode.FOUR_CONNECTED: tuple(d.offset for d in Direction if not d.is_diagonal),
    NeighborMode.EIGHT_CONNECTED: tuple(d.offset for d in Direction),
}


def offsets_for(mode: NeighborMode) -> Tuple[Tuple[int, int], ...]:
    """Return the (dx, dy) offset table for a neighbor mode.

    Raises:
        ValueError: If mode is not a NeighborMode
    """
    try:
        return NEIGHBOR_OFFSETS[mode]
    except KeyError:
        raise ValueError(f"Unknown neighbor mode: {mode!r}") from None


def iter_neighbors(descriptor: GridDescriptor, coordinate: CoordinateLike,
                   mode: NeighborMode = NeighborMode.EIGHT_CONNECTED) -> Iterator[Coordinate]:
    """Yield in-bounds neighbor coordinates in enumeration order.

    Raises:
        CoordinateOutOfBounds: If coordinate is outside the grid
        ValueError: If mode is not a NeighborMode
    """
    x, y = check_coordinate(descriptor, coordinate)
    offsets = offsets_for(mode)
    return _iter_valid(descriptor, x, y, offsets)


def _iter_valid(descriptor, x, y, offsets) -> Iterator[Coordinate]:
    for dx, dy in offsets:
        nx, ny = x + dx, y + dy
        if is_within(descriptor, nx, ny):
            yield Coordinate(nx, ny)


def neighbors(descriptor: GridDescriptor, coordinate: CoordinateLike,
              mode: NeighborMode = NeighborMode.EIGHT_CONNECTED) -> List[Coordinate]:
    """List the neighbors of a cell that lie inside the grid.

    Args:
        descriptor: Grid the cell belongs to
        coordinate: Cell position
        mode: FOUR_CONNECTED (orthogonal) or EIGHT_CONNECTED (with diagonals)

    Returns:
        Neighbor coordinates in enumeration order. Lengths are corner 2/3,
        edge 3/5, interior 4/8 (four/eight-connected) on any grid.

    Raises:
        CoordinateOutOfBounds: If coordinate is outside the grid
        ValueError: If mode is not a NeighborMode
    """
    return list(iter_neighbors(descriptor, coordinate, mode))


def neighbor_indices(descriptor: GridDescriptor, coordinate: CoordinateLike,
                     mode: NeighborMode = NeighborMode.EIGHT_CONNECTED) -> List[int]:
    """Linear indices of ``neighbors``, in the same order."""
    width = descriptor.width
    # Neighbors are already in bounds, so compose without re-validating
    return [ny * width + nx for nx, ny in iter_neighbors(descriptor, coordinate, mode)]


def neighbors_of_index(descriptor: GridDescriptor, index: int,
                       mode: NeighborMode = NeighborMode.EIGHT_CONNECTED) -> List[int]:
    """Index-in, index-out variant of ``neighbors``.

    Raises:
        IndexOutOfBounds: If index is outside the grid
    """
    return neighbor_indices(descriptor, to_coordinate(descriptor, index), mode)


def neighbor_in_direction(descriptor: GridDescriptor, index: int,
                          direction: Direction) -> Optional[int]:
    """Index of the neighbor one step away in a compass direction.

    Args:
        descriptor: Grid the cell belongs to
        index: Source cell index
        direction: Step to take

    Returns:
        Neighbor index, or None when the step leaves the grid

    Raises:
        IndexOutOfBounds: If index is outside the grid
    """
    x, y = to_coordinate(descriptor, index)
    nx, ny = x + direction.dx, y + direction.dy
    if not is_within(descriptor, nx, ny):
        return None
    return ny * descriptor.width + nx


def neighbor_count(descriptor: GridDescriptor, coordinate: CoordinateLike,
                   mode: NeighborMode = NeighborMode.EIGHT_CONNECTED) -> int:
    """Number of in-bounds neighbors of a cell."""
    return sum(1 for _ in iter_neighbors(descriptor, coordinate, mode))


def has_full_neighbor_set(descriptor: GridDescriptor, coordinate: CoordinateLike,
                          mode: NeighborMode = NeighborMode.EIGHT_CONNECTED) -> bool:
    """True if no neighbor candidate was dropped at the grid boundary.

    Equivalent to the cell classifying as INTERIOR, in either mode.
    """
    return neighbor_count(descriptor, coordinate, mode) == mode.full_count
