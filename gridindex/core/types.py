"""Value types shared by the grid index modules.

Coordinates are plain named tuples so they hash, compare and unpack like
``(x, y)``. Row 0 is the top row and y grows downward.
"""

from enum import Enum
from typing import NamedTuple, Tuple


class Coordinate(NamedTuple):
    """Cell position as (column, row)."""
    x: int
    y: int


class NeighborMode(Enum):
    """Adjacency rule used when enumerating neighbors."""
    FOUR_CONNECTED = 4   # Orthogonal only (von Neumann)
    EIGHT_CONNECTED = 8  # Orthogonal plus diagonal (Moore)

    @property
    def full_count(self) -> int:
        """Neighbor count of a cell with no missing neighbors."""
        return self.value


class BoundaryClass(Enum):
    """How many grid boundaries a cell touches."""
    INTERIOR = 0  # None
    EDGE = 1      # One
    CORNER = 2    # Two


class Side(Enum):
    """One of the four boundary runs of a grid."""
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class Direction(Enum):
    """Compass steps, declared clockwise starting at the right-hand neighbor.

    Declaration order is the neighbor enumeration order.
    """
    RIGHT = (1, 0)
    DOWN_RIGHT = (1, 1)
    DOWN = (0, 1)
    DOWN_LEFT = (-1, 1)
    LEFT = (-1, 0)
    UP_LEFT = (-1, -1)
    UP = (0, -1)
    UP_RIGHT = (1, -1)

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def is_diagonal(self) -> bool:
        return self.dx != 0 and self.dy != 0
