"""Grid dimensions for the unwrapped 2D grid index.

This module implements the descriptor every query in the package takes:
a validated, immutable width/height pair. It is the single source of truth
for grid bounds; coordinate conversion, boundary classification and
neighbor enumeration all read their limits from it.
"""

from dataclasses import dataclass
from numbers import Integral
import logging

from .errors import InvalidDimensions

logger = logging.getLogger(__name__)


# Supported (and tested) size range per axis, inclusive
MIN_DIMENSION: int = 2
MAX_DIMENSION: int = 511


def _check_dimension(name: str, value) -> int:
    """Validate one grid dimension and return it as a plain int.

    Raises:
        InvalidDimensions: If value is not an integer or out of range
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidDimensions(f"Grid {name} must be an integer, got {value!r}")
    value = int(value)
    if value < MIN_DIMENSION:
        raise InvalidDimensions(
            f"Grid {name} must be at least {MIN_DIMENSION}, got {value}")
    if value > MAX_DIMENSION:
        raise InvalidDimensions(
            f"Grid {name} cannot exceed {MAX_DIMENSION}, got {value}")
    return value


@dataclass(frozen=True)
class GridDescriptor:
    """Immutable dimensions of an unwrapped 2D grid.

    Cells are addressed in row-major order: index 0 is the top-left cell,
    index ``width - 1`` the top-right one.

    Attributes:
        width: Grid width in cells (number of columns)
        height: Grid height in cells (number of rows)

    Raises:
        InvalidDimensions: If either dimension is outside
            [MIN_DIMENSION, MAX_DIMENSION]
    """

    width: int
    height: int

    def __post_init__(self):
        """Validate dimensions after construction."""
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "width", _check_dimension("width", self.width))
        object.__setattr__(self, "height", _check_dimension("height", self.height))
        logger.debug(f"Created grid descriptor {self.width}x{self.height}")

    @property
    def cell_count(self) -> int:
        """Total number of cells (width * height)."""
        return self.width * self.height

    @property
    def shape(self):
        """Array shape (height, width) matching ``grid[y, x]`` indexing."""
        return (self.height, self.width)

    @property
    def top_left_corner(self) -> int:
        return 0

    @property
    def top_right_corner(self) -> int:
        return self.width - 1

    @property
    def bottom_left_corner(self) -> int:
        return self.cell_count - self.width

    @property
    def bottom_right_corner(self) -> int:
        return self.cell_count - 1

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"
