"""Exceptions raised by grid index queries.

Each error also derives from the matching built-in family so callers can
catch ``ValueError``/``IndexError`` without importing this module.
"""


class GridIndexError(Exception):
    """Base class for all grid index errors."""


class InvalidDimensions(GridIndexError, ValueError):
    """Grid width or height outside the supported range."""


class IndexOutOfBounds(GridIndexError, IndexError):
    """Linear index does not address a cell of the grid."""


class CoordinateOutOfBounds(GridIndexError, IndexError):
    """Coordinate, row or column lies outside the grid."""
