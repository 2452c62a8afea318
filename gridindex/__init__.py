"""
Grid Index: topology queries for unwrapped 2D grids

Cells are addressed by a row-major linear index or an (x, y) coordinate.
Every query is a pure function of a GridDescriptor and its arguments:
coordinate conversion, corner/edge/interior classification, boundary
runs, and 4- or 8-connected neighbor enumeration without wraparound.
"""

from .core.errors import (
    GridIndexError, InvalidDimensions, IndexOutOfBounds, CoordinateOutOfBounds,
)
from .core.types import Coordinate, NeighborMode, BoundaryClass, Side, Direction
from .core.grid import GridDescriptor, MIN_DIMENSION, MAX_DIMENSION
from .core.coordinates import to_coordinate, to_index, is_within, index_grid, to_coordinates
from .core.boundary import (
    classify, classify_index, corners, corner_indices,
    extremal_coordinates, extremal_indices, row_indices, column_indices,
    interior_indices, classification_map,
)
from .core.neighbors import (
    neighbors, iter_neighbors, neighbor_indices, neighbors_of_index,
    neighbor_in_direction, neighbor_count, has_full_neighbor_set, offsets_for,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    'GridIndexError', 'InvalidDimensions', 'IndexOutOfBounds', 'CoordinateOutOfBounds',
    # Value types
    'Coordinate', 'NeighborMode', 'BoundaryClass', 'Side', 'Direction',
    # Descriptor
    'GridDescriptor', 'MIN_DIMENSION', 'MAX_DIMENSION',
    # Conversion
    'to_coordinate', 'to_index', 'is_within', 'index_grid', 'to_coordinates',
    # Boundaries
    'classify', 'classify_index', 'corners', 'corner_indices',
    'extremal_coordinates', 'extremal_indices', 'row_indices', 'column_indices',
    'interior_indices', 'classification_map',
    # Neighbors
    'neighbors', 'iter_neighbors', 'neighbor_indices', 'neighbors_of_index',
    'neighbor_in_direction', 'neighbor_count', 'has_full_neighbor_set', 'offsets_for',
]
