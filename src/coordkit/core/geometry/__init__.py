"""
Coordinate value types.

This module provides immutable Cartesian and spherical coordinates that
convert into each other and share equality, Euclidean distance and
central-angle computations, plus NumPy batch helpers.
"""

from coordkit.core.geometry.errors import (
    CoordinateError,
    InvalidArgument,
    DegenerateCoordinateError,
    NumericDomainError,
)
from coordkit.core.geometry.operations import (
    EQUALITY_TOLERANCE,
    DOMAIN_EPSILON,
    is_equal,
    cartesian_distance,
    central_angle,
)
from coordkit.core.geometry.base import (
    Coordinate,
    BaseCoordinate,
    coordinate_from_dict,
)
from coordkit.core.geometry.cartesian import CartesianCoordinate
from coordkit.core.geometry.spherical import SphericCoordinate, normalize_azimuth
from coordkit.core.geometry.vectorized import (
    cartesian_to_spherical,
    spherical_to_cartesian,
    as_cartesian_array,
    as_spherical_array,
    cartesian_distance_matrix,
    central_angle_matrix,
)

__all__ = [
    # Errors
    "CoordinateError",
    "InvalidArgument",
    "DegenerateCoordinateError",
    "NumericDomainError",
    # Shared algorithms
    "EQUALITY_TOLERANCE",
    "DOMAIN_EPSILON",
    "is_equal",
    "cartesian_distance",
    "central_angle",
    # Value types
    "Coordinate",
    "BaseCoordinate",
    "coordinate_from_dict",
    "CartesianCoordinate",
    "SphericCoordinate",
    "normalize_azimuth",
    # Batch operations
    "cartesian_to_spherical",
    "spherical_to_cartesian",
    "as_cartesian_array",
    "as_spherical_array",
    "cartesian_distance_matrix",
    "central_angle_matrix",
]
