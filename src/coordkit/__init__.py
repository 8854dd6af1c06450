"""
coordkit: Cartesian and spherical coordinate value types.

This package provides immutable coordinates in two interchangeable
representations, with conversion, tolerance-based equality, Euclidean
distance and central-angle distance.
"""

__version__ = "0.1.0"
__author__ = "coordkit Contributors"

# Lazy imports so `import coordkit` stays cheap for the CLI
def __getattr__(name: str):
    """Lazy import module attributes."""
    if name == "geometry":
        from coordkit.core import geometry
        return geometry
    elif name == "Coordinate":
        from coordkit.core.geometry.base import Coordinate
        return Coordinate
    elif name == "CartesianCoordinate":
        from coordkit.core.geometry.cartesian import CartesianCoordinate
        return CartesianCoordinate
    elif name == "SphericCoordinate":
        from coordkit.core.geometry.spherical import SphericCoordinate
        return SphericCoordinate
    elif name == "coordinate_from_dict":
        from coordkit.core.geometry.base import coordinate_from_dict
        return coordinate_from_dict
    elif name in ("CoordinateError", "InvalidArgument", "DegenerateCoordinateError", "NumericDomainError"):
        from coordkit.core.geometry import errors
        return getattr(errors, name)
    elif name == "Config":
        from coordkit.config.schema import Config
        return Config
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    "__version__",
    "geometry",
    "Coordinate",
    "CartesianCoordinate",
    "SphericCoordinate",
    "coordinate_from_dict",
    "CoordinateError",
    "InvalidArgument",
    "DegenerateCoordinateError",
    "NumericDomainError",
    "Config",
]
