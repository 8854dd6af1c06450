"""
Exceptions raised by the coordinate value types.
"""

__all__ = [
    "CoordinateError",
    "InvalidArgument",
    "DegenerateCoordinateError",
    "NumericDomainError",
]


class CoordinateError(Exception):
    """Base class for all coordinate errors."""


class InvalidArgument(CoordinateError, ValueError):
    """A coordinate was constructed from values outside its valid range."""


class DegenerateCoordinateError(CoordinateError, ValueError):
    """The origin has no defined azimuth or polar angle."""


class NumericDomainError(CoordinateError, ArithmeticError):
    """An intermediate value left the domain of a trigonometric function."""
