"""
Spherical coordinate value type.

This module provides the spherical representation of a point, with the
azimuth phi in [-π, π), the polar angle theta in [0, π] measured from the
positive z-axis, and a non-negative radius. All angles are in radians.
"""

from dataclasses import dataclass
import math
from typing import Any, Dict, Optional, Tuple

from coordkit.core.geometry.base import BaseCoordinate, Coordinate
from coordkit.core.geometry.cartesian import CartesianCoordinate
from coordkit.core.geometry.errors import InvalidArgument

__all__ = [
    "SphericCoordinate",
    "normalize_azimuth",
]


def normalize_azimuth(angle: float) -> float:
    """
    Normalize an angle into the azimuth range [-π, π).

    Angles already inside the range are returned unchanged.

    Args:
        angle: Angle in radians

    Returns:
        Equivalent angle in [-π, π)
    """
    if -math.pi <= angle < math.pi:
        return angle

    normalized = (angle + math.pi) % (2 * math.pi) - math.pi
    # Rounding in the modulo can land exactly on the excluded bound
    if normalized >= math.pi:
        normalized -= 2 * math.pi
    return normalized


@dataclass(frozen=True)
class SphericCoordinate(BaseCoordinate):
    """
    A point in spherical coordinates.

    Attributes:
        phi: Azimuth in radians, range [-π, π)
        theta: Polar angle in radians, range [0, π]
        radius: Distance from the origin, non-negative

    Convention:
        - theta = 0 is the positive z-axis
        - theta = π/2 is the xy-plane
        - phi = 0 points along the positive x-axis

    Note:
        ``is_equal`` on this type compares the raw fields exactly, while
        every other receiver compares Cartesian projections within a
        tolerance. Two spheric values that differ by rounding noise are
        therefore unequal here but equal when compared from a Cartesian
        coordinate. Both behaviours are intentional.
    """

    phi: float
    theta: float
    radius: float

    def __post_init__(self) -> None:
        phi = float(self.phi)
        theta = float(self.theta)
        radius = float(self.radius)

        # Written as negated range checks so NaN is rejected too
        if not radius >= 0:
            raise InvalidArgument(f"radius must be non-negative: {radius}")

        if not -math.pi <= phi < math.pi:
            raise InvalidArgument(f"phi must be in range [-π, π): {phi}")

        if not 0 <= theta <= math.pi:
            raise InvalidArgument(f"theta must be in range [0, π]: {theta}")

        object.__setattr__(self, "phi", phi)
        object.__setattr__(self, "theta", theta)
        object.__setattr__(self, "radius", radius)

    def as_cartesian(self) -> CartesianCoordinate:
        x = self.radius * math.sin(self.theta) * math.cos(self.phi)
        y = self.radius * math.sin(self.theta) * math.sin(self.phi)
        z = self.radius * math.cos(self.theta)
        return CartesianCoordinate(x, y, z)

    def as_spherical(self) -> "SphericCoordinate":
        return self

    def is_equal(self, other: Coordinate, tolerance: Optional[float] = None) -> bool:
        """
        Check whether two coordinates have identical spherical fields.

        The other coordinate is projected to spherical form and phi, theta
        and radius are compared exactly. ``tolerance`` is accepted for
        signature compatibility and ignored.

        Args:
            other: Coordinate in any representation
            tolerance: Ignored

        Returns:
            True if all three fields match exactly
        """
        spheric_other = other.as_spherical()

        return (
            self.phi == spheric_other.phi and
            self.theta == spheric_other.theta and
            self.radius == spheric_other.radius
        )

    def cartesian_distance(self, other: Coordinate) -> float:
        return self.as_cartesian().cartesian_distance(other)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.phi, self.theta, self.radius)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "system": "spheric",
            "phi": self.phi,
            "theta": self.theta,
            "radius": self.radius,
        }
