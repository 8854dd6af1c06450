"""
Cartesian coordinate value type.
"""

from dataclasses import dataclass
import logging
import math
from typing import TYPE_CHECKING, Any, Dict, Tuple

from coordkit.core.geometry.base import BaseCoordinate
from coordkit.core.geometry.errors import DegenerateCoordinateError

if TYPE_CHECKING:
    from coordkit.core.geometry.spherical import SphericCoordinate

__all__ = ["CartesianCoordinate"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartesianCoordinate(BaseCoordinate):
    """
    A point in three-dimensional Cartesian space.

    Attributes:
        x: X component, any real value
        y: Y component, any real value
        z: Z component, any real value
    """

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    def as_cartesian(self) -> "CartesianCoordinate":
        return self

    def as_spherical(self, strict: bool = False) -> "SphericCoordinate":
        """
        Convert to spherical coordinates.

        The azimuth is ``atan2(y, x)`` mapped into [-π, π) and the polar
        angle is measured from the positive z-axis.

        At the origin both angles are undefined. By convention the origin
        converts to ``SphericCoordinate(0, 0, 0)``; pass ``strict=True`` to
        raise instead.

        Args:
            strict: Raise on the origin rather than applying the convention

        Returns:
            Equivalent SphericCoordinate

        Raises:
            DegenerateCoordinateError: If strict and this is the origin
        """
        from coordkit.core.geometry.spherical import SphericCoordinate, normalize_azimuth

        radius = math.hypot(self.x, self.y, self.z)

        if radius == 0.0:
            if strict:
                raise DegenerateCoordinateError(
                    "azimuth and polar angle are undefined at the origin"
                )
            logger.debug("Converting origin to spherical with phi = theta = 0")
            return SphericCoordinate(0.0, 0.0, 0.0)

        theta = math.acos(max(-1.0, min(1.0, self.z / radius)))

        # atan2 yields (-π, π]; the azimuth range is [-π, π)
        phi = normalize_azimuth(math.atan2(self.y, self.x))

        return SphericCoordinate(phi, theta, radius)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_dict(self) -> Dict[str, Any]:
        return {"system": "cartesian", "x": self.x, "y": self.y, "z": self.z}
