"""
Coordinate protocol and shared base class.

This module defines the capability set every coordinate type exposes,
along with the abstract base that routes the shared algorithms to
``coordkit.core.geometry.operations``.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Mapping, Protocol, Tuple, runtime_checkable

from coordkit.core.geometry import operations
from coordkit.core.geometry.errors import InvalidArgument
from coordkit.core.geometry.operations import EQUALITY_TOLERANCE

if TYPE_CHECKING:
    from coordkit.core.geometry.cartesian import CartesianCoordinate
    from coordkit.core.geometry.spherical import SphericCoordinate

__all__ = [
    "Coordinate",
    "BaseCoordinate",
    "coordinate_from_dict",
]


@runtime_checkable
class Coordinate(Protocol):
    """
    Protocol defining the interface for coordinates.

    Any class implementing this protocol can be converted, compared and
    measured against any other coordinate, regardless of representation.
    """

    def as_cartesian(self) -> "CartesianCoordinate":
        """Return the Cartesian representation."""
        ...

    def as_spherical(self) -> "SphericCoordinate":
        """Return the spherical representation."""
        ...

    def is_equal(self, other: "Coordinate") -> bool:
        """Check whether both coordinates denote the same point."""
        ...

    def cartesian_distance(self, other: "Coordinate") -> float:
        """Return the Euclidean distance to another coordinate."""
        ...

    def central_angle(self, other: "Coordinate") -> float:
        """Return the central angle to another coordinate in radians."""
        ...


class BaseCoordinate(ABC):
    """
    Abstract base class for coordinate value types.

    Subclasses supply the two conversions; equality, Euclidean distance
    and central angle are shared through ``operations``.

    Python ``==`` and ``hash`` come from the frozen dataclass subclasses and
    compare the raw fields exactly, so they are structural and ignore the
    equality tolerance. Use ``is_equal`` to compare locations.
    """

    @abstractmethod
    def as_cartesian(self) -> "CartesianCoordinate":
        """Convert into a CartesianCoordinate."""
        pass

    @abstractmethod
    def as_spherical(self) -> "SphericCoordinate":
        """Convert into a SphericCoordinate."""
        pass

    @abstractmethod
    def as_tuple(self) -> Tuple[float, float, float]:
        """Return the raw fields in declaration order."""
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        pass

    def is_equal(
        self,
        other: Coordinate,
        tolerance: float = EQUALITY_TOLERANCE,
    ) -> bool:
        """
        Check whether two coordinates are equal within tolerance.

        Args:
            other: Coordinate in any representation
            tolerance: Manhattan-distance threshold on the Cartesian projections

        Returns:
            True if both coordinates denote the same point
        """
        return operations.is_equal(self, other, tolerance)

    def cartesian_distance(self, other: Coordinate) -> float:
        """Compute Euclidean distance to another coordinate."""
        return operations.cartesian_distance(self, other)

    def central_angle(self, other: Coordinate) -> float:
        """Compute central angle to another coordinate in radians."""
        return operations.central_angle(self, other)


def coordinate_from_dict(data: Mapping[str, Any]) -> BaseCoordinate:
    """
    Rebuild a coordinate from the output of ``to_dict``.

    Args:
        data: Mapping with a ``system`` key and the fields of that system

    Returns:
        CartesianCoordinate or SphericCoordinate

    Raises:
        InvalidArgument: If the system is unknown or a field is missing
    """
    from coordkit.core.geometry.cartesian import CartesianCoordinate
    from coordkit.core.geometry.spherical import SphericCoordinate

    system = data.get("system")
    if system == "cartesian":
        fields = ("x", "y", "z")
        cls = CartesianCoordinate
    elif system == "spheric":
        fields = ("phi", "theta", "radius")
        cls = SphericCoordinate
    else:
        raise InvalidArgument(f"Unknown coordinate system: {system!r}")

    missing = [name for name in fields if name not in data]
    if missing:
        raise InvalidArgument(
            f"Missing fields for {system} coordinate: {', '.join(missing)}"
        )

    return cls(*(data[name] for name in fields))
