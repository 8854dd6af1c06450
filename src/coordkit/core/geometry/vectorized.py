"""
Vectorized coordinate conversions and distance matrices.

NumPy counterparts of the scalar coordinate operations for working with
many points at once. The conventions match the value types exactly:
azimuth phi in [-π, π), polar angle theta in [0, π] from the positive
z-axis, and the origin mapped to phi = theta = 0.
"""

from typing import Iterable, Tuple, Union
import numpy as np

from coordkit.core.geometry.base import Coordinate
from coordkit.core.geometry.errors import NumericDomainError
from coordkit.core.geometry.operations import DOMAIN_EPSILON

__all__ = [
    "cartesian_to_spherical",
    "spherical_to_cartesian",
    "as_cartesian_array",
    "as_spherical_array",
    "cartesian_distance_matrix",
    "central_angle_matrix",
]

ArrayLike = Union[float, np.ndarray]


def cartesian_to_spherical(
    x: ArrayLike,
    y: ArrayLike,
    z: ArrayLike,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert Cartesian coordinates to spherical (phi, theta, r).

    Args:
        x, y, z: Cartesian coordinates

    Returns:
        phi: Azimuth in [-π, π)
        theta: Polar angle in [0, π]
        r: Radius
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    z = np.asarray(z, dtype=float)

    r = np.hypot(np.hypot(x, y), z)

    # Avoid division by zero; the origin gets theta = 0 below
    safe_r = np.where(r > 0, r, 1.0)
    theta = np.where(r > 0, np.arccos(np.clip(z / safe_r, -1.0, 1.0)), 0.0)

    phi = np.arctan2(y, x)
    phi = np.where(phi >= np.pi, phi - 2 * np.pi, phi)
    phi = np.where(r > 0, phi, 0.0)

    return phi, theta, r


def spherical_to_cartesian(
    phi: ArrayLike,
    theta: ArrayLike,
    r: ArrayLike = 1.0,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert spherical coordinates to Cartesian.

    Args:
        phi: Azimuth in radians
        theta: Polar angle in radians
        r: Radius (default 1.0 for unit sphere)

    Returns:
        x, y, z: Cartesian coordinates
    """
    phi = np.asarray(phi, dtype=float)
    theta = np.asarray(theta, dtype=float)
    r = np.asarray(r, dtype=float)

    x = r * np.sin(theta) * np.cos(phi)
    y = r * np.sin(theta) * np.sin(phi)
    z = r * np.cos(theta)
    return x, y, z


def as_cartesian_array(coords: Iterable[Coordinate]) -> np.ndarray:
    """Stack coordinates into an (N, 3) array of (x, y, z) rows."""
    rows = [coord.as_cartesian().as_tuple() for coord in coords]
    return np.asarray(rows, dtype=float).reshape(-1, 3)


def as_spherical_array(coords: Iterable[Coordinate]) -> np.ndarray:
    """Stack coordinates into an (N, 3) array of (phi, theta, r) rows."""
    rows = [coord.as_spherical().as_tuple() for coord in coords]
    return np.asarray(rows, dtype=float).reshape(-1, 3)


def cartesian_distance_matrix(coords: Iterable[Coordinate]) -> np.ndarray:
    """
    Compute pairwise Euclidean distances.

    Args:
        coords: Coordinates in any representation

    Returns:
        Symmetric (N, N) distance matrix with a zero diagonal
    """
    points = as_cartesian_array(coords)
    diff = points[:, np.newaxis, :] - points[np.newaxis, :, :]
    return np.hypot(np.hypot(diff[..., 0], diff[..., 1]), diff[..., 2])


def central_angle_matrix(
    coords: Iterable[Coordinate],
    epsilon: float = DOMAIN_EPSILON,
) -> np.ndarray:
    """
    Compute pairwise central angles.

    Applies the same formula as ``operations.central_angle``, including
    the latitude taken as ``90 - theta``, to every pair of points.

    Args:
        coords: Coordinates in any representation
        epsilon: Tolerated overshoot of the acos argument

    Returns:
        (N, N) matrix of central angles in radians

    Raises:
        NumericDomainError: If any acos argument is NaN or out of domain
    """
    spheric = as_spherical_array(coords)
    lat = 90 - spheric[:, 1]
    lon = spheric[:, 0]

    delta_lon = np.abs(lon[np.newaxis, :] - lon[:, np.newaxis])

    cos_sigma = (
        np.sin(lat)[:, np.newaxis] * np.sin(lat)[np.newaxis, :] +
        np.cos(lat)[:, np.newaxis] * np.cos(lat)[np.newaxis, :] * np.cos(delta_lon)
    )

    if np.any(np.isnan(cos_sigma)) or np.any(np.abs(cos_sigma) > 1.0 + epsilon):
        raise NumericDomainError("acos argument out of domain [-1, 1]")

    # Clamp to valid range to handle numerical errors
    cos_sigma = np.clip(cos_sigma, -1.0, 1.0)

    return np.arccos(cos_sigma)
