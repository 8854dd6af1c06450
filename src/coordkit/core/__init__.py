"""
Core modules for coordkit.

Subpackages:
    geometry: Coordinate value types, conversions and distances
"""

from coordkit.core import geometry

__all__ = ["geometry"]
