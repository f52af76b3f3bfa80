"""
runningfix - Position fixing from compass bearings on a spherical earth
"""

from .geometry import (
    Coordinate,
    BearingRay,
    haversine_distance_km,
    find_intersection,
    GeometryError
)
from .fix_finder import FixFinder, FixFinderConfig, FixReport, BearingLoader

__version__ = "0.1.0"

__all__ = [
    "Coordinate",
    "BearingRay",
    "haversine_distance_km",
    "find_intersection",
    "GeometryError",
    "FixFinder",
    "FixFinderConfig",
    "FixReport",
    "BearingLoader"
]
