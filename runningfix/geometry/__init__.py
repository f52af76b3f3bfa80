"""
RunningFix - Geometry Engine
Validated coordinates, bearing rays and the spherical-earth math that
turns two bearings into a position fix.
"""

from .core import (
    haversine_distance_km,
    calculate_bearing,
    destination_point,
    distance_matrix_km,
    find_intersection
)
from .data_models import Coordinate, BearingRay, HasCoordinate
from .exceptions import (
    GeometryError,
    ValidationError,
    TypeConversionError,
    RangeError,
    IntersectionError,
    SamePointError,
    CoincidentPointsError,
    InfiniteIntersectionsError
)

__all__ = [
    "haversine_distance_km",
    "calculate_bearing",
    "destination_point",
    "distance_matrix_km",
    "find_intersection",
    "Coordinate",
    "BearingRay",
    "HasCoordinate",
    "GeometryError",
    "ValidationError",
    "TypeConversionError",
    "RangeError",
    "IntersectionError",
    "SamePointError",
    "CoincidentPointsError",
    "InfiniteIntersectionsError"
]
