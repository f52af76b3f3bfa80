# runningfix/geometry/core.py
"""
Spherical-earth navigation math: great-circle distance, initial bearing,
destination point and the crossing point of two bearing rays.

Logging is omitted here; these are pure, high-frequency functions and
every failure is reported by raising a GeometryError subclass.
"""
import math
from typing import Sequence

import numpy as np

from .constants import GeoConstants
from .data_models import BearingRay, Coordinate, HasCoordinate
from .exceptions import CoincidentPointsError, InfiniteIntersectionsError, SamePointError
from .utils.safe_math import acos_safe, asin_safe, euclidean_modulo

TWO_PI = 2 * math.pi


def haversine_distance_km(a: HasCoordinate, b: HasCoordinate) -> float:
    """Great-circle distance between two located items, in kilometres."""
    p1, p2 = a.coordinate, b.coordinate
    lat1, lon1 = p1.latitude_rad, p1.longitude_rad
    lat2, lon2 = p2.latitude_rad, p2.longitude_rad
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    h = math.sin(dlat / 2)**2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2)**2
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return GeoConstants.EARTH_RADIUS_KM * c


def calculate_bearing(a: HasCoordinate, b: HasCoordinate) -> float:
    """Initial great-circle bearing from a to b, in degrees [0, 360)."""
    p1, p2 = a.coordinate, b.coordinate
    lat1, lat2 = p1.latitude_rad, p2.latitude_rad
    dlon = p2.longitude_rad - p1.longitude_rad
    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    return (math.degrees(math.atan2(y, x)) + 360) % 360


def destination_point(origin: HasCoordinate, bearing_deg: float, distance_km: float) -> Coordinate:
    """Point reached by following a great circle from origin for distance_km."""
    start = origin.coordinate
    lat1, lon1 = start.latitude_rad, start.longitude_rad
    theta = math.radians(bearing_deg)
    delta = distance_km / GeoConstants.EARTH_RADIUS_KM

    lat2 = asin_safe(math.sin(lat1) * math.cos(delta) +
                     math.cos(lat1) * math.sin(delta) * math.cos(theta))
    lon2 = lon1 + math.atan2(math.sin(theta) * math.sin(delta) * math.cos(lat1),
                             math.cos(delta) - math.sin(lat1) * math.sin(lat2))
    lon2 = euclidean_modulo(lon2 + math.pi, TWO_PI) - math.pi
    return Coordinate(math.degrees(lat2), math.degrees(lon2))


def distance_matrix_km(points: Sequence[HasCoordinate]) -> np.ndarray:
    """Symmetric N x N matrix of haversine distances with a zero diagonal."""
    if len(points) == 0:
        return np.zeros((0, 0))
    lat = np.radians([p.coordinate.latitude for p in points])
    lon = np.radians([p.coordinate.longitude for p in points])
    dlat = lat[np.newaxis, :] - lat[:, np.newaxis]
    dlon = lon[np.newaxis, :] - lon[:, np.newaxis]
    h = np.sin(dlat / 2)**2 + np.cos(lat)[:, np.newaxis] * np.cos(lat)[np.newaxis, :] * np.sin(dlon / 2)**2
    h = np.clip(h, 0.0, 1.0)
    return GeoConstants.EARTH_RADIUS_KM * 2 * np.arctan2(np.sqrt(h), np.sqrt(1 - h))


def find_intersection(ray1: BearingRay, ray2: BearingRay) -> Coordinate:
    """
    Solves the spherical triangle formed by two observation points and the
    unknown crossing point of their true-bearing great circles.

    Internally longitudes are west-positive; the result is converted back
    to east-positive and rounded to GeoConstants.INTERSECTION_DECIMALS.

    Raises:
        SamePointError: both rays start at the same latitude/longitude.
        CoincidentPointsError: the origins are zero angular distance apart.
        InfiniteIntersectionsError: the rays lie on the same great circle.
        RangeError: floating-point drift put the rounded result out of range.
    """
    lat1, lon1 = ray1.latitude, -ray1.longitude
    lat2, lon2 = ray2.latitude, -ray2.longitude
    if lat1 == lat2 and lon1 == lon2:
        raise SamePointError(f"Both bearings were taken at {ray1.coordinate}; the position is already known.")

    lat1, lon1 = math.radians(lat1), math.radians(lon1)
    lat2, lon2 = math.radians(lat2), math.radians(lon2)
    crs13 = ray1.true_bearing_rad
    crs23 = ray2.true_bearing_rad

    dst12 = 2 * asin_safe(math.sqrt(
        math.sin((lat1 - lat2) / 2)**2 +
        math.cos(lat1) * math.cos(lat2) * math.sin((lon1 - lon2) / 2)**2
    ))
    if dst12 == 0:
        raise CoincidentPointsError(
            f"Observation points {ray1.coordinate} and {ray2.coordinate} are zero distance apart."
        )

    # Direct bearings between the origins (west-positive, so east offset is lon1 - lon2).
    crs12 = math.atan2(math.sin(lon1 - lon2) * math.cos(lat2),
                       math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(lon1 - lon2))
    crs21 = math.atan2(math.sin(lon2 - lon1) * math.cos(lat1),
                       math.cos(lat2) * math.sin(lat1) - math.sin(lat2) * math.cos(lat1) * math.cos(lon2 - lon1))

    ang1 = euclidean_modulo(crs13 - crs12 + math.pi, TWO_PI) - math.pi
    ang2 = euclidean_modulo(crs21 - crs23 + math.pi, TWO_PI) - math.pi

    tolerance = GeoConstants.PARALLEL_SINE_TOLERANCE
    if abs(math.sin(ang1)) <= tolerance and abs(math.sin(ang2)) <= tolerance:
        raise InfiniteIntersectionsError(
            f"Bearings from {ray1.coordinate} and {ray2.coordinate} run along the same great circle."
        )

    ang1 = abs(ang1)
    ang2 = abs(ang2)
    ang3 = acos_safe(-math.cos(ang1) * math.cos(ang2) +
                     math.sin(ang1) * math.sin(ang2) * math.cos(dst12))
    dst13 = math.atan2(math.sin(dst12) * math.sin(ang1) * math.sin(ang2),
                       math.cos(ang2) + math.cos(ang1) * math.cos(ang3))
    lat3 = asin_safe(math.sin(lat1) * math.cos(dst13) +
                     math.cos(lat1) * math.sin(dst13) * math.cos(crs13))
    dlon = math.atan2(math.sin(crs13) * math.sin(dst13) * math.cos(lat1),
                      math.cos(dst13) - math.sin(lat1) * math.sin(lat3))
    lon3 = euclidean_modulo(lon1 - dlon + math.pi, TWO_PI) - math.pi

    decimals = GeoConstants.INTERSECTION_DECIMALS
    # Adding 0.0 turns a rounded -0.0 into 0.0.
    return Coordinate(round(math.degrees(lat3), decimals) + 0.0, round(math.degrees(-lon3), decimals) + 0.0)
