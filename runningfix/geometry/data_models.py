# runningfix/geometry/data_models.py
"""
Defines the value types the geometry engine operates on: a validated
latitude/longitude Coordinate and a BearingRay observed from one.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Protocol, Tuple, runtime_checkable

from .constants import GeoConstants
from .exceptions import RangeError, TypeConversionError


def _to_float(name: str, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        raise TypeConversionError(name, value) from None


def _check_range(name: str, value: float, bounds: Tuple[float, float]) -> float:
    lower, upper = bounds
    # Written as a positive test so that NaN is rejected.
    if not (lower <= value <= upper):
        raise RangeError(name, value, lower, upper)
    return value


@runtime_checkable
class HasCoordinate(Protocol):
    """Anything that can yield the Coordinate it is located at."""

    @property
    def coordinate(self) -> "Coordinate": ...


@dataclass(frozen=True)
class Coordinate:
    """A point on the globe in decimal degrees, east and north positive."""
    latitude: float
    longitude: float

    def __post_init__(self):
        latitude = _check_range("latitude", _to_float("latitude", self.latitude), GeoConstants.LATITUDE_BOUNDS)
        longitude = _check_range("longitude", _to_float("longitude", self.longitude), GeoConstants.LONGITUDE_BOUNDS)
        object.__setattr__(self, "latitude", latitude)
        object.__setattr__(self, "longitude", longitude)

    @property
    def coordinate(self) -> "Coordinate":
        return self

    @property
    def latitude_rad(self) -> float:
        return math.radians(self.latitude)

    @property
    def longitude_rad(self) -> float:
        return math.radians(self.longitude)

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"


@dataclass(frozen=True)
class BearingRay:
    """
    A compass bearing observed from a fixed position.

    The true bearing is the observed bearing plus the local magnetic
    declination. It is computed once and is NOT folded back into
    [0, 360): a 350 degree bearing with +20 declination gives 370.
    Use `true_bearing_normalized` for display.
    """
    coordinate: Coordinate
    bearing: float
    declination: float = 0.0
    true_bearing: float = field(init=False)

    def __post_init__(self):
        if not isinstance(self.coordinate, Coordinate):
            raise TypeError(f"coordinate must be a Coordinate, got {type(self.coordinate).__name__}")
        bearing = _check_range("bearing", _to_float("bearing", self.bearing), GeoConstants.BEARING_BOUNDS)
        declination = _check_range("declination", _to_float("declination", self.declination), GeoConstants.DECLINATION_BOUNDS)
        object.__setattr__(self, "bearing", bearing)
        object.__setattr__(self, "declination", declination)
        object.__setattr__(self, "true_bearing", bearing + declination)

    @classmethod
    def from_degrees(cls, latitude: Any, longitude: Any, bearing: Any, declination: Any = 0.0) -> "BearingRay":
        """Builds the observation Coordinate first, so its errors surface unchanged."""
        return cls(Coordinate(latitude, longitude), bearing, declination)

    @property
    def latitude(self) -> float:
        return self.coordinate.latitude

    @property
    def longitude(self) -> float:
        return self.coordinate.longitude

    @property
    def latitude_rad(self) -> float:
        return self.coordinate.latitude_rad

    @property
    def longitude_rad(self) -> float:
        return self.coordinate.longitude_rad

    @property
    def true_bearing_rad(self) -> float:
        return math.radians(self.true_bearing)

    @property
    def true_bearing_normalized(self) -> float:
        return self.true_bearing % 360.0

    def __str__(self) -> str:
        return (
            f"BearingRay(latitude={self.latitude}, longitude={self.longitude}, "
            f"bearing={self.bearing}, declination={self.declination})"
        )
