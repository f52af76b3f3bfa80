# runningfix/geometry/constants.py
"""
Static constants for the spherical geometry engine.
"""


class GeoConstants:
    """Earth model, rounding and validity bounds shared by the engine."""

    EARTH_RADIUS_KM: float = 6371.0

    # Intersection results are rounded to this many decimal places (~1 m).
    INTERSECTION_DECIMALS = 5

    # |sin(angle)| at or below this counts as zero when testing for parallel rays.
    PARALLEL_SINE_TOLERANCE: float = 1e-12

    LATITUDE_BOUNDS = (-90.0, 90.0)
    LONGITUDE_BOUNDS = (-180.0, 180.0)
    BEARING_BOUNDS = (0.0, 360.0)
    DECLINATION_BOUNDS = (-180.0, 180.0)
