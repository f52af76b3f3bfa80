# runningfix/geometry/exceptions.py
from typing import Any


class GeometryError(Exception):
    """Base exception for all geometry engine errors."""
    pass


class ValidationError(GeometryError):
    """Raised when a coordinate or bearing input is unusable."""
    pass


class TypeConversionError(ValidationError):
    """Raised when an input cannot be converted to a real number."""
    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"{field.capitalize()} must be an int or float, got {value!r}")


class RangeError(ValidationError):
    """Raised when a numeric input falls outside its valid interval."""
    def __init__(self, field: str, value: float, lower: float, upper: float):
        """
        Args:
            field: Name of the offending input, e.g. "latitude".
            lower, upper: The inclusive valid bounds.
        """
        self.field = field
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"{field.capitalize()} must be between {lower:g} and {upper:g} degrees, got {value}."
        )


class IntersectionError(GeometryError):
    """Base for bearing pairs that have no unique crossing point."""
    pass


class SamePointError(IntersectionError):
    """Both bearings were taken from the same position."""
    pass


class CoincidentPointsError(IntersectionError):
    """The observation points are zero distance apart."""
    pass


class InfiniteIntersectionsError(IntersectionError):
    """The bearings run along the same great circle."""
    pass
