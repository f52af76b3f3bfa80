"""
RunningFix - Fix Finder Module
Loads bearing observations from delimited text and intersects every pair
of them, reporting each fix or the reason a pair has none.
"""

from .core import FixFinder
from .config import FixFinderConfig
from .data_models import PairResult, FixReport
from .loader import BearingLoader
from .exceptions import FixFinderError, RecordFormatError

__all__ = [
    "FixFinder",
    "FixFinderConfig",
    "PairResult",
    "FixReport",
    "BearingLoader",
    "FixFinderError",
    "RecordFormatError"
]
