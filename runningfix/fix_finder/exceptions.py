# runningfix/fix_finder/exceptions.py
from typing import Optional


class FixFinderError(Exception):
    """Base exception for batch fix finding errors."""
    pass


class RecordFormatError(FixFinderError):
    """Raised when a bearing record cannot be turned into a BearingRay."""
    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)
