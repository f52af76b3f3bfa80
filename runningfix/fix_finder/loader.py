# runningfix/fix_finder/loader.py
"""
Reads bearing observations from delimited text.

Each record holds three or four numeric fields:
    latitude, longitude, bearing[, declination]
Blank lines and comment lines are ignored, and a non-numeric first record
is treated as a header.
"""
import csv
import logging
from typing import Iterable, List, Optional

from ..geometry.data_models import BearingRay
from ..geometry.exceptions import ValidationError
from .config import FixFinderConfig
from .exceptions import RecordFormatError


def _is_number(text: str) -> bool:
    try:
        float(text)
        return True
    except ValueError:
        return False


class BearingLoader:
    """Turns delimited bearing records into validated BearingRay objects."""

    def __init__(self, config: Optional[FixFinderConfig] = None):
        self.config = config or FixFinderConfig()
        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    def load(self, path: str) -> List[BearingRay]:
        """Loads every valid record in the file at `path`."""
        with open(path, 'r', newline='') as f:
            rays = self.parse_records(f)
        logging.info(f"Loaded {len(rays)} bearing rays from {path}")
        return rays

    def parse_records(self, lines: Iterable[str]) -> List[BearingRay]:
        rays = []
        seen_data = False
        reader = csv.reader(lines, delimiter=self.config.delimiter, skipinitialspace=True)
        for row in reader:
            line_number = reader.line_num
            fields = [value.strip() for value in row]
            if not any(fields) or fields[0].startswith(self.config.comment_prefix):
                continue
            if not seen_data and not any(_is_number(value) for value in fields):
                logging.debug(f"Skipping header on line {line_number}: {fields}")
                seen_data = True
                continue
            seen_data = True

            try:
                rays.append(self._parse_fields(fields, line_number))
            except RecordFormatError as e:
                if self.config.strict:
                    raise
                logging.warning(f"Skipping record: {e}")
        return rays

    def _parse_fields(self, fields: List[str], line_number: int) -> BearingRay:
        if len(fields) not in (3, 4):
            raise RecordFormatError(
                f"expected 3 or 4 fields (latitude, longitude, bearing[, declination]), got {len(fields)}",
                line_number
            )
        try:
            return BearingRay.from_degrees(*fields)
        except ValidationError as e:
            raise RecordFormatError(str(e), line_number) from e
