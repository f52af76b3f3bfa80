# runningfix/fix_finder/config.py
from dataclasses import dataclass


@dataclass
class FixFinderConfig:
    """Configuration for loading bearing records and fixing all pairs."""
    delimiter: str = ","
    comment_prefix: str = "#"
    # In strict mode a bad record aborts the load instead of being skipped.
    strict: bool = False
    ray_length_km: float = 25.0
    map_zoom_start: int = 11
