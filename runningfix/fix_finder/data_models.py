# runningfix/fix_finder/data_models.py
"""
Result structures produced by the FixFinder.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np

from ..geometry.data_models import BearingRay, Coordinate


@dataclass
class PairResult:
    """The outcome of intersecting one unordered pair of bearing rays."""
    first_index: int
    second_index: int
    first: BearingRay
    second: BearingRay
    baseline_km: float
    fix: Optional[Coordinate] = None
    error_type: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.fix is not None


@dataclass
class FixReport:
    """All pairwise results from one batch, with counts and timing."""
    rays: List[BearingRay]
    pair_results: List[PairResult] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def pairs_processed(self) -> int:
        return len(self.pair_results)

    @property
    def fixes(self) -> List[Coordinate]:
        return [result.fix for result in self.pair_results if result.success]

    @property
    def fixes_found(self) -> int:
        return len(self.fixes)

    @property
    def failures(self) -> List[PairResult]:
        return [result for result in self.pair_results if not result.success]

    def centroid(self) -> Optional[Coordinate]:
        """
        Spherical mean of every fix: the centre of the 'cocked hat' formed
        when three or more bearings do not meet in a single point.
        Returns None when there are no fixes or they cancel out exactly.
        """
        fixes = self.fixes
        if not fixes:
            return None
        lat = np.radians([f.latitude for f in fixes])
        lon = np.radians([f.longitude for f in fixes])
        vectors = np.column_stack((np.cos(lat) * np.cos(lon), np.cos(lat) * np.sin(lon), np.sin(lat)))
        x, y, z = vectors.mean(axis=0)
        norm = np.sqrt(x**2 + y**2 + z**2)
        if norm == 0:
            return None
        mean_lat = np.degrees(np.arcsin(np.clip(z / norm, -1.0, 1.0)))
        mean_lon = np.degrees(np.arctan2(y, x))
        return Coordinate(round(float(mean_lat), 5), round(float(mean_lon), 5))

    def summary(self) -> Dict[str, Any]:
        centroid = self.centroid()
        return {
            "rays": len(self.rays),
            "pairs_processed": self.pairs_processed,
            "fixes_found": self.fixes_found,
            "failures": len(self.failures),
            "elapsed_seconds": self.elapsed_seconds,
            "centroid": (centroid.latitude, centroid.longitude) if centroid else None,
        }
