# runningfix/fix_finder/core.py
"""
The batch orchestrator: intersects every unordered pair of bearing rays and
collects the fixes, or the reason a pair has none, into a FixReport.
"""
import itertools
import logging
import time
from typing import Any, Dict, Optional, Sequence

from ..geometry.core import find_intersection, haversine_distance_km
from ..geometry.data_models import BearingRay
from ..geometry.exceptions import GeometryError
from .config import FixFinderConfig
from .data_models import FixReport, PairResult
from .exceptions import FixFinderError
from .loader import BearingLoader


class FixFinder:
    """Finds a position fix for every pair of bearing observations."""

    def __init__(self, config: Optional[FixFinderConfig] = None):
        self.config = config or FixFinderConfig()
        self.loader = BearingLoader(self.config)
        logging.info("FixFinder initialized.")

    def find_fixes(self, rays: Sequence[BearingRay]) -> FixReport:
        """
        Intersects all pairs (i < j). A pair that has no unique crossing
        point is recorded with its error and the batch continues.
        """
        rays = list(rays)
        report = FixReport(rays=rays)
        start = time.perf_counter()

        for (i, first), (j, second) in itertools.combinations(enumerate(rays), 2):
            result = PairResult(
                first_index=i,
                second_index=j,
                first=first,
                second=second,
                baseline_km=haversine_distance_km(first, second)
            )
            try:
                result.fix = find_intersection(first, second)
            except GeometryError as e:
                result.error_type = type(e).__name__
                result.error_message = str(e)
                logging.debug(f"No fix for pair ({i}, {j}): {result.error_type}: {e}")
            report.pair_results.append(result)

        report.elapsed_seconds = time.perf_counter() - start
        logging.info(
            f"Processed {report.pairs_processed} pairs, found {report.fixes_found} fixes "
            f"in {report.elapsed_seconds:.6f}s."
        )
        return report

    def run(self, path: str) -> Dict[str, Any]:
        """Loads bearings from `path` and fixes all pairs, as a standard response."""
        try:
            rays = self.loader.load(path)
            report = self.find_fixes(rays)
            return self._format_response(
                success=True,
                message=f"{report.fixes_found} fixes from {report.pairs_processed} bearing pairs",
                data={
                    "source": path,
                    "summary": report.summary(),
                    "report": report
                }
            )
        except (FixFinderError, OSError) as e:
            logging.error(f"Fix finding failed for {path}: {e}")
            return self._format_response(
                success=False,
                message=str(e),
                data={
                    "source": path,
                    "error_type": type(e).__name__
                }
            )

    def _format_response(self, success: bool, message: str, data: Dict) -> Dict[str, Any]:
        """Standardized response."""
        return {
            "module": "fix_finder",
            "success": success,
            "message": message,
            "data": data,
            "timestamp": time.time()
        }
