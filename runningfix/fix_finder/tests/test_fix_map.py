# runningfix/fix_finder/tests/test_fix_map.py
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.insert(0, str(project_root))

import unittest
import folium
from runningfix.fix_finder.core import FixFinder
from runningfix.fix_finder.data_models import FixReport
from runningfix.fix_finder.visualization import FixMapVisualizer
from runningfix.geometry.data_models import BearingRay


class TestFixMapVisualizer(unittest.TestCase):
    def setUp(self):
        self.visualizer = FixMapVisualizer()
        self.report = FixFinder().find_fixes([
            BearingRay.from_degrees(37.86203, -119.43397, 122.9),
            BearingRay.from_degrees(37.87366, -119.38145, 216.5),
        ])

    def test_map_contains_rays_and_fixes(self):
        fix_map = self.visualizer.create_fix_map(self.report)
        self.assertIsInstance(fix_map, folium.Map)
        html = fix_map.get_root().render()
        self.assertIn("Bearing Rays", html)
        self.assertIn("Pairwise Fixes", html)
        self.assertIn("Fix 0 x 1", html)
        self.assertIn("Mean Fix", html)

    def test_map_centered_on_mean_fix(self):
        fix_map = self.visualizer.create_fix_map(self.report)
        centroid = self.report.centroid()
        self.assertEqual(list(fix_map.location), [centroid.latitude, centroid.longitude])

    def test_map_without_fixes(self):
        report = FixFinder().find_fixes([
            BearingRay.from_degrees(10.0, 20.0, 0.0),
            BearingRay.from_degrees(30.0, 20.0, 0.0),
        ])
        fix_map = self.visualizer.create_fix_map(report)
        self.assertEqual(list(fix_map.location), [20.0, 20.0])
        self.assertNotIn("Mean Fix", fix_map.get_root().render())

    def test_empty_report(self):
        fix_map = self.visualizer.create_fix_map(FixReport(rays=[]))
        self.assertEqual(list(fix_map.location), [0.0, 0.0])


if __name__ == '__main__':
    unittest.main()
