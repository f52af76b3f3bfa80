# runningfix/fix_finder/tests/test_bearing_loader.py
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.insert(0, str(project_root))

import os
import tempfile
import unittest
from runningfix.fix_finder.config import FixFinderConfig
from runningfix.fix_finder.exceptions import RecordFormatError
from runningfix.fix_finder.loader import BearingLoader
from runningfix.geometry.data_models import BearingRay


class TestBearingLoader(unittest.TestCase):
    def setUp(self):
        self.loader = BearingLoader()
        self.strict_loader = BearingLoader(FixFinderConfig(strict=True))

    def test_three_and_four_field_records(self):
        rays = self.loader.parse_records([
            "37.86203,-119.43397,122.9",
            "37.87366, -119.38145, 216.5, 13.0",
        ])
        self.assertEqual(rays, [
            BearingRay.from_degrees(37.86203, -119.43397, 122.9),
            BearingRay.from_degrees(37.87366, -119.38145, 216.5, 13.0),
        ])
        self.assertEqual(rays[1].true_bearing, 229.5)

    def test_skips_header_comments_and_blank_lines(self):
        rays = self.loader.parse_records([
            "latitude,longitude,bearing,declination",
            "# Half Dome survey",
            "",
            "37.86203,-119.43397,122.9",
            "   ",
        ])
        self.assertEqual(len(rays), 1)

    def test_lenient_mode_skips_bad_records(self):
        with self.assertLogs(level="WARNING") as logs:
            rays = self.loader.parse_records([
                "37.86203,-119.43397,122.9",
                "37.87366,-119.38145",
                "95.0,-119.38145,216.5",
                "37.87366,-119.38145,216.5",
            ])
        self.assertEqual(len(rays), 2)
        self.assertEqual(len(logs.records), 2)
        self.assertIn("Line 2", logs.output[0])
        self.assertIn("Line 3", logs.output[1])

    def test_strict_mode_raises_with_line_number(self):
        with self.assertRaises(RecordFormatError) as ctx:
            self.strict_loader.parse_records([
                "37.86203,-119.43397,122.9",
                "37.87366,-119.38145,216.5,13.0,99",
            ])
        self.assertEqual(ctx.exception.line_number, 2)

    def test_strict_mode_wraps_validation_errors(self):
        with self.assertRaises(RecordFormatError) as ctx:
            self.strict_loader.parse_records(["37.86203,-119.43397,400"])
        self.assertIn("Bearing", str(ctx.exception))

    def test_non_numeric_after_data_is_an_error(self):
        with self.assertRaises(RecordFormatError):
            self.strict_loader.parse_records([
                "37.86203,-119.43397,122.9",
                "north,west,up",
            ])

    def test_custom_delimiter(self):
        loader = BearingLoader(FixFinderConfig(delimiter=";"))
        rays = loader.parse_records(["37.86203;-119.43397;122.9;-2"])
        self.assertEqual(rays[0].declination, -2.0)

    def test_load_from_file(self):
        fd, path = tempfile.mkstemp(suffix=".csv")
        try:
            with os.fdopen(fd, "w") as f:
                f.write("lat,lon,bearing\n37.86203,-119.43397,122.9\n37.87366,-119.38145,216.5\n")
            rays = self.loader.load(path)
        finally:
            os.remove(path)
        self.assertEqual(len(rays), 2)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            self.loader.load(os.path.join(tempfile.gettempdir(), "no_such_bearings_file.csv"))


if __name__ == '__main__':
    unittest.main()
