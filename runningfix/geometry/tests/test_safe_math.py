# runningfix/geometry/tests/test_safe_math.py
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.insert(0, str(project_root))

import math
import unittest
from runningfix.geometry.utils.safe_math import asin_safe, acos_safe, euclidean_modulo


class TestClampedInverseTrig(unittest.TestCase):
    def test_asin_in_domain(self):
        """Values inside [-1, 1] match math.asin"""
        for x in (-1.0, -0.5, 0.0, 0.3, 1.0):
            self.assertEqual(asin_safe(x), math.asin(x))

    def test_asin_overshoot_is_clamped(self):
        """Rounding overshoot past +/-1 does not raise"""
        self.assertEqual(asin_safe(1.0000000000000002), math.pi / 2)
        self.assertEqual(asin_safe(-1.0000000000000002), -math.pi / 2)

    def test_acos_overshoot_is_clamped(self):
        self.assertEqual(acos_safe(1.0000000000000002), 0.0)
        self.assertEqual(acos_safe(-1.5), math.pi)

    def test_unclamped_would_raise(self):
        """Sanity check that the math module rejects the same inputs"""
        with self.assertRaises(ValueError):
            math.asin(1.0000000000000002)
        with self.assertRaises(ValueError):
            math.acos(-1.5)


class TestEuclideanModulo(unittest.TestCase):
    def test_follows_divisor_sign(self):
        self.assertEqual(euclidean_modulo(-1.0, 3.0), 2.0)
        self.assertEqual(euclidean_modulo(5.0, -3.0), -1.0)
        self.assertEqual(euclidean_modulo(7.0, 3.0), 1.0)

    def test_differs_from_fmod_for_negative_dividend(self):
        self.assertEqual(math.fmod(-1.0, 3.0), -1.0)
        self.assertNotEqual(euclidean_modulo(-1.0, 3.0), math.fmod(-1.0, 3.0))

    def test_angle_wraparound(self):
        """Wrapping an angle into [-pi, pi) the way the intersection solver does"""
        wrap = lambda a: euclidean_modulo(a + math.pi, 2 * math.pi) - math.pi
        self.assertAlmostEqual(wrap(3 * math.pi / 2), -math.pi / 2)
        self.assertAlmostEqual(wrap(-3 * math.pi / 2), math.pi / 2)
        self.assertAlmostEqual(wrap(0.25), 0.25)


if __name__ == '__main__':
    unittest.main()
