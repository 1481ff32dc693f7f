"""
Tests for angle conversion and normalization.
"""

import math
import unittest

import numpy as np

from latlng.angle import from_radian, normalize_absolute, normalize_relative, to_radian


class TestConversion(unittest.TestCase):
    """Test degree/radian conversion."""

    def test_known_values(self):
        """Test conversion of landmark angles."""
        self.assertAlmostEqual(to_radian(180.0), math.pi)
        self.assertAlmostEqual(to_radian(90.0), math.pi / 2)
        self.assertAlmostEqual(to_radian(-45.0), -math.pi / 4)
        self.assertAlmostEqual(from_radian(math.pi), 180.0)
        self.assertAlmostEqual(from_radian(math.pi / 3), 60.0)
        self.assertEqual(to_radian(0.0), 0.0)

    def test_round_trip(self):
        """Test that converting to radians and back returns the input."""
        rng = np.random.default_rng(42)
        for deg in rng.uniform(-720.0, 720.0, size=200):
            deg = float(deg)
            self.assertAlmostEqual(from_radian(to_radian(deg)), deg, places=9)

    def test_int_input_gives_float(self):
        """Test that integer input is computed as a Python float."""
        self.assertIsInstance(to_radian(180), float)
        self.assertIsInstance(from_radian(1), float)

    def test_precision_is_preserved(self):
        """Test that NumPy scalars keep their precision."""
        rad = to_radian(np.float32(90.0))
        self.assertIsInstance(rad, np.float32)
        self.assertAlmostEqual(float(rad), math.pi / 2, places=6)
        self.assertIsInstance(from_radian(np.float32(1.0)), np.float32)
        self.assertIsInstance(to_radian(np.float64(1.0)), np.float64)

    def test_non_finite_propagates(self):
        """Test that NaN and infinity pass through conversion."""
        self.assertTrue(math.isnan(to_radian(math.nan)))
        self.assertTrue(math.isnan(from_radian(math.nan)))
        self.assertEqual(to_radian(math.inf), math.inf)
        self.assertEqual(from_radian(-math.inf), -math.inf)


class TestNormalizeRelative(unittest.TestCase):
    """Test wrapping into [-180, 180)."""

    def test_known_values(self):
        """Test wrapping of representative angles."""
        cases = {
            0.0: 0.0,
            179.5: 179.5,
            180.0: -180.0,
            -180.0: -180.0,
            190.0: -170.0,
            -190.0: 170.0,
            360.0: 0.0,
            540.0: -180.0,
            -540.0: -180.0,
            725.0: 5.0,
        }
        for deg, expected in cases.items():
            with self.subTest(deg=deg):
                self.assertAlmostEqual(normalize_relative(deg), expected)

    def test_range_and_congruence(self):
        """Test that results are in range and congruent modulo 360."""
        rng = np.random.default_rng(7)
        for deg in rng.uniform(-1e6, 1e6, size=500):
            deg = float(deg)
            result = normalize_relative(deg)
            self.assertGreaterEqual(result, -180.0)
            self.assertLess(result, 180.0)
            turns = (deg - result) / 360.0
            self.assertAlmostEqual(turns, round(turns), places=6)

    def test_nan_is_returned(self):
        """Test that NaN comes back as NaN."""
        self.assertTrue(math.isnan(normalize_relative(math.nan)))
        self.assertTrue(np.isnan(normalize_relative(np.float32("nan"))))

    def test_large_magnitude_returns_zero(self):
        """Test the escape for magnitudes beyond the normalization limit."""
        self.assertEqual(normalize_relative(2e9), 0.0)
        self.assertEqual(normalize_relative(-2e9), 0.0)
        self.assertEqual(normalize_relative(math.inf), 0.0)
        self.assertEqual(normalize_relative(-math.inf), 0.0)

    def test_limit_is_inclusive(self):
        """Test that the limit itself is still normalized."""
        result = normalize_relative(1e9)
        self.assertGreaterEqual(result, -180.0)
        self.assertLess(result, 180.0)
        self.assertAlmostEqual(result, -80.0)

    def test_large_magnitude_is_logged(self):
        """Test that the escape emits a debug record."""
        with self.assertLogs("latlng.angle", level="DEBUG"):
            normalize_relative(5e12)

    def test_single_precision(self):
        """Test that single precision input stays single precision."""
        result = normalize_relative(np.float32(370.0))
        self.assertIsInstance(result, np.float32)
        self.assertAlmostEqual(float(result), 10.0, places=4)
        self.assertIsInstance(normalize_relative(np.float32(3e9)), np.float32)


class TestNormalizeAbsolute(unittest.TestCase):
    """Test wrapping into [0, 360)."""

    def test_known_values(self):
        """Test wrapping of representative angles."""
        cases = {
            0.0: 0.0,
            359.5: 359.5,
            360.0: 0.0,
            -90.0: 270.0,
            -360.0: 0.0,
            450.0: 90.0,
            -450.0: 270.0,
            1080.0: 0.0,
        }
        for deg, expected in cases.items():
            with self.subTest(deg=deg):
                self.assertAlmostEqual(normalize_absolute(deg), expected)

    def test_range_and_congruence(self):
        """Test that results are in range and congruent modulo 360."""
        rng = np.random.default_rng(11)
        for deg in rng.uniform(-1e6, 1e6, size=500):
            deg = float(deg)
            result = normalize_absolute(deg)
            self.assertGreaterEqual(result, 0.0)
            self.assertLess(result, 360.0)
            turns = (deg - result) / 360.0
            self.assertAlmostEqual(turns, round(turns), places=6)

    def test_tiny_negative_stays_below_full_turn(self):
        """Test that a remainder rounding up to 360 wraps to 0."""
        result = normalize_absolute(-1e-20)
        self.assertGreaterEqual(result, 0.0)
        self.assertLess(result, 360.0)

    def test_nan_is_returned(self):
        """Test that NaN comes back as NaN."""
        self.assertTrue(math.isnan(normalize_absolute(math.nan)))

    def test_large_magnitude_returns_zero(self):
        """Test the escape for magnitudes beyond the normalization limit."""
        self.assertEqual(normalize_absolute(-2e9), 0.0)
        self.assertEqual(normalize_absolute(2e9), 0.0)
        self.assertEqual(normalize_absolute(math.inf), 0.0)

    def test_single_precision(self):
        """Test that single precision input stays single precision."""
        result = normalize_absolute(np.float32(-10.0))
        self.assertIsInstance(result, np.float32)
        self.assertAlmostEqual(float(result), 350.0, places=4)


if __name__ == '__main__':
    unittest.main()
