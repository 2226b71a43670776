"""
Tests for the unit system and angle normalisation.
"""

import unittest
from math import inf, isnan, nan, pi

from greatcircle.config import TWO_PI
from greatcircle.geo import Latitude, Longitude
from greatcircle.unit import (
    Degree,
    Kilometer,
    Meter,
    Radian,
    negative_pi_to_pi,
    zero_to_two_pi,
)


class TestUnitFloat(unittest.TestCase):
    """Test SI conversion and family checks."""

    def test_si_storage(self):
        """Values are stored in SI."""
        self.assertEqual(float(Kilometer(2.5)), 2500.0)
        self.assertAlmostEqual(float(Degree(180)), pi)

    def test_conversion(self):
        """Test conversion between units of one family."""
        self.assertAlmostEqual(Meter(1500).to(Kilometer), 1.5)
        self.assertAlmostEqual(Radian(pi / 2).to(Degree), 90.0)
        self.assertIsInstance(Kilometer(1).as_unit(Meter), Meter)

    def test_same_family_arithmetic(self):
        """Units of the same family can be added and compared."""
        total = Meter(500) + Kilometer(1)
        self.assertIsInstance(total, Meter)
        self.assertEqual(float(total), 1500.0)
        self.assertTrue(Kilometer(1) > Meter(999))
        self.assertEqual(Meter(1000), Kilometer(1))

    def test_plain_numbers_are_si(self):
        """Plain numbers combine with units as SI scalars."""
        self.assertEqual(Meter(5), 5.0)
        self.assertEqual(float(Meter(5) + 2), 7.0)
        self.assertEqual(float(Kilometer(2) * 3), 6000.0)
        self.assertEqual(float(-Meter(4)), -4.0)

    def test_mixing_families_raises(self):
        """Angles and lengths cannot be combined."""
        with self.assertRaises(TypeError):
            Meter(1) + Radian(1)
        with self.assertRaises(TypeError):
            Degree(10) < Kilometer(1)
        with self.assertRaises(TypeError):
            Latitude(10) + Longitude(10)

    def test_scaling_by_unit_raises(self):
        """Units only scale by plain numbers."""
        with self.assertRaises(TypeError):
            Meter(2) * Meter(3)

    def test_subtraction(self):
        """Units of the same family can be subtracted from each other and from numbers."""
        difference = Kilometer(1) - Meter(250)
        self.assertIsInstance(difference, Kilometer)
        self.assertEqual(float(difference), 750.0)
        reversed_difference = 1000 - Meter(250)
        self.assertIsInstance(reversed_difference, Meter)
        self.assertEqual(float(reversed_difference), 750.0)
        with self.assertRaises(TypeError):
            Meter(1) - Radian(1)
        with self.assertRaises(TypeError):
            Radian(1).__rsub__(Meter(1))

    def test_division(self):
        """Units divide by plain numbers only."""
        half = Kilometer(3) / 2
        self.assertIsInstance(half, Kilometer)
        self.assertEqual(float(half), 1500.0)
        with self.assertRaises(TypeError):
            Meter(6) / Meter(2)
        with self.assertRaises(TypeError):
            Meter(6) / "2"

    def test_ordering(self):
        """Ordering works within a family and raises across families."""
        self.assertTrue(Meter(1000) <= Kilometer(1))
        self.assertTrue(Meter(999) <= Kilometer(1))
        self.assertFalse(Meter(1001) <= Kilometer(1))
        self.assertTrue(Kilometer(1) >= Meter(1000))
        self.assertFalse(Degree(1) >= Radian(1))
        self.assertTrue(Radian(1) >= 0.5)
        with self.assertRaises(TypeError):
            Meter(1) <= Radian(1)
        with self.assertRaises(TypeError):
            Meter(1) >= Radian(1)

    def test_equality_across_families(self):
        """Different families compare unequal instead of raising."""
        self.assertFalse(Meter(1) == Radian(1))
        self.assertTrue(Meter(1) != Radian(1))
        self.assertFalse(Latitude(10) == Degree(10))
        self.assertTrue(Latitude(10) != Longitude(10))
        self.assertNotIn(Radian(1), {Meter(1): "a"})

    def test_inequality(self):
        """!= compares SI values within a family and against numbers."""
        self.assertFalse(Meter(1000) != Kilometer(1))
        self.assertTrue(Meter(999) != Kilometer(1))
        self.assertFalse(Meter(5) != 5.0)
        self.assertTrue(Meter(5) != "5")

    def test_hashable(self):
        """Units can be used as dict keys."""
        self.assertEqual({Meter(1): "a"}[Meter(1)], "a")

    def test_str(self):
        """String form uses the native scale and symbol."""
        self.assertEqual(str(Kilometer(2)), "2.0 km")
        self.assertEqual(str(Meter(3)), "3.0 m")


class TestZeroToTwoPi(unittest.TestCase):
    """Test zero_to_two_pi."""

    def test_in_range_unchanged(self):
        """Angles in [0, 2π) are returned unchanged."""
        for angle in (0.0, 1.0, pi, 6.0):
            self.assertEqual(zero_to_two_pi(angle), angle)

    def test_negative_angles(self):
        """Negative angles wrap to the top of the range."""
        self.assertAlmostEqual(zero_to_two_pi(-pi / 2), 3 * pi / 2)
        self.assertAlmostEqual(zero_to_two_pi(-pi), pi)

    def test_large_angles(self):
        """Angles beyond one turn wrap around."""
        self.assertAlmostEqual(zero_to_two_pi(5 * pi), pi)
        self.assertAlmostEqual(zero_to_two_pi(-7 * pi / 2), pi / 2)

    def test_full_turn_is_zero(self):
        """2π itself maps to 0."""
        self.assertEqual(zero_to_two_pi(TWO_PI), 0.0)

    def test_tiny_negative_stays_below_two_pi(self):
        """A tiny negative angle never rounds up to 2π."""
        for angle in (-1e-18, -1e-300, -5e-324):
            result = zero_to_two_pi(angle)
            self.assertGreaterEqual(result, 0.0)
            self.assertLess(result, TWO_PI)

    def test_non_finite(self):
        """NaN and infinities give NaN."""
        self.assertTrue(isnan(zero_to_two_pi(nan)))
        self.assertTrue(isnan(zero_to_two_pi(inf)))

    def test_accepts_units(self):
        """Degree instances are normalised in radians."""
        self.assertAlmostEqual(zero_to_two_pi(Degree(-90)), 3 * pi / 2)


class TestNegativePiToPi(unittest.TestCase):
    """Test negative_pi_to_pi."""

    def test_in_range_unchanged(self):
        """Angles in [-π, π] are returned unchanged, including both ends."""
        for angle in (-pi, -1.0, 0.0, 2.0, pi):
            self.assertEqual(negative_pi_to_pi(angle), angle)

    def test_wraps_past_antimeridian(self):
        """Longitudes past ±π come back on the other side."""
        self.assertAlmostEqual(negative_pi_to_pi(pi + 0.1), -pi + 0.1)
        self.assertAlmostEqual(negative_pi_to_pi(-pi - 0.1), pi - 0.1)
        self.assertAlmostEqual(negative_pi_to_pi(3 * pi / 2), -pi / 2)

    def test_multiple_turns(self):
        """Several turns are removed."""
        self.assertAlmostEqual(negative_pi_to_pi(4 * pi + 0.5), 0.5)


if __name__ == "__main__":
    unittest.main()
