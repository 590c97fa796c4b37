"""
Tests for geometry
"""
import math
import unittest

from sacformat.core import geometry

TOL = 1e-4


class TestConversions(unittest.TestCase):

    def test_degrees_radians(self):
        self.assertEqual(geometry.degrees_to_radians(0.0), 0.0)
        self.assertAlmostEqual(geometry.degrees_to_radians(180.0), math.pi)
        self.assertAlmostEqual(geometry.degrees_to_radians(-90.0),
                               -math.pi / 2)
        self.assertAlmostEqual(geometry.radians_to_degrees(math.pi), 180.0)
        self.assertAlmostEqual(geometry.radians_to_degrees(-math.pi / 2),
                               -90.0)


class TestLimits(unittest.TestCase):

    def test_limit_360_no_adjustment(self):
        for x in (0, -0, 90, 180, 270, 360):
            self.assertEqual(geometry.limit_360(x), x)

    def test_limit_360_negatives(self):
        self.assertEqual(geometry.limit_360(-180), 180)
        self.assertEqual(geometry.limit_360(-270), 90)
        self.assertEqual(geometry.limit_360(-90), 270)

    def test_limit_360_loops(self):
        self.assertEqual(geometry.limit_360(361), 1)
        self.assertEqual(geometry.limit_360(-361), 359)
        self.assertEqual(geometry.limit_360(-450), 270)
        self.assertEqual(geometry.limit_360(720), 360)
        self.assertEqual(geometry.limit_360(-720), 0)
        self.assertEqual(geometry.limit_360(10 * 360 + 10), 10)
        self.assertEqual(geometry.limit_360(-7 * 360 - 10), 350)
        self.assertEqual(geometry.limit_360(-3 * 360 - 180), 180)

    def test_limit_180(self):
        for x in (0, 90, 180, -10, -90, -179):
            self.assertEqual(geometry.limit_180(x), x)
        self.assertEqual(geometry.limit_180(360), 0)
        self.assertEqual(geometry.limit_180(270), -90)
        self.assertEqual(geometry.limit_180(181), -179)
        self.assertEqual(geometry.limit_180(-180), 180)
        self.assertEqual(geometry.limit_180(-360), 0)
        self.assertEqual(geometry.limit_180(-270), 90)
        self.assertEqual(geometry.limit_180(2 * 360 - 180), 180)
        self.assertEqual(geometry.limit_180(-7 * 360 - 10), -10)

    def test_limit_90(self):
        for x in (0, 90, 45, -90, -45, -74):
            self.assertEqual(geometry.limit_90(x), x)
        self.assertEqual(geometry.limit_90(180), 0)
        self.assertEqual(geometry.limit_90(91), 89)
        self.assertEqual(geometry.limit_90(135), 45)
        self.assertEqual(geometry.limit_90(360), 0)
        self.assertEqual(geometry.limit_90(270), -90)
        self.assertEqual(geometry.limit_90(-180), 0)
        self.assertEqual(geometry.limit_90(-91), -89)
        self.assertEqual(geometry.limit_90(-135), -45)
        self.assertEqual(geometry.limit_90(-270), 90)
        self.assertEqual(geometry.limit_90(-360), 0)

    def test_in_range_values_are_untouched(self):
        self.assertEqual(geometry.limit_90(-81.35), -81.35)
        self.assertEqual(geometry.limit_180(-118.155), -118.155)


class TestGreatCircle(unittest.TestCase):

    def test_same_point(self):
        for lat, lon in ((0, 0), (90, 0), (-90, 0), (0, 180), (0, -180)):
            self.assertAlmostEqual(geometry.gcarc(lat, lon, lat, lon), 0,
                                   delta=TOL)
            self.assertAlmostEqual(geometry.azimuth(lat, lon, lat, lon), 0,
                                   delta=TOL)

    def test_equator_to_north_pole(self):
        self.assertAlmostEqual(geometry.gcarc(0, 0, 90, 0), 90, delta=TOL)
        self.assertAlmostEqual(geometry.azimuth(0, 0, 90, 0), 0, delta=TOL)
        self.assertAlmostEqual(geometry.azimuth(90, 0, 0, 0), 180, delta=TOL)

    def test_equator_to_south_pole(self):
        self.assertAlmostEqual(geometry.gcarc(0, 0, -90, 0), 90, delta=TOL)
        self.assertAlmostEqual(geometry.azimuth(0, 0, -90, 0), 180,
                               delta=TOL)
        self.assertAlmostEqual(geometry.azimuth(-90, 0, 0, 0), 0, delta=TOL)

    def test_pole_to_pole(self):
        self.assertAlmostEqual(geometry.gcarc(90, 0, -90, 0), 180, delta=TOL)
        self.assertAlmostEqual(geometry.gcarc(-90, 0, 90, 0), 180, delta=TOL)
        self.assertAlmostEqual(geometry.azimuth(90, 0, -90, 0), 180,
                               delta=TOL)
        self.assertAlmostEqual(geometry.azimuth(-90, 0, 90, 0), 0, delta=TOL)

    def test_over_north_pole(self):
        self.assertAlmostEqual(geometry.gcarc(70, 0, 70, 180), 40, delta=TOL)
        self.assertAlmostEqual(geometry.azimuth(70, 0, 70, 180), 0,
                               delta=TOL)
        self.assertAlmostEqual(geometry.azimuth(70, 180, 70, 0), 360,
                               delta=TOL)

    def test_over_south_pole(self):
        self.assertAlmostEqual(geometry.gcarc(-65, 90, -65, -90), 50,
                               delta=TOL)
        self.assertAlmostEqual(geometry.azimuth(-65, 90, -65, -90), 180,
                               delta=TOL)
        self.assertAlmostEqual(geometry.azimuth(-65, -90, -65, 90), 180,
                               delta=TOL)

    def test_along_equator(self):
        self.assertAlmostEqual(geometry.gcarc(0, 0, 0, 90), 90, delta=TOL)
        self.assertAlmostEqual(geometry.azimuth(0, 0, 0, 90), 90, delta=TOL)
        self.assertAlmostEqual(geometry.azimuth(0, 90, 0, 0), 270, delta=TOL)
        self.assertAlmostEqual(geometry.gcarc(0, 30, 0, 70), 40, delta=TOL)
        self.assertAlmostEqual(geometry.gcarc(0, 90, 0, -90), 180, delta=TOL)
        self.assertAlmostEqual(geometry.azimuth(0, 90, 0, -90), 270,
                               delta=TOL)
        self.assertAlmostEqual(geometry.azimuth(0, -90, 0, 90), 90,
                               delta=TOL)

    def test_real_locations(self):
        """
        Station and event of a recorded SAC file
        """
        self.assertAlmostEqual(
            geometry.great_circle_distance(38.4328, -118.155,
                                           36.801, -121.323),
            2.99645, delta=5e-3)
        self.assertAlmostEqual(
            geometry.azimuth(36.801, -121.323, 38.4328, -118.155),
            56.1169, delta=0.2)
        self.assertAlmostEqual(
            geometry.azimuth(38.4328, -118.155, 36.801, -121.323),
            238.043, delta=0.2)


if __name__ == "__main__":
    unittest.main()
