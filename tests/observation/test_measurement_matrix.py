#!/usr/bin/env python3
"""Test suite for DF measurement matrices"""

import unittest
from unittest import mock
import numpy as np
from dfgeo.coordinate.geodetic import lla2ecef, geodetic_jacobian
from dfgeo.coordinate.rotation import antenna_from_ecef_chain
from dfgeo.core.data_structures import (
    AntennaMounting, BodyAttitude, EcefPosition, GeodeticPosition, LineOfSight
)
from dfgeo.observation.measurement_model import (
    relative_position, line_of_sight, azimuth, elevation, aoa
)
from dfgeo.observation.measurement_matrix import (
    MeasurementType, los_projection,
    azimuth_measurement, elevation_measurement, aoa_measurement,
    measurement_matrix, stack_measurements,
)


class MeasurementFixture(unittest.TestCase):
    """Platform at 3 km looking east, target ahead on the surface"""

    def setUp(self):
        self.origin_pos = GeodeticPosition(0.2, 0.3, 3000.0)
        self.origin = lla2ecef(self.origin_pos)
        self.body = BodyAttitude()
        self.antenna = AntennaMounting(alpha=np.pi / 2)
        self.target = GeodeticPosition(0.21, 0.303, 0.0)
        self.args = (self.origin, self.origin_pos, self.body, self.antenna, self.target)

    def angle_at(self, func, target_ecef):
        relative = EcefPosition.from_array(target_ecef - self.origin.to_array())
        return func(line_of_sight(self.origin_pos, self.body, self.antenna, relative))

    def directional_derivative(self, func, direction, step=1e-6):
        """Angle derivative along one column of the geodetic Jacobian"""
        r = lla2ecef(self.target).to_array()
        return (self.angle_at(func, r + step * direction)
                - self.angle_at(func, r - step * direction)) / (2 * step)


class TestMeasurementMatrix(MeasurementFixture):
    """Test measurement matrix assembly"""

    def test_shape_and_constant_altitude(self):
        for func in (azimuth_measurement, elevation_measurement, aoa_measurement):
            H = func(*self.args)
            self.assertEqual(H.shape, (1, 3))
            self.assertEqual(H[0, 2], 0.0)
            self.assertTrue(np.all(np.isfinite(H)))

    def test_deterministic(self):
        for func in (azimuth_measurement, elevation_measurement, aoa_measurement):
            np.testing.assert_array_equal(func(*self.args), func(*self.args))

    def test_azimuth_matches_numerical_derivative(self):
        H = azimuth_measurement(*self.args)
        J = geodetic_jacobian(self.target)
        for j in range(2):
            expected = self.directional_derivative(azimuth, J[:, j])
            self.assertAlmostEqual(H[0, j], expected, delta=1e-5 * abs(expected))

    def test_aoa_matches_numerical_derivative(self):
        H = aoa_measurement(*self.args)
        J = geodetic_jacobian(self.target)
        for j in range(2):
            expected = self.directional_derivative(aoa, J[:, j])
            self.assertAlmostEqual(H[0, j], expected, delta=1e-5 * abs(expected))

    def test_longitude_entry_matches_geodetic_difference(self):
        step = 1e-6
        t = self.target
        for func, angle in ((azimuth_measurement, azimuth), (aoa_measurement, aoa)):
            plus = lla2ecef(GeodeticPosition(t.longitude + step, t.latitude, t.altitude))
            minus = lla2ecef(GeodeticPosition(t.longitude - step, t.latitude, t.altitude))
            expected = (self.angle_at(angle, plus.to_array())
                        - self.angle_at(angle, minus.to_array())) / (2 * step)
            self.assertAlmostEqual(func(*self.args)[0, 0], expected, delta=1e-5 * abs(expected))

    def test_elevation_chain(self):
        """Elevation row is the closed-form factor pushed through the chain"""
        relative = relative_position(self.origin, self.target)
        los = line_of_sight(self.origin_pos, self.body, self.antenna, relative)
        el, az = elevation(los), azimuth(los)

        first = np.array([[-np.cos(az) * np.sin(el),
                           -np.cos(az) * np.sin(el),
                           -np.cos(el)]])
        C_e_a = antenna_from_ecef_chain(self.origin_pos, self.body, self.antenna)
        magnitude = np.linalg.norm(relative.to_array())
        expected = first @ los_projection(los, magnitude) @ C_e_a @ geodetic_jacobian(self.target)

        np.testing.assert_allclose(elevation_measurement(*self.args), expected, rtol=1e-9)

    def test_azimuth_row_fixed_under_yaw(self):
        """Level yaw only shifts azimuth by a constant"""
        H0 = azimuth_measurement(*self.args)
        H1 = azimuth_measurement(self.origin, self.origin_pos, BodyAttitude(yaw=0.2),
                                 self.antenna, self.target)
        np.testing.assert_allclose(H1, H0, rtol=1e-9)

    def test_attitude_changes_matrix(self):
        H0 = azimuth_measurement(*self.args)
        H1 = azimuth_measurement(self.origin, self.origin_pos, BodyAttitude(pitch=0.2),
                                 self.antenna, self.target)
        self.assertFalse(np.allclose(H0, H1))

        A0 = aoa_measurement(*self.args)
        A1 = aoa_measurement(self.origin, self.origin_pos, BodyAttitude(yaw=0.2),
                             self.antenna, self.target)
        self.assertFalse(np.allclose(A0, A1))

    def test_azimuth_behind_array_is_negated(self):
        """With alpha < 0 the atan azimuth is off by pi and the row flips sign"""
        self.antenna = AntennaMounting(alpha=-np.pi / 2)
        H = azimuth_measurement(self.origin, self.origin_pos, self.body, self.antenna, self.target)
        J = geodetic_jacobian(self.target)
        for j in range(2):
            expected = self.directional_derivative(azimuth, J[:, j])
            self.assertAlmostEqual(H[0, j], -expected, delta=1e-5 * abs(expected))

    def test_rotation_chain_built_once(self):
        with mock.patch('dfgeo.observation.measurement_matrix.antenna_from_ecef_chain',
                        wraps=antenna_from_ecef_chain) as chain:
            elevation_measurement(*self.args)
        self.assertEqual(chain.call_count, 1)

    def test_debug_log(self):
        with self.assertLogs('dfgeo.observation.measurement_matrix', level='DEBUG') as cm:
            aoa_measurement(*self.args)
        self.assertTrue(any("aoa measurement: az=" in line for line in cm.output))

    def test_requires_records(self):
        for i in range(5):
            args = list(self.args)
            args[i] = None
            with self.assertRaises(TypeError):
                azimuth_measurement(*args)
        with self.assertRaises(TypeError):
            aoa_measurement(self.origin, self.origin_pos, self.body, self.body, self.target)


class TestDispatch(MeasurementFixture):
    """Test selection by observable"""

    def test_by_name_and_enum(self):
        np.testing.assert_array_equal(measurement_matrix("azimuth", *self.args),
                                      azimuth_measurement(*self.args))
        np.testing.assert_array_equal(measurement_matrix(MeasurementType.ELEVATION, *self.args),
                                      elevation_measurement(*self.args))
        np.testing.assert_array_equal(measurement_matrix("aoa", *self.args),
                                      aoa_measurement(*self.args))

    def test_unknown_kind(self):
        with self.assertRaises(ValueError):
            measurement_matrix("range", *self.args)

    def test_stack(self):
        kinds = ["aoa", MeasurementType.AZIMUTH, "elevation"]
        H = stack_measurements(kinds, *self.args)
        self.assertEqual(H.shape, (3, 3))
        np.testing.assert_array_equal(H[0], aoa_measurement(*self.args)[0])
        np.testing.assert_array_equal(H[1], azimuth_measurement(*self.args)[0])
        np.testing.assert_array_equal(H[2], elevation_measurement(*self.args)[0])

    def test_stack_empty(self):
        self.assertEqual(stack_measurements([], *self.args).shape, (0, 3))


class TestLosProjection(unittest.TestCase):
    """Test the unit-vector derivative"""

    def setUp(self):
        u = np.array([0.48, 0.6, -0.64])
        self.los = LineOfSight.from_array(u)
        self.u = u
        self.r = 2500.0

    def test_annihilates_line_of_sight(self):
        P = los_projection(self.los, self.r)
        np.testing.assert_allclose(P @ self.u, np.zeros(3), atol=1e-15)

    def test_symmetric(self):
        P = los_projection(self.los, self.r)
        np.testing.assert_allclose(P, P.T, atol=1e-15)

    def test_scales_perpendicular_vectors(self):
        v = np.cross(self.u, [0.0, 0.0, 1.0])
        P = los_projection(self.los, self.r)
        np.testing.assert_allclose(P @ v, v / self.r, atol=1e-15)


if __name__ == '__main__':
    unittest.main()
