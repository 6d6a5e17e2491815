import unittest
import numpy as np
from dfgeo.attitude import rot_z, ypr2dcm
from dfgeo.coordinate.rotation import (
    compose, transpose,
    ecef_from_ned, ned_from_body, body_from_antenna,
    ecef_from_body, ecef_from_antenna, ned_from_antenna,
    ned_from_ecef, body_from_ned, body_from_ecef,
    antenna_from_ecef, antenna_from_ned, antenna_from_body,
    antenna_from_ecef_chain, ecef2ned,
)
from dfgeo.core.data_structures import (
    AntennaMounting, BodyAttitude, EcefPosition, GeodeticPosition, NedPosition
)


class TestComposeTranspose(unittest.TestCase):

    def setUp(self):
        rng = np.random.default_rng(42)
        self.A = rng.normal(size=(3, 3))
        self.B = rng.normal(size=(3, 3))

    def test_compose_is_matrix_product(self):
        np.testing.assert_allclose(compose(self.A, self.B), self.A @ self.B)

    def test_compose_is_not_commutative(self):
        C1 = compose(rot_z(0.3), ypr2dcm(0.0, 0.5, 0.0))
        C2 = compose(ypr2dcm(0.0, 0.5, 0.0), rot_z(0.3))
        self.assertFalse(np.allclose(C1, C2))

    def test_orthonormality(self):
        for theta in [0.0, 0.1, -0.7, np.pi / 3, np.pi, 4.0]:
            R = rot_z(theta)
            np.testing.assert_allclose(compose(R, transpose(R)), np.eye(3), atol=1e-12)

    def test_double_transpose(self):
        np.testing.assert_array_equal(transpose(transpose(self.A)), self.A)

    def test_transpose_does_not_alias_input(self):
        T = transpose(self.A)
        T[0, 0] = 1e9
        self.assertNotEqual(self.A[0, 0], 1e9)

    def test_accepts_nested_lists(self):
        A = self.A.tolist()
        np.testing.assert_allclose(compose(A, np.eye(3).tolist()), self.A)
        np.testing.assert_allclose(transpose(A), self.A.T)

    def test_invalid_shapes(self):
        invalid = [
            None,
            [],
            np.zeros((2, 3)),
            np.zeros((3, 2)),
            np.zeros((3, 3, 1)),
            np.zeros(9),
            [[1.0, 2.0, 3.0], [4.0, 5.0], [6.0, 7.0, 8.0]],
            [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]],
            [[1.0, 2.0, 3.0, 4.0]] * 3,
            [1.0, 2.0, 3.0],
            3.0,
        ]
        for bad in invalid:
            with self.assertRaises(ValueError):
                transpose(bad)
            with self.assertRaises(ValueError):
                compose(bad, self.B)
            with self.assertRaises(ValueError):
                compose(self.A, bad)

    def test_named_transforms_validate(self):
        for func in (ned_from_ecef, body_from_ned, body_from_ecef,
                     antenna_from_ecef, antenna_from_ned, antenna_from_body):
            with self.assertRaises(ValueError):
                func(np.zeros((2, 3)))
        for func in (ecef_from_body, ecef_from_antenna, ned_from_antenna):
            with self.assertRaises(ValueError):
                func(None, np.eye(3))


class TestFrameTransforms(unittest.TestCase):

    def test_ecef_from_ned_at_equator_prime_meridian(self):
        C_n_e = ecef_from_ned(0.0, 0.0)
        expected = np.array([
            [0.0, 0.0, -1.0],
            [0.0, 1.0, 0.0],
            [1.0, 0.0, 0.0],
        ])
        np.testing.assert_allclose(C_n_e, expected, atol=1e-15)

    def test_ecef_from_ned_axes(self):
        # lon = 90 deg: east is -x, down is -y
        C_n_e = ecef_from_ned(np.pi / 2, 0.0)
        np.testing.assert_allclose(C_n_e[:, 0], [0.0, 0.0, 1.0], atol=1e-12)
        np.testing.assert_allclose(C_n_e[:, 1], [-1.0, 0.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(C_n_e[:, 2], [0.0, -1.0, 0.0], atol=1e-12)

    def test_ecef_from_ned_closed_form(self):
        for lon, lat in [(0.5, 0.3), (-2.0, -1.1), (3.0, 1.5)]:
            sin_lat, cos_lat = np.sin(lat), np.cos(lat)
            sin_lon, cos_lon = np.sin(lon), np.cos(lon)
            expected = np.array([
                [-sin_lat * cos_lon, -sin_lon, -cos_lat * cos_lon],
                [-sin_lat * sin_lon, cos_lon, -cos_lat * sin_lon],
                [cos_lat, 0.0, -sin_lat],
            ])
            np.testing.assert_allclose(ecef_from_ned(lon, lat), expected, atol=1e-12)

    def test_ned_from_body_and_body_from_antenna_are_321(self):
        np.testing.assert_allclose(ned_from_body(0.4, -0.2, 0.9), ypr2dcm(0.4, -0.2, 0.9), atol=1e-15)
        np.testing.assert_allclose(body_from_antenna(0.4, -0.2, 0.9), ypr2dcm(0.4, -0.2, 0.9), atol=1e-15)

    def test_antenna_ecef_round_trip(self):
        cases = [
            (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
            (2.4, 0.6, 0.3, -0.1, 0.05, 1.57, 0.2, -0.3),
            (-1.0, -0.9, 3.0, 0.4, -0.6, -0.8, 0.0, 2.0),
        ]
        for lon, lat, yaw, pitch, roll, alpha, beta, gamma in cases:
            C_n_e = ecef_from_ned(lon, lat)
            C_b_n = ned_from_body(yaw, pitch, roll)
            C_a_b = body_from_antenna(alpha, beta, gamma)
            C_a_e = ecef_from_antenna(ecef_from_body(C_n_e, C_b_n), C_a_b)

            np.testing.assert_allclose(compose(antenna_from_ecef(C_a_e), C_a_e), np.eye(3), atol=1e-12)
            np.testing.assert_allclose(compose(C_a_e, antenna_from_ecef(C_a_e)), np.eye(3), atol=1e-12)

    def test_reverse_chain_equals_reversed_product(self):
        C_b_n = ned_from_body(0.3, 0.2, 0.1)
        C_a_b = body_from_antenna(-0.5, 0.0, 0.4)
        C_a_n = ned_from_antenna(C_b_n, C_a_b)
        np.testing.assert_allclose(
            antenna_from_ned(C_a_n),
            antenna_from_body(C_a_b) @ body_from_ned(C_b_n),
            atol=1e-12,
        )

    def test_chain_from_records(self):
        pos = GeodeticPosition(0.7, -0.4, 1200.0)
        body = BodyAttitude(0.1, 0.2, 0.3)
        antenna = AntennaMounting(1.0, -0.2, 0.0)

        C_n_e = ecef_from_ned(pos.longitude, pos.latitude)
        C_b_n = ned_from_body(body.yaw, body.pitch, body.roll)
        C_a_b = body_from_antenna(antenna.alpha, antenna.beta, antenna.gamma)
        expected = (C_n_e @ C_b_n @ C_a_b).T

        np.testing.assert_allclose(antenna_from_ecef_chain(pos, body, antenna), expected, atol=1e-12)

    def test_chain_requires_records(self):
        pos = GeodeticPosition(0.0, 0.0, 0.0)
        with self.assertRaises(TypeError):
            antenna_from_ecef_chain(None, BodyAttitude(), AntennaMounting())
        with self.assertRaises(TypeError):
            antenna_from_ecef_chain(pos, None, AntennaMounting())
        with self.assertRaises(TypeError):
            antenna_from_ecef_chain(pos, BodyAttitude(), BodyAttitude())

    def test_ecef2ned(self):
        origin = GeodeticPosition(0.0, 0.0, 0.0)

        up = ecef2ned(EcefPosition(1000.0, 0.0, 0.0), origin)
        self.assertIsInstance(up, NedPosition)
        np.testing.assert_allclose(up.to_array(), [0.0, 0.0, -1000.0], atol=1e-9)

        north = ecef2ned(EcefPosition(0.0, 0.0, 500.0), origin)
        np.testing.assert_allclose(north.to_array(), [500.0, 0.0, 0.0], atol=1e-9)

        east = ecef2ned(EcefPosition(0.0, 250.0, 0.0), origin)
        np.testing.assert_allclose(east.to_array(), [0.0, 250.0, 0.0], atol=1e-9)


if __name__ == '__main__':
    unittest.main()
