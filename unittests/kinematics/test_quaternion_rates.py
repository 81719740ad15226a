import warnings

from unittest import TestCase

import numpy as np

from scipy.spatial.transform import Rotation

from cdprkit import kinematics as kin


def trajectory(time: float) -> np.ndarray:
    # a smooth, non-planar unit quaternion path
    return kin.normalize_rows([np.cos(time), np.sin(2 * time), 0.5 - 0.3 * time, time ** 2])[0]


class TestQuaternionToRotmat(TestCase):

    def test_identity(self):

        np.testing.assert_array_almost_equal(kin.quaternion_to_rotmat([1, 0, 0, 0]), [np.eye(3)], decimal=9)

        np.testing.assert_array_almost_equal(kin.quaternion_to_rotmat([-1, 0, 0, 0]), [np.eye(3)], decimal=9)

    def test_single_axis(self):

        half = np.sqrt(2) / 2

        with self.subTest(axis='x'):
            np.testing.assert_array_almost_equal(kin.quaternion_to_rotmat([half, half, 0, 0]),
                                                 [[[1, 0, 0], [0, 0, -1], [0, 1, 0]]], decimal=9)

        with self.subTest(axis='y'):
            np.testing.assert_array_almost_equal(kin.quaternion_to_rotmat([half, 0, half, 0]),
                                                 [[[0, 0, 1], [0, 1, 0], [-1, 0, 0]]])

        with self.subTest(axis='z'):
            np.testing.assert_array_almost_equal(kin.quaternion_to_rotmat([half, 0, 0, half]),
                                                 [[[0, -1, 0], [1, 0, 0], [0, 0, 1]]])

        with self.subTest(axis='x', angle=np.pi):
            np.testing.assert_array_almost_equal(kin.quaternion_to_rotmat([0, 1, 0, 0]),
                                                 [np.diag([1, -1, -1])])

    def test_matches_elementals(self):

        for angle in [-2.5, -0.3, 0.1, 1.2, 3.0]:
            with self.subTest(angle=angle):
                quaternion = [np.cos(angle / 2), 0, 0, np.sin(angle / 2)]
                np.testing.assert_array_almost_equal(kin.quaternion_to_rotmat(quaternion)[0], kin.rot_z(angle))

                quaternion = [np.cos(angle / 2), np.sin(angle / 2), 0, 0]
                np.testing.assert_array_almost_equal(kin.quaternion_to_rotmat(quaternion)[0], kin.rot_x(angle))

    def test_scale_invariance(self):

        quaternion = np.array([1, 2, 3, 4], dtype=np.float64)

        for scale in [1e-3, 0.5, 1, 7, 1e4, -2]:
            with self.subTest(scale=scale):
                np.testing.assert_array_almost_equal(kin.quaternion_to_rotmat(scale * quaternion),
                                                     kin.quaternion_to_rotmat(quaternion), decimal=9)

    def test_orthonormal(self):

        rng = np.random.default_rng(2)

        matrices = kin.quaternion_to_rotmat(rng.normal(size=(25, 4)))

        np.testing.assert_array_almost_equal(matrices @ matrices.swapaxes(-1, -2),
                                             np.broadcast_to(np.eye(3), (25, 3, 3)), decimal=9)
        np.testing.assert_array_almost_equal(np.linalg.det(matrices), np.ones(25), decimal=9)

    def test_against_scipy(self):

        rng = np.random.default_rng(8)

        quaternions = rng.normal(size=(10, 4))

        # scipy stores the scalar last
        expected = Rotation.from_quat(quaternions[:, [1, 2, 3, 0]]).as_matrix()

        np.testing.assert_array_almost_equal(kin.quaternion_to_rotmat(quaternions), expected)

    def test_batch(self):

        rng = np.random.default_rng(4)

        quaternions = rng.normal(size=(6, 4))

        matrices = kin.quaternion_to_rotmat(quaternions)

        self.assertEqual(matrices.shape, (6, 3, 3))

        for i, quaternion in enumerate(quaternions):
            with self.subTest(sample=i):
                np.testing.assert_array_almost_equal(matrices[i], kin.quaternion_to_rotmat(quaternion)[0])

    def test_zero_quaternion(self):

        with warnings.catch_warnings():
            warnings.simplefilter('error')

            matrices = kin.quaternion_to_rotmat([[0, 0, 0, 0], [1, 0, 0, 0]])

        self.assertTrue(np.isnan(matrices[0]).all())
        np.testing.assert_array_almost_equal(matrices[1], np.eye(3))

    def test_bad_shape(self):

        for quaternion in [[1, 0, 0], np.zeros((2, 3)), np.zeros((2, 5)), np.zeros((1, 2, 4))]:
            with self.subTest(shape=np.shape(quaternion)):
                with self.assertRaises(kin.InvalidArgument):
                    kin.quaternion_to_rotmat(quaternion)


class TestQuaternionRateMatrix(TestCase):

    def test_quaternion_rate_matrix(self):

        norm = np.sqrt(30)

        np.testing.assert_array_almost_equal(kin.quaternion_rate_matrix([1, 2, 3, 4]),
                                             np.array([[[-2, 1, -4, 3],
                                                        [-3, 4, 1, -2],
                                                        [-4, -3, 2, 1]]]) / norm)

        np.testing.assert_array_almost_equal(kin.quaternion_rate_matrix([1, 0, 0, 0]),
                                             [[[0, 1, 0, 0],
                                               [0, 0, 1, 0],
                                               [0, 0, 0, 1]]])

    def test_annihilates_quaternion(self):

        rng = np.random.default_rng(13)

        quaternions = kin.normalize_rows(rng.normal(size=(15, 4)))

        np.testing.assert_array_almost_equal(np.einsum('nij,nj->ni', kin.quaternion_rate_matrix(quaternions),
                                                       quaternions),
                                             np.zeros((15, 3)))

    def test_orthonormal_rows(self):

        rng = np.random.default_rng(14)

        rate_matrices = kin.quaternion_rate_matrix(rng.normal(size=(5, 4)))

        np.testing.assert_array_almost_equal(rate_matrices @ rate_matrices.swapaxes(-1, -2),
                                             np.broadcast_to(np.eye(3), (5, 3, 3)))

    def test_shape(self):

        self.assertEqual(kin.quaternion_rate_matrix(np.ones((7, 4))).shape, (7, 3, 4))

        with self.assertRaises(kin.InvalidArgument):
            kin.quaternion_rate_matrix(np.ones((7, 3)))


class TestQuaternionTransformationMatrix(TestCase):

    def test_quaternion_transformation_matrix(self):

        norm = np.sqrt(30)

        np.testing.assert_array_almost_equal(kin.quaternion_transformation_matrix([1, 2, 3, 4]),
                                             2 * np.array([[[-2, 1, -4, 3],
                                                            [-3, 4, 1, -2],
                                                            [-4, -3, 4, 1]]]) / norm)

    def test_differs_from_rate_matrix_in_one_entry(self):

        rng = np.random.default_rng(21)

        quaternions = kin.normalize_rows(rng.normal(size=(10, 4)))

        difference = kin.quaternion_transformation_matrix(quaternions) - 2 * kin.quaternion_rate_matrix(quaternions)

        expected = np.zeros((10, 3, 4))
        expected[:, 2, 2] = 2 * (quaternions[:, 3] - quaternions[:, 1])

        np.testing.assert_array_almost_equal(difference, expected)


class TestQuaternionToAngularVelocity(TestCase):

    def test_constant_axis(self):

        axis = np.array([1, 2, 2]) / 3
        rate = 0.7

        for time in [0, 0.4, 2.1, 5.0]:
            with self.subTest(time=time):
                angle = rate * time

                quaternion = np.concatenate([[np.cos(angle / 2)], np.sin(angle / 2) * axis])
                quaternion_rate = rate / 2 * np.concatenate([[-np.sin(angle / 2)], np.cos(angle / 2) * axis])

                np.testing.assert_array_almost_equal(kin.quaternion_to_angular_velocity(quaternion, quaternion_rate),
                                                     [rate * axis])

    def test_matches_rotation_matrix_derivative(self):

        step = 1e-5

        for time in [-0.7, 0.2, 1.3]:
            with self.subTest(time=time):
                quaternion = trajectory(time)
                quaternion_rate = (trajectory(time + step) - trajectory(time - step)) / (2 * step)

                rotation_rate = (kin.quaternion_to_rotmat(trajectory(time + step))[0] -
                                 kin.quaternion_to_rotmat(trajectory(time - step))[0]) / (2 * step)

                angular_velocity = kin.quaternion_to_angular_velocity(quaternion, quaternion_rate)[0]

                np.testing.assert_array_almost_equal(kin.skew(angular_velocity),
                                                     rotation_rate @ kin.quaternion_to_rotmat(quaternion)[0].T)

    def test_zero_rate(self):

        np.testing.assert_array_almost_equal(kin.quaternion_to_angular_velocity([[0.5, 0.5, 0.5, 0.5]], np.zeros(4)),
                                             np.zeros((1, 3)))

    def test_batch(self):

        rng = np.random.default_rng(30)

        quaternions = rng.normal(size=(5, 4))
        quaternion_rates = rng.normal(size=(5, 4))

        angular_velocities = kin.quaternion_to_angular_velocity(quaternions, quaternion_rates)

        self.assertEqual(angular_velocities.shape, (5, 3))

        for i in range(5):
            with self.subTest(sample=i):
                np.testing.assert_array_almost_equal(angular_velocities[i],
                                                     2 * kin.quaternion_rate_matrix(quaternions[i])[0] @
                                                     quaternion_rates[i])

    def test_mismatch(self):

        with self.assertRaises(kin.ShapeMismatch):
            kin.quaternion_to_angular_velocity(np.ones((3, 4)), np.ones((2, 4)))

        with self.assertRaises(kin.InvalidArgument):
            kin.quaternion_to_angular_velocity(np.ones((3, 4)), np.ones((3, 3)))


class TestQuaternionToAngularAcceleration(TestCase):

    def test_quaternion_to_angular_acceleration(self):

        np.testing.assert_array_almost_equal(kin.quaternion_to_angular_acceleration([0, 1, 0, 0], [1, 2, 3, 4]),
                                             [[-2, -8, 6]])

        # only the direction of the rate is used to form the rate matrix
        np.testing.assert_array_almost_equal(kin.quaternion_to_angular_acceleration([0, 5, 0, 0], [1, 2, 3, 4]),
                                             [[-2, -8, 6]])

    def test_pairing(self):

        rng = np.random.default_rng(31)

        quaternion_rates = rng.normal(size=(4, 4))
        quaternion_accelerations = rng.normal(size=(4, 4))

        expected = 2 * np.einsum('nij,nj->ni', kin.quaternion_rate_matrix(quaternion_rates), quaternion_accelerations)

        np.testing.assert_array_almost_equal(kin.quaternion_to_angular_acceleration(quaternion_rates,
                                                                                    quaternion_accelerations),
                                             expected)

    def test_zero_rate(self):

        with warnings.catch_warnings():
            warnings.simplefilter('error')

            result = kin.quaternion_to_angular_acceleration(np.zeros(4), [1, 0, 0, 0])

        self.assertTrue(np.isnan(result).all())

    def test_mismatch(self):

        with self.assertRaises(kin.ShapeMismatch):
            kin.quaternion_to_angular_acceleration(np.ones((2, 4)), np.ones((3, 4)))
