from unittest import TestCase

import numpy as np

from cdprkit import kinematics as kin


class TestRotX(TestCase):

    def test_rot_x(self):

        np.testing.assert_array_almost_equal(kin.rot_x(np.pi / 2), [[1, 0, 0], [0, 0, -1], [0, 1, 0]])

        np.testing.assert_array_almost_equal(kin.rot_x([0, np.pi]), [np.eye(3), np.diag([1, -1, -1])])


class TestRotY(TestCase):

    def test_rot_y(self):

        np.testing.assert_array_almost_equal(kin.rot_y(np.pi / 2), [[0, 0, 1], [0, 1, 0], [-1, 0, 0]])

        np.testing.assert_array_almost_equal(kin.rot_y([0, np.pi]), [np.eye(3), np.diag([-1, 1, -1])])


class TestRotZ(TestCase):

    def test_rot_z(self):

        np.testing.assert_array_almost_equal(kin.rot_z(np.pi / 2), [[0, -1, 0], [1, 0, 0], [0, 0, 1]])

        np.testing.assert_array_almost_equal(kin.rot_z([0, np.pi]), [np.eye(3), np.diag([-1, -1, 1])])


class TestRot2d(TestCase):

    def test_rot_2d(self):

        np.testing.assert_array_almost_equal(kin.rot_2d(np.pi / 2), [[0, -1], [1, 0]])

        np.testing.assert_array_almost_equal(kin.rot_2d(30, degrees=True), kin.rot_z(np.pi / 6)[:2, :2])

    def test_vectorized(self):

        matrices = kin.rot_2d([0, 90, 180], degrees=True)

        self.assertEqual(matrices.shape, (3, 2, 2))

        np.testing.assert_array_almost_equal(matrices, [np.eye(2), [[0, -1], [1, 0]], -np.eye(2)])


class TestSkew(TestCase):

    def test_skew(self):

        np.testing.assert_array_equal(kin.skew([1, 2, 3]), [[0, -3, 2], [3, 0, -1], [-2, 1, 0]])

    def test_cross_product(self):

        rng = np.random.default_rng(51)

        first = rng.normal(size=(5, 3))
        second = rng.normal(size=(5, 3))

        matrices = kin.skew(first)

        self.assertEqual(matrices.shape, (5, 3, 3))

        np.testing.assert_array_almost_equal(np.einsum('nij,nj->ni', matrices, second), np.cross(first, second))

        # skew symmetric
        np.testing.assert_array_equal(matrices, -matrices.swapaxes(-1, -2))

    def test_bad_shape(self):

        for vector in [[1, 2], np.zeros((2, 4)), np.zeros((2, 3, 3))]:
            with self.subTest(shape=np.shape(vector)):
                with self.assertRaises(kin.InvalidArgument):
                    kin.skew(vector)


class TestRotationMatrixZYX(TestCase):

    def test_rotation_matrix_zyx(self):

        a, b, c = 0.3, -0.8, 1.9

        np.testing.assert_array_almost_equal(kin.rotation_matrix_zyx(a, b, c), kin.rot_z(a) @ kin.rot_y(b) @ kin.rot_x(c))

    def test_degrees(self):

        np.testing.assert_array_almost_equal(kin.rotation_matrix_zyx(90, 0, 0, degrees=True), kin.rot_z(np.pi / 2))

        np.testing.assert_array_almost_equal(kin.rotation_matrix_zyx(10, 20, 30, degrees=True),
                                             kin.rotation_matrix_zyx(*np.deg2rad([10, 20, 30])))

    def test_vectorized(self):

        matrices = kin.rotation_matrix_zyx([0, 0.5], [0, 0.1], [0, -0.2])

        self.assertEqual(matrices.shape, (2, 3, 3))

        np.testing.assert_array_almost_equal(matrices[0], np.eye(3))
        np.testing.assert_array_almost_equal(matrices[1], kin.rotation_matrix_zyx(0.5, 0.1, -0.2))


class TestRotationMatrixXYZ(TestCase):

    def test_rotation_matrix_xyz(self):

        a, b, c = 0.3, -0.8, 1.9

        np.testing.assert_array_almost_equal(kin.rotation_matrix_xyz(a, b, c), kin.rot_z(c) @ kin.rot_y(b) @ kin.rot_x(a))

        # the same matrix with the roles of the first and last angle swapped
        np.testing.assert_array_almost_equal(kin.rotation_matrix_xyz(a, b, c), kin.rotation_matrix_zyx(c, b, a))

    def test_degrees(self):

        np.testing.assert_array_almost_equal(kin.rotation_matrix_xyz(90, 0, 0, degrees=True), kin.rot_x(np.pi / 2))
