# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

import numpy as np

from cdprkit._typing import SCALAR_OR_ARRAY, ARRAY_LIKE, DOUBLE_ARRAY
from cdprkit.kinematics.core._helpers import _check_batch_and_shape


__all__ = ["rot_x", "rot_y", "rot_z", "rot_2d", "skew", "rotation_matrix_zyx", "rotation_matrix_xyz"]


def rot_x(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function performs a right handed rotation about the x axis by angle theta.

    Mathematically this rotation is defined as:

    .. math::
        \mathbf{R}_x(\theta)=\left[\begin{array}{ccc} 1 & 0 & 0 \\
        0 & \text{cos}(\theta) & -\text{sin}(\theta) \\
        0 & \text{sin}(\theta) & \text{cos}(\theta) \end{array}\right]

    Theta should be in units of radians and can be a scalar or a vector.  If theta is a vector then each theta value
    will have a corresponding rotation matrix down the first axis of the output.  For example::

        >>> import numpy as np
        >>> from cdprkit.kinematics import rot_x
        >>> rot_x([0, np.pi / 2]).round(12)
        array([[[ 1.,  0.,  0.],
                [ 0.,  1., -0.],
                [ 0.,  0.,  1.]],
               [[ 1.,  0.,  0.],
                [ 0.,  0., -1.],
                [ 0.,  1.,  0.]]])

    :param theta: The angles to form the rotation matrix(ces) for
    :return: The rotation matrix(ces) corresponding to the rotation angle(s)
    """

    # angles as a flat float array
    theta = np.atleast_1d(np.asarray(theta, dtype=np.float64)).flatten()

    ones = np.ones(theta.shape)
    zeros = np.zeros(theta.shape)

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return np.vstack([ones, zeros, zeros, zeros, ctheta, -stheta, zeros, stheta, ctheta]).T.reshape(-1, 3, 3).squeeze()


def rot_y(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function performs a right handed rotation about the y axis by angle theta.

    .. math::
        \mathbf{R}_y(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & 0 & \text{sin}(\theta) \\
        0 & 1 & 0 \\
        -\text{sin}(\theta) & 0 & \text{cos}(\theta) \end{array}\right]

    Theta should be in units of radians and can be a scalar or a vector (see :func:`rot_x`).

    :param theta: The angles to form the rotation matrix(ces) for
    :return: The rotation matrix(ces) corresponding to the rotation angle(s)
    """

    theta = np.atleast_1d(np.asarray(theta, dtype=np.float64)).flatten()

    ones = np.ones(theta.shape)
    zeros = np.zeros(theta.shape)

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return np.vstack([ctheta, zeros, stheta, zeros, ones, zeros, -stheta, zeros, ctheta]).T.reshape(-1, 3, 3).squeeze()


def rot_z(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function performs a right handed rotation about the z axis by angle theta.

    .. math::
        \mathbf{R}_z(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & -\text{sin}(\theta) & 0 \\
        \text{sin}(\theta) & \text{cos}(\theta) & 0 \\
        0 & 0 & 1 \end{array}\right]

    Theta should be in units of radians and can be a scalar or a vector (see :func:`rot_x`).

    :param theta: The angles to form the rotation matrix(ces) for
    :return: The rotation matrix(ces) corresponding to the rotation angle(s)
    """

    theta = np.atleast_1d(np.asarray(theta, dtype=np.float64)).flatten()

    ones = np.ones(theta.shape)
    zeros = np.zeros(theta.shape)

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return np.vstack([ctheta, -stheta, zeros, stheta, ctheta, zeros, zeros, zeros, ones]).T.reshape(-1, 3, 3).squeeze()


def rot_2d(theta: SCALAR_OR_ARRAY, degrees: bool = False) -> DOUBLE_ARRAY:
    r"""
    This function forms the planar rotation matrix for angle theta.

    .. math::
        \mathbf{R}(\theta)=\left[\begin{array}{cc} \text{cos}(\theta) & -\text{sin}(\theta) \\
        \text{sin}(\theta) & \text{cos}(\theta) \end{array}\right]

    This is the upper left 2x2 block of :func:`rot_z`.  As with the 3D elementals a vector of angles gives the matrices
    stacked down the first axis and a scalar gives a single 2x2 matrix.

    :param theta: The angles to form the rotation matrix(ces) for
    :param degrees: Whether theta is given in degrees instead of radians
    :return: The 2x2 rotation matrix(ces) corresponding to the rotation angle(s)
    """

    theta = np.atleast_1d(np.asarray(theta, dtype=np.float64)).flatten()

    if degrees:
        theta = np.deg2rad(theta)

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return np.vstack([ctheta, -stheta, stheta, ctheta]).T.reshape(-1, 2, 2).squeeze()


def skew(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function returns a numpy array with the skew symmetric cross product matrix for vector.

    The skew symmetric cross product matrix is defined such that:

    .. math::
        \mathbf{a}\times\mathbf{b}=\left[\mathbf{a}\times\right]\mathbf{b} \\
        \left[\mathbf{a}\times\right] = \left[\begin{array}{ccc} 0 & -a_3 & a_2 \\
        a_3 & 0 & -a_1 \\
        -a_2 & a_1 & 0 \end{array}\right]

    where :math:`\times` indicates the cross product and :math:`\left[\bullet\times\right]` is the skew symmetric cross
    product matrix.

    This function is vectorized, therefore you can input multiple vectors as an nx3 array where each row is an
    independent vector.  The resulting output will be nx3x3 where the first axis stores each matrix.  A single length 3
    vector results in a single 3x3 matrix.

    :param vector: The vector(s) to compute a skew symmetric matrix for
    :return: The skew symmetric cross product matrix(ces) corresponding to the vector(s)
    :raises InvalidArgument: If the vector(s) do not have 3 elements
    """

    single = np.ndim(vector) == 1

    vectors = _check_batch_and_shape(vector, 3, name='vector')

    zeros = np.zeros(vectors.shape[0])

    matrices = np.stack([zeros, -vectors[:, 2], vectors[:, 1],
                         vectors[:, 2], zeros, -vectors[:, 0],
                         -vectors[:, 1], vectors[:, 0], zeros], axis=-1).reshape(-1, 3, 3)

    return matrices[0] if single else matrices


def rotation_matrix_zyx(a: SCALAR_OR_ARRAY, b: SCALAR_OR_ARRAY, c: SCALAR_OR_ARRAY,
                        degrees: bool = False) -> DOUBLE_ARRAY:
    r"""
    This function forms the rotation matrix which rotates about the global z, y, and then x axes.

    .. math::
        \mathbf{R} = \mathbf{R}_z(a)\mathbf{R}_y(b)\mathbf{R}_x(c)

    The angles can be scalars or equal length vectors, in which case the matrices are stacked down the first axis.

    :param a: The rotation angle about the z axis
    :param b: The rotation angle about the y axis
    :param c: The rotation angle about the x axis
    :param degrees: Whether the angles are given in degrees instead of radians
    :return: The rotation matrix(ces)
    """

    if degrees:
        a, b, c = np.deg2rad(a), np.deg2rad(b), np.deg2rad(c)

    return rot_z(a) @ rot_y(b) @ rot_x(c)


def rotation_matrix_xyz(a: SCALAR_OR_ARRAY, b: SCALAR_OR_ARRAY, c: SCALAR_OR_ARRAY,
                        degrees: bool = False) -> DOUBLE_ARRAY:
    r"""
    This function forms the rotation matrix which rotates about the global x, y, and then z axes.

    .. math::
        \mathbf{R} = \mathbf{R}_z(c)\mathbf{R}_y(b)\mathbf{R}_x(a)

    The angles can be scalars or equal length vectors, in which case the matrices are stacked down the first axis.

    :param a: The rotation angle about the x axis
    :param b: The rotation angle about the y axis
    :param c: The rotation angle about the z axis
    :param degrees: Whether the angles are given in degrees instead of radians
    :return: The rotation matrix(ces)
    """

    if degrees:
        a, b, c = np.deg2rad(a), np.deg2rad(b), np.deg2rad(c)

    return rot_z(c) @ rot_y(b) @ rot_x(a)
