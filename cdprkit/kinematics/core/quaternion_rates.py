# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
Quaternion kinematics routines.

All routines in this module work on batches of scalar first quaternions

.. math::
    \mathbf{q} = \left[\begin{array}{cccc} q_w & q_x & q_y & q_z\end{array}\right]

stored one quaternion per row of an Nx4 array (a single length 4 quaternion is treated as a batch of one).  The
quaternions do not need to be normalized by the caller; every routine normalizes each row with
:func:`.normalize_rows` before using it.  A zero quaternion therefore results in NaN values rather than an error.

The outputs are always stacked down the first axis, one entry per input row, so that ``result[i]`` belongs to
``quaternion[i]`` regardless of the number of quaternions.
"""

import numpy as np

from cdprkit._typing import ARRAY_LIKE, DOUBLE_ARRAY
from cdprkit.kinematics.core._helpers import (_check_quaternion_batch_and_shape, _check_matching_samples,
                                              _batch_matvec)
from cdprkit.kinematics.core.normalization import normalize_rows


__all__ = ['quaternion_to_rotmat', 'quaternion_rate_matrix', 'quaternion_transformation_matrix',
           'quaternion_to_angular_velocity', 'quaternion_to_angular_acceleration']


def _normalized_parts(quaternion: ARRAY_LIKE, name: str = 'quaternion') -> tuple[DOUBLE_ARRAY, DOUBLE_ARRAY,
                                                                                   DOUBLE_ARRAY, DOUBLE_ARRAY]:
    quaternion = normalize_rows(_check_quaternion_batch_and_shape(quaternion, name=name))

    return quaternion[:, 0], quaternion[:, 1], quaternion[:, 2], quaternion[:, 3]


def quaternion_to_rotmat(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts quaternions into their equivalent rotation matrices.

    After normalization, each quaternion is converted using

    .. math::
        \mathbf{R} = \left[\begin{array}{ccc}
        1-2(q_y^2+q_z^2) & 2(q_xq_y-q_wq_z) & 2(q_xq_z+q_wq_y) \\
        2(q_xq_y+q_wq_z) & 1-2(q_x^2+q_z^2) & 2(q_yq_z-q_wq_x) \\
        2(q_xq_z-q_wq_y) & 2(q_yq_z+q_wq_x) & 1-2(q_x^2+q_y^2) \end{array}\right]

    The rotation matrices are stacked down the first axis in the order of the input rows.  For example::

        >>> from cdprkit.kinematics import quaternion_to_rotmat
        >>> quaternion_to_rotmat([[1, 0, 0, 0], [1, 1, 0, 0]])
        array([[[ 1.,  0.,  0.],
                [ 0.,  1.,  0.],
                [ 0.,  0.,  1.]],
               [[ 1.,  0.,  0.],
                [ 0.,  0., -1.],
                [ 0.,  1.,  0.]]])

    Because every row is normalized first the result is invariant to the scale of the quaternions and each returned
    matrix is orthonormal to floating point precision (for non-zero input rows).

    :param quaternion: The Nx4 quaternions to convert
    :return: The Nx3x3 rotation matrices
    :raises InvalidArgument: If the quaternions do not have exactly 4 columns
    """

    qw, qx, qy, qz = _normalized_parts(quaternion)

    return np.stack([1 - 2 * (qy ** 2 + qz ** 2), 2 * (qx * qy - qw * qz), 2 * (qx * qz + qw * qy),
                     2 * (qx * qy + qw * qz), 1 - 2 * (qx ** 2 + qz ** 2), 2 * (qy * qz - qw * qx),
                     2 * (qx * qz - qw * qy), 2 * (qy * qz + qw * qx), 1 - 2 * (qx ** 2 + qy ** 2)],
                    axis=-1).reshape(-1, 3, 3)


def quaternion_rate_matrix(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function computes the quaternion rate matrix mapping quaternion derivatives to angular velocity.

    After normalization, the 3x4 matrix of each quaternion is

    .. math::
        \mathbf{W} = \left[\begin{array}{cccc}
        -q_x & q_w & -q_z & q_y \\
        -q_y & q_z & q_w & -q_x \\
        -q_z & -q_y & q_x & q_w \end{array}\right]

    so that the angular velocity is :math:`\boldsymbol{\omega}=2\mathbf{W}\dot{\mathbf{q}}` (see
    :func:`quaternion_to_angular_velocity`).  Note that :math:`\mathbf{W}\mathbf{q}=\mathbf{0}` for a unit quaternion.

    :param quaternion: The Nx4 quaternions to compute the rate matrices for
    :return: The Nx3x4 rate matrices
    :raises InvalidArgument: If the quaternions do not have exactly 4 columns
    """

    qw, qx, qy, qz = _normalized_parts(quaternion)

    return np.stack([-qx, qw, -qz, qy,
                     -qy, qz, qw, -qx,
                     -qz, -qy, qx, qw], axis=-1).reshape(-1, 3, 4)


def quaternion_transformation_matrix(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function computes the quaternion transformation matrix used for the angular acceleration contribution of the
    quaternion rates.

    After normalization, the 3x4 matrix of each quaternion is

    .. math::
        \mathbf{T} = 2\left[\begin{array}{cccc}
        -q_x & q_w & -q_z & q_y \\
        -q_y & q_z & q_w & -q_x \\
        -q_z & -q_y & q_z & q_w \end{array}\right]

    .. warning::
        This is not simply twice :func:`quaternion_rate_matrix`.  The third entry of the last row is :math:`q_z` where
        the rate matrix has :math:`q_x`.  The entry is kept exactly as it is defined for this operator, so use
        :func:`quaternion_rate_matrix` whenever the textbook quaternion kinematics are wanted.

    :param quaternion: The Nx4 quaternions to compute the transformation matrices for
    :return: The Nx3x4 transformation matrices
    :raises InvalidArgument: If the quaternions do not have exactly 4 columns
    """

    qw, qx, qy, qz = _normalized_parts(quaternion)

    return 2 * np.stack([-qx, qw, -qz, qy,
                         -qy, qz, qw, -qx,
                         -qz, -qy, qz, qw], axis=-1).reshape(-1, 3, 4)


def quaternion_to_angular_velocity(quaternion: ARRAY_LIKE, quaternion_rate: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function computes the angular velocity from quaternions and their time derivatives.

    .. math::
        \boldsymbol{\omega} = 2\mathbf{W}(\mathbf{q})\dot{\mathbf{q}}

    where :math:`\mathbf{W}` is the rate matrix from :func:`quaternion_rate_matrix`.  The quaternion rates are used as
    given (they are not normalized).

    With :math:`\mathbf{R}` from :func:`quaternion_to_rotmat` the result satisfies
    :math:`\left[\boldsymbol{\omega}\times\right]=\dot{\mathbf{R}}\mathbf{R}^T`, that is, the angular velocity is
    expressed in the frame the rotation matrix rotates into.

    :param quaternion: The Nx4 quaternions
    :param quaternion_rate: The Nx4 time derivatives of the quaternions
    :return: The Nx3 angular velocities
    :raises InvalidArgument: If either input does not have exactly 4 columns
    :raises ShapeMismatch: If the inputs have a different number of rows
    """

    rate_matrix = quaternion_rate_matrix(quaternion)
    quaternion_rate = _check_quaternion_batch_and_shape(quaternion_rate, name='quaternion rate')

    _check_matching_samples(quaternion=rate_matrix, quaternion_rate=quaternion_rate)

    return 2 * _batch_matvec(rate_matrix, quaternion_rate)


def quaternion_to_angular_acceleration(quaternion_rate: ARRAY_LIKE,
                                       quaternion_acceleration: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function computes the angular acceleration from quaternion rates and accelerations.

    .. math::
        \boldsymbol{\alpha} = 2\mathbf{W}(\dot{\mathbf{q}})\ddot{\mathbf{q}}

    That is, the rate matrix of the *rate* quaternion (normalized, like every quaternion passed to
    :func:`quaternion_rate_matrix`) is applied to the *acceleration* quaternion.  A zero quaternion rate therefore
    yields NaN.

    :param quaternion_rate: The Nx4 first time derivatives of the quaternions
    :param quaternion_acceleration: The Nx4 second time derivatives of the quaternions
    :return: The Nx3 angular accelerations
    :raises InvalidArgument: If either input does not have exactly 4 columns
    :raises ShapeMismatch: If the inputs have a different number of rows
    """

    rate_matrix = quaternion_rate_matrix(quaternion_rate)
    quaternion_acceleration = _check_quaternion_batch_and_shape(quaternion_acceleration,
                                                                name='quaternion acceleration')

    _check_matching_samples(quaternion_rate=rate_matrix, quaternion_acceleration=quaternion_acceleration)

    return 2 * _batch_matvec(rate_matrix, quaternion_acceleration)
