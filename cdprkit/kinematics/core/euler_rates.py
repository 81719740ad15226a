# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
Tait-Bryan angle kinematics routines.

The angles are given as ``[roll, pitch, yaw]`` (:math:`[\phi, \theta, \psi]`) in radians, one triple per row of an Mx3
array.  The rate matrix :math:`\mathbf{P}^{-1}` returned by :func:`euler_rate_matrix` converts the angle rates into the
body-fixed angular velocity of the orientation

.. math::
    \mathbf{R} = \mathbf{R}_x(\phi)\mathbf{R}_y(\theta)\mathbf{R}_z(\psi)

(see :func:`rpy_to_rotmat`), such that :math:`\left[\boldsymbol{\omega}\times\right]=\mathbf{R}^T\dot{\mathbf{R}}`.

The rate matrix only contains sine and cosine products of the angles and is never divided by anything, so none of the
routines here become singular at :math:`\theta=\pm 90^\circ`.
"""

import numpy as np

from cdprkit._typing import ARRAY_LIKE, DOUBLE_ARRAY
from cdprkit.kinematics.core._helpers import _check_angle_batch_and_shape, _check_matching_samples, _batch_matvec
from cdprkit.kinematics.core.elementals import rot_x, rot_y, rot_z


__all__ = ['euler_rate_matrix', 'euler_rate_matrix_dot', 'euler_to_angular_velocity', 'euler_to_angular_acceleration',
           'rpy_to_rotmat']


def _rate_matrix(angles: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    # angles must already be a validated Mx3 batch

    zeros = np.zeros(angles.shape[0])
    ones = np.ones(angles.shape[0])

    stheta = np.sin(angles[:, 1])
    ctheta = np.cos(angles[:, 1])
    spsi = np.sin(angles[:, 2])
    cpsi = np.cos(angles[:, 2])

    return np.stack([ctheta * cpsi, spsi, zeros,
                     -ctheta * spsi, cpsi, zeros,
                     stheta, zeros, ones], axis=-1).reshape(-1, 3, 3)


def _rate_matrix_dot(angles: DOUBLE_ARRAY, rates: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    # angles and rates must already be validated Mx3 batches of the same length

    zeros = np.zeros(angles.shape[0])

    stheta = np.sin(angles[:, 1])
    ctheta = np.cos(angles[:, 1])
    spsi = np.sin(angles[:, 2])
    cpsi = np.cos(angles[:, 2])

    theta_dot = rates[:, 1]
    psi_dot = rates[:, 2]

    return np.stack([-stheta * cpsi * theta_dot - ctheta * spsi * psi_dot, cpsi * psi_dot, zeros,
                     stheta * spsi * theta_dot - ctheta * cpsi * psi_dot, -spsi * psi_dot, zeros,
                     ctheta * theta_dot, zeros, zeros], axis=-1).reshape(-1, 3, 3)


def euler_rate_matrix(angles: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function computes the rate matrices converting Tait-Bryan angle rates into body angular velocity.

    For each row :math:`[\phi, \theta, \psi]` the matrix is

    .. math::
        \mathbf{P}^{-1} = \left[\begin{array}{ccc}
        \text{cos}\theta\,\text{cos}\psi & \text{sin}\psi & 0 \\
        -\text{cos}\theta\,\text{sin}\psi & \text{cos}\psi & 0 \\
        \text{sin}\theta & 0 & 1 \end{array}\right]

    Zero angles give the identity matrix.  The matrices are stacked down the first axis in the order of the input rows.

    :param angles: The Mx3 roll, pitch, yaw angles in radians
    :return: The Mx3x3 rate matrices
    :raises InvalidArgument: If the angles do not have exactly 3 columns
    """

    return _rate_matrix(_check_angle_batch_and_shape(angles))


def euler_rate_matrix_dot(angles: ARRAY_LIKE, rates: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function computes the time derivative of the rate matrices from :func:`euler_rate_matrix`.

    Differentiating :math:`\mathbf{P}^{-1}` entry by entry with the rates :math:`[\dot{\phi}, \dot{\theta},
    \dot{\psi}]` gives

    .. math::
        \dot{\mathbf{P}}^{-1} = \left[\begin{array}{ccc}
        -\text{sin}\theta\,\text{cos}\psi\,\dot{\theta}-\text{cos}\theta\,\text{sin}\psi\,\dot{\psi} &
        \text{cos}\psi\,\dot{\psi} & 0 \\
        \text{sin}\theta\,\text{sin}\psi\,\dot{\theta}-\text{cos}\theta\,\text{cos}\psi\,\dot{\psi} &
        -\text{sin}\psi\,\dot{\psi} & 0 \\
        \text{cos}\theta\,\dot{\theta} & 0 & 0 \end{array}\right]

    which converts the angle rates into the angular acceleration contribution of the changing rate matrix (see
    :func:`euler_to_angular_acceleration`).  The roll rate does not appear because :math:`\mathbf{P}^{-1}` does not
    depend on the roll angle.

    :param angles: The Mx3 roll, pitch, yaw angles in radians
    :param rates: The Mx3 roll, pitch, yaw angle rates in radians per unit time
    :return: The Mx3x3 rate matrix derivatives
    :raises InvalidArgument: If either input does not have exactly 3 columns
    :raises ShapeMismatch: If the inputs have a different number of rows
    """

    angles = _check_angle_batch_and_shape(angles)
    rates = _check_angle_batch_and_shape(rates, name='rates')

    _check_matching_samples(angles=angles, rates=rates)

    return _rate_matrix_dot(angles, rates)


def euler_to_angular_velocity(angles: ARRAY_LIKE, rates: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function computes the body angular velocity from Tait-Bryan angles and their rates.

    .. math::
        \boldsymbol{\omega} = \mathbf{P}^{-1}\dot{\boldsymbol{\eta}}

    where :math:`\boldsymbol{\eta}=[\phi, \theta, \psi]`.

    :param angles: The Mx3 roll, pitch, yaw angles in radians
    :param rates: The Mx3 angle rates
    :return: The Mx3 body angular velocities
    :raises InvalidArgument: If either input does not have exactly 3 columns
    :raises ShapeMismatch: If the inputs have a different number of rows
    """

    angles = _check_angle_batch_and_shape(angles)
    rates = _check_angle_batch_and_shape(rates, name='rates')

    _check_matching_samples(angles=angles, rates=rates)

    return _batch_matvec(_rate_matrix(angles), rates)


def euler_to_angular_acceleration(angles: ARRAY_LIKE, rates: ARRAY_LIKE, accelerations: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function computes the body angular acceleration from Tait-Bryan angles, their rates, and their accelerations.

    .. math::
        \boldsymbol{\alpha} = \mathbf{P}^{-1}\ddot{\boldsymbol{\eta}} + \dot{\mathbf{P}}^{-1}\dot{\boldsymbol{\eta}}

    :param angles: The Mx3 roll, pitch, yaw angles in radians
    :param rates: The Mx3 angle rates
    :param accelerations: The Mx3 angle accelerations
    :return: The Mx3 body angular accelerations
    :raises InvalidArgument: If any input does not have exactly 3 columns
    :raises ShapeMismatch: If the inputs have a different number of rows
    """

    angles = _check_angle_batch_and_shape(angles)
    rates = _check_angle_batch_and_shape(rates, name='rates')
    accelerations = _check_angle_batch_and_shape(accelerations, name='accelerations')

    _check_matching_samples(angles=angles, rates=rates, accelerations=accelerations)

    return (_batch_matvec(_rate_matrix(angles), accelerations) +
            _batch_matvec(_rate_matrix_dot(angles, rates), rates))


def rpy_to_rotmat(angles: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function forms the rotation matrices described by the roll, pitch, yaw angles.

    .. math::
        \mathbf{R} = \mathbf{R}_x(\phi)\mathbf{R}_y(\theta)\mathbf{R}_z(\psi)

    This is the orientation whose body angular velocity is given by :func:`euler_to_angular_velocity`.  The output is
    always an Mx3x3 stack, even for a single set of angles.

    :param angles: The Mx3 roll, pitch, yaw angles in radians
    :return: The Mx3x3 rotation matrices
    :raises InvalidArgument: If the angles do not have exactly 3 columns
    """

    angles = _check_angle_batch_and_shape(angles)

    return (rot_x(angles[:, 0]) @ rot_y(angles[:, 1]) @ rot_z(angles[:, 2])).reshape(-1, 3, 3)
