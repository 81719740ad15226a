# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
This package defines the routines for converting between the orientation representations used for the platforms of
cable-driven parallel robots, and for relating the rates of those representations to angular velocity and
acceleration.

The representations used in this package are described as follows:

.. _orientation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A 4 element scalar first quaternion :math:`[q_w, q_x, q_y, q_z]`.  Quaternions are never required to
                   be normalized by the caller; every routine normalizes them first.  A batch is an Nx4 array with one
                   quaternion per row.
rotation matrix    A :math:`3\times 3` orthonormal matrix.  A batch is an Nx3x3 array with the matrices stacked down the
                   first axis.
rotation row       The 9 entries of a rotation matrix with its rows appended to each other,
                   :math:`[R_{11}, R_{12}, R_{13}, R_{21}, \ldots, R_{33}]`, as stored in pose lists.  A batch is an
                   Nx9 array.
euler angles       Tait-Bryan roll, pitch, and yaw angles :math:`[\phi, \theta, \psi]` in radians.  A batch is an Mx3
                   array.
rate matrix        A 3x4 (quaternion) or 3x3 (euler) matrix mapping the rates of a representation onto angular
                   velocity.  A batch is an Nx3x4 or Mx3x3 array.
=================  =====================================================================================================

All results are batched, even when a single sample is given, so ``result[0]`` is always the result for the first
sample.  Inputs with the wrong number of columns raise :class:`.InvalidArgument` and paired inputs with a different
number of rows raise :class:`.ShapeMismatch`.  Numerically degenerate inputs, such as a zero quaternion, are not
errors and produce NaN instead.

The :class:`.OrientationTrajectory` class bundles a sampled orientation with its rates and caches everything derived
from it.

The function names of the older MATLAB toolbox (``quat2rotm``, ``rotrow2m``, ``vec2skew``, ...) are still
available from this package but emit a ``DeprecationWarning`` pointing to their replacement.
"""

import warnings

from typing import Any

import cdprkit.kinematics.core
import cdprkit.kinematics.orientation

from cdprkit.kinematics.core import *
from cdprkit.kinematics.orientation import OrientationTrajectory, OrientationTrajectoryOptions

__all__ = ['KinematicsError', 'InvalidArgument', 'ShapeMismatch',
           'normalize_rows', 'normalize_columns',
           'rotrow_to_rotmat', 'rotmat_to_rotrow',
           'rot_x', 'rot_y', 'rot_z', 'rot_2d', 'skew', 'rotation_matrix_zyx', 'rotation_matrix_xyz',
           'quaternion_to_rotmat', 'quaternion_rate_matrix', 'quaternion_transformation_matrix',
           'quaternion_to_angular_velocity', 'quaternion_to_angular_acceleration',
           'euler_rate_matrix', 'euler_rate_matrix_dot', 'euler_to_angular_velocity', 'euler_to_angular_acceleration',
           'rpy_to_rotmat',
           'OrientationTrajectory', 'OrientationTrajectoryOptions']


_DEPRECATED: dict[str, str] = {'rotrow2m': 'rotrow_to_rotmat',
                               'rotationRowToMatrix': 'rotrow_to_rotmat',
                               'rotm2row': 'rotmat_to_rotrow',
                               'rotationMatrixToRow': 'rotmat_to_rotrow',
                               'matnormalrows': 'normalize_rows',
                               'matnormalcols': 'normalize_columns',
                               'quat2rotm': 'quaternion_to_rotmat',
                               'quat2rot': 'quaternion_to_rotmat',
                               'quat2ratem': 'quaternion_rate_matrix',
                               'quat2trafo': 'quaternion_transformation_matrix',
                               'quat2vel': 'quaternion_to_angular_velocity',
                               'vec2skew': 'skew'}
"""
The toolbox function names that are still resolved, mapped to the name of their replacement.
"""


def __getattr__(item: str) -> Any:

    if item in _DEPRECATED:
        warnings.warn('"{}" is deprecated. Please use "{}" instead'.format(item, _DEPRECATED[item]),
                      DeprecationWarning, stacklevel=2)

        return globals()[_DEPRECATED[item]]

    raise AttributeError(f'module {__name__!r} has no attribute {item!r}')
