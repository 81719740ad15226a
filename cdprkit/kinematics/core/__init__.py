# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This package contains the fundamental, stateless kinematics routines.

All functions here are pure vectorized numpy operations on batches of samples stacked down the first axis.  They are
the building blocks for :class:`.OrientationTrajectory` and have no dependencies on it.
"""

import cdprkit.kinematics.core.exceptions
import cdprkit.kinematics.core.normalization
import cdprkit.kinematics.core.rotation_rows
import cdprkit.kinematics.core.elementals
import cdprkit.kinematics.core.quaternion_rates
import cdprkit.kinematics.core.euler_rates

from cdprkit.kinematics.core.exceptions import KinematicsError, InvalidArgument, ShapeMismatch

from cdprkit.kinematics.core.normalization import normalize_rows, normalize_columns

from cdprkit.kinematics.core.rotation_rows import rotrow_to_rotmat, rotmat_to_rotrow

from cdprkit.kinematics.core.elementals import (rot_x, rot_y, rot_z, rot_2d, skew, rotation_matrix_zyx,
                                                rotation_matrix_xyz)

from cdprkit.kinematics.core.quaternion_rates import (quaternion_to_rotmat, quaternion_rate_matrix,
                                                      quaternion_transformation_matrix, quaternion_to_angular_velocity,
                                                      quaternion_to_angular_acceleration)

from cdprkit.kinematics.core.euler_rates import (euler_rate_matrix, euler_rate_matrix_dot, euler_to_angular_velocity,
                                                 euler_to_angular_acceleration, rpy_to_rotmat)

__all__ = ['KinematicsError', 'InvalidArgument', 'ShapeMismatch',
           'normalize_rows', 'normalize_columns',
           'rotrow_to_rotmat', 'rotmat_to_rotrow',
           'rot_x', 'rot_y', 'rot_z', 'rot_2d', 'skew', 'rotation_matrix_zyx', 'rotation_matrix_xyz',
           'quaternion_to_rotmat', 'quaternion_rate_matrix', 'quaternion_transformation_matrix',
           'quaternion_to_angular_velocity', 'quaternion_to_angular_acceleration',
           'euler_rate_matrix', 'euler_rate_matrix_dot', 'euler_to_angular_velocity', 'euler_to_angular_acceleration',
           'rpy_to_rotmat']
