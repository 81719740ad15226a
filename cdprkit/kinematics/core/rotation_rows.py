# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Conversion between rotation matrices and their flattened row representation.

Pose lists of the cable robots store the orientation of the platform as 9 consecutive values per sample, the rows of
the rotation matrix appended to each other::

    [R11, R12, R13, R21, R22, R23, R31, R32, R33]

The routines here convert between that layout and stacks of 3x3 matrices.  Neither routine checks that the data is
actually a rotation; any 3x3 matrix or 9 element row is transformed mechanically.
"""

from cdprkit._typing import ARRAY_LIKE, DOUBLE_ARRAY
from cdprkit.kinematics.core._helpers import _check_batch_and_shape, _check_matrix_batch_and_shape


__all__ = ['rotrow_to_rotmat', 'rotmat_to_rotrow']


def rotrow_to_rotmat(rows: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    This function converts rotation rows into rotation matrices.

    Each row of the input is interpreted as the row-major flattening of one 3x3 matrix.  The matrices are stacked down
    the first axis of the output in the same order as the input rows, so a single row (either a length 9 vector or a
    1x9 matrix) produces a 1x3x3 array.  For example::

        >>> from cdprkit.kinematics import rotrow_to_rotmat
        >>> rotrow_to_rotmat([11, 12, 13, 21, 22, 23, 31, 32, 33])
        array([[[11., 12., 13.],
                [21., 22., 23.],
                [31., 32., 33.]]])

    :param rows: The Nx9 rotation rows to convert
    :return: The Nx3x3 rotation matrices
    :raises InvalidArgument: If the rows do not have exactly 9 columns
    """

    rows = _check_batch_and_shape(rows, 9, return_copy=True, name='rotation rows')

    # numpy is row-major so the reshape already places each consecutive triple in a matrix row
    return rows.reshape(-1, 3, 3)


def rotmat_to_rotrow(matrices: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    This function converts rotation matrices into rotation rows.

    This is the inverse of :func:`rotrow_to_rotmat`.  Either a single 3x3 matrix or an Nx3x3 stack of matrices (stacked
    down the first axis) can be given and the output is always an Nx9 array with one row per matrix.

    :param matrices: The matrix or stack of matrices to flatten
    :return: The Nx9 rotation rows
    :raises InvalidArgument: If the input is not 3x3 per matrix
    """

    matrices = _check_matrix_batch_and_shape(matrices, return_copy=True, name='rotation matrices')

    return matrices.reshape(-1, 9)
