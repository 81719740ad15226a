# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Row and column normalization of matrices.

These are the preprocessing steps of every quaternion routine in this package, which never assume that a quaternion
supplied by the caller already has unit length.
"""

import numpy as np

from cdprkit._typing import ARRAY_LIKE_2D, DOUBLE_ARRAY
from cdprkit.kinematics.core.exceptions import InvalidArgument


__all__ = ['normalize_rows', 'normalize_columns']


def normalize_rows(matrix: ARRAY_LIKE_2D) -> DOUBLE_ARRAY:
    r"""
    This function normalizes each row of a matrix to unit Euclidean length.

    Each row :math:`\mathbf{m}_i` of the matrix is replaced by

    .. math::
        \hat{\mathbf{m}}_i = \frac{\mathbf{m}_i}{\left\|\mathbf{m}_i\right\|}

    A one dimensional input is treated as a matrix with a single row and the output is always two dimensional.  For
    example::

        >>> from cdprkit.kinematics import normalize_rows
        >>> normalize_rows([[3, 4], [0, 2]])
        array([[0.6, 0.8],
               [0. , 1. ]])

    .. note::
        Rows that are exactly zero cannot be normalized.  They come back as NaN without raising an exception or a
        numpy ``RuntimeWarning`` so that the NaN can propagate to the caller as a sentinel.

    :param matrix: The matrix whose rows are to be normalized
    :return: The matrix with each row scaled to unit length
    :raises InvalidArgument: If the input is not one or two dimensional
    """

    matrix = np.asanyarray(matrix, dtype=np.float64)

    if matrix.ndim not in (1, 2):
        raise InvalidArgument('The matrix must be one or two dimensional')

    matrix = np.atleast_2d(matrix)

    # zero rows intentionally turn into NaN
    with np.errstate(invalid='ignore', divide='ignore'):
        return matrix / np.sqrt((matrix ** 2).sum(axis=1, keepdims=True))


def normalize_columns(matrix: ARRAY_LIKE_2D) -> DOUBLE_ARRAY:
    """
    This function normalizes each column of a matrix to unit Euclidean length.

    It is the transpose of :func:`normalize_rows` applied to the transposed matrix, so zero columns become NaN in the
    same way.  A one dimensional input is treated as a single column.

    :param matrix: The matrix whose columns are to be normalized
    :return: The matrix with each column scaled to unit length
    :raises InvalidArgument: If the input is not one or two dimensional
    """

    matrix = np.asanyarray(matrix, dtype=np.float64)

    if matrix.ndim == 1:
        matrix = matrix.reshape(-1, 1)

    return normalize_rows(matrix.T).T
