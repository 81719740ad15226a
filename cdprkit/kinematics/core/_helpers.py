import copy

import numpy as np

from cdprkit._typing import ARRAY_LIKE, DOUBLE_ARRAY
from cdprkit.kinematics.core.exceptions import InvalidArgument, ShapeMismatch


def _check_batch_and_shape(input: ARRAY_LIKE,
                           last_axis_length: int,
                           return_copy: bool = False,
                           name: str = 'input') -> DOUBLE_ARRAY:
    in_shape = np.shape(input)

    if not in_shape:
        raise InvalidArgument(f'The {name} must be shaped')

    if len(in_shape) > 2:
        raise InvalidArgument(f'The {name} must be one or two dimensional')

    if in_shape[-1] != last_axis_length:
        raise InvalidArgument(f'The {name} must have {last_axis_length} columns')

    if return_copy:
        input = copy.deepcopy(input)

    # a single sample becomes a batch of one
    return np.atleast_2d(np.asanyarray(input, dtype=np.float64))


def _check_matrix_batch_and_shape(input: ARRAY_LIKE,
                                  second_last_axis_length: int = 3,
                                  last_axis_length: int = 3,
                                  return_copy: bool = False,
                                  name: str = 'input') -> DOUBLE_ARRAY:
    in_shape = np.shape(input)

    if len(in_shape) not in (2, 3):
        raise InvalidArgument(f'The {name} must be a matrix or a stack of matrices')

    if in_shape[-2:] != (second_last_axis_length, last_axis_length):
        raise InvalidArgument(f'The {name} must be {second_last_axis_length}x{last_axis_length} per matrix')

    if return_copy:
        input = copy.deepcopy(input)

    return np.asanyarray(input, dtype=np.float64).reshape(-1, second_last_axis_length, last_axis_length)


def _check_quaternion_batch_and_shape(quaternion: ARRAY_LIKE, return_copy: bool = False,
                                      name: str = 'quaternion') -> DOUBLE_ARRAY:
    return _check_batch_and_shape(quaternion, 4, return_copy, name)


def _check_angle_batch_and_shape(angles: ARRAY_LIKE, return_copy: bool = False, name: str = 'angles') -> DOUBLE_ARRAY:
    return _check_batch_and_shape(angles, 3, return_copy, name)


def _check_matching_samples(**batches: DOUBLE_ARRAY) -> None:
    names = list(batches)
    counts = [batches[name].shape[0] for name in names]

    if len(set(counts)) > 1:
        listing = ', '.join(f'{name} ({count})' for name, count in zip(names, counts))
        raise ShapeMismatch(f'The number of samples must match: {listing}')


def _batch_matvec(matrices: DOUBLE_ARRAY, vectors: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    # (N, r, c) x (N, c) -> (N, r)
    return np.einsum('nij,nj->ni', matrices, vectors)
