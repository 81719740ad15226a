# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`OrientationTrajectory` class, a sampled platform orientation together with its time
derivatives.
"""

import copy
import logging

from dataclasses import dataclass
from typing import Callable

import numpy as np

from cdprkit._typing import ARRAY_LIKE, DOUBLE_ARRAY, NONEARRAY, PARAMETERIZATIONS
from cdprkit.kinematics.core._helpers import _check_batch_and_shape, _check_matching_samples
from cdprkit.kinematics.core.exceptions import InvalidArgument
from cdprkit.kinematics.core.normalization import normalize_rows
from cdprkit.kinematics.core.rotation_rows import rotmat_to_rotrow
from cdprkit.kinematics.core.quaternion_rates import (quaternion_to_rotmat, quaternion_rate_matrix,
                                                      quaternion_to_angular_velocity,
                                                      quaternion_to_angular_acceleration)
from cdprkit.kinematics.core.euler_rates import (euler_rate_matrix, euler_to_angular_velocity,
                                                 euler_to_angular_acceleration, rpy_to_rotmat)
from cdprkit.utilities.options import UserOptions
from cdprkit.utilities.mixin_classes import UserOptionConfigured, AttributePrinting


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""

_COLUMNS: dict[str, int] = {'quaternion': 4, 'euler': 3}


@dataclass
class OrientationTrajectoryOptions(UserOptions):
    """
    This dataclass serves as one way to control the settings for the :class:`.OrientationTrajectory` class.

    You can set any of the options on an instance of this dataclass and pass it to the
    :class:`.OrientationTrajectory` class at initialization (or through the method
    :meth:`.OrientationTrajectory.reset_settings`) to set the settings on the class. This class is the preferred way
    of setting options on the class due to ease of use in IDEs.
    """

    parameterization: PARAMETERIZATIONS = 'auto'
    """
    How the orientation samples are parameterized.

    ``'quaternion'`` expects scalar first quaternions (4 columns), ``'euler'`` expects roll, pitch, yaw angles
    (3 columns), and ``'auto'`` chooses between the two based on the number of columns of the positions.
    """

    degrees: bool = False
    """
    Whether Euler angles, rates, and accelerations are given in degrees (instead of radians).

    They are converted to radians when they are assigned.  This has no effect on quaternions.
    """

    warn_non_finite: bool = True
    """
    Whether to log a warning when a derived quantity contains NaN or infinite values.

    The values are returned unchanged either way.
    """


class OrientationTrajectory(UserOptionConfigured[OrientationTrajectoryOptions], AttributePrinting,
                            OrientationTrajectoryOptions):
    """
    A sampled orientation trajectory of a robot platform.

    The trajectory stores N orientation samples (the positions) and, optionally, their first and second time
    derivatives (the velocities and accelerations) in either of the two parameterizations used throughout cdprkit:

    * scalar first quaternions ``[qw, qx, qy, qz]`` (Nx4), which are normalized row by row when assigned, or
    * roll, pitch, yaw angles ``[phi, theta, psi]`` (Nx3).

    From these it offers the rotation matrices (:attr:`matrix`), the flattened rotation rows (:attr:`row`), the rate
    matrices (:attr:`rate_matrix`) and the angular velocity and acceleration of each sample
    (:attr:`angular_velocity`, :attr:`angular_acceleration`).  Each of these is computed the first time it is requested
    and cached until the samples are replaced::

        >>> from cdprkit.kinematics import OrientationTrajectory
        >>> trajectory = OrientationTrajectory([[0, 0, 0], [0, 0, 0.1]], velocities=[[0, 0, 1], [0, 0, 1]])
        >>> trajectory.representation
        'euler'
        >>> trajectory.angular_velocity
        array([[0., 0., 1.],
               [0., 0., 1.]])

    Quaternion trajectories compute the angular velocity with :func:`.quaternion_to_angular_velocity` and the angular
    acceleration with :func:`.quaternion_to_angular_acceleration`; Euler trajectories use
    :func:`.euler_to_angular_velocity` and :func:`.euler_to_angular_acceleration`.  See those functions for the exact
    definitions.
    """

    def __init__(self, positions: ARRAY_LIKE, velocities: ARRAY_LIKE | None = None,
                 accelerations: ARRAY_LIKE | None = None, options: OrientationTrajectoryOptions | None = None):
        """
        :param positions: The orientation samples, one per row
        :param velocities: The first time derivatives of the samples (same shape as the positions)
        :param accelerations: The second time derivatives of the samples (same shape as the positions)
        :param options: The options to configure the instance with
        """

        super().__init__(OrientationTrajectoryOptions, options=options)

        self._representation: str = 'quaternion'
        self._positions: DOUBLE_ARRAY = np.zeros((0, 4))
        self._velocities: NONEARRAY = None
        self._accelerations: NONEARRAY = None
        self._cache: dict[str, DOUBLE_ARRAY] = {}

        self.interp_samples(positions, velocities, accelerations)

    @property
    def representation(self) -> str:
        """
        The parameterization the samples are stored in, either ``'quaternion'`` or ``'euler'``.

        This property is read only and is determined when the samples are assigned with :meth:`interp_samples`.
        """

        return self._representation

    @property
    def positions(self) -> DOUBLE_ARRAY:
        """
        The orientation samples as an Nx4 (quaternion) or Nx3 (Euler angles in radians) array.

        This property is read only.  Use :meth:`interp_samples` to replace the samples.
        """

        return self._positions

    @property
    def velocities(self) -> NONEARRAY:
        """
        The first time derivatives of the samples, or ``None`` if they are unknown.

        Setting this property checks that the new value has the same shape as the positions and clears the cached
        results.
        """

        return self._velocities

    @velocities.setter
    def velocities(self, val: ARRAY_LIKE | None):

        self._velocities = self._interp_derivative(val, 'velocities')
        self._invalidate()

    @property
    def accelerations(self) -> NONEARRAY:
        """
        The second time derivatives of the samples, or ``None`` if they are unknown.

        Setting this property checks that the new value has the same shape as the positions and clears the cached
        results.
        """

        return self._accelerations

    @accelerations.setter
    def accelerations(self, val: ARRAY_LIKE | None):

        self._accelerations = self._interp_derivative(val, 'accelerations')
        self._invalidate()

    @property
    def matrix(self) -> DOUBLE_ARRAY:
        """
        The Nx3x3 rotation matrices of the samples.

        For Euler samples these are formed by :func:`.rpy_to_rotmat`, for quaternions by :func:`.quaternion_to_rotmat`.
        """

        if self._representation == 'quaternion':
            return self._cached('matrix', lambda: quaternion_to_rotmat(self._positions))

        return self._cached('matrix', lambda: rpy_to_rotmat(self._positions))

    @property
    def row(self) -> DOUBLE_ARRAY:
        """
        The Nx9 flattened rotation rows of the samples (see :func:`.rotmat_to_rotrow`).
        """

        return self._cached('row', lambda: rotmat_to_rotrow(self.matrix))

    @property
    def rate_matrix(self) -> DOUBLE_ARRAY:
        """
        The rate matrices of the samples.

        These are Nx3x4 quaternion rate matrices (:func:`.quaternion_rate_matrix`) or Nx3x3 Euler rate matrices
        (:func:`.euler_rate_matrix`) depending on :attr:`representation`.
        """

        if self._representation == 'quaternion':
            return self._cached('rate_matrix', lambda: quaternion_rate_matrix(self._positions))

        return self._cached('rate_matrix', lambda: euler_rate_matrix(self._positions))

    @property
    def angular_velocity(self) -> DOUBLE_ARRAY:
        """
        The Nx3 angular velocities of the samples.

        :raises ValueError: If the velocities of the samples are unknown
        """

        velocities = self._require('velocities')

        if self._representation == 'quaternion':
            return self._cached('angular_velocity',
                                lambda: quaternion_to_angular_velocity(self._positions, velocities))

        return self._cached('angular_velocity', lambda: euler_to_angular_velocity(self._positions, velocities))

    @property
    def angular_acceleration(self) -> DOUBLE_ARRAY:
        """
        The Nx3 angular accelerations of the samples.

        :raises ValueError: If the velocities or accelerations of the samples are unknown
        """

        velocities = self._require('velocities')
        accelerations = self._require('accelerations')

        if self._representation == 'quaternion':
            return self._cached('angular_acceleration',
                                lambda: quaternion_to_angular_acceleration(velocities, accelerations))

        return self._cached('angular_acceleration',
                            lambda: euler_to_angular_acceleration(self._positions, velocities, accelerations))

    def interp_samples(self, positions: ARRAY_LIKE, velocities: ARRAY_LIKE | None = None,
                       accelerations: ARRAY_LIKE | None = None):
        """
        This method replaces all samples of the trajectory.

        The parameterization is taken from the :attr:`parameterization` option.  When it is ``'auto'`` the positions
        are interpreted as quaternions if they have 4 columns and as Euler angles if they have 3 columns.  The
        velocities and accelerations, if given, must have the same shape as the positions.

        :param positions: The orientation samples, one per row
        :param velocities: The first time derivatives of the samples
        :param accelerations: The second time derivatives of the samples
        :raises InvalidArgument: If the parameterization cannot be determined or a shape is wrong
        :raises ShapeMismatch: If the derivatives do not have as many rows as the positions
        """

        representation = self._resolve_representation(positions)

        positions = _check_batch_and_shape(positions, _COLUMNS[representation], return_copy=True, name='positions')

        if representation == 'quaternion':
            positions = normalize_rows(positions)
        elif self.degrees:
            positions = np.deg2rad(positions)

        # nothing is assigned until every input has been validated
        velocities = self._interp_derivative(velocities, 'velocities', representation, positions)
        accelerations = self._interp_derivative(accelerations, 'accelerations', representation, positions)

        self._representation = representation
        self._positions = positions
        self._velocities = velocities
        self._accelerations = accelerations

        self._invalidate()

        _LOGGER.debug(f'Interpreted {len(self)} {representation} samples')

    def copy(self) -> 'OrientationTrajectory':
        """
        Returns a deep copy of self.

        :return: A deep copy of self breaking all mutability
        """

        return copy.deepcopy(self)

    def __len__(self) -> int:
        return self._positions.shape[0]

    def __eq__(self, other) -> bool:

        if not isinstance(other, OrientationTrajectory):
            return NotImplemented

        def same(first: NONEARRAY, second: NONEARRAY) -> bool:
            if first is None or second is None:
                return first is second
            return np.array_equal(first, second)

        return (self._representation == other.representation and
                same(self._positions, other.positions) and
                same(self._velocities, other.velocities) and
                same(self._accelerations, other.accelerations))

    __hash__ = None

    def _resolve_representation(self, positions: ARRAY_LIKE) -> str:

        if self.parameterization == 'auto':
            columns = np.shape(positions)[-1:]

            for representation, count in _COLUMNS.items():
                if columns == (count,):
                    return representation

            raise InvalidArgument('Unable to determine the parameterization of the positions.  '
                                  'They must have 4 (quaternion) or 3 (euler) columns')

        if self.parameterization not in _COLUMNS:
            raise InvalidArgument(f'Unknown parameterization {self.parameterization!r}.  '
                                  f'Must be one of auto, quaternion, or euler')

        return self.parameterization

    def _interp_derivative(self, value: ARRAY_LIKE | None, name: str, representation: str | None = None,
                           positions: NONEARRAY = None) -> NONEARRAY:

        if value is None:
            return None

        if representation is None:
            representation = self._representation
        if positions is None:
            positions = self._positions

        value = _check_batch_and_shape(value, _COLUMNS[representation], return_copy=True, name=name)

        _check_matching_samples(positions=positions, **{name: value})

        if representation == 'euler' and self.degrees:
            value = np.deg2rad(value)

        return value

    def _require(self, name: str) -> DOUBLE_ARRAY:

        value = getattr(self, name)

        if value is None:
            raise ValueError(f'The {name} of the samples are required but have not been set')

        return value

    def _invalidate(self):
        self._cache.clear()

    def _cached(self, name: str, compute: Callable[[], DOUBLE_ARRAY]) -> DOUBLE_ARRAY:

        if name not in self._cache:
            _LOGGER.debug(f'Computing {name} for {len(self)} samples')

            value = compute()

            if self.warn_non_finite and not np.isfinite(value).all():
                bad = int((~np.isfinite(value)).reshape(value.shape[0], -1).any(axis=1).sum())
                _LOGGER.warning(f'{name} contains non-finite values for {bad} of {len(self)} samples')

            self._cache[name] = value

        return self._cache[name]
