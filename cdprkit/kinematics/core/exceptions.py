# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Exceptions raised when the inputs to the kinematics routines are malformed.

Only the shape of the inputs is ever checked.  Numeric degeneracies (a zero quaternion, for instance) are never raised
as errors and instead propagate through the results as NaN/Inf.
"""

__all__ = ['KinematicsError', 'InvalidArgument', 'ShapeMismatch']


class KinematicsError(ValueError):
    """
    Base class for all input errors of the kinematics routines.

    This derives from ``ValueError`` so code that only expects a ``ValueError`` continues to work.
    """


class InvalidArgument(KinematicsError):
    """
    Raised when an input does not have the required number of columns (or trailing shape) or is not shaped at all.
    """


class ShapeMismatch(KinematicsError):
    """
    Raised when two batches which are processed sample by sample have a different number of samples.
    """
