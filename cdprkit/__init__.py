# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
Welcome to cdprkit

The kinematics building blocks for cable-driven parallel robots: orientation representations, their rate matrices, and
the angular velocity and acceleration of a moving platform.
"""

import warnings

from cdprkit import utilities
from cdprkit import kinematics


warnings.filterwarnings("default", category=DeprecationWarning)

__version__ = '1.0.0'
