# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


from typing import Union, Literal

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = npt.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike
ARRAY_LIKE_2D = npt.ArrayLike
SCALAR_OR_ARRAY = Union[float, npt.ArrayLike]

NONEARRAY = Union[npt.NDArray, None]

PARAMETERIZATIONS = Literal['auto', 'quaternion', 'euler']
