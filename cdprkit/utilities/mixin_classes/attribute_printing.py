# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides a class implementing default __str__ and __repr__ functionality.
"""

import numpy as np


class AttributePrinting:
    """
    A mixin class that provides __str__ and __repr__ functionality.

    This mixin implements __str__ and __repr__ methods which print the class name and the public attributes of any
    subclass.  Attributes starting with an underscore are reported through the property of the same name (without the
    underscore) when one exists and are skipped otherwise.  Numpy arrays are summarized by their shape since the
    sample batches held by the subclasses are usually long.
    """

    def _build_representation(self, attribute_repr: bool) -> str:
        """
        Turns the instance into a string including all reportable attributes.

        :param attribute_repr: Whether to call repr on attributes instead of str.
        """

        attributes = []
        for attr, value in self.__dict__.items():
            if attr.startswith('_'):
                prop_name = attr.lstrip('_')
                if not isinstance(getattr(self.__class__, prop_name, None), property):
                    continue
                attr = prop_name
                value = getattr(self, prop_name)

            if isinstance(value, np.ndarray):
                text = f'array(shape={value.shape})'
            elif attribute_repr:
                text = repr(value)
            else:
                text = str(value)

            attributes.append(f"{attr}={text}".replace('\n', ''))

        return f"{self.__class__.__name__}({', '.join(attributes)})"

    def __str__(self) -> str:
        return self._build_representation(False)

    def __repr__(self) -> str:
        return self._build_representation(True)
