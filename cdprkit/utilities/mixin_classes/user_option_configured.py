# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`UserOptionConfigured` mixin class that enables classes to be configured using
:class:`.UserOptions`-derived dataclasses while keeping the ability to reset to the original configuration.

Example::

    from dataclasses import dataclass

    from cdprkit.utilities.options import UserOptions
    from cdprkit.utilities.mixin_classes.user_option_configured import UserOptionConfigured

    @dataclass
    class ScaledOptions(UserOptions):
        degrees: bool = False

    class Scaled(UserOptionConfigured[ScaledOptions], ScaledOptions):
        def __init__(self, options: ScaledOptions | None = None):
            super().__init__(ScaledOptions, options=options)

    scaled = Scaled(ScaledOptions(degrees=True))
    scaled.degrees = False
    scaled.reset_settings()  # degrees is True again

.. Note::
    The :class:`UserOptionConfigured` class should come first in the inheritance order so that its ``__init__`` runs
    first in the method resolution order.
"""

import copy

from typing import Generic, TypeVar

from cdprkit.utilities.options import UserOptions


OptionsT = TypeVar("OptionsT", bound=UserOptions)
"""
Type variable bound to UserOptions for type safety
"""


class UserOptionConfigured(Generic[OptionsT]):
    """
    Mixin class providing UserOptions-based configuration with reset capability.

    On initialization the options (or a default instance of ``options_type`` when none are given) are applied to the
    instance as attributes and a deep copy is kept so that :meth:`reset_settings` can restore them later, even if the
    options object handed in by the caller is modified afterwards.
    """

    def __init__(self, options_type: type[OptionsT], *args, options: OptionsT | None = None, **kwargs) -> None:
        """
        :param options_type: The type of the :class:`.UserOptions` to use
        :param options: An optional instance of `options_type` preconfigured.
        """

        super().__init__(*args, **kwargs)

        if options is None:
            options = options_type()

        options.apply_options(self)

        self._original_options: OptionsT = copy.deepcopy(options)
        """
        The original configuration for this instance
        """

    def reset_settings(self) -> None:
        """
        Resets the instance to the options it was originally initialized with.
        """

        self._original_options.apply_options(self)

    @property
    def original_options(self) -> OptionsT:
        """
        The options used during initialization.
        """
        return self._original_options
