# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

from dataclasses import dataclass, fields

from typing import Any

from abc import ABCMeta


__all__ = ['UserOptions']


@dataclass
class UserOptions(metaclass=ABCMeta):
    """
    This is an abstract class used to create a dataclass of user options.

    Every optional setting of a configurable class is enumerated, with its default, as a field of a dataclass derived
    from this class.  The options are then applied to an instance as attributes through :meth:`apply_options`.

    Custom objects built from this abstract class follow the naming scheme <class_name>Options and are passed to the
    ``options`` keyword argument of ``class_name.__init__``.  For example::

        >>> @dataclass
        >>> class ExampleOptions(UserOptions):
        >>>     degrees: bool = False

        >>> class Example:
        >>>     def __init__(self, options: ExampleOptions | None = None):
        >>>         if options is None:
        >>>             options = ExampleOptions()
        >>>         options.apply_options(self)
        >>> Example().degrees
        ...     False

    Usually this is done for you by the :class:`.UserOptionConfigured` mixin.
    """

    def override_options(self):
        """
        This method is used for special cases when certain options should be adjusted before they are applied.

        By default it does nothing.
        """
        pass

    def apply_options(self, target: object) -> None:
        """
        Update the options as attributes of the target instance

        :param target: the instance that we are to update
        """
        target.__dict__.update(self.options_dict)

    @property
    def options_dict(self) -> dict[str, Any]:
        """
        The options declared by the dataclass fields (including inherited fields) as a dictionary.
        """

        self.override_options()
        return {field.name: getattr(self, field.name) for field in fields(self)}
