# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Settings controlling how :func:`~bitshrink.find` searches for and shrinks
examples, how much it reports, and which backend :class:`VarBitSet` uses.

Either pass an explicit settings object, or change the default by loading a
registered profile.
"""

import contextlib
from enum import IntEnum, unique
from typing import Any, Dict

import attr

from bitshrink.errors import InvalidArgument, InvalidState
from bitshrink.internal.validation import check_type
from bitshrink.utils.conventions import not_set
from bitshrink.utils.dynamicvariables import DynamicVariable

__all__ = ["settings"]

all_settings = {}  # type: Dict[str, Setting]


class settingsProperty:
    """Read-only access to one setting on a settings instance."""

    def __init__(self, name, description):
        self.name = name
        self.__doc__ = description

    def __get__(self, obj, type=None):
        if obj is None:
            return self
        return obj.__dict__[self.name]

    def __set__(self, obj, value):
        obj.__dict__[self.name] = value

    def __delete__(self, obj):
        raise AttributeError(f"Cannot delete attribute {self.name}")


default_variable = DynamicVariable(None)


class settingsMeta(type):
    @property
    def default(self):
        return default_variable.value

    def _assign_default_internal(self, value):
        default_variable.value = value

    def __setattr__(self, name, value):
        if name == "default":
            raise AttributeError(
                "Cannot assign to settings.default - use settings.load_profile "
                "or local_settings instead."
            )
        if not (isinstance(value, settingsProperty) or name.startswith("_")):
            raise AttributeError(
                f"Cannot assign bitshrink.settings.{name}={value!r}. Settings "
                "are immutable: load a profile, or pass settings(...) to find()."
            )
        return type.__setattr__(self, name, value)


class settings(metaclass=settingsMeta):
    """A settings object controls how examples are searched for and shrunk,
    and how chatty bitshrink is about it.

    Any setting not given explicitly is taken from ``parent``, or from
    ``settings.default`` when there is no parent.
    """

    __definitions_are_locked = False
    _profiles = {}  # type: dict
    __module__ = "bitshrink"

    def __init__(self, parent: "settings" = None, **kwargs: Any) -> None:
        if parent is not None and not isinstance(parent, settings):
            raise InvalidArgument(
                f"Invalid argument: parent={parent!r} is not a settings instance"
            )
        for name in kwargs:
            if name not in all_settings:
                raise InvalidArgument(f"Invalid argument: {name!r} is not a valid setting")
        defaults = parent or settings.default
        for setting in all_settings.values():
            value = kwargs.get(setting.name, not_set)
            if value is not_set:
                value = (
                    setting.default
                    if defaults is None
                    else getattr(defaults, setting.name)
                )
            else:
                value = setting.validate(value)
            self.__dict__[setting.name] = value

    @classmethod
    def _define_setting(cls, name, description, default, options=None, validator=None):
        """Add a new setting.

        A setting is checked either against a fixed tuple of ``options`` or
        by a ``validator`` function, which returns the (possibly converted)
        value or raises InvalidArgument.
        """
        if settings.__definitions_are_locked:
            raise InvalidState("settings have been locked and may no longer be defined.")
        if options is not None:
            options = tuple(options)
            assert default in options
        else:
            assert validator is not None

        all_settings[name] = Setting(
            name=name,
            description=description.strip(),
            default=default,
            options=options,
            validator=validator,
        )
        setattr(settings, name, settingsProperty(name, description.strip()))

    @classmethod
    def lock_further_definitions(cls):
        settings.__definitions_are_locked = True

    def __setattr__(self, name, value):
        raise AttributeError(
            "settings objects are immutable and may not be assigned to after "
            "construction."
        )

    def __repr__(self):
        bits = (f"{name}={getattr(self, name)!r}" for name in all_settings)
        return "settings({})".format(", ".join(sorted(bits)))

    @staticmethod
    def register_profile(name: str, parent: "settings" = None, **kwargs: Any) -> None:
        """Registers a collection of values to be used as a settings profile.

        The arguments to this method are exactly as for
        :class:`~bitshrink.settings`: optional ``parent`` settings, and
        keyword arguments for each setting that will be set differently to
        parent (or settings.default, if parent is None).
        """
        check_type(str, name, "name")
        settings._profiles[name] = settings(parent=parent, **kwargs)

    @staticmethod
    def get_profile(name: str) -> "settings":
        """Return the profile with the given name."""
        check_type(str, name, "name")
        try:
            return settings._profiles[name]
        except KeyError:
            raise InvalidArgument(f"Profile {name!r} is not registered") from None

    @staticmethod
    def load_profile(name: str) -> None:
        """Makes the profile with the given name the default settings.

        If the profile does not exist, InvalidArgument will be raised.
        """
        settings._assign_default_internal(settings.get_profile(name))


@contextlib.contextmanager
def local_settings(s):
    with default_variable.with_value(s):
        yield s


@attr.s()
class Setting:
    name = attr.ib()
    description = attr.ib()
    default = attr.ib()
    options = attr.ib()
    validator = attr.ib()

    def validate(self, value):
        if self.validator is not None:
            return self.validator(value)
        if value not in self.options:
            raise InvalidArgument(
                f"Invalid {self.name}, {value!r}. Valid options: {self.options!r}"
            )
        return value


def _max_examples_validator(x):
    check_type(int, x, name="max_examples")
    if x < 1:
        raise InvalidArgument(f"max_examples={x!r} should be at least one.")
    return x


settings._define_setting(
    "max_examples",
    default=100,
    validator=_max_examples_validator,
    description="""
The number of value trees :func:`~bitshrink.find` will generate while looking
for one whose value satisfies the condition, before giving up.
""",
)


def _max_shrinks_validator(x):
    check_type(int, x, name="max_shrinks")
    if x < 0:
        raise InvalidArgument(f"max_shrinks={x!r} must be non-negative.")
    return x


settings._define_setting(
    "max_shrinks",
    default=500,
    validator=_max_shrinks_validator,
    description="""
Once this many successful shrinks have been performed, shrinking stops and the
current value is returned even if it could be simplified further.
""",
)


settings._define_setting(
    "derandomize",
    default=False,
    options=(True, False),
    description="""
If this is True then :func:`~bitshrink.find` uses a fixed seed for its random
source when none is passed explicitly, so repeated runs generate the same
sequence of values.
""",
)


@unique
class Verbosity(IntEnum):
    quiet = 0
    normal = 1
    verbose = 2
    debug = 3

    def __repr__(self):
        return f"Verbosity.{self.name}"


settings._define_setting(
    "verbosity",
    options=tuple(Verbosity),
    default=Verbosity.normal,
    description="Control the verbosity level of bitshrink messages",
)


settings._define_setting(
    "bitset_backend",
    options=("bool_vec", "bitarray"),
    default="bool_vec",
    description="""
The representation backing :class:`~bitshrink.bitsets.VarBitSet` values when no
explicit backend is given. ``"bitarray"`` requires the optional
:pypi:`bitarray` dependency (``pip install bitshrink[bitarray]``).
""",
)

settings.lock_further_definitions()


settings.register_profile("default", settings())
settings.load_profile("default")
assert settings.default is not None
