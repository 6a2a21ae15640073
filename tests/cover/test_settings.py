# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import pytest

from bitshrink import Verbosity, settings
from bitshrink._settings import local_settings
from bitshrink.errors import InvalidArgument, InvalidState


def test_has_sensible_defaults():
    default = settings.default
    assert default.max_examples == 100
    assert default.max_shrinks == 500
    assert default.derandomize is False
    assert default.verbosity == Verbosity.normal
    assert default.bitset_backend == "bool_vec"


def test_inherits_from_the_parent():
    parent = settings(max_examples=7)
    child = settings(parent, verbosity=Verbosity.quiet)
    assert child.max_examples == 7
    assert child.verbosity == Verbosity.quiet


def test_settings_are_immutable():
    s = settings()
    with pytest.raises(AttributeError):
        s.max_examples = 10


def test_cannot_assign_to_the_class():
    with pytest.raises(AttributeError):
        settings.max_examples = 10
    with pytest.raises(AttributeError):
        settings.default = settings()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_examples": 0},
        {"max_examples": "many"},
        {"max_shrinks": -1},
        {"derandomize": "yes"},
        {"verbosity": 7},
        {"bitset_backend": "roaring"},
        {"no_such_setting": 1},
    ],
    ids=repr,
)
def test_invalid_values_are_rejected(kwargs):
    with pytest.raises(InvalidArgument):
        settings(**kwargs)


def test_parent_must_be_settings():
    with pytest.raises(InvalidArgument):
        settings(parent={"max_examples": 3})


def test_profiles_can_be_registered_and_loaded():
    settings.register_profile("tiny", max_examples=3)
    assert settings.get_profile("tiny").max_examples == 3
    settings.load_profile("tiny")
    assert settings.default.max_examples == 3
    settings.load_profile("default")
    assert settings.default.max_examples == 100


def test_unknown_profiles_are_an_error():
    with pytest.raises(InvalidArgument):
        settings.load_profile("no such profile")
    with pytest.raises(InvalidArgument):
        settings.register_profile(1)


def test_local_settings_override_the_default():
    with local_settings(settings(max_shrinks=3)) as s:
        assert settings.default is s
        assert settings.default.max_shrinks == 3
    assert settings.default.max_shrinks == 500


def test_cannot_define_settings_after_locking():
    with pytest.raises(InvalidState):
        settings._define_setting("late", description="too late", default=1, options=(1,))


def test_repr_lists_every_setting():
    r = repr(settings(max_examples=5))
    assert r.startswith("settings(")
    for name in ["bitset_backend", "derandomize", "max_shrinks", "verbosity"]:
        assert f"{name}=" in r
    assert "max_examples=5" in r


def test_settings_properties_are_documented():
    doc = settings.__dict__["bitset_backend"].__doc__
    assert "VarBitSet" in doc


def test_settings_cannot_be_deleted():
    s = settings()
    with pytest.raises(AttributeError):
        del s.max_examples
