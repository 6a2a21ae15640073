# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from bitshrink.errors import InvalidArgument


def check_type(typ, arg, name):
    if not isinstance(arg, typ):
        if isinstance(typ, tuple):
            assert len(typ) >= 2, "Use bare type instead of len-1 tuple"
            typ_string = "one of " + ", ".join(t.__name__ for t in typ)
        else:
            typ_string = typ.__name__
        raise InvalidArgument(
            f"Expected {typ_string} but got {name}={arg!r} (type={type(arg).__name__})"
        )


def check_valid_integer(value, name):
    """Checks that value is an integer and not a boolean.

    Otherwise raises InvalidArgument.
    """
    if isinstance(value, bool):
        raise InvalidArgument(f"Expected an integer but got {name}={value!r}")
    check_type(int, value, name)


def check_valid_bit_index(value, name):
    """Checks that value is a valid bit position, i.e. a non-negative
    integer.

    Otherwise raises InvalidArgument.
    """
    check_valid_integer(value, name)
    if value < 0:
        raise InvalidArgument(f"Invalid bit index {name}={value!r} < 0")


def check_valid_interval(lower_bound, upper_bound, lower_name, upper_name):
    """Checks that lower_bound and upper_bound define a valid interval on
    the number line.

    Otherwise raises InvalidArgument.
    """
    if upper_bound < lower_bound:
        raise InvalidArgument(
            f"Cannot have {upper_name}={upper_bound!r} < {lower_name}={lower_bound!r}"
        )


def check_fits_width(kind, upper_bound, name):
    """Checks that an exclusive upper bound on bit positions is addressable
    by kind. Growable kinds accept anything."""
    if kind.width is not None and upper_bound > kind.width:
        raise InvalidArgument(
            f"{name}={upper_bound!r} is out of range for {kind!r}, which only "
            f"has {kind.width} bits"
        )
