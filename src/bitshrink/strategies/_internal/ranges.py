# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import attr

from bitshrink.errors import InvalidArgument
from bitshrink.internal.validation import (
    check_valid_bit_index,
    check_valid_interval,
)


@attr.s(frozen=True, slots=True)
class SizeRange:
    """A half-open range ``[start, end_excl)`` of non-negative integers,
    used both for how many bits to set and for which bits may be set."""

    start = attr.ib()
    end_excl = attr.ib()

    @property
    def end_incl(self):
        return self.end_excl - 1

    def __len__(self):
        return max(0, self.end_excl - self.start)

    def __iter__(self):
        return iter(self.as_range())

    def __contains__(self, n):
        return self.start <= n < self.end_excl

    def as_range(self):
        return range(self.start, self.end_excl)

    def is_empty(self):
        return self.end_excl <= self.start

    def check_nonempty(self, name):
        if self.is_empty():
            raise InvalidArgument(
                f"{name}={self!r} is empty, so no value is possible"
            )


def size_range(value, name):
    """Convert ``value`` to a SizeRange.

    Accepts a SizeRange, a single integer ``n`` (meaning exactly ``n``),
    a ``range`` with step 1, or a ``(start, end_excl)`` pair.
    """
    if isinstance(value, SizeRange):
        result = value
    elif isinstance(value, range):
        if value.step != 1:
            raise InvalidArgument(f"{name}={value!r} must have a step of 1")
        result = SizeRange(value.start, value.stop)
    elif isinstance(value, tuple):
        if len(value) != 2:
            raise InvalidArgument(
                f"{name}={value!r} must be a (start, end_excl) pair"
            )
        result = SizeRange(*value)
    else:
        check_valid_bit_index(value, name)
        return SizeRange(value, value + 1)
    check_valid_bit_index(result.start, f"{name}.start")
    check_valid_bit_index(result.end_excl, f"{name}.end_excl")
    check_valid_interval(result.start, result.end_excl, f"{name}.start", f"{name}.end_excl")
    return result
