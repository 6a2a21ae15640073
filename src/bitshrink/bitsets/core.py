# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""The capability shared by every bit-set representation.

A representation is handled by a *kind*: an instance of a ``BitSetLike``
subclass which knows how to create, inspect and modify values of that
representation. The values themselves (plain integers, lists, bitarrays...)
know nothing about bitshrink.

Some representations are immutable, so every operation which changes a
value returns the changed value, and callers must use the result::

    value = kind.set(value, 3)

Mutable representations modify the value in place and return it.
"""

import copy

from bitshrink.internal.validation import check_type


class BitSetLike:
    """Base class for bit-set kinds.

    Subclasses must implement ``new_bitset``, ``length``, ``test``, ``set``
    and ``clear``. The remaining methods have generic defaults.
    """

    # Number of bits in a fixed-width representation, or None when values
    # may grow to address any bit.
    width = None

    # The type (or tuple of types) values of this kind have.
    value_type = object

    name = None

    def __repr__(self):
        if self.name is not None:
            return self.name
        return f"{type(self).__name__}()"

    def new_bitset(self, max_bits):
        """Create a new value with space for up to ``max_bits`` bits, all
        initialised to zero."""
        raise NotImplementedError()

    def length(self, value):
        """Return an upper bound on the greatest bit set *plus one*."""
        raise NotImplementedError()

    def test(self, value, ix):
        """Test whether the given bit is set. Bits past the end are never
        set."""
        raise NotImplementedError()

    def set(self, value, ix):
        """Set the given bit, returning the updated value."""
        raise NotImplementedError()

    def clear(self, value, ix):
        """Clear the given bit, returning the updated value. Clearing a bit
        past the end does nothing."""
        raise NotImplementedError()

    def count(self, value):
        """Return the number of bits set.

        This default simply does a linear scan through the bits.
        Subclasses are strongly encouraged to override it.
        """
        n = 0
        for i in range(self.length(value)):
            if self.test(value, i):
                n += 1
        return n

    def copy(self, value):
        """Return a copy of value which shares no mutable state with it."""
        return copy.copy(value)

    def iter_set(self, value):
        """Lazily yield the indices of all set bits in ascending order."""
        for i in range(self.length(value)):
            if self.test(value, i):
                yield i

    def check_value(self, value, name):
        """Raise InvalidArgument unless value is usable as a value of this
        kind. Used to validate user supplied masks."""
        check_type(self.value_type, value, name)
