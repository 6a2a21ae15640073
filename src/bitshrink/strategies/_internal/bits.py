# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Strategies for working with bit sets.

Both strategies here produce a :class:`BitSetValueTree`, which shrinks by
clearing set bits one at a time, from the lowest index upwards.
"""

from bitshrink.bitsets.core import BitSetLike
from bitshrink.errors import InsufficientCapacity, InvalidArgument
from bitshrink.internal.validation import (
    check_fits_width,
    check_type,
    check_valid_bit_index,
    check_valid_interval,
)
from bitshrink.strategies._internal.ranges import size_range
from bitshrink.strategies._internal.strategies import SearchStrategy, ValueTree


class BitSetStrategy(SearchStrategy):
    """Generates values as a set of bits between two bounds.

    Values are generated by uniformly setting individual bits to 0 or 1
    between the bounds (and, if a mask is given, only where the mask has a
    bit set). Shrinking iteratively clears bits.
    """

    def __init__(self, kind, min_bit, max_bit, mask=None):
        check_type(BitSetLike, kind, "kind")
        check_valid_bit_index(min_bit, "min_bit")
        check_valid_bit_index(max_bit, "max_bit")
        check_valid_interval(min_bit, max_bit, "min_bit", "max_bit")
        check_fits_width(kind, max_bit, "max_bit")
        if mask is not None:
            kind.check_value(mask, "mask")
            mask = kind.copy(mask)
        self.kind = kind
        self.min_bit = min_bit
        self.max_bit = max_bit
        self.mask = mask

    @classmethod
    def masked(cls, kind, mask):
        """Generates values where any bits set in ``mask`` (and only those
        bits) may be set."""
        check_type(BitSetLike, kind, "kind")
        kind.check_value(mask, "mask")
        return cls(kind, 0, kind.length(mask), mask=mask)

    def __repr__(self):
        if self.mask is not None:
            return f"{self.kind!r}.masked({self.mask!r})"
        return f"{self.kind!r}.between({self.min_bit!r}, {self.max_bit!r})"

    def do_new_tree(self, source):
        kind = self.kind
        mask = self.mask
        inner = kind.new_bitset(self.max_bit)
        for bit in range(self.min_bit, self.max_bit):
            if (mask is None or kind.test(mask, bit)) and source.boolean():
                inner = kind.set(inner, bit)
        return BitSetValueTree(kind, inner, shrink=self.min_bit, min_count=0)


class SampledBitSetStrategy(SearchStrategy):
    """Generates bit sets with a particular number of bits set.

    This strategy is given both a size range and a bit range. To produce a
    new value, it selects a size, then uniformly selects that many distinct
    bits from within the bit range.

    Shrinking happens as with :class:`BitSetStrategy`, but never below the
    smallest allowed size.
    """

    def __init__(self, kind, size, bits):
        check_type(BitSetLike, kind, "kind")
        size = size_range(size, "size")
        bits = size_range(bits, "bits")
        size.check_nonempty("size")
        check_fits_width(kind, bits.end_excl, "bits.end_excl")

        available_bits = len(bits)
        if size.end_incl > available_bits:
            raise InvalidArgument(
                f"Illegal SampledBitSetStrategy: have {available_bits} bits "
                f"available, but requested size is {size.start}..{size.end_excl}"
            )
        self.kind = kind
        self.size = size
        self.bits = bits

    def __repr__(self):
        return (
            f"{self.kind!r}.sampled(range({self.size.start}, {self.size.end_excl}), "
            f"range({self.bits.start}, {self.bits.end_excl}))"
        )

    def do_new_tree(self, source):
        kind = self.kind
        inner = kind.new_bitset(self.bits.end_excl)
        count = source.integer_range(self.size.start, self.size.end_incl)
        if kind.length(inner) < count:
            raise InsufficientCapacity(
                f"{kind!r}.new_bitset({self.bits.end_excl}) can only address "
                f"{kind.length(inner)} bits, not enough to sample {count}"
            )

        for bit in source.choose_multiple(self.bits.as_range(), count):
            inner = kind.set(inner, bit)

        return BitSetValueTree(
            kind, inner, shrink=self.bits.start, min_count=self.size.start
        )


class BitSetValueTree(ValueTree):
    """Value tree produced by BitSetStrategy and SampledBitSetStrategy.

    Each successful ``simplify`` clears the lowest set bit at or after the
    cursor and moves the cursor past it, so shrinking is a single pass over
    the bits in ascending order. Only the most recent ``simplify`` can be
    undone.
    """

    def __init__(self, kind, inner, shrink, min_count):
        self.kind = kind
        self.inner = inner
        self.shrink = shrink
        self.prev_shrink = None
        self.min_count = min_count

    def __repr__(self):
        return (
            f"BitSetValueTree({self.kind!r}, {self.inner!r}, shrink={self.shrink}, "
            f"prev_shrink={self.prev_shrink}, min_count={self.min_count})"
        )

    def current(self):
        return self.kind.copy(self.inner)

    def simplify(self):
        kind = self.kind
        if kind.count(self.inner) <= self.min_count:
            return False

        length = kind.length(self.inner)
        while self.shrink < length and not kind.test(self.inner, self.shrink):
            self.shrink += 1

        if self.shrink >= length:
            self.prev_shrink = None
            return False

        self.prev_shrink = self.shrink
        self.inner = kind.clear(self.inner, self.shrink)
        self.shrink += 1
        return True

    def complicate(self):
        if self.prev_shrink is None:
            return False
        bit = self.prev_shrink
        self.prev_shrink = None
        self.inner = self.kind.set(self.inner, bit)
        return True
