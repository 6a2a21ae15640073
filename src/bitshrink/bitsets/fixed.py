# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Bit-set kinds for fixed-width machine integers.

These are appropriate for integers which are used as bit flags, where the
most reasonable simplification of ``64`` is ``0`` (clearing one bit) and
not ``63`` (clearing one bit but setting six others).

Values are plain Python ints. Bit ``i`` is the bit with weight ``2 ** i``,
and for signed kinds the top bit is the sign bit, so setting it makes the
value negative exactly as it would in two's complement.
"""

import struct

from bitshrink.bitsets.core import BitSetLike
from bitshrink.errors import InvalidArgument
from bitshrink.internal.validation import check_valid_bit_index, check_valid_integer

POINTER_WIDTH = struct.calcsize("P") * 8


class IntBitSet(BitSetLike):
    value_type = int

    def __init__(self, name, width, signed):
        self.name = name
        self.width = width
        self.signed = signed
        self.mask = (1 << width) - 1
        if signed:
            self.min_value = -(1 << (width - 1))
            self.max_value = (1 << (width - 1)) - 1
        else:
            self.min_value = 0
            self.max_value = self.mask

    def _from_unsigned(self, bits):
        if self.signed and bits >> (self.width - 1):
            return bits - (1 << self.width)
        return bits

    def new_bitset(self, max_bits):
        return 0

    def length(self, value):
        return self.width

    def test(self, value, ix):
        check_valid_bit_index(ix, "ix")
        return ix < self.width and bool((value >> ix) & 1)

    def set(self, value, ix):
        check_valid_bit_index(ix, "ix")
        if ix >= self.width:
            raise IndexError(f"bit {ix} is out of range for {self.name}")
        return self._from_unsigned((value & self.mask) | (1 << ix))

    def clear(self, value, ix):
        check_valid_bit_index(ix, "ix")
        if ix >= self.width:
            return value
        return self._from_unsigned(value & self.mask & ~(1 << ix))

    def count(self, value):
        return (value & self.mask).bit_count()

    def copy(self, value):
        return value

    def iter_set(self, value):
        bits = value & self.mask
        while bits:
            low = bits & -bits
            yield low.bit_length() - 1
            bits ^= low

    def check_value(self, value, name):
        check_valid_integer(value, name)
        if not self.min_value <= value <= self.max_value:
            raise InvalidArgument(
                f"{name}={value!r} cannot be represented as {self.name}, whose "
                f"values lie in [{self.min_value}, {self.max_value}]"
            )


u8 = IntBitSet("u8", 8, signed=False)
u16 = IntBitSet("u16", 16, signed=False)
u32 = IntBitSet("u32", 32, signed=False)
u64 = IntBitSet("u64", 64, signed=False)
usize = IntBitSet("usize", POINTER_WIDTH, signed=False)
i8 = IntBitSet("i8", 8, signed=True)
i16 = IntBitSet("i16", 16, signed=True)
i32 = IntBitSet("i32", 32, signed=True)
i64 = IntBitSet("i64", 64, signed=True)
isize = IntBitSet("isize", POINTER_WIDTH, signed=True)
