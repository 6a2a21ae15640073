# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from bitshrink.bitsets.core import BitSetLike
from bitshrink.errors import InvalidArgument
from bitshrink.internal.validation import check_valid_bit_index


class BoolVecBitSet(BitSetLike):
    """Bit sets stored as a list of booleans, one entry per bit.

    ``new_bitset(n)`` pre-fills ``n`` False entries, and the list only ever
    grows when a bit past its end is set.
    """

    name = "bool_vec"
    value_type = list

    def new_bitset(self, max_bits):
        return [False] * max_bits

    def length(self, value):
        return len(value)

    def test(self, value, ix):
        check_valid_bit_index(ix, "ix")
        if ix >= len(value):
            return False
        return value[ix]

    def set(self, value, ix):
        check_valid_bit_index(ix, "ix")
        if ix >= len(value):
            value.extend([False] * (ix + 1 - len(value)))
        value[ix] = True
        return value

    def clear(self, value, ix):
        check_valid_bit_index(ix, "ix")
        if ix < len(value):
            value[ix] = False
        return value

    def count(self, value):
        return value.count(True)

    def copy(self, value):
        return list(value)

    def check_value(self, value, name):
        super().check_value(value, name)
        for i, b in enumerate(value):
            if not isinstance(b, bool):
                raise InvalidArgument(
                    f"Expected a list of bools but got {name}[{i}]={b!r} "
                    f"(type={type(b).__name__})"
                )


bool_vec = BoolVecBitSet()
