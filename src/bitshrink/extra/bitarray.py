# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Support for :pypi:`bitarray` values.

This module requires the optional dependency, which you can install with
``pip install bitshrink[bitarray]``. Importing it makes the ``"bitarray"``
backend available to :class:`~bitshrink.bitsets.VarBitSet`.
"""

from bitarray import bitarray
from bitarray.util import zeros

from bitshrink.bitsets.core import BitSetLike
from bitshrink.internal.validation import check_valid_bit_index
from bitshrink.strategies._internal.bits import BitSetStrategy, SampledBitSetStrategy

__all__ = ["BitArrayBitSet", "between", "bitarray_bitset", "masked", "sampled"]


class BitArrayBitSet(BitSetLike):
    """Bit sets stored as a :class:`bitarray.bitarray`.

    The length of a value is its allocated size. Setting a bit past the
    end extends it with zeros first.
    """

    name = "bitarray"
    value_type = bitarray

    def new_bitset(self, max_bits):
        return zeros(max_bits)

    def length(self, value):
        return len(value)

    def test(self, value, ix):
        check_valid_bit_index(ix, "ix")
        return ix < len(value) and bool(value[ix])

    def set(self, value, ix):
        check_valid_bit_index(ix, "ix")
        if ix >= len(value):
            value.extend(zeros(ix + 1 - len(value)))
        value[ix] = 1
        return value

    def clear(self, value, ix):
        check_valid_bit_index(ix, "ix")
        if ix < len(value):
            value[ix] = 0
        return value

    def count(self, value):
        return value.count(1)

    def copy(self, value):
        return value.copy()

    def iter_set(self, value):
        return value.search(1)


bitarray_bitset = BitArrayBitSet()


def between(min_bit, max_bit):
    """Generates bitarrays where bits between ``min_bit`` (inclusive) and
    ``max_bit`` (exclusive) may be set."""
    return BitSetStrategy(bitarray_bitset, min_bit, max_bit)


def masked(mask):
    """Generates bitarrays where any bits set in ``mask`` (and no others)
    may be set. Generated values have the same length as ``mask``."""
    return BitSetStrategy.masked(bitarray_bitset, mask)


def sampled(size, bits):
    """Generates bitarrays with a number of set bits chosen from ``size``,
    all of them within ``bits``."""
    return SampledBitSetStrategy(bitarray_bitset, size, bits)
