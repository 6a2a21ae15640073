# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Strategies for generating and shrinking bit sets.

Each supported representation has a namespace of strategies::

    from bitshrink import strategies as st

    st.u32.between(4, 8)          # bits 4..7 may be set
    st.u32.masked(0xDEADBEEF)     # only bits set in the mask may be set
    st.u32.sampled(range(4, 8), range(10, 20))  # 4-7 bits, all in 10..19
    st.bool_vec.masked([True, False, True])

The fixed-width namespaces for explicitly sized integers also have ``ANY``.
"""

from bitshrink.bitsets import fixed
from bitshrink.bitsets.dynamic import bool_vec as _bool_vec
from bitshrink.strategies._internal.bits import (
    BitSetStrategy,
    BitSetValueTree,
    SampledBitSetStrategy,
)
from bitshrink.strategies._internal.namespaces import (
    BitSetNamespace,
    IntBitSetNamespace,
    VarBitSetNamespace,
)
from bitshrink.strategies._internal.ranges import SizeRange
from bitshrink.strategies._internal.strategies import SearchStrategy, ValueTree

u8 = IntBitSetNamespace(fixed.u8)
u16 = IntBitSetNamespace(fixed.u16)
u32 = IntBitSetNamespace(fixed.u32)
u64 = IntBitSetNamespace(fixed.u64)
i8 = IntBitSetNamespace(fixed.i8)
i16 = IntBitSetNamespace(fixed.i16)
i32 = IntBitSetNamespace(fixed.i32)
i64 = IntBitSetNamespace(fixed.i64)

usize = BitSetNamespace(fixed.usize)
isize = BitSetNamespace(fixed.isize)
bool_vec = BitSetNamespace(_bool_vec)

varsize = VarBitSetNamespace()


def between(kind, min_bit, max_bit):
    """Generates values of ``kind`` where bits between ``min_bit``
    (inclusive) and ``max_bit`` (exclusive) may be set."""
    return BitSetStrategy(kind, min_bit, max_bit)


def masked(kind, mask):
    """Generates values of ``kind`` where any bits set in ``mask`` (and no
    others) may be set."""
    return BitSetStrategy.masked(kind, mask)


def sampled(kind, size, bits):
    """Generates values of ``kind`` with a number of bits in ``size`` set,
    all chosen from ``bits``."""
    return SampledBitSetStrategy(kind, size, bits)


__all__ = [
    "BitSetNamespace",
    "BitSetStrategy",
    "BitSetValueTree",
    "SampledBitSetStrategy",
    "SearchStrategy",
    "SizeRange",
    "ValueTree",
    "between",
    "bool_vec",
    "i8",
    "i16",
    "i32",
    "i64",
    "isize",
    "masked",
    "sampled",
    "u8",
    "u16",
    "u32",
    "u64",
    "usize",
    "varsize",
]
