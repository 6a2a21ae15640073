# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Bit-set kinds: the objects which know how to manipulate each supported
representation of a set of bit flags."""

from bitshrink.bitsets.core import BitSetLike
from bitshrink.bitsets.dynamic import BoolVecBitSet, bool_vec
from bitshrink.bitsets.fixed import (
    IntBitSet,
    i8,
    i16,
    i32,
    i64,
    isize,
    u8,
    u16,
    u32,
    u64,
    usize,
)
from bitshrink.bitsets.varsize import VarBitSet, VarBitSetLike

__all__ = [
    "BitSetLike",
    "BoolVecBitSet",
    "IntBitSet",
    "VarBitSet",
    "VarBitSetLike",
    "bool_vec",
    "i8",
    "i16",
    "i32",
    "i64",
    "isize",
    "u8",
    "u16",
    "u32",
    "u64",
    "usize",
]
