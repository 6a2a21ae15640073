# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import pytest
from hypothesis import given, strategies as st

from bitshrink.bitsets import BitSetLike, fixed
from bitshrink.errors import InvalidArgument

ALL_INT_KINDS = [
    fixed.u8,
    fixed.u16,
    fixed.u32,
    fixed.u64,
    fixed.usize,
    fixed.i8,
    fixed.i16,
    fixed.i32,
    fixed.i64,
    fixed.isize,
]


@st.composite
def kinds_and_values(draw):
    kind = draw(st.sampled_from(ALL_INT_KINDS))
    value = draw(st.integers(kind.min_value, kind.max_value))
    return kind, value


@pytest.mark.parametrize("kind", ALL_INT_KINDS, ids=repr)
def test_new_bitset_is_zero_whatever_the_hint(kind):
    assert kind.new_bitset(0) == 0
    assert kind.new_bitset(1000) == 0


@pytest.mark.parametrize(
    "kind, width",
    [(fixed.u8, 8), (fixed.i16, 16), (fixed.u32, 32), (fixed.i64, 64)],
    ids=repr,
)
def test_length_is_the_bit_width(kind, width):
    assert kind.length(0) == width
    assert kind.length(kind.max_value) == width


def test_pointer_width_kinds_agree():
    assert fixed.usize.width == fixed.isize.width == fixed.POINTER_WIDTH
    assert fixed.POINTER_WIDTH in (32, 64)


def test_setting_the_sign_bit_makes_signed_values_negative():
    assert fixed.i8.set(0, 7) == -128
    assert fixed.u8.set(0, 7) == 128
    assert fixed.i8.clear(-1, 7) == 127
    assert fixed.i32.set(0, 31) == -(2**31)


def test_signed_negative_values_expose_their_twos_complement_bits():
    assert fixed.i8.count(-1) == 8
    assert all(fixed.i8.test(-1, ix) for ix in range(8))
    assert list(fixed.i16.iter_set(-(2**15))) == [15]


def test_setting_a_bit_past_the_width_is_an_error():
    with pytest.raises(IndexError):
        fixed.u8.set(0, 8)


def test_bits_past_the_width_are_never_set():
    assert not fixed.u8.test(255, 8)
    assert not fixed.i8.test(-1, 100)
    assert fixed.u8.clear(255, 9) == 255


@given(kinds_and_values(), st.data())
def test_set_then_test(kind_and_value, data):
    kind, value = kind_and_value
    ix = data.draw(st.integers(0, kind.width - 1))
    updated = kind.set(value, ix)
    assert kind.test(updated, ix)
    assert kind.min_value <= updated <= kind.max_value
    assert kind.count(updated) == kind.count(value) + (not kind.test(value, ix))


@given(kinds_and_values(), st.data())
def test_clear_then_test(kind_and_value, data):
    kind, value = kind_and_value
    ix = data.draw(st.integers(0, kind.width - 1))
    updated = kind.clear(value, ix)
    assert not kind.test(updated, ix)
    assert kind.min_value <= updated <= kind.max_value
    assert kind.count(updated) == kind.count(value) - kind.test(value, ix)


@given(kinds_and_values())
def test_popcount_agrees_with_a_linear_scan(kind_and_value):
    kind, value = kind_and_value
    assert kind.count(value) == BitSetLike.count(kind, value)


@given(kinds_and_values())
def test_iter_set_agrees_with_a_linear_scan(kind_and_value):
    kind, value = kind_and_value
    assert list(kind.iter_set(value)) == list(BitSetLike.iter_set(kind, value))


@pytest.mark.parametrize(
    "kind, value",
    [
        (fixed.u8, 256),
        (fixed.u8, -1),
        (fixed.i8, 128),
        (fixed.i8, -129),
        (fixed.u32, 2**32),
        (fixed.u32, True),
        (fixed.u32, 1.0),
        (fixed.u32, "0xff"),
    ],
    ids=repr,
)
def test_check_value_rejects_unrepresentable_values(kind, value):
    with pytest.raises(InvalidArgument):
        kind.check_value(value, "mask")


def test_check_value_accepts_the_extremes():
    for kind in ALL_INT_KINDS:
        kind.check_value(kind.min_value, "mask")
        kind.check_value(kind.max_value, "mask")


def test_kinds_repr_as_their_name():
    assert repr(fixed.u32) == "u32"
    assert repr(fixed.isize) == "isize"


@pytest.mark.parametrize("op", [fixed.u8.test, fixed.i32.set, fixed.u64.clear])
def test_negative_indices_are_rejected(op):
    with pytest.raises(InvalidArgument):
        op(1, -1)
