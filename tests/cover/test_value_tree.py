# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import pytest

from bitshrink.bitsets import bool_vec, fixed
from bitshrink.strategies import BitSetValueTree


def test_simplify_clears_the_lowest_set_bit_at_or_after_the_cursor():
    tree = BitSetValueTree(fixed.u8, 0b1011_0100, shrink=3, min_count=0)
    assert tree.simplify()
    assert tree.current() == 0b1010_0100
    assert tree.shrink == 5
    assert tree.prev_shrink == 4


def test_simplify_never_revisits_bits_before_the_cursor():
    tree = BitSetValueTree(fixed.u8, 0b0000_0111, shrink=2, min_count=0)
    assert tree.simplify()
    assert tree.current() == 0b0000_0011
    assert not tree.simplify()
    assert tree.current() == 0b0000_0011


def test_running_off_the_end_discards_the_pending_undo():
    tree = BitSetValueTree(fixed.u8, 0b1000_0001, shrink=7, min_count=0)
    assert tree.simplify()
    assert tree.prev_shrink == 7
    assert not tree.simplify()
    assert tree.prev_shrink is None
    assert not tree.complicate()
    assert tree.current() == 0b0000_0001


def test_reaching_the_floor_leaves_state_alone():
    tree = BitSetValueTree(fixed.u8, 0b0000_0110, shrink=0, min_count=1)
    assert tree.simplify()
    assert tree.current() == 0b0000_0100
    assert not tree.simplify()
    assert tree.prev_shrink == 1
    assert tree.complicate()
    assert tree.current() == 0b0000_0110


def test_only_one_simplify_can_be_undone():
    tree = BitSetValueTree(fixed.u8, 0b0000_0111, shrink=0, min_count=0)
    assert tree.simplify()
    assert tree.simplify()
    assert tree.current() == 0b0000_0100
    assert tree.complicate()
    assert tree.current() == 0b0000_0110
    assert not tree.complicate()
    assert tree.current() == 0b0000_0110


def test_complicate_then_simplify_moves_on_to_the_next_bit():
    tree = BitSetValueTree(fixed.u8, 0b0000_0011, shrink=0, min_count=0)
    assert tree.simplify()
    assert tree.complicate()
    assert tree.simplify()
    assert tree.current() == 0b0000_0001


def test_nothing_to_undo_before_the_first_simplify():
    tree = BitSetValueTree(fixed.u32, 0xFF, shrink=0, min_count=0)
    assert not tree.complicate()
    assert tree.current() == 0xFF


def test_mutable_values_are_copied_out():
    inner = [True, False, True]
    tree = BitSetValueTree(bool_vec, inner, shrink=0, min_count=0)
    value = tree.current()
    value[1] = True
    assert tree.current() == [True, False, True]
    assert tree.simplify()
    assert value == [True, True, True]
    assert tree.current() == [False, False, True]


@pytest.mark.parametrize("kind", [fixed.i8, bool_vec], ids=repr)
def test_empty_values_cannot_shrink(kind):
    tree = BitSetValueTree(kind, kind.new_bitset(8), shrink=0, min_count=0)
    assert not tree.simplify()
    assert not tree.complicate()


def test_signed_values_keep_their_sign_until_the_sign_bit_is_cleared():
    tree = BitSetValueTree(fixed.i8, -1, shrink=0, min_count=0)
    seen = [tree.current()]
    while tree.simplify():
        seen.append(tree.current())
    assert all(v < 0 for v in seen[:-1])
    assert seen[-1] == 0
    assert len(seen) == 9
