# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from hypothesis import strategies as st

__all__ = ["seeds", "bit_bounds"]

seeds = st.integers(min_value=0, max_value=2**32 - 1)


@st.composite
def bit_bounds(draw, max_bit=64):
    """Draws a (min_bit, max_bit) pair of valid bounds below ``max_bit``."""
    lower = draw(st.integers(min_value=0, max_value=max_bit))
    upper = draw(st.integers(min_value=lower, max_value=max_bit))
    return lower, upper
