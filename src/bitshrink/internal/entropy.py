# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""The random source strategies draw from.

Strategies only ever need three things from randomness: a fair coin, a
uniform integer from an inclusive range, and a uniform choice of several
distinct elements from a sequence. ``RandomSource`` provides exactly those
on top of a :class:`python:random.Random` instance, which remains responsible
for seeding and determinism.
"""

from random import Random

from bitshrink.errors import InvalidArgument
from bitshrink.internal.validation import (
    check_type,
    check_valid_integer,
    check_valid_interval,
)


class RandomSource:
    def __init__(self, random=None):
        if random is None:
            random = Random()
        check_type(Random, random, "random")
        self.random = random

    @classmethod
    def deterministic(cls, seed=0):
        """A source whose draws are the same on every run."""
        return cls(Random(seed))

    def __repr__(self):
        return f"RandomSource({self.random!r})"

    def boolean(self):
        return bool(self.random.getrandbits(1))

    def integer_range(self, lower, upper):
        """Returns an integer uniformly drawn from ``[lower, upper]``."""
        check_valid_integer(lower, "lower")
        check_valid_integer(upper, "upper")
        check_valid_interval(lower, upper, "lower", "upper")
        if lower == upper:
            return lower
        return self.random.randint(lower, upper)

    def choose_multiple(self, values, n):
        """Returns ``n`` distinct elements of the sequence ``values``, chosen
        uniformly at random without replacement.

        Every subset of size ``n`` is equally likely. The order of the
        result carries no meaning.
        """
        check_valid_integer(n, "n")
        if not 0 <= n <= len(values):
            raise InvalidArgument(
                f"Cannot choose n={n!r} distinct elements from {len(values)} values"
            )
        return self.random.sample(values, n)


def as_random_source(source):
    if isinstance(source, RandomSource):
        return source
    if isinstance(source, Random):
        return RandomSource(source)
    raise InvalidArgument(
        f"Expected a RandomSource or random.Random instance but got "
        f"source={source!r} (type={type(source).__name__})"
    )
