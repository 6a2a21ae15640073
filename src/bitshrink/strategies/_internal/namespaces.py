# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from bitshrink.bitsets.varsize import VarBitSetLike
from bitshrink.strategies._internal.bits import BitSetStrategy, SampledBitSetStrategy


class BitSetNamespace:
    """The strategies available for one bit-set kind, e.g. ``u32.between``."""

    def __init__(self, kind):
        self.kind = kind

    def __repr__(self):
        return f"{type(self).__name__}({self.kind!r})"

    def between(self, min_bit, max_bit):
        """Generates values where bits between ``min_bit`` (inclusive) and
        ``max_bit`` (exclusive) may be set."""
        return BitSetStrategy(self.kind, min_bit, max_bit)

    def masked(self, mask):
        """Generates values where any bits set in ``mask`` (and no others)
        may be set."""
        return BitSetStrategy.masked(self.kind, mask)

    def sampled(self, size, bits):
        """Generates values where bits within the bounds given by ``bits``
        may be set. The number of bits that are set is chosen to be in the
        range given by ``size``.

        Raises InvalidArgument if ``size`` includes a value that is greater
        than the number of bits in ``bits``.
        """
        return SampledBitSetStrategy(self.kind, size, bits)


class IntBitSetNamespace(BitSetNamespace):
    """Adds ``ANY``, which generates integers where all bits may be set."""

    def __init__(self, kind):
        super().__init__(kind)
        self.ANY = BitSetStrategy(kind, 0, kind.width)


class VarBitSetNamespace:
    """Strategies generating :class:`~bitshrink.bitsets.VarBitSet` values.

    Each function takes an optional ``backend``; see
    :func:`~bitshrink.bitsets.varsize.resolve_backend`.
    """

    def __repr__(self):
        return "varsize"

    def between(self, min_bit, max_bit, *, backend=None):
        return BitSetStrategy(VarBitSetLike(backend), min_bit, max_bit)

    def masked(self, mask, *, backend=None):
        return BitSetStrategy.masked(VarBitSetLike(backend), mask)

    def sampled(self, size, bits, *, backend=None):
        return SampledBitSetStrategy(VarBitSetLike(backend), size, bits)
