# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Bit sets whose size is not known up front.

A :class:`VarBitSet` wraps a value of one of the growable kinds and exposes
it through ordinary methods, plus iteration over the indices that are set.
Which growable kind backs it is decided once, when it is created.
"""

import operator

from bitshrink._settings import settings
from bitshrink.bitsets.core import BitSetLike
from bitshrink.bitsets.dynamic import bool_vec
from bitshrink.errors import InvalidArgument
from bitshrink.internal.validation import check_type, check_valid_bit_index


def resolve_backend(backend=None):
    """Return the growable kind named by ``backend``.

    ``backend`` may be a kind instance, one of the names accepted by the
    ``bitset_backend`` setting, or None to use that setting's current value.
    """
    if backend is None:
        backend = settings.default.bitset_backend
    if isinstance(backend, BitSetLike):
        if backend.width is not None:
            raise InvalidArgument(
                f"backend={backend!r} has a fixed width of {backend.width} bits, "
                "but VarBitSet needs a kind which can grow"
            )
        if isinstance(backend, VarBitSetLike):
            raise InvalidArgument("VarBitSet cannot be backed by another VarBitSet")
        return backend
    check_type(str, backend, "backend")
    if backend == "bool_vec":
        return bool_vec
    if backend == "bitarray":
        from bitshrink.extra.bitarray import bitarray_bitset

        return bitarray_bitset
    raise InvalidArgument(
        f"Unknown backend={backend!r}. Valid options: 'bool_vec', 'bitarray'"
    )


class VarBitSet:
    """A set of bit flags whose capacity grows as bits are set."""

    __slots__ = ("_kind", "_bits")

    def __init__(self, max_bits=0, backend=None):
        self._kind = resolve_backend(backend)
        self._bits = self._kind.new_bitset(max_bits)

    @classmethod
    def _wrap(cls, kind, bits):
        result = cls.__new__(cls)
        result._kind = kind
        result._bits = bits
        return result

    @classmethod
    def from_indices(cls, indices, backend=None):
        """Create a bit set with exactly the bits in ``indices`` set.

        The initial capacity comes from the length hint of ``indices``;
        the set grows as needed beyond that.
        """
        result = cls(operator.length_hint(indices), backend=backend)
        for ix in indices:
            result.set(ix)
        return result

    @classmethod
    def saturated(cls, length, backend=None):
        """Create a bit set of ``length`` set bits."""
        return cls.from_indices(range(length), backend=backend)

    @property
    def backend(self):
        return self._kind

    def length(self):
        return self._kind.length(self._bits)

    def test(self, ix):
        check_valid_bit_index(ix, "ix")
        return self._kind.test(self._bits, ix)

    def set(self, ix):
        check_valid_bit_index(ix, "ix")
        self._bits = self._kind.set(self._bits, ix)

    def clear(self, ix):
        check_valid_bit_index(ix, "ix")
        self._bits = self._kind.clear(self._bits, ix)

    def count(self):
        return self._kind.count(self._bits)

    def copy(self):
        return VarBitSet._wrap(self._kind, self._kind.copy(self._bits))

    def __iter__(self):
        return self._kind.iter_set(self._bits)

    def __contains__(self, ix):
        return self.test(ix)

    def __eq__(self, other):
        if not isinstance(other, VarBitSet):
            return NotImplemented
        return self.count() == other.count() and all(ix in other for ix in self)

    __hash__ = None

    def __repr__(self):
        return f"VarBitSet({list(self)!r})"


class VarBitSetLike(BitSetLike):
    """The kind handling :class:`VarBitSet` values.

    New values it creates are backed by ``backend``, resolved once when
    the kind is created.
    """

    value_type = VarBitSet

    def __init__(self, backend=None):
        self.backend = resolve_backend(backend)

    def __repr__(self):
        return f"varsize(backend={self.backend!r})"

    def new_bitset(self, max_bits):
        return VarBitSet._wrap(self.backend, self.backend.new_bitset(max_bits))

    def length(self, value):
        return value.length()

    def test(self, value, ix):
        return value.test(ix)

    def set(self, value, ix):
        value.set(ix)
        return value

    def clear(self, value, ix):
        value.clear(ix)
        return value

    def count(self, value):
        return value.count()

    def copy(self, value):
        return value.copy()

    def iter_set(self, value):
        return iter(value)
