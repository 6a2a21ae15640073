# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from random import Random

from bitshrink.internal.entropy import RandomSource, as_random_source


class ValueTree:
    """A generated value together with the state needed to shrink it.

    The test runner repeatedly calls ``simplify`` while the simplified value
    keeps failing the test, and ``complicate`` immediately after a
    ``simplify`` whose value turned out to pass, until ``simplify`` returns
    False.
    """

    def current(self):
        """Return the value currently held. Callers may keep or mutate the
        result freely."""
        raise NotImplementedError()

    def simplify(self):
        """Attempt to make the current value simpler. Returns True if the
        value changed."""
        raise NotImplementedError()

    def complicate(self):
        """Attempt to undo the last call to ``simplify``. Returns True if
        the value changed."""
        raise NotImplementedError()


class SearchStrategy:
    """A SearchStrategy is an object that knows how to generate value trees
    for data of a given type.

    Arguments are validated when the strategy is constructed, so an
    instance which exists is always able to generate values.
    """

    def new_tree(self, source):
        """Generate a new value tree, drawing randomness from ``source``
        (a RandomSource or a random.Random instance)."""
        return self.do_new_tree(as_random_source(source))

    def do_new_tree(self, source):
        raise NotImplementedError(f"{type(self).__name__}.do_new_tree")

    def example(self, random=None):
        """Returns an example value drawn from this strategy.

        This is intended for interactive exploration of a strategy, not for
        use inside tests.
        """
        if random is None:
            random = Random()
        return self.new_tree(RandomSource(random)).current()
