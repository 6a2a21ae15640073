# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""The outer search loop: generate value trees until one satisfies a
condition, then shrink it as far as the condition allows."""

from random import Random
from typing import Any, Callable, Optional

from bitshrink._settings import settings as Settings
from bitshrink.errors import InvalidArgument, NoSuchExample
from bitshrink.internal.entropy import RandomSource
from bitshrink.reporting import debug_report, verbose_report
from bitshrink.strategies._internal.strategies import SearchStrategy


def find(
    specifier: SearchStrategy,
    condition: Callable[[Any], bool],
    *,
    settings: Optional[Settings] = None,
    random: Optional[Random] = None,
) -> Any:
    """Returns the minimal example from the given strategy ``specifier`` that
    matches the predicate function ``condition``."""
    if settings is None:
        settings = Settings.default
    if not isinstance(specifier, SearchStrategy):
        raise InvalidArgument(
            f"Expected SearchStrategy but got {specifier!r} of "
            f"type {type(specifier).__name__}"
        )

    if random is None:
        random = Random(0) if settings.derandomize else Random()
    source = RandomSource(random)

    for _ in range(settings.max_examples):
        tree = specifier.new_tree(source)
        if condition(tree.current()):
            break
    else:
        raise NoSuchExample(getattr(condition, "__name__", repr(condition)))

    verbose_report(f"Found example {tree.current()!r}, shrinking")
    shrinks = 0
    while shrinks < settings.max_shrinks and tree.simplify():
        if condition(tree.current()):
            shrinks += 1
            debug_report(lambda: f"Shrunk example to {tree.current()!r}")
        else:
            tree.complicate()

    result = tree.current()
    verbose_report(f"Shrunk example to {result!r} after {shrinks} shrinks")
    return result
