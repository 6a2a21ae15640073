# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.


class BitshrinkException(Exception):
    """Generic parent class for exceptions thrown by bitshrink."""


class InvalidArgument(BitshrinkException, TypeError):
    """Used to indicate that the arguments to a bitshrink function were in
    some manner incorrect.

    Strategies raise this eagerly, from their constructors, so that a bad
    configuration never survives until generation time.
    """


class InvalidState(BitshrinkException):
    """The system is not in a state where you were allowed to do that."""


class InsufficientCapacity(BitshrinkException):
    """An internal error raised when a bit-set kind allocated fewer
    addressable bits than a sampled strategy asked it to set.

    This indicates a bug in the kind rather than bad input: every kind must
    be able to address at least as many bits as it was asked to allocate.
    """


class NoSuchExample(BitshrinkException):
    """The condition we have been asked to satisfy appears to be always false.

    This does not guarantee that no example exists, only that we were
    unable to find one.
    """

    def __init__(self, condition_string, extra=""):
        super().__init__(f"No examples found of condition {condition_string}{extra}")
