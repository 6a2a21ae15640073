# This file is part of bitshrink.
#
# Copyright the bitshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""bitshrink generates sets of bit flags for property-based tests, in a
variety of representations, and shrinks them one cleared bit at a time.
"""

from bitshrink._settings import Verbosity, settings
from bitshrink.core import find
from bitshrink.internal.entropy import RandomSource
from bitshrink.version import __version__, __version_info__

__all__ = [
    "RandomSource",
    "Verbosity",
    "find",
    "settings",
    "__version__",
    "__version_info__",
]
