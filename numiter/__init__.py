# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""numiter: lazily evaluated numeric sequences.

Linearly and logarithmically spaced sequences, sequences with fixed step,
and their multi-dimensional grid counterparts. Every element is computed
directly from its position, so long sequences do not accumulate rounding
errors, and endpoints are reproduced exactly.
"""

from os import path

__all__ = ()

# Set package version
curdir = path.abspath(path.dirname(__file__))

with open(path.join(curdir, 'VERSION')) as version_file:
    __version__ = version_file.read().strip()

# Import all names from subpackages into the top-level namespace; the
# `__all__` collection is extended separately to make import errors more
# visible (otherwise one gets errors like "... has no attribute __all__")
from .set import *
__all__ += set.__all__

from .space import *
__all__ += space.__all__

from . import util

# Add `test` function to global namespace so users can run `numiter.test()`
from .util import test

# Amend `__all__`
__all__ += ('test',)
