# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Lazily evaluated one- and multi-dimensional sequences."""

__all__ = ()

from .base import *
__all__ += base.__all__

from .linspace import *
__all__ += linspace.__all__

from .logspace import *
__all__ += logspace.__all__

from .stepped import *
__all__ += stepped.__all__

from .grids import *
__all__ += grids.__all__
