# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Intervals describing the ranges to be sampled."""

__all__ = ()

from .interval import *
__all__ += interval.__all__
