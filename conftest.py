# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Test configuration file, see `numiter.util.pytest_config`."""

from numiter.util.pytest_config import collect_ignore

pytest_plugins = ['numiter.util.pytest_config']
