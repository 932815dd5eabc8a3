# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Pytest plugin with the numiter test configuration.

Loaded by the ``conftest.py`` at the repository root and by
`numiter.test`. Provides

- the names ``np`` and ``numiter`` in all doctests,
- the ``-S/--suite NAME`` option enabling tests marked with
  ``pytest.mark.suite(NAME)``, e.g. the ``largescale`` suite,
- the fixtures ``dtype``, ``endpoint`` and ``order``.
"""

import os

import numpy as np
import pytest

import numiter
from numiter.util.testutils import simple_fixture


OPT_IN_SUITES = ('largescale',)

_this_dir = os.path.abspath(os.path.dirname(__file__))
_repo_root = os.path.abspath(os.path.join(_this_dir, os.pardir, os.pardir))
collect_ignore = [os.path.normcase(os.path.join(_repo_root, 'setup.py')),
                  os.path.normcase(os.path.join(_this_dir,
                                                'pytest_config.py'))]


@pytest.fixture(autouse=True)
def _add_doctest_np_numiter(doctest_namespace):
    doctest_namespace['np'] = np
    doctest_namespace['numiter'] = numiter


# --- Hooks --- #


def pytest_addoption(parser):
    parser.addoption(
        '-S', '--suite', nargs='*', metavar='NAME', type=str, default=[],
        help='enable the opt-in test suites NAME; available: {}'
             ''.format(', '.join(OPT_IN_SUITES)))


def pytest_configure(config):
    config.addinivalue_line(
        'markers', 'suite(name): mark test as part of an opt-in suite')


def pytest_runtest_setup(item):
    suites = [mark.args[0] for mark in item.iter_markers(name='suite')]
    if suites and not set(suites) & set(item.config.getoption('suite')):
        pytest.skip('test belongs to suites {} which are not enabled, use '
                    '`-S NAME` to run them'.format(suites))


def pytest_ignore_collect(collection_path, config):
    if os.path.normcase(str(collection_path)) in collect_ignore:
        return True
    return None


# --- Reusable fixtures --- #


dtype = simple_fixture('dtype', [None, 'float32', 'float64'])
endpoint = simple_fixture('endpoint', [True, False])
order = simple_fixture('order', ['C', 'F'])
