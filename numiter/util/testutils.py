# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Testing utilities."""

import os

import numpy as np

from numiter.util.utility import is_string


__all__ = (
    'dtype_ndigits',
    'all_equal',
    'all_almost_equal',
    'simple_fixture',
    'test',
    'run_doctests',
    'test_file',
)


_DTYPE_NDIGITS = {np.dtype('float16'): 1, np.dtype('float32'): 3}


def dtype_ndigits(dtype, default=5):
    """Return the number of correct digits expected for a given dtype.

    This is a generous relative precision for results of stable
    computations: 1 digit for ``float16``, 3 for ``float32`` and
    ``default`` for all other types.

    Examples
    --------
    >>> dtype_ndigits('float32')
    3
    >>> dtype_ndigits(float)
    5
    """
    try:
        dtype = np.dtype(dtype)
    except TypeError:
        return default
    return _DTYPE_NDIGITS.get(dtype, default)


def _is_sequence(obj):
    if is_string(obj):
        return False
    try:
        iter(obj)
    except TypeError:
        return False
    else:
        return True


def all_equal(a, b):
    """Return ``True`` if ``a`` and ``b`` are equal entry by entry.

    Nested sequences, e.g. lists of grid points or 2d arrays, are compared
    recursively, and their lengths must agree. Iterators are consumed.
    """
    a_is_seq, b_is_seq = _is_sequence(a), _is_sequence(b)
    if a_is_seq != b_is_seq:
        return False
    elif not a_is_seq:
        return bool(a == b)

    a, b = list(a), list(b)
    return len(a) == len(b) and all(all_equal(x, y) for x, y in zip(a, b))


def all_almost_equal(a, b, ndigits=None):
    """Return ``True`` if ``a`` and ``b`` agree up to ``ndigits`` digits.

    Both inputs are converted to arrays, which must have the same shape.
    Both the relative and the absolute tolerance are ``10 ** -ndigits``.
    By default, ``ndigits`` is given by the less precise of the two data
    types, see `dtype_ndigits`.
    """
    a, b = np.asarray(a), np.asarray(b)
    if a.shape != b.shape:
        return False
    if ndigits is None:
        ndigits = min(dtype_ndigits(a.dtype), dtype_ndigits(b.dtype))

    tol = 10.0 ** -ndigits
    return bool(np.allclose(a.astype(float), b.astype(float), rtol=tol,
                            atol=tol, equal_nan=True))


def simple_fixture(name, params, fmt=None):
    """Return a module-scoped pytest fixture yielding ``params``.

    Parameters
    ----------
    name : str
        Name of the fixture, also used in the test ids.
    params : sequence
        Values taken by the fixture.
    fmt : str, optional
        Format string for the test ids, called as
        ``fmt.format(name=name, value=value)``. By default, the id is
        ``" name=repr(value) "``.
    """
    import pytest

    if fmt is None:
        ids = [' {}={!r} '.format(name, p) for p in params]
    else:
        ids = [fmt.format(name=name, value=p) for p in params]

    wrapper = pytest.fixture(scope='module', params=params, ids=ids,
                             name=name)
    return wrapper(lambda request: request.param)


def _import_pytest():
    try:
        import pytest
    except ImportError:
        raise ImportError('numiter tests cannot be run without `pytest` '
                          'installed.\nRun `$ pip install [--user] '
                          'numiter[testing]` in order to install `pytest`.')
    return pytest


def test(arguments=None):
    """Run the numiter test suite.

    Parameters
    ----------
    arguments : sequence of str, optional
        Additional command line arguments for pytest, e.g.
        ``['-S', 'largescale']`` to include the slow tests.
    """
    pytest = _import_pytest()
    pkg_dir = os.path.abspath(os.path.join(os.path.dirname(__file__),
                                           os.pardir))
    args = [pkg_dir, '-p', 'numiter.util.pytest_config']
    args.extend(arguments or [])
    return pytest.main(args)


def run_doctests(**kwargs):
    """Run the doctests of the module executed as ``__main__``.

    ``np`` and ``numiter`` are available in the examples, and whitespace
    differences are ignored. Keyword arguments are passed on to
    `doctest.testmod` and override these defaults.
    """
    import doctest
    import numiter

    kwargs.setdefault('optionflags', doctest.NORMALIZE_WHITESPACE)
    kwargs.setdefault('extraglobs', {'numiter': numiter, 'np': np})
    doctest.testmod(**kwargs)


def test_file(file, args=None):
    """Run the tests in ``file`` verbosely."""
    pytest = _import_pytest()
    pytest_args = [str(file).replace('\\', '/'), '-v']
    pytest_args.extend(args or [])
    return pytest.main(pytest_args)


if __name__ == '__main__':
    run_doctests()
