# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Utilities mainly for internal use."""

import numpy as np

__all__ = (
    'REPR_PRECISION',
    'dtype_str',
    'is_real_floating_dtype',
    'normalized_real_dtype',
    'is_string',
    'signature_string',
)


REPR_PRECISION = 8  # Significant digits of floats in `repr` strings

_DTYPE_SHORT_NAMES = {np.dtype(float): 'float', np.dtype(int): 'int'}


def dtype_str(dtype):
    """Return the name of ``dtype``, using ``'float'`` and ``'int'``
    for the Python defaults.

    Examples
    --------
    >>> dtype_str(float)
    'float'
    >>> dtype_str('float32')
    'float32'
    """
    dtype = np.dtype(dtype)
    return _DTYPE_SHORT_NAMES.get(dtype, dtype.name)


def is_real_floating_dtype(dtype):
    """Return ``True`` if ``dtype`` is a real floating point type."""
    return np.issubdtype(np.dtype(dtype), np.floating)


def normalized_real_dtype(dtype):
    """Return ``dtype`` as `numpy.dtype`, requiring real floating point.

    ``None`` is passed through, meaning "use the type of the input".

    Examples
    --------
    >>> normalized_real_dtype('float32')
    dtype('float32')
    >>> normalized_real_dtype(None) is None
    True
    >>> normalized_real_dtype(int)
    Traceback (most recent call last):
        ...
    TypeError: `dtype` must be a real floating point type, got 'int'
    """
    if dtype is None:
        return None
    dtype = np.dtype(dtype)
    if not is_real_floating_dtype(dtype):
        raise TypeError("`dtype` must be a real floating point type, got '{}'"
                        "".format(dtype_str(dtype)))
    return dtype


def is_string(obj):
    """Return ``True`` if ``obj`` is a `str` or `bytes` object."""
    return isinstance(obj, (str, bytes))


def _arg_string(arg):
    """Return the ``repr`` string of a single argument.

    Floats are printed with at most `REPR_PRECISION` significant digits,
    also inside tuples.
    """
    if isinstance(arg, tuple):
        parts = [_arg_string(a) for a in arg]
        if len(parts) == 1:
            return '({},)'.format(parts[0])
        return '({})'.format(', '.join(parts))
    elif isinstance(arg, (float, np.floating)):
        if not np.isfinite(arg):
            return "float('{}')".format(float(arg))
        return '{:.{}}'.format(float(arg), REPR_PRECISION)
    else:
        return repr(arg)


def signature_string(posargs, optargs):
    """Return the argument part of a constructor-style ``repr``.

    Parameters
    ----------
    posargs : sequence
        Positional argument values, always included.
    optargs : sequence of 3-tuples
        Optional arguments as ``(name, value, default)``. Only those with
        ``value != default`` are included, as ``name=value``.

    Returns
    -------
    signature : str
        Typically used as ::

            '{}({})'.format(self.__class__.__name__, signature)

    Examples
    --------
    >>> signature_string([1, 'a', None], [('dtype', 'float32', None)])
    "1, 'a', None, dtype='float32'"
    >>> signature_string([0.0, 1.0], [('endpoint', True, True)])
    '0.0, 1.0'
    >>> signature_string([(0.5, 1 / 3)], [('order', 'F', 'C')])
    "(0.5, 0.33333333), order='F'"
    """
    parts = [_arg_string(arg) for arg in posargs]
    parts.extend('{}={}'.format(name, _arg_string(value))
                 for name, value, default in optargs if value != default)
    return ', '.join(parts)


if __name__ == '__main__':
    from numiter.util.testutils import run_doctests
    run_doctests()
