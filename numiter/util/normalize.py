# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Utilities for normalization of user input."""

import operator

from numiter.util.utility import is_string


__all__ = ('normalized_scalar_param_list', 'normalized_order',
           'safe_int_conv')


def normalized_scalar_param_list(param, length, param_conv=None,
                                 keep_none=True):
    """Return a list of given length from a single or per-axis parameter.

    Grid constructors accept e.g. one element count for all axes or one
    count per axis. This function turns both into a list with one entry
    per axis:

    * Strings and non-iterable values are repeated ``length`` times.
    * A sequence of length 1 is repeated ``length`` times.
    * A sequence of length ``length`` is taken as is.

    Parameters
    ----------
    param :
        Input parameter to turn into a list.
    length : positive int
        Desired length of the output list.
    param_conv : callable, optional
        Conversion applied to each list entry.
    keep_none : bool, optional
        If ``True``, ``None`` entries are not converted.

    Returns
    -------
    plist : list
        Input parameter turned into a list of length ``length``.

    Examples
    --------
    >>> normalized_scalar_param_list(2, 3)
    [2, 2, 2]
    >>> normalized_scalar_param_list((2, 4), 2)
    [2, 4]
    >>> normalized_scalar_param_list(['10'], 2, param_conv=int)
    [10, 10]
    >>> normalized_scalar_param_list((1, None), 2, param_conv=float)
    [1.0, None]
    >>> normalized_scalar_param_list((2, 4), 3)
    Traceback (most recent call last):
        ...
    ValueError: sequence `param` has length 2, expected 3
    """
    length, length_in = int(length), length
    if length <= 0:
        raise ValueError('`length` must be positive, got {}'.format(length_in))

    if is_string(param):
        plist = [param] * length
    else:
        try:
            plist = list(param)
        except TypeError:
            plist = [param] * length

    if len(plist) == 1:
        plist *= length
    elif len(plist) != length:
        raise ValueError('sequence `param` has length {}, expected {}'
                         ''.format(len(plist), length))

    if param_conv is not None:
        plist = [p if p is None and keep_none else param_conv(p)
                 for p in plist]
    return plist


def normalized_order(order):
    """Return a validated traversal order for multi-dimensional spaces.

    Parameters
    ----------
    order : {'C', 'F'}
        ``'C'`` means row-major order (last axis varies fastest), ``'F'``
        means column-major order (first axis varies fastest). Lowercase
        letters are accepted.

    Returns
    -------
    order : str
        The uppercase order letter.

    Examples
    --------
    >>> normalized_order('c')
    'C'
    >>> normalized_order('F')
    'F'
    """
    order, order_in = str(order).upper(), order
    if order not in ('C', 'F'):
        raise ValueError("`order` must be 'C' or 'F', got {!r}"
                         "".format(order_in))
    return order


def safe_int_conv(number):
    """Convert an integer-like number to `int`.

    Floating point input is rejected even if it represents an integer,
    since it usually indicates a mixed up count and step parameter.

    Examples
    --------
    >>> safe_int_conv(3)
    3
    >>> safe_int_conv(np.int32(7))
    7
    >>> safe_int_conv(3.0)
    Traceback (most recent call last):
        ...
    ValueError: cannot safely convert 3.0 to integer
    """
    try:
        return operator.index(number)
    except TypeError:
        raise ValueError('cannot safely convert {!r} to integer'
                         ''.format(number))


if __name__ == '__main__':
    from numiter.util.testutils import run_doctests
    run_doctests()
