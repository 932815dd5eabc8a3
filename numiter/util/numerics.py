# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Closed-form interpolation and stepping of real numbers.

All functions compute a sequence element directly from its index. No
function accumulates a step, hence there is no drift along long sequences.

The arithmetic is the one of the values handed in, so Python `float`,
NumPy floating point scalars, `fractions.Fraction` and `decimal.Decimal`
can all be used.
"""

import math
import numbers
import operator
import sys
from decimal import Decimal

import numpy as np

from numiter.util.exceptions import SpaceStepError

__all__ = (
    'as_real',
    'is_finite',
    'real_log',
    'real_exp',
    'lerp',
    'log_lerp',
    'arange_len',
    'arange_value',
    'lerp_fn',
    'lerp_index_fn',
    'lerp_iter',
)


def as_real(value, dtype=None):
    """Return ``value`` as a real number usable for interpolation.

    Parameters
    ----------
    value : real number
        Python or NumPy number, `fractions.Fraction` or `decimal.Decimal`.
    dtype : optional
        If given, ``value`` is cast to the scalar type of this NumPy data
        type. Otherwise, integers are converted to `float` and all other
        real numbers are returned unchanged.

    Examples
    --------
    >>> as_real(1)
    1.0
    >>> as_real(0.5)
    0.5
    >>> as_real(2, dtype='float32').dtype
    dtype('float32')
    >>> as_real(1j)
    Traceback (most recent call last):
        ...
    TypeError: 1j is not a real number
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError('{!r} is not a real number'.format(value))
    if dtype is not None:
        return np.dtype(dtype).type(value)
    if isinstance(value, numbers.Integral):
        return float(value)
    elif isinstance(value, (numbers.Real, Decimal)):
        return value
    else:
        raise TypeError('{!r} is not a real number'.format(value))


def is_finite(value):
    """Return ``True`` if ``value`` is neither infinite nor NaN."""
    if isinstance(value, np.generic):
        return bool(np.isfinite(value))
    elif isinstance(value, Decimal):
        return value.is_finite()
    elif isinstance(value, numbers.Rational):
        return True
    else:
        return math.isfinite(value)


def real_log(value):
    """Natural logarithm in the arithmetic of ``value``."""
    if isinstance(value, np.generic):
        return np.log(value)
    elif isinstance(value, Decimal):
        return value.ln()
    else:
        return math.log(value)


def real_exp(value):
    """Exponential function in the arithmetic of ``value``."""
    if isinstance(value, np.generic):
        return np.exp(value)
    elif isinstance(value, Decimal):
        return value.exp()
    else:
        return math.exp(value)


def lerp(start, end, numerator, denominator):
    """Interpolate linearly at the fraction ``numerator / denominator``.

    The result is ``start + (end - start) * numerator / denominator``,
    evaluated from the nearer of the two endpoints. This guarantees ::

        lerp(start, end, 0, d) == start
        lerp(start, end, d, d) == end

    exactly, not only up to rounding. For ``numerator == 0`` no division
    takes place, so ``denominator`` may be 0.

    Parameters
    ----------
    start, end : real number
        Values at fractions 0 and 1, respectively.
    numerator, denominator : int
        The fraction at which to evaluate.

    Returns
    -------
    value : real number
        The interpolated value, in the arithmetic of ``start`` and ``end``.

    Examples
    --------
    >>> lerp(1.0, 5.0, 1, 4)
    2.0
    >>> lerp(1.0, 5.0, 3, 4)
    4.0
    >>> lerp(0.1, 0.7, 3, 3)
    0.7

    Values outside the interval are extrapolated:

    >>> lerp(0.0, 1.0, 3, 2)
    1.5

    Endpoints whose difference overflows are interpolated without
    forming the difference:

    >>> lerp(-1e308, 1e308, 1, 2)
    0.0
    """
    if numerator == 0:
        return start
    elif numerator == denominator:
        return end

    with np.errstate(over='ignore'):
        diff = end - start
    if not is_finite(diff):
        # Endpoints too far apart for their difference to be representable
        t = numerator / denominator
        return start * (1 - t) + end * t
    elif 2 * numerator <= denominator:
        return start + diff * numerator / denominator
    else:
        return end - diff * (denominator - numerator) / denominator


def log_lerp(start, end, numerator, denominator):
    """Interpolate logarithmically at ``numerator / denominator``.

    The result is ``exp(lerp(log(start), log(end), numerator,
    denominator))``, except that the endpoints are returned exactly.

    ``start`` and ``end`` must be positive; this is not checked here but
    by the constructors of the spaces using this function.

    Examples
    --------
    >>> log_lerp(1.0, 1000.0, 0, 3)
    1.0
    >>> log_lerp(1.0, 1000.0, 3, 3)
    1000.0
    >>> abs(log_lerp(1.0, 1000.0, 2, 3) - 100.0) < 1e-10
    True
    """
    if numerator == 0:
        return start
    elif numerator == denominator:
        return end

    log_value = lerp(real_log(start), real_log(end), numerator, denominator)
    return real_exp(log_value)


def _precedes(value, end, step):
    """Return ``True`` if ``value`` lies before ``end`` in step direction."""
    return value < end if step > 0 else value > end


def arange_value(start, step, index):
    """Return ``start + step * index``.

    Examples
    --------
    >>> arange_value(0.0, 0.5, 3)
    1.5
    """
    return start + step * index


def arange_len(start, end, step):
    """Return the number of elements of a stepped half-open interval.

    The number is ``ceil((end - start) / step)``, clamped to 0 from below.
    If the sign of ``step`` does not agree with the direction from
    ``start`` to ``end``, the result is therefore 0.

    Since rounding in the quotient can make the last candidate element
    land on or beyond ``end``, such candidates are dropped. This ensures
    that all elements lie in the half-open interval.

    Parameters
    ----------
    start, end : real number
        Finite endpoints of the interval. ``end`` is excluded.
    step : real number
        Finite, nonzero step.

    Returns
    -------
    length : int

    Examples
    --------
    >>> arange_len(0.0, 2.0, 0.5)
    4
    >>> arange_len(0.0, 2.1, 0.5)
    5
    >>> arange_len(0.0, 2.0, -0.5)
    0
    >>> arange_len(2.0, 0.0, -0.5)
    4

    Here, the quotient is rounded up to slightly above 3, but the 4th
    element would equal ``end``:

    >>> arange_len(1.0, 1.3, 0.1)
    3
    """
    quotient = (end - start) / step
    try:
        length = int(math.ceil(quotient))
    except (OverflowError, ValueError):
        raise SpaceStepError('`step` {!r} does not divide the interval from '
                             '{!r} to {!r} into a finite number of elements'
                             ''.format(step, start, end))

    length = max(length, 0)
    if length > sys.maxsize:
        raise SpaceStepError('`step` {!r} results in {} elements, more than '
                             'the maximum of {}'
                             ''.format(step, length, sys.maxsize))

    while length > 0 and not _precedes(arange_value(start, step, length - 1),
                                       end, step):
        length -= 1
    return length


def _endpoints(intv):
    """Return ``(start, end)`` of an `Interval` or a 2-sequence."""
    try:
        return intv.start, intv.end
    except AttributeError:
        start, end = intv
        return start, end


def lerp_fn(from_intv, to_intv):
    """Return a function mapping one interval linearly onto another.

    Parameters
    ----------
    from_intv, to_intv : `Interval` or 2-sequence
        Source and target interval, given by their endpoints. The source
        interval must not be degenerate.

    Returns
    -------
    lerp_func : callable
        Function taking one argument ``x``. Arguments outside of
        ``from_intv`` are mapped by extrapolation.

    Examples
    --------
    >>> f = lerp_fn((0.0, 2.0), (20.0, 21.0))
    >>> f(1.0)
    20.5
    >>> f(-1.0)
    19.5
    """
    x0, x1 = _endpoints(from_intv)
    y0, y1 = _endpoints(to_intv)
    if x0 == x1:
        raise ValueError('source interval [{!r}, {!r}] is degenerate'
                         ''.format(x0, x1))

    def lerp_func(x):
        return (y0 * (x1 - x) + y1 * (x - x0)) / (x1 - x0)

    return lerp_func


def lerp_index_fn(from_intv, to_intv):
    """Return a function mapping an integer interval linearly.

    Like `lerp_fn`, but the source interval and the arguments of the
    returned function must be integers.

    Examples
    --------
    >>> f = lerp_index_fn((0, 2), (20.0, 21.0))
    >>> f(1)
    20.5
    >>> f(3)
    21.5
    """
    x0, x1 = (operator.index(x) for x in _endpoints(from_intv))
    func = lerp_fn((x0, x1), to_intv)

    def lerp_index_func(x):
        return func(operator.index(x))

    return lerp_index_func


def lerp_iter(from_intv, to_intv, over):
    """Lazily map the values of ``over`` with `lerp_fn`.

    Examples
    --------
    >>> list(lerp_iter((0.0, 2.0), (20.0, 21.0), [-1.0, 1.0]))
    [19.5, 20.5]
    """
    return map(lerp_fn(from_intv, to_intv), over)


if __name__ == '__main__':
    from numiter.util.testutils import run_doctests
    run_doctests()
