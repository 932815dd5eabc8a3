# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Evenly spaced sequences with a fixed number of elements."""

import sys

import numpy as np

from numiter.set import Interval, as_interval
from numiter.space.base import Space
from numiter.util.exceptions import SpaceDomainError
from numiter.util.normalize import safe_int_conv
from numiter.util.numerics import as_real, is_finite, lerp
from numiter.util.utility import (
    dtype_str, normalized_real_dtype, signature_string)


__all__ = ('LinSpace', 'lin_space')


def _normalized_endpoints(start, end, dtype):
    """Return finite real ``start, end`` in the arithmetic of ``dtype``."""
    start, end = as_real(start, dtype), as_real(end, dtype)
    for name, value in (('start', start), ('end', end)):
        if not is_finite(value):
            raise SpaceDomainError('`{}` must be finite, got {!r}'
                                   ''.format(name, value))

    try:
        with np.errstate(over='ignore'):
            end - start
    except TypeError:
        raise TypeError('`start` {!r} and `end` {!r} do not support '
                        'arithmetic with each other'.format(start, end))
    return start, end


def _normalized_num(num):
    num, num_in = safe_int_conv(num), num
    if num < 0:
        raise ValueError('`num` must be nonnegative, got {}'.format(num_in))
    if num > sys.maxsize:
        raise ValueError('`num` {} is larger than the maximum of {}'
                         ''.format(num, sys.maxsize))
    return num


class LinSpace(Space):

    """Linearly spaced sequence over an interval.

    The element at position ``i`` is computed as the linear interpolation
    between ``start`` and ``end`` at the fraction ``i / (num - 1)`` for
    closed intervals and ``i / num`` for half-open ones, see
    `numiter.util.numerics.lerp`. In particular, ``start`` and, for closed
    intervals, ``end`` are hit exactly.
    """

    def __init__(self, start, end, num, endpoint=True, dtype=None):
        """Initialize a new instance.

        Parameters
        ----------
        start, end : real number
            Finite endpoints of the interval.
        num : nonnegative int
            Number of elements.
        endpoint : bool, optional
            If ``True``, ``end`` is the last element. Otherwise, the
            interval is divided into ``num`` equal parts and ``end`` is
            excluded.
        dtype : optional
            Real floating point data type of the elements. ``None`` means
            the type of ``start`` and ``end``, with integers promoted to
            `float`.

        Examples
        --------
        >>> list(LinSpace(1.0, 5.0, 5))
        [1.0, 2.0, 3.0, 4.0, 5.0]
        >>> list(LinSpace(0.0, 5.0, 5, endpoint=False))
        [0.0, 1.0, 2.0, 3.0, 4.0]

        A single element is always ``start``:

        >>> list(LinSpace(2.0, 3.0, 1))
        [2.0]
        """
        self.__dtype = normalized_real_dtype(dtype)
        self.__start, self.__end = _normalized_endpoints(start, end,
                                                         self.dtype)
        num = _normalized_num(num)
        self.__endpoint = bool(endpoint)
        self.__denominator = num - 1 if self.endpoint else num
        super().__init__(num)

    @property
    def start(self):
        """First element of the sequence."""
        return self.__start

    @property
    def end(self):
        """End of the interval, the last element if `endpoint` is set."""
        return self.__end

    @property
    def num(self):
        """Total number of elements."""
        return self.size

    @property
    def endpoint(self):
        """``True`` if the interval is closed."""
        return self.__endpoint

    @property
    def dtype(self):
        """Data type given at construction, or ``None``."""
        return self.__dtype

    @property
    def interval(self):
        """The `Interval` covered by this space."""
        return Interval(self.start, self.end, closed=self.endpoint)

    @property
    def step(self):
        """Distance between neighboring elements.

        ``None`` for closed spaces with fewer than 2 elements.

        Examples
        --------
        >>> LinSpace(0.0, 1.0, 5).step
        0.25
        >>> LinSpace(0.0, 1.0, 4, endpoint=False).step
        0.25
        """
        if self.__denominator <= 0:
            return None
        return (self.end - self.start) / self.__denominator

    def _value(self, index):
        return lerp(self.start, self.end, index, self.__denominator)

    def __repr__(self):
        """Return ``repr(self)``.

        Examples
        --------
        >>> LinSpace(0.0, 1.0, 5, endpoint=False)
        LinSpace(0.0, 1.0, 5, endpoint=False)
        """
        posargs = [self.start, self.end, self.num]
        dtype = None if self.dtype is None else dtype_str(self.dtype)
        optargs = [('endpoint', self.endpoint, True),
                   ('dtype', dtype, None)]
        return '{}({})'.format(self.__class__.__name__,
                               signature_string(posargs, optargs))


def lin_space(intv, num, endpoint=None, dtype=None):
    """Return a linearly spaced sequence over an interval.

    Parameters
    ----------
    intv : `Interval`, `range` or 2-sequence
        Interval to be sampled. A ``(start, end)`` pair is half-open
        unless ``endpoint=True`` is given.
    num : nonnegative int
        Number of elements.
    endpoint : bool, optional
        Whether ``end`` is included, see `numiter.set.as_interval`.
    dtype : optional
        Real floating point data type of the elements.

    Returns
    -------
    lin_space : `LinSpace`

    See Also
    --------
    log_space : logarithmic spacing
    grid_space : multi-dimensional version

    Examples
    --------
    >>> from numiter.set import closed
    >>> list(lin_space(closed(20.0, 21.0), 3))
    [20.0, 20.5, 21.0]
    >>> list(lin_space((20.0, 21.0), 2))
    [20.0, 20.5]

    The space can be consumed from both ends and indexed:

    >>> space = lin_space((0.0, 5.0), 5)
    >>> space.next_back()
    4.0
    >>> space[1]
    1.0
    >>> list(reversed(space))
    [3.0, 2.0, 1.0, 0.0]
    """
    intv = as_interval(intv, endpoint)
    if not intv.is_scalar:
        raise ValueError('`intv` must have scalar endpoints, got {!r}; use '
                         '`grid_space` for multiple axes'.format(intv))
    return LinSpace(intv.start, intv.end, num, endpoint=intv.closed,
                    dtype=dtype)


if __name__ == '__main__':
    from numiter.util.testutils import run_doctests
    run_doctests()
