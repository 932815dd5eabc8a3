# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Half-open and closed intervals as input to spaces."""

import numpy as np

from numiter.util.utility import is_string, signature_string


__all__ = ('Interval', 'closed', 'half_open', 'as_interval')


class Interval(object):

    """An interval of numbers or of points, half-open or closed.

    An interval is given by its ``start`` and ``end``. The ``start`` is
    always included, the ``end`` only for closed intervals. For
    multi-dimensional spaces, ``start`` and ``end`` are sequences of equal
    length, and the interval represents the product of the per-axis
    intervals.

    The endpoints are not ordered: ``start > end`` describes an interval
    traversed in descending direction.

    `Interval` objects are immutable.
    """

    def __init__(self, start, end, closed=False):
        """Initialize a new instance.

        Parameters
        ----------
        start, end : number or sequence of numbers
            Endpoints of the interval. If sequences are given, they
            must have the same positive length.
        closed : bool, optional
            If ``True``, ``end`` belongs to the interval.

        Examples
        --------
        >>> Interval(0.0, 1.0)
        Interval(0.0, 1.0)
        >>> Interval([0, 0], [1, 2], closed=True)
        Interval((0, 0), (1, 2), closed=True)
        >>> Interval([0, 0], [1])
        Traceback (most recent call last):
            ...
        ValueError: `start` and `end` have different lengths (2 != 1)
        """
        start_ndim, end_ndim = np.ndim(start), np.ndim(end)
        if start_ndim > 1 or end_ndim > 1:
            raise ValueError('`start` and `end` must be numbers or flat '
                             'sequences, got {!r} and {!r}'
                             ''.format(start, end))
        if start_ndim != end_ndim:
            raise ValueError('`start` and `end` must both be numbers or '
                             'both be sequences, got {!r} and {!r}'
                             ''.format(start, end))

        if start_ndim == 1:
            start, end = tuple(start), tuple(end)
            if len(start) != len(end):
                raise ValueError('`start` and `end` have different lengths '
                                 '({} != {})'.format(len(start), len(end)))
            if len(start) == 0:
                raise ValueError('`start` and `end` may not be empty')

        self.__start = start
        self.__end = end
        self.__closed = bool(closed)

    @property
    def start(self):
        """First point of the interval, always contained."""
        return self.__start

    @property
    def end(self):
        """Last point of the interval, contained if `closed`."""
        return self.__end

    @property
    def closed(self):
        """``True`` if `end` belongs to the interval."""
        return self.__closed

    @property
    def is_scalar(self):
        """``True`` if the endpoints are numbers rather than sequences."""
        return not isinstance(self.start, tuple)

    @property
    def ndim(self):
        """Number of axes of the interval, 1 for scalar endpoints."""
        return 1 if self.is_scalar else len(self.start)

    def axes(self):
        """Return the per-axis intervals.

        Returns
        -------
        axes : tuple of `Interval`
            One scalar interval per axis, sharing the `closed` flag.

        Examples
        --------
        >>> Interval([0, 0], [1, 2]).axes()
        (Interval(0, 1), Interval(0, 2))
        >>> Interval(0.0, 1.0, closed=True).axes()
        (Interval(0.0, 1.0, closed=True),)
        """
        if self.is_scalar:
            return (self,)
        return tuple(Interval(a, b, closed=self.closed)
                     for a, b in zip(self.start, self.end))

    def _axis_contains(self, point):
        start, end = self.start, self.end
        if start <= end:
            return start <= point and (point <= end if self.closed
                                       else point < end)
        else:
            return start >= point and (point >= end if self.closed
                                       else point > end)

    def __contains__(self, other):
        """Return ``other in self``.

        Examples
        --------
        >>> 0.5 in Interval(0.0, 1.0)
        True
        >>> 1.0 in Interval(0.0, 1.0)
        False
        >>> 1.0 in Interval(0.0, 1.0, closed=True)
        True
        >>> (0.5, 2.0) in Interval([0, 0], [1, 2], closed=True)
        True
        """
        if self.is_scalar:
            if np.ndim(other) != 0:
                return False
            try:
                return bool(self._axis_contains(other))
            except TypeError:
                return False

        if np.ndim(other) != 1 or len(other) != self.ndim:
            return False
        try:
            return all(intv._axis_contains(point)
                       for intv, point in zip(self.axes(), other))
        except TypeError:
            return False

    def __eq__(self, other):
        """Return ``self == other``."""
        if other is self:
            return True
        elif not isinstance(other, Interval):
            return False
        else:
            return (self.start == other.start and
                    self.end == other.end and
                    self.closed == other.closed)

    def __ne__(self, other):
        """Return ``self != other``."""
        return not self.__eq__(other)

    def __hash__(self):
        """Return ``hash(self)``."""
        return hash((type(self), self.start, self.end, self.closed))

    def __repr__(self):
        """Return ``repr(self)``."""
        posargs = [self.start, self.end]
        optargs = [('closed', self.closed, False)]
        return '{}({})'.format(self.__class__.__name__,
                               signature_string(posargs, optargs))


def closed(start, end):
    """Return the closed interval from ``start`` to ``end``.

    Examples
    --------
    >>> closed(1.0, 5.0)
    Interval(1.0, 5.0, closed=True)
    """
    return Interval(start, end, closed=True)


def half_open(start, end):
    """Return the interval from ``start`` to ``end``, excluding ``end``.

    Examples
    --------
    >>> half_open(0.0, 2.0)
    Interval(0.0, 2.0)
    """
    return Interval(start, end, closed=False)


def as_interval(intv, endpoint=None):
    """Convert range-like input to an `Interval`.

    Parameters
    ----------
    intv : `Interval`, `range` or 2-sequence
        Input to convert. A `range` must have step 1 and is half-open.
        A ``(start, end)`` pair is half-open unless ``endpoint`` is
        ``True``.
    endpoint : bool, optional
        Whether ``end`` should be included. ``None`` means "as given by
        ``intv``". For `Interval` and `range` input, an explicit value
        must agree with the input.

    Returns
    -------
    interval : `Interval`

    Examples
    --------
    >>> as_interval((0.0, 1.0))
    Interval(0.0, 1.0)
    >>> as_interval((0.0, 1.0), endpoint=True)
    Interval(0.0, 1.0, closed=True)
    >>> as_interval(range(2, 5))
    Interval(2, 5)
    >>> as_interval(closed(0.0, 1.0), endpoint=False)
    Traceback (most recent call last):
        ...
    ValueError: `endpoint=False` contradicts Interval(0.0, 1.0, closed=True)
    """
    if isinstance(intv, Interval):
        if endpoint is not None and bool(endpoint) != intv.closed:
            raise ValueError('`endpoint={}` contradicts {!r}'
                             ''.format(endpoint, intv))
        return intv

    if isinstance(intv, range):
        if intv.step != 1:
            raise ValueError('`range` must have step 1, got {!r}'
                             ''.format(intv))
        if endpoint:
            raise ValueError('`endpoint={}` contradicts {!r}'
                             ''.format(endpoint, intv))
        return Interval(intv.start, intv.stop)

    if is_string(intv):
        raise TypeError('`intv` must be an `Interval`, a `range` or a '
                        '`(start, end)` pair, got {!r}'.format(intv))
    try:
        start, end = intv
    except (TypeError, ValueError):
        raise TypeError('`intv` must be an `Interval`, a `range` or a '
                        '`(start, end)` pair, got {!r}'.format(intv))

    return Interval(start, end, closed=bool(endpoint))


if __name__ == '__main__':
    from numiter.util.testutils import run_doctests
    run_doctests()
