# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Multi-dimensional sampling grids as lazy sequences of points.

A grid is the Cartesian product of up to `MAX_GRID_NDIM` one-dimensional
axes. Its points are produced in a fixed order, with the linear position
of a point decomposed into per-axis positions like the digits of a
mixed-radix number.
"""

import operator
import sys

from numiter.set import Interval, as_interval
from numiter.space.stepped import Arange
from numiter.space.base import Space
from numiter.space.linspace import LinSpace
from numiter.util.normalize import (
    normalized_order, normalized_scalar_param_list, safe_int_conv)
from numiter.util.utility import dtype_str, signature_string


__all__ = ('MAX_GRID_NDIM', 'Grid', 'GridSpace', 'ArangeGrid', 'GridStep',
           'grid', 'grid_space', 'arange_grid', 'grid_step')


MAX_GRID_NDIM = 4


class Grid(Space):

    """Cartesian product of one-dimensional axes.

    The points of a grid are tuples with one entry per axis. In the
    default ``'C'`` (row-major) order, the last axis varies fastest, in
    ``'F'`` order the first axis varies fastest.

    Examples
    --------
    >>> list(Grid(range(2), 'ab'))
    [(0, 'a'), (0, 'b'), (1, 'a'), (1, 'b')]
    >>> list(Grid(range(2), 'ab', order='F'))
    [(0, 'a'), (1, 'a'), (0, 'b'), (1, 'b')]
    """

    def __init__(self, *axes, order='C'):
        """Initialize a new instance.

        Parameters
        ----------
        axis1,...,axisN : sized and indexable or iterable
            The axes of the grid, between 1 and `MAX_GRID_NDIM` many.
            Spaces are copied with their current cursor, so only their
            remaining elements are used. Other iterables which are not
            `range` or `tuple` are read into a tuple.
        order : {'C', 'F'}, optional
            Ordering of the grid points.
        """
        if not 1 <= len(axes) <= MAX_GRID_NDIM:
            raise ValueError('number of axes must be between 1 and {}, got {}'
                             ''.format(MAX_GRID_NDIM, len(axes)))

        self.__axes = tuple(self._normalized_axis(axis) for axis in axes)
        self.__order = normalized_order(order)
        self.__shape = tuple(len(axis) for axis in self.__axes)

        size = 1
        for n in self.shape:
            size *= n
        if size > sys.maxsize:
            raise ValueError('grid of shape {} has {} points, more than the '
                             'maximum of {}'
                             ''.format(self.shape, size, sys.maxsize))
        super().__init__(size)

    @staticmethod
    def _normalized_axis(axis):
        if isinstance(axis, Space):
            return axis.copy()
        elif isinstance(axis, (range, tuple)):
            return axis
        else:
            return tuple(axis)

    @property
    def ndim(self):
        """Number of axes."""
        return len(self.__axes)

    @property
    def shape(self):
        """Number of elements per axis."""
        return self.__shape

    @property
    def order(self):
        """Ordering of the grid points, ``'C'`` or ``'F'``."""
        return self.__order

    @property
    def axes(self):
        """The axes of the grid.

        Axes that are spaces are returned as copies, hence consuming them
        does not affect the grid.
        """
        return tuple(axis.copy() if isinstance(axis, Space) else axis
                     for axis in self.__axes)

    def multi_index(self, index):
        """Return the per-axis positions of the point at ``index``.

        Parameters
        ----------
        index : int
            Absolute position in the grid, ``0 <= index < size``.

        Examples
        --------
        >>> g = Grid(range(2), range(3))
        >>> g.multi_index(4)
        (1, 1)
        >>> Grid(range(2), range(3), order='F').multi_index(4)
        (0, 2)
        """
        index, index_in = operator.index(index), index
        if not 0 <= index < self.size:
            raise IndexError('index {} out of range for {} points'
                             ''.format(index_in, self.size))

        if self.order == 'C':
            axis_order = reversed(range(self.ndim))
        else:
            axis_order = range(self.ndim)

        multi_index = [0] * self.ndim
        for i in axis_order:
            index, multi_index[i] = divmod(index, self.shape[i])
        return tuple(multi_index)

    def _value(self, index):
        return tuple(axis[i]
                     for axis, i in zip(self.__axes, self.multi_index(index)))

    def __array__(self, dtype=None, copy=None):
        """Return the remaining points as array of shape ``(n, ndim)``."""
        points = super().__array__(dtype=dtype, copy=copy)
        return points.reshape(len(self), self.ndim)

    def __repr__(self):
        """Return ``repr(self)``."""
        optargs = [('order', self.order, 'C')]
        return '{}({})'.format(self.__class__.__name__,
                               signature_string(self.__axes, optargs))


def _axis_intervals(min_pt, max_pt):
    """Return the per-axis intervals for ``min_pt`` and ``max_pt``."""
    return Interval(min_pt, max_pt).axes()


class GridSpace(Grid):

    """Grid with linearly spaced axes.

    Every axis is a `LinSpace` with its own number of elements, all
    sharing the ``endpoint`` choice and the data type.
    """

    def __init__(self, min_pt, max_pt, num, endpoint=True, dtype=None,
                 order='C'):
        """Initialize a new instance.

        Parameters
        ----------
        min_pt, max_pt : real number or sequence of real numbers
            Start and end points of the grid, one entry per axis.
        num : nonnegative int or sequence of nonnegative ints
            Number of elements per axis. A single value is used for
            all axes.
        endpoint : bool, optional
            If ``True``, ``max_pt`` is the last grid point.
        dtype : optional
            Real floating point data type of the coordinates.
        order : {'C', 'F'}, optional
            Ordering of the grid points.

        Examples
        --------
        >>> g = GridSpace([0, 0], [1, 2], [2, 4], endpoint=False)
        >>> len(g)
        8
        >>> list(g)[:5]
        [(0.0, 0.0), (0.0, 0.5), (0.0, 1.0), (0.0, 1.5), (0.5, 0.0)]

        With ``order='F'``, the first axis varies fastest:

        >>> g = GridSpace([0, 0], [1, 2], [2, 4], endpoint=False, order='F')
        >>> list(g)[:4]
        [(0.0, 0.0), (0.5, 0.0), (0.0, 0.5), (0.5, 0.5)]
        """
        intervals = _axis_intervals(min_pt, max_pt)
        num = normalized_scalar_param_list(num, len(intervals),
                                           param_conv=safe_int_conv)
        axes = [LinSpace(intv.start, intv.end, n, endpoint=endpoint,
                         dtype=dtype)
                for intv, n in zip(intervals, num)]
        self.__endpoint = bool(endpoint)
        self.__dtype = axes[0].dtype
        super().__init__(*axes, order=order)

    @property
    def min_pt(self):
        """Start point of the grid."""
        return tuple(axis.start for axis in self.axes)

    @property
    def max_pt(self):
        """End point of the grid, the last point if `endpoint` is set."""
        return tuple(axis.end for axis in self.axes)

    @property
    def num(self):
        """Number of elements per axis, equal to `shape`."""
        return self.shape

    @property
    def endpoint(self):
        """``True`` if ``max_pt`` is a grid point."""
        return self.__endpoint

    @property
    def dtype(self):
        """Data type given at construction, or ``None``."""
        return self.__dtype

    @property
    def interval(self):
        """The multi-dimensional `Interval` covered by this grid."""
        return Interval(self.min_pt, self.max_pt, closed=self.endpoint)

    @property
    def step(self):
        """Distance between neighboring points per axis.

        Entries are ``None`` for closed axes with fewer than 2 elements.

        Examples
        --------
        >>> GridSpace([0, 0], [1, 2], [3, 5]).step
        (0.5, 0.5)
        """
        return tuple(axis.step for axis in self.axes)

    def __repr__(self):
        """Return ``repr(self)``.

        Examples
        --------
        >>> GridSpace([0, 0], [1, 2], [2, 4], endpoint=False)
        GridSpace((0.0, 0.0), (1.0, 2.0), (2, 4), endpoint=False)
        """
        posargs = [self.min_pt, self.max_pt, self.num]
        dtype = None if self.dtype is None else dtype_str(self.dtype)
        optargs = [('endpoint', self.endpoint, True),
                   ('dtype', dtype, None),
                   ('order', self.order, 'C')]
        return '{}({})'.format(self.__class__.__name__,
                               signature_string(posargs, optargs))


class ArangeGrid(Grid):

    """Grid with axes of fixed step.

    Every axis is an `Arange` over a half-open interval, with its own
    step.
    """

    def __init__(self, min_pt, max_pt, step, dtype=None, order='C'):
        """Initialize a new instance.

        Parameters
        ----------
        min_pt, max_pt : real number or sequence of real numbers
            Start and excluded end points of the grid, one entry per
            axis.
        step : real number or sequence of real numbers
            Step per axis. A single value is used for all axes.
        dtype : optional
            Real floating point data type of the coordinates.
        order : {'C', 'F'}, optional
            Ordering of the grid points.

        Examples
        --------
        >>> g = ArangeGrid([0, 0], [1, 2], [0.5, 1.0])
        >>> g.shape
        (2, 2)
        >>> list(g)
        [(0.0, 0.0), (0.0, 1.0), (0.5, 0.0), (0.5, 1.0)]
        """
        intervals = _axis_intervals(min_pt, max_pt)
        step = normalized_scalar_param_list(step, len(intervals))
        axes = [Arange(intv.start, intv.end, s, dtype=dtype)
                for intv, s in zip(intervals, step)]
        self.__dtype = axes[0].dtype
        super().__init__(*axes, order=order)

    @property
    def min_pt(self):
        """Start point of the grid."""
        return tuple(axis.start for axis in self.axes)

    @property
    def max_pt(self):
        """Excluded end point of the grid."""
        return tuple(axis.end for axis in self.axes)

    @property
    def step(self):
        """Step per axis."""
        return tuple(axis.step for axis in self.axes)

    @property
    def dtype(self):
        """Data type given at construction, or ``None``."""
        return self.__dtype

    @property
    def interval(self):
        """The half-open multi-dimensional `Interval` of this grid."""
        return Interval(self.min_pt, self.max_pt, closed=False)

    def __repr__(self):
        """Return ``repr(self)``."""
        posargs = [self.min_pt, self.max_pt, self.step]
        dtype = None if self.dtype is None else dtype_str(self.dtype)
        optargs = [('dtype', dtype, None),
                   ('order', self.order, 'C')]
        return '{}({})'.format(self.__class__.__name__,
                               signature_string(posargs, optargs))


class GridStep(Grid):

    """Grid of integer points with unit step.

    Unlike the other grids, the points are listed in ``'F'`` order by
    default, i.e., the first axis varies fastest.

    Examples
    --------
    >>> list(GridStep([0, 0], [2, 2]))
    [(0, 0), (1, 0), (0, 1), (1, 1)]
    >>> len(GridStep([0, 0], [2, 2], endpoint=True))
    9
    """

    def __init__(self, min_pt, max_pt, endpoint=False, order='F'):
        """Initialize a new instance.

        Parameters
        ----------
        min_pt, max_pt : int or sequence of ints
            Start and end points of the grid, one entry per axis. Axes
            with end before start are empty.
        endpoint : bool, optional
            If ``True``, ``max_pt`` is the last grid point.
        order : {'C', 'F'}, optional
            Ordering of the grid points. Default: first axis fastest.
        """
        intervals = _axis_intervals(min_pt, max_pt)
        self.__endpoint = bool(endpoint)
        axes = []
        for intv in intervals:
            try:
                start = operator.index(intv.start)
                end = operator.index(intv.end)
            except TypeError:
                raise TypeError('endpoints must be integers, got {!r} and {!r}'
                                ''.format(intv.start, intv.end))
            axes.append(range(start, end + 1 if self.endpoint else end))
        super().__init__(*axes, order=order)

    @property
    def min_pt(self):
        """Start point of the grid."""
        return tuple(axis.start for axis in self.axes)

    @property
    def max_pt(self):
        """End point of the grid, the last point if `endpoint` is set."""
        return tuple(axis.stop - 1 if self.endpoint else axis.stop
                     for axis in self.axes)

    @property
    def endpoint(self):
        """``True`` if ``max_pt`` is a grid point."""
        return self.__endpoint

    @property
    def interval(self):
        """The multi-dimensional `Interval` of this grid."""
        return Interval(self.min_pt, self.max_pt, closed=self.endpoint)

    def __repr__(self):
        """Return ``repr(self)``."""
        posargs = [self.min_pt, self.max_pt]
        optargs = [('endpoint', self.endpoint, False),
                   ('order', self.order, 'F')]
        return '{}({})'.format(self.__class__.__name__,
                               signature_string(posargs, optargs))


def grid(*axes, order='C'):
    """Return the Cartesian product of the given axes.

    Parameters
    ----------
    axis1,...,axisN : sized and indexable or iterable
        The axes of the grid, between 1 and `MAX_GRID_NDIM` many.
    order : {'C', 'F'}, optional
        Ordering of the grid points.

    Returns
    -------
    grid : `Grid`

    Examples
    --------
    >>> from numiter.space import lin_space
    >>> g = grid(lin_space((0.0, 1.0), 2), [10, 20])
    >>> list(g)
    [(0.0, 10), (0.0, 20), (0.5, 10), (0.5, 20)]
    """
    return Grid(*axes, order=order)


def grid_space(intv, num, endpoint=None, dtype=None, order='C'):
    """Return a grid with linearly spaced axes over an interval.

    Parameters
    ----------
    intv : `Interval` or 2-sequence
        Multi-dimensional interval to be sampled, e.g. a pair of points
        ``(min_pt, max_pt)``. A pair is half-open unless ``endpoint=True``
        is given.
    num : nonnegative int or sequence of nonnegative ints
        Number of elements per axis.
    endpoint : bool, optional
        Whether ``max_pt`` is included, see `numiter.set.as_interval`.
    dtype : optional
        Real floating point data type of the coordinates.
    order : {'C', 'F'}, optional
        Ordering of the grid points.

    Returns
    -------
    grid_space : `GridSpace`

    Examples
    --------
    >>> g = grid_space(([0, 0], [1, 2]), [2, 4])
    >>> g.shape
    (2, 4)
    >>> g.next_back()
    (0.5, 1.5)
    >>> g = grid_space(([0, 0], [1, 2]), 3, endpoint=True)
    >>> g.next_back()
    (1.0, 2.0)
    """
    intv = as_interval(intv, endpoint)
    return GridSpace(intv.start, intv.end, num, endpoint=intv.closed,
                     dtype=dtype, order=order)


def arange_grid(intv, step, dtype=None, order='C'):
    """Return a grid with axes of fixed step over a half-open interval.

    Parameters
    ----------
    intv : `Interval` or 2-sequence
        Half-open multi-dimensional interval to be sampled.
    step : real number or sequence of real numbers
        Step per axis.
    dtype : optional
        Real floating point data type of the coordinates.
    order : {'C', 'F'}, optional
        Ordering of the grid points.

    Returns
    -------
    arange_grid : `ArangeGrid`

    Examples
    --------
    >>> g = arange_grid(([0, 0], [1, 1]), 0.5)
    >>> list(g)
    [(0.0, 0.0), (0.0, 0.5), (0.5, 0.0), (0.5, 0.5)]
    """
    intv = as_interval(intv)
    if intv.closed:
        raise ValueError('`intv` must be half-open, got {!r}'.format(intv))
    return ArangeGrid(intv.start, intv.end, step, dtype=dtype, order=order)


def grid_step(intv, endpoint=None, order='F'):
    """Return a grid of integer points over an interval.

    Parameters
    ----------
    intv : `Interval`, `range` or 2-sequence
        Interval with integer endpoints.
    endpoint : bool, optional
        Whether the end point is included, see `numiter.set.as_interval`.
    order : {'C', 'F'}, optional
        Ordering of the grid points. Default: first axis fastest.

    Returns
    -------
    grid_step : `GridStep`

    Examples
    --------
    >>> list(grid_step(([0, 0], [2, 2])))
    [(0, 0), (1, 0), (0, 1), (1, 1)]
    >>> list(grid_step(([0, 0], [2, 2]), order='C'))
    [(0, 0), (0, 1), (1, 0), (1, 1)]
    """
    intv = as_interval(intv, endpoint)
    return GridStep(intv.start, intv.end, endpoint=intv.closed, order=order)


if __name__ == '__main__':
    from numiter.util.testutils import run_doctests
    run_doctests()
