# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Sequences with a fixed step over a half-open interval."""

import warnings

from numiter.set import Interval, as_interval
from numiter.space.base import Space
from numiter.space.linspace import _normalized_endpoints
from numiter.util.exceptions import SpaceStepError
from numiter.util.numerics import (
    arange_len, arange_value, as_real, is_finite)
from numiter.util.utility import (
    dtype_str, normalized_real_dtype, signature_string)


__all__ = ('Arange', 'arange')


class Arange(Space):

    """Sequence ``start, start + step, start + 2 * step, ...``.

    The sequence stops before reaching ``end``, which is never included.
    Each element is computed as ``start + step * i``, hence rounding
    errors do not accumulate along the sequence.

    A step with a sign opposite to the direction from ``start`` to ``end``
    results in an empty sequence.
    """

    def __init__(self, start, end, step, dtype=None):
        """Initialize a new instance.

        Parameters
        ----------
        start, end : real number
            Finite endpoints of the half-open interval.
        step : real number
            Finite and nonzero distance between neighboring elements.
        dtype : optional
            Real floating point data type of the elements.

        Examples
        --------
        >>> list(Arange(0.0, 2.0, 0.5))
        [0.0, 0.5, 1.0, 1.5]
        >>> list(Arange(2.0, 0.0, -0.5))
        [2.0, 1.5, 1.0, 0.5]
        >>> list(Arange(0.0, 2.0, -0.5))
        []

        Rounding never places an element at or beyond ``end``:

        >>> space = Arange(1.0, 1.3, 0.1)
        >>> len(space)
        3
        >>> all(x < 1.3 for x in space)
        True
        """
        self.__dtype = normalized_real_dtype(dtype)
        self.__start, self.__end = _normalized_endpoints(start, end,
                                                         self.dtype)
        step = as_real(step, self.dtype)
        if not is_finite(step) or step == 0:
            raise SpaceStepError('`step` must be finite and nonzero, got '
                                 '{!r}'.format(step))
        self.__step = step

        size = arange_len(self.start, self.end, self.step)
        if size > 1 and arange_value(self.start, self.step, 1) == self.start:
            warnings.warn('`step` {!r} is below the floating point resolution '
                          'at `start` {!r}, the sequence contains repeated '
                          'values'.format(self.step, self.start),
                          RuntimeWarning)
        super().__init__(size)

    @property
    def start(self):
        """First element of the sequence, if not empty."""
        return self.__start

    @property
    def end(self):
        """Excluded end of the interval."""
        return self.__end

    @property
    def step(self):
        """Distance between neighboring elements."""
        return self.__step

    @property
    def dtype(self):
        """Data type given at construction, or ``None``."""
        return self.__dtype

    @property
    def interval(self):
        """The half-open `Interval` covered by this space."""
        return Interval(self.start, self.end, closed=False)

    def _value(self, index):
        return arange_value(self.start, self.step, index)

    def __repr__(self):
        """Return ``repr(self)``.

        Examples
        --------
        >>> Arange(0.0, 2.0, 0.5)
        Arange(0.0, 2.0, 0.5)
        """
        posargs = [self.start, self.end, self.step]
        dtype = None if self.dtype is None else dtype_str(self.dtype)
        optargs = [('dtype', dtype, None)]
        return '{}({})'.format(self.__class__.__name__,
                               signature_string(posargs, optargs))


def arange(intv, step, dtype=None):
    """Return a sequence with fixed step over a half-open interval.

    Parameters
    ----------
    intv : `Interval`, `range` or 2-sequence
        Half-open interval to be sampled. Closed intervals are rejected
        since ``end`` is never an element.
    step : real number
        Finite and nonzero distance between neighboring elements.
    dtype : optional
        Real floating point data type of the elements.

    Returns
    -------
    arange : `Arange`

    See Also
    --------
    lin_space : sampling with a fixed number of elements
    arange_grid : multi-dimensional version

    Examples
    --------
    >>> space = arange((0.0, 1.0), 0.25)
    >>> list(space)
    [0.0, 0.25, 0.5, 0.75]
    >>> arange(range(0, 3), 1.5).nth(1)
    1.5
    """
    intv = as_interval(intv)
    if intv.closed:
        raise ValueError('`intv` must be half-open, got {!r}'.format(intv))
    if not intv.is_scalar:
        raise ValueError('`intv` must have scalar endpoints, got {!r}; use '
                         '`arange_grid` for multiple axes'.format(intv))
    return Arange(intv.start, intv.end, step, dtype=dtype)


if __name__ == '__main__':
    from numiter.util.testutils import run_doctests
    run_doctests()
