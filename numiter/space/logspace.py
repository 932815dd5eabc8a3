# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Logarithmically spaced sequences."""

from numiter.set import Interval, as_interval
from numiter.space.base import Space
from numiter.space.linspace import _normalized_endpoints, _normalized_num
from numiter.util.exceptions import SpaceDomainError
from numiter.util.numerics import log_lerp, real_exp, real_log
from numiter.util.utility import (
    dtype_str, normalized_real_dtype, signature_string)


__all__ = ('LogSpace', 'log_space')


class LogSpace(Space):

    """Logarithmically spaced sequence over an interval of positive numbers.

    Consecutive elements have a constant ratio. The elements are the
    exponentials of a `LinSpace` over ``[log(start), log(end)]``, except
    that ``start`` and, for closed intervals, ``end`` are returned
    exactly.
    """

    def __init__(self, start, end, num, endpoint=True, dtype=None):
        """Initialize a new instance.

        Parameters
        ----------
        start, end : positive real number
            Finite endpoints of the interval.
        num : nonnegative int
            Number of elements.
        endpoint : bool, optional
            If ``True``, ``end`` is the last element.
        dtype : optional
            Real floating point data type of the elements.

        Examples
        --------
        >>> space = LogSpace(1.0, 1000.0, 4)
        >>> np.allclose(list(space), [1.0, 10.0, 100.0, 1000.0])
        True
        >>> LogSpace(0.0, 1.0, 3)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
            ...
        SpaceDomainError: `start` must be positive, got 0.0
        """
        self.__dtype = normalized_real_dtype(dtype)
        start, end = _normalized_endpoints(start, end, self.dtype)
        for name, value in (('start', start), ('end', end)):
            if not value > 0:
                raise SpaceDomainError('`{}` must be positive, got {!r}'
                                       ''.format(name, value))
        self.__start, self.__end = start, end
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
    def ratio(self):
        """Quotient of neighboring elements.

        ``None`` for closed spaces with fewer than 2 elements.

        Examples
        --------
        >>> abs(LogSpace(1.0, 1000.0, 4).ratio - 10.0) < 1e-12
        True
        """
        if self.__denominator <= 0:
            return None
        log_ratio = ((real_log(self.end) - real_log(self.start)) /
                     self.__denominator)
        return real_exp(log_ratio)

    def _value(self, index):
        return log_lerp(self.start, self.end, index, self.__denominator)

    def __repr__(self):
        """Return ``repr(self)``.

        Examples
        --------
        >>> LogSpace(1.0, 1000.0, 4)
        LogSpace(1.0, 1000.0, 4)
        """
        posargs = [self.start, self.end, self.num]
        dtype = None if self.dtype is None else dtype_str(self.dtype)
        optargs = [('endpoint', self.endpoint, True),
                   ('dtype', dtype, None)]
        return '{}({})'.format(self.__class__.__name__,
                               signature_string(posargs, optargs))


def log_space(intv, num, endpoint=None, dtype=None):
    """Return a logarithmically spaced sequence over an interval.

    Parameters
    ----------
    intv : `Interval`, `range` or 2-sequence
        Interval of positive numbers to be sampled. A ``(start, end)``
        pair is half-open unless ``endpoint=True`` is given.
    num : nonnegative int
        Number of elements.
    endpoint : bool, optional
        Whether ``end`` is included, see `numiter.set.as_interval`.
    dtype : optional
        Real floating point data type of the elements.

    Returns
    -------
    log_space : `LogSpace`

    See Also
    --------
    lin_space : linear spacing

    Examples
    --------
    >>> space = log_space((1.0, 1000.0), 3)
    >>> np.allclose(list(space), [1.0, 10.0, 100.0])
    True
    >>> from numiter.set import closed
    >>> space = log_space(closed(1.0, 1000.0), 4)
    >>> space.next_back()
    1000.0
    """
    intv = as_interval(intv, endpoint)
    if not intv.is_scalar:
        raise ValueError('`intv` must have scalar endpoints, got {!r}'
                         ''.format(intv))
    return LogSpace(intv.start, intv.end, num, endpoint=intv.closed,
                    dtype=dtype)


if __name__ == '__main__':
    from numiter.util.testutils import run_doctests
    run_doctests()
