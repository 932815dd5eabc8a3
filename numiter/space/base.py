# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Base class for lazily evaluated sequences with closed-form elements."""

import copy
import operator

import numpy as np


__all__ = ('Space',)


class Space(object):

    """Abstract lazily evaluated sequence of known length.

    A space is defined by immutable parameters (e.g. endpoints and number
    of elements), from which the element at any position can be computed
    directly. Subclasses implement this computation in `_value`.

    On top of that, a space carries a cursor: the window
    ``[front, back)`` of positions not yet consumed. Iterating over the
    space consumes elements from the front, `next_back` consumes from the
    back. The remaining number of elements is always known exactly and
    returned by ``len(space)``.

    All operations are O(1) in the number of elements; in particular,
    skipping with `nth` and random access with ``space[i]`` do not step
    through intermediate elements.
    """

    def __init__(self, size):
        """Initialize a new instance.

        Parameters
        ----------
        size : nonnegative int
            Total number of elements.
        """
        size, size_in = operator.index(size), size
        if size < 0:
            raise ValueError('`size` must be nonnegative, got {}'
                             ''.format(size_in))
        self.__size = size
        self.__front = 0
        self.__back = size

    @property
    def size(self):
        """Total number of elements, regardless of consumption."""
        return self.__size

    def _value(self, index):
        """Return the element at absolute position ``index``.

        Subclasses must override this method. ``index`` is guaranteed to
        satisfy ``0 <= index < size``.
        """
        raise NotImplementedError('abstract method')

    def value(self, index):
        """Return the element at absolute position ``index``.

        The position refers to the full sequence, independently of how
        many elements have been consumed so far.

        Parameters
        ----------
        index : int
            Position in the full sequence, ``0 <= index < size``.
            Negative values count from the end.
        """
        index, index_in = operator.index(index), index
        if index < 0:
            index += self.size
        if not 0 <= index < self.size:
            raise IndexError('index {} out of range for {} elements'
                             ''.format(index_in, self.size))
        return self._value(index)

    def __len__(self):
        """Return ``len(self)``, the number of remaining elements."""
        return self.__back - self.__front

    def __iter__(self):
        """Return ``iter(self)``, which is the space itself."""
        return self

    def __next__(self):
        """Return ``next(self)``, consuming one element from the front."""
        if self.__front >= self.__back:
            raise StopIteration
        index = self.__front
        self.__front += 1
        return self._value(index)

    def next_back(self, *default):
        """Consume and return one element from the back.

        Parameters
        ----------
        default : optional
            Value to return if the space is exhausted. If not given,
            `StopIteration` is raised in that case, like for `next`.
        """
        if len(default) > 1:
            raise TypeError('expected at most 1 `default` argument, got {}'
                            ''.format(len(default)))
        if self.__front >= self.__back:
            if default:
                return default[0]
            raise StopIteration
        self.__back -= 1
        return self._value(self.__back)

    def nth(self, n, default=None):
        """Consume ``n + 1`` elements from the front and return the last.

        If fewer than ``n + 1`` elements remain, the space is exhausted
        and ``default`` is returned.

        Parameters
        ----------
        n : nonnegative int
            Number of elements to skip.
        default : optional
            Value to return if the space runs out of elements.
        """
        n = self._normalized_skip(n)
        if n >= len(self):
            self.__front = self.__back
            return default
        self.__front += n + 1
        return self._value(self.__front - 1)

    def nth_back(self, n, default=None):
        """Consume ``n + 1`` elements from the back and return the last.

        This is the mirror image of `nth`.
        """
        n = self._normalized_skip(n)
        if n >= len(self):
            self.__back = self.__front
            return default
        self.__back -= n + 1
        return self._value(self.__back)

    @staticmethod
    def _normalized_skip(n):
        n, n_in = operator.index(n), n
        if n < 0:
            raise ValueError('`n` must be nonnegative, got {}'.format(n_in))
        return n

    def __getitem__(self, index):
        """Return ``self[index]`` without consuming.

        The index refers to the remaining elements, hence ``self[k]`` is
        the value that ``self.nth(k)`` would return. Negative indices
        count from the back.
        """
        index, index_in = operator.index(index), index
        remaining = len(self)
        if index < 0:
            index += remaining
        if not 0 <= index < remaining:
            raise IndexError('index {} out of range for {} remaining '
                             'elements'.format(index_in, remaining))
        return self._value(self.__front + index)

    def __reversed__(self):
        """Return ``reversed(self)``, lazily consuming from the back.

        Unlike for built-in sequences, the elements yielded by the
        returned iterator are consumed from this space. Use
        ``reversed(self.copy())`` to keep the space intact.
        """
        while self.__front < self.__back:
            self.__back -= 1
            yield self._value(self.__back)

    def copy(self):
        """Return a copy with an independent cursor."""
        return copy.copy(self)

    def __array__(self, dtype=None, copy=None):
        """Return the remaining elements as a `numpy.ndarray`.

        The elements are not consumed.
        """
        values = [self._value(i) for i in range(self.__front, self.__back)]
        return np.array(values, dtype=dtype)

    def __repr__(self):
        """Return ``repr(self)``."""
        return '{}({})'.format(self.__class__.__name__, self.size)


if __name__ == '__main__':
    from numiter.util.testutils import run_doctests
    run_doctests()
