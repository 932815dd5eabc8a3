# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import math
import warnings

import numpy as np
import pytest

import numiter
from numiter.set import closed, half_open
from numiter.space import Arange, arange
from numiter.util.exceptions import SpaceDomainError, SpaceStepError
from numiter.util.testutils import all_almost_equal, simple_fixture


# --- pytest fixtures --- #


arange_params = simple_fixture(
    'arange_params',
    [(0.0, 2.0, 0.5), (0.0, 2.1, 0.5), (1.0, 1.3, 0.1), (0.0, 1.0, 0.1),
     (-0.7, 0.0, 0.1), (2.0, 0.0, -0.5), (1.0, 0.7, -0.1),
     (0.0, 1.0, 1.0 / 3), (-5.0, 5.0, 0.3), (0.0, 1.0, 2.0)])


# --- Arange --- #


def test_arange_values():
    assert list(Arange(0.0, 2.0, 0.5)) == [0.0, 0.5, 1.0, 1.5]
    assert list(Arange(2.0, 0.0, -0.5)) == [2.0, 1.5, 1.0, 0.5]
    assert list(Arange(0, 3, 1)) == [0.0, 1.0, 2.0]


def test_arange_half_open(arange_params):
    start, end, step = arange_params
    values = list(Arange(start, end, step))
    assert values
    assert values[0] == start
    for value in values:
        if step > 0:
            assert start <= value < end
        else:
            assert end < value <= start


def test_arange_len(arange_params):
    start, end, step = arange_params
    space = Arange(start, end, step)
    n = len(space)
    assert n == space.size
    # At most one less than the exact count, due to rounding
    assert math.ceil((end - start) / step) - 1 <= n
    assert n <= math.ceil((end - start) / step)
    assert len(list(space)) == n


def test_arange_rounding_trim():
    # The quotient rounds up to slightly above 3, the candidate
    # 1.0 + 3 * 0.1 would land on 1.3
    space = Arange(1.0, 1.3, 0.1)
    assert len(space) == 3
    assert all_almost_equal(list(space), [1.0, 1.1, 1.2])


def test_arange_matches_numpy(arange_params):
    start, end, step = arange_params
    values = list(Arange(start, end, step))
    expected = start + step * np.arange(len(values))
    assert all_almost_equal(values, expected)


def test_arange_empty():
    # Step direction opposite to the interval direction
    assert list(Arange(0.0, 2.0, -0.5)) == []
    assert list(Arange(2.0, 0.0, 0.5)) == []
    assert len(Arange(1.0, 1.0, 0.1)) == 0
    assert Arange(0.0, 2.0, -0.5).next_back(None) is None


def test_arange_no_drift():
    space = Arange(0.0, 1000.0, 0.1)
    assert len(space) == 10000
    # Element computed from its index, not by accumulation
    assert space.value(9999) == 0.1 * 9999
    assert space[5000] == 500.0


def test_arange_init_raise():
    for bad_step in [0.0, -0.0, float('inf'), float('nan')]:
        with pytest.raises(SpaceStepError):
            Arange(0.0, 1.0, bad_step)

    with pytest.raises(SpaceDomainError):
        Arange(0.0, float('inf'), 1.0)

    with pytest.raises(SpaceStepError):
        Arange(0.0, 1.0, 1e-300)

    with pytest.raises(TypeError):
        Arange(0.0, 1.0, 1j)

    with pytest.raises(TypeError):
        Arange(0.0, 1.0, 0.5, dtype=int)


def test_arange_resolution_warning():
    with pytest.warns(RuntimeWarning):
        Arange(1e16, 1e16 + 10.0, 0.5)

    with warnings.catch_warnings():
        warnings.simplefilter('error')
        Arange(0.0, 1.0, 0.5)
        Arange(1e16, 1e16 + 10.0, 20.0)


def test_arange_dtype(dtype):
    space = Arange(0, 1, 0.25, dtype=dtype)
    values = list(space)
    assert len(values) == 4
    if dtype is not None:
        assert all(v.dtype == np.dtype(dtype) for v in values)
        assert space.step.dtype == np.dtype(dtype)


def test_arange_double_ended(arange_params):
    start, end, step = arange_params
    expected = list(Arange(start, end, step))
    space = Arange(start, end, step)
    values = []
    while len(space) > 0:
        values.append(space.next_back())
        if len(space) > 0:
            values.append(next(space))
    assert sorted(values) == sorted(expected)


def test_arange_properties():
    space = Arange(0, 2, 0.5)
    assert space.start == 0.0
    assert space.end == 2.0
    assert space.step == 0.5
    assert space.interval == half_open(0.0, 2.0)


def test_arange_repr():
    assert repr(Arange(0.0, 2.0, 0.5)) == 'Arange(0.0, 2.0, 0.5)'
    assert (repr(Arange(0.0, 2.0, 0.5, dtype='float32')) ==
            "Arange(0.0, 2.0, 0.5, dtype='float32')")


# --- arange --- #


def test_arange_factory():
    assert list(arange((0.0, 1.0), 0.25)) == [0.0, 0.25, 0.5, 0.75]
    assert list(arange(half_open(1.0, 0.0), -0.5)) == [1.0, 0.5]
    assert list(arange(range(0, 3), 1.5)) == [0.0, 1.5]

    with pytest.raises(ValueError):
        arange(closed(0.0, 1.0), 0.5)

    with pytest.raises(ValueError):
        arange(([0, 0], [1, 1]), 0.5)


if __name__ == '__main__':
    numiter.util.test_file(__file__)
