# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Unit tests for the interpolation and stepping cores."""

import math
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

import numiter
from numiter.set import closed
from numiter.util.exceptions import SpaceStepError
from numiter.util.numerics import (
    arange_len, arange_value, as_real, is_finite, lerp, lerp_fn,
    lerp_index_fn, lerp_iter, log_lerp, real_exp, real_log)
from numiter.util.testutils import simple_fixture


# --- pytest fixtures --- #


endpoints = simple_fixture(
    'endpoints',
    [(0.0, 1.0), (1.0, 5.0), (-3.5, 2.25), (0.1, 0.7), (1e-3, 1e9),
     (10.0, -10.0), (1.0, 1.0 + 1e-12)],
    fmt=' {name}={value} ')

denominator = simple_fixture('denominator', [1, 3, 7, 10, 1000])


# --- as_real and friends --- #


def test_as_real():
    assert as_real(1) == 1.0
    assert type(as_real(1)) is float
    assert type(as_real(np.int32(1))) is float
    assert as_real(0.5) == 0.5
    assert type(as_real(Fraction(1, 3))) is Fraction
    assert type(as_real(Decimal('0.1'))) is Decimal
    assert type(as_real(np.float32(0.5))) is np.float32

    # Cast with dtype
    assert as_real(1, dtype='float32').dtype == np.dtype('float32')
    assert as_real(0.1, dtype=float) == 0.1

    for bad_value in [1j, True, np.bool_(False), 'a', None, [1.0]]:
        with pytest.raises(TypeError):
            as_real(bad_value)


def test_is_finite():
    assert is_finite(1.0)
    assert is_finite(Fraction(1, 3))
    assert is_finite(Decimal('1.5'))
    assert is_finite(np.float32(2))

    assert not is_finite(float('inf'))
    assert not is_finite(float('nan'))
    assert not is_finite(Decimal('-Infinity'))
    assert not is_finite(Decimal('NaN'))
    assert not is_finite(np.float16(np.inf))

    # Exact rationals are never infinite, even beyond the float range
    assert is_finite(Fraction(10 ** 400, 3))


def test_real_log_exp():
    assert real_log(1.0) == 0.0
    assert real_exp(0.0) == 1.0
    assert real_log(math.e) == pytest.approx(1.0)

    # Arithmetic of the input is preserved
    assert isinstance(real_log(np.float32(2)), np.float32)
    assert isinstance(real_exp(np.float32(2)), np.float32)
    assert isinstance(real_log(Decimal(2)), Decimal)
    assert real_exp(Decimal(1)) == Decimal(1).exp()


# --- lerp --- #


def test_lerp_endpoints_exact(endpoints, denominator):
    start, end = endpoints
    assert lerp(start, end, 0, denominator) == start
    assert lerp(start, end, denominator, denominator) == end


def test_lerp_zero_denominator():
    # No division takes place at the start
    assert lerp(2.0, 3.0, 0, 0) == 2.0


def test_lerp_values(endpoints, denominator):
    start, end = endpoints
    for numerator in range(denominator + 1):
        expected = start + (end - start) * numerator / denominator
        assert lerp(start, end, numerator, denominator) == pytest.approx(
            expected, rel=1e-14, abs=1e-14 * abs(end - start))


def test_lerp_monotonic(endpoints):
    start, end = endpoints
    values = [lerp(start, end, i, 1000) for i in range(1001)]
    diffs = np.diff(values)
    if end > start:
        assert np.all(diffs >= 0)
    else:
        assert np.all(diffs <= 0)


def test_lerp_exact_arithmetic():
    # Exact types give exact results
    assert lerp(Fraction(0), Fraction(1), 1, 3) == Fraction(1, 3)
    assert lerp(Fraction(1), Fraction(2), 2, 3) == Fraction(5, 3)
    assert lerp(Decimal('0'), Decimal('1'), 1, 4) == Decimal('0.25')


def test_lerp_dtype():
    start, end = np.float32(0.1), np.float32(0.7)
    for i in range(6):
        assert isinstance(lerp(start, end, i, 5), np.float32)
    assert lerp(start, end, 5, 5) == end


def test_lerp_extrapolation():
    assert lerp(0.0, 1.0, 3, 2) == 1.5
    assert lerp(0.0, 1.0, 4, 2) == 2.0


def test_lerp_difference_overflow():
    # `end - start` is not representable, values must still be finite
    for start, end in [(-1e308, 1e308), (np.float64(1.5e308), -1.5e308),
                       (np.float32(-3e38), np.float32(3e38))]:
        values = [lerp(start, end, i, 4) for i in range(5)]
        assert values[0] == start
        assert values[-1] == end
        assert all(np.isfinite(v) for v in values)
        diffs = np.diff(np.array(values, dtype=float))
        assert np.all(diffs > 0) if end > start else np.all(diffs < 0)

    assert lerp(-1e308, 1e308, 1, 2) == 0.0
    assert lerp(-1e308, 1e308, 1, 4) == pytest.approx(-5e307)


# --- log_lerp --- #


def test_log_lerp():
    assert log_lerp(1.0, 1000.0, 0, 3) == 1.0
    assert log_lerp(1.0, 1000.0, 3, 3) == 1000.0
    assert log_lerp(1.0, 1000.0, 1, 3) == pytest.approx(10.0, abs=1e-10)
    assert log_lerp(1.0, 1000.0, 2, 3) == pytest.approx(100.0, abs=1e-10)

    # Decreasing
    assert log_lerp(100.0, 1.0, 1, 2) == pytest.approx(10.0, abs=1e-12)


def test_log_lerp_exact_endpoints(endpoints, denominator):
    start, end = endpoints
    if start <= 0 or end <= 0:
        pytest.skip('only positive endpoints')
    assert log_lerp(start, end, 0, denominator) == start
    assert log_lerp(start, end, denominator, denominator) == end


# --- arange_len and arange_value --- #


def test_arange_value():
    assert arange_value(0.0, 0.5, 0) == 0.0
    assert arange_value(0.0, 0.5, 3) == 1.5
    assert arange_value(2.0, -0.5, 2) == 1.0


def test_arange_len():
    assert arange_len(0.0, 2.0, 0.5) == 4
    assert arange_len(0.0, 2.1, 0.5) == 5
    assert arange_len(0.0, 2.0, 2.0) == 1
    assert arange_len(0.0, 2.0, 3.0) == 1
    assert arange_len(2.0, 0.0, -0.5) == 4

    # Empty
    assert arange_len(0.0, 0.0, 1.0) == 0
    assert arange_len(0.0, 2.0, -0.5) == 0
    assert arange_len(2.0, 0.0, 0.5) == 0


def test_arange_len_rounding():
    # (1.3 - 1.0) / 0.1 rounds to slightly above 3
    assert arange_len(1.0, 1.3, 0.1) == 3

    # All elements lie in the half-open interval
    for start, end, step in [(1.0, 1.3, 0.1), (0.0, 1.0, 0.1),
                             (0.0, 0.3, 0.1), (-0.7, 0.0, 0.1),
                             (1.0, 0.7, -0.1), (0.0, 1.0, 1.0 / 3)]:
        length = arange_len(start, end, step)
        assert length > 0
        last = arange_value(start, step, length - 1)
        if step > 0:
            assert start <= last < end
        else:
            assert end < last <= start
        assert length >= math.ceil((end - start) / step) - 1


def test_arange_len_too_many():
    with pytest.raises(SpaceStepError):
        arange_len(0.0, 1.0, 1e-300)

    with pytest.raises(SpaceStepError):
        arange_len(0.0, 1e308, 5e-324)


# --- lerp_fn, lerp_index_fn, lerp_iter --- #


def test_lerp_fn():
    func = lerp_fn((0.0, 2.0), (20.0, 21.0))
    assert func(0.0) == 20.0
    assert func(1.0) == 20.5
    assert func(2.0) == 21.0
    assert func(-1.0) == 19.5
    assert func(4.0) == 22.0

    # Interval input
    func = lerp_fn(closed(0.0, 1.0), closed(1.0, 0.0))
    assert func(0.25) == 0.75

    with pytest.raises(ValueError):
        lerp_fn((1.0, 1.0), (0.0, 1.0))


def test_lerp_index_fn():
    func = lerp_index_fn((0, 4), (0.0, 1.0))
    assert [func(i) for i in range(5)] == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert func(np.int64(2)) == 0.5

    with pytest.raises(TypeError):
        func(0.5)

    with pytest.raises(TypeError):
        lerp_index_fn((0.0, 4.0), (0.0, 1.0))


def test_lerp_iter():
    values = lerp_iter((0.0, 2.0), (20.0, 21.0), [-1.0, 0.0, 1.0])
    assert not isinstance(values, list)
    assert list(values) == [19.5, 20.0, 20.5]

    # Lazy over infinite input
    values = lerp_iter((0, 1), (0.0, 10.0), iter(int, 1))
    assert next(values) == 0.0


if __name__ == '__main__':
    numiter.util.test_file(__file__)
