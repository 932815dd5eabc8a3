# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import pytest


def test_all_imports():
    import numiter

    # Three ways of creating a linearly spaced sequence
    numiter.lin_space((0.0, 1.0), 3)
    numiter.space.lin_space((0.0, 1.0), 3)
    numiter.space.linspace.LinSpace(0.0, 1.0, 3)

    # Intervals and grids in the top-level namespace
    numiter.grid_space(numiter.closed([0, 0], [1, 1]), 2)
    numiter.GridStep([0, 0], [2, 2])

    # Test that utilities need to be explicitly imported
    numiter.util.utility.signature_string
    numiter.util.lerp_fn
    with pytest.raises(AttributeError):
        numiter.signature_string

    # Factories sharing a name with no submodule
    assert 'arange' in numiter.space.__all__
    assert 'grid' in numiter.space.__all__
    assert callable(numiter.space.arange)
    assert callable(numiter.space.grid)
    numiter.space.stepped.Arange(0.0, 1.0, 0.5)
    numiter.space.grids.Grid(range(2))


def test_version():
    import numiter
    assert numiter.__version__ == '0.7.1'
    assert callable(numiter.test)


if __name__ == '__main__':
    pytest.main([str(__file__.replace('\\', '/')), '-v'])
