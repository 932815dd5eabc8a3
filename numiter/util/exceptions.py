# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Exceptions raised when constructing spaces with invalid parameters."""

__all__ = ('SpaceDomainError', 'SpaceStepError')


class SpaceDomainError(ValueError):
    """Exception for endpoints outside the domain of a space.

    Raised at construction time, e.g. for non-finite endpoints or for
    non-positive endpoints of a logarithmically spaced sequence.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)


class SpaceStepError(ValueError):
    """Exception for step sizes that do not define a finite sequence.

    Raised at construction time for zero, NaN or infinite steps, and for
    steps so small that the number of elements cannot be represented.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
