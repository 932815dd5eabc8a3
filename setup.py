# Copyright 2025-2026 The numiter contributors
#
# This file is part of numiter.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Setup script for numiter.

Installation command::

    pip install [--user] [-e] .
"""

import os

from setuptools import setup, find_packages


root_path = os.path.dirname(__file__)

requires = open(os.path.join(root_path, 'requirements.txt')).readlines()
test_requires = open(
    os.path.join(root_path, 'test_requirements.txt')).readlines()

with open(os.path.join(root_path, 'numiter', 'VERSION')) as version_file:
    version = version_file.read().strip()

long_description = """
numiter is a Python library of lazily evaluated numeric sequences: linearly
and logarithmically spaced sequences, sequences with fixed step, and their
multi-dimensional grid counterparts.

Every element is computed in closed form from its position in the sequence.
Hence long sequences do not accumulate rounding errors, endpoints are
reproduced exactly, and sequences can be consumed from both ends and
indexed in constant time.
"""

setup(
    name='numiter',

    version=version,

    description='Lazily evaluated numeric sequences and sampling grids',
    long_description=long_description,

    author='numiter contributors',

    license='MPL-2.0',

    # See https://pypi.org/classifiers/
    classifiers=[
        'Development Status :: 4 - Beta',

        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries',

        'License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)',

        'Programming Language :: Python :: 3',

        'Operating System :: OS Independent'
    ],

    keywords='research development mathematics sampling grid linspace',

    packages=find_packages(exclude=['*test*']),
    package_dir={'numiter': 'numiter'},
    package_data={'numiter': ['VERSION']},

    python_requires='>=3.8',
    install_requires=requires,
    extras_require={
        'testing': test_requires,
    },
)
