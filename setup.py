#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import re
from pathlib import Path

from setuptools import find_packages, setup

# binser/__init__.py imports the runtime dependencies, so the version is read from the file instead
_init = (Path(__file__).parent / 'binser' / '__init__.py').read_text()
__version__ = re.search(r"^__version__ = '([^']+)'", _init, re.M).group(1)  # type: ignore[union-attr]

setup(
    name='binser',
    version=__version__,
    description='Cursor-based binary writer/reader with varints, fixed-width ints and fixed-size POD values',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache License 2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(exclude=('tests', 'tests.*')),
    package_data={
        'binser.conf': ['*.yml'],
    },
    install_requires=[
        'pydantic>=2,<3',
        'pyyaml>=6',
        'structlog>=22',
        'typing_extensions>=4.6',
    ],
    extras_require={
        'test': ['pytest>=7'],
    },
)
