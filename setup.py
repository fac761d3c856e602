#!/usr/bin/env python

import os
import re

from setuptools import setup

here = os.path.dirname(os.path.abspath(__file__))
with open(os.path.join(here, 'miniflow', '__init__.py')) as f:
    version = re.search(r"__version__ = '([^']+)'", f.read()).group(1)

setup(
    name='miniflow',
    version=version,
    description="Percolation through random voxel lattices, drawn isometrically",
    author='Roderic Day',
    author_email='roderic.day@gmail.com',
    url='www.pmeal.com',
    license='MIT',
    packages=['miniflow', 'miniflow.algorithms'],
    install_requires=['numpy', 'scipy', 'matplotlib'],
    extras_require={'test': ['pytest']},
)
