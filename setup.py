#!/usr/bin/env python
# -*- coding: utf-8 -*-

import os

from setuptools import setup, find_packages

NAME = "sumcheckpoly"
DESCRIPTION = "Univariate round polynomials for the sum-check protocol"
REQUIRES_PYTHON = ">=3.7.0"
VERSION = None

REQUIRED = ["gmpy2", "pyyaml"]

TESTS_REQUIRES = [
    "flake8",
    "pep8-naming",
    "pytest",
    "pytest-mock",
    "pytest-cov",
]

DEV_REQUIRES = ["ipdb", "ipython"]

EXTRAS = {
    "tests": TESTS_REQUIRES,
    "dev": DEV_REQUIRES + TESTS_REQUIRES,
}

here = os.path.abspath(os.path.dirname(__file__))

try:
    with open(os.path.join(here, "README.md"), encoding="utf-8") as f:
        long_description = f"\n{f.read()}"
except FileNotFoundError:
    long_description = DESCRIPTION

if not VERSION:
    g = {}

    with open(os.path.join(here, NAME, "__version__.py")) as f:
        exec(f.read(), g)
        VERSION = g["__version__"]


setup(
    name=NAME,
    version=VERSION,
    description=DESCRIPTION,
    long_description=long_description,
    long_description_content_type="text/markdown",
    python_requires=REQUIRES_PYTHON,
    install_requires=REQUIRED,
    extras_require=EXTRAS,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
    ],
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={NAME: ["logging.yaml"]},
)
