#!/usr/bin/env python

"""Distutils setup file"""

from setuptools import setup, find_packages

# Metadata
PACKAGE_NAME = "ClassDispatch"
PACKAGE_VERSION = "0.1.0"

setup(
    name=PACKAGE_NAME,
    version=PACKAGE_VERSION,

    description="Class-vector generic functions with next-method chaining",
    license="PSF or ZPL",

    python_requires=">=3.7",

    test_suite  = 'classdispatch.tests.test_suite',
    package_dir = {'':'src'},
    packages    = find_packages('src'),
    extras_require = {'test': ['pytest']},
)
