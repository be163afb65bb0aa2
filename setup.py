#!/usr/bin/env python
"""
Glicko-1 rating and rating deviation calculator.
"""

from setuptools import find_packages, setup

setup(
    name="glickoratings",
    version="0.0.1",
    author="Various",
    description="Glicko-1 rating period updates with inactivity based deviation growth.",
    long_description=__doc__,
    packages=find_packages(exclude=("unit_tests", "unit_tests.*")),
    python_requires=">=3.10",
    extras_require={"test": ["pytest"]},
    zip_safe=True,
    license="MIT",
)
