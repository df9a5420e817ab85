#!/usr/bin/env python

from setuptools import setup


VERSION = "0.1a1"

setup(
    name="xmlop-datatypes",
    version=VERSION,
    description="Validated string types for XML names, NCNames and QNames.",
    license="AGPL-3.0-or-later",
    python_requires=">=3.10",
    packages=["_xmlop", "xmlop"],
    install_requires=['typing-extensions; python_version < "3.11"'],
    extras_require={
        "test": ["lxml", "pytest", "pytest-benchmark"],
    },
)
