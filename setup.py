#!/bin/env python
import os

import setuptools


with open(os.path.join("argpars", "__init__.py"), "r") as f:
    for line in f:
        if line.startswith("__version__"):
            version = line.split("=")[-1].strip().strip('"')
            break

with open("README.md", "r") as fh:
    long_description = fh.read()


install_reqs = [
    "rich",
    "toml",
    "traitlets",
]


setuptools.setup(
    name="argpars",
    version=version,
    provides=["argpars"],
    description="Simple yet functional command line argument parser",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    python_requires=">=3.7",
    include_package_data=True,
    install_requires=install_reqs,
    extras_require={"test": ["pytest"], "develop": ["bumpversion"]},
    zip_safe=False,
    tests_require=["pytest"],
    test_suite="argpars.tests",
    license="MIT",
    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development",
        "Topic :: Software Development :: User Interfaces",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
