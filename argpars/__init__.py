#!/usr/bin/env python
"""Dependency-light, simple yet functional command line argument parser."""

from .cmdline import ArgsObj  # noqa: F401
from .config import create_args_obj  # noqa: F401
from .types import (  # noqa: F401
    ArgparsError,
    DuplicateFlagError,
    FlagEntry,
    HelpSection,
    UnknownFlagError,
    UnrecognizedTokenError,
)


# if you update this manually, do not forget to update setup.py.
__version__ = "0.1.0"
