#!/usr/bin/env python
from collections import namedtuple
from dataclasses import dataclass
from typing import Optional


MARKER = "-"

HELP = "--help"
VERSION = "--version"

DEFAULT_ARGUMENTS = (
    (HELP, "\tdisplay this help and exit"),
    (VERSION, "output version information and exit"),
)

DEFAULT_NAME = "Default name"
DEFAULT_DESCRIPTION = "Default description"
DEFAULT_VERSION = "Default version"

HelpSection = namedtuple("HelpSection", "title body")


@dataclass
class FlagEntry:
    """Registered flag together with what the invocation says about it."""

    description: Optional[str] = None
    was_passed: bool = False
    parameter: str = ""


class ArgparsError(Exception):
    """
    Base class for all argpars errors.
    """


class UnrecognizedTokenError(ArgparsError):
    """
    A token of the invocation is neither a registered flag nor the parameter of one.
    """

    error_code = 1

    def __init__(self, token: str, index: int, program: str = ""):
        super().__init__(token, index)
        self.token = token
        self.index = index
        self.program = program

    def __str__(self):
        return f"No such option: {self.token!r}"


class DuplicateFlagError(ArgparsError, ValueError):
    """
    Flag has already been registered.
    """

    def __init__(self, token: str):
        super().__init__(token)
        self.token = token

    def __str__(self):
        return f"Flag {self.token!r} is already registered"


class UnknownFlagError(ArgparsError, KeyError):
    """
    Flag has not been registered.
    """

    def __str__(self):
        return f"Flag {self.args[0]!r} is not registered"
