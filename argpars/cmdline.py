#!/usr/bin/env python
"""
Register command line flags, check the invocation against them
and render the help screen.
"""

import logging
import sys
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from traitlets import Bool, TraitError, Unicode, default
from traitlets import validate as validate_trait
from traitlets.config import LoggingConfigurable

from argpars.helpscreen import render_error, render_help_screen, render_version
from argpars.types import (
    DEFAULT_ARGUMENTS,
    DEFAULT_DESCRIPTION,
    DEFAULT_NAME,
    DEFAULT_VERSION,
    HELP,
    MARKER,
    VERSION,
    DuplicateFlagError,
    FlagEntry,
    HelpSection,
    UnknownFlagError,
    UnrecognizedTokenError,
)
from argpars.utils import get_args


class ArgsObj(LoggingConfigurable):
    """Argument registry and validator.

    Holds the recognized flags, validates the invocation snapshot against them
    and answers queries about what was passed.

    Parameters
    ----------
    argv: sequence of str, optional
        Invocation snapshot, element 0 being the program path.
        Defaults to a copy of `sys.argv` taken once, here.

    Example
    -------

    args = ArgsObj()
    args.help_name = "Test App"
    args.add_argument("--print-stuff", 'display "stuff"')
    if args.passed("--print-stuff"):
        print("stuff")
    sys.exit(args.pars())
    """

    help_usage = Unicode(help="First line of the help screen.").tag(config=True)
    help_name = Unicode(DEFAULT_NAME, help="Application name shown on the help screen.").tag(config=True)
    help_description = Unicode(DEFAULT_DESCRIPTION, help="Application description shown on the help screen.").tag(config=True)
    help_version = Unicode(DEFAULT_VERSION, help="Version string, shown by `--version` and on the help screen.").tag(config=True)
    last_param_ok = Bool(
        False,
        help="""Exclude the last token of the invocation from validation,
i.e. permit a single trailing operand not tied to any flag.""",
    ).tag(config=True)
    marker = Unicode(MARKER, help="Prefix identifying a token as a flag.").tag(config=True)

    def __init__(self, argv: Optional[Sequence[str]] = None, **kws):
        if argv is None:
            argv = get_args()
        argv = tuple(argv)
        if not argv:
            raise ValueError("Invocation snapshot must at least contain the program path.")
        self._arguments_passed: Tuple[str, ...] = argv
        self._flags: Dict[str, FlagEntry] = {}
        self._help_sections: List[HelpSection] = []
        self.default_arguments = True
        self.out = None
        self.err = None
        super().__init__(**kws)
        for token, description in DEFAULT_ARGUMENTS:
            self._flags[token] = FlagEntry(description)
        self.lookup_update()

    @default("log")
    def _default_log(self):
        return logging.getLogger(__name__)

    @default("help_usage")
    def _default_help_usage(self):
        return f"Usage: {self.program} [OPTION]...\n"

    @validate_trait("marker")
    def _validate_marker(self, proposal):
        if not proposal["value"]:
            raise TraitError("Flag marker must not be empty.")
        return proposal["value"]

    def __repr__(self):
        return f"ArgsObj(arguments_passed={list(self._arguments_passed)!r}, arguments={self.arguments!r})"

    def __contains__(self, token: str) -> bool:
        return token in self._flags

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._flags))

    @property
    def arguments_passed(self) -> Tuple[str, ...]:
        return self._arguments_passed

    @property
    def number_of_arguments(self) -> int:
        return len(self._arguments_passed)

    @property
    def program(self) -> str:
        return self._arguments_passed[0]

    @property
    def arguments(self) -> List[str]:
        """Registered flags, in registration order."""
        return list(self._flags)

    @property
    def help_sections(self) -> Tuple[HelpSection, ...]:
        return tuple(self._help_sections)

    @property
    def passed_arguments_lookup(self) -> Dict[str, bool]:
        return {token: entry.was_passed for token, entry in self._flags.items()}

    @property
    def parameters_lookup(self) -> Dict[str, str]:
        return {token: entry.parameter for token, entry in self._flags.items()}

    def get_entry(self, token: str) -> FlagEntry:
        try:
            return self._flags[token]
        except KeyError:
            raise UnknownFlagError(token) from None

    def lookup_update(self) -> None:
        """Synchronize the per-flag `was_passed` / `parameter` state with the invocation."""
        for token, entry in self._flags.items():
            entry.was_passed = self.passed(token)
            entry.parameter = self.get_parameter_for(token) if entry.was_passed else ""

    def add_argument(self, argument: str, description: Optional[str] = None) -> None:
        """Register `argument`, optionally with a description for the help screen.

        Raises
        ------
        DuplicateFlagError
            `argument` is already registered.
        """
        if argument in self._flags:
            raise DuplicateFlagError(argument)
        if not argument:
            self.log.warning("Registering an empty flag.")
        elif not argument.startswith(self.marker):
            self.log.warning(f"Flag {argument!r} does not start with {self.marker!r}.")
        self._flags[argument] = FlagEntry(description)
        self.log.debug(f"Registered flag {argument!r}.")
        self.lookup_update()

    def no_default_arguments(self) -> None:
        """Disable the built-in `--help` and `--version` flags."""
        if not self.default_arguments:
            return
        for token, _ in DEFAULT_ARGUMENTS:
            self._flags.pop(token, None)
        self.default_arguments = False
        self.log.debug("Default arguments disabled.")
        self.lookup_update()

    def add_help_section(self, section: str, content: str) -> None:
        self._help_sections.append(HelpSection(section, content))

    def no_arguments_passed(self) -> bool:
        return self.number_of_arguments == 1

    def passed(self, arg: str) -> bool:
        return arg in self._arguments_passed

    def default_arguments_passed(self) -> bool:
        return self.passed(HELP) or self.passed(VERSION)

    def get_parameter_for(self, arg: str, default: str = "") -> str:
        """Token following `arg` in the invocation, unless that token is a registered flag.

        Returns `default` if `arg` was not passed at all.
        """
        if arg not in self._arguments_passed:
            return default
        index_of_argument = self._arguments_passed.index(arg)
        index_of_parameter = index_of_argument + 1
        if index_of_parameter < self.number_of_arguments:
            parameter = self._arguments_passed[index_of_parameter]
            if parameter not in self._flags:
                return parameter
        return ""

    def first_wrong_argument(self) -> Optional[Tuple[int, str]]:
        """Run the validation pass, return (index, token) of the first offending token."""
        loop_end = self.number_of_arguments
        if self.last_param_ok:
            loop_end -= 1
        for idx in range(1, loop_end):
            token = self._arguments_passed[idx]
            if token.startswith(self.marker):
                if token not in self._flags:
                    return idx, token
            elif self._arguments_passed[idx - 1] not in self._flags:
                # Parameters are only valid right after a known flag.
                return idx, token
        return None

    def validate(self) -> None:
        """
        Raises
        ------
        UnrecognizedTokenError
            On the first token that is neither a known flag nor the parameter of one.
        """
        wrong = self.first_wrong_argument()
        if wrong is not None:
            idx, token = wrong
            raise UnrecognizedTokenError(token, idx, self.program)

    def wrong_arguments_passed(self) -> bool:
        return self.first_wrong_argument() is not None

    def format_help_screen(self) -> str:
        return render_help_screen(
            self.help_usage,
            self.help_name,
            self.help_description,
            self.help_version,
            [(token, entry.description) for token, entry in self._flags.items()],
            self._help_sections,
        )

    def format_version(self) -> str:
        return render_version(self.help_name, self.help_version)

    def display_help_screen(self) -> None:
        print(self.format_help_screen(), end="", file=self.out)

    def display_version(self) -> None:
        print(self.format_version(), file=self.out)

    def display_error_message(self, err_type: str, additional: str) -> None:
        if err_type == "no_such_option":
            err = self.err if self.err is not None else sys.stderr
            for line in render_error(additional, self.program):
                print(line, file=err)
        else:
            raise ValueError(f"Unknown error type {err_type!r}.")

    def pars(self) -> int:
        """Validate the invocation and handle the default arguments.

        Returns
        -------
        int
            Exit code, 0 on success, 1 if an unrecognized token was passed.
        """
        if self.no_arguments_passed():
            return 0
        try:
            self.validate()
        except UnrecognizedTokenError as e:
            self.log.debug(f"Validation failed at index {e.index}: {e}")
            self.display_error_message("no_such_option", e.token)
            return e.error_code
        if self.default_arguments:
            if self.passed(HELP):
                self.display_help_screen()
            if self.passed(VERSION):
                self.display_version()
        return 0
