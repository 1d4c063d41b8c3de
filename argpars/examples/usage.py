#!/usr/bin/env python
"""Demonstrates flag registration, dispatch and exit code handling.

Try:
    python usage.py --help
    python usage.py --print-param hello
    python usage.py --print-stuff free-operand
"""

import logging
import sys

from rich.logging import RichHandler
from rich.traceback import install as tb_install

from argpars import ArgsObj


def print_stuff():
    print("stuff")


def print_param(to_print):
    print(to_print)


def setup_logger(level=logging.WARNING):
    logger = logging.getLogger("argpars")
    # Leave an already configured logging setup alone.
    if logger.hasHandlers():
        return logger
    logger.addHandler(RichHandler(rich_tracebacks=True, level=level))
    logger.setLevel(level)
    return logger


def build(argv=None):
    args = ArgsObj(argv)
    # To disable the default arguments (--help and --version) uncomment this line:
    # args.no_default_arguments()

    args.help_usage = f"Usage: {args.program} [OPTION]... [TEST]\n"
    args.help_name = "Test App"
    args.help_description = "This is a test description"
    args.help_version = "v1.0"

    args.add_help_section("TEST SECTION:", "\tthis is a test section!\n")
    args.add_help_section(
        "SECOND TEST SECTION:",
        "\tthis is another test section!\n\tWith multiple lines!",
    )

    args.add_argument("--print-stuff", 'display "stuff"')
    args.add_argument("--print-param", "display whatever you pass as an parameter")
    return args


def main(argv=None):
    args = build(argv)

    if args.no_arguments_passed():
        args.display_help_screen()
    elif args.default_arguments_passed() or args.wrong_arguments_passed():
        # `pars` takes care of these.
        pass
    else:
        if args.passed("--print-stuff"):
            print_stuff()
        if args.passed("--print-param"):
            print_param(args.get_parameter_for("--print-param"))

    return args.pars()


if __name__ == "__main__":
    tb_install(show_locals=True, max_frames=3)
    setup_logger()
    sys.exit(main())
