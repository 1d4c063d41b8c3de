#!/usr/bin/env python
from argpars.cmdline import ArgsObj
from argpars.helpscreen import render_error, render_help_screen, render_options, render_sections, render_version
from argpars.types import HelpSection


EXPECTED_SCREEN = """Usage: prog [OPTION]... [TEST]

Name: Test App
Description: This is a test description
Version: v1.0

Possible options:
\t--help\t\tdisplay this help and exit
\t--version\toutput version information and exit
\t--print-stuff\tdisplay "stuff"
\t--print-param\tdisplay whatever you pass as an parameter

TEST SECTION:
\tthis is a test section!

SECOND TEST SECTION:
\tthis is another test section!
\tWith multiple lines!
"""


def test_render_options_without_description():
    assert render_options([("--a", None), ("--b", "bee")]) == ["Possible options:", "\t--a", "\t--b\tbee"]


def test_render_no_sections():
    assert render_sections([]) == []


def test_render_sections_first_match():
    sections = [HelpSection("T:", "one"), HelpSection("T:", "two")]
    assert render_sections(sections) == ["", "T:", "one", "T:", "one"]


def test_render_help_screen_minimal():
    text = render_help_screen("Usage: x\n", "n", "d", "v", [])
    assert text == "Usage: x\n\nName: n\nDescription: d\nVersion: v\n\nPossible options:\n"


def test_render_version():
    assert render_version("Test App", "v1.0") == "Test App version: v1.0"


def test_render_error():
    assert render_error("--bad", "./prog") == [
        "ERROR: No such option: '--bad'",
        "Try: './prog --help' for more information.",
    ]


def test_display_help_screen(capsys):
    args = ArgsObj(["prog"])
    args.help_usage = f"Usage: {args.program} [OPTION]... [TEST]\n"
    args.help_name = "Test App"
    args.help_description = "This is a test description"
    args.help_version = "v1.0"
    args.add_help_section("TEST SECTION:", "\tthis is a test section!\n")
    args.add_help_section("SECOND TEST SECTION:", "\tthis is another test section!\n\tWith multiple lines!")
    args.add_argument("--print-stuff", 'display "stuff"')
    args.add_argument("--print-param", "display whatever you pass as an parameter")
    args.display_help_screen()
    assert capsys.readouterr().out == EXPECTED_SCREEN
    assert args.format_help_screen() == EXPECTED_SCREEN


def test_help_screen_without_defaults():
    args = ArgsObj(["prog"])
    args.no_default_arguments()
    args.add_argument("--bare")
    assert args.format_help_screen().endswith("Possible options:\n\t--bare\n")
