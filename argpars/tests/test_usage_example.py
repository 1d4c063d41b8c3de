import logging

from rich.logging import RichHandler

from argpars.examples.usage import build, main, setup_logger


def test_no_arguments_shows_help(capsys):
    assert main(["prog"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Usage: prog [OPTION]... [TEST]\n")
    assert "\t--print-param\tdisplay whatever you pass as an parameter\n" in out


def test_print_stuff(capsys):
    assert main(["prog", "--print-stuff"]) == 0
    assert capsys.readouterr().out == "stuff\n"


def test_print_param(capsys):
    assert main(["prog", "--print-param", "hello"]) == 0
    assert capsys.readouterr().out == "hello\n"


def test_version(capsys):
    assert main(["prog", "--version"]) == 0
    assert capsys.readouterr().out == "Test App version: v1.0\n"


def test_wrong_argument(capsys):
    assert main(["prog", "--print-stuff", "--nope"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("ERROR: No such option: '--nope'\n")


def test_build_registers_arguments():
    args = build(["prog"])
    assert args.arguments == ["--help", "--version", "--print-stuff", "--print-param"]
    assert [section.title for section in args.help_sections] == ["TEST SECTION:", "SECOND TEST SECTION:"]


def test_setup_logger_keeps_existing_handlers():
    logger = logging.getLogger("argpars")
    assert logger.hasHandlers()  # pytest's capture handler sits on the root logger.
    handlers = list(logger.handlers)
    assert setup_logger() is logger
    assert logger.handlers == handlers


def test_setup_logger_installs_rich_handler():
    logger = logging.getLogger("argpars")
    level, propagate = logger.level, logger.propagate
    logger.propagate = False
    try:
        setup_logger(logging.DEBUG)
        assert [type(hdl) for hdl in logger.handlers] == [RichHandler]
        assert logger.level == logging.DEBUG
    finally:
        for hdl in list(logger.handlers):
            logger.removeHandler(hdl)
        logger.setLevel(level)
        logger.propagate = propagate
