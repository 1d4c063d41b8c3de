#!/usr/bin/env python
"""Read help metadata and flag registrations from JSON / TOML configuration."""

import json
import logging
import pathlib
from collections import namedtuple
from typing import Any, Dict, Optional, Sequence

import toml
from traitlets.config.loader import Config

from argpars.cmdline import ArgsObj


KEYWORDS = {
    "USAGE": "help_usage",
    "NAME": "help_name",
    "DESCRIPTION": "help_description",
    "VERSION": "help_version",
    "LAST_PARAM_OK": "last_param_ok",
    "MARKER": "marker",
}

TRAIT_NAMES = frozenset(KEYWORDS.values())

Registrations = namedtuple("Registrations", "arguments sections no_default_arguments")

log = logging.getLogger(__name__)


def readConfiguration(conf) -> Dict[str, Any]:
    """Read a configuration file either in JSON or TOML format."""
    if conf:
        if isinstance(conf, dict):
            return dict(conf)
        pth = pathlib.Path(conf.name)
        suffix = pth.suffix.lower()
        if suffix == ".json":
            reader = json
        elif suffix == ".toml":
            reader = toml
        else:
            reader = None
        if reader:
            return reader.loads(conf.read())
        else:
            return {}
    else:
        return {}


def read_configuration_file(file_name) -> Dict[str, Any]:
    pth = pathlib.Path(file_name)
    if not pth.exists():
        raise FileNotFoundError(f"Configuration file {str(file_name)!r} does not exist.")
    suffix = pth.suffix.lower()
    if suffix not in (".json", ".toml"):
        raise ValueError(f"Unknown file type for config: {suffix}")
    with pth.open("r", encoding="utf-8") as f:
        return readConfiguration(f)


def _convert_sections(sections) -> Sequence:
    result = []
    for section in sections:
        if isinstance(section, dict):
            result.append((section["title"], section.get("body", "")))
        else:
            title, body = section
            result.append((title, body))
    return result


def convert_config(mapping: Dict[str, Any], logger: Optional[logging.Logger] = None):
    """Split a configuration mapping into a traitlets `Config` and registrations.

    Returns
    -------
    tuple
        (`Config`, `Registrations`)
    """
    logger = logger or log
    cfg = Config()
    arguments = {}
    sections = []
    no_defaults = False
    for key, value in mapping.items():
        upper = key.upper()
        if upper == "ARGUMENTS":
            arguments = dict(value)
        elif upper == "SECTIONS":
            sections = _convert_sections(value)
        elif upper == "NO_DEFAULT_ARGUMENTS":
            no_defaults = bool(value)
        elif upper in KEYWORDS:
            cfg.ArgsObj[KEYWORDS[upper]] = value
        elif key in TRAIT_NAMES:
            cfg.ArgsObj[key] = value
        else:
            logger.warning(f"Unknown keyword {key!r} in config file")
    return cfg, Registrations(arguments, sections, no_defaults)


def create_args_obj(conf, argv: Optional[Sequence[str]] = None) -> ArgsObj:
    """Create an `ArgsObj` from a configuration.

    Parameters
    ----------
    conf:
        dict, named file-like object, or path (str / `pathlib.Path`) of a JSON or TOML file.
    argv:
        Invocation snapshot, `sys.argv` if omitted.
    """
    if isinstance(conf, (str, pathlib.PurePath)):
        mapping = read_configuration_file(conf)
    else:
        mapping = readConfiguration(conf)
    cfg, registrations = convert_config(mapping)
    args = ArgsObj(argv, config=cfg)
    if registrations.no_default_arguments:
        args.no_default_arguments()
    for title, body in registrations.sections:
        args.add_help_section(title, body)
    for token, description in registrations.arguments.items():
        args.add_argument(token, description)
    return args
