#!/usr/bin/env python
"""Text rendering of help screen, version line and error messages.

Nothing in here does any I/O, callers decide where the text goes.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from argpars.types import HelpSection


def render_options(entries: Iterable[Tuple[str, Optional[str]]]) -> List[str]:
    lines = ["Possible options:"]
    for token, description in entries:
        if description is not None:
            lines.append(f"\t{token}\t{description}")
        else:
            lines.append(f"\t{token}")
    return lines


def render_sections(sections: Sequence[HelpSection]) -> List[str]:
    """Section titles in insertion order, each followed by the body of the
    first section carrying that title."""
    lines = []
    if not sections:
        return lines
    lines.append("")
    for section in sections:
        lines.append(section.title)
        body = next(s.body for s in sections if s.title == section.title)
        lines.append(body)
    return lines


def render_help_screen(
    usage: str,
    name: str,
    description: str,
    version: str,
    entries: Iterable[Tuple[str, Optional[str]]],
    sections: Sequence[HelpSection] = (),
) -> str:
    lines = [
        usage,
        f"Name: {name}",
        f"Description: {description}",
        f"Version: {version}\n",
    ]
    lines.extend(render_options(entries))
    lines.extend(render_sections(sections))
    return "\n".join(lines) + "\n"


def render_version(name: str, version: str) -> str:
    return f"{name} version: {version}"


def render_error(token: str, program: str) -> List[str]:
    return [
        f"ERROR: No such option: '{token}'",
        f"Try: '{program} --help' for more information.",
    ]
