"""Core layer: the record model, the parser and the printer.

Rules
-----
* No ``sys.exit``; failures are raised as ``ArgRecordError`` subclasses.
* No imports from ``cli``.
* Output goes only through :mod:`argrecord.core.printer`.
"""

from argrecord.core.models import Command, ParsedArgs
from argrecord.core.parser import parse_args, parse_command_code, scan_int
from argrecord.core.printer import print_args, render_args, render_segments

__all__: list[str] = [
    "Command",
    "ParsedArgs",
    "parse_args",
    "parse_command_code",
    "print_args",
    "render_args",
    "render_segments",
    "scan_int",
]
