"""CLI application entry point for argrecord.

This module is the **sole error boundary** for the program.  Core
operations raise :class:`~argrecord.exceptions.ArgRecordError`
subclasses; only this module prints diagnostics and turns them into
process exit codes.

Every argument is positional and reaches
:func:`argrecord.core.parser.parse_args` untouched, in its original
position.  The one exception is a lone ``-V`` / ``--version``, which
would otherwise be an arity error.
"""

from __future__ import annotations

import argparse
import logging
import sys

from argrecord.cli import exit_codes
from argrecord.cli.console import console
from argrecord.cli.logging_setup import configure_logging
from argrecord.core.parser import parse_args
from argrecord.core.printer import print_args
from argrecord.exceptions import ArgRecordError
from argrecord.version import __version__

logger = logging.getLogger(__name__)

VERSION_FLAGS: frozenset[str] = frozenset({"-V", "--version"})


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the parser that serves the lone version flag.

    Record tokens never go through it: ``-5`` or ``-x`` must stay
    positional, which argparse cannot guarantee.
    """
    parser = argparse.ArgumentParser(
        prog="argrecord",
        description="Parse [value] <sub_value> <command_code> and print the record.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _is_version_request(argv: list[str]) -> bool:
    return len(argv) == 1 and argv[0] in VERSION_FLAGS


def _report(exc: ArgRecordError) -> None:
    """Print the diagnostic for *exc* on standard output."""
    console.print(f"Error: {exc}", style="bold red")
    if exc.hint:
        console.print(f"Hint: {exc.hint}", style="yellow")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the argrecord CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    tokens = list(sys.argv[1:] if argv is None else argv)

    if _is_version_request(tokens):
        # argparse's version action prints and raises SystemExit(0).
        _build_parser().parse_args(tokens)

    configure_logging()

    try:
        record = parse_args(tokens)
        print_args(record)
    except ArgRecordError as exc:
        logger.debug("reporting %s", type(exc).__name__)
        _report(exc)
        return exit_codes.GENERAL_ERROR

    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except KeyboardInterrupt:
        console.print("\nAborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
