"""Turn positional argument tokens into a :class:`ParsedArgs` record.

Accepted shapes::

    <sub_value> <command_code>
    <value> <sub_value> <command_code>

Checks run in token order and the first failure is raised as a
:class:`~argrecord.exceptions.UsageError` subclass.  Nothing here prints
or exits.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from argrecord.core.models import Command, ParsedArgs
from argrecord.exceptions import (
    BadCommandCodeError,
    BadSubValueLengthError,
    WrongArityError,
)

logger = logging.getLogger(__name__)

_DIGITS = "0123456789"

_COMMAND_CODES: dict[str, Command] = {
    str(command.value): command for command in Command
}


# ---------------------------------------------------------------------------
# Token readers
# ---------------------------------------------------------------------------

def scan_int(text: str) -> int:
    """Read a leading signed decimal integer from *text*.

    Leading whitespace is skipped, one optional ``+`` or ``-`` is
    accepted, then the longest run of ASCII digits is consumed.  Anything
    after the digits is ignored.  When no digit can be read the result is
    ``0``.

    >>> scan_int("42")
    42
    >>> scan_int("  -7apples")
    -7
    >>> scan_int("apples")
    0
    """
    rest = text.lstrip()
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]

    end = 0
    while end < len(rest) and rest[end] in _DIGITS:
        end += 1

    if end == 0:
        return 0
    return sign * int(rest[:end])


def parse_command_code(token: str) -> Command:
    """Map a literal command code (``"0"`` to ``"3"``) to a :class:`Command`.

    Raises
    ------
    BadCommandCodeError
        For any other text, including padded or signed forms.
    """
    try:
        return _COMMAND_CODES[token]
    except KeyError:
        raise BadCommandCodeError(
            "Invalid cmd",
            hint=f"command_code must be one of {', '.join(_COMMAND_CODES)}.",
        ) from None


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def parse_args(tokens: Sequence[str]) -> ParsedArgs:
    """Build a :class:`ParsedArgs` from 2 or 3 positional tokens.

    Parameters
    ----------
    tokens:
        Positional arguments, program name excluded.

    Raises
    ------
    WrongArityError
        When fewer than 2 or more than 3 tokens are given.
    BadSubValueLengthError
        When the ``sub_value`` token is not exactly one character.
    BadCommandCodeError
        When the last token is not a known command code.
    """
    logger.debug("parsing %d token(s): %r", len(tokens), list(tokens))

    if len(tokens) not in (2, 3):
        logger.debug("rejecting arity %d", len(tokens))
        raise WrongArityError(
            "Need 2 or 3 args",
            hint="Usage: argrecord [value] <sub_value> <command_code>",
        )

    remaining = list(tokens)
    value = scan_int(remaining.pop(0)) if len(remaining) == 3 else 0

    sub_value = remaining.pop(0)
    if len(sub_value) != 1:
        logger.debug("rejecting sub_value %r of length %d", sub_value, len(sub_value))
        raise BadSubValueLengthError("arg sub_value need to be size 1")

    command = parse_command_code(remaining.pop(0))

    parsed = ParsedArgs(value=value, sub_value=sub_value, command=command)
    logger.debug("parsed %r", parsed)
    return parsed
