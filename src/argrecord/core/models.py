"""Domain models for argrecord.

The record is a **frozen** dataclass: an immutable value object with no
behaviour beyond data access, no I/O and no third-party imports.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


# ---------------------------------------------------------------------------
# Command selector
# ---------------------------------------------------------------------------

class Command(IntEnum):
    """The four command variants, valued by their command-line code."""

    FIRST = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3


# ---------------------------------------------------------------------------
# Parsed record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedArgs:
    """A fully validated argument record.

    Instances are only built by :func:`argrecord.core.parser.parse_args`
    once every check has passed.
    """

    value: int
    """Signed integer, ``0`` when omitted on the command line."""

    sub_value: str
    """Exactly one character."""

    command: Command
    """Selected command variant."""
