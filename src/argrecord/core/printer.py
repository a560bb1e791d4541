"""Text rendering of a :class:`ParsedArgs` record.

Segments are produced in a fixed order with no separators between them:

1. ``value: <value>``, only when the value is non-zero.
2. ``sub_value <code>``, the character's numeric code point.
3. The command label.

A command tag outside the four known variants yields ``INVALID`` and
then raises :class:`~argrecord.exceptions.InvalidInternalStateError`.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from argrecord.core.models import Command, ParsedArgs
from argrecord.exceptions import InvalidInternalStateError

COMMAND_LABELS: dict[Command, str] = {
    Command.FIRST: "First",
    Command.SECOND: "Second",
    Command.THIRD: "Third",
    Command.FOURTH: "Fourth",
}

INVALID_LABEL = "INVALID"


def render_segments(args: ParsedArgs) -> Iterator[str]:
    """Yield the output segments for *args* in print order.

    Raises
    ------
    InvalidInternalStateError
        After yielding ``INVALID``, when ``args.command`` is unknown.
    """
    if args.value != 0:
        yield f"value: {args.value}"

    yield f"sub_value {ord(args.sub_value)}"

    label = COMMAND_LABELS.get(args.command)
    if label is None:
        yield INVALID_LABEL
        raise InvalidInternalStateError(
            f"Unknown command tag {args.command!r}",
        )
    yield label


def render_args(args: ParsedArgs) -> str:
    """Return the full rendering of *args* as one string."""
    return "".join(render_segments(args))


def print_args(args: ParsedArgs, stream: TextIO | None = None) -> None:
    """Write *args* to *stream* (standard output by default).

    Each segment is written as soon as it is produced, so an
    :class:`InvalidInternalStateError` leaves the earlier segments on the
    stream.
    """
    out = stream if stream is not None else sys.stdout
    try:
        for segment in render_segments(args):
            out.write(segment)
    finally:
        out.flush()
