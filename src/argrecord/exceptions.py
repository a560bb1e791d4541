"""Custom exception hierarchy for argrecord.

Every failure the program can report is a subclass of
:class:`ArgRecordError`.  Nothing below the CLI layer terminates the
process: errors are raised here and translated into a diagnostic and an
exit status by :func:`argrecord.cli.app.cli`.

Hierarchy
---------
ArgRecordError
├── UsageError
│   ├── WrongArityError
│   ├── BadSubValueLengthError
│   └── BadCommandCodeError
└── InvalidInternalStateError
"""

from __future__ import annotations


class ArgRecordError(Exception):
    """Base exception for all argrecord errors.

    The CLI boundary renders ``str(exc)`` and, when present, :attr:`hint`.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command-line usage ----------------------------------------------------

class UsageError(ArgRecordError):
    """Raised when the positional tokens do not form a valid record."""


class WrongArityError(UsageError):
    """Raised when the number of tokens is not 2 or 3."""


class BadSubValueLengthError(UsageError):
    """Raised when the ``sub_value`` token is not exactly one character."""


class BadCommandCodeError(UsageError):
    """Raised when the command code is not one of ``0``, ``1``, ``2``, ``3``."""


# --- Internal consistency --------------------------------------------------

class InvalidInternalStateError(ArgRecordError):
    """Raised when a record carries a command tag the printer does not know.

    Unreachable through :func:`argrecord.core.parser.parse_args`.
    """
