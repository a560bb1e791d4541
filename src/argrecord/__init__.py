"""argrecord: parse a small positional argument record and print it.

Two or three tokens become a :class:`~argrecord.core.models.ParsedArgs`
which is then dumped to standard output.
"""

from argrecord.version import __version__

__all__: list[str] = ["__version__"]
