"""CLI console helpers with optional Rich support.

Diagnostics are written to standard output.  Rich is imported lazily so
the program keeps working, with plain ``print``, when it is missing.
"""

from __future__ import annotations

from typing import Any


def get_rich_console() -> Any | None:
    """Return a Rich console bound to standard output, or ``None``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError:
        return None
    return Console(soft_wrap=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object, style: str | None = None) -> None:
        """Render *objects* literally, styled with *style* under Rich."""
        rich_console = get_rich_console()
        if rich_console is None:
            print(*objects)
            return
        rich_console.print(*objects, style=style, markup=False, highlight=False)


console = _ConsoleProxy()
