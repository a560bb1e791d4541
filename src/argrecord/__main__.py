"""Allow ``python -m argrecord`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m argrecord`` behaves identically to the ``argrecord``
console script.
"""

from __future__ import annotations

from argrecord.cli.app import cli

if __name__ == "__main__":
    cli()
