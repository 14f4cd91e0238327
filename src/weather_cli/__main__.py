"""Allow ``python -m weather_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m weather_cli`` behaves identically to the ``weather``
console script.
"""

from __future__ import annotations

from weather_cli.cli.app import cli

if __name__ == "__main__":
    cli()
