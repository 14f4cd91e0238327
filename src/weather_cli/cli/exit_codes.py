"""Process exit statuses of the ``weather`` command.

:func:`weather_cli.cli.app.cli` is the only place that turns these into
``sys.exit`` calls; :func:`~weather_cli.cli.app.main` returns them.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Report printed, or ``--help``/``--version`` text written to stdout."""

GENERAL_ERROR: int = 1
"""Bad arguments, no usable provider, or the fetch failed or timed out."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C while the spinner was running (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""A non-WeatherError exception reached ``cli()``: a bug, not a user error."""
