"""Custom exception hierarchy for weather-cli.

All exceptions that cross layer boundaries must inherit from
:class:`WeatherError`.  Raw exceptions raised by weather provider
plugins must NEVER propagate beyond the core layer — they are caught
and re-raised as a typed subclass defined here.

Hierarchy
---------
WeatherError
├── ArgsError
├── ProviderNotFoundError
├── FetchFailedError
│   └── FetchTimeoutError
└── EnvironmentError
"""

from __future__ import annotations


class WeatherError(Exception):
    """Base exception for all weather-cli errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class ArgsError(WeatherError):
    """Raised when the argument list is malformed.

    Covers unknown flags, missing option values and options given more
    than once.  Malformed *numeric* values are not errors; they resolve
    to "unspecified".
    """


# --- Weather providers -----------------------------------------------------

class ProviderNotFoundError(WeatherError):
    """Raised when no weather provider plugin can be loaded."""


class FetchFailedError(WeatherError):
    """Raised when the weather provider fails to produce a report."""


class FetchTimeoutError(FetchFailedError):
    """Raised when the overall timeout elapses before the report arrives."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(WeatherError):
    """Raised when a required runtime dependency is not available."""
