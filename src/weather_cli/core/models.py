"""Domain models for weather-cli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and must remain pure across the entire lifecycle.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------

class Units(Enum):
    """Temperature unit requested by the user."""

    CELSIUS = "C"
    FAHRENHEIT = "F"


# ---------------------------------------------------------------------------
# Parsed command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Options:
    """Sparse configuration produced by the option resolver.

    Every field is ``None`` when the user did not ask for it.  A flag
    that is present resolves to ``True``; it never resolves to ``False``,
    so "not given" stays distinguishable from any concrete value.
    """

    units: Units | None = None
    """``-m``/``-i``/``-u``, in that order of precedence."""

    connect_timeout: int | None = None
    """Connect timeout in seconds."""

    timeout: int | None = None
    """Overall timeout in seconds."""

    query: str | None = None
    """First positional token, verbatim."""

    location_provider: int | None = None
    """Index into :data:`~weather_cli.utils.constants.LOCATION_PROVIDERS`.

    May be negative; range checking belongs to the weather provider.
    """

    full_info: bool | None = None
    silent: bool | None = None

    version: str | None = None
    """Program version, set only when ``--version`` was given."""

    help: str | None = None
    """Rendered usage text, set only when ``--help`` was given."""


# ---------------------------------------------------------------------------
# Resolved configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Settings:
    """Fully resolved configuration handed to the weather provider."""

    units: Units
    connect_timeout: int
    timeout: int
    """Seconds; ``0`` disables the overall timeout."""

    location_provider: int
    full_info: bool
    silent: bool
    query: str | None = None
    """Free-text location; ``None`` lets the provider locate the user."""
