"""Default resolution for parsed command-line options.

The option resolver never invents values.  This module is where an
unspecified field picks up its ambient default.
"""

from __future__ import annotations

from weather_cli.core.models import Options, Settings, Units

DEFAULT_UNITS: Units = Units.CELSIUS
DEFAULT_CONNECT_TIMEOUT: int = 5
DEFAULT_TIMEOUT: int = 30
DEFAULT_LOCATION_PROVIDER: int = 0


def resolve_settings(options: Options) -> Settings:
    """Fill every unspecified field of *options* with its default.

    Specified values always win, including falsy ones such as a
    ``0`` second timeout.
    """
    return Settings(
        units=DEFAULT_UNITS if options.units is None else options.units,
        connect_timeout=(
            DEFAULT_CONNECT_TIMEOUT
            if options.connect_timeout is None
            else options.connect_timeout
        ),
        timeout=DEFAULT_TIMEOUT if options.timeout is None else options.timeout,
        location_provider=(
            DEFAULT_LOCATION_PROVIDER
            if options.location_provider is None
            else options.location_provider
        ),
        full_info=options.full_info is True,
        silent=options.silent is True,
        query=options.query,
    )
