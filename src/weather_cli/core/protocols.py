"""Protocols (interfaces) consumed by the core layer.

These define the contracts that weather provider plugins must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol

from weather_cli.core.models import Settings


class WeatherProvider(Protocol):
    """Contract for weather data backends.

    Any object that implements :meth:`fetch_report` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    async def fetch_report(self, settings: Settings) -> str:
        """Locate, fetch and format the weather for *settings*.

        The returned string is printed verbatim.  Implementations are
        expected to honour ``settings.connect_timeout`` for their own
        connections; the overall timeout is enforced by
        :class:`~weather_cli.core.weather_service.WeatherService`.

        Raises
        ------
        WeatherError
            Any subclass; propagated to the CLI unchanged.
        """
        ...  # pragma: no cover
