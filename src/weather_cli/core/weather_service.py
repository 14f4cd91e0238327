"""Core weather service — drives a single report fetch.

This service delegates the actual work to a
:class:`~weather_cli.core.protocols.WeatherProvider` injected at
construction time.  It is responsible for:

* Enforcing the overall timeout.
* Delegating to the provider.
* Ensuring only :class:`~weather_cli.exceptions.WeatherError` subclasses
  escape.

Guarantees
----------
* Pure orchestration — no ``print()``, no direct network access.
"""

from __future__ import annotations

import asyncio

from weather_cli.core.models import Settings
from weather_cli.core.protocols import WeatherProvider
from weather_cli.exceptions import FetchFailedError, FetchTimeoutError, WeatherError


class WeatherService:
    """Stateless service that fetches one weather report.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`WeatherProvider` protocol.
    """

    def __init__(self, provider: WeatherProvider) -> None:
        self._provider: WeatherProvider = provider

    async def fetch_report(self, settings: Settings) -> str:
        """Fetch the report for *settings*.

        Raises
        ------
        FetchTimeoutError
            When ``settings.timeout`` seconds elapse first.
        FetchFailedError
            When the provider fails with a foreign exception.
        """
        limit: int | None = settings.timeout or None
        try:
            return await asyncio.wait_for(
                self._provider.fetch_report(settings),
                timeout=limit,
            )
        except asyncio.TimeoutError as exc:
            raise FetchTimeoutError(
                f"No weather report after {settings.timeout} seconds.",
                hint="Raise the limit with --timeout, e.g. --timeout=60.",
            ) from exc
        except WeatherError:
            # Already one of ours — propagate unchanged.
            raise
        except Exception as exc:
            raise FetchFailedError(
                f"Unexpected weather provider error: {exc}",
            ) from exc
