"""Tests for the weather service (core/weather_service.py).

All tests fake the :class:`WeatherProvider` — no network access.

Coverage:
* Provider delegation.
* Overall timeout enforcement (and ``0`` disabling it).
* Exception wrapping (foreign errors → FetchFailedError).
"""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from weather_cli.core.models import Settings, Units
from weather_cli.core.weather_service import WeatherService
from weather_cli.exceptions import (
    FetchFailedError,
    FetchTimeoutError,
    ProviderNotFoundError,
)


def _settings(**overrides: object) -> Settings:
    defaults: dict[str, object] = {
        "units": Units.CELSIUS,
        "connect_timeout": 5,
        "timeout": 30,
        "location_provider": 0,
        "full_info": False,
        "silent": True,
    }
    defaults.update(overrides)
    return Settings(**defaults)  # type: ignore[arg-type]


class TestFetchReport:
    def test_delegates_to_provider(self, fake_provider: Any) -> None:
        settings = _settings(query="natal")
        report = asyncio.run(WeatherService(fake_provider).fetch_report(settings))

        assert report == fake_provider.report
        assert fake_provider.calls == [settings]

    def test_timeout_raises(self, provider_factory: Any) -> None:
        service = WeatherService(provider_factory(delay=5))

        with pytest.raises(FetchTimeoutError, match="1 seconds") as exc_info:
            asyncio.run(service.fetch_report(_settings(timeout=1)))
        assert exc_info.value.hint is not None

    def test_zero_timeout_means_no_limit(self, provider_factory: Any) -> None:
        provider = provider_factory(delay=0.01)
        report = asyncio.run(WeatherService(provider).fetch_report(_settings(timeout=0)))
        assert report == provider.report

    def test_weather_error_propagates_unchanged(self, provider_factory: Any) -> None:
        error = ProviderNotFoundError("gone")
        provider = provider_factory(error=error)

        with pytest.raises(ProviderNotFoundError) as exc_info:
            asyncio.run(WeatherService(provider).fetch_report(_settings()))
        assert exc_info.value is error

    def test_foreign_error_is_wrapped(self, provider_factory: Any) -> None:
        provider = provider_factory(error=ConnectionError("refused"))

        with pytest.raises(FetchFailedError, match="refused") as exc_info:
            asyncio.run(WeatherService(provider).fetch_report(_settings()))
        assert isinstance(exc_info.value.__cause__, ConnectionError)
