"""Shared pytest fixtures and configuration for the weather-cli test suite.

Guidelines
----------
* No internet access in any test.
* Weather providers are faked at the protocol boundary.
* Core tests must be pure — no side effects.
* Tests must not depend on OS state or a real terminal.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

import pytest

from weather_cli.core.models import Settings


@dataclass
class FakeProvider:
    """In-memory :class:`~weather_cli.core.protocols.WeatherProvider`."""

    report: str = "Natal, BR: 28°C, clear sky"
    delay: float = 0.0
    error: Exception | None = None
    calls: list[Settings] = field(default_factory=list)

    async def fetch_report(self, settings: Settings) -> str:
        self.calls.append(settings)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.report


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def provider_factory() -> type[FakeProvider]:
    """The :class:`FakeProvider` class, for tests that need custom fakes."""
    return FakeProvider
