"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
defaults, and equality semantics.
"""

from __future__ import annotations

import dataclasses

import pytest

from weather_cli.core.models import Options, Settings, Units


def _make_settings(**overrides: object) -> Settings:
    """Factory with sensible defaults for concise tests."""
    defaults: dict[str, object] = {
        "units": Units.CELSIUS,
        "connect_timeout": 5,
        "timeout": 30,
        "location_provider": 0,
        "full_info": False,
        "silent": False,
    }
    defaults.update(overrides)
    return Settings(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------

class TestUnits:
    def test_letters(self) -> None:
        assert Units.CELSIUS.value == "C"
        assert Units.FAHRENHEIT.value == "F"

    def test_lookup_by_letter(self) -> None:
        assert Units("F") is Units.FAHRENHEIT


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

class TestOptions:
    def test_every_field_defaults_to_unspecified(self) -> None:
        options = Options()
        assert all(
            getattr(options, f.name) is None for f in dataclasses.fields(Options)
        )

    def test_zero_is_distinct_from_unspecified(self) -> None:
        assert Options(timeout=0) != Options()

    def test_frozen(self) -> None:
        options = Options()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.silent = True  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Options(query="x", silent=True) == Options(query="x", silent=True)


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class TestSettings:
    def test_query_defaults_to_none(self) -> None:
        assert _make_settings().query is None

    def test_frozen(self) -> None:
        settings = _make_settings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.timeout = 1  # type: ignore[misc]
