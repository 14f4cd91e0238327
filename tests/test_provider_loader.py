"""Tests for provider discovery (infra/provider_loader.py).

All tests patch :func:`importlib.metadata.entry_points` — no installed
plugin is required.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from weather_cli.exceptions import ProviderNotFoundError
from weather_cli.infra.provider_loader import (
    ENTRY_POINT_GROUP,
    available_providers,
    load_provider,
)


def _entry_point(name: str, instance: object | None = None) -> MagicMock:
    ep = MagicMock()
    ep.name = name
    ep.load.return_value = MagicMock(return_value=instance or MagicMock(name=name))
    return ep


class TestAvailableProviders:
    @patch("weather_cli.infra.provider_loader.entry_points")
    def test_queries_group_and_sorts(self, mock_eps: MagicMock) -> None:
        mock_eps.return_value = [_entry_point("wttr"), _entry_point("openweather")]

        names = [ep.name for ep in available_providers()]

        mock_eps.assert_called_once_with(group=ENTRY_POINT_GROUP)
        assert names == ["openweather", "wttr"]


class TestLoadProvider:
    @patch("weather_cli.infra.provider_loader.entry_points", return_value=[])
    def test_none_installed(self, _mock_eps: MagicMock) -> None:
        with pytest.raises(ProviderNotFoundError, match="No weather provider") as exc_info:
            load_provider()
        assert ENTRY_POINT_GROUP in (exc_info.value.hint or "")

    @patch("weather_cli.infra.provider_loader.entry_points")
    def test_first_by_name_when_unspecified(self, mock_eps: MagicMock) -> None:
        sentinel = object()
        mock_eps.return_value = [_entry_point("wttr"), _entry_point("openweather", sentinel)]

        assert load_provider() is sentinel

    @patch("weather_cli.infra.provider_loader.entry_points")
    def test_named(self, mock_eps: MagicMock) -> None:
        sentinel = object()
        mock_eps.return_value = [_entry_point("openweather"), _entry_point("wttr", sentinel)]

        assert load_provider("wttr") is sentinel

    @patch("weather_cli.infra.provider_loader.entry_points")
    def test_unknown_name(self, mock_eps: MagicMock) -> None:
        mock_eps.return_value = [_entry_point("openweather"), _entry_point("wttr")]

        with pytest.raises(ProviderNotFoundError, match="'metoffice'") as exc_info:
            load_provider("metoffice")
        assert exc_info.value.hint == "Installed providers: openweather, wttr"
