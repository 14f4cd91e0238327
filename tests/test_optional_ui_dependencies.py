"""Regression tests for the optional Rich dependency.

These tests verify bootstrap commands and silent runs are resilient
when Rich is missing, and animated flows fail cleanly only when the
spinner is actually exercised.
"""

from __future__ import annotations

import sys
from typing import Any

import pytest

from weather_cli.cli import exit_codes
from weather_cli.cli.app import main
from weather_cli.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.live", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.text", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    assert main(["--help"]) == exit_codes.SUCCESS


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    assert main(["--version"]) == exit_codes.SUCCESS


def test_silent_report_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    fake_provider: Any,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["--silent", "-tabc"], provider=fake_provider) == exit_codes.SUCCESS
    assert capsys.readouterr().out == f"{fake_provider.report}\n"


def test_warning_falls_back_to_plain_stderr(
    monkeypatch: pytest.MonkeyPatch,
    fake_provider: Any,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError):
        main(["-tabc"], provider=fake_provider)
    assert "--timeout" in capsys.readouterr().err


def test_animated_report_errors_cleanly_when_rich_missing(
    monkeypatch: pytest.MonkeyPatch,
    fake_provider: Any,
) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        main(["natal"], provider=fake_provider)
    assert fake_provider.calls == []
