"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so
bootstrap paths (``--help``, ``--version``) and silent runs remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from weather_cli.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console on stderr, or on stdout when *stderr* is false."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy for diagnostics, with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def warn(self, message: str) -> None:
		"""Print a yellow ``Warning:`` line."""
		self.print(f"[yellow]Warning:[/yellow] {_escape(message)}")


def _escape(text: str) -> str:
	"""Escape Rich markup in *text*; identity when Rich is missing."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)


console = _ConsoleProxy()
