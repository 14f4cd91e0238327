"""CLI application entry point for ``weather``.

This module is the **sole error boundary** for the entire application.
It catches :class:`~weather_cli.exceptions.WeatherError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — options come from
  :mod:`weather_cli.cli.args`, defaults from :mod:`weather_cli.core.settings`,
  and the report from a :class:`~weather_cli.core.protocols.WeatherProvider`.
* Diagnostics go to stderr through the Rich console; ``--help``,
  ``--version`` and the report go to stdout verbatim.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import asyncio
import sys

from weather_cli.cli import exit_codes
from weather_cli.cli.args import parse
from weather_cli.cli.console import console
from weather_cli.core.models import Settings
from weather_cli.core.protocols import WeatherProvider
from weather_cli.core.settings import resolve_settings
from weather_cli.exceptions import WeatherError
from weather_cli.utils.constants import PROGRAM_NAME

FETCH_MESSAGE: str = "Fetching weather…"


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_report(settings: Settings, provider: WeatherProvider | None) -> int:
    """Fetch and print one weather report behind the spinner.

    Flow:
    1. Load the provider plugin unless one was injected.
    2. Configure the spinner from the settings.
    3. Race the spinner against the fetch; print the report through it.
    """
    from weather_cli.cli.spinner import Spinner, SpinnerColor
    from weather_cli.core.weather_service import WeatherService
    from weather_cli.infra.provider_loader import load_provider

    service = WeatherService(provider if provider is not None else load_provider())

    spinner = Spinner(silent=settings.silent)
    spinner.set_color(SpinnerColor.GREEN)
    spinner.set_message(FETCH_MESSAGE)

    async def fetch_and_print() -> None:
        report = await service.fetch_report(settings)
        spinner.print_message(report)

    asyncio.run(spinner.run(fetch_and_print()))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    provider: WeatherProvider | None = None,
) -> int:
    """Run the weather CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    provider:
        Weather provider to use instead of the installed plugin.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    ArgsError
        When the arguments are malformed.
    """
    ignored: list[tuple[str, str]] = []
    options = parse(
        sys.argv[1:] if argv is None else argv,
        on_ignored=lambda flag, raw: ignored.append((flag, raw)),
    )

    if options.help is not None:
        sys.stdout.write(options.help)
        return exit_codes.SUCCESS

    if options.version is not None:
        print(options.version)
        return exit_codes.SUCCESS

    if not options.silent:
        for flag, raw in ignored:
            console.warn(f"ignoring invalid --{flag} value {raw!r}")

    return _handle_report(resolve_settings(options), provider)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Console-script entry point: run :func:`main` and exit with its code.

    Every :class:`~weather_cli.exceptions.WeatherError` becomes an
    ``Error:`` line on stderr plus its hint and exit status 1.  For an
    :class:`~weather_cli.exceptions.ArgsError` the hint is
    ``Run 'weather --help' for usage.``; a missing provider plugin names
    the installed ones; a failed or timed-out fetch says which.  Ctrl+C
    while the spinner runs exits 130, and anything else is reported as a
    bug with exit status 2.
    """
    try:
        sys.exit(main())
    except WeatherError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        # The spinner line is already gone; start the notice on a fresh line.
        console.print("\n[yellow]Weather fetch cancelled.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            f"[bold red]{PROGRAM_NAME}: unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
