"""Terminal spinner that races an asynchronous operation.

:class:`Spinner` owns one terminal line.  :meth:`Spinner.run` schedules
an endless animation task next to the caller's operation on the same
event loop and returns whichever finishes first — in practice always
the operation.  The losing task is cancelled and awaited before
:meth:`~Spinner.run` returns, so no frame is ever drawn afterwards.

Design
------
* Drawing goes through a transient :class:`rich.live.Live` with auto
  refresh disabled: every tick is one explicit redraw on the event
  loop, and stopping the live display erases the spinner line.
* While running, Rich redirects stdout above the spinner line, and
  :meth:`Spinner.print_message` writes through the live console.
* In silent mode nothing is drawn and Rich is never imported; messages
  are plain ``print()`` calls.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from weather_cli.cli.console import get_rich_console
from weather_cli.exceptions import EnvironmentError

T = TypeVar("T")

TICK_STRINGS: tuple[str, ...] = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")
TICK_INTERVAL: float = 0.12
"""Seconds between two animation frames."""


# ---------------------------------------------------------------------------
# Style
# ---------------------------------------------------------------------------

class SpinnerColor(str, Enum):
    """Terminal colors the spinner glyph can be drawn in."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class SpinnerStyle:
    """Glyph sequence plus a Rich-markup template for one frame.

    The template receives ``frame`` (the current glyph) and ``message``
    (already markup-escaped).
    """

    tick_strings: tuple[str, ...] = TICK_STRINGS
    template: str = "{frame} {message}"

    @classmethod
    def colored(cls, color: SpinnerColor, tick_strings: tuple[str, ...] = TICK_STRINGS) -> SpinnerStyle:
        """Return a style with *color* baked into the glyph markup."""
        return cls(
            tick_strings=tick_strings,
            template=f"[{color}]{{frame}}[/{color}] {{message}}",
        )

    def glyph(self, tick: int) -> str:
        return self.tick_strings[tick % len(self.tick_strings)]

    def render(self, tick: int, message: str) -> str:
        """Return the markup for frame number *tick*."""
        return self.template.format(frame=self.glyph(tick), message=message)


# ---------------------------------------------------------------------------
# Race
# ---------------------------------------------------------------------------

async def race(*awaitables: Awaitable[Any]) -> Any:
    """Run *awaitables* concurrently and return the first result.

    Every other task is cancelled and awaited before returning.  When
    several finish in the same loop iteration, the earliest argument
    wins.  Exceptions raised by the winner propagate unchanged.

    Raises
    ------
    ValueError
        When called without any awaitable.
    """
    if not awaitables:
        raise ValueError("race() needs at least one awaitable")
    tasks = [asyncio.ensure_future(aw) for aw in awaitables]
    try:
        done, _pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
    finally:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    winner = next(task for task in tasks if task in done)
    return winner.result()


# ---------------------------------------------------------------------------
# Spinner
# ---------------------------------------------------------------------------

class SpinnerState(Enum):
    CREATED = "created"
    RUNNING = "running"
    SETTLED = "settled"


class Spinner:
    """Animated status line for one CLI invocation.

    Usage::

        spinner = Spinner(silent=settings.silent)
        spinner.set_color(SpinnerColor.GREEN)
        spinner.set_message("Fetching weather…")
        report = asyncio.run(spinner.run(service.fetch_report(settings)))

    Parameters
    ----------
    silent:
        Suppress all animation; messages become plain prints.
    console:
        Rich console used as the draw target.  Defaults to a console on
        stdout.
    tick_interval:
        Seconds between frames.
    """

    def __init__(
        self,
        silent: bool = False,
        *,
        console: Any | None = None,
        tick_interval: float = TICK_INTERVAL,
    ) -> None:
        self._console: Any | None = console
        self._tick_interval: float = tick_interval
        self._state: SpinnerState = SpinnerState.CREATED
        self._style: SpinnerStyle = SpinnerStyle()
        self._message: str = ""
        self._ticks: int = 0
        self._live: Any | None = None
        self._silent: bool = False
        self.set_silent(silent)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def silent(self) -> bool:
        return self._silent

    @property
    def state(self) -> SpinnerState:
        return self._state

    @property
    def style(self) -> SpinnerStyle:
        return self._style

    @property
    def message(self) -> str:
        return self._message

    @property
    def ticks(self) -> int:
        """Number of animation ticks so far."""
        return self._ticks

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def _check_not_settled(self) -> None:
        if self._state is SpinnerState.SETTLED:
            raise RuntimeError("spinner has already settled")

    def set_silent(self, silent: bool) -> None:
        """Switch between the animated style and no drawing at all."""
        self._check_not_settled()
        self._silent = silent
        if silent:
            self._close_live()
        else:
            self._style = SpinnerStyle()
            self._draw_target()

    def set_color(self, color: SpinnerColor) -> None:
        """Draw the glyph in *color*.  No-op when silent."""
        self._check_not_settled()
        if not self._silent:
            self._style = SpinnerStyle.colored(color, self._style.tick_strings)
            self._redraw()

    def set_message(self, message: str) -> None:
        """Replace the text shown next to the glyph.  No-op when silent."""
        self._check_not_settled()
        if not self._silent:
            self._message = message
            self._redraw()

    def print_message(self, message: str) -> None:
        """Print *message* on its own line without corrupting the frame."""
        self._check_not_settled()
        if self._silent:
            print(message)
            return
        target = self._live.console if self._live is not None else self._draw_target()
        target.print(message, markup=False, highlight=False, emoji=False, soft_wrap=True)

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def _draw_target(self) -> Any:
        if self._console is None:
            self._console = get_rich_console(stderr=False)
        return self._console

    def _frame(self) -> Any:
        from rich.markup import escape
        from rich.text import Text

        markup = self._style.render(self._ticks, escape(self._message))
        return Text.from_markup(markup)

    def _redraw(self) -> None:
        if self._live is not None:
            self._live.update(self._frame(), refresh=True)

    def _open_live(self) -> None:
        try:
            from rich.live import Live
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "rich is not installed. Install with: pip install rich",
            ) from exc

        self._live = Live(
            self._frame(),
            console=self._draw_target(),
            auto_refresh=False,
            transient=True,
        )
        self._live.start(refresh=True)

    def _close_live(self) -> None:
        if self._live is not None:
            live, self._live = self._live, None
            live.stop()

    async def _animate(self) -> None:
        """Advance the frame once per interval, forever."""
        if not self._silent:
            self._open_live()
        try:
            while True:
                await asyncio.sleep(self._tick_interval)
                self._ticks += 1
                self._redraw()
        finally:
            self._close_live()

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------

    async def run(self, operation: Awaitable[T]) -> T:
        """Animate until *operation* completes and return its result.

        Raises
        ------
        RuntimeError
            When the spinner is already running or has settled.
        """
        if self._state is not SpinnerState.CREATED:
            if asyncio.iscoroutine(operation):
                operation.close()
            raise RuntimeError(f"spinner cannot run while {self._state.value}")

        self._state = SpinnerState.RUNNING
        try:
            return await race(operation, self._animate())
        finally:
            self._state = SpinnerState.SETTLED
