"""Option resolver — turns raw argument tokens into :class:`Options`.

The flag table :data:`FLAGS` is the single description of the command
line.  It drives both the :mod:`argparse` parser that tokenises the
arguments and :func:`format_usage`, which renders the ``--help`` text,
so the two can never drift apart.

Tokenisation follows getopts, not argparse's guessing: a pre-pass
rewrites every short option to its long spelling before argparse runs.

* A value-taking option takes the rest of its token (``-uC``, ``-u=C``
  gives ``=C``) or else the next token verbatim, even ``-m`` or ``--``.
* Any other ``-``-prefixed token must be a cluster of known short
  flags; ``-5`` and ``-x y`` are unknown options, not queries.
* ``--`` ends option parsing; what follows is positional.

Resolution rules
----------------
* Units: ``--metric`` beats ``--imperial`` beats ``--unit``; the unit
  letter is matched case-insensitively against ``C`` and ``F``.
* Timeouts and the location provider are parsed strictly.  A malformed
  value resolves to ``None`` instead of failing; it is reported through
  the optional ``on_ignored`` callback.
* The first positional token is the query, verbatim.
* Flags resolve to ``True`` when present and ``None`` otherwise.

Unknown flags, missing values and repeated options raise
:class:`~weather_cli.exceptions.ArgsError`, the only error this module
produces.
"""

from __future__ import annotations

import argparse
import re
import sys
import textwrap
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, NoReturn

from weather_cli.core.models import Options, Units
from weather_cli.core.settings import DEFAULT_CONNECT_TIMEOUT, DEFAULT_TIMEOUT
from weather_cli.exceptions import ArgsError
from weather_cli.utils.constants import LOCATION_PROVIDERS, PROGRAM_NAME
from weather_cli.version import __version__

IgnoredCallback = Callable[[str, str], None]
"""Called with ``(long flag name, raw value)`` for every discarded value."""


# ---------------------------------------------------------------------------
# Flag table
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FlagSpec:
    """One row of the command-line option table."""

    short: str
    """Single-letter name, without the dash."""

    long: str
    """Long name, without the dashes."""

    description: str
    """Help text."""

    hint: str | None = None
    """Value placeholder shown in the help.  ``None`` for plain flags."""

    @property
    def takes_value(self) -> bool:
        return self.hint is not None

    @property
    def dest(self) -> str:
        return self.long.replace("-", "_")


FLAGS: tuple[FlagSpec, ...] = (
    FlagSpec("m", "metric", "Weather in metric units (compatibility)"),
    FlagSpec("i", "imperial", "Weather in imperial units (compatibility)"),
    FlagSpec("u", "unit", "Unit of measurement", "[C]elsius or [F]ahrenheit"),
    FlagSpec(
        "c",
        "connect-timeout",
        "Connect timeout (in seconds)",
        str(DEFAULT_CONNECT_TIMEOUT),
    ),
    FlagSpec("t", "timeout", "Timeout (in seconds)", str(DEFAULT_TIMEOUT)),
    FlagSpec(
        "p",
        "location-provider",
        "Location provider",
        f"0 to {len(LOCATION_PROVIDERS) - 1}",
    ),
    FlagSpec("f", "full-info", "Full weather information"),
    FlagSpec("s", "silent", "Silent mode"),
    FlagSpec("v", "version", "Print program version"),
    FlagSpec("h", "help", "Print this help menu"),
)

USAGE_BRIEF: str = (
    f"Usage: {PROGRAM_NAME} [options] [city name[,state code][,country code]]"
)


# ---------------------------------------------------------------------------
# Help rendering
# ---------------------------------------------------------------------------

_DESCRIPTION_COLUMN = 24
_DESCRIPTION_WIDTH = 54


def _format_row(flag: FlagSpec) -> str:
    """Render one option row, getopts style."""
    row = f"    -{flag.short}, --{flag.long} "
    if flag.hint is not None:
        row += flag.hint

    separator = "\n" + " " * _DESCRIPTION_COLUMN
    if len(row) < _DESCRIPTION_COLUMN:
        row = row.ljust(_DESCRIPTION_COLUMN)
    else:
        row += separator

    lines = textwrap.wrap(
        flag.description,
        width=_DESCRIPTION_WIDTH,
        break_long_words=False,
        break_on_hyphens=False,
    )
    return row + separator.join(lines)


def format_usage(flags: Sequence[FlagSpec] = FLAGS, brief: str = USAGE_BRIEF) -> str:
    """Return the full ``--help`` text for *flags*."""
    rows = "\n".join(_format_row(flag) for flag in flags)
    return f"{brief}\n\nOptions:\n{rows}\n"


# ---------------------------------------------------------------------------
# Tokenisation
# ---------------------------------------------------------------------------

_USAGE_HINT = f"Run '{PROGRAM_NAME} --help' for usage."
_END_OF_OPTIONS = "--"


def _usage_error(message: str) -> NoReturn:
    raise ArgsError(message, hint=_USAGE_HINT)


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that raises instead of printing usage and exiting."""

    def error(self, message: str) -> NoReturn:
        _usage_error(message)


def _next_value(stream: Iterator[str], flag: FlagSpec) -> str:
    value = next(stream, None)
    if value is None:
        _usage_error(f"argument -{flag.short}/--{flag.long}: expected one argument")
    return value


def _expand_short(
    token: str,
    stream: Iterator[str],
    by_short: dict[str, FlagSpec],
) -> list[str]:
    """Expand one ``-abc`` cluster into long options."""
    expanded: list[str] = []
    for index, char in enumerate(token[1:], start=1):
        flag = by_short.get(char)
        if flag is None:
            _usage_error(f"unrecognized option: -{char}")
        if flag.takes_value:
            value = token[index + 1:] or _next_value(stream, flag)
            expanded.append(f"--{flag.long}={value}")
            break
        expanded.append(f"--{flag.long}")
    return expanded


def _normalize(
    tokens: Sequence[str],
    flags: Sequence[FlagSpec] = FLAGS,
) -> tuple[list[str], list[str]]:
    """Rewrite *tokens* so argparse reads them the getopts way.

    Returns the rewritten tokens and, separately, the positionals that
    followed ``--``.  Option values always end up attached after ``=``,
    so argparse never has to guess whether a token is a value.
    """
    by_short = {flag.short: flag for flag in flags}
    by_long = {flag.long: flag for flag in flags}

    normalized: list[str] = []
    stream = iter(tokens)
    for token in stream:
        if token == _END_OF_OPTIONS:
            return normalized, list(stream)
        if token.startswith("--"):
            # Unknown or malformed long options are left to argparse.
            flag = by_long.get(token[2:])
            if flag is not None and flag.takes_value:
                token = f"--{flag.long}={_next_value(stream, flag)}"
            normalized.append(token)
        elif token.startswith("-") and token != "-":
            normalized.extend(_expand_short(token, stream, by_short))
        else:
            normalized.append(token)
    return normalized, []


class _StoreOnce(argparse.Action):
    """Store the option value, rejecting a second occurrence."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        if getattr(namespace, self.dest, None) is not None:
            raise argparse.ArgumentError(self, "given more than once")
        setattr(namespace, self.dest, True if self.nargs == 0 else values)


def _build_parser(flags: Sequence[FlagSpec] = FLAGS) -> _ArgumentParser:
    parser = _ArgumentParser(
        prog=PROGRAM_NAME,
        usage=f"{PROGRAM_NAME} [options] [query]",
        add_help=False,
        allow_abbrev=False,
    )
    for flag in flags:
        parser.add_argument(
            f"-{flag.short}",
            f"--{flag.long}",
            dest=flag.dest,
            action=_StoreOnce,
            nargs=None if flag.takes_value else 0,
            metavar=flag.dest.upper() if flag.takes_value else None,
            default=None,
        )
    parser.add_argument("free", nargs="*")
    return parser


# ---------------------------------------------------------------------------
# Field resolution
# ---------------------------------------------------------------------------

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")

_U64_MAX = 2**64 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

_UNIT_LETTERS: dict[str, Units] = {"C": Units.CELSIUS, "F": Units.FAHRENHEIT}


def _strict_int(raw: str, pattern: re.Pattern[str], low: int, high: int) -> int | None:
    if pattern.fullmatch(raw) is None:
        return None
    value = int(raw)
    if not low <= value <= high:
        return None
    return value


class _Resolver:
    """Maps a parsed namespace onto :class:`Options` fields."""

    def __init__(
        self,
        namespace: argparse.Namespace,
        on_ignored: IgnoredCallback | None,
    ) -> None:
        self._ns = namespace
        self._on_ignored = on_ignored

    def _ignore(self, flag: str, raw: str) -> None:
        if self._on_ignored is not None:
            self._on_ignored(flag, raw)

    def _present(self, dest: str) -> bool:
        return getattr(self._ns, dest, None) is True

    def units(self) -> Units | None:
        if self._present("metric"):
            return Units.CELSIUS
        if self._present("imperial"):
            return Units.FAHRENHEIT

        raw: str | None = self._ns.unit
        if raw is None:
            return None
        unit = _UNIT_LETTERS.get(raw.upper()) if raw.isascii() else None
        if unit is None:
            self._ignore("unit", raw)
        return unit

    def seconds(self, dest: str, flag: str) -> int | None:
        raw: str | None = getattr(self._ns, dest)
        if raw is None:
            return None
        value = _strict_int(raw, _UNSIGNED_RE, 0, _U64_MAX)
        if value is None:
            self._ignore(flag, raw)
        return value

    def location_provider(self) -> int | None:
        raw: str | None = self._ns.location_provider
        if raw is None:
            return None
        value = _strict_int(raw, _SIGNED_RE, _I64_MIN, _I64_MAX)
        if value is None:
            self._ignore("location-provider", raw)
        return value

    def query(self) -> str | None:
        free: list[str] = getattr(self._ns, "free", None) or []
        return free[0] if free else None

    def flag(self, dest: str) -> bool | None:
        return True if self._present(dest) else None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse(
    tokens: Sequence[str],
    *,
    on_ignored: IgnoredCallback | None = None,
) -> Options:
    """Resolve *tokens* (without the program name) into :class:`Options`.

    Parameters
    ----------
    tokens:
        Argument tokens, e.g. ``sys.argv[1:]``.
    on_ignored:
        Optional callback invoked as ``on_ignored(flag, raw_value)`` when
        a value is malformed and resolves to ``None``.  It never changes
        the returned options.

    Raises
    ------
    ArgsError
        On unknown flags, missing option values, or repeated options.
    """
    normalized, trailing = _normalize(tokens)
    namespace = _build_parser().parse_intermixed_args(normalized)
    namespace.free = [*(namespace.free or []), *trailing]
    resolver = _Resolver(namespace, on_ignored)

    return Options(
        units=resolver.units(),
        connect_timeout=resolver.seconds("connect_timeout", "connect-timeout"),
        timeout=resolver.seconds("timeout", "timeout"),
        query=resolver.query(),
        location_provider=resolver.location_provider(),
        full_info=resolver.flag("full_info"),
        silent=resolver.flag("silent"),
        version=__version__ if resolver.flag("version") else None,
        help=format_usage() if resolver.flag("help") else None,
    )


def parse_from_argv(*, on_ignored: IgnoredCallback | None = None) -> Options:
    """Resolve the current process arguments."""
    return parse(sys.argv[1:], on_ignored=on_ignored)
