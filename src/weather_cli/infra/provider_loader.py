"""Infrastructure: weather provider plugin discovery.

Weather providers live outside this package and register themselves
under the :data:`ENTRY_POINT_GROUP` entry-point group::

    [project.entry-points."weather_cli.providers"]
    openweather = "weather_openweather:OpenWeatherProvider"

Rules
-----
* Discovery via :func:`importlib.metadata.entry_points` only.
* The loaded object is called with no arguments to build the provider.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

from importlib.metadata import EntryPoint, entry_points

from weather_cli.core.protocols import WeatherProvider
from weather_cli.exceptions import ProviderNotFoundError

ENTRY_POINT_GROUP: str = "weather_cli.providers"

_INSTALL_HINT: str = (
    "Install a weather provider plugin that registers the "
    f"'{ENTRY_POINT_GROUP}' entry point."
)


def available_providers() -> tuple[EntryPoint, ...]:
    """Return registered provider entry points sorted by name."""
    return tuple(
        sorted(entry_points(group=ENTRY_POINT_GROUP), key=lambda ep: ep.name)
    )


def load_provider(name: str | None = None) -> WeatherProvider:
    """Load and instantiate a weather provider.

    Parameters
    ----------
    name:
        Entry-point name to load.  When ``None``, the first provider in
        name order is used.

    Raises
    ------
    ProviderNotFoundError
        When no provider is registered, or *name* is not among them.
    """
    candidates = available_providers()
    if not candidates:
        raise ProviderNotFoundError(
            "No weather provider is installed.",
            hint=_INSTALL_HINT,
        )

    if name is None:
        selected = candidates[0]
    else:
        selected = next((ep for ep in candidates if ep.name == name), None)
        if selected is None:
            known = ", ".join(ep.name for ep in candidates)
            raise ProviderNotFoundError(
                f"Weather provider '{name}' is not installed.",
                hint=f"Installed providers: {known}",
            )

    factory = selected.load()
    return factory()
