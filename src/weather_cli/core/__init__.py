"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from weather_cli.core.models import Options, Settings, Units
from weather_cli.core.protocols import WeatherProvider
from weather_cli.core.settings import resolve_settings
from weather_cli.core.weather_service import WeatherService

__all__: list[str] = [
    "Options",
    "Settings",
    "Units",
    "WeatherProvider",
    "WeatherService",
    "resolve_settings",
]
