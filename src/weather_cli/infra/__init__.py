"""Infrastructure layer — external system integration.

This layer wraps interaction with the Python packaging metadata used to
discover weather provider plugins.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from weather_cli.infra.provider_loader import (
    ENTRY_POINT_GROUP,
    available_providers,
    load_provider,
)

__all__: list[str] = [
    "ENTRY_POINT_GROUP",
    "available_providers",
    "load_provider",
]
