"""Single source of truth for the weather-cli version string."""

from __future__ import annotations

__version__: str = "0.9.2"
