"""Program-wide constants."""

from __future__ import annotations

PROGRAM_NAME: str = "weather"
"""Name shown in the usage banner."""

LOCATION_PROVIDERS: tuple[str, ...] = (
    "ipapi",
    "ipinfo",
    "ip-api",
    "geojs",
)
"""Location providers, addressed by index with ``-p``/``--location-provider``.

Only the order and the length matter to the CLI layer; resolving an index
to an actual lookup is the weather provider's job.
"""
