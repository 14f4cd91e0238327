"""weather-cli — current weather in your terminal.

Command-surface layer: option resolution and an asyncio status spinner,
arranged in a strict layered architecture.
"""

from weather_cli.version import __version__

__all__: list[str] = ["__version__"]
