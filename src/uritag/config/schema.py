"""Configuration schema dataclasses for uritag."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class RoutesConfig:
    """Named URI patterns and the base URL they are rendered under."""

    base_url: str | None = None
    patterns: dict[str, str] = field(default_factory=dict)


@dataclass
class LoggingConfig:
    """Logging settings for the ``uritag`` logger."""

    level: str = "WARNING"


@dataclass
class UriTagConfig:
    """Top-level configuration for uritag."""

    routes: RoutesConfig = field(default_factory=RoutesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def create_default(cls) -> UriTagConfig:
        """Create a configuration with all default values."""
        return cls(routes=RoutesConfig(), logging=LoggingConfig())
