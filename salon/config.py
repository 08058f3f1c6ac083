"""Dataclass-based configuration for salon.

Settings are frozen dataclasses, so a config object can be shared freely
and overridden by building a new one:
- Default values work out of the box
- Invalid values are rejected at construction time
- Overrides come from environment variables via ``from_env``
"""

import os
from dataclasses import dataclass, field

from salon.errors import ConfigurationError


LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
LOG_FORMATS = ("console", "json")


@dataclass(frozen=True)
class LoggingConfig:
    """Structured logging settings."""

    level: str = "warning"
    format: str = "console"

    def __post_init__(self):
        if self.level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level {self.level!r}. Allowed: {list(LOG_LEVELS)}",
                details={"level": self.level},
            )
        if self.format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.format!r}. Allowed: {list(LOG_FORMATS)}",
                details={"format": self.format},
            )


@dataclass(frozen=True)
class SalonConfig:
    """Complete configuration for the salon package.

    Usage::

        config = SalonConfig.from_env()
        configure_logging(config)
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    logger_name: str = "salon"

    @classmethod
    def default(cls) -> "SalonConfig":
        """Create config with all defaults."""
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "SALON_") -> "SalonConfig":
        """Create config from environment variables.

        Example: SALON_LOG_LEVEL=debug SALON_LOG_FORMAT=json
        """
        logging_overrides = {}
        level = os.getenv(f"{prefix}LOG_LEVEL")
        if level:
            logging_overrides["level"] = level.strip().lower()
        fmt = os.getenv(f"{prefix}LOG_FORMAT")
        if fmt:
            logging_overrides["format"] = fmt.strip().lower()

        return cls(logging=LoggingConfig(**logging_overrides))
