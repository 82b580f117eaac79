"""flatorm configuration management.

This module centralizes all configuration loading from environment variables
and provides sensible defaults. All modules should import configuration
values from here rather than reading environment variables directly.

Environment Variables:
    FLATORM_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
                       Default: INFO

    FLATORM_LOG_FORMAT: Log output format (text, json)
                        Default: text

    FLATORM_DEFAULT_DIALECT: Dialect used when none is given explicitly
                             Options: sqlite, postgres, mysql (and driver aliases)
                             Default: sqlite

    FLATORM_ECHO_SQL: Let SQLAlchemy log every statement it sends
                      Default: false
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from flatorm.exceptions import UnsupportedDialectError
from flatorm.models.dialect import Dialect


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment variable."""
    value = os.environ.get(key, "").lower()
    if not value:
        return default
    return value in ("true", "1", "yes", "on")


def _get_str(key: str, default: str) -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class FlatORMConfig:
    """flatorm configuration container.

    All configuration values are loaded from environment variables
    with sensible defaults.

    Usage:
        from flatorm.core.config import config

        level = config.log_level
        dialect = config.dialect
    """

    # Logging Configuration
    log_level: str = field(default_factory=lambda: _get_str("FLATORM_LOG_LEVEL", "INFO").upper())
    log_format: str = field(default_factory=lambda: _get_str("FLATORM_LOG_FORMAT", "text").lower())

    # SQL Configuration
    default_dialect: str = field(default_factory=lambda: _get_str("FLATORM_DEFAULT_DIALECT", "sqlite"))
    echo_sql: bool = field(default_factory=lambda: _get_bool("FLATORM_ECHO_SQL", False))

    def __post_init__(self):
        """Validate configuration after initialization."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level not in valid_levels:
            raise ValueError(
                f"Invalid FLATORM_LOG_LEVEL: {self.log_level}. "
                f"Must be one of: {valid_levels}"
            )

        valid_formats = {"text", "json"}
        if self.log_format not in valid_formats:
            raise ValueError(
                f"Invalid FLATORM_LOG_FORMAT: {self.log_format}. "
                f"Must be one of: {valid_formats}"
            )

        try:
            Dialect.parse(self.default_dialect)
        except UnsupportedDialectError as e:
            raise ValueError(f"Invalid FLATORM_DEFAULT_DIALECT: {e}") from e

    @property
    def dialect(self) -> Dialect:
        """Default dialect as a Dialect member."""
        return Dialect.parse(self.default_dialect)

    def as_dict(self) -> dict:
        """Export configuration as dictionary.

        Returns:
            Dictionary of all configuration values
        """
        return {
            "log_level": self.log_level,
            "log_format": self.log_format,
            "default_dialect": self.dialect.value,
            "echo_sql": self.echo_sql,
        }


def load_config() -> FlatORMConfig:
    """Load configuration from environment.

    This function creates a new FlatORMConfig instance by reading
    current environment variables. Call this to refresh config
    if environment has changed.

    Returns:
        New FlatORMConfig instance
    """
    return FlatORMConfig()


# Global configuration instance - loaded once at import time
# Use load_config() to refresh if needed
config = load_config()
