"""
Configuration management utilities.

This module provides environment variable handling with type conversion,
database URL validation, logging configuration utilities and the settings
object used to bootstrap the package.
"""

import logging
import logging.config
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union
from urllib.parse import parse_qs, urlparse

from ..exceptions import ConfigurationException

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./pet_care.db"


class LogLevel(Enum):
    """Enumeration for log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnvironmentConfig:
    """Utility class for handling environment variables with type conversion."""

    @staticmethod
    def get_str(
        key: str, default: Optional[str] = None, required: bool = False
    ) -> Optional[str]:
        """
        Get a string environment variable.

        Args:
            key: Environment variable key
            default: Default value if not found
            required: Whether the variable is required

        Returns:
            String value or default

        Raises:
            ConfigurationException: If required variable is missing
        """
        value = os.getenv(key, default)

        if required and value is None:
            raise ConfigurationException(
                f"Required environment variable '{key}' is not set", config_key=key
            )

        return value

    @staticmethod
    def get_int(
        key: str, default: Optional[int] = None, required: bool = False
    ) -> Optional[int]:
        """
        Get an integer environment variable.

        Raises:
            ConfigurationException: If required variable is missing or invalid
        """
        value = os.getenv(key)

        if value is None:
            if required:
                raise ConfigurationException(
                    f"Required environment variable '{key}' is not set",
                    config_key=key,
                )
            return default

        try:
            return int(value)
        except ValueError:
            raise ConfigurationException(
                f"Environment variable '{key}' must be an integer, got: {value}",
                config_key=key,
                config_value=value,
            )

    @staticmethod
    def get_bool(
        key: str, default: Optional[bool] = None, required: bool = False
    ) -> Optional[bool]:
        """Get a boolean environment variable."""
        value = os.getenv(key)

        if value is None:
            if required:
                raise ConfigurationException(
                    f"Required environment variable '{key}' is not set",
                    config_key=key,
                )
            return default

        return value.lower() in ("true", "1", "yes", "on", "enabled")


class DatabaseURLValidator:
    """Utility class for validating database URLs."""

    SUPPORTED_DRIVERS = {
        "postgresql": ["postgresql", "postgresql+asyncpg"],
        "sqlite": ["sqlite", "sqlite+aiosqlite"],
    }

    @classmethod
    def validate_url(cls, url: str) -> Dict[str, Any]:
        """
        Validate a database URL and return parsed components.

        Args:
            url: Database URL to validate

        Returns:
            Dictionary with validation results and parsed components

        Raises:
            ConfigurationException: If URL is invalid
        """
        if not url:
            raise ConfigurationException("Database URL cannot be empty")

        parsed = urlparse(url)

        if not parsed.scheme:
            raise ConfigurationException(
                "Database URL must include a scheme (e.g., postgresql://)"
            )

        backend = None
        for db_type, drivers in cls.SUPPORTED_DRIVERS.items():
            if parsed.scheme in drivers:
                backend = db_type
                break

        if backend is None:
            supported_list = [
                driver
                for drivers in cls.SUPPORTED_DRIVERS.values()
                for driver in drivers
            ]
            raise ConfigurationException(
                f"Unsupported database driver '{parsed.scheme}'. "
                f"Supported: {', '.join(supported_list)}"
            )

        if backend != "sqlite":
            if not parsed.hostname:
                raise ConfigurationException("Database URL must include a hostname")
            if not parsed.path.lstrip("/"):
                raise ConfigurationException(
                    "Database URL must include a database name"
                )

        return {
            "valid": True,
            "backend": backend,
            "scheme": parsed.scheme,
            "hostname": parsed.hostname,
            "port": parsed.port,
            "database": parsed.path.lstrip("/") if parsed.path else "",
            "username": parsed.username,
            "query": dict(parse_qs(parsed.query)),
        }


class LoggingConfigurator:
    """Utility class for configuring logging."""

    DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @staticmethod
    def configure_basic_logging(
        level: Union[str, LogLevel] = LogLevel.INFO,
        format_string: Optional[str] = None,
        log_file: Optional[str] = None,
    ) -> None:
        """
        Configure basic logging for the application.

        Args:
            level: Logging level
            format_string: Custom format string
            log_file: Optional log file path
        """
        if isinstance(level, LogLevel):
            level = level.value

        basic_config_args: Dict[str, Any] = {
            "level": level,
            "format": format_string or LoggingConfigurator.DEFAULT_FORMAT,
            "datefmt": "%Y-%m-%d %H:%M:%S",
        }
        if log_file:
            basic_config_args["filename"] = log_file
            basic_config_args["filemode"] = "a"

        logging.basicConfig(**basic_config_args)

    @staticmethod
    def configure_structured_logging(
        config_dict: Optional[Dict[str, Any]] = None,
        config_file: Optional[str] = None,
        level: Union[str, LogLevel] = LogLevel.INFO,
    ) -> None:
        """
        Configure structured logging using a dictionary or file.

        Args:
            config_dict: Logging configuration dictionary
            config_file: Path to logging configuration file
            level: Level for the package logger when using the default config
        """
        if isinstance(level, LogLevel):
            level = level.value

        if config_file and Path(config_file).exists():
            logging.config.fileConfig(config_file)
        elif config_dict:
            logging.config.dictConfig(config_dict)
        else:
            default_config = {
                "version": 1,
                "disable_existing_loggers": False,
                "formatters": {
                    "standard": {"format": LoggingConfigurator.DEFAULT_FORMAT},
                },
                "handlers": {
                    "console": {
                        "class": "logging.StreamHandler",
                        "level": level,
                        "formatter": "standard",
                        "stream": "ext://sys.stdout",
                    }
                },
                "loggers": {
                    "pet_care_core": {
                        "level": level,
                        "handlers": ["console"],
                        "propagate": False,
                    }
                },
                "root": {"level": "WARNING", "handlers": ["console"]},
            }
            logging.config.dictConfig(default_config)


@dataclass
class PetCareSettings:
    """Runtime settings for the package, usually read from the environment."""

    database_url: str = DEFAULT_DATABASE_URL
    pool_size: int = 5
    max_overflow: int = 10
    echo: bool = False
    log_level: LogLevel = LogLevel.INFO

    def __post_init__(self) -> None:
        DatabaseURLValidator.validate_url(self.database_url)

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured database is SQLite."""
        return self.database_url.startswith("sqlite")

    def configure_logging(self, config_file: Optional[str] = None) -> None:
        """Set up package logging at ``log_level``."""
        LoggingConfigurator.configure_structured_logging(
            config_file=config_file, level=self.log_level
        )

    @classmethod
    def from_environment(cls, prefix: str = "PET_CARE_") -> "PetCareSettings":
        """
        Build settings from ``PET_CARE_*`` environment variables.

        Raises:
            ConfigurationException: If a variable holds an invalid value
        """
        level_name = (
            EnvironmentConfig.get_str(f"{prefix}LOG_LEVEL", LogLevel.INFO.value)
            or LogLevel.INFO.value
        )
        try:
            log_level = LogLevel(level_name.upper())
        except ValueError:
            raise ConfigurationException(
                f"Unknown log level '{level_name}'",
                config_key=f"{prefix}LOG_LEVEL",
                config_value=level_name,
            )

        return cls(
            database_url=EnvironmentConfig.get_str(
                f"{prefix}DATABASE_URL", DEFAULT_DATABASE_URL
            )
            or DEFAULT_DATABASE_URL,
            pool_size=EnvironmentConfig.get_int(f"{prefix}DB_POOL_SIZE", 5) or 5,
            max_overflow=EnvironmentConfig.get_int(f"{prefix}DB_MAX_OVERFLOW", 10)
            or 0,
            echo=bool(EnvironmentConfig.get_bool(f"{prefix}DB_ECHO", False)),
            log_level=log_level,
        )
