"""Centralized logging configuration for neo-hashstore.

Provides consistent, configurable logging with environment-based control
over verbosity and log format.
"""

import logging
import logging.config
import os
from typing import Any, Dict, Optional
from enum import Enum


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Standard logging (warnings and above)
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


_FORMATS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    try:
        return verbosity_map[LogVerbosity(verbosity.upper())]
    except ValueError:
        return LogLevel.WARNING.value


class LoggingConfig:
    """Centralized logging configuration manager."""

    # Modules that should only log errors
    ERROR_ONLY_MODULES = [
        "redis",
        "asyncio",
    ]

    @classmethod
    def build_config(
        cls,
        verbosity: Optional[str] = None,
        log_format: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Build a ``dictConfig`` mapping.

        Args:
            verbosity: Verbosity mode, defaults to ``NEO_HASHSTORE_LOG_VERBOSITY``
            log_format: Format name, defaults to ``NEO_HASHSTORE_LOG_FORMAT``

        Returns:
            Logging configuration dictionary
        """
        verbosity = verbosity or os.getenv("NEO_HASHSTORE_LOG_VERBOSITY", "NORMAL")
        log_format = (log_format or os.getenv("NEO_HASHSTORE_LOG_FORMAT", "simple")).lower()

        effective_log_level = get_log_level_from_verbosity(verbosity)
        try:
            format_string = _FORMATS[LogFormat(log_format)]
        except ValueError:
            format_string = _FORMATS[LogFormat.SIMPLE]

        logging_config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": effective_log_level,
                "handlers": ["console"],
            },
            "loggers": {
                "neo_hashstore": {
                    "level": effective_log_level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

        for module in cls.ERROR_ONLY_MODULES:
            logging_config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }

        return logging_config

    @classmethod
    def configure(
        cls,
        verbosity: Optional[str] = None,
        log_format: Optional[str] = None,
    ) -> None:
        """Configure logging based on arguments or environment variables."""
        logging_config = cls.build_config(verbosity, log_format)
        logging.config.dictConfig(logging_config)

        logger = logging.getLogger(__name__)
        logger.debug(
            f"Logging configured: level={logging_config['root']['level']}, "
            f"format={log_format or 'env'}"
        )

    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        """Set log level for a specific module.

        Args:
            module_name: Name of the module
            level: Log level to set
        """
        logging.getLogger(module_name).setLevel(getattr(logging, level.upper()))


def setup_logging(settings=None) -> None:
    """Setup logging from settings, or from environment variables when omitted.

    Applications call this once at startup; importing the library never
    reconfigures logging on its own.
    """
    if settings is not None:
        LoggingConfig.configure(settings.log_verbosity, settings.log_format)
    else:
        LoggingConfig.configure()
