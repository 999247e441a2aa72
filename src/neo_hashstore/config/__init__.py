"""Configuration for neo-hashstore."""

from .settings import HashStoreSettings, get_settings
from .logging_config import LoggingConfig, LogVerbosity, LogFormat, setup_logging

__all__ = [
    "HashStoreSettings",
    "get_settings",
    "LoggingConfig",
    "LogVerbosity",
    "LogFormat",
    "setup_logging",
]
