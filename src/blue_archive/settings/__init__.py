"""
Settings package for blue_archive.

This package provides type-safe configuration management using Qt's
QSettings for cross-platform storage.

Usage:
    from blue_archive.settings import ClientSettings

    settings = ClientSettings()
    result = settings.validate()
"""

from .core import ClientSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .api import ApiSettings, DEFAULT_API_URL, DEFAULT_DATA_URL, DEFAULT_TIMEOUT
from .logging import LoggingSettings
from .options import BoolOption, StrOption

__all__ = [
    "ClientSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "ApiSettings",
    "LoggingSettings",
    "BoolOption",
    "StrOption",
    "DEFAULT_API_URL",
    "DEFAULT_DATA_URL",
    "DEFAULT_TIMEOUT",
]
