"""
Core settings management for blue_archive.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QSettings

from ..enums import Region
from .types import ConfigError, ConfigVersion, ValidationResult
from .validation import SettingsValidator
from .api import ApiSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)


class ClientSettings:
    """
    Client configuration stored with QSettings.

    Provides type-safe access to settings with cross-platform storage and
    validation. Pass `file_path` to keep the settings in a standalone INI
    file instead of the per-user native store.
    """

    def __init__(
        self, profile: str = "default", file_path: Optional[Union[str, Path]] = None
    ):
        """Initialize settings for a profile.

        Args:
            profile: Settings profile name (default: "default")
            file_path: Optional INI file to use instead of the native store
        """
        if file_path is not None:
            self.settings = QSettings(str(file_path), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings("blue-archive", "blue_archive")
        self.profile = profile

        # Use profile as a group: blue-archive/blue_archive/default/...
        self.settings.beginGroup(profile)

        self._validator = SettingsValidator(self)
        self._api = ApiSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        self._ensure_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    def _ensure_version(self) -> None:
        """Stamp the configuration version on first use.

        Raises:
            ConfigError: If the settings store cannot be read or written
        """
        if not str(self.settings.value("app/version", "") or ""):
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.sync()
            logger.info("First run detected, initializing configuration")

        status = self.settings.status()
        if status != QSettings.Status.NoError:
            raise ConfigError(
                f"Cannot access settings at {self.settings.fileName()}: {status.name}"
            )

    # === SUBSYSTEM ACCESS ===

    @property
    def api(self) -> ApiSettings:
        """Access remote data source settings subsystem."""
        return self._api

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    @property
    def version(self) -> str:
        """Get configuration version."""
        value = self.settings.value("app/version", ConfigVersion.CURRENT.value)
        return str(value) if value is not None else ConfigVersion.CURRENT.value

    # === API SETTINGS (DELEGATED) ===

    @property
    def data_url(self) -> str:
        return self._api.data_url

    @data_url.setter
    def data_url(self, value: str) -> None:
        self._api.data_url = value

    @property
    def api_url(self) -> str:
        return self._api.api_url

    @api_url.setter
    def api_url(self, value: str) -> None:
        self._api.api_url = value

    @property
    def timeout(self) -> float:
        return self._api.timeout

    @timeout.setter
    def timeout(self, value: float) -> None:
        self._api.timeout = value

    @property
    def region(self) -> Region:
        return self._api.region

    @region.setter
    def region(self, value: Region) -> None:
        self._api.region = value

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        """Set console logging enabled state."""
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        """Set console logging level."""
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        """Set console color usage."""
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        """Set file logging enabled state."""
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        """Get log file path."""
        return self._logging.log_file_path

    @log_file_path.setter
    def log_file_path(self, value: str) -> None:
        self._logging.log_file_path = value

    # === VALIDATION AND UTILITIES ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    def get_settings_file_path(self) -> str:
        """Get path to the settings file."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
