"""
Logging-related settings for blue_archive.

These only take effect through `blue_archive.utils.setup_logging`; the
package logs nothing by itself until an application configures it.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .options import BoolOption, StrOption

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

DEFAULT_LOG_FILE_PATH = "logs/blue_archive.csv"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings:
    """Handlers `setup_logging` attaches to the package logger."""

    console_logging = BoolOption("logging/console_enabled", False)
    # Level names are stored upper-case; anything else is rejected
    console_log_level = StrOption(
        "logging/console_level", "INFO", choices=LOG_LEVELS, normalize=str.upper
    )
    console_use_colors = BoolOption("logging/console_use_colors", True)

    file_logging = BoolOption("logging/file_enabled", False)
    log_file_path = StrOption("logging/file_path", DEFAULT_LOG_FILE_PATH)

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    @property
    def console_level_number(self) -> int:
        """Console level as a `logging` constant."""
        return logging.getLevelName(self.console_log_level)

    @property
    def log_file_absolute_path(self) -> Path:
        return Path(self.log_file_path).resolve()
