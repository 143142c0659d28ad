"""
Logging configuration for blue_archive.

The package never configures the root logger. `setup_logging` attaches
handlers to the "blue_archive" logger only, and `blue_archive/__init__.py`
installs a `NullHandler` there, so an application that does not call it sees
package records only through its own root configuration.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from ..settings import ClientSettings

PACKAGE_LOGGER = "blue_archive"
CONSOLE_FORMAT = "%(asctime)s : %(levelname)-8s : %(name)s : %(message)s"

# Marks handlers created by setup_logging so a second call can replace them
_INSTALLED_ATTR = "_blue_archive_installed"


class ColoredFormatter(logging.Formatter):
    """Console formatter that colours the level name."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        color = self.COLORS.get(record.levelname)
        if color is None:
            return formatted
        return formatted.replace(
            record.levelname, f"{color}{record.levelname}{self.RESET}", 1
        )


class CSVFormatter(logging.Formatter):
    """Semicolon-separated, fully quoted records for file logging.

    Columns: time, level, milliseconds since start, logger, line, message.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        columns = (
            self.formatTime(record, self.datefmt),
            record.levelname,
            f"{int(record.relativeCreated)} ms",
            record.name,
            str(record.lineno),
            message,
        )
        return ";".join('"' + value.replace('"', '""') + '"' for value in columns)


def installed_handlers(logger: logging.Logger) -> List[logging.Handler]:
    """Return the handlers `setup_logging` attached to a logger."""
    return [h for h in logger.handlers if getattr(h, _INSTALLED_ATTR, False)]


def _console_handler(settings: "ClientSettings") -> logging.Handler:
    formatter_cls = ColoredFormatter if settings.console_use_colors else logging.Formatter
    handler = logging.StreamHandler()
    handler.setLevel(settings.logging.console_level_number)
    handler.setFormatter(formatter_cls(fmt=CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    return handler


def _file_handler(log_file: Path) -> logging.Handler:
    """Rotating CSV handler; raises OSError if the file cannot be opened."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(CSVFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(settings: "ClientSettings") -> None:
    """
    Attach console and file handlers to the package logger.

    Handlers from an earlier call are removed first. While any handler is
    attached the package logger stops propagating, so records are not
    printed twice by an application's root handlers; with both handlers
    disabled, propagation and the logger level are restored.

    Args:
        settings: ClientSettings instance for all logging configuration
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in installed_handlers(package_logger):
        package_logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = []
    if settings.console_logging:
        handlers.append(_console_handler(settings))

    file_error: Optional[OSError] = None
    log_file = Path(settings.log_file_path)
    if settings.file_logging:
        try:
            handlers.append(_file_handler(log_file))
        except OSError as e:
            file_error = e

    for handler in handlers:
        setattr(handler, _INSTALLED_ATTR, True)
        package_logger.addHandler(handler)

    if handlers:
        package_logger.setLevel(logging.DEBUG)
        package_logger.propagate = False
    else:
        package_logger.setLevel(logging.NOTSET)
        package_logger.propagate = True

    logger = logging.getLogger(__name__)
    if file_error is not None:
        logger.warning(f"Could not set up file logging at {log_file}: {file_error}")
    logger.info("Logging initialized")
    if settings.console_logging:
        logger.debug(
            f"Console logging: {settings.console_log_level} "
            f"(colors: {settings.console_use_colors})"
        )
    if settings.file_logging and file_error is None:
        logger.debug(f"File logging: DEBUG at {log_file.absolute()}")
