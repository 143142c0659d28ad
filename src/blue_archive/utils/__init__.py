"""
Utility helpers for blue_archive.
"""

from .logging_config import ColoredFormatter, CSVFormatter, installed_handlers, setup_logging

__all__ = ["ColoredFormatter", "CSVFormatter", "installed_handlers", "setup_logging"]
