"""
Exception types raised by the blue_archive client.
"""

from typing import Optional


class BlueArchiveError(Exception):
    """Base class for every error raised by this package."""
    pass


class RequestError(BlueArchiveError):
    """Raised when requesting data from the remote source fails."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class DeserializationError(BlueArchiveError):
    """Raised when fetched data cannot be decoded into the typed models."""
    pass


class EmptyDatasetError(BlueArchiveError):
    """Raised when picking a random student from an empty dataset."""

    def __init__(self, message: str = "Randomizing students failed due to the collection being empty."):
        super().__init__(message)
