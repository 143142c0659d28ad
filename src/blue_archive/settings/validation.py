"""
Settings validation system for blue_archive.
"""

import logging
from typing import List, TYPE_CHECKING
from urllib.parse import urlparse

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import ClientSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "ClientSettings"):
        self.settings = settings

    @staticmethod
    def _is_http_url(url: str) -> bool:
        parsed = urlparse(url)
        return parsed.scheme in ("http", "https") and bool(parsed.netloc)

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        api = self.settings.api
        if not self._is_http_url(api.data_url):
            errors.append(f"Data URL is not an http(s) URL: {api.data_url}")
        if not self._is_http_url(api.api_url):
            errors.append(f"API URL is not an http(s) URL: {api.api_url}")
        elif not api.api_url.endswith("/"):
            warnings.append(f"API URL has no trailing slash: {api.api_url}")

        if api.timeout <= 0:
            errors.append(f"Timeout must be positive, got {api.timeout}")

        if api.region.name.title() != api.region_name.strip().title():
            warnings.append(f"Unknown region '{api.region_name}', falling back to Global")

        result = ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
        if not result.is_valid:
            logger.debug(f"Settings validation failed: {errors}")
        return result
