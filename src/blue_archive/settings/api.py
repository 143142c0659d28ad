"""
Remote data source settings for blue_archive.
"""

import logging
from typing import TYPE_CHECKING

from ..enums import Region
from .options import StrOption

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

DEFAULT_DATA_URL = (
    "https://raw.githubusercontent.com/lonqie/SchaleDB/main/data/en/students.min.json"
)
DEFAULT_API_URL = "https://api-blue-archive.vercel.app/api/"
DEFAULT_TIMEOUT = 30.0
DEFAULT_REGION = "Global"


class ApiSettings:
    """Manages where and how student data is fetched."""

    # URL of the full students JSON document
    data_url = StrOption("api/data_url", DEFAULT_DATA_URL)
    # Base URL of the remote query API
    api_url = StrOption("api/api_url", DEFAULT_API_URL)
    # Raw region name as stored; see `region` for the parsed value
    region_name = StrOption("api/region", DEFAULT_REGION)

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    @property
    def timeout(self) -> float:
        """Request timeout in seconds."""
        value = self.settings.value("api/timeout", DEFAULT_TIMEOUT)
        try:
            return float(str(value)) if value is not None else DEFAULT_TIMEOUT
        except (ValueError, TypeError):
            return DEFAULT_TIMEOUT

    @timeout.setter
    def timeout(self, value: float) -> None:
        if value > 0:
            self.settings.setValue("api/timeout", float(value))
            self.settings.sync()
        else:
            logger.warning(f"Invalid timeout: {value}, keeping current: {self.timeout}")

    @property
    def region(self) -> Region:
        """Region whose release flags are used when filtering by release status."""
        try:
            return Region.from_name(self.region_name)
        except ValueError:
            logger.warning(f"Invalid region in settings: {self.region_name}, using Global")
            return Region.GLOBAL

    @region.setter
    def region(self, value: Region) -> None:
        self.region_name = value.name.title()
