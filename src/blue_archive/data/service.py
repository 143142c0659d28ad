"""
Main service for working with Blue Archive student data.

Fetches the students document once, decodes it and exposes lookups and
filters over the resulting dataset.
"""

import logging
import random
from typing import Iterable, List, Optional, TYPE_CHECKING

from ..api.query import Query
from ..api.transport import HttpTransport, Transport
from ..enums import Region
from ..settings.api import DEFAULT_DATA_URL, DEFAULT_TIMEOUT
from ..types import Student
from .dataset import StudentDataset
from .loaders import StudentLoader

if TYPE_CHECKING:
    from ..settings import ClientSettings


class BlueArchiveFetcher:
    """Service owning the student dataset of one session.

    Construction performs the single fetch and decode; a constructed fetcher
    is always ready and its dataset never changes. To refresh, construct a
    new fetcher. Transport and decode failures propagate as `RequestError`
    and `DeserializationError`; nothing is retried here.
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        settings: Optional["ClientSettings"] = None,
        region: Optional[Region] = None,
    ):
        """Fetch and decode the students document.

        Args:
            transport: Source of the raw document; `fetch("")` must return
                it. Defaults to an `HttpTransport` on the configured data URL.
            settings: Client settings for data URL, timeout and region.
                Built-in defaults are used when omitted.
            region: Region for release-status filtering; overrides settings.
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.settings = settings
        self.loader = StudentLoader()

        if region is None:
            region = settings.region if settings else Region.GLOBAL
        self.region = region

        self.logger.info(f"Initializing BlueArchiveFetcher (region: {region.name.title()})")
        self._dataset = self._load_data(transport)

    def _load_data(self, transport: Optional[Transport]) -> StudentDataset:
        """Fetch the raw document and build the dataset."""
        if transport is None:
            data_url = self.settings.data_url if self.settings else DEFAULT_DATA_URL
            timeout = self.settings.timeout if self.settings else DEFAULT_TIMEOUT
            self.logger.info(f"Fetching student data from {data_url}")
            with HttpTransport(data_url, timeout=timeout) as http:
                raw = http.fetch("")
        else:
            self.logger.info("Fetching student data from provided transport")
            raw = transport.fetch("")

        students = self.loader.decode_students(raw)
        dataset = StudentDataset(students, region=self.region)
        self.logger.info(f"Student data loaded: {len(dataset)} students")
        return dataset

    @property
    def dataset(self) -> StudentDataset:
        """The decoded students of this session."""
        return self._dataset

    # Public API methods - delegate to the dataset

    def get_student_by_id(self, student_id: int) -> Optional[Student]:
        """Return the student with the given ID, or None if absent."""
        return self._dataset.get_by_id(student_id)

    def get_student_by_name(self, name: str) -> Optional[Student]:
        """Return the student with the given display name (case-insensitive)."""
        return self._dataset.get_by_name(name)

    def get_students_by_queries(self, queries: Iterable[Query]) -> List[Student]:
        """Return all students matching every query."""
        return self._dataset.filter(queries)

    def fetch_random_student(self, rng: Optional[random.Random] = None) -> Student:
        """Return a uniformly random student.

        Raises:
            EmptyDatasetError: If no students were decoded
        """
        return self._dataset.pick_random(rng)

    def get_all_students(self) -> List[Student]:
        """Return a list copy of every student."""
        return list(self._dataset)
