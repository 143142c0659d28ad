"""
In-memory student dataset.

Holds the decoded students of one session and answers lookups and filters.
The dataset is built once and never modified afterwards; filtering returns
new lists. Reads need no locking.
"""

import logging
import random
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from ..enums import Region
from ..errors import EmptyDatasetError
from ..api.query import Query, matches_all
from ..types import ID, Student


class StudentDataset:
    """Immutable collection of students with id and name indices.

    Maintains two indices built at construction:
    - by id: student ID -> student (O(1) lookup)
    - by name: casefolded display name -> first student with that name
    """

    def __init__(self, students: Iterable[Student], region: Region = Region.GLOBAL):
        """Build the dataset.

        Args:
            students: Decoded students, in the order they should be returned
            region: Region whose release flags `Query.released` checks
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.region = region
        self._students: Tuple[Student, ...] = tuple(students)

        self._by_id: Dict[ID, Student] = {}
        self._by_name: Dict[str, Student] = {}
        for student in self._students:
            if student.id in self._by_id:
                self.logger.warning(f"Duplicate student ID {student.id}, keeping first")
            else:
                self._by_id[student.id] = student
            self._by_name.setdefault(student.name.casefold(), student)

        self.logger.debug(f"StudentDataset built with {len(self._students)} students")

    @property
    def students(self) -> Tuple[Student, ...]:
        """All students in collection order."""
        return self._students

    def ids(self) -> List[ID]:
        """Return the IDs of all students in collection order."""
        return [student.id for student in self._students]

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Student):
            return self._by_id.get(item.id) == item
        if isinstance(item, int) and not isinstance(item, bool):
            return item in self._by_id
        return False

    def get_by_id(self, student_id: int) -> Optional[Student]:
        """Return the student with exactly this ID, or None."""
        # ID hashes and compares like the int it wraps
        return self._by_id.get(student_id)

    def get_by_name(self, name: str) -> Optional[Student]:
        """Return the student whose display name matches, ignoring case.

        If several students share a name, the first in collection order wins.
        """
        return self._by_name.get(name.casefold())

    def filter(self, queries: Iterable[Query]) -> List[Student]:
        """Return every student matching all queries, in collection order.

        An empty set of queries returns the whole dataset.
        """
        queries = list(queries)
        return [s for s in self._students if matches_all(queries, s, self.region)]

    def pick_random(self, rng: Optional[random.Random] = None) -> Student:
        """Pick a student uniformly at random.

        Args:
            rng: Random generator to use (defaults to the module-level one)

        Raises:
            EmptyDatasetError: If the dataset holds no students
        """
        if not self._students:
            raise EmptyDatasetError()
        return (rng or random).choice(self._students)
