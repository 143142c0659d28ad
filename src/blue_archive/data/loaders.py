"""
Decoders turning raw response bytes into typed models.

Parsing uses orjson; validation uses pydantic. Any failure in either step is
reported as a `DeserializationError`.
"""

import logging
from typing import Any, List

import orjson
from pydantic import TypeAdapter, ValidationError

from ..errors import DeserializationError
from ..types import Effect, Student, effect_adapter

_students_adapter = TypeAdapter(List[Student])


class StudentLoader:
    """Decodes the upstream students document."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def parse_json(self, raw: bytes) -> Any:
        """Parse raw bytes as JSON.

        Raises:
            DeserializationError: If the bytes are not valid JSON
        """
        try:
            return orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            self.logger.error(f"Response is not valid JSON: {e}")
            raise DeserializationError(f"Response is not valid JSON: {e}") from e

    @staticmethod
    def _student_records(data: Any) -> List[Any]:
        """Return the list of student records inside a parsed document.

        Upstream publishes either a JSON array of students or an object keyed
        by student ID; both are accepted.
        """
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            return list(data.values())
        raise DeserializationError(
            f"Expected a list or object of students, got {type(data).__name__}"
        )

    def decode_students(self, raw: bytes) -> List[Student]:
        """Decode a students document.

        Args:
            raw: Response body of the students data URL

        Returns:
            Students in document order

        Raises:
            DeserializationError: If the document is not valid JSON or a
                record does not match the student schema
        """
        records = self._student_records(self.parse_json(raw))
        self.logger.debug(f"Decoding {len(records)} student records")

        try:
            students = _students_adapter.validate_python(records)
        except ValidationError as e:
            self.logger.error(
                f"Student data does not match the schema ({e.error_count()} errors)"
            )
            raise DeserializationError(f"Student data does not match the schema: {e}") from e

        self.logger.info(f"Decoded {len(students)} students")
        return students

    def decode_effect(self, data: Any) -> Effect:
        """Decode a single, already parsed effect record.

        Raises:
            DeserializationError: If the record is structurally malformed
        """
        try:
            return effect_adapter.validate_python(data)
        except ValidationError as e:
            raise DeserializationError(f"Effect does not match the schema: {e}") from e
