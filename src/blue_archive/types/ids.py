"""
Identifier type used as the primary key of every entity.
"""

import operator
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


class ID(int):
    """A Blue Archive identifier.

    Wraps a non-negative integer. Equality, ordering and hashing are those of
    the wrapped value, so an `ID` compares equal to the plain integer it holds.
    """

    def __new__(cls, value: Any) -> "ID":
        # Digit strings are parsed; floats and other non-integers are rejected
        number = int(value) if isinstance(value, str) else operator.index(value)
        if number < 0:
            raise ValueError(f"ID must be non-negative, got {number}")
        return super().__new__(cls, number)

    def to_int(self) -> int:
        """Return the wrapped value as a plain int."""
        return int(self)

    def __repr__(self) -> str:
        return f"ID({int(self)})"

    def __str__(self) -> str:
        return str(int(self))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.int_schema(ge=0),
            serialization=core_schema.plain_serializer_function_ser_schema(int),
        )
