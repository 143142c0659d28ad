"""
Student query predicates.

A `Query` is one typed filter criterion. It is used two ways: evaluated
locally against decoded students (`matches`, `matches_all`) and rendered as
a request path for the remote query API (`to_path`).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union
from urllib.parse import quote

from ..enums import Region, School
from ..types import ID, Student

QueryValue = Union[str, School, bool, ID]


class QueryKind(Enum):
    ROLE = "role"
    TYPE = "type"
    SCHOOL = "school"
    POSITION = "position"
    WEAPON = "weapon"
    DAMAGE = "damage"
    ARMOR = "armor"
    RELEASED = "released"
    ID = "id"


# Text predicates compare against these raw string attributes of a Student
TEXT_ATTRIBUTES = {
    QueryKind.ROLE: "tactic_role",
    QueryKind.TYPE: "squad_type",
    QueryKind.POSITION: "position",
    QueryKind.WEAPON: "weapon_type",
    QueryKind.DAMAGE: "bullet_type",
    QueryKind.ARMOR: "armor_type",
}

# Query-string parameter names used by the remote API
QUERY_PARAMETERS = {
    QueryKind.ROLE: "role",
    QueryKind.TYPE: "type",
    QueryKind.SCHOOL: "school",
    QueryKind.POSITION: "position",
    QueryKind.WEAPON: "weapon",
    QueryKind.DAMAGE: "damage",
    QueryKind.ARMOR: "heavy%20armor",
}


def escape_value(value: str) -> str:
    """Percent-encode a text value so it cannot alter the request path.

    Every reserved character is encoded (including "/", "&", "=" and "?"),
    while plain alphanumeric values come out unchanged.
    """
    return quote(value, safe="")


@dataclass(frozen=True)
class Query:
    """One filter criterion over a student attribute.

    Build instances with the named constructors (`Query.school(...)`,
    `Query.released(True)`, ...) rather than directly.
    """
    kind: QueryKind
    value: QueryValue

    def __post_init__(self) -> None:
        if self.kind is QueryKind.SCHOOL:
            if not isinstance(self.value, School):
                raise TypeError(f"School query needs a School, got {self.value!r}")
        elif self.kind is QueryKind.RELEASED:
            if not isinstance(self.value, bool):
                raise TypeError(f"Released query needs a bool, got {self.value!r}")
        elif self.kind is QueryKind.ID:
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                raise TypeError(f"ID query needs an integer, got {self.value!r}")
            object.__setattr__(self, "value", ID(self.value))
        elif not isinstance(self.value, str):
            raise TypeError(f"{self.kind.name} query needs a string, got {self.value!r}")

    # === CONSTRUCTORS ===

    @classmethod
    def role(cls, value: str) -> "Query":
        """Tactical role, e.g. "Tanker"."""
        return cls(QueryKind.ROLE, value)

    @classmethod
    def squad_type(cls, value: str) -> "Query":
        """Squad type, "Main" (striker) or "Support" (special)."""
        return cls(QueryKind.TYPE, value)

    @classmethod
    def school(cls, value: School) -> "Query":
        return cls(QueryKind.SCHOOL, value)

    @classmethod
    def position(cls, value: str) -> "Query":
        return cls(QueryKind.POSITION, value)

    @classmethod
    def weapon(cls, value: str) -> "Query":
        """Weapon type, e.g. "MG"."""
        return cls(QueryKind.WEAPON, value)

    @classmethod
    def damage(cls, value: str) -> "Query":
        """Bullet (damage) type, e.g. "Explosion"."""
        return cls(QueryKind.DAMAGE, value)

    @classmethod
    def armor(cls, value: str) -> "Query":
        return cls(QueryKind.ARMOR, value)

    @classmethod
    def released(cls, value: bool) -> "Query":
        return cls(QueryKind.RELEASED, value)

    @classmethod
    def student_id(cls, value: int) -> "Query":
        return cls(QueryKind.ID, value)

    # === EVALUATION ===

    def matches(self, student: Student, region: Region = Region.GLOBAL) -> bool:
        """Check whether a student satisfies this criterion.

        Text criteria compare case-sensitively against the raw attribute.
        School compares against the parsed school, so a student whose raw
        school is unknown never matches. Released compares against the
        student's release flag in `region`.
        """
        if self.kind is QueryKind.SCHOOL:
            return student.school_enum == self.value
        if self.kind is QueryKind.RELEASED:
            return student.is_released_in(region) == self.value
        if self.kind is QueryKind.ID:
            return student.id == self.value
        return getattr(student, TEXT_ATTRIBUTES[self.kind]) == self.value

    # === REQUEST PATHS ===

    def to_path(self) -> str:
        """Render the query as a path for the remote query API."""
        if self.kind is QueryKind.RELEASED:
            return f"?released={str(self.value).lower()}"
        if self.kind is QueryKind.ID:
            return f"{self.value}?id=true"
        if isinstance(self.value, School):
            text = self.value.value
        else:
            text = str(self.value)
        return f"query?{QUERY_PARAMETERS[self.kind]}={escape_value(text)}"

    def __str__(self) -> str:
        return self.to_path()


def matches_all(
    queries: Iterable[Query], student: Student, region: Region = Region.GLOBAL
) -> bool:
    """Check a student against every query (logical AND).

    An empty set of queries imposes no constraint and matches every student.
    """
    return all(query.matches(student, region) for query in queries)
