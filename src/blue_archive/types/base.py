"""
Base model shared by every decoded structure.

Upstream data is PascalCase JSON whose field names drift over time: casing
changes ("MaxHP1" vs "MaxHp1"), fields get renamed ("CharacterAge" became
"Age"). `LenientModel` resolves incoming keys case-insensitively against a
declarative alias table before pydantic validation runs, so the models
themselves only declare snake_case fields.
"""

from typing import (
    Any, ClassVar, Dict, Iterator, List, Mapping, Optional, Set, Tuple, TypeVar, Union
)

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_pascal

T = TypeVar("T")


class LenientModel(BaseModel):
    """Frozen pydantic model with case-insensitive, alias-aware field matching.

    Subclasses list historical source keys in `field_aliases`, keyed by the
    Python field name. For every field the accepted keys are tried in
    priority order: the PascalCase wire name, the historical aliases, then
    the Python field name itself. The first key present in the input wins.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_pascal, extra="ignore")

    field_aliases: ClassVar[Dict[str, Tuple[str, ...]]] = {}

    @classmethod
    def accepted_keys(cls, field_name: str) -> Tuple[str, ...]:
        """Return the source keys accepted for a field, in priority order."""
        field = cls.model_fields[field_name]
        wire_name = field.alias or field_name
        return (wire_name, *cls.field_aliases.get(field_name, ()), field_name)

    @model_validator(mode="before")
    @classmethod
    def _resolve_field_names(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data

        resolved: Dict[str, Any] = {}
        consumed: Set[Any] = set()
        pending: List[str] = []

        # Exact matches are claimed first: upstream carries keys that differ
        # only by case ("Birthday" and "BirthDay") and mean different things.
        for field_name, field in cls.model_fields.items():
            key = next(
                (c for c in cls.accepted_keys(field_name) if c in data and c not in consumed),
                None,
            )
            if key is None:
                pending.append(field_name)
                continue
            resolved[field.alias or field_name] = data[key]
            consumed.add(key)

        for field_name in pending:
            wanted = [c.lower() for c in cls.accepted_keys(field_name)]
            key = next(
                (k for k in data if k not in consumed and str(k).lower() in wanted),
                None,
            )
            if key is None:
                continue
            field = cls.model_fields[field_name]
            resolved[field.alias or field_name] = data[key]
            consumed.add(key)

        # Unmatched keys are passed through; models with extra="allow" keep them
        for key, value in data.items():
            if key not in consumed and key not in resolved:
                resolved[key] = value
        return resolved

    def to_wire(self) -> Dict[str, Any]:
        """Encode back into the upstream (PascalCase, JSON-compatible) shape."""
        return self.model_dump(mode="json", by_alias=True)


class Empty(BaseModel):
    """An upstream placeholder object `{}` standing in for a missing record."""

    model_config = ConfigDict(frozen=True, extra="forbid")


PresentOrEmpty = Union[T, Empty]
"""A record that upstream sends either in full or as an empty object."""


def present(value: Union[T, Empty, None]) -> Optional[T]:
    """Collapse a `PresentOrEmpty` value into an optional one."""
    if value is None or isinstance(value, Empty):
        return None
    return value


def iter_lower_keys(data: Mapping[str, Any]) -> Iterator[Tuple[str, Any]]:
    """Yield `(lowercased_key, value)` pairs of a raw mapping."""
    for key, value in data.items():
        yield str(key).lower(), value
